# core/driver_manager.py
import logging
from typing import Dict, Optional

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.remote.webdriver import WebDriver

from saucedemo_e2e.config.settings import SUPPORTED_BROWSERS, Settings
from saucedemo_e2e.core.exceptions import NotInitialized
from saucedemo_e2e.utils.screenshots import ScreenshotCapture


class DriverManager:
    """Owns the one browser session of a test run.

    Page objects borrow the driver from ``current()``; only this class
    creates or quits it.
    """

    def __init__(self, settings: Settings, screenshots: Optional[ScreenshotCapture] = None):
        self.settings = settings
        self.screenshots = screenshots or ScreenshotCapture(settings.screenshot_dir)
        self.driver: Optional[WebDriver] = None
        self.logger = logging.getLogger(__name__)

    @property
    def is_active(self) -> bool:
        return self.driver is not None

    def _chrome_options(self, headless: bool) -> ChromeOptions:
        options = ChromeOptions()
        if headless:
            options.add_argument("--headless=new")
        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        options.add_argument("--disable-gpu")
        options.add_argument("--disable-extensions")
        options.add_argument(f"--window-size={self.settings.window_width},{self.settings.window_height}")
        options.add_argument("--disable-blink-features=AutomationControlled")
        options.add_experimental_option("prefs", {
            "profile.default_content_setting_values.notifications": 2,
        })
        return options

    def _firefox_options(self, headless: bool) -> FirefoxOptions:
        options = FirefoxOptions()
        if headless:
            options.add_argument("-headless")
        options.add_argument(f"--width={self.settings.window_width}")
        options.add_argument(f"--height={self.settings.window_height}")
        options.set_preference("dom.webnotifications.enabled", False)
        return options

    def create(self, browser: Optional[str] = None, headless: Optional[bool] = None) -> WebDriver:
        if self.driver is not None:
            self.logger.info("Browser session already live; reusing it")
            return self.driver

        browser = (browser or self.settings.browser).lower()
        headless = self.settings.headless if headless is None else headless
        if browser not in SUPPORTED_BROWSERS:
            raise ValueError(f"Unsupported browser: {browser}")

        self.logger.info(f"Starting {browser} (headless={headless})")
        try:
            if browser == 'chrome':
                driver = webdriver.Chrome(options=self._chrome_options(headless))
            else:
                driver = webdriver.Firefox(options=self._firefox_options(headless))
        except Exception as e:
            self.logger.error(f"Error setting up {browser} driver: {e}")
            raise

        try:
            driver.implicitly_wait(self.settings.implicit_timeout)
            driver.set_page_load_timeout(self.settings.page_load_timeout)
            driver.set_script_timeout(self.settings.explicit_timeout)
        except Exception as e:
            self.logger.error(f"Error applying timeouts to {browser} driver: {e}")
            try:
                driver.quit()
            except Exception as quit_error:
                self.logger.error(f"Error closing browser: {quit_error}")
            raise
        self.driver = driver
        return driver

    def current(self) -> WebDriver:
        if self.driver is None:
            raise NotInitialized()
        return self.driver

    def close(self) -> None:
        if self.driver is None:
            return
        try:
            self.driver.quit()
            self.logger.info("Browser closed.")
        except Exception as e:
            self.logger.error(f"Error closing browser: {e}")
        finally:
            self.driver = None

    def capture_failure_evidence(self, test_name: str) -> Optional[Dict]:
        # Capture errors are logged, never raised.
        if self.driver is None or not self.settings.screenshot_on_failure:
            return None
        try:
            return self.screenshots.capture_failure_evidence(self.driver, test_name)
        except Exception as e:
            self.logger.error(f"Could not capture failure evidence for {test_name!r}: {e}")
            return None

    def capture_step(self, test_name: str, step_name: Optional[str] = None) -> Optional[str]:
        if self.driver is None:
            return None
        try:
            return str(self.screenshots.capture(self.driver, test_name, step_name))
        except Exception as e:
            self.logger.error(f"Could not capture screenshot for {test_name!r}: {e}")
            return None
