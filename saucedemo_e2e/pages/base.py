# pages/base.py
import logging
from typing import List, NamedTuple, Optional, Protocol

from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from saucedemo_e2e.core.exceptions import (
    ClickFailed,
    ElementNotFound,
    ElementNotVisible,
    StillVisible,
)

_IN_VIEWPORT_SCRIPT = """
    var rect = arguments[0].getBoundingClientRect();
    return rect.top >= 0 && rect.left >= 0 &&
           rect.bottom <= (window.innerHeight || document.documentElement.clientHeight) &&
           rect.right <= (window.innerWidth || document.documentElement.clientWidth);
"""


class Locator(NamedTuple):
    by: str
    value: str

    def __str__(self) -> str:
        return f"{self.by}={self.value}"


class Page(Protocol):
    """What every page object offers: navigation plus an identity check."""

    def open(self) -> None:
        ...

    def is_loaded(self) -> bool:
        ...


class PageActions:
    """Wait-then-act primitives shared by every page object.

    All waits are bounded by ``timeout`` (the configured explicit timeout
    unless overridden per call) and fail with an error naming the locator.
    Existence probes (``is_displayed``/``is_enabled``) never raise.
    """

    def __init__(self, driver: WebDriver, timeout: float = 20):
        self.driver = driver
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

    def _wait(self, timeout: Optional[float] = None) -> WebDriverWait:
        return WebDriverWait(self.driver, self.timeout if timeout is None else timeout)

    def navigate_to(self, url: str) -> None:
        self.logger.info(f"Navigating to {url}")
        self.driver.get(url)

    def current_url(self) -> str:
        return self.driver.current_url

    def title(self) -> str:
        return self.driver.title

    def refresh(self) -> None:
        self.driver.refresh()
        self.wait_for_page_ready()

    def find_element(self, locator: Locator, timeout: Optional[float] = None) -> WebElement:
        try:
            return self._wait(timeout).until(EC.presence_of_element_located(locator))
        except TimeoutException:
            raise ElementNotFound(locator, self.timeout if timeout is None else timeout) from None

    def find_elements(self, locator: Locator, timeout: Optional[float] = None) -> List[WebElement]:
        # Waits for the first match; an empty list means nothing showed up in time.
        try:
            self._wait(timeout).until(EC.presence_of_element_located(locator))
        except TimeoutException:
            return []
        return self.driver.find_elements(*locator)

    def wait_for_visible(self, locator: Locator, timeout: Optional[float] = None) -> WebElement:
        try:
            return self._wait(timeout).until(EC.visibility_of_element_located(locator))
        except TimeoutException:
            raise ElementNotVisible(locator, self.timeout if timeout is None else timeout) from None

    def click(self, locator: Locator, timeout: Optional[float] = None) -> None:
        try:
            self.wait_for_visible(locator, timeout)
            element = self._wait(timeout).until(EC.element_to_be_clickable(locator))
            element.click()
        except (ElementNotVisible, TimeoutException, WebDriverException) as e:
            self.logger.warning(f"Click failed on {locator}: {e}")
            raise ClickFailed(locator, e) from e

    def type_text(self, locator: Locator, text: str, clear_first: bool = True) -> None:
        element = self.wait_for_visible(locator)
        if clear_first:
            element.clear()
        element.send_keys(text)

    def read_text(self, locator: Locator, timeout: Optional[float] = None) -> str:
        return self.wait_for_visible(locator, timeout).text

    def read_attribute(self, locator: Locator, attribute: str) -> Optional[str]:
        return self.find_element(locator).get_attribute(attribute)

    def is_displayed(self, locator: Locator, timeout: float = 0) -> bool:
        try:
            if timeout:
                self._wait(timeout).until(EC.visibility_of_element_located(locator))
                return True
            elements = self.driver.find_elements(*locator)
            return bool(elements) and elements[0].is_displayed()
        except (TimeoutException, WebDriverException):
            return False

    def is_enabled(self, locator: Locator, timeout: float = 0) -> bool:
        try:
            if timeout:
                return self.find_element(locator, timeout).is_enabled()
            elements = self.driver.find_elements(*locator)
            return bool(elements) and elements[0].is_enabled()
        except (ElementNotFound, WebDriverException):
            return False

    def wait_for_disappear(self, locator: Locator, timeout: Optional[float] = None) -> None:
        def _gone(driver):
            elements = driver.find_elements(*locator)
            return not elements or not elements[0].is_displayed()

        try:
            self._wait(timeout).until(_gone)
        except TimeoutException:
            raise StillVisible(locator, self.timeout if timeout is None else timeout) from None

    def wait_for_page_ready(self, timeout: Optional[float] = None) -> None:
        self._wait(timeout).until(
            lambda d: d.execute_script('return document.readyState') == 'complete'
        )

    def wait_until(self, condition, timeout: Optional[float] = None):
        return self._wait(timeout).until(condition)

    def wait_for_url_contains(self, fragment: str, timeout: Optional[float] = None) -> bool:
        try:
            self._wait(timeout).until(EC.url_contains(fragment))
            return True
        except TimeoutException:
            return False

    def scroll_into_view(self, locator: Locator, timeout: Optional[float] = None) -> WebElement:
        element = self.find_element(locator, timeout)
        self.driver.execute_script("arguments[0].scrollIntoView({block: 'center'});", element)
        try:
            self._wait(timeout).until(lambda d: d.execute_script(_IN_VIEWPORT_SCRIPT, element))
        except TimeoutException:
            # smooth-scrolling pages can lag; the element is still usable
            self.logger.warning(f"Element {locator} not fully inside viewport after scroll")
        return element
