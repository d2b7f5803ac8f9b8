# pages/login_page.py
import logging
from typing import List
from urllib.parse import urlparse

from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver

from saucedemo_e2e.config.settings import Settings
from saucedemo_e2e.core.exceptions import AutomationError
from saucedemo_e2e.pages.base import Locator, PageActions


class LoginPage:
    USERNAME_INPUT = Locator(By.ID, 'user-name')
    PASSWORD_INPUT = Locator(By.ID, 'password')
    LOGIN_BUTTON = Locator(By.ID, 'login-button')
    ERROR_MESSAGE = Locator(By.CSS_SELECTOR, '[data-test="error"]')
    ERROR_BUTTON = Locator(By.CSS_SELECTOR, '.error-button')
    LOGIN_LOGO = Locator(By.CSS_SELECTOR, '.login_logo')
    LOGIN_CREDENTIALS = Locator(By.ID, 'login_credentials')

    def __init__(self, driver: WebDriver, settings: Settings):
        self.settings = settings
        self.actions = PageActions(driver, settings.explicit_timeout)
        self.logger = logging.getLogger(__name__)

    def open(self) -> None:
        self.actions.navigate_to(self.settings.url())
        self.actions.wait_for_page_ready()

    def is_loaded(self) -> bool:
        return self.is_on_login_page()

    def enter_username(self, username: str) -> None:
        self.actions.type_text(self.USERNAME_INPUT, username)

    def enter_password(self, password: str) -> None:
        self.actions.type_text(self.PASSWORD_INPUT, password)

    def click_login(self) -> None:
        self.actions.click(self.LOGIN_BUTTON)

    def login(self, username: str, password: str) -> None:
        self.logger.info(f"Logging in as {username!r}")
        self.enter_username(username)
        self.enter_password(password)
        self.click_login()

    def get_error_message(self) -> str:
        if not self.actions.is_displayed(self.ERROR_MESSAGE):
            return ''
        try:
            return self.actions.read_text(self.ERROR_MESSAGE)
        except AutomationError:
            return ''

    def is_error_displayed(self) -> bool:
        return self.actions.is_displayed(self.ERROR_MESSAGE)

    def close_error_message(self) -> None:
        if self.actions.is_displayed(self.ERROR_BUTTON):
            self.actions.click(self.ERROR_BUTTON)
            self.actions.wait_for_disappear(self.ERROR_MESSAGE)

    def is_on_login_page(self) -> bool:
        url = self.actions.current_url()
        host = urlparse(self.settings.base_url).netloc
        if host not in url or 'inventory' in url:
            return False
        if not self.actions.is_displayed(self.LOGIN_LOGO):
            return False
        return self.actions.is_displayed(self.LOGIN_BUTTON, timeout=self.actions.timeout)

    def is_username_field_displayed(self) -> bool:
        return self.actions.is_displayed(self.USERNAME_INPUT)

    def is_password_field_displayed(self) -> bool:
        return self.actions.is_displayed(self.PASSWORD_INPUT)

    def is_login_button_enabled(self) -> bool:
        return self.actions.is_enabled(self.LOGIN_BUTTON)

    def get_accepted_usernames(self) -> List[str]:
        try:
            text = self.actions.read_text(self.LOGIN_CREDENTIALS)
        except AutomationError as e:
            self.logger.warning(f"Could not read accepted usernames: {e}")
            return []
        return [line.strip() for line in text.split('\n') if '_user' in line]

    def clear_login_form(self) -> None:
        self.actions.type_text(self.USERNAME_INPUT, '', clear_first=True)
        self.actions.type_text(self.PASSWORD_INPUT, '', clear_first=True)
