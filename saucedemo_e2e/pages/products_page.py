# pages/products_page.py
import logging
import re
from typing import Iterable, List, Optional

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support.ui import Select

from saucedemo_e2e.config.settings import Settings
from saucedemo_e2e.core.exceptions import AutomationError
from saucedemo_e2e.models.shop import Product
from saucedemo_e2e.pages.base import Locator, PageActions
from saucedemo_e2e.utils.parsing import parse_price, parse_quantity

# option value -> label shown by the sort widget
SORT_OPTIONS = {
    'az': 'Name (A to Z)',
    'za': 'Name (Z to A)',
    'lohi': 'Price (low to high)',
    'hilo': 'Price (high to low)',
}


def product_slug(name: str) -> str:
    """Button id suffix the site derives from a product name.

    'Sauce Labs Bolt T-Shirt' -> 'sauce-labs-bolt-t-shirt'. Punctuation is
    kept as-is, so names with odd characters still need checking against
    the live ids (see ``ProductsPage.get_product_button_ids``).
    """
    return re.sub(r'\s+', '-', name.strip().lower())


def add_button(name: str) -> Locator:
    return Locator(By.ID, f"add-to-cart-{product_slug(name)}")


def remove_button(name: str) -> Locator:
    return Locator(By.ID, f"remove-{product_slug(name)}")


class ProductsPage:
    PATH = 'inventory.html'

    PAGE_TITLE = Locator(By.CSS_SELECTOR, '.title')
    PRODUCT_ITEMS = Locator(By.CSS_SELECTOR, '.inventory_item')
    ITEM_NAME = Locator(By.CSS_SELECTOR, '.inventory_item_name')
    ITEM_DESC = Locator(By.CSS_SELECTOR, '.inventory_item_desc')
    ITEM_PRICE = Locator(By.CSS_SELECTOR, '.inventory_item_price')
    ITEM_BUTTON = Locator(By.CSS_SELECTOR, '.btn_inventory')
    CART_BADGE = Locator(By.CSS_SELECTOR, '.shopping_cart_badge')
    CART_LINK = Locator(By.CSS_SELECTOR, '.shopping_cart_link')
    SORT_SELECT = Locator(By.CSS_SELECTOR, '[data-test="product-sort-container"]')
    ACTIVE_SORT = Locator(By.CSS_SELECTOR, '.active_option')
    MENU_BUTTON = Locator(By.ID, 'react-burger-menu-btn')
    MENU_CLOSE = Locator(By.ID, 'react-burger-cross-btn')
    MENU_WRAP = Locator(By.CSS_SELECTOR, '.bm-menu-wrap')
    LOGOUT_LINK = Locator(By.ID, 'logout_sidebar_link')
    RESET_LINK = Locator(By.ID, 'reset_sidebar_link')

    def __init__(self, driver: WebDriver, settings: Settings):
        self.settings = settings
        self.actions = PageActions(driver, settings.explicit_timeout)
        self.logger = logging.getLogger(__name__)

    def open(self) -> None:
        self.actions.navigate_to(self.settings.url(self.PATH))
        self.actions.wait_for_page_ready()

    navigate_to_products_page = open

    def is_loaded(self) -> bool:
        return self.is_on_products_page()

    def is_on_products_page(self, timeout: Optional[float] = None) -> bool:
        """True once the inventory URL and title are showing.

        Both are awaited for up to ``timeout`` (the explicit timeout by
        default); ``timeout=0`` checks the current state only.
        """
        timeout = self.actions.timeout if timeout is None else timeout
        if not self.actions.wait_for_url_contains(self.PATH, timeout):
            return False
        return self.actions.is_displayed(self.PAGE_TITLE, timeout=timeout)

    def get_page_title_text(self) -> str:
        return self.actions.read_text(self.PAGE_TITLE)

    def get_product_count(self) -> int:
        return len(self.actions.find_elements(self.PRODUCT_ITEMS))

    def get_all_products(self) -> List[Product]:
        products = []
        for item in self.actions.find_elements(self.PRODUCT_ITEMS):
            price_text = item.find_element(*self.ITEM_PRICE).text
            products.append(Product(
                name=item.find_element(*self.ITEM_NAME).text,
                description=item.find_element(*self.ITEM_DESC).text,
                price=parse_price(price_text),
                price_text=price_text,
            ))
        return products

    def get_product_names(self) -> List[str]:
        return [el.text for el in self.actions.find_elements(self.ITEM_NAME)]

    def get_product_prices(self) -> List[float]:
        return [parse_price(el.text) for el in self.actions.find_elements(self.ITEM_PRICE)]

    def get_product_button_ids(self) -> List[str]:
        return [el.get_attribute('id') or '' for el in self.actions.find_elements(self.ITEM_BUTTON)]

    def add_product_to_cart_by_name(self, name: str) -> None:
        self.logger.info(f"Adding {name!r} to cart")
        self.actions.click(add_button(name))
        self.actions.wait_for_visible(remove_button(name))

    def add_multiple_products_to_cart(self, names: Iterable[str]) -> None:
        for name in names:
            self.add_product_to_cart_by_name(name)

    def remove_product_from_cart_by_name(self, name: str) -> None:
        self.logger.info(f"Removing {name!r} from cart")
        self.actions.click(remove_button(name))
        self.actions.wait_for_disappear(remove_button(name))

    def is_product_in_cart(self, name: str) -> bool:
        return self.actions.is_displayed(remove_button(name))

    def get_cart_item_count(self) -> int:
        # No badge means an empty cart.
        if not self.actions.is_displayed(self.CART_BADGE):
            return 0
        try:
            return parse_quantity(self.actions.read_text(self.CART_BADGE))
        except ValueError:
            self.logger.warning("Cart badge text is not a number")
            return 0

    def is_cart_badge_displayed(self) -> bool:
        return self.actions.is_displayed(self.CART_BADGE)

    def sort_products(self, option: str) -> None:
        if option not in SORT_OPTIONS:
            raise ValueError(f"Unknown sort option {option!r}; expected one of {sorted(SORT_OPTIONS)}")
        self.logger.info(f"Sorting products by {option}")
        select = Select(self.actions.wait_for_visible(self.SORT_SELECT))
        select.select_by_value(option)

    def get_current_sort_option(self) -> str:
        return self.actions.read_text(self.ACTIVE_SORT)

    def get_most_expensive_product(self) -> Optional[Product]:
        best = None
        for product in self.get_all_products():
            if best is None or product.price > best.price:
                best = product
        return best

    def get_least_expensive_product(self) -> Optional[Product]:
        best = None
        for product in self.get_all_products():
            if best is None or product.price < best.price:
                best = product
        return best

    def go_to_cart(self) -> None:
        self.actions.click(self.CART_LINK)
        self.actions.wait_for_url_contains('cart.html')

    def open_menu(self) -> None:
        self.actions.click(self.MENU_BUTTON)
        self.actions.wait_for_visible(self.LOGOUT_LINK)

    def close_menu(self) -> None:
        self.actions.click(self.MENU_CLOSE)
        self.actions.wait_until(
            lambda d: d.find_element(*self.MENU_WRAP).get_attribute('aria-hidden') == 'true'
        )

    def logout(self) -> None:
        self.open_menu()
        self.actions.click(self.LOGOUT_LINK)
        self.actions.wait_until(lambda d: self.PATH not in d.current_url)
        self.logger.info("Logged out")

    def reset_app_state(self) -> None:
        self.open_menu()
        self.actions.click(self.RESET_LINK)
        try:
            self.close_menu()
        except (AutomationError, WebDriverException) as e:
            self.logger.warning(f"Menu did not close after reset: {e}")
        # the inventory buttons keep their old labels until the page re-renders
        self.actions.refresh()
