# pages/cart_page.py
import logging
from typing import List, Optional

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver

from saucedemo_e2e.config.settings import Settings
from saucedemo_e2e.models.shop import CartItem, CheckoutInfo, OrderSummary, PRICE_TOLERANCE
from saucedemo_e2e.pages.base import Locator, PageActions
from saucedemo_e2e.pages.products_page import remove_button
from saucedemo_e2e.utils.parsing import parse_amount, parse_price, parse_quantity


class CartPage:
    """Cart plus the three checkout steps that follow it.

    The site walks Cart -> CheckoutInfo -> CheckoutReview -> CheckoutComplete,
    with continue-shopping looping back from the cart and cancel returning
    from the info step. The page object does not police that order; callers
    drive it the way a user would.
    """

    PATH = 'cart.html'

    PAGE_TITLE = Locator(By.CSS_SELECTOR, '.title')
    CART_ITEMS = Locator(By.CSS_SELECTOR, '.cart_item')
    ITEM_NAME = Locator(By.CSS_SELECTOR, '.inventory_item_name')
    ITEM_DESC = Locator(By.CSS_SELECTOR, '.inventory_item_desc')
    ITEM_PRICE = Locator(By.CSS_SELECTOR, '.inventory_item_price')
    ITEM_QUANTITY = Locator(By.CSS_SELECTOR, '.cart_quantity')
    CHECKOUT_BUTTON = Locator(By.ID, 'checkout')
    CONTINUE_SHOPPING_BUTTON = Locator(By.ID, 'continue-shopping')

    FIRST_NAME_INPUT = Locator(By.ID, 'first-name')
    LAST_NAME_INPUT = Locator(By.ID, 'last-name')
    POSTAL_CODE_INPUT = Locator(By.ID, 'postal-code')
    CONTINUE_BUTTON = Locator(By.ID, 'continue')
    CANCEL_BUTTON = Locator(By.ID, 'cancel')
    CHECKOUT_ERROR = Locator(By.CSS_SELECTOR, '[data-test="error"]')

    SUBTOTAL_LABEL = Locator(By.CSS_SELECTOR, '.summary_subtotal_label')
    TAX_LABEL = Locator(By.CSS_SELECTOR, '.summary_tax_label')
    TOTAL_LABEL = Locator(By.CSS_SELECTOR, '.summary_total_label')
    FINISH_BUTTON = Locator(By.ID, 'finish')

    COMPLETE_HEADER = Locator(By.CSS_SELECTOR, '.complete-header')
    COMPLETE_TEXT = Locator(By.CSS_SELECTOR, '.complete-text')
    BACK_HOME_BUTTON = Locator(By.ID, 'back-to-products')

    def __init__(self, driver: WebDriver, settings: Settings):
        self.settings = settings
        self.actions = PageActions(driver, settings.explicit_timeout)
        self.logger = logging.getLogger(__name__)

    def open(self) -> None:
        self.actions.navigate_to(self.settings.url(self.PATH))
        self.actions.wait_for_page_ready()

    def is_loaded(self) -> bool:
        return self.is_on_cart_page()

    def is_on_cart_page(self, timeout: Optional[float] = None) -> bool:
        timeout = self.actions.timeout if timeout is None else timeout
        if not self.actions.wait_for_url_contains(self.PATH, timeout):
            return False
        return self.actions.is_displayed(self.PAGE_TITLE, timeout=timeout)

    # Cart

    def get_cart_items(self, strict: bool = False) -> List[CartItem]:
        """Read every cart row.

        Rows that fail to parse are logged and skipped; with ``strict=True``
        the first bad row raises ``ValueError`` instead.
        """
        items = []
        rows = self.actions.driver.find_elements(*self.CART_ITEMS)
        for index, row in enumerate(rows):
            try:
                items.append(CartItem(
                    name=row.find_element(*self.ITEM_NAME).text,
                    description=row.find_element(*self.ITEM_DESC).text,
                    price=parse_price(row.find_element(*self.ITEM_PRICE).text),
                    quantity=parse_quantity(row.find_element(*self.ITEM_QUANTITY).text),
                ))
            except (ValueError, WebDriverException) as e:
                if strict:
                    raise ValueError(f"Cart row {index} could not be parsed: {e}") from e
                self.logger.warning(f"Skipping cart row {index}: {e}")
                continue
        return items

    def get_cart_item_count(self) -> int:
        return len(self.actions.driver.find_elements(*self.CART_ITEMS))

    def is_cart_empty(self) -> bool:
        return self.get_cart_item_count() == 0

    def calculate_expected_subtotal(self) -> float:
        return sum(item.line_total for item in self.get_cart_items())

    def remove_item_from_cart(self, name: str) -> None:
        self.logger.info(f"Removing {name!r} from cart page")
        self.actions.click(remove_button(name))
        self.actions.wait_for_disappear(remove_button(name))

    def is_checkout_button_displayed(self) -> bool:
        return self.actions.is_displayed(self.CHECKOUT_BUTTON)

    def proceed_to_checkout(self) -> None:
        self.actions.click(self.CHECKOUT_BUTTON)
        self.actions.wait_for_visible(self.FIRST_NAME_INPUT)

    def continue_shopping(self) -> None:
        self.actions.click(self.CONTINUE_SHOPPING_BUTTON)
        self.actions.wait_for_url_contains('inventory.html')

    # Checkout: your information

    def fill_checkout_information(self, info: CheckoutInfo) -> None:
        self.actions.type_text(self.FIRST_NAME_INPUT, info.first_name)
        self.actions.type_text(self.LAST_NAME_INPUT, info.last_name)
        self.actions.type_text(self.POSTAL_CODE_INPUT, info.postal_code)

    def continue_to_review(self) -> None:
        self.actions.click(self.CONTINUE_BUTTON)

    def cancel_checkout(self) -> None:
        self.actions.click(self.CANCEL_BUTTON)
        self.actions.wait_for_url_contains(self.PATH)

    def get_checkout_error(self) -> str:
        if not self.actions.is_displayed(self.CHECKOUT_ERROR):
            return ''
        return self.actions.read_text(self.CHECKOUT_ERROR)

    # Checkout: overview

    def get_order_summary(self) -> OrderSummary:
        subtotal = parse_amount(self.actions.read_text(self.SUBTOTAL_LABEL))
        tax = parse_amount(self.actions.read_text(self.TAX_LABEL))
        total = parse_amount(self.actions.read_text(self.TOTAL_LABEL))
        return OrderSummary(
            items=tuple(self.get_cart_items()),
            subtotal=subtotal,
            tax=tax,
            total=total,
        )

    def verify_order_calculations(self) -> bool:
        summary = self.get_order_summary()
        valid = summary.calculations_valid(PRICE_TOLERANCE)
        if not valid:
            self.logger.warning(
                f"Order totals mismatch: items={summary.expected_subtotal:.2f}, "
                f"subtotal={summary.subtotal:.2f}, tax={summary.tax:.2f}, total={summary.total:.2f}"
            )
        return valid

    def finish_order(self) -> None:
        self.actions.click(self.FINISH_BUTTON)
        self.actions.wait_for_url_contains('checkout-complete')

    def complete_checkout(self, info: CheckoutInfo) -> None:
        self.logger.info(f"Completing checkout for {info.first_name} {info.last_name}")
        self.proceed_to_checkout()
        self.fill_checkout_information(info)
        self.continue_to_review()
        self.finish_order()

    # Checkout: complete

    def is_order_complete(self) -> bool:
        if 'checkout-complete' not in self.actions.current_url():
            return False
        return self.actions.is_displayed(self.COMPLETE_HEADER, timeout=self.actions.timeout)

    def get_completion_message(self) -> str:
        return self.actions.read_text(self.COMPLETE_HEADER)

    def get_completion_details(self) -> str:
        return self.actions.read_text(self.COMPLETE_TEXT)

    def back_to_products(self) -> None:
        self.actions.click(self.BACK_HOME_BUTTON)
        self.actions.wait_for_url_contains('inventory.html')
