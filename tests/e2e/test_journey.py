"""End-to-end purchase journey with a screenshot at every step."""

import pytest

from saucedemo_e2e.models.shop import PRICE_TOLERANCE

pytestmark = pytest.mark.e2e

JOURNEY = 'purchase_journey'


def test_purchase_journey(driver_manager, login_page, products_page, cart_page, test_data):
    user = test_data.get_standard_user()
    info = test_data.get_valid_checkout_data()[0]

    login_page.login(user.username, user.password)
    assert products_page.is_on_products_page()
    driver_manager.capture_step(JOURNEY, '01_logged_in')

    products_page.sort_products('lohi')
    cheapest = products_page.get_least_expensive_product()
    priciest = products_page.get_most_expensive_product()
    products_page.add_multiple_products_to_cart([cheapest.name, priciest.name])
    assert products_page.get_cart_item_count() == 2
    driver_manager.capture_step(JOURNEY, '02_products_added')

    products_page.go_to_cart()
    assert abs(cart_page.calculate_expected_subtotal() - (cheapest.price + priciest.price)) <= PRICE_TOLERANCE
    driver_manager.capture_step(JOURNEY, '03_cart')

    cart_page.proceed_to_checkout()
    cart_page.fill_checkout_information(info)
    cart_page.continue_to_review()
    assert cart_page.verify_order_calculations()
    driver_manager.capture_step(JOURNEY, '04_review')

    cart_page.finish_order()
    assert cart_page.is_order_complete()
    assert 'Thank you' in cart_page.get_completion_message()
    driver_manager.capture_step(JOURNEY, '05_complete')

    cart_page.back_to_products()
    products_page.logout()
    assert login_page.is_on_login_page()
