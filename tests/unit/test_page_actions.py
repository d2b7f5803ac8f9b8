import pytest
from selenium.webdriver.common.by import By

from fakes import FakeElement
from saucedemo_e2e.core.exceptions import (
    ClickFailed,
    ElementNotFound,
    ElementNotVisible,
    StillVisible,
)
from saucedemo_e2e.pages.base import Locator, PageActions

BUTTON = Locator(By.ID, 'go')
MISSING = Locator(By.ID, 'missing')


@pytest.fixture
def actions(fake_driver):
    return PageActions(fake_driver, timeout=0.2)


def test_locator_str_and_unpacking():
    assert str(BUTTON) == 'id=go'
    by, value = BUTTON
    assert (by, value) == (By.ID, 'go')


def test_find_element_returns_match(actions, fake_driver):
    element = fake_driver.add(BUTTON, FakeElement('Go'))
    assert actions.find_element(BUTTON) is element


def test_find_element_times_out_with_locator_in_message(actions):
    with pytest.raises(ElementNotFound) as excinfo:
        actions.find_element(MISSING)
    assert 'id=missing' in str(excinfo.value)
    assert excinfo.value.locator == MISSING


def test_find_elements_empty_when_nothing_appears(actions):
    assert actions.find_elements(MISSING) == []


def test_wait_for_visible_rejects_hidden_element(actions, fake_driver):
    fake_driver.add(BUTTON, FakeElement(displayed=False))
    with pytest.raises(ElementNotVisible):
        actions.wait_for_visible(BUTTON)


def test_click_dispatches_on_visible_enabled_element(actions, fake_driver):
    element = fake_driver.add(BUTTON, FakeElement())
    actions.click(BUTTON)
    assert element.clicks == 1


def test_click_on_disabled_element_fails_with_cause(actions, fake_driver):
    fake_driver.add(BUTTON, FakeElement(enabled=False))
    with pytest.raises(ClickFailed) as excinfo:
        actions.click(BUTTON)
    assert excinfo.value.__cause__ is not None
    assert 'id=go' in str(excinfo.value)


def test_click_on_missing_element_fails(actions):
    with pytest.raises(ClickFailed):
        actions.click(MISSING)


def test_type_text_clears_first_by_default(actions, fake_driver):
    field = fake_driver.add(BUTTON, FakeElement())
    actions.type_text(BUTTON, 'hello')
    actions.type_text(BUTTON, ' world', clear_first=False)
    assert field.cleared == 1
    assert field.sent_keys == ['hello', ' world']


def test_read_text_and_attribute(actions, fake_driver):
    fake_driver.add(BUTTON, FakeElement('Go', attrs={'data-test': 'go'}))
    assert actions.read_text(BUTTON) == 'Go'
    assert actions.read_attribute(BUTTON, 'data-test') == 'go'
    assert actions.read_attribute(BUTTON, 'title') is None


def test_probes_never_raise(actions, fake_driver):
    assert actions.is_displayed(MISSING) is False
    assert actions.is_enabled(MISSING) is False
    assert actions.is_displayed(MISSING, timeout=0.1) is False
    fake_driver.add(BUTTON, FakeElement(displayed=True, enabled=False))
    assert actions.is_displayed(BUTTON) is True
    assert actions.is_enabled(BUTTON) is False


def test_probe_is_stable_across_calls(actions, fake_driver):
    fake_driver.add(BUTTON, FakeElement())
    assert [actions.is_displayed(BUTTON) for _ in range(3)] == [True, True, True]


def test_wait_for_disappear(actions, fake_driver):
    actions.wait_for_disappear(MISSING)
    fake_driver.add(BUTTON, FakeElement(displayed=False))
    actions.wait_for_disappear(BUTTON)


def test_wait_for_disappear_times_out(actions, fake_driver):
    fake_driver.add(BUTTON, FakeElement())
    with pytest.raises(StillVisible):
        actions.wait_for_disappear(BUTTON)


def test_wait_for_page_ready_polls_document_state(actions, fake_driver):
    actions.wait_for_page_ready()
    assert any('readyState' in s for s in fake_driver.scripts)


def test_wait_for_url_contains(actions, fake_driver):
    fake_driver.current_url = 'https://www.saucedemo.com/cart.html'
    assert actions.wait_for_url_contains('cart.html') is True
    assert actions.wait_for_url_contains('inventory.html', timeout=0.1) is False


def test_scroll_into_view_waits_for_viewport(actions, fake_driver):
    element = fake_driver.add(BUTTON, FakeElement())
    assert actions.scroll_into_view(BUTTON) is element
    assert any('scrollIntoView' in s for s in fake_driver.scripts)
    assert any('getBoundingClientRect' in s for s in fake_driver.scripts)
