"""
Fixtures for the live SauceDemo tests.

One browser session is shared by every test in a module. Each test starts
from a clean origin (no cookies, no storage), failures leave an evidence
bundle behind, and the session writes one HTML and one JSON report.

The tests only run with E2E=true and when the site answers.
"""

import logging
from pathlib import Path

import pytest

from saucedemo_e2e.config.settings import get_settings
from saucedemo_e2e.core.driver_manager import DriverManager
from saucedemo_e2e.pages.cart_page import CartPage
from saucedemo_e2e.pages.login_page import LoginPage
from saucedemo_e2e.pages.products_page import ProductsPage
from saucedemo_e2e.services.run_recorder import RunRecorder, outcome_of
from saucedemo_e2e.utils.data_loader import TestDataLoader
from saucedemo_e2e.utils.site_check import is_site_reachable

logger = logging.getLogger(__name__)


def _loader(rootpath) -> TestDataLoader:
    return TestDataLoader(Path(rootpath) / get_settings().data_dir)


def pytest_collection_modifyitems(config, items):
    live = [item for item in items if item.get_closest_marker('e2e')]
    if not live:
        return
    settings = get_settings()
    if not settings.e2e_enabled:
        reason = "live browser tests are off; set E2E=true to run them"
    elif not is_site_reachable(settings.base_url):
        reason = f"{settings.base_url} is not reachable"
    else:
        return
    skip = pytest.mark.skip(reason=reason)
    for item in live:
        item.add_marker(skip)


def pytest_generate_tests(metafunc):
    """Data-driven parametrization straight from the files under test-data/."""
    if not {'user', 'scenario', 'invalid_checkout'} & set(metafunc.fixturenames):
        return
    loader = _loader(metafunc.config.rootpath)
    if 'user' in metafunc.fixturenames:
        users = loader.get_user_test_data()
        metafunc.parametrize('user', users, ids=[f"{u.user_type}-{u.username or 'blank'}" for u in users])
    if 'scenario' in metafunc.fixturenames:
        scenarios = loader.get_shopping_scenarios()
        metafunc.parametrize('scenario', scenarios, ids=[s.name.replace(' ', '-') for s in scenarios])
    if 'invalid_checkout' in metafunc.fixturenames:
        cases = loader.get_invalid_checkout_data()
        metafunc.parametrize('invalid_checkout', cases, ids=[c.expected_error for c in cases])


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store each phase report on the item for the evidence fixture."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


@pytest.fixture(scope='session')
def settings():
    return get_settings()


@pytest.fixture(scope='session')
def test_data(request):
    return _loader(request.config.rootpath)


@pytest.fixture(scope='session')
def run_recorder(settings):
    recorder = RunRecorder.from_settings(settings)
    recorder.start()
    yield recorder
    outcome = recorder.finalize()
    if outcome is not None:
        logger.info(f"HTML report: {outcome[1]}")


@pytest.fixture(scope='module')
def driver_manager(settings):
    manager = DriverManager(settings)
    manager.create()
    yield manager
    manager.close()


@pytest.fixture
def driver(driver_manager, settings):
    driver = driver_manager.current()
    driver.get(settings.url())
    driver.delete_all_cookies()
    driver.execute_script("window.localStorage.clear(); window.sessionStorage.clear();")
    return driver


@pytest.fixture(autouse=True)
def record_outcome(request, run_recorder, driver_manager, settings):
    """Capture evidence for the finished test and add it to the run report."""
    yield
    node = request.node
    status, duration_ms, error = outcome_of(getattr(node, 'rep_setup', None), getattr(node, 'rep_call', None))

    screenshot = None
    if status == 'failed':
        evidence = driver_manager.capture_failure_evidence(node.name)
        if evidence:
            screenshot = str(evidence['screenshot'])
    elif status == 'passed' and settings.screenshot_on_success:
        screenshot = driver_manager.capture_step(node.name, 'success')

    suite = node.module.__name__.rsplit('.', 1)[-1].replace('test_', '', 1).title()
    run_recorder.record(suite, node.name, status, duration_ms, error, screenshot)


@pytest.fixture
def login_page(driver, settings):
    page = LoginPage(driver, settings)
    page.open()
    return page


@pytest.fixture
def products_page(driver, settings):
    return ProductsPage(driver, settings)


@pytest.fixture
def cart_page(driver, settings):
    return CartPage(driver, settings)


@pytest.fixture
def logged_in(login_page, products_page, test_data):
    """Standard user signed in and looking at the inventory."""
    user = test_data.get_standard_user()
    login_page.login(user.username, user.password)
    assert products_page.is_on_products_page(), "standard user did not reach the products page"
    return products_page
