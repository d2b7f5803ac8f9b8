"""
Shared fixtures for the unit tests. Page objects run against the in-memory
driver from ``fakes`` so no browser is needed.
"""

import pytest

from fakes import FakeDriver
from saucedemo_e2e.config.settings import Settings


@pytest.fixture
def fake_driver():
    return FakeDriver()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        explicit_timeout=0.2,
        screenshot_dir=str(tmp_path / 'screenshots'),
        report_dir=str(tmp_path / 'reports'),
        data_dir=str(tmp_path / 'data'),
    )
