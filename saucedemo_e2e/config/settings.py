# config/settings.py
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://www.saucedemo.com'
SUPPORTED_BROWSERS = ('chrome', 'firefox')


def _env_flag(environ: Mapping[str, str], name: str, default: bool = False) -> bool:
    value = environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    value = environ.get(name)
    if value is None or value.strip() == '':
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={value!r}, using {default}")
        return default


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    browser: str = 'chrome'
    headless: bool = False
    window_width: int = 1920
    window_height: int = 1080
    # seconds
    implicit_timeout: float = 0
    explicit_timeout: float = 20
    page_load_timeout: float = 30
    screenshot_on_failure: bool = True
    screenshot_on_success: bool = False
    screenshot_dir: str = os.path.join('reports', 'screenshots')
    report_dir: str = 'reports'
    data_dir: str = 'test-data'
    e2e_enabled: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        environ = os.environ if environ is None else environ
        browser = environ.get('BROWSER', 'chrome').strip().lower() or 'chrome'
        if browser not in SUPPORTED_BROWSERS:
            logger.warning(f"Unsupported BROWSER={browser!r}; driver creation will reject it")
        return cls(
            base_url=(environ.get('BASE_URL') or DEFAULT_BASE_URL).rstrip('/'),
            browser=browser,
            headless=_env_flag(environ, 'HEADLESS') or _env_flag(environ, 'CI'),
            implicit_timeout=_env_float(environ, 'IMPLICIT_TIMEOUT', cls.implicit_timeout),
            explicit_timeout=_env_float(environ, 'EXPLICIT_TIMEOUT', cls.explicit_timeout),
            page_load_timeout=_env_float(environ, 'PAGE_LOAD_TIMEOUT', cls.page_load_timeout),
            screenshot_dir=environ.get('SCREENSHOT_DIR', cls.screenshot_dir),
            report_dir=environ.get('REPORT_DIR', cls.report_dir),
            data_dir=environ.get('TEST_DATA_DIR', cls.data_dir),
            e2e_enabled=_env_flag(environ, 'E2E'),
        )

    def url(self, path: str = '') -> str:
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    settings = Settings.from_env()
    logger.info(f"Settings resolved: browser={settings.browser}, headless={settings.headless}, base_url={settings.base_url}")
    return settings
