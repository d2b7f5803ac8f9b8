# utils/screenshots.py
import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Union

from selenium.webdriver.remote.webdriver import WebDriver

logger = logging.getLogger(__name__)


def sanitize_name(name: str) -> str:
    return re.sub(r'[^a-z0-9]', '_', name, flags=re.IGNORECASE).lower()


def file_timestamp(moment: Optional[datetime] = None) -> str:
    return (moment or datetime.now()).isoformat().replace(':', '-').replace('.', '-')


class ScreenshotCapture:
    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _ensure_directory(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def capture(self, driver: WebDriver, test_name: str, step_name: Optional[str] = None) -> Path:
        self._ensure_directory()
        base = f"{test_name}_{step_name}" if step_name else test_name
        path = self.directory / f"{sanitize_name(base)}_{file_timestamp()}.png"
        path.write_bytes(driver.get_screenshot_as_png())
        logger.info(f"Screenshot saved to: {path}")
        return path

    def capture_step(self, driver: WebDriver, test_name: str, step_name: str) -> Path:
        return self.capture(driver, test_name, step_name)

    def capture_failure_evidence(self, driver: WebDriver, test_name: str) -> Dict[str, Path]:
        """Screenshot, page source and a JSON sidecar for a failed test."""
        self._ensure_directory()
        now = datetime.now()
        stem = f"{sanitize_name(test_name)}_failure_{file_timestamp(now)}"

        screenshot_path = self.directory / f"{stem}.png"
        screenshot_path.write_bytes(driver.get_screenshot_as_png())

        source_path = self.directory / f"{stem}.html"
        source_path.write_text(driver.page_source, encoding='utf-8')

        capabilities = driver.capabilities or {}
        info = {
            'testName': test_name,
            'timestamp': now.isoformat(),
            'url': driver.current_url,
            'browser': capabilities.get('browserName', ''),
            'browserVersion': capabilities.get('browserVersion', ''),
            'platform': capabilities.get('platformName', ''),
        }
        info_path = self.directory / f"{stem}.json"
        info_path.write_text(json.dumps(info, indent=2), encoding='utf-8')

        logger.info(f"Failure evidence for {test_name!r} saved under {self.directory}")
        return {'screenshot': screenshot_path, 'page_source': source_path, 'info': info_path}
