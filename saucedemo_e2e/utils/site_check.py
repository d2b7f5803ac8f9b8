# utils/site_check.py
import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)


def get_status_code(url: str, timeout: float = 5) -> Optional[int]:
    try:
        response = requests.head(url, allow_redirects=True, timeout=timeout)
        return response.status_code
    except requests.RequestException as e:
        logger.warning(f"HEAD {url} failed: {e}")
        return None


def is_site_reachable(url: str, timeout: float = 5) -> bool:
    status = get_status_code(url, timeout)
    return status is not None and status < 500
