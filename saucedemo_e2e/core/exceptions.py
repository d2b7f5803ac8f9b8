"""
Exceptions raised by the page objects and the supporting utilities.

Locator-bound errors always carry the locator in their message so a failed
wait can be traced back to the element it was waiting on.
"""

from typing import Any, Dict, Optional


class AutomationError(Exception):
    """Base exception for all suite errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class LocatorError(AutomationError):
    """Base for errors tied to a single element locator."""

    def __init__(self, locator: Any, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"{message}: {locator}", details)
        self.locator = locator


class ElementNotFound(LocatorError):
    def __init__(self, locator: Any, timeout: Optional[float] = None) -> None:
        details = {'timeout': timeout} if timeout is not None else None
        super().__init__(locator, 'Element not found', details)


class ElementNotVisible(LocatorError):
    def __init__(self, locator: Any, timeout: Optional[float] = None) -> None:
        details = {'timeout': timeout} if timeout is not None else None
        super().__init__(locator, 'Element not visible', details)


class StillVisible(LocatorError):
    def __init__(self, locator: Any, timeout: Optional[float] = None) -> None:
        details = {'timeout': timeout} if timeout is not None else None
        super().__init__(locator, 'Element did not disappear', details)


class ClickFailed(LocatorError):
    """Raised when a click cannot be dispatched; the cause is chained."""

    def __init__(self, locator: Any, cause: Optional[BaseException] = None) -> None:
        details = {'cause': type(cause).__name__} if cause is not None else None
        super().__init__(locator, 'Failed to click element', details)


class NotInitialized(AutomationError):
    """Raised when a browser session is requested before one was created."""

    def __init__(self, message: str = 'No live browser session; call create() first') -> None:
        super().__init__(message)


class DataLoadFailed(AutomationError):
    """Raised when a test-data file is missing or malformed."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Failed to load test data {filename}: {reason}")
        self.filename = filename


class ReportWriteFailed(AutomationError):
    """Raised when a report artifact cannot be written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to write report {path}: {reason}")
        self.path = path
