# services/run_recorder.py
import logging
import time
from typing import List, Optional, Tuple

from saucedemo_e2e.config.settings import Settings
from saucedemo_e2e.core.exceptions import ReportWriteFailed
from saucedemo_e2e.models.report import ReportData, TestResult
from saucedemo_e2e.utils.report_generator import ReportGenerator
from saucedemo_e2e.utils.screenshots import file_timestamp


def outcome_of(setup_report, call_report=None) -> Tuple[str, float, Optional[str]]:
    """Collapse pytest's per-phase reports into (status, duration_ms, error)."""
    if setup_report is not None and not setup_report.passed:
        status = 'skipped' if setup_report.skipped else 'failed'
        return status, setup_report.duration * 1000, _error_text(setup_report) if status == 'failed' else None
    if call_report is None:
        return 'skipped', 0.0, None
    if call_report.passed:
        return 'passed', call_report.duration * 1000, None
    if call_report.skipped:
        return 'skipped', call_report.duration * 1000, None
    return 'failed', call_report.duration * 1000, _error_text(call_report)


def _error_text(report) -> Optional[str]:
    crash = getattr(getattr(report, 'longrepr', None), 'reprcrash', None)
    if crash is not None:
        return crash.message
    return str(report.longrepr) if report.longrepr else None


class RunRecorder:
    def __init__(self, generator: ReportGenerator):
        self.generator = generator
        self.results: List[TestResult] = []
        self.started_at: Optional[float] = None
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Settings) -> 'RunRecorder':
        return cls(ReportGenerator(settings.report_dir, settings.browser))

    def start(self) -> None:
        self.started_at = time.monotonic()
        self.results = []
        self.logger.info("Test execution started...")

    def record(self, suite_name: str, test_name: str, status: str, duration_ms: float = 0.0,
               error: Optional[str] = None, screenshot: Optional[str] = None) -> TestResult:
        if self.started_at is None:
            self.start()
        result = TestResult(
            suite_name=suite_name,
            test_name=test_name,
            status=status,
            duration=duration_ms,
            error=error,
            screenshot=screenshot,
        )
        self.results.append(result)
        return result

    def finish(self) -> Tuple[ReportData, str, str]:
        elapsed_ms = (time.monotonic() - self.started_at) * 1000 if self.started_at is not None else 0.0
        data = self.generator.prepare_report_data(self.results, elapsed_ms)
        stamp = file_timestamp()
        html_path = self.generator.write_html_report(data, stamp=stamp)
        json_path = self.generator.write_json_summary(data, stamp=stamp)
        self.print_summary(data)
        return data, str(html_path), str(json_path)

    def finalize(self) -> Optional[Tuple[ReportData, str, str]]:
        """End-of-session hook: write the reports if anything was recorded.

        A report that cannot be written is logged and ``None`` returned.
        """
        if not self.results:
            return None
        try:
            return self.finish()
        except ReportWriteFailed as e:
            self.logger.error(f"Error generating report: {e}")
            return None

    def print_summary(self, data: ReportData) -> None:
        self.logger.info("=" * 80)
        self.logger.info("Test Summary:")
        self.logger.info(f"   Total Tests: {data.total_tests}")
        self.logger.info(f"   Passed: {data.passed}")
        self.logger.info(f"   Failed: {data.failed}")
        self.logger.info(f"   Skipped: {data.skipped}")
        self.logger.info(f"   Pass Rate: {data.pass_rate:.2f}%")
        self.logger.info(f"   Duration: {data.duration / 1000:.2f}s")
        self.logger.info("=" * 80)
