# models/report.py
from dataclasses import asdict, dataclass, field
from typing import Dict, Optional, Tuple

STATUSES = ('passed', 'failed', 'skipped')


@dataclass(frozen=True)
class TestResult:
    __test__ = False  # not a pytest test class

    suite_name: str
    test_name: str
    status: str
    duration: float = 0.0  # milliseconds
    error: Optional[str] = None
    screenshot: Optional[str] = None


@dataclass(frozen=True)
class ReportData:
    timestamp: str
    total_tests: int
    passed: int
    failed: int
    skipped: int
    duration: float  # milliseconds
    test_results: Tuple[TestResult, ...] = field(default_factory=tuple)
    environment: Dict[str, str] = field(default_factory=dict)

    @property
    def pass_rate(self) -> float:
        if not self.total_tests:
            return 0.0
        return self.passed / self.total_tests * 100

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['test_results'] = [asdict(r) for r in self.test_results]
        data['pass_rate'] = round(self.pass_rate, 2)
        return data
