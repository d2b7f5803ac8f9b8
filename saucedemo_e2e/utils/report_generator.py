# utils/report_generator.py
import base64
import html
import json
import logging
import platform
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from saucedemo_e2e.core.exceptions import ReportWriteFailed
from saucedemo_e2e.models.report import ReportData, TestResult
from saucedemo_e2e.utils.screenshots import file_timestamp

REPORT_PREFIX = 'test-report'

_STYLE = """
* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; background: #eef1f6; padding: 20px; color: #333; }
.container { max-width: 1400px; margin: 0 auto; background: white; border-radius: 10px; box-shadow: 0 10px 30px rgba(0,0,0,0.15); overflow: hidden; }
.header { background: #3b4a6b; color: white; padding: 40px; text-align: center; }
.header h1 { font-size: 2.2em; margin-bottom: 10px; }
.summary { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 20px; padding: 30px 40px; background: #f8f9fa; }
.summary-card { background: white; padding: 20px; border-radius: 8px; box-shadow: 0 2px 8px rgba(0,0,0,0.1); text-align: center; }
.summary-card .label { font-size: 0.9em; color: #666; text-transform: uppercase; letter-spacing: 1px; margin-bottom: 8px; }
.summary-card .value { font-size: 2.2em; font-weight: bold; }
.summary-card.total .value { color: #667eea; }
.summary-card.passed .value { color: #10b981; }
.summary-card.failed .value { color: #ef4444; }
.summary-card.skipped .value { color: #f59e0b; }
.pass-rate { padding: 0 40px 30px; background: #f8f9fa; }
.progress-bar { width: 100%; height: 30px; background: #e5e7eb; border-radius: 15px; overflow: hidden; }
.progress-fill { height: 100%; background: #10b981; color: white; font-weight: bold; display: flex; align-items: center; justify-content: center; }
.tests { padding: 30px 40px; }
.tests h2, .environment h2 { margin-bottom: 15px; color: #3b4a6b; }
details.test { border: 1px solid #e5e7eb; border-radius: 8px; margin-bottom: 10px; }
details.test summary { padding: 12px 16px; cursor: pointer; display: flex; gap: 12px; align-items: center; }
details.test .body { padding: 12px 16px; border-top: 1px solid #e5e7eb; }
.badge { padding: 2px 10px; border-radius: 10px; color: white; font-size: 0.8em; text-transform: uppercase; }
.badge.passed { background: #10b981; }
.badge.failed { background: #ef4444; }
.badge.skipped { background: #f59e0b; }
.duration { margin-left: auto; color: #666; font-size: 0.9em; }
pre.error { background: #fef2f2; color: #991b1b; padding: 10px; border-radius: 6px; white-space: pre-wrap; margin-top: 8px; }
img.screenshot { max-width: 100%; margin-top: 10px; border: 1px solid #e5e7eb; }
.note { color: #666; font-style: italic; margin-top: 8px; }
.environment { padding: 30px 40px; border-top: 1px solid #e5e7eb; }
.environment-info { display: flex; gap: 30px; flex-wrap: wrap; }
.footer { text-align: center; padding: 20px; background: #f8f9fa; color: #666; border-top: 1px solid #e5e7eb; }
"""


def _esc(value) -> str:
    return html.escape(str(value), quote=True)


class ReportGenerator:
    def __init__(self, report_dir: Union[str, Path] = 'reports', browser: str = 'chrome'):
        self.report_dir = Path(report_dir)
        self.browser = browser
        self.logger = logging.getLogger(__name__)

    def prepare_report_data(self, results: Iterable[TestResult], duration_ms: float) -> ReportData:
        results = tuple(results)
        return ReportData(
            timestamp=datetime.now().isoformat(),
            total_tests=len(results),
            passed=sum(1 for r in results if r.status == 'passed'),
            failed=sum(1 for r in results if r.status == 'failed'),
            skipped=sum(1 for r in results if r.status == 'skipped'),
            duration=duration_ms,
            test_results=results,
            environment={
                'browser': self.browser,
                'platform': platform.platform(),
                'python': platform.python_version(),
            },
        )

    def render(self, data: ReportData) -> str:
        pass_rate = f"{data.pass_rate:.2f}"
        when = datetime.fromisoformat(data.timestamp)
        cards = ''.join(
            f'<div class="summary-card {css}"><div class="label">{label}</div><div class="value">{value}</div></div>'
            for css, label, value in (
                ('total', 'Total Tests', data.total_tests),
                ('passed', 'Passed', data.passed),
                ('failed', 'Failed', data.failed),
                ('skipped', 'Skipped', data.skipped),
                ('duration', 'Duration', f"{data.duration / 1000:.2f}s"),
            )
        )
        environment = ''.join(
            f'<div class="environment-item"><strong>{_esc(key.title())}:</strong> <span>{_esc(value)}</span></div>'
            for key, value in data.environment.items()
        )
        tests = ''.join(self._render_test(r) for r in data.test_results) or '<p class="note">No tests were recorded.</p>'
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Test Automation Report - {when:%Y-%m-%d}</title>
<style>{_STYLE}</style>
</head>
<body>
<div class="container">
<div class="header"><h1>Test Automation Report</h1><div class="timestamp">{when:%Y-%m-%d %H:%M:%S}</div></div>
<div class="summary">{cards}</div>
<div class="pass-rate">
<h3 style="margin-bottom: 10px; text-align: center;">Pass Rate: {pass_rate}%</h3>
<div class="progress-bar"><div class="progress-fill" style="width: {pass_rate}%">{pass_rate}%</div></div>
</div>
<div class="tests"><h2>Test Results</h2>{tests}</div>
<div class="environment"><h2>Test Environment</h2><div class="environment-info">{environment}</div></div>
<div class="footer"><p>Generated by SauceDemo E2E Suite</p></div>
</div>
</body>
</html>
"""

    def _render_test(self, result: TestResult) -> str:
        status = result.status if result.status in ('passed', 'failed', 'skipped') else 'skipped'
        parts = [f'<p><strong>Suite:</strong> {_esc(result.suite_name)}</p>']
        if result.error and status == 'failed':
            parts.append(f'<pre class="error">{_esc(result.error)}</pre>')
        if result.screenshot:
            parts.append(self._render_screenshot(result.screenshot))
        open_attr = ' open' if status == 'failed' else ''
        return (
            f'<details class="test"{open_attr}>'
            f'<summary><span class="badge {status}">{status}</span>'
            f'<span class="name">{_esc(result.test_name)}</span>'
            f'<span class="duration">{result.duration / 1000:.2f}s</span></summary>'
            f'<div class="body">{"".join(parts)}</div>'
            f'</details>'
        )

    def _render_screenshot(self, path: str) -> str:
        try:
            encoded = base64.b64encode(Path(path).read_bytes()).decode('ascii')
        except OSError as e:
            self.logger.warning(f"Could not inline screenshot {path}: {e}")
            return f'<p class="note">Screenshot unavailable: {_esc(path)}</p>'
        return f'<img class="screenshot" alt="screenshot" src="data:image/png;base64,{encoded}">'

    def _write(self, filename: str, content: str) -> Path:
        path = self.report_dir / filename
        try:
            self.report_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise ReportWriteFailed(str(path), str(e)) from e
        self.logger.info(f"Report written to: {path}")
        return path

    def write_html_report(self, data: ReportData, report_name: str = REPORT_PREFIX,
                          stamp: Optional[str] = None) -> Path:
        return self._write(f"{report_name}_{stamp or file_timestamp()}.html", self.render(data))

    def write_json_summary(self, data: ReportData, report_name: str = REPORT_PREFIX,
                           stamp: Optional[str] = None) -> Path:
        return self._write(f"{report_name}_{stamp or file_timestamp()}.json", json.dumps(data.to_dict(), indent=2))

    def list_reports(self) -> List[str]:
        if not self.report_dir.is_dir():
            return []
        reports = sorted(self.report_dir.glob(f"{REPORT_PREFIX}_*.html"), reverse=True)
        return [p.name for p in reports]

    def get_report(self, name: str) -> Optional[str]:
        # Only bare file names inside the report directory are served.
        if Path(name).name != name or not name.endswith('.html'):
            return None
        path = self.report_dir / name
        if not path.is_file():
            return None
        return path.read_text(encoding='utf-8')

    def latest_report(self) -> Optional[str]:
        reports = self.list_reports()
        return self.get_report(reports[0]) if reports else None

    def latest_summary(self) -> Optional[Dict]:
        if not self.report_dir.is_dir():
            return None
        summaries = sorted(self.report_dir.glob(f"{REPORT_PREFIX}_*.json"), reverse=True)
        if not summaries:
            return None
        return json.loads(summaries[0].read_text(encoding='utf-8'))
