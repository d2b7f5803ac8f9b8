# routes/api.py
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from saucedemo_e2e.config.settings import get_settings
from saucedemo_e2e.utils.report_generator import ReportGenerator

router = APIRouter()


def get_report_generator() -> ReportGenerator:
    settings = get_settings()
    return ReportGenerator(settings.report_dir, settings.browser)


@router.get('/status')
def status():
    return {"status": "ok"}


@router.get('/reports')
def list_reports(generator: ReportGenerator = Depends(get_report_generator)):
    return {"reports": generator.list_reports()}


@router.get('/reports/latest', response_class=HTMLResponse)
def latest_report(generator: ReportGenerator = Depends(get_report_generator)):
    content = generator.latest_report()
    if content is None:
        raise HTTPException(status_code=404, detail="No reports available. Run the suite first.")
    return HTMLResponse(content)


@router.get('/reports/{name}', response_class=HTMLResponse)
def get_report(name: str, generator: ReportGenerator = Depends(get_report_generator)):
    content = generator.get_report(name)
    if content is None:
        raise HTTPException(status_code=404, detail=f"Report {name} not found")
    return HTMLResponse(content)


@router.get('/results')
def get_results(generator: ReportGenerator = Depends(get_report_generator)):
    summary = generator.latest_summary()
    if summary is None:
        raise HTTPException(status_code=404, detail="No results available. Run the suite first.")
    return summary
