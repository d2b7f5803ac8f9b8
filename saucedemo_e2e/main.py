# main.py
import logging
import os

import uvicorn
from fastapi import FastAPI

from saucedemo_e2e.routes.api import router as api_router


def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )


def create_app() -> FastAPI:
    app = FastAPI(title="SauceDemo E2E reports")
    app.include_router(api_router)
    return app


def run_api():
    uvicorn.run(create_app(), host="0.0.0.0", port=int(os.getenv("PORT", 8000)))


if __name__ == '__main__':
    setup_logging()
    run_api()

# Usage:
#   python -m saucedemo_e2e.main    # serve reports/ on :8000
#   PORT=9000 python -m saucedemo_e2e.main
