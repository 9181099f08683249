from __future__ import annotations

import logging

from fastapi.responses import RedirectResponse
from nicegui import app, ui

from env import app_port, load_env, storage_secret
from logging_setup import setup_logging

load_env()
setup_logging()

from data import init_db  # noqa: E402
from services.seed import ensure_seed_data  # noqa: E402
from page_data import INVOICES_PATH  # noqa: E402
import pages  # noqa: E402,F401  registers @ui.page routes

logger = logging.getLogger(__name__)


def _startup() -> None:
    init_db()
    seeded = ensure_seed_data()
    logger.info("startup.ready", extra={"seeded": seeded})


app.on_startup(_startup)


@app.get("/", include_in_schema=False)
def index():
    return RedirectResponse(INVOICES_PATH)


@app.get("/dashboard", include_in_schema=False)
def dashboard():
    return RedirectResponse(INVOICES_PATH)


def run() -> None:
    ui.run(
        title="Acme Invoices",
        host="0.0.0.0",
        port=app_port(),
        storage_secret=storage_secret(),
        favicon="🧾",
        reload=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    run()
