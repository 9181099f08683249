from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


_LOADED = False
_DEFAULT_DATABASE_URL = "sqlite:///storage/invoices.db"
_DEFAULT_PORT = 8000


def load_env() -> None:
    global _LOADED
    if _LOADED:
        return
    _LOADED = True

    base_dir = Path(__file__).resolve().parent
    candidates = [
        base_dir.parent / ".env",
        base_dir / ".env",
    ]

    loaded_path: Path | None = None
    for path in candidates:
        if not path.exists():
            continue
        loaded_path = path
        # Real environment variables win over .env values.
        load_dotenv(dotenv_path=path, override=False)

    if os.getenv("DASH_DEBUG") == "1" and loaded_path is not None:
        print(f"DEBUG: Environment loaded from {loaded_path}")


def database_url() -> str:
    return (os.getenv("DATABASE_URL") or "").strip() or _DEFAULT_DATABASE_URL


def storage_secret() -> str:
    secret = (os.getenv("STORAGE_SECRET") or "").strip()
    if secret:
        return secret
    if is_production():
        raise RuntimeError("STORAGE_SECRET must be set in production")
    return "invoice-dashboard-dev"


def app_port() -> int:
    raw = (os.getenv("APP_PORT") or "").strip()
    try:
        return int(raw) if raw else _DEFAULT_PORT
    except ValueError:
        return _DEFAULT_PORT


def is_production() -> bool:
    return (os.getenv("DASH_ENV") or "").strip().lower() in {"prod", "production"}
