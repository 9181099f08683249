import logging
import os

from nicegui import app, ui

from env import is_production
from page_data import INVOICES_PATH
from services.auth import SESSION_KEY, ensure_owner_user, is_identifier_allowed, sign_out

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"
DASHBOARD_PATH = INVOICES_PATH


def _auth_disabled() -> bool:
    # Never disable auth automatically in test runs.
    if os.getenv("PYTEST_CURRENT_TEST"):
        return False
    disabled = os.getenv("DASH_DISABLE_AUTH") == "1"
    if disabled and is_production():
        raise RuntimeError("DASH_DISABLE_AUTH must not be enabled in production")
    return disabled


def _ensure_local_auth_session() -> str:
    email = (os.getenv("OWNER_EMAIL") or "").strip().lower()
    try:
        ensure_owner_user()
    except Exception:
        logger.exception("Failed to ensure owner user")
    app.storage.user[SESSION_KEY] = email or "user@nextmail.com"
    return app.storage.user[SESSION_KEY]


def is_authenticated(*, redirect: bool = False) -> bool:
    if _auth_disabled():
        _ensure_local_auth_session()
        return True

    identifier = app.storage.user.get(SESSION_KEY)
    if identifier and is_identifier_allowed(identifier):
        return True
    if identifier:
        app.storage.user.pop(SESSION_KEY, None)
    if redirect:
        ui.navigate.to(LOGIN_PATH)
    return False


def require_auth() -> bool:
    return is_authenticated(redirect=True)


def redirect_if_signed_in() -> bool:
    if app.storage.user.get(SESSION_KEY) and is_authenticated():
        ui.navigate.to(DASHBOARD_PATH)
        return True
    return False


def clear_auth_session() -> None:
    sign_out(app.storage.user)
