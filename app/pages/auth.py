from __future__ import annotations

from contextlib import contextmanager
import logging

from nicegui import app, ui

from actions import authenticate
from auth_guard import DASHBOARD_PATH, redirect_if_signed_in
from services.auth import safe_callback_url

ERROR_TEXT = "text-sm text-rose-600"
TITLE_TEXT = "text-2xl font-semibold text-slate-900 text-center"
SUBTITLE_TEXT = "text-sm text-slate-500 text-center"
INPUT_CLASSES = "w-full"
PRIMARY_BUTTON = "w-full bg-slate-900 text-white rounded-lg hover:bg-slate-800"
CARD_CLASSES = "w-full max-w-[400px] bg-white rounded-xl shadow-lg border border-slate-200 p-6"
BG_CLASSES = "min-h-screen w-full bg-slate-50 flex items-center justify-center px-4"
logger = logging.getLogger(__name__)


@contextmanager
def auth_layout(title: str, subtitle: str):
    with ui.element("div").classes(BG_CLASSES):
        with ui.column().classes("w-full items-center gap-6"):
            ui.label("Acme Invoices").classes("text-lg font-semibold text-slate-900")
            with ui.column().classes(f"{CARD_CLASSES} gap-4"):
                ui.label(title).classes(TITLE_TEXT)
                if subtitle:
                    ui.label(subtitle).classes(SUBTITLE_TEXT)
                with ui.column().classes("w-full gap-4") as card:
                    yield card


def _error_label() -> ui.label:
    label = ui.label("").classes(ERROR_TEXT)
    label.set_visibility(False)
    return label


def _set_error(label: ui.label, message: str | None) -> None:
    label.text = message or ""
    label.set_visibility(bool(message))


@ui.page("/login", title="Login")
def login_page(callbackUrl: str = DASHBOARD_PATH):
    if redirect_if_signed_in():
        return

    target = safe_callback_url(callbackUrl, DASHBOARD_PATH)

    with auth_layout("Please log in to continue.", ""):
        email_input = ui.input("Email").props("outlined dense type=email").classes(INPUT_CLASSES)
        password_input = ui.input("Password").props("outlined dense type=password").classes(INPUT_CLASSES)
        status_error = _error_label()

        def handle_login() -> None:
            _set_error(status_error, "")
            login_button.loading = True
            try:
                error_message = authenticate(
                    None,
                    {
                        "email": (email_input.value or "").strip(),
                        "password": password_input.value or "",
                    },
                    app.storage.user,
                )
            finally:
                login_button.loading = False
            if error_message:
                _set_error(status_error, error_message)
                return
            ui.navigate.to(target)

        password_input.on("keydown.enter", handle_login)
        login_button = ui.button("Log in", on_click=handle_login).props("loading=false").classes(PRIMARY_BUTTON)
