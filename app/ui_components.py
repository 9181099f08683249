from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from nicegui import app, ui

from auth_guard import clear_auth_session
from data import InvoiceStatus
from page_data import INVOICES_PATH
from styles import (
    C_BADGE_GRAY,
    C_BADGE_GREEN,
    C_BG,
    C_BREADCRUMB,
    C_BREADCRUMB_ACTIVE,
    C_CONTAINER,
    C_NAV_ITEM,
    C_NAV_ITEM_ACTIVE,
)
from services.auth import SESSION_KEY


@dataclass(frozen=True)
class Breadcrumb:
    label: str
    href: str
    active: bool = False


NAV_ITEMS = [
    ("Invoices", INVOICES_PATH, "description"),
]


def breadcrumbs(items: list[Breadcrumb]) -> None:
    with ui.row().classes("items-center gap-2 mb-6"):
        for index, crumb in enumerate(items):
            ui.link(crumb.label, crumb.href).classes(
                C_BREADCRUMB_ACTIVE if crumb.active else C_BREADCRUMB
            ).props('aria-current="page"' if crumb.active else "")
            if index < len(items) - 1:
                ui.label("/").classes("text-xl text-slate-400")


def invoice_status_badge(status: str) -> None:
    if status == InvoiceStatus.PAID.value:
        with ui.row().classes(f"{C_BADGE_GREEN} items-center gap-1"):
            ui.icon("check").classes("text-xs")
            ui.label("Paid")
        return
    with ui.row().classes(f"{C_BADGE_GRAY} items-center gap-1"):
        ui.icon("schedule").classes("text-xs")
        ui.label("Pending")


def layout_wrapper(content_func: Callable[[], None], active_path: str = INVOICES_PATH) -> None:
    # App shell with left sidebar
    with ui.element("div").classes(C_BG + " w-full"):
        with ui.row().classes("w-full min-h-screen no-wrap"):
            with ui.column().classes(
                "w-[240px] bg-white border-r border-slate-200 p-4 gap-4 sticky top-0 h-screen"
            ):
                ui.label("Acme Invoices").classes("text-lg font-bold text-slate-900 px-2")
                ui.separator().classes("opacity-60")
                with ui.column().classes("gap-1 w-full"):
                    for label, target, icon in NAV_ITEMS:
                        cls = C_NAV_ITEM_ACTIVE if active_path == target else C_NAV_ITEM
                        ui.button(
                            label,
                            icon=icon,
                            on_click=lambda t=target: ui.navigate.to(t),
                        ).props("flat").classes(f"w-full justify-start normal-case {cls}")

                ui.space()

                def handle_logout() -> None:
                    clear_auth_session()
                    ui.navigate.to("/login")

                ui.label(app.storage.user.get(SESSION_KEY, "")).classes("text-xs text-slate-400 px-2")
                ui.button("Sign Out", icon="power_settings_new", on_click=handle_logout).props("flat").classes(
                    f"w-full justify-start normal-case {C_NAV_ITEM}"
                )

            with ui.column().classes(C_CONTAINER):
                content_func()
