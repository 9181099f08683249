from __future__ import annotations

from urllib.parse import urlencode

from nicegui import ui

from actions import delete_invoice
from auth_guard import require_auth
from page_data import INVOICES_PATH, load_invoice_list
from services.invoices import InvoiceRow
from styles import (
    C_BTN_ICON,
    C_BTN_PRIM,
    C_BTN_SEC,
    C_CARD,
    C_INPUT,
    C_PAGE_TITLE,
    C_SECTION_TITLE,
    C_TABLE_HEADER,
    C_TABLE_ROW,
    C_TEXT_MUTED,
)
from ui_components import invoice_status_badge, layout_wrapper
from .invoice_utils import format_currency, format_date_to_local, generate_pagination


def _list_url(query: str, page: int) -> str:
    params = {"page": page}
    if query:
        params["query"] = query
    return f"{INVOICES_PATH}?{urlencode(params)}"


@ui.page(INVOICES_PATH, title="Invoices")
def invoices_page(query: str = "", page: int = 1) -> None:
    if not require_auth():
        return
    layout_wrapper(lambda: render_invoices(query, page))


def render_invoices(query: str, page: int) -> None:
    with ui.row().classes("w-full justify-between items-center mb-4 gap-3"):
        ui.label("Invoices").classes(C_PAGE_TITLE)

    with ui.row().classes("w-full items-center gap-3 flex-nowrap"):
        search_input = ui.input(placeholder="Search invoices...", value=query).props(
            "outlined dense clearable"
        ).classes(C_INPUT)
        search_input.on(
            "keydown.enter",
            lambda: ui.navigate.to(_list_url((search_input.value or "").strip(), 1)),
        )
        ui.button(
            "Create Invoice",
            icon="add",
            on_click=lambda: ui.navigate.to(f"{INVOICES_PATH}/create"),
        ).classes(C_BTN_PRIM)

    delete_state = {"id": None}

    with ui.dialog() as delete_dialog:
        with ui.card().classes(f"{C_CARD} p-5"):
            ui.label("Delete invoice").classes(C_SECTION_TITLE)
            ui.label("Do you really want to delete this invoice?").classes(C_TEXT_MUTED)
            with ui.row().classes("justify-end gap-2 mt-3 w-full"):
                ui.button("Cancel", on_click=delete_dialog.close).props("flat").classes(C_BTN_SEC)

                def _confirm_delete() -> None:
                    invoice_id = delete_state["id"]
                    delete_dialog.close()
                    if not invoice_id:
                        return
                    state = delete_invoice(invoice_id)
                    failed = state.message and state.message.startswith("Database Error")
                    ui.notify(state.message or "", color="red" if failed else "green")
                    invoice_table.refresh()

                ui.button("Delete", on_click=_confirm_delete).classes(C_BTN_PRIM)

    def open_delete(row: InvoiceRow) -> None:
        delete_state["id"] = row.id
        delete_dialog.open()

    @ui.refreshable
    def invoice_table() -> None:
        data = load_invoice_list(query, page)
        with ui.card().classes(f"{C_CARD} w-full p-0 gap-0"):
            with ui.row().classes(f"{C_TABLE_HEADER} flex-nowrap"):
                ui.label("Customer").classes("w-1/4")
                ui.label("Email").classes("w-1/4")
                ui.label("Amount").classes("w-1/12 text-right")
                ui.label("Date").classes("w-1/6")
                ui.label("Category").classes("w-1/6")
                ui.label("Status").classes("w-1/12")
                ui.label("").classes("w-1/12")
            if not data.rows:
                ui.label("No invoices found.").classes(f"{C_TEXT_MUTED} px-3 py-4")
            for row in data.rows:
                with ui.row().classes(f"{C_TABLE_ROW} flex-nowrap"):
                    with ui.row().classes("w-1/4 items-center gap-2 flex-nowrap"):
                        if row.image_url:
                            ui.image(row.image_url).classes("w-7 h-7 rounded-full")
                        ui.label(row.name)
                    ui.label(row.email).classes("w-1/4 text-slate-500")
                    ui.label(format_currency(row.amount)).classes("w-1/12 text-right tabular-nums")
                    ui.label(format_date_to_local(row.date)).classes("w-1/6")
                    ui.label(row.category_name).classes("w-1/6")
                    with ui.element("div").classes("w-1/12"):
                        invoice_status_badge(row.status)
                    with ui.row().classes("w-1/12 justify-end gap-1 flex-nowrap"):
                        ui.button(
                            icon="edit",
                            on_click=lambda r=row: ui.navigate.to(f"{INVOICES_PATH}/{r.id}/edit"),
                        ).props("flat round dense").classes(C_BTN_ICON)
                        ui.button(
                            icon="delete",
                            on_click=lambda r=row: open_delete(r),
                        ).props("flat round dense").classes(C_BTN_ICON)

        if data.total_pages > 1:
            with ui.row().classes("w-full justify-center gap-1 mt-4"):
                for item in generate_pagination(data.current_page, data.total_pages):
                    if item == "...":
                        ui.label("...").classes("px-2 text-slate-400")
                        continue
                    cls = C_BTN_PRIM if item == data.current_page else C_BTN_SEC
                    ui.button(
                        str(item),
                        on_click=lambda p=item: ui.navigate.to(_list_url(data.query, p)),
                    ).props("flat dense").classes(cls)

    invoice_table()
