from __future__ import annotations

from typing import Any, Callable, Mapping

from nicegui import ui

from data import InvoiceStatus
from models import State
from page_data import INVOICES_PATH
from services.invoices import InvoiceFormData
from styles import C_BTN_PRIM, C_BTN_SEC, C_CARD, C_ERROR_TEXT, C_INPUT, C_SECTION_TITLE
from .invoice_utils import build_category_options, build_customer_options, build_invoice_form_data

STATUS_OPTIONS = {
    InvoiceStatus.PENDING.value: "Pending",
    InvoiceStatus.PAID.value: "Paid",
}


def _show_messages(container: ui.column, messages: list[str] | None) -> None:
    container.clear()
    with container:
        for message in messages or []:
            ui.label(message).classes(C_ERROR_TEXT)


def render_invoice_form(
    customers: list[Any],
    categories: list[Any],
    on_submit: Callable[[Mapping[str, Any]], State],
    submit_label: str,
    invoice: InvoiceFormData | None = None,
) -> None:
    with ui.card().classes(f"{C_CARD} p-6 w-full gap-5"):
        ui.label("Choose customer").classes(C_SECTION_TITLE)
        customer_select = ui.select(
            options=build_customer_options(customers),
            value=invoice.customer_id if invoice else None,
            label="Select a customer",
        ).props("outlined dense").classes(C_INPUT)
        customer_errors = ui.column().classes("gap-0")

        ui.label("Choose an amount").classes(C_SECTION_TITLE)
        amount_input = ui.number(
            label="Enter USD amount",
            value=float(invoice.amount) if invoice else None,
            step=0.01,
            format="%.2f",
        ).props("outlined dense").classes(C_INPUT)
        amount_errors = ui.column().classes("gap-0")

        ui.label("Set the invoice status").classes(C_SECTION_TITLE)
        status_radio = ui.radio(
            STATUS_OPTIONS,
            value=invoice.status if invoice else None,
        ).props("inline")
        status_errors = ui.column().classes("gap-0")

        ui.label("Choose category").classes(C_SECTION_TITLE)
        category_select = ui.select(
            options=build_category_options(categories),
            value=(invoice.category_name or None) if invoice else None,
            label="Select a category",
        ).props("outlined dense").classes(C_INPUT)
        category_errors = ui.column().classes("gap-0")

        message_container = ui.column().classes("gap-0")

        def handle_submit() -> None:
            form_data = build_invoice_form_data(
                customer_select.value,
                amount_input.value,
                status_radio.value,
                category_select.value,
            )
            submit_button.loading = True
            try:
                state = on_submit(form_data)
            finally:
                submit_button.loading = False

            _show_messages(customer_errors, state.errors.get("customerId"))
            _show_messages(amount_errors, state.errors.get("amount"))
            _show_messages(status_errors, state.errors.get("status"))
            _show_messages(category_errors, state.errors.get("categoryName"))
            _show_messages(message_container, [state.message] if state.message else [])

            if state.redirect_to:
                ui.navigate.to(state.redirect_to)

        with ui.row().classes("w-full justify-end gap-3 mt-2"):
            ui.button("Cancel", on_click=lambda: ui.navigate.to(INVOICES_PATH)).props("flat").classes(
                C_BTN_SEC
            )
            submit_button = ui.button(submit_label, on_click=handle_submit).props("loading=false").classes(
                C_BTN_PRIM
            )
