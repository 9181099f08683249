from __future__ import annotations

from nicegui import ui

from actions import create_invoice
from auth_guard import require_auth
from page_data import INVOICES_PATH, load_create_form_data
from ui_components import Breadcrumb, breadcrumbs, layout_wrapper
from .invoice_form import render_invoice_form


@ui.page(f"{INVOICES_PATH}/create", title="Create Invoice")
async def invoice_create_page() -> None:
    if not require_auth():
        return

    form_data = await load_create_form_data()

    def content() -> None:
        breadcrumbs(
            [
                Breadcrumb("Invoices", INVOICES_PATH),
                Breadcrumb("Create Invoice", f"{INVOICES_PATH}/create", active=True),
            ]
        )
        render_invoice_form(
            form_data.customers,
            form_data.categories,
            on_submit=lambda submitted: create_invoice(None, submitted),
            submit_label="Create Invoice",
        )

    layout_wrapper(content)
