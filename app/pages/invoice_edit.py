from __future__ import annotations

import logging

from fastapi import HTTPException
from nicegui import ui

from actions import update_invoice
from auth_guard import require_auth
from page_data import INVOICES_PATH, InvoiceNotFound, load_edit_form_data
from ui_components import Breadcrumb, breadcrumbs, layout_wrapper
from .invoice_form import render_invoice_form

logger = logging.getLogger(__name__)


@ui.page(INVOICES_PATH + "/{invoice_id}/edit", title="Update Invoice")
async def invoice_edit_page(invoice_id: str) -> None:
    if not require_auth():
        return

    try:
        form_data = await load_edit_form_data(invoice_id)
    except InvoiceNotFound:
        logger.info("invoice_edit.not_found", extra={"invoice_id": invoice_id})
        raise HTTPException(status_code=404, detail="Invoice not found")

    def content() -> None:
        breadcrumbs(
            [
                Breadcrumb("Invoices", INVOICES_PATH),
                Breadcrumb("Edit Invoice", f"{INVOICES_PATH}/{invoice_id}/edit", active=True),
            ]
        )
        render_invoice_form(
            form_data.customers,
            form_data.categories,
            on_submit=lambda submitted: update_invoice(invoice_id, None, submitted),
            submit_label="Edit Invoice",
            invoice=form_data.invoice,
        )

    layout_wrapper(content)
