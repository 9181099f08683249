from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, MutableMapping

from sqlalchemy.exc import SQLAlchemyError

from data import Invoice, get_session
from models import State, amount_in_cents, parse_invoice_form
from page_cache import revalidate_path
from page_data import INVOICES_PATH
from services.auth import AuthError, sign_in
from services.catalog import fetch_category_id

logger = logging.getLogger(__name__)


def _invalid_category_state(verb: str) -> State:
    return State(
        errors={"categoryName": ["Please select a valid category."]},
        message=f"Invalid Category. Failed to {verb} Invoice.",
    )


def create_invoice(prev_state: State | None, form_data: Mapping[str, Any]) -> State:
    form, errors = parse_invoice_form(form_data)
    if form is None:
        return State(errors=errors, message="Missing Fields. Failed to Create Invoice.")

    cents = amount_in_cents(form.amount)
    invoice_date = date.today().isoformat()

    try:
        category_id = fetch_category_id(form.category_name)
        if category_id is None:
            return _invalid_category_state("Create")
        with get_session() as session:
            invoice = Invoice(
                customer_id=form.customer_id,
                amount=cents,
                status=form.status.value,
                date=invoice_date,
                category_id=category_id,
            )
            session.add(invoice)
            session.commit()
            invoice_id = invoice.id
    except SQLAlchemyError:
        logger.exception("create_invoice.db_error", extra={"customer_id": form.customer_id})
        return State(message="Database Error: Failed to Create Invoice.")

    logger.info("create_invoice.success", extra={"invoice_id": invoice_id, "amount": cents})
    revalidate_path(INVOICES_PATH)
    return State(redirect_to=INVOICES_PATH)


def update_invoice(invoice_id: str, prev_state: State | None, form_data: Mapping[str, Any]) -> State:
    form, errors = parse_invoice_form(form_data)
    if form is None:
        return State(errors=errors, message="Missing Fields. Failed to Update Invoice.")

    cents = amount_in_cents(form.amount)

    try:
        category_id = fetch_category_id(form.category_name)
        if category_id is None:
            return _invalid_category_state("Update")
        with get_session() as session:
            invoice = session.get(Invoice, str(invoice_id))
            if invoice is None:
                logger.warning("update_invoice.not_found", extra={"invoice_id": invoice_id})
                return State(message="Database Error: Failed to Update Invoice.")
            invoice.customer_id = form.customer_id
            invoice.amount = cents
            invoice.status = form.status.value
            invoice.category_id = category_id
            session.add(invoice)
            session.commit()
    except SQLAlchemyError:
        logger.exception("update_invoice.db_error", extra={"invoice_id": invoice_id})
        return State(message="Database Error: Failed to Update Invoice.")

    logger.info("update_invoice.success", extra={"invoice_id": invoice_id, "amount": cents})
    revalidate_path(INVOICES_PATH)
    return State(redirect_to=INVOICES_PATH)


def delete_invoice(invoice_id: str) -> State:
    try:
        with get_session() as session:
            invoice = session.get(Invoice, str(invoice_id))
            if invoice is None:
                logger.warning("delete_invoice.not_found", extra={"invoice_id": invoice_id})
                return State(message="Database Error: Failed to Delete Invoice.")
            session.delete(invoice)
            session.commit()
    except SQLAlchemyError:
        logger.exception("delete_invoice.db_error", extra={"invoice_id": invoice_id})
        return State(message="Database Error: Failed to Delete Invoice.")

    logger.info("delete_invoice.success", extra={"invoice_id": invoice_id})
    revalidate_path(INVOICES_PATH)
    return State(message="Deleted Invoice.")


def authenticate(
    prev_state: str | None,
    form_data: Mapping[str, Any],
    session_store: MutableMapping[str, Any] | None = None,
) -> str | None:
    try:
        sign_in("credentials", form_data, session_store)
    except AuthError as error:
        if error.type == "CredentialsSignin":
            return "Invalid credentials."
        return "Something went wrong."
    return None
