from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import String, cast, func, or_
from sqlmodel import select

from data import Category, Customer, Invoice, get_session

ITEMS_PER_PAGE = 6


@dataclass(frozen=True)
class InvoiceFormData:
    id: str
    customer_id: str
    amount: Decimal
    status: str
    category_id: str | None
    category_name: str


@dataclass(frozen=True)
class InvoiceRow:
    id: str
    amount: int
    date: str
    status: str
    name: str
    email: str
    image_url: str
    category_name: str


def cents_to_amount(cents: int) -> Decimal:
    return (Decimal(int(cents or 0)) / Decimal("100")).quantize(Decimal("0.01"))


def fetch_invoice_by_id(invoice_id: str) -> InvoiceFormData | None:
    """Load an invoice for the edit form, with the amount converted back to dollars."""
    with get_session() as session:
        invoice = session.get(Invoice, str(invoice_id))
        if invoice is None:
            return None
        category = session.get(Category, invoice.category_id) if invoice.category_id else None
        return InvoiceFormData(
            id=invoice.id,
            customer_id=invoice.customer_id,
            amount=cents_to_amount(invoice.amount),
            status=invoice.status,
            category_id=invoice.category_id,
            category_name=category.name if category else "",
        )


def _filtered_statement(query: str):
    statement = (
        select(Invoice, Customer, Category)
        .join(Customer, Invoice.customer_id == Customer.id)
        .outerjoin(Category, Invoice.category_id == Category.id)
    )
    needle = (query or "").strip().lower()
    if needle:
        pattern = f"%{needle}%"
        statement = statement.where(
            or_(
                func.lower(Customer.name).like(pattern),
                func.lower(Customer.email).like(pattern),
                cast(Invoice.amount, String).like(pattern),
                Invoice.date.like(pattern),
                func.lower(Invoice.status).like(pattern),
                func.lower(Category.name).like(pattern),
            )
        )
    return statement


def fetch_filtered_invoices(query: str = "", current_page: int = 1) -> list[InvoiceRow]:
    page = max(int(current_page or 1), 1)
    offset = (page - 1) * ITEMS_PER_PAGE
    statement = (
        _filtered_statement(query)
        .order_by(Invoice.date.desc(), Invoice.id)
        .offset(offset)
        .limit(ITEMS_PER_PAGE)
    )
    with get_session() as session:
        rows = session.exec(statement).all()
        return [
            InvoiceRow(
                id=invoice.id,
                amount=invoice.amount,
                date=invoice.date,
                status=invoice.status,
                name=customer.name,
                email=customer.email,
                image_url=customer.image_url,
                category_name=category.name if category else "",
            )
            for invoice, customer, category in rows
        ]


def fetch_invoices_pages(query: str = "") -> int:
    subquery = _filtered_statement(query).subquery()
    with get_session() as session:
        total = session.exec(select(func.count()).select_from(subquery)).one()
    return math.ceil(int(total or 0) / ITEMS_PER_PAGE)
