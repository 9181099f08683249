from __future__ import annotations

import asyncio
from dataclasses import dataclass

from data import Category, Customer
from page_cache import cached
from services.catalog import fetch_categories, fetch_customers
from services.invoices import (
    InvoiceFormData,
    InvoiceRow,
    fetch_filtered_invoices,
    fetch_invoice_by_id,
    fetch_invoices_pages,
)

INVOICES_PATH = "/dashboard/invoices"


class InvoiceNotFound(LookupError):
    pass


@dataclass(frozen=True)
class CreateFormData:
    customers: list[Customer]
    categories: list[Category]


@dataclass(frozen=True)
class EditFormData:
    invoice: InvoiceFormData
    customers: list[Customer]
    categories: list[Category]


@dataclass(frozen=True)
class InvoiceListData:
    rows: list[InvoiceRow]
    total_pages: int
    query: str
    current_page: int


async def load_create_form_data() -> CreateFormData:
    customers, categories = await asyncio.gather(
        asyncio.to_thread(fetch_customers),
        asyncio.to_thread(fetch_categories),
    )
    return CreateFormData(customers=customers, categories=categories)


async def load_edit_form_data(invoice_id: str) -> EditFormData:
    invoice, customers, categories = await asyncio.gather(
        asyncio.to_thread(fetch_invoice_by_id, invoice_id),
        asyncio.to_thread(fetch_customers),
        asyncio.to_thread(fetch_categories),
    )
    if invoice is None:
        raise InvoiceNotFound(invoice_id)
    return EditFormData(invoice=invoice, customers=customers, categories=categories)


def load_invoice_list(query: str = "", current_page: int = 1) -> InvoiceListData:
    query = (query or "").strip()
    current_page = max(int(current_page or 1), 1)

    def _load() -> InvoiceListData:
        return InvoiceListData(
            rows=fetch_filtered_invoices(query, current_page),
            total_pages=fetch_invoices_pages(query),
            query=query,
            current_page=current_page,
        )

    return cached(INVOICES_PATH, (query, current_page), _load)
