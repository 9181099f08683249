from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Iterable


def format_currency(cents: int | None) -> str:
    amount = Decimal(int(cents or 0)) / Decimal("100")
    return f"${amount:,.2f}"


def format_date_to_local(value: str | None) -> str:
    raw = (value or "").strip()
    if not raw:
        return ""
    try:
        parsed = date.fromisoformat(raw[:10])
    except ValueError:
        return raw
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def generate_pagination(current_page: int, total_pages: int) -> list[int | str]:
    """Page links for the list footer, with ``"..."`` standing in for skipped pages."""
    if total_pages <= 7:
        return list(range(1, total_pages + 1))
    if current_page <= 3:
        return [1, 2, 3, "...", total_pages - 1, total_pages]
    if current_page >= total_pages - 2:
        return [1, 2, "...", total_pages - 2, total_pages - 1, total_pages]
    return [1, "...", current_page - 1, current_page, current_page + 1, "...", total_pages]


def build_customer_options(customers: Iterable[Any]) -> dict[str, str]:
    # NiceGUI ui.select expects dict[value, label] when using dict options
    return {str(c.id): str(c.name) for c in customers if getattr(c, "id", None)}


def build_category_options(categories: Iterable[Any]) -> list[str]:
    return [str(c.name) for c in categories if getattr(c, "name", None)]


def build_invoice_form_data(
    customer_id: Any,
    amount: Any,
    status: Any,
    category_name: Any,
) -> dict[str, Any]:
    return {
        "customerId": customer_id,
        "amount": "" if amount is None else str(amount),
        "status": status,
        "categoryName": category_name,
    }
