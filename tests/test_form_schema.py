from __future__ import annotations

from decimal import Decimal

import pytest

from data import InvoiceStatus
from models import amount_in_cents, parse_invoice_form


def test_parse_invoice_form_accepts_valid_payload() -> None:
    form, errors = parse_invoice_form(
        {"customerId": " c-1 ", "amount": " 50.00 ", "status": "paid", "categoryName": "Hosting"}
    )

    assert errors == {}
    assert form is not None
    assert form.customer_id == "c-1"
    assert form.amount == Decimal("50.00")
    assert form.status is InvoiceStatus.PAID
    assert form.category_name == "Hosting"


def test_parse_invoice_form_ignores_unrelated_fields() -> None:
    form, errors = parse_invoice_form(
        {
            "id": "ignored",
            "date": "2020-01-01",
            "customerId": "c-1",
            "amount": 12,
            "status": "pending",
            "categoryName": "Hosting",
        }
    )

    assert errors == {}
    assert form.amount == Decimal("12")


def test_parse_invoice_form_blank_identifiers_are_missing() -> None:
    form, errors = parse_invoice_form(
        {"customerId": "   ", "amount": "1", "status": "pending", "categoryName": ""}
    )

    assert form is None
    assert errors == {
        "customerId": ["Please select a customer."],
        "categoryName": ["Please select a category."],
    }


@pytest.mark.parametrize(
    ("amount", "cents"),
    [
        (Decimal("50.00"), 5000),
        (Decimal("0.29"), 29),
        (Decimal("0.01"), 1),
        (Decimal("19.995"), 2000),
        (Decimal("1234.5"), 123450),
    ],
)
def test_amount_in_cents(amount: Decimal, cents: int) -> None:
    assert amount_in_cents(amount) == cents


def test_parse_invoice_form_rejects_amount_below_one_cent() -> None:
    form, errors = parse_invoice_form(
        {"customerId": "c-1", "amount": "0.004", "status": "pending", "categoryName": "Hosting"}
    )

    assert form is None
    assert errors == {"amount": ["Please enter an amount greater than $0."]}


def test_parse_invoice_form_caps_amount() -> None:
    form, errors = parse_invoice_form(
        {"customerId": "c-1", "amount": "1e30", "status": "pending", "categoryName": "Hosting"}
    )

    assert form is None
    assert errors == {"amount": ["Please enter an amount no greater than $1,000,000,000,000."]}
