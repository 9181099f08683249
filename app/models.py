from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from data import InvoiceStatus

_CENTS = Decimal("0.01")
# Keeps the stored cents inside a signed 64-bit INTEGER column.
MAX_AMOUNT = Decimal("1000000000000")

FIELD_MESSAGES = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.",
    "status": "Please select an invoice status.",
    "categoryName": "Please select a category.",
}

# Overrides keyed by (field, pydantic error type).
ERROR_TYPE_MESSAGES = {
    ("amount", "less_than_equal"): "Please enter an amount no greater than $1,000,000,000,000.",
}


class InvoiceForm(BaseModel):
    """Submitted invoice form, validated by its HTML field names."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    customer_id: str = Field(alias="customerId", min_length=1)
    amount: Decimal = Field(gt=0, le=MAX_AMOUNT)
    status: InvoiceStatus
    category_name: str = Field(alias="categoryName", min_length=1)

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
        if value is None or value == "":
            return Decimal("0")
        return value

    @field_validator("amount")
    @classmethod
    def _at_least_one_cent(cls, value: Decimal) -> Decimal:
        if value.quantize(_CENTS, rounding=ROUND_HALF_UP) <= 0:
            raise ValueError("amount rounds to zero cents")
        return value


@dataclass(frozen=True)
class State:
    errors: dict[str, list[str]] = field(default_factory=dict)
    message: Optional[str] = None
    redirect_to: Optional[str] = None


def flatten_field_errors(exc: ValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("",)
        name = str(loc[0])
        message = ERROR_TYPE_MESSAGES.get((name, error.get("type")))
        if message is None:
            message = FIELD_MESSAGES.get(name, error.get("msg", "Invalid value."))
        messages = errors.setdefault(name, [])
        if message not in messages:
            messages.append(message)
    return errors


def parse_invoice_form(form_data: Mapping[str, Any]) -> tuple[InvoiceForm | None, dict[str, list[str]]]:
    payload = {name: form_data.get(name) for name in FIELD_MESSAGES}
    try:
        return InvoiceForm.model_validate(payload), {}
    except ValidationError as exc:
        return None, flatten_field_errors(exc)


def amount_in_cents(amount: Decimal) -> int:
    quantized = Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return int(quantized * 100)
