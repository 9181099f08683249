from __future__ import annotations

import logging
import sys

from logging_setup import ContextFormatter


def _record(**extra) -> logging.LogRecord:
    return logging.makeLogRecord(
        {"name": "actions", "levelname": "INFO", "levelno": logging.INFO, "msg": "delete_invoice.success", **extra}
    )


def test_context_formatter_appends_extra_fields_sorted() -> None:
    line = ContextFormatter().format(_record(path="/dashboard/invoices", invoice_id="42"))

    assert line.endswith("INFO [actions] delete_invoice.success invoice_id=42 path=/dashboard/invoices")


def test_context_formatter_without_extra_keeps_plain_line() -> None:
    line = ContextFormatter().format(_record())

    assert line.endswith("INFO [actions] delete_invoice.success")


def test_context_formatter_keeps_context_on_first_line_of_traceback() -> None:
    try:
        raise RuntimeError("database is locked")
    except RuntimeError:
        record = _record(exc_info=sys.exc_info(), invoice_id="42")

    first, _, rest = ContextFormatter().format(record).partition("\n")

    assert first.endswith("delete_invoice.success invoice_id=42")
    assert rest.startswith("Traceback")
    assert "RuntimeError: database is locked" in rest
