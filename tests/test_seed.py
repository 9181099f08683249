from __future__ import annotations

from sqlmodel import select

import data
from services import seed


def test_ensure_seed_data_populates_empty_store_once(db, monkeypatch) -> None:
    monkeypatch.delenv("OWNER_EMAIL", raising=False)
    monkeypatch.delenv("OWNER_PASSWORD", raising=False)

    assert seed.ensure_seed_data() is True
    assert seed.ensure_seed_data() is False

    with data.get_session() as session:
        invoices = list(session.exec(select(data.Invoice)))
        categories = list(session.exec(select(data.Category)))
        users = list(session.exec(select(data.User)))

    assert len(invoices) == len(seed.DEMO_INVOICES)
    assert {c.name for c in categories} == set(seed.DEMO_CATEGORIES)
    assert all(invoice.category_id for invoice in invoices)
    assert [u.email for u in users] == ["user@nextmail.com"]
