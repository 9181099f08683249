from __future__ import annotations

import sys
from pathlib import Path

import pytest
from sqlmodel import SQLModel, select

APP_PATH = Path(__file__).resolve().parents[1] / "app"
if str(APP_PATH) not in sys.path:
    sys.path.insert(0, str(APP_PATH))

import data  # noqa: E402
import page_cache  # noqa: E402


@pytest.fixture()
def db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    engine = data._build_engine(f"sqlite:///{tmp_path}/test.db")
    SQLModel.metadata.create_all(engine)
    monkeypatch.setattr(data, "engine", engine)
    page_cache.clear()
    yield engine
    page_cache.clear()
    engine.dispose()


@pytest.fixture()
def catalog(db):
    with data.get_session() as session:
        customer = data.Customer(name="Evil Rabbit", email="evil@rabbit.com")
        other = data.Customer(name="Amy Burns", email="amy@burns.com")
        hosting = data.Category(name="Hosting")
        support = data.Category(name="Support")
        session.add_all([customer, other, hosting, support])
        session.commit()
        return {
            "customer_id": customer.id,
            "other_customer_id": other.id,
            "hosting_id": hosting.id,
            "support_id": support.id,
        }


@pytest.fixture()
def stored_invoices(db):
    def _load() -> list[data.Invoice]:
        with data.get_session() as session:
            return list(session.exec(select(data.Invoice)))

    return _load
