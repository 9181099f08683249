from __future__ import annotations

import os
import uuid
from contextlib import contextmanager
from datetime import date
from enum import Enum
from typing import Optional

from sqlalchemy import event
from sqlalchemy.engine.url import make_url
from sqlmodel import Field, Session, SQLModel, create_engine

from env import database_url, load_env

load_env()


# --- Tables ---
class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


def _new_id() -> str:
    return str(uuid.uuid4())


def _today() -> str:
    return date.today().isoformat()


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: str = Field(default_factory=_new_id, primary_key=True)
    name: str = ""
    email: str = Field(index=True, unique=True)
    password_hash: str


class Customer(SQLModel, table=True):
    __tablename__ = "customers"

    id: str = Field(default_factory=_new_id, primary_key=True)
    name: str
    email: str = ""
    image_url: str = ""


class Category(SQLModel, table=True):
    __tablename__ = "categories"

    id: str = Field(default_factory=_new_id, primary_key=True)
    name: str = Field(index=True, unique=True)


class Invoice(SQLModel, table=True):
    __tablename__ = "invoices"

    id: str = Field(default_factory=_new_id, primary_key=True)
    customer_id: str = Field(foreign_key="customers.id", index=True)
    # Minor currency units (cents).
    amount: int
    status: str = InvoiceStatus.PENDING.value
    date: str = Field(default_factory=_today)
    category_id: Optional[str] = Field(default=None, foreign_key="categories.id")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _build_engine(url: str):
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)
    if parsed.database and parsed.database != ":memory:":
        db_dir = os.path.dirname(parsed.database)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
    engine = create_engine(url, connect_args={"check_same_thread": False})
    # SQLite leaves foreign keys unchecked unless each connection turns them on.
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


engine = _build_engine(database_url())


def init_db() -> None:
    # TODO: Replace SQLModel.metadata.create_all with Alembic migrations when the schema evolves.
    SQLModel.metadata.create_all(engine)


@contextmanager
def get_session():
    with Session(engine) as session:
        yield session
