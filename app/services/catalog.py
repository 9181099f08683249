from __future__ import annotations

import logging

from sqlmodel import select

from data import Category, Customer, get_session

logger = logging.getLogger(__name__)


def fetch_customers() -> list[Customer]:
    with get_session() as session:
        return list(session.exec(select(Customer).order_by(Customer.name)))


def fetch_categories() -> list[Category]:
    with get_session() as session:
        return list(session.exec(select(Category).order_by(Category.name)))


def fetch_category_id(category_name: str | None) -> str | None:
    name = (category_name or "").strip()
    if not name:
        return None
    with get_session() as session:
        category = session.exec(select(Category).where(Category.name == name)).first()
    if category is None:
        logger.warning("fetch_category_id.not_found", extra={"category_name": name})
        return None
    return category.id
