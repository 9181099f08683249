from __future__ import annotations

import logging

from sqlmodel import select

from data import Category, Customer, Invoice, get_session
from services.auth import ensure_owner_user

logger = logging.getLogger(__name__)

DEMO_CUSTOMERS = [
    ("Evil Rabbit", "evil@rabbit.com"),
    ("Delba de Oliveira", "delba@oliveira.com"),
    ("Lee Robinson", "lee@robinson.com"),
    ("Michael Novotny", "michael@novotny.com"),
    ("Amy Burns", "amy@burns.com"),
    ("Balazs Orban", "balazs@orban.com"),
]

DEMO_CATEGORIES = ["Consulting", "Hardware", "Hosting", "Licenses", "Support"]

# (customer index, amount in cents, status, date, category name)
DEMO_INVOICES = [
    (0, 15795, "pending", "2022-12-06", "Consulting"),
    (1, 20348, "pending", "2022-11-14", "Hardware"),
    (4, 3040, "paid", "2022-10-29", "Hosting"),
    (3, 44800, "paid", "2023-09-10", "Licenses"),
    (5, 34577, "pending", "2023-08-05", "Support"),
    (2, 54246, "pending", "2023-07-16", "Consulting"),
    (0, 666, "pending", "2023-06-27", "Hosting"),
    (3, 32545, "paid", "2023-06-09", "Hardware"),
    (4, 1250, "paid", "2023-06-17", "Support"),
    (5, 8546, "paid", "2023-06-07", "Licenses"),
    (1, 500, "paid", "2023-08-19", "Consulting"),
    (5, 8945, "paid", "2023-06-03", "Hosting"),
    (2, 1000, "paid", "2022-06-05", "Support"),
]


def ensure_seed_data() -> bool:
    """Insert demo customers, categories and invoices into an empty store."""
    ensure_owner_user()
    with get_session() as session:
        if session.exec(select(Customer)).first() is not None:
            return False

        customers = [Customer(name=name, email=email) for name, email in DEMO_CUSTOMERS]
        categories = {name: Category(name=name) for name in DEMO_CATEGORIES}
        session.add_all(customers)
        session.add_all(categories.values())
        session.flush()

        for customer_index, amount, status, invoice_date, category_name in DEMO_INVOICES:
            session.add(
                Invoice(
                    customer_id=customers[customer_index].id,
                    amount=amount,
                    status=status,
                    date=invoice_date,
                    category_id=categories[category_name].id,
                )
            )
        session.commit()
    logger.info(
        "ensure_seed_data.seeded",
        extra={"customers": len(DEMO_CUSTOMERS), "invoices": len(DEMO_INVOICES)},
    )
    return True
