from __future__ import annotations

from typing import Optional

from fleet_app.errors import Outcome
from fleet_db.models import Customer
from fleet_db.store import RentalStore, new_id


def get_customer(store: RentalStore, customer_id: str) -> Optional[Customer]:
    for c in store.customers:
        if c.id == customer_id:
            return c
    return None


def find_customer_by_email(store: RentalStore, email: str) -> Optional[Customer]:
    """Email is the natural dedup key and is matched case-insensitively."""
    wanted = email.strip().lower()
    for c in store.customers:
        if c.email.lower() == wanted:
            return c
    return None


def add_customer(store: RentalStore, name: str, email: str, phone: str) -> Customer:
    customer = Customer(
        id=new_id("c"),
        name=name,
        email=email,
        phone=phone,
        total_rentals=0,
    )
    store.customers = [*store.customers, customer]
    return customer


def edit_customer(
    store: RentalStore,
    customer_id: str,
    name: str,
    email: str,
    phone: str,
    total_rentals: Optional[int] = None,
) -> Outcome:
    existing = get_customer(store, customer_id)
    if existing is None:
        return Outcome.NOT_FOUND

    updated = Customer(
        id=customer_id,
        name=name,
        email=email,
        phone=phone,
        total_rentals=existing.total_rentals if total_rentals is None else total_rentals,
    )
    store.customers = [updated if c.id == customer_id else c for c in store.customers]
    return Outcome.OK


def delete_customer(store: RentalStore, customer_id: str) -> Outcome:
    if get_customer(store, customer_id) is None:
        return Outcome.NOT_FOUND
    store.customers = [c for c in store.customers if c.id != customer_id]
    return Outcome.OK
