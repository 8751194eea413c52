# fleet_db/store.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List
import uuid

from fleet_db.models import Booking, Customer, Inquiry, Payment, Vehicle


def new_id(prefix: str) -> str:
    """Returns a fresh identifier such as 'b3f9a0c1d2e4'."""
    return f"{prefix}{uuid.uuid4().hex[:12]}"


@dataclass
class RentalStore:
    """
    The single owning context for all rental data.

    Every rules function takes the store explicitly and mutates it by
    replacing a whole collection, never by editing a list in place.
    One logical writer is assumed; there is no locking.
    """

    vehicles: List[Vehicle] = field(default_factory=list)
    customers: List[Customer] = field(default_factory=list)
    bookings: List[Booking] = field(default_factory=list)
    payments: List[Payment] = field(default_factory=list)
    inquiries: List[Inquiry] = field(default_factory=list)
