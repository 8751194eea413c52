from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from fleet_app.bookings import get_booking
from fleet_app.dates import DateLike, coerce_amount, coerce_date
from fleet_app.errors import Outcome, ValidationError
from fleet_db.models import Payment, PaymentMethod, PaymentStatus
from fleet_db.store import RentalStore, new_id

logger = logging.getLogger(__name__)


def get_payment(store: RentalStore, payment_id: str) -> Optional[Payment]:
    for p in store.payments:
        if p.id == payment_id:
            return p
    return None


def record_payment(
    store: RentalStore,
    booking_id: str,
    amount: float,
    date: DateLike,
    method,
    status,
) -> Payment:
    """
    Logs a payment against an existing booking.

    The amount is not compared with the booking total and several payments
    may reference the same booking.
    """
    booking = get_booking(store, booking_id)
    if booking is None:
        raise ValidationError(f"Booking {booking_id} does not exist.")

    try:
        method = PaymentMethod(method)
        status = PaymentStatus(status)
    except ValueError as e:
        raise ValidationError(str(e))

    payment = Payment(
        id=new_id("p"),
        booking_id=booking.id,
        customer_name=booking.customer_name,
        amount=coerce_amount(amount),
        date=coerce_date(date, "payment date"),
        method=method,
        status=status,
    )
    store.payments = [payment, *store.payments]
    logger.info("Recorded %s payment %s of %.2f for booking %s", status.value, payment.id, payment.amount, booking.id)
    return payment


def edit_payment(store: RentalStore, payment: Payment) -> Outcome:
    if get_payment(store, payment.id) is None:
        return Outcome.NOT_FOUND
    store.payments = [payment if p.id == payment.id else p for p in store.payments]
    return Outcome.OK


def delete_payment(store: RentalStore, payment_id: str) -> Outcome:
    if get_payment(store, payment_id) is None:
        return Outcome.NOT_FOUND
    store.payments = [p for p in store.payments if p.id != payment_id]
    return Outcome.OK


# ----------------- AGGREGATES (always recomputed) ------------------------

def total_collected(payments: Iterable[Payment]) -> float:
    return sum(p.amount for p in payments if p.status == PaymentStatus.COMPLETED)


def pending_revenue(payments: Iterable[Payment]) -> float:
    return sum(p.amount for p in payments if p.status == PaymentStatus.PENDING)


def method_breakdown(payments: Iterable[Payment]) -> Dict[str, int]:
    counts = {m.value: 0 for m in PaymentMethod}
    for p in payments:
        counts[p.method.value] += 1
    return counts


def search_payments(payments: Iterable[Payment], term: str) -> List[Payment]:
    term = term.strip().lower()
    if not term:
        return list(payments)
    return [p for p in payments if term in p.customer_name.lower() or term in p.id.lower()]
