"""Booking lifecycle: the only code that writes booking status and, through
it, moves vehicles between Available and Rented."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from fleet_app.customers import get_customer
from fleet_app.dates import DateLike, coerce_amount, coerce_date
from fleet_app.errors import Outcome, ValidationError
from fleet_app.inventory import get_vehicle, set_vehicle_status
from fleet_db.models import Booking, BookingStatus, VehicleStatus
from fleet_db.store import RentalStore, new_id

logger = logging.getLogger(__name__)


# booking status -> vehicle status; Pending has no side effect
VEHICLE_STATUS_ON_TRANSITION = {
    BookingStatus.COMPLETED: VehicleStatus.AVAILABLE,
    BookingStatus.CANCELLED: VehicleStatus.AVAILABLE,
    BookingStatus.ACTIVE: VehicleStatus.RENTED,
}

STATUS_FILTERS = ["All", *[s.value for s in BookingStatus]]


def get_booking(store: RentalStore, booking_id: str) -> Optional[Booking]:
    for b in store.bookings:
        if b.id == booking_id:
            return b
    return None


def _parse_status(value) -> BookingStatus:
    try:
        return BookingStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown booking status: {value!r}")


def create_booking(
    store: RentalStore,
    customer_id: str,
    vehicle_id: str,
    pickup_date: DateLike,
    return_date: DateLike,
    total_amount: float,
) -> Booking:
    """
    Creates an Active booking.

    Customer name and vehicle name are copied onto the booking so history
    keeps showing what was booked even after the records are edited.
    The vehicle's own status is left alone; only update_status moves it.
    """
    customer = get_customer(store, customer_id)
    if customer is None:
        raise ValidationError(f"Customer {customer_id} does not exist.")
    vehicle = get_vehicle(store, vehicle_id)
    if vehicle is None:
        raise ValidationError(f"Vehicle {vehicle_id} does not exist.")

    booking = Booking(
        id=new_id("b"),
        customer_id=customer.id,
        vehicle_id=vehicle.id,
        customer_name=customer.name,
        vehicle_name=vehicle.display_name,
        pickup_date=coerce_date(pickup_date, "pickup date"),
        return_date=coerce_date(return_date, "return date"),
        status=BookingStatus.ACTIVE,
        total_amount=coerce_amount(total_amount, "total amount"),
    )
    store.bookings = [booking, *store.bookings]
    logger.info("Created booking %s for %s (%s)", booking.id, customer.name, vehicle.display_name)
    return booking


def update_status(store: RentalStore, booking_id: str, new_status) -> Outcome:
    """
    Moves a booking to `new_status` and applies the vehicle side effect.

    No transition is refused because of the vehicle's current state.
    An unknown booking id changes nothing and returns Outcome.NOT_FOUND.
    """
    status = _parse_status(new_status)
    booking = get_booking(store, booking_id)
    if booking is None:
        logger.warning("Booking %s not found, status update ignored", booking_id)
        return Outcome.NOT_FOUND

    store.bookings = [
        replace(b, status=status) if b.id == booking_id else b
        for b in store.bookings
    ]
    logger.info("Booking %s -> %s", booking_id, status.value)

    vehicle_status = VEHICLE_STATUS_ON_TRANSITION.get(status)
    if vehicle_status is not None:
        set_vehicle_status(store, booking.vehicle_id, vehicle_status)

    return Outcome.OK


def return_vehicle(store: RentalStore, booking_id: str) -> Outcome:
    return update_status(store, booking_id, BookingStatus.COMPLETED)


def edit_booking(store: RentalStore, booking: Booking) -> Outcome:
    """Full replace by id. Never touches vehicle status, even if the status field differs."""
    if get_booking(store, booking.id) is None:
        return Outcome.NOT_FOUND
    store.bookings = [booking if b.id == booking.id else b for b in store.bookings]
    return Outcome.OK


def delete_booking(store: RentalStore, booking_id: str) -> Outcome:
    # The linked vehicle keeps whatever status it had.
    if get_booking(store, booking_id) is None:
        return Outcome.NOT_FOUND
    store.bookings = [b for b in store.bookings if b.id != booking_id]
    return Outcome.OK


def filter_bookings(store: RentalStore, status: str = "All", search: str = "") -> List[Booking]:
    term = search.strip().lower()
    results = []
    for b in store.bookings:
        if status != "All" and b.status.value != status:
            continue
        if term and not (
            term in b.customer_name.lower()
            or term in b.vehicle_name.lower()
            or term in b.id.lower()
        ):
            continue
        results.append(b)
    return results
