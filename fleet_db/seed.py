# fleet_db/seed.py

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from fleet_db.models import (
    Booking,
    BookingStatus,
    Customer,
    Inquiry,
    InquiryStatus,
    Payment,
    PaymentMethod,
    PaymentStatus,
    Vehicle,
    VehicleStatus,
)
from fleet_db.store import RentalStore


XPANDER_IMAGE = (
    "https://images.unsplash.com/photo-1629896564947-2b72186780c1"
    "?q=80&w=800&auto=format&fit=crop"
)


def build_seed_store(today: Optional[date] = None) -> RentalStore:
    """Fresh store holding the demo fleet, customers and bookings.

    Booking and payment dates are relative to `today` so the dashboard
    always has a return due and an upcoming pickup.
    """
    today = today or date.today()
    yesterday = today - timedelta(days=1)
    tomorrow = today + timedelta(days=1)

    vehicles = [
        Vehicle(
            id="v1",
            make="Mitsubishi",
            model="Xpander (7 Seater)",
            plate="KWA 202 GP",
            daily_rate=850,
            status=VehicleStatus.AVAILABLE,
            image=XPANDER_IMAGE,
        ),
    ]

    customers = [
        Customer(id="c1", name="Thabo Mbeki", email="thabo@example.com", phone="082 123 4567", total_rentals=5),
        Customer(id="c2", name="Sarah Connor", email="sarah@example.com", phone="071 987 6543", total_rentals=2),
        Customer(id="c3", name="John Doe", email="john@example.com", phone="063 555 1234", total_rentals=12),
    ]

    bookings = [
        Booking(
            id="b1", customer_id="c1", vehicle_id="v1",
            customer_name="Thabo Mbeki", vehicle_name="Mitsubishi Xpander",
            pickup_date=yesterday, return_date=today,
            status=BookingStatus.COMPLETED, total_amount=850,
        ),
        Booking(
            id="b2", customer_id="c2", vehicle_id="v1",
            customer_name="Sarah Connor", vehicle_name="Mitsubishi Xpander",
            pickup_date=tomorrow, return_date=today + timedelta(days=2),
            status=BookingStatus.PENDING, total_amount=1700,
        ),
    ]

    payments = [
        Payment(
            id="p1", booking_id="b1", customer_name="Thabo Mbeki",
            amount=850, date=yesterday,
            method=PaymentMethod.CREDIT_CARD, status=PaymentStatus.COMPLETED,
        ),
    ]

    inquiries = [
        Inquiry(
            id=1, name="Alice Walker", subject="Long term rental quote",
            message="Looking for a 7 seater for 3 months.",
            date=date(2023, 10, 25), status=InquiryStatus.NEW,
        ),
        Inquiry(
            id=2, name="Bob Smith", subject="Availability",
            message="Is the Xpander available next weekend?",
            date=date(2023, 10, 24), status=InquiryStatus.READ,
        ),
    ]

    return RentalStore(
        vehicles=vehicles,
        customers=customers,
        bookings=bookings,
        payments=payments,
        inquiries=inquiries,
    )
