from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional
import logging
import re

from email_validator import validate_email as _validate_email, EmailNotValidError

from fleet_app.bookings import create_booking
from fleet_app.customers import add_customer, find_customer_by_email
from fleet_app.dates import coerce_amount, coerce_date, parse_date_str
from fleet_app.errors import ValidationError
from fleet_app.inventory import get_vehicle
from fleet_app.payments import record_payment
from fleet_db.models import Booking, Customer, Payment, PaymentMethod, PaymentStatus
from fleet_db.store import RentalStore

logger = logging.getLogger(__name__)


INTAKE_FIELDS = [
    "name",
    "email",
    "phone",
    "pickup_date",
    "return_date",
]


@dataclass
class IntakeRequest:
    """What a website visitor submits from the booking modal."""

    name: str
    email: str
    phone: str
    vehicle_id: str
    pickup_date: str
    return_date: str
    total_amount: float
    card_number: Optional[str] = None
    expiry: Optional[str] = None
    cvv: Optional[str] = None

    @property
    def has_payment(self) -> bool:
        return bool(self.card_number and self.card_number.strip())


@dataclass
class IntakeResult:
    customer: Customer
    booking: Booking
    payment: Optional[Payment]
    new_customer: bool


# ----------------- VALIDATORS ------------------------

def validate_email(email: str) -> bool:
    try:
        _validate_email(email, check_deliverability=False)
        return True
    except EmailNotValidError:
        return False


def get_missing_fields(request: IntakeRequest) -> List[str]:
    missing = []
    for f in INTAKE_FIELDS:
        if getattr(request, f, None) in (None, ""):
            missing.append(f)
    return missing


def validate_intake(request: IntakeRequest) -> Dict[str, str]:
    """Field -> message for everything wrong with the form. Empty when valid."""
    errors: Dict[str, str] = {}

    for f in get_missing_fields(request):
        errors[f] = f"Please provide {f.replace('_', ' ')}."

    if "email" not in errors and not validate_email(request.email.strip()):
        errors["email"] = "Invalid email. Please try format: name@example.com"

    if "phone" not in errors and not re.sub(r"\D", "", request.phone):
        errors["phone"] = "Invalid phone number."

    for f in ("pickup_date", "return_date"):
        if f not in errors and parse_date_str(getattr(request, f)) is None:
            errors[f] = "Invalid date format. Please use YYYY-MM-DD."

    return errors


# ----------------- PRICING ------------------------

def calculate_total(daily_rate: float, pickup: Optional[date], return_: Optional[date]) -> float:
    """Rate times rental days; a same-day rental or missing dates count as one day."""
    if not pickup or not return_:
        return daily_rate
    days = abs((return_ - pickup).days) or 1
    return daily_rate * days


# ----------------- INTAKE ------------------------

def handle_public_booking(store: RentalStore, request: IntakeRequest) -> IntakeResult:
    """
    Books a vehicle for a website visitor.

    The customer is reused when the email matches an existing one
    (case-insensitive), otherwise created with zero rentals. The booking is
    always Active and no availability check is made. When card details were
    entered a Completed credit card payment for the full total is logged;
    no card is actually charged.
    """
    vehicle = get_vehicle(store, request.vehicle_id)
    if vehicle is None:
        raise ValidationError(f"Vehicle {request.vehicle_id} does not exist.")
    pickup = coerce_date(request.pickup_date, "pickup date")
    return_ = coerce_date(request.return_date, "return date")
    total = coerce_amount(request.total_amount, "total amount")

    customer = find_customer_by_email(store, request.email)
    new_customer = customer is None
    if new_customer:
        customer = add_customer(
            store,
            name=request.name.strip(),
            email=request.email.strip(),
            phone=request.phone.strip(),
        )
        logger.info("New customer %s from public booking", customer.id)

    booking = create_booking(
        store,
        customer_id=customer.id,
        vehicle_id=vehicle.id,
        pickup_date=pickup,
        return_date=return_,
        total_amount=total,
    )

    payment = None
    if request.has_payment:
        payment = record_payment(
            store,
            booking_id=booking.id,
            amount=booking.total_amount,
            date=date.today(),
            method=PaymentMethod.CREDIT_CARD,
            status=PaymentStatus.COMPLETED,
        )

    return IntakeResult(
        customer=customer,
        booking=booking,
        payment=payment,
        new_customer=new_customer,
    )


def generate_confirmation_text(result: IntakeResult) -> str:
    booking = result.booking
    paid = "Paid by card" if result.payment else "Pay on collection"
    return (
        f"- **Booking ID:** {booking.id}\n"
        f"- **Name:** {booking.customer_name}\n"
        f"- **Vehicle:** {booking.vehicle_name}\n"
        f"- **Pickup:** {booking.pickup_date}\n"
        f"- **Return:** {booking.return_date}\n"
        f"- **Total:** R{booking.total_amount:,.2f}\n"
        f"- **Payment:** {paid}"
    )
