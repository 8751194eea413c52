# fleet_db/models.py
"""
Entities held in the in-process rental store.

Nothing here is persisted: a restart resets every collection to the seed
set in fleet_db/seed.py.

Vehicle
- id, make, model, plate, daily_rate, status, image

Customer
- id, name, email (dedup key, case-insensitive), phone, total_rentals

Booking
- id, customer_id, vehicle_id
- customer_name, vehicle_name (snapshots taken at creation, never re-synced)
- pickup_date, return_date, status, total_amount

Payment
- id, booking_id, customer_name (snapshot), amount, date, method, status

Inquiry
- id (int), name, subject, message, date, status
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class VehicleStatus(str, Enum):
    AVAILABLE = "Available"
    RENTED = "Rented"
    MAINTENANCE = "Maintenance"


class BookingStatus(str, Enum):
    ACTIVE = "Active"
    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "Credit Card"
    EFT = "EFT"
    CASH = "Cash"


class PaymentStatus(str, Enum):
    COMPLETED = "Completed"
    PENDING = "Pending"
    FAILED = "Failed"


class InquiryStatus(str, Enum):
    NEW = "New"
    READ = "Read"
    REPLIED = "Replied"
    RESOLVED = "Resolved"


DEFAULT_VEHICLE_IMAGE = "https://picsum.photos/200/120"


@dataclass
class Vehicle:
    id: str
    make: str
    model: str
    plate: str
    daily_rate: float
    status: VehicleStatus = VehicleStatus.AVAILABLE
    image: str = DEFAULT_VEHICLE_IMAGE

    @property
    def display_name(self) -> str:
        return f"{self.make} {self.model}"


@dataclass
class Customer:
    id: str
    name: str
    email: str
    phone: str
    total_rentals: int = 0


@dataclass
class Booking:
    id: str
    customer_id: str
    vehicle_id: str
    customer_name: str
    vehicle_name: str
    pickup_date: date
    return_date: date
    status: BookingStatus
    total_amount: float


@dataclass
class Payment:
    id: str
    booking_id: str
    customer_name: str
    amount: float
    date: date
    method: PaymentMethod
    status: PaymentStatus


@dataclass
class Inquiry:
    id: int
    name: str
    subject: str
    message: str
    date: date
    status: InquiryStatus = InquiryStatus.NEW


@dataclass
class DashboardStats:
    available_vehicles: int
    active_rentals: int
    total_customers: int
    revenue: float
