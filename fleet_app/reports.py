from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import List, Optional

import pandas as pd
import plotly.express as px

from fleet_app.payments import method_breakdown
from fleet_db.models import (
    Booking,
    BookingStatus,
    DashboardStats,
    Payment,
    VehicleStatus,
)
from fleet_db.store import RentalStore


BOOKING_COLUMNS = [
    "id", "customer_name", "vehicle_name", "pickup_date", "return_date", "status", "total_amount",
]
PAYMENT_COLUMNS = [
    "id", "booking_id", "customer_name", "amount", "date", "method", "status",
]


def dashboard_stats(store: RentalStore) -> DashboardStats:
    # Dashboard revenue is the sum of booked totals, not of collected payments.
    return DashboardStats(
        available_vehicles=sum(1 for v in store.vehicles if v.status == VehicleStatus.AVAILABLE),
        active_rentals=sum(1 for b in store.bookings if b.status == BookingStatus.ACTIVE),
        total_customers=len(store.customers),
        revenue=sum(b.total_amount for b in store.bookings),
    )


def todays_pickups(store: RentalStore, today: Optional[date] = None) -> List[Booking]:
    today = today or date.today()
    return [
        b for b in store.bookings
        if b.pickup_date == today and b.status != BookingStatus.CANCELLED
    ]


def _frame(records: list, columns: List[str]) -> pd.DataFrame:
    if not records:
        return pd.DataFrame(columns=columns)
    df = pd.DataFrame([asdict(r) for r in records])
    for col in ("status", "method"):
        if col in df.columns:
            df[col] = df[col].map(lambda v: getattr(v, "value", v))
    return df[columns]


def bookings_frame(bookings: List[Booking]) -> pd.DataFrame:
    return _frame(bookings, BOOKING_COLUMNS)


def payments_frame(payments: List[Payment]) -> pd.DataFrame:
    return _frame(payments, PAYMENT_COLUMNS)


def booking_status_counts(bookings: List[Booking]) -> pd.DataFrame:
    counts = {s.value: 0 for s in BookingStatus}
    for b in bookings:
        counts[b.status.value] += 1
    return pd.DataFrame({"status": list(counts), "count": list(counts.values())})


def payment_method_chart(payments: List[Payment]):
    breakdown = method_breakdown(payments)
    df = pd.DataFrame({"method": list(breakdown), "count": list(breakdown.values())})
    return px.pie(df, names="method", values="count", title="Payment Methods")


def booking_status_chart(bookings: List[Booking]):
    return px.bar(booking_status_counts(bookings), x="status", y="count", title="Bookings by Status")


def revenue_by_day_chart(payments: List[Payment]):
    """Collected revenue per payment date."""
    df = payments_frame(payments)
    df = df[df["status"] == "Completed"]
    if df.empty:
        daily = pd.DataFrame({"date": [], "amount": []})
    else:
        daily = df.groupby("date", as_index=False)["amount"].sum()
    return px.area(daily, x="date", y="amount", title="Collected Revenue")
