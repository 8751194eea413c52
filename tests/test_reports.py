from datetime import date

from fleet_app.bookings import create_booking, update_status
from fleet_app.reports import (
    BOOKING_COLUMNS,
    booking_status_counts,
    bookings_frame,
    dashboard_stats,
    payment_method_chart,
    payments_frame,
    revenue_by_day_chart,
    todays_pickups,
)
from fleet_db.models import BookingStatus

TODAY = date(2024, 1, 10)


def test_dashboard_stats_from_seed(store):
    stats = dashboard_stats(store)

    assert stats.available_vehicles == 1
    assert stats.active_rentals == 0
    assert stats.total_customers == 3
    assert stats.revenue == 850 + 1700


def test_todays_pickups_skip_cancelled(store):
    kept = create_booking(store, "c1", "v1", TODAY, TODAY, 850)
    dropped = create_booking(store, "c2", "v1", TODAY, TODAY, 850)
    update_status(store, dropped.id, BookingStatus.CANCELLED)

    assert [b.id for b in todays_pickups(store, TODAY)] == [kept.id]


def test_bookings_frame_uses_display_values(store):
    df = bookings_frame(store.bookings)

    assert list(df.columns) == BOOKING_COLUMNS
    assert set(df["status"]) == {"Completed", "Pending"}


def test_empty_frames_keep_columns():
    assert list(bookings_frame([]).columns) == BOOKING_COLUMNS
    assert payments_frame([]).empty


def test_booking_status_counts(store):
    df = booking_status_counts(store.bookings)
    counts = dict(zip(df["status"], df["count"]))
    assert counts == {"Active": 0, "Pending": 1, "Completed": 1, "Cancelled": 0}


def test_charts_build(store):
    assert payment_method_chart(store.payments) is not None
    assert revenue_by_day_chart(store.payments) is not None
    assert revenue_by_day_chart([]) is not None
