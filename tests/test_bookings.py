"""
Booking lifecycle rules: creation snapshots, status transitions and their
effect on vehicle availability, and the edit/delete footprints.
"""
from dataclasses import replace
from datetime import date

import pytest

from fleet_app.bookings import (
    create_booking,
    delete_booking,
    edit_booking,
    filter_bookings,
    get_booking,
    return_vehicle,
    update_status,
)
from fleet_app.customers import edit_customer
from fleet_app.errors import Outcome, ValidationError
from fleet_app.inventory import get_vehicle, replace_vehicle, set_vehicle_status
from fleet_db.models import BookingStatus, VehicleStatus


def test_create_booking_snapshots_names_and_starts_active(store):
    booking = create_booking(store, "c3", "v1", "2024-02-01", "2024-02-03", 1700)

    assert booking.status == BookingStatus.ACTIVE
    assert booking.customer_name == "John Doe"
    assert booking.vehicle_name == "Mitsubishi Xpander (7 Seater)"
    assert booking.pickup_date == date(2024, 2, 1)
    assert store.bookings[0] is booking


def test_create_booking_leaves_vehicle_status_alone(store):
    create_booking(store, "c1", "v1", date(2024, 2, 1), date(2024, 2, 2), 850)
    assert get_vehicle(store, "v1").status == VehicleStatus.AVAILABLE


@pytest.mark.parametrize("customer_id, vehicle_id", [("nope", "v1"), ("c1", "nope")])
def test_create_booking_rejects_unknown_references(store, customer_id, vehicle_id):
    before = list(store.bookings)
    with pytest.raises(ValidationError):
        create_booking(store, customer_id, vehicle_id, "2024-02-01", "2024-02-02", 850)
    assert store.bookings == before


def test_snapshot_survives_customer_edit(store):
    booking = create_booking(store, "c1", "v1", "2024-02-01", "2024-02-02", 850)
    edit_customer(store, "c1", "Thabo M.", "thabo@example.com", "082 123 4567")

    assert get_booking(store, booking.id).customer_name == "Thabo Mbeki"


@pytest.mark.parametrize("status", [BookingStatus.COMPLETED, BookingStatus.CANCELLED])
def test_closing_a_booking_frees_the_vehicle(store, status):
    set_vehicle_status(store, "v1", VehicleStatus.RENTED)

    assert update_status(store, "b2", status) == Outcome.OK
    assert get_booking(store, "b2").status == status
    assert get_vehicle(store, "v1").status == VehicleStatus.AVAILABLE


def test_activating_a_booking_rents_the_vehicle(store):
    assert update_status(store, "b2", "Active") == Outcome.OK
    assert get_vehicle(store, "v1").status == VehicleStatus.RENTED


def test_pending_has_no_vehicle_side_effect(store):
    set_vehicle_status(store, "v1", VehicleStatus.RENTED)

    update_status(store, "b1", BookingStatus.PENDING)

    assert get_booking(store, "b1").status == BookingStatus.PENDING
    assert get_vehicle(store, "v1").status == VehicleStatus.RENTED


def test_transitions_ignore_current_vehicle_state(store):
    set_vehicle_status(store, "v1", VehicleStatus.MAINTENANCE)
    update_status(store, "b2", BookingStatus.ACTIVE)
    assert get_vehicle(store, "v1").status == VehicleStatus.RENTED

    # completing again while already Available is allowed
    update_status(store, "b1", BookingStatus.COMPLETED)
    update_status(store, "b1", BookingStatus.COMPLETED)
    assert get_vehicle(store, "v1").status == VehicleStatus.AVAILABLE


def test_update_status_unknown_booking_changes_nothing(store):
    snapshot = (
        list(store.vehicles), list(store.customers), list(store.bookings),
        list(store.payments), list(store.inquiries),
    )

    assert update_status(store, "missing", BookingStatus.ACTIVE) == Outcome.NOT_FOUND
    assert (
        store.vehicles, store.customers, store.bookings, store.payments, store.inquiries,
    ) == snapshot


def test_update_status_rejects_unknown_status(store):
    with pytest.raises(ValidationError):
        update_status(store, "b1", "Lost")


def test_update_status_with_deleted_vehicle_still_updates_booking(store):
    store.vehicles = []
    assert update_status(store, "b2", BookingStatus.ACTIVE) == Outcome.OK
    assert get_booking(store, "b2").status == BookingStatus.ACTIVE


def test_return_vehicle_completes_booking(store):
    update_status(store, "b2", BookingStatus.ACTIVE)
    assert return_vehicle(store, "b2") == Outcome.OK
    assert get_booking(store, "b2").status == BookingStatus.COMPLETED
    assert get_vehicle(store, "v1").status == VehicleStatus.AVAILABLE


def test_edit_booking_does_not_touch_vehicle(store):
    set_vehicle_status(store, "v1", VehicleStatus.RENTED)
    booking = get_booking(store, "b1")

    edited = replace(booking, total_amount=999, status=BookingStatus.CANCELLED)
    assert edit_booking(store, edited) == Outcome.OK

    assert get_booking(store, "b1").total_amount == 999
    assert get_vehicle(store, "v1").status == VehicleStatus.RENTED


def test_edit_unknown_booking_is_not_found(store):
    ghost = replace(get_booking(store, "b1"), id="ghost")
    assert edit_booking(store, ghost) == Outcome.NOT_FOUND
    assert get_booking(store, "ghost") is None


def test_delete_booking_keeps_vehicle_status(store):
    update_status(store, "b2", BookingStatus.ACTIVE)

    assert delete_booking(store, "b2") == Outcome.OK
    assert get_booking(store, "b2") is None
    assert get_vehicle(store, "v1").status == VehicleStatus.RENTED
    assert delete_booking(store, "b2") == Outcome.NOT_FOUND


def test_vehicle_edit_does_not_resync_booking_names(store):
    vehicle = get_vehicle(store, "v1")
    replace_vehicle(store, replace(vehicle, model="Xpander Cross"))
    assert get_booking(store, "b1").vehicle_name == "Mitsubishi Xpander"


def test_filter_bookings_by_status_and_search(store):
    assert [b.id for b in filter_bookings(store, "Pending")] == ["b2"]
    assert [b.id for b in filter_bookings(store, "All", "thabo")] == ["b1"]
    assert filter_bookings(store, "Cancelled") == []


def test_create_booking_rejects_non_numeric_amount(store):
    before = list(store.bookings)
    with pytest.raises(ValidationError):
        create_booking(store, "c1", "v1", "2024-02-01", "2024-02-02", "abc")
    assert store.bookings == before
