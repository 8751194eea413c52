from dataclasses import replace
from datetime import date

import pytest

from fleet_app.errors import Outcome, ValidationError
from fleet_app.payments import (
    delete_payment,
    edit_payment,
    get_payment,
    method_breakdown,
    pending_revenue,
    record_payment,
    search_payments,
    total_collected,
)
from fleet_db.models import PaymentMethod, PaymentStatus


def test_record_payment_denormalizes_customer_name(store):
    payment = record_payment(store, "b2", 1700, "2024-01-11", "EFT", "Pending")

    assert payment.customer_name == "Sarah Connor"
    assert payment.method == PaymentMethod.EFT
    assert payment.status == PaymentStatus.PENDING
    assert payment.date == date(2024, 1, 11)
    assert store.payments[0] is payment


def test_record_payment_unknown_booking_leaves_payments_untouched(store):
    before = store.payments

    with pytest.raises(ValidationError):
        record_payment(store, "missing", 100, "2024-01-11", "Cash", "Completed")

    assert store.payments is before


def test_record_payment_allows_overpayment_and_duplicates(store):
    record_payment(store, "b1", 5000, date(2024, 1, 11), PaymentMethod.CASH, PaymentStatus.COMPLETED)
    record_payment(store, "b1", 5000, date(2024, 1, 11), PaymentMethod.CASH, PaymentStatus.COMPLETED)

    assert len([p for p in store.payments if p.booking_id == "b1"]) == 3


def test_record_payment_rejects_unknown_method(store):
    with pytest.raises(ValidationError):
        record_payment(store, "b1", 10, "2024-01-11", "Bitcoin", "Completed")


def test_totals_only_count_matching_status(store):
    record_payment(store, "b2", 1700, "2024-01-11", "EFT", "Pending")
    record_payment(store, "b2", 300, "2024-01-11", "Cash", "Failed")
    record_payment(store, "b2", 150.5, "2024-01-11", "Cash", "Completed")

    assert total_collected(store.payments) == 850 + 150.5
    assert pending_revenue(store.payments) == 1700


def test_totals_are_recomputed_after_edit(store):
    payment = get_payment(store, "p1")
    assert total_collected(store.payments) == 850

    edit_payment(store, replace(payment, status=PaymentStatus.FAILED))

    assert total_collected(store.payments) == 0


def test_delete_payment(store):
    assert delete_payment(store, "p1") == Outcome.OK
    assert store.payments == []
    assert delete_payment(store, "p1") == Outcome.NOT_FOUND


def test_edit_unknown_payment_is_not_found(store):
    ghost = replace(get_payment(store, "p1"), id="ghost")
    assert edit_payment(store, ghost) == Outcome.NOT_FOUND


def test_method_breakdown_lists_every_method(store):
    record_payment(store, "b2", 100, "2024-01-11", "Cash", "Completed")
    assert method_breakdown(store.payments) == {"Credit Card": 1, "EFT": 0, "Cash": 1}


def test_search_payments(store):
    assert [p.id for p in search_payments(store.payments, "THABO")] == ["p1"]
    assert search_payments(store.payments, "nobody") == []
    assert len(search_payments(store.payments, "")) == 1


def test_record_payment_rejects_non_numeric_amount(store):
    before = store.payments
    with pytest.raises(ValidationError):
        record_payment(store, "b1", "ten", "2024-01-11", "Cash", "Completed")
    assert store.payments is before
