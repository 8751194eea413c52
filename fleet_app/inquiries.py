from __future__ import annotations

from dataclasses import replace

from fleet_app.errors import Outcome
from fleet_db.models import InquiryStatus
from fleet_db.store import RentalStore


def _set_status(store: RentalStore, inquiry_id: int, status: InquiryStatus) -> Outcome:
    if not any(i.id == inquiry_id for i in store.inquiries):
        return Outcome.NOT_FOUND
    store.inquiries = [
        replace(i, status=status) if i.id == inquiry_id else i
        for i in store.inquiries
    ]
    return Outcome.OK


def resolve_inquiry(store: RentalStore, inquiry_id: int) -> Outcome:
    return _set_status(store, inquiry_id, InquiryStatus.RESOLVED)


def mark_read(store: RentalStore, inquiry_id: int) -> Outcome:
    return _set_status(store, inquiry_id, InquiryStatus.READ)


def delete_inquiry(store: RentalStore, inquiry_id: int) -> Outcome:
    if not any(i.id == inquiry_id for i in store.inquiries):
        return Outcome.NOT_FOUND
    store.inquiries = [i for i in store.inquiries if i.id != inquiry_id]
    return Outcome.OK
