from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from fleet_app.dates import coerce_amount
from fleet_app.errors import Outcome, ValidationError
from fleet_db.models import DEFAULT_VEHICLE_IMAGE, Vehicle, VehicleStatus
from fleet_db.store import RentalStore, new_id

logger = logging.getLogger(__name__)


def get_vehicle(store: RentalStore, vehicle_id: str) -> Optional[Vehicle]:
    for v in store.vehicles:
        if v.id == vehicle_id:
            return v
    return None


def set_vehicle_status(store: RentalStore, vehicle_id: str, status: VehicleStatus) -> Outcome:
    try:
        status = VehicleStatus(status)
    except ValueError:
        raise ValidationError(f"Unknown vehicle status: {status!r}")
    if get_vehicle(store, vehicle_id) is None:
        logger.warning("Vehicle %s not found, status left unchanged", vehicle_id)
        return Outcome.NOT_FOUND

    store.vehicles = [
        replace(v, status=status) if v.id == vehicle_id else v
        for v in store.vehicles
    ]
    logger.info("Vehicle %s -> %s", vehicle_id, status.value)
    return Outcome.OK


def replace_vehicle(store: RentalStore, vehicle: Vehicle) -> Outcome:
    """Admin edit: swaps the whole record, status included."""
    if get_vehicle(store, vehicle.id) is None:
        return Outcome.NOT_FOUND
    store.vehicles = [vehicle if v.id == vehicle.id else v for v in store.vehicles]
    return Outcome.OK


def add_vehicle(
    store: RentalStore,
    make: str,
    model: str,
    plate: str,
    daily_rate: float,
    status: VehicleStatus = VehicleStatus.AVAILABLE,
    image: str = DEFAULT_VEHICLE_IMAGE,
) -> Vehicle:
    rate = coerce_amount(daily_rate, "daily rate")
    if rate <= 0:
        raise ValidationError("Daily rate must be a positive amount.")

    vehicle = Vehicle(
        id=new_id("v"),
        make=make,
        model=model,
        plate=plate,
        daily_rate=rate,
        status=VehicleStatus(status),
        image=image or DEFAULT_VEHICLE_IMAGE,
    )
    store.vehicles = [*store.vehicles, vehicle]
    return vehicle


def delete_vehicle(store: RentalStore, vehicle_id: str) -> Outcome:
    # Open bookings keep pointing at the deleted id.
    if get_vehicle(store, vehicle_id) is None:
        return Outcome.NOT_FOUND
    store.vehicles = [v for v in store.vehicles if v.id != vehicle_id]
    return Outcome.OK


def bookable_vehicles(store: RentalStore) -> List[Vehicle]:
    """Vehicles offered on the public site: everything not in maintenance."""
    return [v for v in store.vehicles if v.status != VehicleStatus.MAINTENANCE]
