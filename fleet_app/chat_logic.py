# fleet_app/chat_logic.py

from __future__ import annotations
from dataclasses import asdict
from typing import Literal, Dict, Any, List
import json

from fleet_db.models import Booking, Vehicle

Role = Literal["user", "assistant"]

COMPANY_DETAILS = (
    "Company: KwasaShuttle Rentals.\n"
    "Location: 36 Bucharest str, Johannesburg, 2188.\n"
    "Email: zezenteyi99@gmail.com.\n"
    "Primary Phone: 073 585 8622.\n"
    "Secondary Phone: 061 287 3693."
)

RENTAL_REQUIREMENTS = "Requirements: 21+ age, 2+ years license, ID, Proof of residence."

SUPPORT_PERSONA = "Customer Support Agent"


def build_support_context(vehicles: List[Vehicle]) -> str:
    """Context handed to the AI for website visitors: company, fleet with rates, requirements."""
    vehicle_list = "\n".join(
        f"- {v.make} {v.model}: R{v.daily_rate:g}/day" for v in vehicles
    )
    return f"{COMPANY_DETAILS}\nFleet:\n{vehicle_list}\n{RENTAL_REQUIREMENTS}"


def build_admin_context(vehicles: List[Vehicle], bookings: List[Booking]) -> str:
    return (
        f"Vehicles: {json.dumps([asdict(v) for v in vehicles], default=str)}\n"
        f"Bookings: {json.dumps([asdict(b) for b in bookings], default=str)}"
    )


def store_message(history: List[Dict[str, Any]], role: Role, content: str, max_messages: int = 25) -> None:
    history.append({"role": role, "content": content})
    if len(history) > max_messages:
        del history[: len(history) - max_messages]

