from __future__ import annotations

from datetime import date
from typing import List, Sequence
import json
import logging

import google.generativeai as genai

from fleet_app.errors import ExternalServiceError
from fleet_db.models import Booking, BookingStatus, Vehicle, VehicleStatus

logger = logging.getLogger(__name__)


MODELS_TO_TRY = [
    "gemini-2.0-flash",
    "gemini-2.0-flash-lite",
    "gemini-flash-latest",
    "gemini-pro-latest",
]

ASK_FALLBACK = "I'm having trouble connecting to the server right now."
ASK_EMPTY = "I couldn't understand that."
BRIEFING_FALLBACK = "AI service is currently unavailable."
BRIEFING_EMPTY = "Unable to generate briefing."


def configure_gemini(api_key: str) -> None:
    genai.configure(api_key=api_key)


def _generate(prompt: str, models: Sequence[str] = MODELS_TO_TRY) -> str:
    """First model that answers wins. Raises ExternalServiceError when none do."""
    last_error = None
    for model_name in models:
        try:
            model = genai.GenerativeModel(model_name)
            response = model.generate_content(prompt)
            return (response.text or "").strip()
        except Exception as e:
            last_error = e
            logger.warning("Gemini model %s failed: %s", model_name, e)
            continue

    raise ExternalServiceError(f"All Gemini models failed. Last error: {last_error}")


# ----------------- QUESTION ANSWERING ------------------------

def ask_ai_assistant(question: str, context: str, persona: str = "fleet manager assistant") -> str:
    prompt = (
        f"Context Information:\n{context}\n\n"
        f"User Question: {question}\n\n"
        f"System Instruction: You are a helpful {persona}.\n"
        "- Keep answers brief, professional, and friendly.\n"
        "- If the answer is not in the context, politely say you don't know and suggest contacting support.\n"
        "- Do not invent information."
    )
    try:
        text = _generate(prompt)
    except ExternalServiceError:
        logger.exception("AI assistant unavailable")
        return ASK_FALLBACK
    return text or ASK_EMPTY


# ----------------- DAILY BRIEFING ------------------------

def build_briefing_prompt(bookings: List[Booking], vehicles: List[Vehicle], today: date | None = None) -> str:
    today = today or date.today()
    active_count = sum(1 for b in bookings if b.status == BookingStatus.ACTIVE)
    available_count = sum(1 for v in vehicles if v.status == VehicleStatus.AVAILABLE)

    bookings_json = json.dumps([
        {
            "client": b.customer_name,
            "car": b.vehicle_name,
            "status": b.status.value,
            "pickup": b.pickup_date.isoformat(),
            "return": b.return_date.isoformat(),
        }
        for b in bookings
    ])
    fleet_json = json.dumps([{"model": v.model, "status": v.status.value} for v in vehicles])

    return (
        "You are an AI assistant for KwasaShuttle, a vehicle rental company.\n"
        "Current Data:\n"
        f"- Active Rentals: {active_count}\n"
        f"- Available Vehicles: {available_count}\n"
        f"- Today's date: {today.isoformat()}\n"
        f"- Bookings List: {bookings_json}\n"
        f"- Fleet Status: {fleet_json}\n\n"
        "Task: Write a concise, professional 3-sentence daily briefing for the fleet manager. "
        "Highlight urgent items (pickups/returns today) and general fleet health. "
        "Keep it encouraging."
    )


def generate_daily_briefing(bookings: List[Booking], vehicles: List[Vehicle]) -> str:
    try:
        text = _generate(build_briefing_prompt(bookings, vehicles))
    except ExternalServiceError:
        logger.exception("Daily briefing unavailable")
        return BRIEFING_FALLBACK
    return text or BRIEFING_EMPTY
