from datetime import date

import pytest

from fleet_app import ai_assistant
from fleet_app.ai_assistant import (
    ASK_EMPTY,
    ASK_FALLBACK,
    BRIEFING_EMPTY,
    BRIEFING_FALLBACK,
    ask_ai_assistant,
    build_briefing_prompt,
    generate_daily_briefing,
)
from fleet_app.chat_logic import build_support_context, store_message


class FakeResponse:
    def __init__(self, text):
        self.text = text


def fake_model_factory(answers, calls):
    """answers: model name -> text, or an Exception to raise."""

    class FakeModel:
        def __init__(self, name):
            self.name = name

        def generate_content(self, prompt):
            calls.append((self.name, prompt))
            answer = answers.get(self.name, RuntimeError("model unavailable"))
            if isinstance(answer, Exception):
                raise answer
            return FakeResponse(answer)

    return FakeModel


@pytest.fixture
def calls():
    return []


def test_ask_returns_model_text(monkeypatch, calls):
    monkeypatch.setattr(
        ai_assistant.genai, "GenerativeModel",
        fake_model_factory({"gemini-2.0-flash": "We open at 8."}, calls),
    )

    answer = ask_ai_assistant("When do you open?", "Hours: 8-5", "Customer Support Agent")

    assert answer == "We open at 8."
    name, prompt = calls[0]
    assert "Hours: 8-5" in prompt
    assert "Customer Support Agent" in prompt


def test_ask_falls_through_to_next_model(monkeypatch, calls):
    monkeypatch.setattr(
        ai_assistant.genai, "GenerativeModel",
        fake_model_factory({"gemini-flash-latest": "ok"}, calls),
    )

    assert ask_ai_assistant("q", "ctx") == "ok"
    assert [c[0] for c in calls] == ["gemini-2.0-flash", "gemini-2.0-flash-lite", "gemini-flash-latest"]


def test_ask_degrades_to_fallback_when_all_models_fail(monkeypatch, calls):
    monkeypatch.setattr(ai_assistant.genai, "GenerativeModel", fake_model_factory({}, calls))

    assert ask_ai_assistant("q", "ctx") == ASK_FALLBACK
    assert len(calls) == len(ai_assistant.MODELS_TO_TRY)


def test_ask_empty_answer(monkeypatch, calls):
    monkeypatch.setattr(
        ai_assistant.genai, "GenerativeModel",
        fake_model_factory({"gemini-2.0-flash": "  "}, calls),
    )
    assert ask_ai_assistant("q", "ctx") == ASK_EMPTY


def test_briefing_fallbacks(monkeypatch, store, calls):
    monkeypatch.setattr(ai_assistant.genai, "GenerativeModel", fake_model_factory({}, calls))
    assert generate_daily_briefing(store.bookings, store.vehicles) == BRIEFING_FALLBACK

    monkeypatch.setattr(
        ai_assistant.genai, "GenerativeModel",
        fake_model_factory({"gemini-2.0-flash": ""}, calls),
    )
    assert generate_daily_briefing(store.bookings, store.vehicles) == BRIEFING_EMPTY


def test_briefing_prompt_counts(store):
    prompt = build_briefing_prompt(store.bookings, store.vehicles, today=date(2024, 1, 10))

    assert "Active Rentals: 0" in prompt
    assert "Available Vehicles: 1" in prompt
    assert "2024-01-10" in prompt
    assert "Sarah Connor" in prompt


def test_support_context_lists_fleet_rates(store):
    context = build_support_context(store.vehicles)
    assert "Mitsubishi Xpander (7 Seater): R850/day" in context
    assert "21+ age" in context


def test_chat_history_is_bounded():
    history = []
    for i in range(30):
        store_message(history, "user", f"msg {i}", max_messages=25)
    store_message(history, "assistant", "reply", max_messages=25)

    assert len(history) == 25
    assert history[-2] == {"role": "user", "content": "msg 29"}
    assert history[0]["content"] == "msg 6"
