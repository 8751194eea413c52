from __future__ import annotations

from enum import Enum


class ValidationError(Exception):
    """A referenced customer, vehicle or booking does not exist, or input is malformed."""


class ExternalServiceError(Exception):
    """The AI text service could not be reached or returned an error."""


class Outcome(str, Enum):
    """Result of an update or delete addressed by identifier."""

    OK = "ok"
    NOT_FOUND = "not_found"
