"""Error hierarchy for zone lookups, diff requests, and civil-time parsing.

Every error carries a stable ``code`` that the service layer copies into
:class:`~tzchain.services.result.ServiceError` unchanged.
"""

from __future__ import annotations


class TzChainError(Exception):
    """Base class for all tzchain domain errors."""

    code = "TZCHAIN_ERROR"


class UnknownZoneError(TzChainError, ValueError):
    """Zone identifier is not present in the platform rule database."""

    code = "UNKNOWN_ZONE"

    def __init__(self, zone: object) -> None:
        self.zone = zone
        super().__init__(f"Unknown time zone: {zone!r}")


class MalformedRequestError(TzChainError, ValueError):
    """Diff/projection request is structurally invalid."""

    code = "MALFORMED_REQUEST"


class MalformedCivilTimeError(TzChainError, ValueError):
    """Text cannot be read as a zone-less calendar/clock reading."""

    code = "MALFORMED_CIVIL_TIME"

    def __init__(self, text: object, reason: str = "unparsable date/time") -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Malformed civil time {text!r}: {reason}")
