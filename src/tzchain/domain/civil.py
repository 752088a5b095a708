"""Civil-time parsing and projection onto absolute instants.

A civil reading ("2020-12-11 09:20:00") means nothing until it is paired
with a zone. :func:`project` performs that pairing using the zone's rules
at that calendar moment, and can re-express the resulting instant in a
second *viewing* zone for cross-zone display.

Boundary readings follow ``fold=0``:
- ambiguous (fall-back) readings take the earlier, pre-transition offset;
- readings inside a spring-forward gap are read with the pre-transition
  offset and therefore land past the gap (02:30 becomes 03:30).

Projected instants carry a fixed-offset tzinfo (the offset in force at
that instant, named by the zone's abbreviation). Python compares datetimes
that share a ``ZoneInfo`` by wall clock, which breaks across a fall-back
hour; fixed offsets keep ``==`` and ``<`` on the absolute instant.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from tzchain.domain.errors import MalformedCivilTimeError, MalformedRequestError
from tzchain.domain.zones import get_zone

NOW = "now"
OUT_OF_RANGE = "outside the supported date range"

# One day of headroom at either end, so every zone's wall clock stays
# representable for an accepted instant.
_EARLIEST = datetime.min.replace(tzinfo=UTC) + timedelta(days=1)
_LATEST = datetime.max.replace(tzinfo=UTC) - timedelta(days=1)


def parse_civil_time(text: str) -> datetime:
    """Parse *text* as a zone-less date + time reading.

    Accepts ``YYYY-MM-DD HH:MM[:SS[.ffffff]]`` (space or ``T`` separator)
    and a bare ``YYYY-MM-DD`` meaning midnight. Text carrying its own
    offset is rejected: civil time has no zone.
    """
    if not isinstance(text, str) or not text.strip():
        raise MalformedCivilTimeError(text, "empty or not a string")
    try:
        parsed = datetime.fromisoformat(text.strip())
    except ValueError as exc:
        raise MalformedCivilTimeError(text) from exc
    if parsed.tzinfo is not None:
        raise MalformedCivilTimeError(text, "civil time must not carry a UTC offset")
    return parsed


def to_instant(value: datetime | str | float | None = None) -> datetime:
    """Normalise a reference moment to an aware UTC datetime.

    - ``None`` or ``"now"``: the current time.
    - aware ``datetime`` or ISO string with offset: converted to UTC.
    - naive ``datetime`` or civil string: read as UTC wall-clock time.
    - ``int``/``float``: POSIX timestamp.

    Raises:
        MalformedCivilTimeError: *value* is not a moment, or lies within a
            day of the ends of the ``datetime`` range (NaN and infinite
            timestamps included).
    """
    if value is None:
        return datetime.now(UTC)
    if isinstance(value, datetime):
        try:
            if value.tzinfo is None or value.utcoffset() is None:
                instant = value.replace(tzinfo=UTC)
            else:
                instant = value.astimezone(UTC)
        except OverflowError as exc:
            raise MalformedCivilTimeError(value, OUT_OF_RANGE) from exc
        if not _EARLIEST <= instant <= _LATEST:
            raise MalformedCivilTimeError(value, OUT_OF_RANGE)
        return instant
    if isinstance(value, bool):
        raise MalformedCivilTimeError(value, "not a date/time")
    if isinstance(value, int | float):
        try:
            instant = datetime.fromtimestamp(value, UTC)
        except (OverflowError, OSError, ValueError) as exc:
            raise MalformedCivilTimeError(value, OUT_OF_RANGE) from exc
        return to_instant(instant)
    if isinstance(value, str):
        text = value.strip()
        if text.lower() == NOW:
            return datetime.now(UTC)
        if not text:
            raise MalformedCivilTimeError(value, "empty or not a string")
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise MalformedCivilTimeError(value) from exc
        try:
            return to_instant(parsed)
        except MalformedCivilTimeError as exc:
            raise MalformedCivilTimeError(value, exc.reason) from exc
    raise MalformedCivilTimeError(value, "not a date/time")


def project(text: str, zone: str, viewing_zone: str | None = None) -> datetime:
    """Anchor civil *text* in *zone* and return the absolute instant.

    Without *viewing_zone* the result shows *zone*'s clock. With it, the
    same instant is expressed on the viewing zone's clock, so "09:20
    Chicago viewed from New York" reads 10:20 and compares greater than a
    plain "09:20 New York". Equality and ordering always follow the
    absolute instant.

    Raises:
        MalformedCivilTimeError: *text* is not a civil reading, or the
            instant falls outside the representable range.
        UnknownZoneError: *zone* or *viewing_zone* cannot be resolved.
    """
    reading = parse_civil_time(text)
    tz = get_zone(zone)
    view_tz = get_zone(viewing_zone) if viewing_zone is not None else None

    try:
        # Round-trip through UTC so gap readings come back normalised.
        instant = reading.replace(tzinfo=tz, fold=0).astimezone(UTC)
        local = instant.astimezone(view_tz or tz)
    except OverflowError as exc:
        raise MalformedCivilTimeError(text, OUT_OF_RANGE) from exc
    return local.replace(tzinfo=timezone(local.utcoffset(), local.tzname()), fold=0)


def project_with_default(
    text: str,
    zone: str | None,
    default_zone: str | None,
    viewing_zone: str | None = None,
) -> datetime:
    """Like :func:`project`, falling back to *default_zone* when *zone* is unset.

    With neither set the reading is floating time, which has no instant.
    """
    effective = zone or default_zone
    if not effective:
        raise MalformedRequestError(
            "No zone given and no default zone configured (floating time has no instant)"
        )
    return project(text, effective, viewing_zone)
