"""Zone rule lookup and UTC-offset resolution.

Rules come from the platform tz database via :mod:`zoneinfo` (system
zoneinfo files, or the ``tzdata`` distribution where the OS ships none).
Lookups are cached process-wide; the cache is read-mostly and
``functools.lru_cache`` is safe for concurrent callers.

An identifier that cannot be resolved is always an error — there is no
fallback to UTC or to any configured zone.
"""

from __future__ import annotations

import functools
import zoneinfo
from datetime import datetime

from tzchain.domain.errors import UnknownZoneError


@functools.lru_cache(maxsize=512)
def _load_zone(zone: str) -> zoneinfo.ZoneInfo:
    try:
        return zoneinfo.ZoneInfo(zone)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise UnknownZoneError(zone) from exc


def get_zone(zone: str) -> zoneinfo.ZoneInfo:
    """Return the rule set for *zone*.

    Raises:
        UnknownZoneError: *zone* is not a non-empty string naming a zone
            in the rule database.
    """
    if not isinstance(zone, str) or not zone.strip():
        raise UnknownZoneError(zone)
    return _load_zone(zone)


def is_known_zone(zone: str) -> bool:
    """True if *zone* resolves against the rule database."""
    try:
        get_zone(zone)
    except UnknownZoneError:
        return False
    return True


@functools.lru_cache(maxsize=1)
def _all_zones() -> tuple[str, ...]:
    return tuple(sorted(zoneinfo.available_timezones()))


def available_zones(region: str | None = None) -> list[str]:
    """Sorted zone identifiers, optionally restricted to one *region*.

    ``region="America"`` matches ``America/Chicago`` and
    ``America/Argentina/Salta`` but not ``US/Central``.
    """
    zones = _all_zones()
    if not region:
        return list(zones)
    prefix = region.strip().strip("/").lower() + "/"
    return [z for z in zones if z.lower().startswith(prefix)]


def resolve_offset(zone: str, instant: datetime) -> int:
    """Signed seconds east of UTC observed by *zone* at *instant*.

    *instant* must be timezone-aware; a naive value has no absolute
    position and is rejected with ``ValueError``.
    """
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise ValueError("instant must be timezone-aware")
    tz = get_zone(zone)
    delta = instant.astimezone(tz).utcoffset()
    if delta is None:  # pragma: no cover - ZoneInfo always yields an offset
        raise UnknownZoneError(zone)
    return int(delta.total_seconds())


def format_offset(seconds: int) -> str:
    """Render an offset as ``UTC±HH:MM``.

    Examples:
        >>> format_offset(-21600)
        'UTC-06:00'
        >>> format_offset(19800)
        'UTC+05:30'
        >>> format_offset(0)
        'UTC+00:00'
    """
    sign = "-" if seconds < 0 else "+"
    minutes = abs(seconds) // 60
    return f"UTC{sign}{minutes // 60:02d}:{minutes % 60:02d}"
