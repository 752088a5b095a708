"""ZoneService — offset, diff, chain, and projection operations.

Wraps the pure domain functions for interface layers: resolves the
configured defaults (default zone, diff format/direction), converts
domain errors into failed ServiceResults, and logs at debug level.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Concatenate, ParamSpec

import structlog

from tzchain.config.settings import TzSettings, get_default_zone
from tzchain.domain import civil, offsets
from tzchain.domain.errors import MalformedRequestError, TzChainError
from tzchain.domain.types import DiffFormat, Direction, parse_format, to_format
from tzchain.domain.zones import available_zones, format_offset, resolve_offset
from tzchain.services.result import ServiceResult

log = structlog.get_logger(__name__)

_P = ParamSpec("_P")

Moment = datetime | str | float | None


def _operation(
    op: str,
) -> Callable[
    [Callable[Concatenate[ZoneService, _P], ServiceResult]],
    Callable[Concatenate[ZoneService, _P], ServiceResult],
]:
    """Turn domain errors raised by a service method into a failed result."""

    def decorate(
        func: Callable[Concatenate[ZoneService, _P], ServiceResult],
    ) -> Callable[Concatenate[ZoneService, _P], ServiceResult]:
        @functools.wraps(func)
        def wrapper(self: ZoneService, *args: _P.args, **kwargs: _P.kwargs) -> ServiceResult:
            try:
                result = func(self, *args, **kwargs)
            except TzChainError as exc:
                log.debug("op.failed", op=op, code=exc.code, error=str(exc))
                return ServiceResult.failure(op, exc)
            log.debug("op.complete", op=op)
            return result

        return wrapper

    return decorate


class ZoneService:
    """Time-zone operations bound to one settings object."""

    def __init__(self, settings: TzSettings) -> None:
        self._settings = settings

    def _zone_or_default(self, zone: str | None) -> str:
        effective = zone or get_default_zone(self._settings)
        if not effective:
            raise MalformedRequestError(
                "No zone given and no default zone configured (floating time)"
            )
        return effective

    # ------------------------------------------------------------------
    # default_zone: the configured installation zone
    # ------------------------------------------------------------------

    @_operation("default_zone")
    def default_zone(self) -> ServiceResult:
        """Report the configured default zone (None means floating time)."""
        zone = get_default_zone(self._settings)
        return ServiceResult(
            ok=True,
            op="default_zone",
            data={"zone": zone, "floating": zone is None},
        )

    # ------------------------------------------------------------------
    # offset: one zone against UTC
    # ------------------------------------------------------------------

    @_operation("offset")
    def offset(
        self,
        zone: str | None = None,
        *,
        at: Moment = None,
        fmt: DiffFormat | str = DiffFormat.SECONDS,
    ) -> ServiceResult:
        """UTC offset of *zone* (or the default zone) at *at*."""
        target = self._zone_or_default(zone)
        fmt = parse_format(fmt)
        instant = civil.to_instant(at)
        seconds = resolve_offset(target, instant)
        return ServiceResult(
            ok=True,
            op="offset",
            data={
                "zone": target,
                "at": instant.isoformat(),
                "offset": to_format(seconds, fmt),
                "format": fmt.value,
                "label": format_offset(seconds),
            },
        )

    # ------------------------------------------------------------------
    # diff: pairwise
    # ------------------------------------------------------------------

    @_operation("diff")
    def diff(
        self,
        zone_a: str,
        zone_b: str,
        *,
        at: Moment = None,
        fmt: DiffFormat | str = DiffFormat.SECONDS,
    ) -> ServiceResult:
        """Signed offset of *zone_a* relative to *zone_b*."""
        fmt = parse_format(fmt)
        instant = civil.to_instant(at)
        seconds = offsets.diff(zone_a, zone_b, instant)
        return ServiceResult(
            ok=True,
            op="diff",
            data={
                "zone_a": zone_a,
                "zone_b": zone_b,
                "at": instant.isoformat(),
                "diff": to_format(seconds, fmt),
                "format": fmt.value,
                "label": format_offset(seconds),
            },
        )

    # ------------------------------------------------------------------
    # diff_multi: chain
    # ------------------------------------------------------------------

    @_operation("diff_multi")
    def diff_multi(
        self,
        zones: Sequence[str],
        *,
        at: Moment = None,
        fmt: DiffFormat | str | None = None,
        direction: Direction | str | None = None,
    ) -> ServiceResult:
        """Net offset of a zone chain; unset options use the ``[diff]`` config."""
        request = offsets.DiffRequest.build(
            zones,
            at=at,
            format=fmt if fmt is not None else self._settings.diff.format,
            direction=direction if direction is not None else self._settings.diff.direction,
        )
        value = offsets.diff_multi(request)
        warnings: list[str] = []
        if len(set(request.zones)) < len(request.zones):
            warnings.append("Zone chain repeats a zone")
        return ServiceResult(
            ok=True,
            op="diff_multi",
            data={
                "zones": list(request.zones),
                "at": request.at.isoformat(),
                "direction": request.direction.value,
                "format": request.format.value,
                "diff": value,
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # project: civil text to instant
    # ------------------------------------------------------------------

    @_operation("project")
    def project(
        self,
        text: str,
        *,
        zone: str | None = None,
        viewing_zone: str | None = None,
    ) -> ServiceResult:
        """Anchor civil *text* in *zone* (or the default), optionally viewed elsewhere."""
        instant = civil.project_with_default(
            text, zone, get_default_zone(self._settings), viewing_zone
        )
        return ServiceResult(
            ok=True,
            op="project",
            data={
                "text": text,
                "zone": zone or get_default_zone(self._settings),
                "viewing_zone": viewing_zone,
                "instant": instant.isoformat(),
                "timestamp": int(instant.timestamp()),
            },
        )

    # ------------------------------------------------------------------
    # list_zones
    # ------------------------------------------------------------------

    @_operation("list_zones")
    def list_zones(self, region: str | None = None) -> ServiceResult:
        """Zone identifiers known to the rule database."""
        items = available_zones(region)
        warnings = [] if items else [f"No zones match region {region!r}"]
        return ServiceResult(
            ok=True,
            op="list_zones",
            data={"items": [{"id": z} for z in items], "count": len(items)},
            warnings=warnings,
        )
