"""tzchain — time-zone offset resolution, chaining, and civil-time projection."""

from tzchain.domain.civil import project, project_with_default
from tzchain.domain.errors import (
    MalformedCivilTimeError,
    MalformedRequestError,
    TzChainError,
    UnknownZoneError,
)
from tzchain.domain.offsets import DiffRequest, diff, diff_multi, offset
from tzchain.domain.types import DiffFormat, Direction
from tzchain.domain.zones import available_zones, resolve_offset

__version__ = "0.1.0"

__all__ = [
    "DiffFormat",
    "DiffRequest",
    "Direction",
    "MalformedCivilTimeError",
    "MalformedRequestError",
    "TzChainError",
    "UnknownZoneError",
    "__version__",
    "available_zones",
    "diff",
    "diff_multi",
    "offset",
    "project",
    "project_with_default",
    "resolve_offset",
]
