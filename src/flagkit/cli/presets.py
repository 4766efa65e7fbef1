"""Preset date/time formats for the ``flagdate`` command.

Layouts are :func:`~datetime.datetime.strftime` patterns plus two
placeholders that ``strftime`` cannot express portably:

* ``{offset}`` — hour offset from UTC, e.g. ``+08``
* ``{rfc_offset}`` — RFC 3339 offset, ``Z`` for UTC or e.g. ``+08:00``
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from flagkit.core.enum_flag import StringFlagEnum
from flagkit.core.models import ErrorHandling
from flagkit.core.subcommand import Subcommand


def _offset_seconds(moment: datetime) -> int:
    return int((moment.utcoffset() or timedelta(0)).total_seconds())


def _hour_offset(moment: datetime) -> str:
    seconds = _offset_seconds(moment)
    sign = "-" if seconds < 0 else "+"
    return f"{sign}{abs(seconds) // 3600:02d}"


def _rfc3339_offset(moment: datetime) -> str:
    seconds = _offset_seconds(moment)
    if seconds == 0:
        return "Z"
    sign = "-" if seconds < 0 else "+"
    hours, remainder = divmod(abs(seconds), 3600)
    return f"{sign}{hours:02d}:{remainder // 60:02d}"


@dataclass(frozen=True, slots=True)
class Preset:
    """A named date/time format."""

    name: str
    """Preset name; doubles as the quick-action subcommand name."""

    layout: str
    """``strftime`` pattern with optional offset placeholders."""

    is_local: bool
    """Render local time when true, UTC otherwise."""

    usage: str
    """One-line description."""

    def render(self, moment: datetime | None = None) -> str:
        """Format *moment* (default: now).

        A given *moment* is rendered in its own time zone by local
        presets and converted to UTC by UTC presets.
        """
        if moment is None:
            moment = datetime.now(timezone.utc)
            if self.is_local:
                moment = moment.astimezone()
        elif not self.is_local:
            moment = moment.astimezone(timezone.utc)
        text = moment.strftime(self.layout)
        return text.replace("{offset}", _hour_offset(moment)).replace(
            "{rfc_offset}", _rfc3339_offset(moment),
        )

    def __str__(self) -> str:
        return self.render()

    def to_subcommand(self) -> Subcommand:
        """Build the quick-action subcommand for this preset."""
        return Subcommand(self.name, f"Print {self.usage}", "", ErrorHandling.CONTINUE)


# ---------------------------------------------------------------------------
# Collection of presets
# ---------------------------------------------------------------------------

FRIENDLY = Preset(
    name="friendly",
    layout="%Y-%m-%d %H:%M:%S %a UTC{offset}",
    is_local=True,
    usage="friendly local date-time",
)
UTC = Preset(
    name="utc",
    layout="%Y-%m-%dT%H:%M:%S{rfc_offset}",
    is_local=False,
    usage="RFC3339-compatible UTC date-time",
)
STRICT = Preset(
    name="strict",
    layout="%Y-%m-%dT%H:%M:%S{rfc_offset}",
    is_local=True,
    usage="RFC3339-compatible local date-time",
)
SERIAL = Preset(
    name="serial",
    layout="%Y-%m-%d-%H%M%S",
    is_local=True,
    usage="serial-like local date-time",
)
DATE_ONLY = Preset(
    name="date-only",
    layout="%Y-%m-%d",
    is_local=True,
    usage="local date without time",
)
TIME_ONLY = Preset(
    name="time-only",
    layout="%H:%M:%S",
    is_local=True,
    usage="local time without date",
)

QUICK_ACTIONS: tuple[Preset, ...] = (UTC, STRICT, SERIAL)


def build_preset_flag() -> StringFlagEnum[Preset]:
    """Create the ``-p`` enum flag with short and long aliases."""
    enum: StringFlagEnum[Preset] = StringFlagEnum("p")
    enum.register("u", UTC)
    enum.register("utc", UTC)
    enum.register("s", SERIAL)
    enum.register("serial", SERIAL)
    enum.register("f", FRIENDLY)
    enum.register("friendly", FRIENDLY)
    return enum
