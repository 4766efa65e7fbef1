"""Configuration models for flagkit.

Both models are plain value objects: frozen dataclasses and enums with
no behaviour beyond data access and no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from flagkit.exceptions import InvalidDefinitionError


# ---------------------------------------------------------------------------
# Help rendering
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HelpStyle:
    """Render configuration for subcommand help listings."""

    indent: int = 2
    """Leading spaces before each subcommand name."""

    gap: int = 2
    """Minimum spaces between the name column and the summary."""

    omit_empty_summary: bool = False
    """Drop the margin entirely when a subcommand has no summary."""

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise InvalidDefinitionError(f"indent must be >= 0, got {self.indent}")
        if self.gap < 0:
            raise InvalidDefinitionError(f"gap must be >= 0, got {self.gap}")


# ---------------------------------------------------------------------------
# Parse-error policy
# ---------------------------------------------------------------------------

class ErrorHandling(Enum):
    """What a flag set does when parsing fails or help is requested."""

    CONTINUE = "continue"
    """Raise :class:`~flagkit.exceptions.FlagParseError` to the caller."""

    EXIT = "exit"
    """Print usage to stderr and exit with status 2 (0 for help)."""
