"""Custom exception hierarchy for flagkit.

Every error condition raised by the core, the flag-set adapter, or the
CLI layer inherits from :class:`FlagkitError`.  Raw ``argparse``
failures must NEVER propagate beyond the infrastructure layer — they
are caught and re-raised as :class:`FlagParseError`.

Hierarchy
---------
FlagkitError
├── KeyAlreadyExistsError
├── KeyNotFoundError
├── PositionOutOfRangeError
├── FlagValueError
│   ├── UnknownAliasError
│   └── EmptyFlagValueError
├── FlagParseError
│   └── HelpRequested
├── InvalidDefinitionError
└── EnvironmentError
"""

from __future__ import annotations


class FlagkitError(Exception):
    """Base exception for all flagkit errors.

    The core only raises; deciding whether an error becomes a non-zero
    process exit is left to the CLI error boundary.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Ordered map -----------------------------------------------------------

class KeyAlreadyExistsError(FlagkitError):
    """Raised when inserting a key that is already present."""


class KeyNotFoundError(FlagkitError):
    """Raised when looking up or deleting a key that is not present."""


class PositionOutOfRangeError(FlagkitError):
    """Raised when an insert position is outside ``0..len``."""


# --- Flag values -----------------------------------------------------------

class FlagValueError(FlagkitError):
    """Raised when a flag was parsed but its value is not acceptable."""


class UnknownAliasError(FlagValueError):
    """Raised when a string enum flag receives an unregistered alias."""


class EmptyFlagValueError(FlagValueError):
    """Raised when a string flag is given without a value (``-p=``)."""


# --- Parsing ---------------------------------------------------------------

class FlagParseError(FlagkitError):
    """Raised when command-line arguments cannot be parsed."""


class HelpRequested(FlagParseError):
    """Raised when ``-h`` / ``--help`` is given to a continuing flag set."""


# --- Definitions -----------------------------------------------------------

class InvalidDefinitionError(FlagkitError, ValueError):
    """Raised when a definition (flag name, subcommand name, help layout) is invalid."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(FlagkitError):
    """Raised when a required runtime dependency is not available."""
