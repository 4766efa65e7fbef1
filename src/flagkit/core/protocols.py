"""Protocols (interfaces) consumed by the core layer.

The core never parses arguments itself.  Subcommands and enum flags
talk to a flag namespace through :class:`FlagNamespace`; the argparse
adapter in :mod:`flagkit.infra.flagset` satisfies it structurally.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class FlagNamespace(Protocol):
    """Contract for a named set of command-line flags.

    Implementations must map every backend-specific parse failure to
    :class:`~flagkit.exceptions.FlagParseError`.
    """

    @property
    def name(self) -> str:
        """Program or subcommand name the namespace is scoped to."""
        ...  # pragma: no cover

    @property
    def args(self) -> list[str]:
        """Positional arguments left over after the last :meth:`parse`."""
        ...  # pragma: no cover

    def add_bool(self, name: str, default: bool = False, usage: str = "") -> None:
        """Define a boolean flag ``-name``."""
        ...  # pragma: no cover

    def add_string(self, name: str, default: str = "", usage: str = "") -> None:
        """Define a string flag ``-name=value``."""
        ...  # pragma: no cover

    def parse(self, arguments: Sequence[str]) -> None:
        """Parse *arguments* (without the program name).

        Raises
        ------
        FlagParseError
            When the arguments are malformed or name an unknown flag.
        HelpRequested
            When ``-h`` / ``--help`` is given.
        """
        ...  # pragma: no cover

    def value(self, name: str) -> bool | str:
        """Return the parsed value of *name*, or its default."""
        ...  # pragma: no cover

    def is_defined(self, name: str) -> bool:
        """Return whether *name* was defined on this namespace."""
        ...  # pragma: no cover

    def is_set(self, name: str) -> bool:
        """Return whether the user explicitly supplied *name*.

        A flag given with an empty value (``-p=``) counts as supplied.
        """
        ...  # pragma: no cover

    def usage(self) -> str:
        """Return the multi-line flag usage text."""
        ...  # pragma: no cover

    def defaults(self, indent: int = 2, gap: int = 2) -> str:
        """Return one aligned line per defined flag, in definition order."""
        ...  # pragma: no cover
