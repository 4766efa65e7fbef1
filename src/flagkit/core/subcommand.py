"""Subcommands, subcommand groups, and aligned help rendering.

A :class:`Subcommand` holds its own flag namespace and forwards the few
operations callers need.  A :class:`SubcommandGroup` lists subcommands
under a heading and renders them as::

    Quick actions: small commands for daily life

      utc     Print RFC3339-compatible UTC date-time
      strict  Print RFC3339-compatible local date-time

Every render function here is pure: it returns a string and leaves
writing it to the CLI layer.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from loguru import logger

from flagkit.core.models import ErrorHandling, HelpStyle
from flagkit.core.protocols import FlagNamespace
from flagkit.exceptions import InvalidDefinitionError, KeyAlreadyExistsError

FlagNamespaceFactory = Callable[[str, ErrorHandling], FlagNamespace]

_default_factory: FlagNamespaceFactory | None = None


def set_default_factory(factory: FlagNamespaceFactory) -> None:
    """Register the namespace factory used when a :class:`Subcommand` gets none.

    The package root registers the argparse-backed ``FlagSet`` on import.
    """
    global _default_factory
    _default_factory = factory


# ---------------------------------------------------------------------------
# Subcommand
# ---------------------------------------------------------------------------

class Subcommand:
    """A named subcommand with its own, independent flag namespace.

    Parameters
    ----------
    name:
        Subcommand name; also the name of its flag namespace.
    summary:
        Short description for the main help and the subcommand help.
    details:
        Long description for the subcommand help.
    error_handling:
        Parse-error policy of the flag namespace.
    factory:
        Builds the flag namespace.  Defaults to the factory registered
        with :func:`set_default_factory`.

    Note that the caller still has to :meth:`parse` the arguments.
    """

    def __init__(
        self,
        name: str,
        summary: str = "",
        details: str = "",
        error_handling: ErrorHandling = ErrorHandling.CONTINUE,
        *,
        factory: FlagNamespaceFactory | None = None,
    ) -> None:
        if not name:
            raise InvalidDefinitionError("subcommand name must be non-empty")
        build = factory if factory is not None else _default_factory
        if build is None:
            raise InvalidDefinitionError(
                f"no flag namespace factory for subcommand {name!r}",
                hint="Pass factory= or call set_default_factory().",
            )
        self._flags: FlagNamespace = build(name, error_handling)
        self.summary: str = summary
        self.details: str = details
        logger.debug("Created subcommand {!r}", name)

    def __repr__(self) -> str:
        return f"Subcommand(name={self.name!r}, summary={self.summary!r})"

    # ------------------------------------------------------------------
    # Delegation to the flag namespace
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._flags.name

    @property
    def flags(self) -> FlagNamespace:
        """The subcommand's own flag namespace."""
        return self._flags

    @property
    def args(self) -> list[str]:
        return self._flags.args

    def add_bool(self, name: str, default: bool = False, usage: str = "") -> None:
        self._flags.add_bool(name, default, usage)

    def add_string(self, name: str, default: str = "", usage: str = "") -> None:
        self._flags.add_string(name, default, usage)

    def parse(self, arguments: Sequence[str]) -> None:
        self._flags.parse(arguments)

    # ------------------------------------------------------------------
    # Help text
    # ------------------------------------------------------------------

    def help_line(
        self,
        indent: int = 2,
        min_width: int = 0,
        *,
        gap: int = 2,
        omit_empty_summary: bool = False,
    ) -> str:
        """Render ``"<indent><name><margin><summary>"`` without a newline.

        *min_width* is the width reserved for the name column; pass the
        longest name in a group to align the summaries.  When the name
        is longer than *min_width* the margin shrinks to *gap*.
        """
        name = self.name
        if omit_empty_summary and not self.summary:
            return " " * indent + name
        if len(name) > min_width:
            margin = gap
        else:
            margin = min_width - len(name) + gap
        return " " * indent + name + " " * margin + self.summary

    def help(self) -> str:
        """Render the subcommand's own help page, ending with a newline."""
        lines = [self.summary or self.name]
        if self.details:
            lines += ["", self.details]
        listing = self._flags.defaults().rstrip("\n")
        if listing:
            lines += ["", "Flags:", listing]
        return "\n".join(lines) + "\n"


def longest_name(subcommands: Iterable[Subcommand]) -> int:
    """Return the length of the longest subcommand name, or 0 if none."""
    return max((len(subcommand.name) for subcommand in subcommands), default=0)


# ---------------------------------------------------------------------------
# Subcommand group
# ---------------------------------------------------------------------------

@dataclass
class SubcommandGroup:
    """Ordered group of subcommands under one help heading.

    The group references its members; it does not own them, and a
    subcommand may appear in several groups.
    """

    name: str
    summary: str = ""
    subcommands: list[Subcommand] = field(default_factory=list)

    def __post_init__(self) -> None:
        members = list(self.subcommands)
        self.subcommands = []
        for subcommand in members:
            self.add(subcommand)

    def add(self, subcommand: Subcommand) -> None:
        """Append *subcommand* to the group.

        Raises
        ------
        KeyAlreadyExistsError
            If a member with the same name is already in the group.
        """
        if self.lookup(subcommand.name) is not None:
            raise KeyAlreadyExistsError(
                f"subcommand already in group {self.name!r}: {subcommand.name!r}",
            )
        self.subcommands.append(subcommand)

    def lookup(self, name: str) -> Subcommand | None:
        """Return the member called *name*, or ``None``."""
        for subcommand in self.subcommands:
            if subcommand.name == name:
                return subcommand
        return None

    def longest_name(self) -> int:
        return longest_name(self.subcommands)

    def render_help(self, style: HelpStyle | None = None) -> str:
        """Render the group's help session.

        Output::

            <name>: <summary>

              <subcmd1>  <summary>
              <subcmd2>  <summary>

        The result always ends with a blank line.
        """
        style = style or HelpStyle()
        width = self.longest_name()
        parts = [f"{self.name}: {self.summary}\n\n"]
        for subcommand in self.subcommands:
            line = subcommand.help_line(
                style.indent,
                width,
                gap=style.gap,
                omit_empty_summary=style.omit_empty_summary,
            )
            parts.append(line + "\n")
        parts.append("\n")
        return "".join(parts)


# ---------------------------------------------------------------------------
# Main help page
# ---------------------------------------------------------------------------

def render_main_help(
    prog: str,
    description: str,
    groups: Iterable[SubcommandGroup],
    footnote: str = "",
    *,
    flags_usage: str = "",
    style: HelpStyle | None = None,
) -> str:
    """Compose the full help page of a command with subcommand groups.

    Layout: description, a ``Usage:`` line, every group session, an
    optional ``Flags:`` session, then the footnote.
    """
    style = style or HelpStyle()
    indent = " " * style.indent
    parts: list[str] = []
    if description:
        parts.append(f"{description}\n\n")
    parts.append(f"Usage:\n{indent}{prog} [command] [flags]\n\n")
    for group in groups:
        parts.append(group.render_help(style))
    if flags_usage.strip():
        parts.append("Flags:\n" + flags_usage.rstrip("\n") + "\n\n")
    if footnote:
        parts.append(footnote.rstrip("\n") + "\n")
    return "".join(parts)
