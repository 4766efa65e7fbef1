"""Infrastructure: a named flag set backed by :mod:`argparse`.

:class:`FlagSet` satisfies :class:`~flagkit.core.protocols.FlagNamespace`.
It accepts the classic single-token flag syntax: ``-p=utc`` or ``-p utc``
for string flags, ``-d`` or ``-d=false`` for boolean flags, with ``--p``
as an equivalent spelling.  Flags are never clustered, so ``-dt`` names a
flag called ``dt``.  Parsing stops at the first non-flag argument or
right after a ``--`` terminator, and everything from there on is left
in :attr:`FlagSet.args`.

Rules
-----
* Tokens are checked against the defined flags before argparse sees
  them; argparse only stores values and formats help.
* Every argparse failure is re-raised as
  :class:`~flagkit.exceptions.FlagParseError`.
* Under :attr:`ErrorHandling.EXIT` the flag set itself prints usage and
  exits; otherwise it only raises.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, NoReturn

from loguru import logger

from flagkit.core.models import ErrorHandling
from flagkit.core.ordered_map import OrderedMap
from flagkit.exceptions import (
    FlagParseError,
    HelpRequested,
    InvalidDefinitionError,
    KeyAlreadyExistsError,
    KeyNotFoundError,
)

_RESERVED: frozenset[str] = frozenset({"h", "help"})
_TRUE: frozenset[str] = frozenset({"1", "t", "T", "true", "TRUE", "True"})
_FALSE: frozenset[str] = frozenset({"0", "f", "F", "false", "FALSE", "False"})


class _BoolAction(argparse.Action):
    """``-name`` stores ``True``; ``-name=value`` stores the parsed boolean."""

    def __init__(self, option_strings: list[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, nargs="?", const=True, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if isinstance(values, str):
            if values in _TRUE:
                values = True
            elif values in _FALSE:
                values = False
            else:
                raise argparse.ArgumentError(self, f"invalid boolean value {values!r}")
        setattr(namespace, self.dest, values)


@dataclass(frozen=True, slots=True)
class _FlagSpec:
    name: str
    default: bool | str
    usage: str

    @property
    def synopsis(self) -> str:
        if isinstance(self.default, bool):
            return f"-{self.name}"
        return f"-{self.name}=value"

    @property
    def description(self) -> str:
        if isinstance(self.default, str) and self.default:
            return f"{self.usage} (default {self.default!r})"
        return self.usage


class _FlagParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises instead of exiting on errors."""

    def error(self, message: str) -> NoReturn:
        raise FlagParseError(message)


class FlagSet:
    """Named set of flags for a program or a subcommand.

    Parameters
    ----------
    name:
        Program or subcommand name, used as ``prog`` in usage text.
    error_handling:
        What :meth:`parse` does on failure or when help is requested.
    """

    def __init__(
        self,
        name: str,
        error_handling: ErrorHandling = ErrorHandling.CONTINUE,
    ) -> None:
        self._name: str = name
        self._error_handling: ErrorHandling = error_handling
        self._parser: _FlagParser = _FlagParser(
            prog=name,
            add_help=False,
            allow_abbrev=False,
        )
        self._parser.add_argument(
            "-h",
            "--help",
            dest="help",
            action="store_true",
            default=argparse.SUPPRESS,
            help="show this help message",
        )
        self._specs: OrderedMap[_FlagSpec] = OrderedMap()
        self._parsed: dict[str, bool | str] = {}
        self._args: list[str] = []

    def __repr__(self) -> str:
        return f"FlagSet(name={self._name!r}, flags={self._specs.keys()!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def error_handling(self) -> ErrorHandling:
        return self._error_handling

    @property
    def args(self) -> list[str]:
        return list(self._args)

    # ------------------------------------------------------------------
    # Definition
    # ------------------------------------------------------------------

    def add_bool(self, name: str, default: bool = False, usage: str = "") -> None:
        """Define ``-name``; ``-name`` alone means ``True``, ``-name=false`` is accepted."""
        spec = self._define(name, default, usage)
        self._parser.add_argument(
            f"-{name}",
            dest=name,
            action=_BoolAction,
            default=argparse.SUPPRESS,
            metavar="bool",
            help=spec.description,
        )

    def add_string(self, name: str, default: str = "", usage: str = "") -> None:
        """Define ``-name=value``."""
        spec = self._define(name, default, usage)
        self._parser.add_argument(
            f"-{name}",
            dest=name,
            default=argparse.SUPPRESS,
            metavar="value",
            help=spec.description,
        )

    def _define(self, name: str, default: bool | str, usage: str) -> _FlagSpec:
        if not name or name.startswith("-") or "=" in name:
            raise InvalidDefinitionError(f"invalid flag name: {name!r}")
        if name in self._specs or name in _RESERVED:
            raise KeyAlreadyExistsError(f"{self._name} flag redefined: {name}")
        spec = _FlagSpec(name=name, default=default, usage=usage)
        self._specs.append(name, spec)
        return spec

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, arguments: Sequence[str]) -> None:
        """Parse *arguments*, replacing the result of any earlier parse.

        Raises
        ------
        FlagParseError
            On malformed arguments or an undefined flag.
        HelpRequested
            When ``-h`` / ``--help`` is given.
        """
        try:
            tokens, rest = self._split(arguments)
            namespace = self._parser.parse_args(tokens)
        except FlagParseError as exc:
            self._fail(exc)

        self._parsed = vars(namespace)
        self._args = rest
        logger.debug(
            "Parsed {}: set={} args={}",
            self._name,
            sorted(self._parsed),
            self._args,
        )

    def _split(self, arguments: Sequence[str]) -> tuple[list[str], list[str]]:
        """Return canonical ``-name[=value]`` tokens and the leftover arguments."""
        items = list(arguments)
        tokens: list[str] = []
        index = 0
        while index < len(items):
            item = items[index]
            if item == "--":
                return tokens, items[index + 1:]
            if len(item) < 2 or not item.startswith("-"):
                break
            body = item[2:] if item.startswith("--") else item[1:]
            name, sep, value = body.partition("=")
            if not name or name.startswith("-"):
                raise FlagParseError(f"bad flag syntax: {item}")
            if name in _RESERVED:
                raise HelpRequested(f"help requested for {self._name}")
            if name not in self._specs:
                raise FlagParseError(f"flag provided but not defined: -{name}")
            index += 1
            if not sep and not isinstance(self._specs.get(name).default, bool):
                if index == len(items):
                    raise FlagParseError(f"flag needs an argument: -{name}")
                sep, value = "=", items[index]
                index += 1
            tokens.append(f"-{name}{sep}{value}")
        return tokens, items[index:]

    def _fail(self, exc: FlagParseError) -> NoReturn:
        logger.debug("Parse of {} failed: {}", self._name, exc)
        if self._error_handling is ErrorHandling.EXIT:
            if isinstance(exc, HelpRequested):
                self._parser.print_help()
                self._parser.exit(0)
            self._parser.print_usage(sys.stderr)
            self._parser.exit(2, f"{self._name}: error: {exc}\n")
        raise exc

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def value(self, name: str) -> bool | str:
        """Return the parsed value of *name*, or its default.

        Raises
        ------
        KeyNotFoundError
            If *name* was never defined.
        """
        if name not in self._specs:
            raise KeyNotFoundError(f"flag not defined: -{name}")
        return self._parsed.get(name, self._specs.get(name).default)

    def is_defined(self, name: str) -> bool:
        return name in self._specs

    def is_set(self, name: str) -> bool:
        return name in self._parsed

    # ------------------------------------------------------------------
    # Usage text
    # ------------------------------------------------------------------

    def usage(self) -> str:
        """Full argparse help, starting with the ``usage:`` line."""
        return self._parser.format_help()

    def defaults(self, indent: int = 2, gap: int = 2) -> str:
        """List defined flags in definition order, summaries aligned.

        Returns an empty string when no flags are defined.
        """
        specs = self._specs.records()
        width = max((len(spec.synopsis) for spec in specs), default=0)
        lines = [
            " " * indent + spec.synopsis.ljust(width + gap) + spec.description
            for spec in specs
        ]
        return "".join(line.rstrip() + "\n" for line in lines)
