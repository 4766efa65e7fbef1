"""Enum-like string flags: ``yourcommand -flag=[option|option...]``.

A :class:`StringFlagEnum` owns an :class:`~flagkit.core.ordered_map.OrderedMap`
from accepted aliases to values.  Several aliases may share one value
(e.g. ``"u"`` and ``"utc"``); aliases themselves are unique.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from loguru import logger

from flagkit.core.ordered_map import OrderedMap
from flagkit.core.protocols import FlagNamespace
from flagkit.exceptions import (
    EmptyFlagValueError,
    KeyNotFoundError,
    UnknownAliasError,
)

V = TypeVar("V")


class StringFlagEnum(Generic[V]):
    """Closed set of accepted string values for one named flag.

    Parameters
    ----------
    name:
        Flag name without the dash, e.g. ``"dev"`` for ``-dev=edditoria``.
        Only used to build usage and error text.
    usage_line:
        Optional replacement for :meth:`default_usage_line`.
    """

    def __init__(
        self,
        name: str,
        *,
        usage_line: Callable[[], str] | None = None,
    ) -> None:
        self.name: str = name
        self._options: OrderedMap[V] = OrderedMap()
        self._usage_line: Callable[[], str] | None = usage_line

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, alias: str, value: V) -> None:
        """Accept *alias* as a value of this flag, resolving to *value*.

        Raises
        ------
        KeyAlreadyExistsError
            If *alias* was registered before.  Aliases are never
            overwritten.
        """
        self._options.append(alias, value)
        logger.debug("Registered alias {!r} for -{}", alias, self.name)

    def aliases(self) -> list[str]:
        """Return registered aliases in registration order."""
        return self._options.keys()

    def __contains__(self, alias: object) -> bool:
        return alias in self._options

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, alias_text: str) -> V:
        """Return the value registered for *alias_text*.

        Raises
        ------
        UnknownAliasError
            If *alias_text* is not a registered alias.
        """
        try:
            return self._options.get(alias_text)
        except KeyNotFoundError as exc:
            raise UnknownAliasError(
                f"bad argument: -{self.name}={alias_text}",
                hint=f"Expected {self.usage_line()}",
            ) from exc

    def resolve_from(self, flags: FlagNamespace, default: V) -> V:
        """Resolve this flag's value as parsed by *flags*.

        Returns *default* when the user did not give the flag at all.

        Raises
        ------
        EmptyFlagValueError
            If the flag was given without a value (``-p=``).
        UnknownAliasError
            If the given value is not a registered alias.
        """
        if not flags.is_set(self.name):
            return default
        text = str(flags.value(self.name))
        if not text:
            raise EmptyFlagValueError(
                f"flag needs an argument: -{self.name}=",
                hint=f"Expected {self.usage_line()}",
            )
        return self.resolve(text)

    # ------------------------------------------------------------------
    # Usage text
    # ------------------------------------------------------------------

    def usage_line(self) -> str:
        """One-line usage for the flag, e.g. ``-p=[u|utc|s|serial]``."""
        if self._usage_line is not None:
            return self._usage_line()
        return self.default_usage_line()

    def default_usage_line(self) -> str:
        """Usage derived from the registered aliases, in order."""
        return f"-{self.name}=[{'|'.join(self._options.keys())}]"
