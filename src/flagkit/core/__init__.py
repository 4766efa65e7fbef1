"""Core layer — ordered map, enum flags, and subcommand help.

Rules
-----
* No ``print()`` calls and no I/O; render functions return strings.
* No imports from ``cli`` or ``infra``.  The default flag namespace is
  registered by the package root through :func:`set_default_factory`.
* Errors are raised as :class:`~flagkit.exceptions.FlagkitError`
  subclasses; the core never exits the process.
"""

from flagkit.core.enum_flag import StringFlagEnum
from flagkit.core.models import ErrorHandling, HelpStyle
from flagkit.core.ordered_map import OrderedMap
from flagkit.core.protocols import FlagNamespace
from flagkit.core.subcommand import (
    Subcommand,
    SubcommandGroup,
    longest_name,
    render_main_help,
    set_default_factory,
)

__all__: list[str] = [
    "ErrorHandling",
    "FlagNamespace",
    "HelpStyle",
    "OrderedMap",
    "StringFlagEnum",
    "Subcommand",
    "SubcommandGroup",
    "longest_name",
    "render_main_help",
    "set_default_factory",
]
