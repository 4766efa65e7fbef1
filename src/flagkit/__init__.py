"""flagkit — enum string flags and aligned subcommand help for CLIs.

Built on an insertion-ordered map, with ``argparse`` doing the actual
argument parsing.  Logging goes through loguru and is silent until the
host application calls ``logger.enable("flagkit")``.
"""

from loguru import logger

from flagkit.core.enum_flag import StringFlagEnum
from flagkit.core.models import ErrorHandling, HelpStyle
from flagkit.core.ordered_map import OrderedMap
from flagkit.core.subcommand import (
    Subcommand,
    SubcommandGroup,
    longest_name,
    render_main_help,
    set_default_factory,
)
from flagkit.infra.flagset import FlagSet
from flagkit.version import __version__

logger.disable("flagkit")
set_default_factory(FlagSet)

__all__: list[str] = [
    "ErrorHandling",
    "FlagSet",
    "HelpStyle",
    "OrderedMap",
    "StringFlagEnum",
    "Subcommand",
    "SubcommandGroup",
    "__version__",
    "longest_name",
    "render_main_help",
    "set_default_factory",
]
