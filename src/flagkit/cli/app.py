"""``flagdate`` — a friendly command-line tool for date and time.

This module is the **sole error boundary** of the command.  It consumes
the core the way any host program would: a :class:`StringFlagEnum` for
``-p``, a ``Quick actions`` :class:`SubcommandGroup`, and an
argparse-backed :class:`FlagSet` for the main flags.

Usage
-----
* ``flagdate``                       — friendly local date-time
* ``flagdate utc|strict|serial``     — quick actions
* ``flagdate -p=[u|utc|s|serial|f|friendly]``
* ``flagdate -d`` / ``flagdate -t``  — local date only / time only
"""

from __future__ import annotations

import sys

from loguru import logger

from flagkit.cli import exit_codes
from flagkit.cli.console import configure_logging, console, out
from flagkit.cli.presets import (
    DATE_ONLY,
    FRIENDLY,
    QUICK_ACTIONS,
    TIME_ONLY,
    Preset,
    build_preset_flag,
)
from flagkit.core.enum_flag import StringFlagEnum
from flagkit.core.models import ErrorHandling
from flagkit.core.subcommand import Subcommand, SubcommandGroup, render_main_help
from flagkit.exceptions import (
    FlagkitError,
    FlagParseError,
    FlagValueError,
    HelpRequested,
)
from flagkit.infra.flagset import FlagSet
from flagkit.version import __version__

CLI_NAME = "flagdate"
CLI_DESC = "flagdate for friendly dates! A command-line tool for date and time."
CLI_FOOTNOTE = f"Version:\n  {CLI_NAME} {__version__}"


# ---------------------------------------------------------------------------
# Command model
# ---------------------------------------------------------------------------

def _build_quick_actions() -> SubcommandGroup:
    return SubcommandGroup(
        name="Quick actions",
        summary="small commands for daily life",
        subcommands=[preset.to_subcommand() for preset in QUICK_ACTIONS],
    )


def _build_flags(preset_flag: StringFlagEnum[Preset]) -> FlagSet:
    flags = FlagSet(CLI_NAME, ErrorHandling.CONTINUE)
    flags.add_bool("d", usage="local date only")
    flags.add_bool("t", usage="local time only")
    flags.add_string("p", usage=f"p for preset: {preset_flag.usage_line()}")
    flags.add_bool("v", usage="verbose logging to stderr")
    return flags


def _render_help(group: SubcommandGroup, flags: FlagSet) -> str:
    return render_main_help(
        CLI_NAME,
        CLI_DESC,
        [group],
        CLI_FOOTNOTE,
        flags_usage=flags.defaults(),
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_quick_action(
    subcommand: Subcommand,
    preset: Preset,
    arguments: list[str],
) -> int:
    """Run ``flagdate <quick action>``; it takes no arguments."""
    name = subcommand.name
    try:
        subcommand.parse(arguments)
    except HelpRequested:
        out.write(subcommand.help())
        return exit_codes.SUCCESS
    except FlagParseError as exc:
        console.write(f"{CLI_NAME}: {exc}\nSee: {CLI_NAME} {name} -h\n")
        return exit_codes.USAGE_ERROR

    if subcommand.args:
        console.write(f"{CLI_NAME}: {name} does not take argument\nSee: {CLI_NAME} {name} -h\n")
        return exit_codes.USAGE_ERROR

    out.write(f"{preset.render()}\n")
    return exit_codes.SUCCESS


def _handle_flags(group: SubcommandGroup, arguments: list[str]) -> int:
    """Run ``flagdate [-flag...]``."""
    preset_flag = build_preset_flag()
    flags = _build_flags(preset_flag)

    try:
        flags.parse(arguments)
    except HelpRequested:
        out.write(_render_help(group, flags))
        return exit_codes.SUCCESS
    except FlagParseError as exc:
        console.error(str(exc), hint=f"See: {CLI_NAME} -h")
        console.write(flags.defaults())
        return exit_codes.USAGE_ERROR

    if flags.value("v"):
        configure_logging(verbose=True)

    if flags.args:
        console.error(
            f"unknown command: {flags.args[0]}",
            hint=f"See: {CLI_NAME} -h",
        )
        return exit_codes.USAGE_ERROR

    try:
        preset = preset_flag.resolve_from(flags, FRIENDLY)
    except FlagValueError as exc:
        console.error(str(exc), hint=exc.hint)
        console.write(flags.defaults())
        return exit_codes.USAGE_ERROR

    date_only = bool(flags.value("d"))
    time_only = bool(flags.value("t"))
    if date_only and not time_only:
        preset = DATE_ONLY
    elif time_only and not date_only:
        preset = TIME_ONLY

    logger.debug("Rendering preset {!r}", preset.name)
    out.write(f"{preset.render()}\n")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the flagdate CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    arguments = sys.argv[1:] if argv is None else list(argv)

    if not arguments:
        out.write(f"{FRIENDLY.render()}\n")
        return exit_codes.SUCCESS

    group = _build_quick_actions()
    subcommand = group.lookup(arguments[0])
    if subcommand is not None:
        presets = {preset.name: preset for preset in QUICK_ACTIONS}
        return _handle_quick_action(subcommand, presets[subcommand.name], arguments[1:])

    return _handle_flags(group, arguments)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        configure_logging()
        code = main()
        sys.exit(code)
    except FlagkitError as exc:
        console.error(str(exc), hint=exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
