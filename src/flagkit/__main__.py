"""Allow ``python -m flagkit`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m flagkit`` behaves identically to the ``flagdate``
console script.
"""

from __future__ import annotations

from flagkit.cli.app import cli

if __name__ == "__main__":
    cli()
