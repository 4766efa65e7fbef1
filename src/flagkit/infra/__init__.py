"""Infrastructure layer — the argument-parsing backend.

This layer wraps :mod:`argparse`.  Every raw argparse failure must be
caught here and re-raised as a :class:`~flagkit.exceptions.FlagkitError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output, except the usage/help printing that
  :attr:`~flagkit.core.models.ErrorHandling.EXIT` asks for.
"""

from flagkit.infra.flagset import FlagSet

__all__: list[str] = [
    "FlagSet",
]
