"""Shared pytest fixtures and configuration for the flagkit test suite.

Guidelines
----------
* Core tests must be pure — no I/O, no mocks.
* CLI tests call ``main(argv)`` and read output through ``capsys``.
* Date output is checked by shape, never by the current clock.
"""

from __future__ import annotations

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _silence_flagkit_logs() -> None:
    """Keep loguru output from leaking between tests."""
    logger.disable("flagkit")
