"""Tests for preset date/time formats (cli/presets.py).

A fixed moment is passed in so no test depends on the clock or the
machine's time zone.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

import pytest

from flagkit.cli.presets import (
    DATE_ONLY,
    FRIENDLY,
    QUICK_ACTIONS,
    SERIAL,
    STRICT,
    TIME_ONLY,
    UTC,
    Preset,
    build_preset_flag,
)

PLUS_8 = timezone(timedelta(hours=8))
MINUS_3_30 = timezone(-timedelta(hours=3, minutes=30))
MOMENT = datetime(2006, 1, 2, 15, 4, 5, tzinfo=PLUS_8)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

class TestRender:
    def test_friendly(self) -> None:
        assert FRIENDLY.render(MOMENT) == "2006-01-02 15:04:05 Mon UTC+08"

    def test_friendly_negative_offset(self) -> None:
        moment = datetime(2006, 1, 2, 15, 4, 5, tzinfo=MINUS_3_30)
        assert FRIENDLY.render(moment) == "2006-01-02 15:04:05 Mon UTC-03"

    def test_utc_converts(self) -> None:
        assert UTC.render(MOMENT) == "2006-01-02T07:04:05Z"

    def test_strict_keeps_zone(self) -> None:
        assert STRICT.render(MOMENT) == "2006-01-02T15:04:05+08:00"

    def test_strict_at_utc_uses_z(self) -> None:
        moment = datetime(2006, 1, 2, 7, 4, 5, tzinfo=timezone.utc)
        assert STRICT.render(moment) == "2006-01-02T07:04:05Z"

    def test_strict_half_hour_offset(self) -> None:
        moment = datetime(2006, 1, 2, 15, 4, 5, tzinfo=MINUS_3_30)
        assert STRICT.render(moment) == "2006-01-02T15:04:05-03:30"

    def test_serial(self) -> None:
        assert SERIAL.render(MOMENT) == "2006-01-02-150405"

    def test_date_only(self) -> None:
        assert DATE_ONLY.render(MOMENT) == "2006-01-02"

    def test_time_only(self) -> None:
        assert TIME_ONLY.render(MOMENT) == "15:04:05"

    def test_now_has_expected_shape(self) -> None:
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", UTC.render())

    def test_str_renders_now(self) -> None:
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", str(DATE_ONLY))

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            UTC.name = "other"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Quick actions
# ---------------------------------------------------------------------------

class TestQuickActions:
    def test_names(self) -> None:
        assert [preset.name for preset in QUICK_ACTIONS] == ["utc", "strict", "serial"]

    def test_to_subcommand(self) -> None:
        sub = UTC.to_subcommand()
        assert sub.name == "utc"
        assert sub.summary == "Print RFC3339-compatible UTC date-time"
        assert sub.details == ""


# ---------------------------------------------------------------------------
# -p enum flag
# ---------------------------------------------------------------------------

class TestPresetFlag:
    def test_usage_line(self) -> None:
        assert build_preset_flag().usage_line() == "-p=[u|utc|s|serial|f|friendly]"

    @pytest.mark.parametrize(
        ("alias", "expected"),
        [
            ("u", UTC),
            ("utc", UTC),
            ("s", SERIAL),
            ("serial", SERIAL),
            ("f", FRIENDLY),
            ("friendly", FRIENDLY),
        ],
    )
    def test_resolves(self, alias: str, expected: Preset) -> None:
        assert build_preset_flag().resolve(alias) is expected
