"""Tests for enum-like string flags (core/enum_flag.py)."""

from __future__ import annotations

import pytest

from flagkit.core.enum_flag import StringFlagEnum
from flagkit.exceptions import (
    EmptyFlagValueError,
    FlagValueError,
    KeyAlreadyExistsError,
    KeyNotFoundError,
    UnknownAliasError,
)
from flagkit.infra.flagset import FlagSet


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _preset_enum() -> StringFlagEnum[str]:
    enum: StringFlagEnum[str] = StringFlagEnum("p")
    enum.register("u", "utc-format")
    enum.register("utc", "utc-format")
    enum.register("s", "serial-format")
    enum.register("serial", "serial-format")
    return enum


def _flags_with_p(*arguments: str) -> FlagSet:
    flags = FlagSet("prog")
    flags.add_string("p")
    flags.parse(list(arguments))
    return flags


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

class TestRegister:
    def test_aliases_in_registration_order(self) -> None:
        assert _preset_enum().aliases() == ["u", "utc", "s", "serial"]

    def test_duplicate_alias_rejected(self) -> None:
        enum = _preset_enum()
        with pytest.raises(KeyAlreadyExistsError):
            enum.register("utc", "other")
        assert enum.resolve("utc") == "utc-format"

    def test_contains(self) -> None:
        enum = _preset_enum()
        assert "serial" in enum
        assert "friendly" not in enum


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

class TestResolve:
    def test_returns_registered_value(self) -> None:
        value = object()
        enum: StringFlagEnum[object] = StringFlagEnum("x")
        enum.register("one", value)
        assert enum.resolve("one") is value

    def test_short_and_long_alias_share_value(self) -> None:
        enum = _preset_enum()
        assert enum.resolve("u") == enum.resolve("utc")

    def test_unknown_alias(self) -> None:
        with pytest.raises(UnknownAliasError, match=r"bad argument: -p=xyz"):
            _preset_enum().resolve("xyz")

    def test_unknown_alias_chains_container_error(self) -> None:
        with pytest.raises(UnknownAliasError) as exc_info:
            _preset_enum().resolve("xyz")
        assert isinstance(exc_info.value.__cause__, KeyNotFoundError)
        assert not isinstance(exc_info.value, KeyNotFoundError)

    def test_unknown_alias_hint_lists_choices(self) -> None:
        with pytest.raises(UnknownAliasError) as exc_info:
            _preset_enum().resolve("xyz")
        assert exc_info.value.hint == "Expected -p=[u|utc|s|serial]"

    def test_case_sensitive(self) -> None:
        with pytest.raises(UnknownAliasError):
            _preset_enum().resolve("UTC")


# ---------------------------------------------------------------------------
# Resolution from parsed flags
# ---------------------------------------------------------------------------

class TestResolveFrom:
    def test_not_given_returns_default(self) -> None:
        flags = _flags_with_p()
        assert _preset_enum().resolve_from(flags, "default") == "default"

    def test_given_inline(self) -> None:
        flags = _flags_with_p("-p=s")
        assert _preset_enum().resolve_from(flags, "default") == "serial-format"

    def test_given_as_next_argument(self) -> None:
        flags = _flags_with_p("-p", "utc")
        assert _preset_enum().resolve_from(flags, "default") == "utc-format"

    def test_given_empty(self) -> None:
        flags = _flags_with_p("-p=")
        with pytest.raises(EmptyFlagValueError, match="flag needs an argument: -p="):
            _preset_enum().resolve_from(flags, "default")

    def test_given_unknown(self) -> None:
        flags = _flags_with_p("-p=nope")
        with pytest.raises(UnknownAliasError, match="bad argument: -p=nope"):
            _preset_enum().resolve_from(flags, "default")

    def test_errors_are_flag_value_errors(self) -> None:
        assert issubclass(EmptyFlagValueError, FlagValueError)
        assert issubclass(UnknownAliasError, FlagValueError)


# ---------------------------------------------------------------------------
# Usage line
# ---------------------------------------------------------------------------

class TestUsageLine:
    def test_default_usage(self) -> None:
        assert _preset_enum().usage_line() == "-p=[u|utc|s|serial]"

    def test_empty_enum(self) -> None:
        assert StringFlagEnum("dev").usage_line() == "-dev=[]"

    def test_custom_generator(self) -> None:
        enum: StringFlagEnum[str] = StringFlagEnum("p", usage_line=lambda: "-p=<preset>")
        enum.register("u", "utc")
        assert enum.usage_line() == "-p=<preset>"
        assert enum.default_usage_line() == "-p=[u]"

    def test_usage_tracks_later_registrations(self) -> None:
        enum = _preset_enum()
        enum.register("f", "friendly-format")
        assert enum.usage_line() == "-p=[u|utc|s|serial|f]"
