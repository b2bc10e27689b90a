"""Tests for custom exception hierarchy."""

from exmap.exceptions import (
    AmbiguousCommandError,
    CommandNotFoundError,
    ConfigError,
    ExMapError,
    InvalidOperation,
    UnknownMappingError,
)


def test_exmap_error_is_base_exception() -> None:
    err = ExMapError("base error")
    assert isinstance(err, Exception)
    assert str(err) == "base error"


def test_config_error_inherits_exmap_error() -> None:
    assert isinstance(ConfigError("bad config"), ExMapError)


def test_invalid_operation_inherits_exmap_error() -> None:
    assert isinstance(InvalidOperation("nope"), ExMapError)


def test_command_not_found_stores_token_and_available() -> None:
    err = CommandNotFoundError("foo", available=["bar", "baz"])
    assert err.token == "foo"
    assert err.available == ["bar", "baz"]
    assert "foo" in str(err)


def test_command_not_found_defaults_available() -> None:
    assert CommandNotFoundError("foo").available == []


def test_ambiguous_stores_candidates() -> None:
    err = AmbiguousCommandError("w", ["write", "wq"])
    assert err.token == "w"
    assert err.candidates == ["write", "wq"]
    assert str(err) == "Ambiguous command: w. Could be: write, wq"
    assert isinstance(err, ExMapError)


def test_unknown_mapping_stores_name() -> None:
    err = UnknownMappingError("write")
    assert err.name == "write"
    assert isinstance(err, ExMapError)
