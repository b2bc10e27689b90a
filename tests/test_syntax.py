"""Tests for syntax flag validation and hint decoration."""

import pytest

from exmap.exceptions import InvalidOperation
from exmap.syntax import FLAGS, decorate_hint, parameter_labels, validate_syntax


def test_all_flags_are_valid() -> None:
    assert validate_syntax("".join(FLAGS)) == "".join(FLAGS)


def test_empty_syntax_is_valid() -> None:
    assert validate_syntax("") == ""


def test_unknown_flags_are_reported() -> None:
    with pytest.raises(InvalidOperation) as exc_info:
        validate_syntax("r!zq")
    assert "qz" in str(exc_info.value)


class TestParameterLabels:
    def test_defaults(self) -> None:
        labels = parameter_labels("+Re", [])
        assert labels["e"] == "argument"
        assert labels["R"] == "register"
        assert labels["+"] == "command"

    def test_positional_override(self) -> None:
        labels = parameter_labels("+Re", ["file", "reg", "cmd"])
        assert labels == {"e": "file", "R": "reg", "+": "cmd"}

    def test_only_enabled_slots_take_names(self) -> None:
        labels = parameter_labels("R", ["x"])
        assert labels["R"] == "x"
        assert labels["e"] == "argument"


class TestDecorateHint:
    @pytest.mark.parametrize(
        ("syntax", "names", "expected"),
        [
            ("", [], "w[rite]"),
            ("r", [], "[range]w[rite]"),
            ("r%", [], "[range=%]w[rite]"),
            ("!", [], "w[rite][!]"),
            ("e", [], "w[rite] [argument ...]"),
            ("e1", ["file"], "w[rite] [file]"),
            ("E1", ["mark"], "w[rite] {mark}"),
            ("E", ["option"], "w[rite] {option ...}"),
            ("rRc", [], "[range]w[rite] [register] [count]"),
            ("L", [], "w[rite] {line}"),
            ("l", [], "w[rite] [line]"),
            ("r~", [], "[range]w[rite] /pattern/replacement/[flags]"),
            ("/", [], "w[rite] /pattern/[flags]"),
            ("e|", ["keys"], "w[rite] [keys ...] [|...]"),
            ("xm", [], "w[rite]"),
        ],
    )
    def test_flags(self, syntax: str, names: list[str], expected: str) -> None:
        assert decorate_hint("w[rite]", syntax, names) == expected

    def test_full_write_hint(self) -> None:
        assert (
            decorate_hint("w[rite]", "!r%+e1x", ["file"])
            == "[range=%]w[rite][!] [+command] [file]"
        )
