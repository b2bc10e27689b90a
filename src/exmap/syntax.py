"""Syntax flag vocabulary and hint decoration."""

from collections.abc import Sequence

from exmap.exceptions import InvalidOperation

FLAGS = {
    "!": "bang allowed directly after name",
    "r": "range allowed",
    "%": "default to whole document if no range",
    "+": "+command argument allowed",
    "c": "count > 0 allowed",
    "e": "extra argument(s) allowed",
    "E": "extra argument(s) required",
    "1": "only one extra argument allowed",
    "x": "expand filename meta characters in extra arguments",
    "R": "register allowed",
    "l": "optional line argument allowed",
    "L": "line argument required",
    "~": "/regexp/replace/flags argument allowed",
    "/": "/regexp/flags argument allowed",
    "|": "do not end command at a bar",
    "m": "command modifies document",
}

DEFAULT_PARAMETER_NAMES = {
    "+": "command",
    "R": "register",
    "e": "argument",
}


def validate_syntax(syntax: str) -> str:
    """Reject flag characters outside the vocabulary."""
    unknown = sorted({ch for ch in syntax if ch not in FLAGS})
    if unknown:
        raise InvalidOperation(f"Unknown syntax flag(s): {''.join(unknown)}")
    return syntax


def parameter_labels(syntax: str, parameter_names: Sequence[str]) -> dict[str, str]:
    """Assign display names to the named slots the syntax enables.

    Slots are filled positionally in the order argument, register, +command.
    Slots without a supplied name keep their default label.
    """
    slots = []
    if "e" in syntax or "E" in syntax:
        slots.append("e")
    if "R" in syntax:
        slots.append("R")
    if "+" in syntax:
        slots.append("+")

    labels = dict(DEFAULT_PARAMETER_NAMES)
    for slot, name in zip(slots, parameter_names):
        labels[slot] = name
    return labels


def decorate_hint(command_hint: str, syntax: str, parameter_names: Sequence[str] = ()) -> str:
    """Wrap a command hint like ``w[rite]`` with the argument shapes of ``syntax``.

    >>> decorate_hint("w[rite]", "r%!e1x", ["file"])
    '[range=%]w[rite][!] [file]'
    """
    labels = parameter_labels(syntax, parameter_names)
    parts: list[str] = []

    if "r" in syntax:
        parts.append("[range=%]" if "%" in syntax else "[range]")
    parts.append(command_hint)
    if "!" in syntax:
        parts.append("[!]")
    if "~" in syntax:
        parts.append(" /pattern/replacement/[flags]")
    if "/" in syntax:
        parts.append(" /pattern/[flags]")
    if "+" in syntax:
        parts.append(f" [+{labels['+']}]")
    if "R" in syntax:
        parts.append(f" [{labels['R']}]")
    if "c" in syntax:
        parts.append(" [count]")
    if "L" in syntax:
        parts.append(" {line}")
    elif "l" in syntax:
        parts.append(" [line]")

    argument = labels["e"] if "1" in syntax else f"{labels['e']} ..."
    if "E" in syntax:
        parts.append(f" {{{argument}}}")
    elif "e" in syntax:
        parts.append(f" [{argument}]")
    if "|" in syntax:
        parts.append(" [|...]")

    return "".join(parts)
