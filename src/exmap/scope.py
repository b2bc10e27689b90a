"""Scope selector matching for scope-restricted commands."""

from collections.abc import Callable, Sequence

ScopeMatcher = Callable[[str, Sequence[str]], bool]


def _scope_names(scope: str | Sequence[str]) -> list[str]:
    if isinstance(scope, str):
        return scope.split()
    return [name for part in scope for name in part.split()]


def _element_matches(element: str, name: str) -> bool:
    return name == element or name.startswith(element + ".")


def _path_matches(path: list[str], names: list[str]) -> bool:
    """Match selector elements against scope names in order, allowing gaps."""
    i = 0
    for name in names:
        if i < len(path) and _element_matches(path[i], name):
            i += 1
    return i == len(path)


def match_scope(selector: str, scope: str | Sequence[str]) -> bool:
    """Return True if ``selector`` applies in ``scope``.

    The scope is a list of scope names, outermost first, either as a
    sequence or as one space-separated string. The selector holds
    comma-separated alternatives, each a space-separated descendant path.
    ``comment`` matches ``source.python comment.line.number-sign``.
    """
    names = _scope_names(scope)
    for alternative in selector.split(","):
        path = alternative.split()
        if path and _path_matches(path, names):
            return True
    return False
