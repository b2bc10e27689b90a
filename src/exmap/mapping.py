"""Ex command definitions and their implementation handles."""

import inspect
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from exmap.exceptions import InvalidOperation
from exmap.scope import ScopeMatcher, match_scope
from exmap.syntax import decorate_hint, validate_syntax


@dataclass(frozen=True)
class NativeAction:
    """An action method looked up by name on a target object."""

    selector: str

    def invoke(self, command: Any = None, target: Any = None) -> Any:
        """Call ``target.<selector>`` with the parsed command, if any."""
        if target is None:
            raise InvalidOperation(f"No target to send {self.selector} to")
        method = getattr(target, self.selector, None)
        if method is None:
            raise InvalidOperation(
                f"{type(target).__name__} does not respond to {self.selector}"
            )
        if command is None:
            return method()
        return method(command)


@dataclass(frozen=True)
class ScriptExpression:
    """A user-supplied callable taking zero or one argument."""

    function: Callable[..., Any]

    def _accepts_argument(self) -> bool:
        try:
            params = inspect.signature(self.function).parameters.values()
        except (TypeError, ValueError):
            return True
        return any(
            p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL)
            for p in params
        )

    def invoke(self, command: Any = None, target: Any = None) -> Any:
        """Call the function, passing the parsed command when it takes one."""
        if self._accepts_argument():
            return self.function(command)
        return self.function()


Implementation = NativeAction | ScriptExpression


class ExMapping:
    """A definition of an ex command.

    ``names[0]`` is the primary name used in messages; the rest are
    aliases. Everything but the alias list is fixed at construction.
    """

    def __init__(
        self,
        names: str | Sequence[str],
        syntax: str = "",
        action: str | None = None,
        expression: Callable[..., Any] | None = None,
        scope: str | None = None,
        parameter_names: Sequence[str] | None = None,
        documentation: str | None = None,
    ) -> None:
        if isinstance(names, str):
            names = [names]
        if not names:
            raise InvalidOperation("An ex command needs at least one name")
        if any(not isinstance(n, str) or not n for n in names):
            raise InvalidOperation(f"Invalid command name in {list(names)!r}")
        if (action is None) == (expression is None):
            raise InvalidOperation(
                f"Command {names[0]} needs exactly one of an action or an expression"
            )

        self._names: list[str] = []
        for n in names:
            if n not in self._names:
                self._names.append(n)
        self._syntax = validate_syntax(syntax or "")
        self._scope_selector = scope
        self._parameter_names = tuple(parameter_names or ())
        self._documentation = documentation or ""
        self._implementation: Implementation = (
            NativeAction(action) if action is not None else ScriptExpression(expression)
        )

    @classmethod
    def with_action(
        cls,
        names: str | Sequence[str],
        syntax: str,
        action: str,
        scope: str | None = None,
        parameter_names: Sequence[str] | None = None,
        documentation: str | None = None,
    ) -> "ExMapping":
        """Build a mapping dispatching to a named action method."""
        return cls(
            names,
            syntax,
            action=action,
            scope=scope,
            parameter_names=parameter_names,
            documentation=documentation,
        )

    @classmethod
    def with_expression(
        cls,
        names: str | Sequence[str],
        syntax: str,
        expression: Callable[..., Any],
        scope: str | None = None,
        parameter_names: Sequence[str] | None = None,
        documentation: str | None = None,
    ) -> "ExMapping":
        """Build a mapping that calls a user function."""
        return cls(
            names,
            syntax,
            expression=expression,
            scope=scope,
            parameter_names=parameter_names,
            documentation=documentation,
        )

    @property
    def name(self) -> str:
        """The primary name of this command."""
        return self._names[0]

    @property
    def names(self) -> tuple[str, ...]:
        """All names and aliases of this command."""
        return tuple(self._names)

    @property
    def syntax(self) -> str:
        return self._syntax

    @property
    def scope_selector(self) -> str | None:
        return self._scope_selector

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return self._parameter_names

    @property
    def documentation(self) -> str:
        return self._documentation

    @property
    def implementation(self) -> Implementation:
        return self._implementation

    @property
    def action(self) -> str | None:
        if isinstance(self._implementation, NativeAction):
            return self._implementation.selector
        return None

    @property
    def expression(self) -> Callable[..., Any] | None:
        if isinstance(self._implementation, ScriptExpression):
            return self._implementation.function
        return None

    def add_alias(self, name: str) -> None:
        """Add an alias this command will respond to. Duplicates are ignored."""
        if not name:
            raise InvalidOperation("Alias must be a non-empty string")
        if name not in self._names:
            self._names.append(name)

    def remove_alias(self, name: str) -> None:
        """Remove an alias. The primary name cannot be removed."""
        if name == self._names[0]:
            raise InvalidOperation(f"Cannot remove primary name {name} of command")
        if name in self._names:
            self._names.remove(name)

    def applies_in(
        self, scope: str | Sequence[str] | None, matcher: ScopeMatcher = match_scope
    ) -> bool:
        """Whether this command is available in ``scope``."""
        if scope is None or self._scope_selector is None:
            return True
        return matcher(self._scope_selector, scope)

    def invoke(self, command: Any = None, target: Any = None) -> Any:
        """Run the implementation with an optional parsed command."""
        return self._implementation.invoke(command, target=target)

    def syntax_hint_with_command_hint(self, command_hint: str) -> str:
        """Return a hint like ``[range]w[rite][!] [file]``.

        ``command_hint`` is the ``w[rite]`` part. It comes from the map,
        since which leading characters are required depends on every
        other command defined there.
        """
        return decorate_hint(command_hint, self._syntax, self._parameter_names)

    def __repr__(self) -> str:
        return f"ExMapping(names={self._names!r}, syntax={self._syntax!r})"
