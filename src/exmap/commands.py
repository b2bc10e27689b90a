"""Command registry and abbreviation resolution."""

import logging
import threading
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from exmap.builtins import define_builtins
from exmap.exceptions import (
    AmbiguousCommandError,
    CommandNotFoundError,
    InvalidOperation,
    UnknownMappingError,
)
from exmap.mapping import ExMapping
from exmap.scope import ScopeMatcher, match_scope

LOGGER = logging.getLogger(__name__)

Scope = str | Sequence[str] | None


class LookupStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    AMBIGUOUS = "ambiguous"


@dataclass
class LookupResult:
    """Outcome of resolving a typed token against a map."""

    token: str
    status: LookupStatus
    mapping: ExMapping | None = None
    matches: list[ExMapping] = field(default_factory=list)

    @property
    def candidates(self) -> list[str]:
        """Primary names of every matching command."""
        return [m.name for m in self.matches]

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    def unwrap(self) -> ExMapping:
        """Return the mapping or raise the matching error."""
        if self.status is LookupStatus.AMBIGUOUS:
            raise AmbiguousCommandError(self.token, self.candidates)
        if self.mapping is None:
            raise CommandNotFoundError(self.token)
        return self.mapping


class ExMap:
    """An ordered collection of ex command definitions."""

    def __init__(self, scope_matcher: ScopeMatcher = match_scope) -> None:
        self._mappings: list[ExMapping] = []
        self._scope_matcher = scope_matcher
        self._lock = threading.Lock()
        self._frozen = False

    @property
    def mappings(self) -> tuple[ExMapping, ...]:
        return tuple(self._mappings)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._mappings)

    def __iter__(self) -> Iterator[ExMapping]:
        return iter(self.mappings)

    def __contains__(self, mapping: object) -> bool:
        return any(m is mapping for m in self._mappings)

    def freeze(self) -> None:
        """Stop accepting definitions. Lookups are unaffected."""
        self._frozen = True

    def add(self, mapping: ExMapping) -> ExMapping:
        """Append a prebuilt mapping, or return an identical one already held."""
        with self._lock:
            if self._frozen:
                raise InvalidOperation(f"Cannot define {mapping.name}: map is frozen")
            for existing in self._mappings:
                if existing is mapping or _same_definition(existing, mapping):
                    LOGGER.debug("Command %s already defined", mapping.name)
                    return existing
            self._mappings.append(mapping)
        LOGGER.debug("Defined command %s", "/".join(mapping.names))
        return mapping

    def define(
        self,
        name: str | Sequence[str],
        syntax: str,
        implementation: str | Callable[..., Any],
        scope: str | None = None,
        parameter_names: Sequence[str] | None = None,
        documentation: str | None = None,
    ) -> ExMapping:
        """Add an ex command definition.

        Args:
            name: The primary name, or a list of names where the first is
                primary and the rest are aliases.
            syntax: Syntax flags describing the accepted arguments.
            implementation: An action method name, or a callable taking an
                optional parsed command.
            scope: Scope selector restricting where the command applies.
            parameter_names: Display names for the argument slots.
            documentation: Free text describing the command.

        Returns:
            The new definition, or the existing one if identical.

        Raises:
            InvalidOperation: If the definition is malformed or the map
                is frozen. Earlier definitions are kept either way.
        """
        if isinstance(implementation, str):
            mapping = ExMapping.with_action(
                name, syntax, implementation, scope, parameter_names, documentation
            )
        elif callable(implementation):
            mapping = ExMapping.with_expression(
                name, syntax, implementation, scope, parameter_names, documentation
            )
        else:
            raise InvalidOperation(
                f"Implementation must be an action name or a callable, "
                f"got {type(implementation).__name__}"
            )
        return self.add(mapping)

    def resolve(self, token: str, scope: Scope = None) -> LookupResult:
        """Resolve a possibly abbreviated command name.

        An exact name always wins. Otherwise the token must be a prefix
        of names belonging to exactly one command.
        """
        candidates = self.applicable(scope)

        exact = [m for m in candidates if token in m.names]
        if len(exact) == 1:
            return LookupResult(token, LookupStatus.FOUND, mapping=exact[0])
        if exact:
            return self._ambiguous(token, exact)

        matches = [m for m in candidates if any(n.startswith(token) for n in m.names)]
        if len(matches) == 1:
            return LookupResult(token, LookupStatus.FOUND, mapping=matches[0])
        if matches:
            return self._ambiguous(token, matches)
        LOGGER.debug("No command matches %r in scope %r", token, scope)
        return LookupResult(token, LookupStatus.NOT_FOUND)

    def applicable(self, scope: Scope = None) -> list[ExMapping]:
        """Return the commands available in ``scope``, in definition order."""
        return [m for m in self.mappings if m.applies_in(scope, self._scope_matcher)]

    def _ambiguous(self, token: str, matches: list[ExMapping]) -> LookupResult:
        names = [m.name for m in matches]
        LOGGER.debug("Token %r is ambiguous: %s", token, ", ".join(names))
        return LookupResult(token, LookupStatus.AMBIGUOUS, matches=matches)

    def lookup(self, token: str, scope: Scope = None) -> ExMapping:
        """Look up an ex command by name, abbreviated as long as it is unambiguous.

        Raises:
            CommandNotFoundError: Nothing matches in ``scope``.
            AmbiguousCommandError: Two or more commands match.
        """
        result = self.resolve(token, scope)
        if result.status is LookupStatus.NOT_FOUND:
            raise CommandNotFoundError(token, available=self.list_names())
        return result.unwrap()

    def find(self, token: str, scope: Scope = None) -> ExMapping | None:
        """Like lookup, but None for both missing and ambiguous tokens."""
        return self.resolve(token, scope).mapping

    def has(self, token: str, scope: Scope = None) -> bool:
        return self.resolve(token, scope).found

    def list_names(self) -> list[str]:
        """Return the primary name of every command, in definition order."""
        return [m.name for m in self._mappings]

    def all_names(self) -> list[str]:
        """Return every name and alias, in definition order."""
        return [n for m in self._mappings for n in m.names]

    def command_hint_for(self, mapping: ExMapping, prefix: str | None = None) -> str:
        """Return the name with its optional tail bracketed, e.g. ``w[rite]``."""
        if mapping not in self:
            raise UnknownMappingError(mapping.name)

        name = mapping.name
        if prefix:
            name = next((n for n in mapping.names if n.startswith(prefix)), name)

        for length in range(1, len(name)):
            if self.resolve(name[:length]).mapping is mapping:
                return f"{name[:length]}[{name[length:]}]"
        return name

    def syntax_hint_for(self, mapping: ExMapping, prefix: str | None = None) -> str:
        """Return a hint like ``[range]w[rite][!] [file]``.

        For commands with aliases that are not prefixes of each other
        (tabedit and tabnew), ``prefix`` picks the alias to show.
        """
        return mapping.syntax_hint_with_command_hint(self.command_hint_for(mapping, prefix))


def _same_definition(a: ExMapping, b: ExMapping) -> bool:
    return (
        a.names == b.names
        and a.syntax == b.syntax
        and a.implementation == b.implementation
        and a.scope_selector == b.scope_selector
        and a.parameter_names == b.parameter_names
        and a.documentation == b.documentation
    )


_default_map: ExMap | None = None
_default_map_lock = threading.Lock()


def default_map() -> ExMap:
    """The process-wide map of built-in commands, created on first use."""
    global _default_map
    if _default_map is None:
        with _default_map_lock:
            if _default_map is None:
                ex_map = ExMap()
                define_builtins(ex_map)
                LOGGER.debug("Default map created with %d commands", len(ex_map))
                _default_map = ex_map
    return _default_map
