"""YAML settings and command definition loading."""

import importlib
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from exmap.exceptions import ConfigError, ExMapError

if TYPE_CHECKING:
    from exmap.commands import ExMap
    from exmap.mapping import ExMapping

LOGGER = logging.getLogger(__name__)

EXMAP_HOME = Path("~/.exmap")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class CommandDefinition:
    """A command definition read from commands.yaml."""

    names: list[str]
    syntax: str = ""
    action: str | None = None
    expression: str | None = None
    scope: str | None = None
    parameters: list[str] = field(default_factory=list)
    documentation: str = ""

    def implementation(self) -> str | Callable[..., Any]:
        """Return the action name, or import the expression's callable."""
        if self.action is not None:
            return self.action
        return import_expression(self.expression or "")


@dataclass
class ExSettings:
    """Settings from settings.yaml."""

    prompt: str = ":"
    history_file: str = "~/.exmap_history"
    definitions_path: str | None = None
    include_builtins: bool = True
    log_level: str = "WARNING"
    default_scope: str | None = None


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load and parse a YAML file."""
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")
    return data


def load_settings(path: Path) -> ExSettings:
    """Load and validate settings.yaml."""
    data = _load_yaml(path)
    section = data.get("exmap", {}) or {}

    log_level = str(section.get("log_level", "WARNING")).upper()
    if log_level not in VALID_LOG_LEVELS:
        raise ConfigError(f"Invalid log_level: {log_level}. Must be one of {VALID_LOG_LEVELS}")

    return ExSettings(
        prompt=section.get("prompt", ":"),
        history_file=section.get("history_file", "~/.exmap_history"),
        definitions_path=section.get("definitions"),
        include_builtins=section.get("builtins", True),
        log_level=log_level,
        default_scope=section.get("scope"),
    )


def import_expression(path: str) -> Callable[..., Any]:
    """Resolve a ``package.module:function`` reference to a callable."""
    module_name, _, attr = path.partition(":")
    if not module_name or not attr:
        raise ConfigError(f"Expression must look like 'module:function', got {path!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import {module_name} for expression {path}: {e}") from e
    target: Any = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ConfigError(f"{module_name} has no attribute {attr}") from e
    if not callable(target):
        raise ConfigError(f"Expression {path} is not callable")
    return target


def load_definitions(path: Path) -> list[CommandDefinition]:
    """Load and validate commands.yaml."""
    data = _load_yaml(path)
    raw_commands = data.get("commands", []) or []
    if not isinstance(raw_commands, list):
        raise ConfigError(f"'commands' in {path} must be a list")

    definitions: list[CommandDefinition] = []
    for i, entry in enumerate(raw_commands):
        if not isinstance(entry, dict):
            raise ConfigError(f"Command #{i + 1} in {path} must be a mapping")
        names = entry.get("names", entry.get("name"))
        if isinstance(names, str):
            names = [names]
        if not names:
            raise ConfigError(f"Command #{i + 1} in {path} has no name")
        if ("action" in entry) == ("expression" in entry):
            raise ConfigError(f"Command '{names[0]}' needs exactly one of 'action' or 'expression'")
        key = "action" if "action" in entry else "expression"
        if not isinstance(entry[key], str) or not entry[key]:
            raise ConfigError(f"Command '{names[0]}' has an empty '{key}'")
        definitions.append(
            CommandDefinition(
                names=[str(n) for n in names],
                syntax=str(entry.get("syntax", "") or ""),
                action=entry.get("action"),
                expression=entry.get("expression"),
                scope=entry.get("scope"),
                parameters=entry.get("parameters", []) or [],
                documentation=entry.get("documentation", "") or "",
            )
        )
    return definitions


def apply_definitions(ex_map: "ExMap", definitions: list[CommandDefinition]) -> list["ExMapping"]:
    """Define each command in ``ex_map``, in file order."""
    mappings = []
    for definition in definitions:
        try:
            mapping = ex_map.define(
                definition.names,
                definition.syntax,
                definition.implementation(),
                scope=definition.scope,
                parameter_names=definition.parameters,
                documentation=definition.documentation,
            )
        except ConfigError:
            raise
        except ExMapError as e:
            raise ConfigError(f"Invalid definition for '{definition.names[0]}': {e}") from e
        mappings.append(mapping)
    LOGGER.info("Loaded %d command definition(s)", len(mappings))
    return mappings
