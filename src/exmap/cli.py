"""Shared logic for CLI subcommands and REPL builtins."""

from pathlib import Path

from exmap.builtins import define_builtins
from exmap.commands import ExMap, LookupStatus, Scope, default_map
from exmap.config import EXMAP_HOME, apply_definitions, load_definitions
from exmap.mapping import ExMapping

DEFAULT_SETTINGS_YAML = """\
exmap:
  prompt: ":"
  history_file: ~/.exmap_history
  builtins: true
  log_level: WARNING
  definitions: ~/.exmap/commands.yaml
"""

DEFAULT_COMMANDS_YAML = """\
# Extra ex commands. Each entry needs names and one of action/expression.
#
# commands:
#   - names: [make, mak]
#     syntax: "!e"
#     action: ex_make
#     parameters: [target]
#     documentation: Run make with +target+.
commands: []
"""


def build_map(
    definitions_path: Path | None = None,
    include_builtins: bool = True,
    private: bool = False,
) -> ExMap:
    """Return the map to resolve against.

    The shared default map is used as-is when there is nothing to add;
    extra definitions go into a private map so the default stays pristine.
    Pass ``private=True`` when the caller will freeze or otherwise own the map.
    """
    if definitions_path is None and include_builtins and not private:
        return default_map()

    ex_map = ExMap()
    if include_builtins:
        define_builtins(ex_map)
    if definitions_path is not None:
        apply_definitions(ex_map, load_definitions(definitions_path.expanduser()))
    return ex_map


def describe(ex_map: ExMap, mapping: ExMapping, prefix: str | None = None) -> str:
    """One help line: the syntax hint followed by the documentation."""
    hint = ex_map.syntax_hint_for(mapping, prefix)
    if mapping.documentation:
        return f"  :{hint}  -- {mapping.documentation}"
    return f"  :{hint}"


def run_lookup(ex_map: ExMap, token: str, scope: Scope = None) -> int:
    """Resolve ``token`` and print the result. Returns a process exit code."""
    result = ex_map.resolve(token, scope)
    if result.status is LookupStatus.AMBIGUOUS:
        print(f"Ambiguous command: {token}")
        for mapping in result.matches:
            print(describe(ex_map, mapping, prefix=token))
        return 1
    if result.mapping is None:
        print(f"Not an editor command: {token}")
        return 1

    mapping = result.mapping
    print(mapping.name)
    print(describe(ex_map, mapping, prefix=token))
    if len(mapping.names) > 1:
        print(f"  Aliases: {', '.join(mapping.names[1:])}")
    if mapping.scope_selector:
        print(f"  Scope: {mapping.scope_selector}")
    return 0


def run_hints(ex_map: ExMap, scope: Scope = None) -> None:
    """Print the hint of every command applicable in ``scope``."""
    mappings = ex_map.applicable(scope)
    if not mappings:
        print("No commands defined.")
        return
    for mapping in mappings:
        print(describe(ex_map, mapping))


def run_init() -> None:
    """Bootstrap the ~/.exmap directory with default config files.

    Idempotent: never overwrites existing files.
    """
    home = EXMAP_HOME.expanduser()
    created_anything = False

    if not home.exists():
        home.mkdir(parents=True)
        print(f"Created {home}")
        created_anything = True

    for filename, content in (
        ("settings.yaml", DEFAULT_SETTINGS_YAML),
        ("commands.yaml", DEFAULT_COMMANDS_YAML),
    ):
        path = home / filename
        if not path.exists():
            path.write_text(content)
            print(f"Created {path}")
            created_anything = True

    if not created_anything:
        print(f"Already initialized: {home}")
