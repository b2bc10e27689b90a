"""Entry point for python -m exmap."""

import argparse
import logging
import sys
from pathlib import Path

from exmap.app import ReplApp
from exmap.cli import build_map, run_hints, run_init, run_lookup
from exmap.config import EXMAP_HOME, ExSettings, load_settings
from exmap.exceptions import ConfigError

LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(prog="exmap", description="Ex command name resolver")
    parser.add_argument("--settings", help="Path to settings.yaml")
    parser.add_argument("--definitions", help="Extra command definitions (commands.yaml)")
    parser.add_argument(
        "--no-builtins",
        action="store_true",
        help="Do not define the standard ex commands",
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("init", help="Initialize ~/.exmap config directory")

    lookup_parser = subparsers.add_parser("lookup", help="Resolve an abbreviated command name")
    lookup_parser.add_argument("token", help="Command name, possibly abbreviated")
    lookup_parser.add_argument("--scope", help="Scope to resolve in, e.g. 'source.python comment'")

    hints_parser = subparsers.add_parser("hints", help="Show syntax hints for all commands")
    hints_parser.add_argument("--scope", help="Only show commands applicable in this scope")

    return parser


def _load_exmap_settings(path: str | None = None) -> ExSettings:
    """Load settings from an explicit path, ~/.exmap, or fall back to defaults."""
    if path:
        return load_settings(Path(path))

    home_settings = EXMAP_HOME.expanduser() / "settings.yaml"
    if home_settings.exists():
        return load_settings(home_settings)

    return ExSettings()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Run a CLI subcommand or the REPL."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "init":
        run_init()
        return 0

    try:
        settings = _load_exmap_settings(args.settings)
        _configure_logging(settings.log_level)

        definitions = args.definitions or settings.definitions_path
        definitions_path = Path(definitions).expanduser() if definitions else None
        if definitions_path is not None and not definitions_path.exists():
            if args.definitions:
                raise ConfigError(f"Config file not found: {definitions_path}")
            LOGGER.info("No definitions file at %s, skipping", definitions_path)
            definitions_path = None

        ex_map = build_map(
            definitions_path=definitions_path,
            include_builtins=settings.include_builtins and not args.no_builtins,
            private=args.command is None,
        )
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    scope = getattr(args, "scope", None) or settings.default_scope

    if args.command == "lookup":
        return run_lookup(ex_map, args.token, scope)

    if args.command == "hints":
        run_hints(ex_map, scope)
        return 0

    # No subcommand, start REPL on its own frozen copy
    ex_map.freeze()
    app = ReplApp(settings=settings, ex_map=ex_map)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
