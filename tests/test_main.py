"""Tests for the entry point."""

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from exmap.__main__ import _build_parser, _load_exmap_settings, main
from exmap.commands import default_map
from exmap.config import ExSettings


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path):
    home = tmp_path / ".exmap"
    with patch("exmap.__main__.EXMAP_HOME", home), patch("exmap.cli.EXMAP_HOME", home):
        yield home


class TestBuildParser:
    def test_parses_init(self) -> None:
        args = _build_parser().parse_args(["init"])
        assert args.command == "init"

    def test_parses_lookup(self) -> None:
        args = _build_parser().parse_args(["lookup", "w"])
        assert args.command == "lookup"
        assert args.token == "w"
        assert args.scope is None

    def test_parses_lookup_with_scope(self) -> None:
        args = _build_parser().parse_args(["lookup", "todo", "--scope", "comment"])
        assert args.scope == "comment"

    def test_parses_hints(self) -> None:
        args = _build_parser().parse_args(["hints"])
        assert args.command == "hints"

    def test_parses_global_options(self) -> None:
        args = _build_parser().parse_args(["--definitions", "x.yaml", "--no-builtins", "hints"])
        assert args.definitions == "x.yaml"
        assert args.no_builtins is True

    def test_no_args_gives_no_command(self) -> None:
        args = _build_parser().parse_args([])
        assert args.command is None


class TestLoadSettings:
    def test_defaults_without_files(self) -> None:
        assert _load_exmap_settings() == ExSettings()

    def test_reads_home_settings(self, isolated_home: Path) -> None:
        isolated_home.mkdir()
        (isolated_home / "settings.yaml").write_text(yaml.dump({"exmap": {"prompt": "ex> "}}))
        assert _load_exmap_settings().prompt == "ex> "

    def test_explicit_path(self, fixtures_dir: Path) -> None:
        settings = _load_exmap_settings(str(fixtures_dir / "valid_settings.yaml"))
        assert settings.include_builtins is False


class TestMain:
    def test_init(self, isolated_home: Path) -> None:
        assert main(["init"]) == 0
        assert (isolated_home / "settings.yaml").exists()

    def test_lookup_found(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["lookup", "w"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "write"

    def test_lookup_ambiguous(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["lookup", "ta"]) == 1
        assert "Ambiguous command: ta" in capsys.readouterr().out

    def test_lookup_with_definitions(
        self, fixtures_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        definitions = str(fixtures_dir / "valid_commands.yaml")
        assert main(["--definitions", definitions, "lookup", "mak"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "make"

    def test_lookup_respects_scope(self, fixtures_dir: Path) -> None:
        definitions = str(fixtures_dir / "valid_commands.yaml")
        args = ["--definitions", definitions, "--no-builtins", "lookup", "todo"]
        assert main(args + ["--scope", "source"]) == 1
        assert main(args + ["--scope", "comment"]) == 0

    def test_hints(self, fixtures_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        definitions = str(fixtures_dir / "valid_commands.yaml")
        assert main(["--definitions", definitions, "--no-builtins", "hints"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "  :m[ake][!] [target ...]  -- Run make with +target+."
        assert lines[1] == "  :r[un] {file}"

    def test_missing_definitions_is_config_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--definitions", str(tmp_path / "nope.yaml"), "hints"]) == 1
        assert "Config error" in capsys.readouterr().err

    def test_missing_definitions_from_settings_is_skipped(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        settings = tmp_path / "settings.yaml"
        settings.write_text(yaml.dump({"exmap": {"definitions": str(tmp_path / "nope.yaml")}}))
        assert main(["--settings", str(settings), "lookup", "w"]) == 0

    def test_invalid_settings(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        settings = tmp_path / "settings.yaml"
        settings.write_text(yaml.dump({"exmap": {"log_level": "loud"}}))
        assert main(["--settings", str(settings), "hints"]) == 1
        assert "log_level" in capsys.readouterr().err

    def test_starts_repl_without_subcommand(self) -> None:
        with patch("exmap.__main__.ReplApp") as repl_cls:
            repl_cls.return_value.run.return_value = 0
            assert main(["--no-builtins"]) == 0
        ex_map = repl_cls.call_args.kwargs["ex_map"]
        assert ex_map.frozen is True
        assert len(ex_map) == 0

    def test_repl_leaves_default_map_unfrozen(self) -> None:
        with patch("exmap.__main__.ReplApp") as repl_cls:
            repl_cls.return_value.run.return_value = 0
            assert main([]) == 0
        ex_map = repl_cls.call_args.kwargs["ex_map"]
        assert ex_map.frozen is True
        assert ex_map is not default_map()
        assert ex_map.lookup("w").name == "write"
        assert default_map().frozen is False
