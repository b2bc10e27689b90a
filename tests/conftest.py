"""Shared test fixtures."""

from pathlib import Path

import pytest

from exmap.commands import ExMap


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def ex_map() -> ExMap:
    """A private map holding write, wq and quit."""
    ex_map = ExMap()
    ex_map.define(["write", "w"], "!r%+e1x", "ex_write", parameter_names=["file"])
    ex_map.define("wq", "!r%+e1x", "ex_wq", parameter_names=["file"])
    ex_map.define(["quit", "q"], "!", "ex_quit")
    return ex_map
