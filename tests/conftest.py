"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's settings file."""
    from damas import config

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    monkeypatch.setattr(config, "_config", config.Config())
    return config.get_config()


@pytest.fixture
def empty_board():
    """Create an empty board."""
    from damas.board import Board
    return Board()


@pytest.fixture
def initial_position():
    """Create the initial position."""
    from damas.position import Position
    return Position.initial()
