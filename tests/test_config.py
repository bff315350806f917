"""
Tests for configuration, logging setup and the console entry point.
"""

import logging

import pytest
import yaml

from damas import config as config_module
from damas.config import (
    Config, GameSettings, SearchSettings,
    get_config, set_config, get_config_file, save_config,
)
from damas.errors import ConfigError, DamasError
from damas.utils import setup_logger
from damas.__main__ import main, parse_square


class TestConfig:
    """Tests for Config."""

    def test_defaults(self):
        """Test the default settings."""
        config = Config()

        assert config.game.difficulty == "easy"
        assert config.game.automated_side == "red"
        assert config.search.depth == 4
        assert config.search.seed is None
        assert config.logging.level == "INFO"

    def test_save_and_load(self, tmp_path):
        """Test that settings survive a save and load."""
        path = tmp_path / "settings.yaml"
        config = Config()
        config.game.difficulty = "hard"
        config.search.depth = 6
        config.search.seed = 42

        config.save(path)
        loaded = Config.load(path)

        assert loaded == config

    def test_partial_file(self, tmp_path):
        """Test that missing sections keep their defaults."""
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.dump({"game": {"difficulty": "medium"}}))

        loaded = Config.load(path)

        assert loaded.game.difficulty == "medium"
        assert loaded.search == SearchSettings()

    def test_missing_file_gives_defaults(self, tmp_path):
        """Test that a missing file gives defaults."""
        assert Config.load(tmp_path / "nope.yaml") == Config()

    def test_empty_file_gives_defaults(self, tmp_path):
        """Test that an empty file gives defaults."""
        path = tmp_path / "settings.yaml"
        path.write_text("")

        assert Config.load(path) == Config()

    def test_unreadable_file_gives_defaults(self, tmp_path, caplog):
        """Test that invalid YAML falls back to defaults with a warning."""
        path = tmp_path / "settings.yaml"
        path.write_text("game: [unclosed")

        with caplog.at_level(logging.WARNING):
            loaded = Config.load(path)

        assert loaded == Config()
        assert "Failed to load config" in caplog.text

    def test_unknown_key_gives_defaults(self, tmp_path):
        """Test that unknown keys fall back to defaults."""
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.dump({"game": {"colour": "blue"}}))

        assert Config.load(path) == Config()

    @pytest.mark.parametrize("section, values", [
        ("game", {"difficulty": "impossible"}),
        ("game", {"automated_side": "green"}),
        ("search", {"depth": 0}),
        ("search", {"move_delay_ms": -5}),
        ("logging", {"level": "LOUD"}),
    ])
    def test_invalid_values_rejected(self, tmp_path, section, values):
        """Test that out-of-range values raise ConfigError."""
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.dump({section: values}))

        with pytest.raises(ConfigError):
            Config.load(path)

    @pytest.mark.parametrize("section, values", [
        ("search", {"depth": "four"}),
        ("search", {"depth": 2.5}),
        ("search", {"depth": True}),
        ("search", {"move_delay_ms": "slow"}),
        ("search", {"seed": [1, 2]}),
        ("logging", {"level": 5}),
        ("logging", {"log_file": 42}),
        ("game", {"difficulty": ["hard"]}),
    ])
    def test_wrong_types_rejected(self, tmp_path, section, values):
        """Test that values of the wrong type raise ConfigError."""
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.dump({section: values}))

        with pytest.raises(ConfigError):
            Config.load(path)

    def test_config_error_is_value_error(self):
        """Test that ConfigError is a ValueError."""
        assert issubclass(ConfigError, ValueError)
        assert issubclass(ConfigError, DamasError)


class TestGlobalConfig:
    """Tests for the module-level config instance."""

    def test_config_file_under_xdg(self, tmp_path):
        """Test that the settings file lives under XDG_CONFIG_HOME."""
        assert get_config_file() == tmp_path / "xdg" / "damas" / "settings.yaml"

    def test_set_config_validates(self):
        """Test that an invalid config is not installed."""
        bad = Config(game=GameSettings(difficulty="nightmare"))

        with pytest.raises(ConfigError):
            set_config(bad)

        assert get_config().game.difficulty == "easy"

    def test_set_config_replaces(self):
        """Test that set_config replaces the global config."""
        config = Config(game=GameSettings(difficulty="pvp"))

        set_config(config)

        assert get_config() is config

    def test_save_config_writes_settings_file(self):
        """Test that save_config writes the global config."""
        set_config(Config(game=GameSettings(difficulty="hard")))

        path = save_config()

        assert path == get_config_file()
        assert Config.load(path).game.difficulty == "hard"

    def test_loads_from_file_on_first_use(self, monkeypatch):
        """Test that the global config is read from disk on first use."""
        saved = Config(game=GameSettings(difficulty="medium"))
        saved.save()
        monkeypatch.setattr(config_module, "_config", None)

        assert get_config().game.difficulty == "medium"


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_console_handler(self):
        """Test that a console handler is added."""
        logger = setup_logger("damas.test.console", level="debug")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        """Test that a log file receives records."""
        log_file = tmp_path / "logs" / "game.log"

        logger = setup_logger("damas.test.file", log_file=log_file)
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert "hello" in log_file.read_text()

        for handler in logger.handlers:
            handler.close()

    def test_no_duplicate_handlers(self):
        """Test that repeated setup adds no handlers."""
        setup_logger("damas.test.repeat")
        logger = setup_logger("damas.test.repeat")

        assert len(logger.handlers) == 1


class TestMain:
    """Tests for the console entry point."""

    def test_test_mode_prints_initial_moves(self, capsys):
        """Test that --test prints the opening moves."""
        assert main(["--test"]) == 0

        out = capsys.readouterr().out
        assert "Legal moves for White: 7" in out

    def test_invalid_depth_exits(self, capsys):
        """Test that an invalid --depth exits with status 2."""
        assert main(["--depth", "0"]) == 2

        assert "Invalid configuration" in capsys.readouterr().err

    def test_quit_immediately(self, monkeypatch, capsys):
        """Test that quitting right away prints the board."""
        monkeypatch.setattr("builtins.input", lambda prompt: "q")
        monkeypatch.setattr("damas.__main__.setup_logger", lambda *args, **kwargs: None)

        assert main(["--pvp", "--log-level", "WARNING"]) == 0

        assert "White: 12  Red: 12" in capsys.readouterr().out

    def test_malformed_config_file_exits(self, tmp_path, capsys):
        """Test that a malformed settings file exits with status 2."""
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.dump({"search": {"depth": "four"}}))

        assert main(["--config", str(path)]) == 2

        assert "search.depth must be an integer" in capsys.readouterr().err

    def test_difficulty_command(self, monkeypatch, capsys):
        """Test that the d command changes the difficulty."""
        answers = iter(["d hard", "d impossible", "q"])
        monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
        monkeypatch.setattr("damas.__main__.setup_logger", lambda *args, **kwargs: None)

        assert main(["--pvp"]) == 0

        out = capsys.readouterr().out
        assert "Difficulty: hard" in out
        assert "Difficulty must be one of: easy, medium, hard, pvp" in out

    def test_save_config_flag(self, monkeypatch, capsys):
        """Test that --save-config writes the effective settings."""
        monkeypatch.setattr("builtins.input", lambda prompt: "q")
        monkeypatch.setattr("damas.__main__.setup_logger", lambda *args, **kwargs: None)

        assert main(["--difficulty", "medium", "--depth", "3", "--save-config"]) == 0

        saved = Config.load(get_config_file())
        assert saved.game.difficulty == "medium"
        assert saved.search.depth == 3
        assert "Settings saved to" in capsys.readouterr().out

    @pytest.mark.parametrize("text, expected", [
        ("5 2", (5, 2)),
        ("5,2", (5, 2)),
        ("  4   3 ", (4, 3)),
        ("5", None),
        ("a b", None),
    ])
    def test_parse_square(self, text, expected):
        """Test parsing of typed squares."""
        assert parse_square(text) == expected
