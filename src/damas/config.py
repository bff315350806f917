"""Configuration management for Spanish draughts."""

import os
import logging
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, asdict

from .errors import ConfigError
from .rules import DEFAULT_SEARCH_DEPTH

logger = logging.getLogger(__name__)


# Log formats shared by every handler set up through utils.setup_logger
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
LOG_FORMAT_DETAILED = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DIFFICULTIES = ("easy", "medium", "hard", "pvp")
SIDES = ("white", "red")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_config_dir() -> Path:
    """Get the configuration directory."""
    # Use XDG on Linux/WSL, or fallback
    if os.name == 'nt':
        config_base = Path(os.environ.get('APPDATA', Path.home() / 'AppData' / 'Roaming'))
    else:
        config_base = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config'))

    return config_base / 'damas'


def get_config_file() -> Path:
    """Get the configuration file path."""
    return get_config_dir() / 'settings.yaml'


def _check_int(name: str, value: Any, minimum: Optional[int] = None) -> None:
    """Raise ConfigError unless value is an integer no smaller than minimum."""
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if minimum is not None and value < minimum:
        raise ConfigError(f"{name} must be at least {minimum}, got {value}")


@dataclass
class GameSettings:
    """Game-related settings."""
    difficulty: str = "easy"  # easy, medium, hard, pvp
    automated_side: str = "red"  # white, red


@dataclass
class SearchSettings:
    """Automated opponent settings."""
    depth: int = DEFAULT_SEARCH_DEPTH  # Used by the hard difficulty
    seed: Optional[int] = None  # Seeds the random policies
    move_delay_ms: int = 350  # Pause the front end takes before an automated move


@dataclass
class LoggingSettings:
    """Logging settings."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Main configuration class."""
    game: GameSettings = field(default_factory=GameSettings)
    search: SearchSettings = field(default_factory=SearchSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def validate(self) -> "Config":
        """
        Check that every value is usable.

        Raises:
            ConfigError: On the first invalid value.
        """
        if self.game.difficulty not in DIFFICULTIES:
            raise ConfigError(
                f"Unknown difficulty {self.game.difficulty!r}, expected one of {DIFFICULTIES}"
            )
        if self.game.automated_side not in SIDES:
            raise ConfigError(
                f"Unknown side {self.game.automated_side!r}, expected one of {SIDES}"
            )
        _check_int("search.depth", self.search.depth, minimum=1)
        _check_int("search.move_delay_ms", self.search.move_delay_ms, minimum=0)
        if self.search.seed is not None:
            _check_int("search.seed", self.search.seed)
        if not isinstance(self.logging.level, str) or self.logging.level.upper() not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level {self.logging.level!r}")
        if self.logging.log_file is not None and not isinstance(self.logging.log_file, str):
            raise ConfigError(f"Log file must be a path, got {self.logging.log_file!r}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'game': asdict(self.game),
            'search': asdict(self.search),
            'logging': asdict(self.logging),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        config = cls()

        if 'game' in data:
            config.game = GameSettings(**data['game'])

        if 'search' in data:
            config.search = SearchSettings(**data['search'])

        if 'logging' in data:
            config.logging = LoggingSettings(**data['logging'])

        return config

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = get_config_file()

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """
        Load configuration from file.

        A missing or unreadable file gives the defaults. Values that parse
        but are out of range raise ConfigError.
        """
        if path is None:
            path = get_config_file()

        if not path.exists():
            return cls()

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
            if data is None:
                return cls()
            config = cls.from_dict(data)
        except (OSError, yaml.YAMLError, TypeError) as e:
            logger.warning("Failed to load config from %s: %s", path, e)
            return cls()

        return config.validate()


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def set_config(config: Config) -> Config:
    """Replace the global configuration instance."""
    global _config
    _config = config.validate()
    return _config


def save_config() -> Path:
    """Save the global configuration to the settings file."""
    path = get_config_file()
    get_config().save(path)
    logger.info("Saved settings to %s", path)
    return path
