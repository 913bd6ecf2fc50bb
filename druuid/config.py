import json
from datetime import datetime
from pathlib import Path

from druuid.generator import epoch_offset
from druuid.internal.logging import LogLevel, StructuredLogger

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class DruuidConfig:
    __slots__ = ("epoch",)

    def __init__(self, epoch="1970-01-01T00:00:00"):
        self.epoch = epoch

    @property
    def epoch_datetime(self):
        return datetime.fromisoformat(self.epoch)

    @property
    def epoch_offset(self):
        return epoch_offset(self.epoch_datetime)


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level

    @property
    def log_level(self):
        return LogLevel.parse(self.level)


class Config:
    __slots__ = ("druuid", "logging")

    def __init__(self, druuid=None, logging=None):
        self.druuid = druuid or DruuidConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            DruuidConfig(**d.get("druuid", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))


def configure_logging(config):
    """Install a process logger at the configured level."""
    return StructuredLogger.configure(min_level=config.logging.log_level)
