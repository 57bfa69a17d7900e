import logging
import os
from dataclasses import dataclass


@dataclass
class RenderConfig:
    x_symbol: str = "X"
    o_symbol: str = "O"
    empty_symbol: str = "."
    col_separator: str = "|"
    row_separator: str = "-"


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    format: str = "[%(asctime)s] %(name)s %(levelname)s: %(message)s"


@dataclass
class Config:
    """
    Host-side settings. Pass the whole Config (or just its section) to
    configure_logging() and uttt.encoding.render().
    """
    render: RenderConfig = None
    logging: LoggingConfig = None

    def __post_init__(self):
        if self.render is None:
            self.render = RenderConfig()
        if self.logging is None:
            self.logging = LoggingConfig()

    @classmethod
    def from_env(cls) -> 'Config':
        """Defaults, with UTTT_LOG_LEVEL overriding the log level."""
        config = cls()
        level = os.environ.get("UTTT_LOG_LEVEL")
        if level:
            config.logging.level = level.upper()
        return config


def configure_logging(config=None) -> logging.Logger:
    """
    Attach a stream handler to the 'uttt' logger. Hosts opt in; the engine
    never calls this.

    Args:
        config: LoggingConfig, Config (its .logging is used), or None for defaults
    """
    if config is None:
        config = LoggingConfig()
    elif isinstance(config, Config):
        config = config.logging

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    logger = logging.getLogger("uttt")
    logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    for handler in logger.handlers:
        handler.setFormatter(logging.Formatter(config.format))
    return logger
