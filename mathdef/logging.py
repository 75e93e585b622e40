"""
Math Invaders logging.

Per-module loggers that print "[module] LEVEL: message" lines. Each
module can be turned up or down on its own without touching the rest,
which keeps the per-frame chatter of the game loop out of the way until
it is needed.

Usage:
    from mathdef.logging import get_logger

    log = get_logger('math_invaders')
    log.debug("Spawned ship %d", index)
    log.info("Game started")

Configuration:
    Environment variables (read once on import):
        MATHDEF_LOG_LEVEL=DEBUG             # default for every module
        MATHDEF_LOG_MATH_INVADERS=TRACE     # one module
        MATHDEF_LOG_SCHEDULER=OFF

    Or at runtime, e.g. from the --log-level launcher flag:
        configure_logging(level='DEBUG', modules={'scheduler': 'INFO'})
"""

import os
import sys
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Dict, Optional, TextIO


class LogLevel(IntEnum):
    """Severity levels; numbering follows the stdlib logging module."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


# Short labels printed in front of each message
_LABELS = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
    LogLevel.CRITICAL: 'CRIT',
}

ENV_PREFIX = 'MATHDEF_LOG_'
_ENV_DEFAULT = ENV_PREFIX + 'LEVEL'


class _Settings:
    """Process-wide logging state shared by every GameLogger."""

    def __init__(self):
        self.default = LogLevel.INFO
        self.overrides: Dict[str, LogLevel] = {}
        self.stream: Optional[TextIO] = None

    def level_for(self, key: str) -> LogLevel:
        return self.overrides.get(key, self.default)

    def output(self) -> TextIO:
        # Resolved per write so a swapped sys.stdout (pytest capture) is honored
        return self.stream if self.stream is not None else sys.stdout


_settings = _Settings()


def module_key(module: str) -> str:
    """Normalize a module name the way environment overrides spell it."""
    return module.lower().replace('.', '_').replace('/', '_').replace('-', '_')


def parse_level(name: str) -> LogLevel:
    """Level for a name such as 'debug' or 'WARN'. Unknown names mean INFO."""
    name = name.strip().upper()
    if name == 'WARN':
        return LogLevel.WARNING
    return LogLevel.__members__.get(name, LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Set the default level, per-module overrides and output stream.

    Args:
        level: Default level for modules without an override
        modules: module name -> level name, merged into existing overrides
        stream: Where to write; None means the current sys.stdout
    """
    _settings.default = parse_level(level)
    for name, module_level in (modules or {}).items():
        _settings.overrides[module_key(name)] = parse_level(module_level)
    _settings.stream = stream


def disable_logging() -> None:
    """Silence every logger, dropping per-module overrides."""
    _settings.default = LogLevel.OFF
    _settings.overrides.clear()


def apply_environment(environ: Optional[Dict[str, str]] = None) -> None:
    """Read MATHDEF_LOG_* variables into the current settings."""
    environ = os.environ if environ is None else environ
    for key, value in environ.items():
        if key == _ENV_DEFAULT:
            _settings.default = parse_level(value)
        elif key.startswith(ENV_PREFIX):
            _settings.overrides[module_key(key[len(ENV_PREFIX):])] = parse_level(value)


apply_environment()


class GameLogger:
    """Logger bound to one module name.

    The effective level is looked up on every call, so configuration
    changes apply to loggers that already exist.
    """

    def __init__(self, module: str):
        self.module = module
        self._key = module_key(module)

    @property
    def level(self) -> LogLevel:
        return _settings.level_for(self._key)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def log(self, level: LogLevel, msg: str, *args) -> None:
        """Write msg % args at the given level if the module allows it."""
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                # Mismatched placeholders; keep the arguments visible
                msg = f"{msg} {args}"
        print(f"[{self.module}] {_LABELS[level]}: {msg}", file=_settings.output())

    def trace(self, msg: str, *args) -> None:
        """Per-frame detail, normally off."""
        self.log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self.log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self.log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self.log(LogLevel.WARNING, msg, *args)

    warn = warning

    def error(self, msg: str, *args) -> None:
        self.log(LogLevel.ERROR, msg, *args)

    def critical(self, msg: str, *args) -> None:
        self.log(LogLevel.CRITICAL, msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log an error followed by the traceback being handled, if any."""
        self.log(LogLevel.ERROR, msg, *args)
        if sys.exc_info()[0] is None:
            return
        for line in traceback.format_exc().rstrip().splitlines():
            self.log(LogLevel.ERROR, "  %s", line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> GameLogger:
    """Shared logger for module; repeated calls return the same instance."""
    return GameLogger(module)
