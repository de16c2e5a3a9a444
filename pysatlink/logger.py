# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging configuration for the satellite link engine"""

import logging
import sys
from enum import Enum
from typing import Optional

ROOT_LOGGER = "pysatlink"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class LogLevel(Enum):
    """Log levels understood by :func:`setup_logger`"""
    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


logging.addLevelName(LogLevel.TRACE.value, "TRACE")


def _trace(self, message, *args, **kwargs):
    if self.isEnabledFor(LogLevel.TRACE.value):
        self._log(LogLevel.TRACE.value, message, args, **kwargs)


logging.Logger.trace = _trace


def level_value(level: str) -> int:
    """Map a level name (case-insensitive) to its numeric value

    Raises
    ------
    ValueError
        If the name is not one of the :class:`LogLevel` members
    """
    try:
        return LogLevel[level.upper()].value
    except KeyError:
        names = ', '.join(member.name for member in LogLevel)
        raise ValueError(f"Unknown log level '{level}', expected one of: {names}") from None


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level name"""

    COLORS = {
        'TRACE': '\033[36m',     # Cyan
        'DEBUG': '\033[34m',     # Blue
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # Work on a copy so file handlers sharing the record keep the plain name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logger(name: str = ROOT_LOGGER,
                 level: str = "INFO",
                 log_file: Optional[str] = None,
                 console: bool = True,
                 color: bool = True) -> logging.Logger:
    """
    Configure a logger with console and/or file handlers

    Parameters:
    -----------
    name : str
        Logger name; child modules of ``pysatlink`` propagate to the root one
    level : str
        Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_file : Optional[str]
        Log file path (if None, no file logging)
    console : bool
        Enable console output on stdout
    color : bool
        Colour the level name on the console

    Returns:
    --------
    logging.Logger
        Configured logger
    """
    value = level_value(level)

    logger = logging.getLogger(name)
    logger.setLevel(value)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(value)
        formatter_cls = ColoredFormatter if color else logging.Formatter
        console_handler.setFormatter(formatter_cls(LOG_FORMAT, datefmt='%H:%M:%S'))
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(value)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger by name"""
    return logging.getLogger(name)


class LogContext:
    """Context manager for temporary log level change"""

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = level_value(level)
        self.old_level = None

    def __enter__(self):
        self.old_level = self.logger.level
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.old_level)


class LoggerConfig:
    """Per-module log levels applied on top of the package logger"""

    def __init__(self):
        self.module_levels = {}
        self.default_level = "INFO"
        self.log_file = None
        self.console = True

    def set_module_level(self, module_name: str, level: str):
        """Set log level for a specific module, e.g. ``pysatlink.link.classifier``"""
        level_value(level)
        self.module_levels[module_name] = level
        logging.getLogger(module_name).setLevel(level_value(level))

    def get_level_for_module(self, module_name: str) -> str:
        return self.module_levels.get(module_name, self.default_level)

    def configure_from_dict(self, config: dict):
        """Configure from a dictionary

        Unknown keys raise ``ValueError`` so that typos do not pass silently.
        """
        known = {'default_level', 'log_file', 'console', 'module_levels'}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"Unknown logging config keys: {sorted(unknown)}")

        if 'default_level' in config:
            level_value(config['default_level'])
            self.default_level = config['default_level']
        if 'log_file' in config:
            self.log_file = config['log_file']
        if 'console' in config:
            self.console = bool(config['console'])
        for module, level in config.get('module_levels', {}).items():
            self.set_module_level(module, level)

    def setup_all_loggers(self) -> logging.Logger:
        """Install handlers on the package logger; modules only get levels"""
        root = setup_logger(ROOT_LOGGER, self.default_level, self.log_file, self.console)
        for module, level in self.module_levels.items():
            logging.getLogger(module).setLevel(level_value(level))
        return root


logger_config = LoggerConfig()


def setup_logger_from_config(config: dict) -> logging.Logger:
    """Setup loggers from configuration dictionary

    Example config:
    {
        'default_level': 'INFO',
        'log_file': 'satlink.log',
        'console': True,
        'module_levels': {
            'pysatlink.link.classifier': 'DEBUG',
            'pysatlink.io.zone_reader': 'WARNING'
        }
    }

    Each call replaces the previous configuration; module levels set by an
    earlier call and absent from this one fall back to the package level.
    """
    global logger_config
    new_config = LoggerConfig()
    new_config.configure_from_dict(config)
    for module in set(logger_config.module_levels) - set(new_config.module_levels):
        logging.getLogger(module).setLevel(logging.NOTSET)
    logger_config = new_config
    return logger_config.setup_all_loggers()
