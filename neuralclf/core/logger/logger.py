"""
Logging Management Module

Handles centralized logging configuration with dynamic reconfiguration support.
The package logger starts console-only at import time; callers that want an
audit trail can reconfigure it with a log directory to add a rotating file
handler.

Key Features:
    - Singleton-like Behavior: Prevents duplicate logger configurations
    - Dynamic Reconfiguration: Switches from console-only to file-based logging
    - Rotating File Handler: Automatic log rotation with size limits
    - Timestamp-based Files: Unique log files per session
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from ..constants import LOGGER_NAME


# LOGGER CLASS
class Logger:
    """
    Manages centralized logging configuration with singleton-like behavior.

    Class-level tracking (_configured_names) prevents duplicate handler
    registration while still allowing intentional reconfiguration when a log
    directory is provided.

    Class Attributes:
        _configured_names (dict[str, bool]): Tracks which logger names have been configured
        _active_log_file (Path | None): Current active log file path for auditing

    Attributes:
        name (str): Logger identifier (typically LOGGER_NAME constant)
        log_dir (Path | None): Directory for log file storage
        log_to_file (bool): Enable file logging (requires log_dir)
        level (int): Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        max_bytes (int): Maximum log file size before rotation (default: 5MB)
        backup_count (int): Number of rotated log files to retain (default: 5)
        _log (logging.Logger): Underlying Python logger instance

    Example:
        >>> logger = Logger.setup(name=LOGGER_NAME, log_dir=Path("./logs"), level="DEBUG")
        >>> logger.info("Logging to file now")
        >>> Logger.get_log_file()
    """

    _configured_names: Final[dict[str, bool]] = {}
    _active_log_file: Path | None = None

    def __init__(
        self,
        name: str = LOGGER_NAME,
        log_dir: Path | None = None,
        log_to_file: bool = True,
        level: int = logging.INFO,
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        """
        Initializes the Logger with specified configuration.

        Args:
            name: Logger identifier (default: LOGGER_NAME constant)
            log_dir: Directory for log file storage (None = console-only)
            log_to_file: Enable file logging if log_dir provided (default: True)
            level: Logging level as integer constant (default: logging.INFO)
            max_bytes: Maximum log file size before rotation in bytes (default: 5MB)
            backup_count: Number of rotated backup files to retain (default: 5)
        """
        self.name = name
        self.log_dir = log_dir
        self.log_to_file = log_to_file and (log_dir is not None)
        self.level = level
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self._log = logging.getLogger(name)

        if name not in Logger._configured_names or log_dir is not None:
            self._setup_logger()
            Logger._configured_names[name] = True

    def _setup_logger(self) -> None:
        """
        Configures log handlers: Console always, File only if log_dir is provided.

        Existing handlers are closed and removed first so reconfiguration never
        duplicates output.
        """
        fmt_str = "%(asctime)s - %(levelname)s - %(message)s"
        datefmt = "%Y-%m-%d %H:%M:%S"
        formatter = logging.Formatter(fmt_str, datefmt)

        self._log.setLevel(self.level)
        self._log.propagate = False

        if self._log.hasHandlers():
            for handler in self._log.handlers[:]:
                handler.close()
                self._log.removeHandler(handler)

        # 1. Console Handler (Standard Output)
        console_h = logging.StreamHandler(sys.stdout)
        console_h.setFormatter(formatter)
        self._log.addHandler(console_h)

        # 2. Rotating File Handler
        if self.log_to_file and self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
            filename = self.log_dir / f"{self.name}_{timestamp}.log"

            file_h = RotatingFileHandler(
                filename, maxBytes=self.max_bytes, backupCount=self.backup_count, encoding="utf-8"
            )
            file_h.setFormatter(formatter)
            self._log.addHandler(file_h)

            Logger._active_log_file = filename

    def get_logger(self) -> logging.Logger:
        """
        Returns the configured logging.Logger instance.
        """
        return self._log

    @classmethod
    def get_log_file(cls) -> Path | None:
        """
        Returns the current active log file path, or None when file logging is off.
        """
        return cls._active_log_file

    @classmethod
    def setup(
        cls, name: str = LOGGER_NAME, log_dir: Path | None = None, level: str = "INFO", **kwargs
    ) -> logging.Logger:
        """
        Main entry point for (re)configuring the package logger.

        Args:
            name: Logger identifier (typically LOGGER_NAME constant)
            log_dir: Directory for log file storage (None = console-only mode)
            level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            **kwargs (Any): Additional arguments passed to Logger constructor

        Returns:
            Configured logging.Logger instance ready for use

        Environment Variables:
            DEBUG: If set to "1", overrides level to DEBUG regardless of level parameter
        """
        if os.getenv("DEBUG") == "1":
            numeric_level = logging.DEBUG
        else:
            numeric_level = getattr(logging, level.upper(), logging.INFO)

        instance = cls(name=name, log_dir=log_dir, level=numeric_level, **kwargs)
        # Level changes must apply even when handlers are already in place
        instance._log.setLevel(numeric_level)
        return instance.get_logger()


# GLOBAL INSTANCE
# Initial bootstrap instance (Console-only), overridden by setup().
logger: Final[logging.Logger] = Logger().get_logger()
