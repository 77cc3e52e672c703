"""Structured logging for the grader."""

import logging
import sys
from pathlib import Path
from typing import Optional

from .colors import Colors

LOGGER_NAME = 'i18n_grader'
FILE_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
FILE_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors console output by log level.

    With ``use_colors=False`` the color codes embedded in messages are
    stripped as well, so file handlers use it to keep log files plain.
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.OKCYAN,
        logging.INFO: Colors.OKGREEN,
        logging.WARNING: Colors.WARNING,
        logging.ERROR: Colors.FAIL,
        logging.CRITICAL: Colors.FAIL + Colors.BOLD,
    }

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True, datefmt: Optional[str] = None):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if not self.use_colors:
            return Colors.strip(message)

        color = self.LEVEL_COLORS.get(record.levelno, '')
        return f"{color}{message}{Colors.ENDC}"


class Logger:
    """
    Process-wide logger for i18n-grader.

    Owns the ``i18n_grader`` logger and its handlers:
    - a colored console handler (INFO by default)
    - an optional file handler (DEBUG, no colors)

    Child loggers (``i18n_grader.<module>``) propagate into it.
    """

    _instance: Optional['Logger'] = None
    _initialized: bool = False

    def __new__(cls) -> 'Logger':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if Logger._initialized:
            return

        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(logging.DEBUG)
        self._logger.handlers = []

        self._console_handler = self._create_console_handler()
        self._logger.addHandler(self._console_handler)
        self._file_handler: Optional[logging.FileHandler] = None

        Logger._initialized = True

    @staticmethod
    def _create_console_handler(
        level: int = logging.INFO,
        use_colors: bool = True
    ) -> logging.StreamHandler:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(ColoredFormatter(fmt='%(message)s', use_colors=use_colors))
        return handler

    @staticmethod
    def _create_file_handler(file_path: Path, level: int = logging.DEBUG) -> logging.FileHandler:
        file_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(file_path, encoding='utf-8')
        handler.setLevel(level)
        handler.setFormatter(ColoredFormatter(fmt=FILE_FORMAT, use_colors=False, datefmt=FILE_DATE_FORMAT))
        return handler

    @property
    def console_handler(self) -> logging.StreamHandler:
        return self._console_handler

    @property
    def file_handler(self) -> Optional[logging.FileHandler]:
        return self._file_handler

    def configure(
        self,
        verbose: bool = False,
        quiet: bool = False,
        log_file: Optional[Path] = None,
        use_colors: bool = True
    ) -> None:
        """
        Reconfigure handlers.

        Args:
            verbose: Console shows DEBUG messages
            quiet: Console shows WARNING and above only (wins over verbose)
            log_file: Also write every record to this file
            use_colors: Color console output
        """
        if quiet:
            console_level = logging.WARNING
        elif verbose:
            console_level = logging.DEBUG
        else:
            console_level = logging.INFO

        self._logger.removeHandler(self._console_handler)
        self._console_handler = self._create_console_handler(console_level, use_colors)
        self._logger.addHandler(self._console_handler)

        if log_file:
            if self._file_handler:
                self._logger.removeHandler(self._file_handler)
                self._file_handler.close()
            self._file_handler = self._create_file_handler(Path(log_file))
            self._logger.addHandler(self._file_handler)

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        """Return the package logger, or a child logger for ``name``."""
        if name:
            return logging.getLogger(f'{LOGGER_NAME}.{name}')
        return self._logger

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)

    def critical(self, msg: str, *args, **kwargs) -> None:
        self._logger.critical(msg, *args, **kwargs)

    def success(self, msg: str) -> None:
        """Log a check-marked INFO message."""
        self._logger.info(f"{Colors.success('✓')} {msg}")

    def fail(self, msg: str) -> None:
        """Log a cross-marked ERROR message."""
        self._logger.error(f"{Colors.error('✗')} {msg}")

    def hint(self, msg: str) -> None:
        self._logger.info(f"{Colors.info('ℹ')} {msg}")


_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Return the global Logger, creating it on first use."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def configure_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
    use_colors: bool = True
) -> None:
    """Configure the global logger. See ``Logger.configure``."""
    get_logger().configure(
        verbose=verbose,
        quiet=quiet,
        log_file=log_file,
        use_colors=use_colors
    )


def reset_logger() -> None:
    """Drop the global logger and its handlers (used by tests)."""
    global _logger
    if _logger is not None:
        for handler in _logger._logger.handlers[:]:
            handler.close()
            _logger._logger.removeHandler(handler)
    _logger = None
    Logger._instance = None
    Logger._initialized = False
