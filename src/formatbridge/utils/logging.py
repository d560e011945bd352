"""
Run logging for FormatBridge

setup_logger() opens formatbridge_{input_stem}_{timestamp}.log in a 'logs'
directory beside the input file and prunes that directory to the newest
KEEP_LOGS files. Every record is stamped with the conversion that was running
when it was emitted (see FormatBridgeLogger.conversion). Until setup_logger()
is called, library code logs nothing.
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional

LOGGER_NAME = "formatbridge"
LOG_DIR_NAME = "logs"
LOG_PREFIX = "formatbridge_"
KEEP_LOGS = 5

NO_CONVERSION = "-"
RECORD_FORMAT = "%(asctime)s %(levelname)-7s [%(conversion)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def prune_logs(logs_dir: Path, keep: int = KEEP_LOGS) -> int:
    """Delete all but the `keep` newest FormatBridge logs; returns the number removed"""
    logs = sorted(
        logs_dir.glob(f"{LOG_PREFIX}*.log"),
        key=lambda path: path.stat().st_mtime,
        reverse=True,
    )

    removed = 0
    for old_log in logs[keep:]:
        try:
            old_log.unlink()
        except OSError as e:
            FormatBridgeLogger.warning(f"Could not remove old log {old_log.name}: {e}")
        else:
            removed += 1
    return removed


class ConversionFilter(logging.Filter):
    """Adds the current conversion label to each record as %(conversion)s"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.conversion = FormatBridgeLogger.current_conversion or NO_CONVERSION
        return True


class FormatBridgeLogger:
    """Process-wide logger used by the CLI, the dispatcher and the config layer"""

    current_conversion: Optional[str] = None

    _logger: Optional[logging.Logger] = None
    _log_file: Optional[Path] = None

    @classmethod
    def setup_logger(cls, file_path: str, log_level: int = logging.INFO) -> logging.Logger:
        """
        Start a log file for a run over file_path, closing any previous one.

        Args:
            file_path: File being converted; the log goes to its directory's logs/
            log_level: Level for the file handler (the console only shows warnings)

        Returns:
            The configured 'formatbridge' logger
        """
        cls.cleanup()

        input_path = Path(file_path)
        logs_dir = input_path.parent / LOG_DIR_NAME
        logs_dir.mkdir(exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:17]
        log_file = logs_dir / f"{LOG_PREFIX}{input_path.stem}_{timestamp}.log"

        formatter = logging.Formatter(RECORD_FORMAT, datefmt=DATE_FORMAT)
        context = ConversionFilter()

        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(log_level)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(log_level)
        logger.propagate = False
        for handler in (file_handler, console_handler):
            handler.setFormatter(formatter)
            handler.addFilter(context)
            logger.addHandler(handler)

        cls._logger = logger
        cls._log_file = log_file

        logger.info(f"Run started for {input_path}")
        prune_logs(logs_dir)
        return logger

    @classmethod
    @contextmanager
    def conversion(cls, label: str) -> Iterator[None]:
        """Stamp records logged inside the block with label, e.g. 'json-to-yaml'"""
        previous = cls.current_conversion
        cls.current_conversion = label
        try:
            yield
        finally:
            cls.current_conversion = previous

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        return cls._log_file

    @classmethod
    def log(cls, level: int, message: str) -> None:
        """Log at level; a no-op before setup_logger()"""
        if cls._logger:
            cls._logger.log(level, message)

    @classmethod
    def debug(cls, message: str) -> None:
        cls.log(logging.DEBUG, message)

    @classmethod
    def info(cls, message: str) -> None:
        cls.log(logging.INFO, message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls.log(logging.WARNING, message)

    @classmethod
    def error(cls, message: str) -> None:
        cls.log(logging.ERROR, message)

    @classmethod
    def success(cls, message: str) -> None:
        """Info record prefixed with OK, for files written successfully"""
        cls.log(logging.INFO, f"OK {message}")

    @classmethod
    def cleanup(cls) -> None:
        """Close the handlers opened by setup_logger()"""
        if cls._logger:
            for handler in cls._logger.handlers[:]:
                cls._logger.removeHandler(handler)
                handler.close()
        cls._logger = None
        cls._log_file = None
