# logger.py
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Logger:
    """Static logger configuration with class-level methods."""

    _logger = None

    @classmethod
    def setup(
            cls,
            name: str = "LIMS_Export",
            level: int = logging.INFO,
            log_file: Optional[str] = None
    ) -> None:
        """Initialize logger configuration once."""
        if cls._logger is None:
            cls._logger = logging.getLogger(name)
            cls._logger.setLevel(level)

            formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

            # Console handler with formatting
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(formatter)
            cls._logger.addHandler(handler)

            if log_file:
                file_handler = logging.FileHandler(log_file, encoding="utf-8")
                file_handler.setFormatter(formatter)
                cls._logger.addHandler(file_handler)

    @classmethod
    def reset(cls) -> None:
        """Detach handlers so the next setup() starts fresh."""
        if cls._logger is not None:
            for handler in list(cls._logger.handlers):
                cls._logger.removeHandler(handler)
                handler.close()
        cls._logger = None

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """Return singleton logger instance."""
        if cls._logger is None:
            cls.setup()
        return cls._logger

    # Direct logging methods
    @classmethod
    def info(cls, msg: str, *args, **kwargs) -> None:
        cls.get_logger().info(msg, *args, **kwargs)

    @classmethod
    def warning(cls, msg: str, *args, **kwargs) -> None:
        cls.get_logger().warning(msg, *args, **kwargs)

    @classmethod
    def error(cls, msg: str, *args, **kwargs) -> None:
        cls.get_logger().error(msg, *args, **kwargs)

    @classmethod
    def debug(cls, msg: str, *args, **kwargs) -> None:
        cls.get_logger().debug(msg, *args, **kwargs)

    @classmethod
    def failure(cls, msg: str) -> None:
        """Log the fixed, human readable message of a failed operation."""
        cls.get_logger().error(msg)

    @classmethod
    def exception(cls, exception: BaseException) -> None:
        """Log an exception record including its traceback."""
        cls.get_logger().error(
            "%s: %s", type(exception).__name__, exception,
            exc_info=(type(exception), exception, exception.__traceback__)
        )
