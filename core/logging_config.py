import logging
from datetime import datetime, timezone

from core.config import settings

class UTCFormatter(logging.Formatter):
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        # Buoy and model timestamps are all UTC, keep the logs aligned
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return dt.strftime(datefmt or "%Y-%m-%d %H:%M:%S UTC")

    def format(self, record: logging.LogRecord) -> str:
        # Extract just the module name from the dotted path
        record.name = record.name.split('.')[-1]
        return super().format(record)

def setup_logging(level: str | None = None) -> None:
    formatter = UTCFormatter(
        fmt="[%(levelname)s] %(asctime)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S UTC"
    )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel((level or settings.log_level).upper())

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    # Remove existing handlers and add our custom handler
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    # Set specific log levels for noisy libraries
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
