"""
Loguru setup. Every record carries ``extra["trace_id"]``: "system" outside a
request, the request's id inside ``logger.contextualize`` (see LoggingMiddleware).
"""
import sys
from pathlib import Path
from loguru import logger
from framework.config import settings

DEFAULT_TRACE_ID = "system"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<magenta>Trace:{extra[trace_id]}</magenta> - <level>{message}</level>"
)
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[component]}:{function}:{line} | "
    "Trace:{extra[trace_id]} - {message}"
)


class LogConfig:
    """Sinks for the API process: console, daily app log, error log."""

    @classmethod
    def setup_logging(cls, level: str = "INFO", log_dir: str = None):
        log_path = Path(log_dir or settings.LOG_DIR)
        log_path.mkdir(parents=True, exist_ok=True)

        logger.remove()
        logger.configure(extra={"trace_id": DEFAULT_TRACE_ID, "component": "app"})

        logger.add(
            sys.stdout,
            enqueue=True,
            backtrace=True,
            diagnose=settings.DEBUG,
            format=CONSOLE_FORMAT,
            level=level,
        )
        logger.add(
            log_path / "departments_{time:YYYY-MM-DD}.log",
            rotation="00:00",
            retention="30 days",
            compression="zip",
            enqueue=True,
            format=FILE_FORMAT,
            level="DEBUG",
        )
        logger.add(
            log_path / "departments_error_{time:YYYY-MM-DD}.log",
            rotation="100 MB",
            enqueue=True,
            format=FILE_FORMAT,
            level="ERROR",
        )


def get_logger(component: str):
    """Logger tagged with a component name.

    Only ``component`` is bound here: a bound ``trace_id`` would shadow the
    one set per request by ``logger.contextualize``.
    """
    return logger.bind(component=component)
