import logging
import sys
from loguru import logger
from store_catalog.core.config import get_settings

class InterceptHandler(logging.Handler):
    """Route standard logging records (uvicorn, motor) to Loguru sinks."""
    def emit(self, record: logging.LogRecord):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())

def setup_logging() -> None:
    log_level = get_settings().LOG_LEVEL.upper()
    logger.remove()
    logger.add(sys.stderr, level=log_level, backtrace=True, diagnose=(log_level == "DEBUG"))
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.info(f"Logging configured at level {log_level}")
