import logging
import sys

from loguru import logger


class _InterceptHandler(logging.Handler):
    """Forwards stdlib records (uvicorn, sqlalchemy) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str, serialize: bool = False) -> None:
    level = level.upper()
    logger.remove()
    logger.add(
        sys.stdout,
        level=level,
        serialize=serialize,
        backtrace=True,
        diagnose=False,
    )
    logging.root.handlers = [_InterceptHandler()]
    logging.root.setLevel(level)
    for name in ('uvicorn', 'uvicorn.access', 'uvicorn.error'):
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True
