import logging
import sys
from typing import Optional, TextIO, Union

import structlog


def configure_logging(level: Union[int, str] = "INFO", json: bool = True, stream: Optional[TextIO] = None):
    """
    Routes textot's structlog output to `stream` (stderr by default).
    """
    if stream is None:
        stream = sys.stderr

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    logging.basicConfig(stream=stream, level=level, force=True)

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )
