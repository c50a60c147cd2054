import logging
import sys

import structlog


def setup_logging(debug: bool = False) -> None:
    """Configure structlog for JSON output to stderr.

    Stdout is reserved for the validation report, so every log line goes to
    stderr. Only warnings and errors are shown unless ``debug`` is set.
    """
    level = logging.DEBUG if debug else logging.WARNING
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # Re-running setup (tests, repeated run() calls) must take effect
        cache_logger_on_first_use=False,
    )
