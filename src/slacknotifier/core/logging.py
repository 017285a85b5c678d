"""
Slack Notifier - Structured Logging Configuration
"""

import logging
import sys
from typing import Any, Dict

import httpx
import structlog

from slacknotifier.core.config import settings

# Event keys whose values are webhook URLs; the secret lives in the path
URL_KEYS = {"destination", "webhook_url", "url"}


def setup_logging() -> None:
    """Configure structured logging with structlog."""
    
    log_level = logging.DEBUG if settings.APP_DEBUG else logging.INFO
    
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )
    
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        webhook_filter_processor,
    ]
    
    # Development: Pretty console output
    if settings.APP_ENV == "development":
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        # Production: JSON output for log aggregation
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def redact_url(value: Any) -> Any:
    """Keep only the scheme and host of a URL."""
    if not isinstance(value, str) or not value:
        return value
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError):
        return "[REDACTED]"
    if not url.host:
        return "[REDACTED]"
    return f"{url.scheme}://{url.host}/[REDACTED]"


def webhook_filter_processor(
    logger: Any, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Redact webhook URLs from log events."""
    for key in list(event_dict.keys()):
        if key.lower() in URL_KEYS:
            event_dict[key] = redact_url(event_dict[key])
    return event_dict
