"""
Logger Implementation
=====================

structlog over stdlib logging. Records are rendered as JSON lines when
``json_logs`` is set and as Rich console output otherwise. Credential
material (salts, credential hashes) is redacted before any renderer sees
the event.

Version: 0.1.0
"""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger


_SERVICE_NAME = "bioverify"
_REDACTED = "***REDACTED***"

# Substrings of keys whose values never reach a log sink
SENSITIVE_KEYS = frozenset({
    "api_key",
    "secret",
    "private_key",
    "salt",
    "credential_hash",
    "biometric_hash",
})


def _add_service(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict.setdefault("service", _SERVICE_NAME)
    return event_dict


def censor_sensitive(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Redact credential material, descending into nested payloads."""

    def censor(d: dict[str, Any]) -> dict[str, Any]:
        result = {}
        for key, value in d.items():
            if any(s in key.lower() for s in SENSITIVE_KEYS):
                result[key] = _REDACTED
            elif isinstance(value, dict):
                result[key] = censor(value)
            else:
                result[key] = value
        return result

    return censor(event_dict)


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    service_name: str = "bioverify",
) -> None:
    """
    Configure structlog and route it through the root logger.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        json_logs: Render JSON lines instead of console output
        service_name: Value of the ``service`` key on every record
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service_name

    shared_processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service,
        censor_sensitive,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        shared_processors.append(structlog.dev.set_exc_info)
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.RichTracebackFormatter(
                show_locals=False,
                max_frames=10,
            ),
        )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper()))


def get_logger(name: str | None = None) -> "BoundLogger":
    """Return a structlog logger; call sites log snake_case events with kwargs."""
    return structlog.stdlib.get_logger(name)
