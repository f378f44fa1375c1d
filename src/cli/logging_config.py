"""Structured logging configuration using structlog."""

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog


def _stringify_values(_, __, event_dict: dict) -> dict:
    """Structlog processor rendering Concern and Decision objects by name."""
    for key, value in event_dict.items():
        if hasattr(value, "key") and hasattr(value, "title"):
            event_dict[key] = value.key
        elif hasattr(value, "domain") and hasattr(value, "id"):
            event_dict[key] = value.id
    return event_dict


def setup_logging(json_mode: bool = False, level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """Configure structlog with appropriate renderer.

    Args:
        json_mode: Use JSON renderer (for piping into other tools).
                   False = console renderer, for interactive use.
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path that also receives JSON log lines.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _stringify_values,
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    def _formatter(renderer) -> structlog.stdlib.ProcessorFormatter:
        return structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )

    console_renderer = (
        structlog.processors.JSONRenderer() if json_mode else structlog.dev.ConsoleRenderer(colors=False)
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(console_renderer))

    root = logging.getLogger()
    for old in root.handlers:
        old.close()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    if log_file:
        log_file = Path(log_file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
        root.addHandler(file_handler)
