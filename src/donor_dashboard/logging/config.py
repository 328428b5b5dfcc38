# -*- coding: utf-8 -*-
"""Logging configuration for structlog + Logfire.

Every event carries the service identity and the active ledger backend, and
raw wallet addresses passed as event fields are masked before rendering.
"""

from __future__ import annotations

import logging
import logfire
import structlog
from typing import Any, Callable, Optional
from structlog.types import EventDict, Processor
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from donor_dashboard.config import LoggingSettings, Settings, get_settings
from donor_dashboard.utils.validation import mask_address

# Map standard logging levels to Logfire levels
LOG_LEVEL_TO_LOGFIRE: dict[str, str] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warn",
    "ERROR": "error",
    "CRITICAL": "fatal",
}

# Event fields that may hold a full wallet address
ADDRESS_FIELDS: frozenset[str] = frozenset({"address", "wallet", "donor", "owner"})


def service_context_processor(settings: Settings) -> Callable[[Any, str, EventDict], EventDict]:
    """Build a processor attaching logger name, service identity and ledger backend."""
    app_settings = settings.app
    ledger_backend = settings.ledger.backend

    def _add_service_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        stdlib_logger = getattr(logger, "_logger", None)
        event_dict["logger"] = (
            getattr(stdlib_logger, "name", None) or getattr(logger, "name", "") or ""
        )
        event_dict["app_name"] = app_settings.app_name
        if app_settings.service_name:
            event_dict["service_name"] = app_settings.service_name
        if app_settings.service_version:
            event_dict["service_version"] = app_settings.service_version
        event_dict["environment"] = app_settings.environment
        event_dict.setdefault("ledger_backend", ledger_backend)
        return event_dict

    return _add_service_context


def mask_wallet_addresses(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask raw addresses logged under ADDRESS_FIELDS; *_masked fields pass through."""
    for key in ADDRESS_FIELDS.intersection(event_dict):
        value = event_dict[key]
        if isinstance(value, str):
            event_dict[key] = mask_address(value)
    return event_dict


def _build_handlers(logging_settings: LoggingSettings) -> tuple[list[logging.Handler], list[int]]:
    handlers: list[logging.Handler] = []
    enabled_levels: list[int] = []

    if logging_settings.log_to_console:
        console_level = getattr(
            logging, logging_settings.console_level.upper(), logging.INFO
        )
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)
        enabled_levels.append(console_level)

    if logging_settings.log_to_file:
        file_level = getattr(logging, logging_settings.file_level.upper(), logging.INFO)
        log_file_path = Path(logging_settings.log_file_path)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            log_file_path,
            when=logging_settings.log_file_when,
            interval=logging_settings.log_file_interval,
            backupCount=logging_settings.log_file_backup_count,
            encoding="utf-8",
            utc=logging_settings.log_file_utc,
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)
        enabled_levels.append(file_level)

    return handlers, enabled_levels


def build_processors(settings: Settings) -> list[Processor]:
    """Processor chain for the dashboard, ending in the configured renderer."""
    logging_settings = settings.logging
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        service_context_processor(settings),
        mask_wallet_addresses,
    ]

    if logging_settings.logfire_enabled:
        processors.append(logfire.StructlogProcessor())  # type: ignore[arg-type]

    # File output is always JSON; console follows json_format unless a file is also enabled.
    if logging_settings.log_to_console or logging_settings.log_to_file:
        use_json = logging_settings.log_to_file or logging_settings.json_format
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer()
        )
        processors.append(renderer)  # type: ignore[arg-type]
    return processors


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog (and Logfire when enabled) from settings."""
    settings = settings or get_settings()
    app_settings = settings.app
    logging_settings = settings.logging

    handlers, enabled_levels = _build_handlers(logging_settings)
    if handlers:
        logging.basicConfig(level=min(enabled_levels), handlers=handlers)

    if logging_settings.logfire_enabled:
        logfire_min_level = LOG_LEVEL_TO_LOGFIRE.get(
            logging_settings.logfire_level, "info"
        )
        logfire.configure(
            token=logging_settings.logfire_token,
            service_name=app_settings.service_name or app_settings.app_name,
            service_version=app_settings.service_version,
            min_level=logfire_min_level,  # type: ignore[arg-type]
            environment=app_settings.environment,
        )

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
