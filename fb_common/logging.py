"""Logging setup: stdlib handlers rendered through structlog."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Mapping

import structlog

from fb_common.config.env import (
    LOG_FILE_ENV,
    LOG_JSON_ENV,
    LOG_LEVEL_ENV,
    env_bool,
    env_value,
)

# Applied to structlog events and to plain stdlib records alike.
_PRE_CHAIN: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
)


@dataclass(frozen=True)
class LogSettings:
    """Effective logging options after merging arguments with the environment."""

    level: int = logging.INFO
    json: bool = False
    log_file: str | None = None

    @classmethod
    def resolve(
        cls,
        *,
        level: str | int | None = None,
        debug: bool = False,
        log_file: str | None = None,
        json: bool | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "LogSettings":
        """Explicit arguments win; FB_LOG_* variables fill the gaps."""
        if json is None:
            json = bool(env_bool(LOG_JSON_ENV, environ))
        if log_file is None:
            log_file = env_value(LOG_FILE_ENV, environ)
        return cls(
            level=_resolve_level(level or env_value(LOG_LEVEL_ENV, environ), debug),
            json=json,
            log_file=log_file,
        )


def _resolve_level(value: str | int | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if value is None:
        return logging.INFO
    if isinstance(value, int):
        return value
    if value.strip().isdigit():
        return int(value)
    return logging.getLevelNamesMapping().get(value.strip().upper(), logging.INFO)


def _build_formatter(settings: LogSettings) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if settings.json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=list(_PRE_CHAIN),
    )


def _build_handlers(settings: LogSettings) -> list[logging.Handler]:
    formatter = _build_formatter(settings)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def _configure_structlog() -> None:
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    log_file: str | None = None,
    json: bool | None = None,
    force: bool = False,
) -> LogSettings:
    """Install root handlers once and route structlog through them.

    An already configured root logger is left alone unless force is set.
    Returns the settings that were resolved.
    """
    settings = LogSettings.resolve(level=level, debug=debug, log_file=log_file, json=json)
    root = logging.getLogger()

    if force or not root.handlers:
        if force:
            for handler in list(root.handlers):
                root.removeHandler(handler)
                handler.close()
        for handler in _build_handlers(settings):
            root.addHandler(handler)
        root.setLevel(settings.level)

    _configure_structlog()
    return settings
