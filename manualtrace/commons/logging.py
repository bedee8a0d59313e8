#  -----------------------------------------------------------------------------
#  Copyright (c) 2024 Bud Ecosystem Inc.
#  #
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#  #
#      http://www.apache.org/licenses/LICENSE-2.0
#  #
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#  -----------------------------------------------------------------------------

"""Structured logging setup built on structlog."""

import logging
import sys
from typing import Any, Optional, Union

import structlog

from .constants import LogLevel


def _get_log_level(log_level: Optional[Union[LogLevel, str, int]]) -> int:
    """Convert a log level value to a `logging` module priority.

    Args:
        log_level: Log level value (can be LogLevel, string, int or None).

    Returns:
        The numeric priority, `logging.INFO` when unset or unknown.
    """
    if log_level is None:
        return logging.INFO
    if isinstance(log_level, LogLevel):
        return log_level.priority
    if isinstance(log_level, str):
        return getattr(logging, log_level.upper(), logging.INFO)
    return int(log_level)


def configure_logging(log_level: Optional[Union[LogLevel, str, int]] = None, json_logs: bool = False) -> None:
    """Configure structlog and the standard library root logger.

    Safe to call more than once; the last call wins.

    Args:
        log_level: Minimum level emitted.
        json_logs: Render JSON lines instead of plain console lines.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=_get_log_level(log_level),
        force=True,
    )


def get_logger(name: Optional[str] = None, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given name.

    Args:
        name: Logger name, usually the calling module's `__name__`.
        **initial_values: Key/value pairs bound to every line the logger emits.

    Returns:
        Configured structlog logger instance.
    """
    return structlog.get_logger(name, **initial_values)
