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

"""The main entry point: bootstraps tracing, runs the span demonstrations and shuts tracing down."""

import sys
from typing import Optional

from opentelemetry.context import Context
from opentelemetry.sdk.trace.export import SpanExporter
from pydantic import ValidationError

from .commons.config import AppConfig, get_app_settings
from .commons.constants import BASIC_TRACER_NAME, EXCEPTION_TRACER_NAME
from .commons.exceptions import TracerInitError
from .commons.logging import configure_logging, get_logger
from .demo.routines import exception_function, parent_function
from .tracing.provider import initialize


logger = get_logger(__name__)


def run(
    settings: Optional[AppConfig] = None,
    exporter: Optional[SpanExporter] = None,
    install_global: bool = True,
) -> int:
    """Run the span demonstrations between tracing bootstrap and shutdown.

    Args:
        settings: Configuration to use. Defaults to `get_app_settings()`.
        exporter: Exporter override passed to the bootstrap.
        install_global: Register the provider as the process-wide default.

    Returns:
        int: Process exit status, 0 on normal completion.

    Raises:
        TracerInitError: If tracing bootstrap fails and fail-open is not configured.
    """
    settings = settings or get_app_settings()

    shutdown = initialize(settings, exporter=exporter, install_global=install_global)
    try:
        basic_tracer = shutdown.provider.get_tracer(BASIC_TRACER_NAME)
        exception_tracer = shutdown.provider.get_tracer(EXCEPTION_TRACER_NAME)
        ctx = Context()

        parent_function(ctx, basic_tracer)

        exception_function(ctx, exception_tracer)
    finally:
        shutdown()

    return 0


def main() -> int:
    """Console script entry point."""
    try:
        settings = get_app_settings()
    except ValidationError as e:
        configure_logging()
        logger.critical("invalid configuration", error=str(e))
        raise SystemExit(1) from e

    configure_logging(settings.log_level, json_logs=settings.json_logs)

    try:
        return run(settings)
    except TracerInitError as e:
        logger.critical("tracing bootstrap failed", error=str(e))
        raise SystemExit(1) from e


if __name__ == "__main__":
    sys.exit(main())
