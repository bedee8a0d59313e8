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

"""Tracer provider bootstrap.

Builds the SDK TracerProvider that exports finished spans to the collector,
optionally installs it (with a W3C trace-context + baggage propagator) as the
process-wide default, and hands back a shutdown handle.

Architecture:
    initialize() -> TracerProvider -> BatchSpanProcessor -> OTLP/HTTP exporter
                 └-> NoOpTracerProvider when bootstrap fails and fail-open is set
"""

from __future__ import annotations

from urllib.parse import urlparse

from opentelemetry import trace
from opentelemetry.baggage.propagation import W3CBaggagePropagator
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.propagate import set_global_textmap
from opentelemetry.propagators.composite import CompositePropagator
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider as SDKTracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
    SpanExporter,
)
from opentelemetry.trace import NoOpTracerProvider, TracerProvider
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from manualtrace.commons.config import AppConfig, get_app_settings
from manualtrace.commons.constants import (
    DEPLOYMENT_ENVIRONMENT,
    JAEGER_THRIFT_PATH,
    RESOURCE_SCHEMA_URL,
    SERVICE_NAME,
)
from manualtrace.commons.exceptions import TracerInitError
from manualtrace.commons.logging import get_logger


logger = get_logger(__name__)


class ShutdownHandle:
    """Zero-argument cleanup callable returned by `initialize()`.

    Calling it shuts the provider down, flushing spans still queued in the
    batch processor. Shutdown errors are logged and never raised. Only the
    first call has an effect.

    Example:
        >>> shutdown = initialize()
        >>> try:
        ...     tracer = shutdown.provider.get_tracer("basic-tracer")
        ... finally:
        ...     shutdown()
    """

    def __init__(self, provider: TracerProvider) -> None:
        self._provider = provider
        self._closed = False

    @property
    def provider(self) -> TracerProvider:
        """Get the provider this handle shuts down."""
        return self._provider

    @property
    def is_closed(self) -> bool:
        """Check if the handle has already been called."""
        return self._closed

    def __call__(self) -> None:
        if self._closed:
            return
        self._closed = True

        shutdown = getattr(self._provider, "shutdown", None)
        if shutdown is None:
            return
        try:
            shutdown()
        except Exception as e:
            logger.error("failed to shutdown TracerProvider", error=str(e))


def build_resource(settings: AppConfig) -> Resource:
    """Create the resource identifying this service on every exported span.

    Args:
        settings: Configuration carrying the service name and deployment environment.

    Returns:
        A Resource with the service identity attributes.
    """
    return Resource.create(
        {
            SERVICE_NAME: settings.service_name,
            DEPLOYMENT_ENVIRONMENT: settings.deployment_environment,
        },
        schema_url=RESOURCE_SCHEMA_URL,
    )


def build_exporter(settings: AppConfig) -> SpanExporter:
    """Create the span exporter pointed at the collector endpoint."""
    if urlparse(settings.collector_endpoint).path.rstrip("/").endswith(JAEGER_THRIFT_PATH):
        logger.warning(
            "collector endpoint is Jaeger's Thrift path, OTLP/HTTP exports will be rejected; "
            "use an OTLP receiver such as http://localhost:4318/v1/traces",
            endpoint=settings.collector_endpoint,
        )
    return OTLPSpanExporter(endpoint=settings.collector_endpoint, timeout=settings.export_timeout)


def build_tracer_provider(settings: AppConfig, exporter: SpanExporter | None = None) -> SDKTracerProvider:
    """Create the SDK TracerProvider with batched export.

    Args:
        settings: Tracing configuration.
        exporter: Exporter to batch finished spans into. Defaults to the
            OTLP/HTTP exporter for `settings.collector_endpoint`.

    Returns:
        The configured provider. It is not installed globally.

    Raises:
        TracerInitError: If the exporter or the provider cannot be constructed.
    """
    try:
        span_exporter = exporter if exporter is not None else build_exporter(settings)
        provider = SDKTracerProvider(resource=build_resource(settings))
        provider.add_span_processor(BatchSpanProcessor(span_exporter))

        if settings.console_export:
            provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
    except Exception as e:
        raise TracerInitError(e, endpoint=settings.collector_endpoint) from e

    return provider


def install_tracer_provider(provider: TracerProvider) -> None:
    """Register the provider and the trace-context + baggage propagator as process-wide defaults."""
    trace.set_tracer_provider(provider)
    set_global_textmap(
        CompositePropagator(
            [
                TraceContextTextMapPropagator(),
                W3CBaggagePropagator(),
            ]
        )
    )
    logger.debug("W3C TraceContext and Baggage propagators configured")


def initialize(
    settings: AppConfig | None = None,
    *,
    exporter: SpanExporter | None = None,
    install_global: bool = True,
) -> ShutdownHandle:
    """Bootstrap tracing and return its shutdown handle.

    Args:
        settings: Tracing configuration. Defaults to `get_app_settings()`.
        exporter: Exporter override, mainly for tests.
        install_global: Register the provider and propagator as process-wide defaults.

    Returns:
        A ShutdownHandle owning the provider.

    Raises:
        TracerInitError: If bootstrap fails and `settings.fail_open` is not set.
    """
    settings = settings or get_app_settings()

    provider: TracerProvider
    try:
        provider = build_tracer_provider(settings, exporter)
    except TracerInitError as e:
        if not settings.fail_open:
            raise
        logger.warning("tracing disabled, continuing with a no-op tracer provider", error=str(e))
        provider = NoOpTracerProvider()
    else:
        logger.info(
            "tracer provider configured",
            service_name=settings.service_name,
            environment=settings.deployment_environment,
            endpoint=settings.collector_endpoint,
        )

    if install_global:
        install_tracer_provider(provider)

    return ShutdownHandle(provider)
