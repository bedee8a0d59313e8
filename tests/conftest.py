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

"""Pytest configuration and fixtures for manualtrace tests."""

from collections.abc import Iterator

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import Tracer

from manualtrace.commons.config import AppConfig


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    """Exporter keeping finished spans in memory."""
    return InMemorySpanExporter()


@pytest.fixture
def tracer_provider(span_exporter: InMemorySpanExporter) -> Iterator[TracerProvider]:
    """Provider exporting every span synchronously to `span_exporter`."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    yield provider
    provider.shutdown()


@pytest.fixture
def tracer(tracer_provider: TracerProvider) -> Tracer:
    """Tracer from the in-memory provider."""
    return tracer_provider.get_tracer("test-tracer")


@pytest.fixture
def settings() -> AppConfig:
    """Settings independent of the process environment."""
    return AppConfig(
        MANUALTRACE_NAMESPACE="testing",
        MANUALTRACE_SERVICE_NAME="manual-service",
        MANUALTRACE_DEPLOYMENT_ENVIRONMENT="manual-env",
        MANUALTRACE_COLLECTOR_ENDPOINT="http://localhost:14268/api/traces",
        MANUALTRACE_CONSOLE_EXPORT=False,
        MANUALTRACE_FAIL_OPEN=False,
    )
