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

"""Scoped span lifetime with explicit context threading."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.trace import Span, Status, StatusCode, Tracer
from opentelemetry.util.types import Attributes


@contextmanager
def start_span(
    tracer: Tracer,
    name: str,
    context: Context | None = None,
    attributes: Attributes = None,
) -> Iterator[tuple[Span, Context]]:
    """Start a span under `context` and end it exactly once when the block exits.

    The parent is whatever span `context` carries. Nothing is attached to the
    ambient OpenTelemetry context; callers pass the derived context on to the
    work they want nested under this span.

    An exception escaping the block is recorded on the span, the span status
    is set to error, and the exception is re-raised.

    Args:
        tracer: Tracer creating the span.
        name: Span name.
        context: Parent context. `None` starts a new trace, ignoring any ambient span.
        attributes: Attributes set when the span starts.

    Yields:
        The started span and a new context carrying it.

    Example:
        >>> with start_span(tracer, "work", Context()) as (span, ctx):
        ...     span.add_event("started")
        ...     do_nested_work(ctx)
    """
    if context is None:
        context = Context()

    span = tracer.start_span(name, context=context, attributes=attributes)
    try:
        yield span, trace.set_span_in_context(span, context)
    except Exception as exc:
        span.record_exception(exc)
        span.set_status(Status(StatusCode.ERROR, f"{type(exc).__name__}: {exc}"))
        raise
    finally:
        span.end()
