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

"""Span demonstrations: a parent span with a nested child, and a span recording an error."""

from opentelemetry.context import Context
from opentelemetry.trace import Status, StatusCode, Tracer

from manualtrace.commons.constants import (
    CHILD_ATTRIBUTE_KEY,
    CHILD_ATTRIBUTE_VALUE,
    CHILD_EVENT_NAME,
    CHILD_SPAN_NAME,
    EXCEPTION_ATTRIBUTE_KEY,
    EXCEPTION_ATTRIBUTE_VALUE,
    EXCEPTION_SPAN_NAME,
    PARENT_ATTRIBUTE_KEY,
    PARENT_ATTRIBUTE_VALUE,
    PARENT_EVENT_NAME,
    PARENT_SPAN_NAME,
)
from manualtrace.commons.logging import get_logger
from manualtrace.demo.arithmetic import divide
from manualtrace.tracing.spans import start_span


logger = get_logger(__name__)


def parent_function(ctx: Context, tracer: Tracer) -> None:
    """Emit the parent span and run `child_function` inside it.

    The parent span ends after the child returns, whether or not the child raised.
    """
    with start_span(
        tracer,
        PARENT_SPAN_NAME,
        ctx,
        attributes={PARENT_ATTRIBUTE_KEY: PARENT_ATTRIBUTE_VALUE},
    ) as (parent_span, parent_ctx):
        parent_span.add_event(PARENT_EVENT_NAME)
        logger.info("In parent span, before calling a child function.")

        child_function(parent_ctx, tracer)

        logger.info(
            "In parent span, after calling a child function. When this function ends, parentSpan will complete."
        )


def child_function(ctx: Context, tracer: Tracer) -> None:
    """Emit a span parented to the span carried by `ctx`."""
    with start_span(
        tracer,
        CHILD_SPAN_NAME,
        ctx,
        attributes={CHILD_ATTRIBUTE_KEY: CHILD_ATTRIBUTE_VALUE},
    ) as (child_span, _):
        child_span.add_event(CHILD_EVENT_NAME)
        logger.info("In child span, when this function returns, childSpan will complete.")


def exception_function(ctx: Context, tracer: Tracer) -> None:
    """Emit a span that records the error from dividing by zero.

    The error is recovered here: it is recorded on the span and the span status
    is set to error with the error's message, nothing is raised.
    """
    with start_span(
        tracer,
        EXCEPTION_SPAN_NAME,
        ctx,
        attributes={EXCEPTION_ATTRIBUTE_KEY: EXCEPTION_ATTRIBUTE_VALUE},
    ) as (exception_span, _):
        logger.info("Call division function.")
        _, err = divide(10, 0)
        if err is not None:
            exception_span.record_exception(err)
            exception_span.set_status(Status(StatusCode.ERROR, err.message))
