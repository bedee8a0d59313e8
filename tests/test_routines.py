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

"""Tests for the span demonstration routines."""

from unittest.mock import patch

import pytest
from opentelemetry.context import Context
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode, Tracer
from structlog.testing import capture_logs

from manualtrace.commons.exceptions import DivisionByZeroError
from manualtrace.demo.arithmetic import DivisionResult
from manualtrace.demo.routines import child_function, exception_function, parent_function


def _spans_by_name(span_exporter: InMemorySpanExporter) -> dict:
    return {span.name: span for span in span_exporter.get_finished_spans()}


class TestParentFunction:
    """Tests for parent_function and its nested child."""

    def test_emits_parent_and_child(self, tracer: Tracer, span_exporter: InMemorySpanExporter) -> None:
        """Test that exactly two spans are emitted and the child references the parent."""
        parent_function(Context(), tracer)

        spans = span_exporter.get_finished_spans()
        assert len(spans) == 2

        by_name = _spans_by_name(span_exporter)
        parent = by_name["parentSpanName"]
        child = by_name["childSpanName"]

        assert parent.parent is None
        assert child.parent is not None
        assert child.parent.span_id == parent.context.span_id
        assert child.context.trace_id == parent.context.trace_id

    def test_child_ends_before_parent(self, tracer: Tracer, span_exporter: InMemorySpanExporter) -> None:
        """Test that the parent span completes after the child returns."""
        parent_function(Context(), tracer)

        child, parent = span_exporter.get_finished_spans()
        assert child.name == "childSpanName"
        assert parent.name == "parentSpanName"
        assert parent.end_time >= child.end_time

    def test_attributes_and_events(self, tracer: Tracer, span_exporter: InMemorySpanExporter) -> None:
        """Test the fixed attribute and single event on each span."""
        parent_function(Context(), tracer)

        by_name = _spans_by_name(span_exporter)
        parent = by_name["parentSpanName"]
        child = by_name["childSpanName"]

        assert dict(parent.attributes) == {"parentAttributeKey1": "parentAttributeValue1"}
        assert [event.name for event in parent.events] == ["ParentSpan-Event"]
        assert dict(child.attributes) == {"childAttributeKey1": "childAttributeValue1"}
        assert [event.name for event in child.events] == ["ChildSpan-Event"]
        assert parent.status.status_code == StatusCode.UNSET
        assert child.status.status_code == StatusCode.UNSET

    def test_logs_narration_in_order(self, tracer: Tracer) -> None:
        """Test the log lines emitted around the child call."""
        with capture_logs() as logs:
            parent_function(Context(), tracer)

        assert [entry["event"] for entry in logs] == [
            "In parent span, before calling a child function.",
            "In child span, when this function returns, childSpan will complete.",
            "In parent span, after calling a child function. When this function ends, parentSpan will complete.",
        ]

    def test_parent_ends_when_child_raises(self, tracer: Tracer, span_exporter: InMemorySpanExporter) -> None:
        """Test that the parent span is still ended exactly once if the child fails."""
        with patch("manualtrace.demo.routines.child_function", side_effect=RuntimeError("child failed")):
            with pytest.raises(RuntimeError, match="child failed"):
                parent_function(Context(), tracer)

        (parent,) = span_exporter.get_finished_spans()
        assert parent.name == "parentSpanName"
        assert parent.end_time is not None
        assert parent.status.status_code == StatusCode.ERROR


class TestChildFunction:
    """Tests for child_function on its own."""

    def test_root_when_context_has_no_span(self, tracer: Tracer, span_exporter: InMemorySpanExporter) -> None:
        """Test that without a parent in context the child span is a root span."""
        child_function(Context(), tracer)

        (span,) = span_exporter.get_finished_spans()
        assert span.name == "childSpanName"
        assert span.parent is None


class TestExceptionFunction:
    """Tests for exception_function."""

    def test_records_division_error(self, tracer: Tracer, span_exporter: InMemorySpanExporter) -> None:
        """Test that the division error is recorded and flagged on the span."""
        exception_function(Context(), tracer)

        (span,) = span_exporter.get_finished_spans()
        assert span.name == "exceptionSpanName"
        assert dict(span.attributes) == {"exceptionAttributeKey1": "exceptionAttributeValue1"}
        assert span.status.status_code == StatusCode.ERROR
        assert span.status.description == "division by zero"

        (event,) = span.events
        assert event.name == "exception"
        assert event.attributes["exception.message"] == "division by zero"
        assert "DivisionByZeroError" in event.attributes["exception.type"]

    def test_does_not_raise(self, tracer: Tracer) -> None:
        """Test that the division error is recovered at the call site."""
        exception_function(Context(), tracer)

    def test_divides_ten_by_zero(self, tracer: Tracer) -> None:
        """Test the fixed operands passed to the division helper."""
        with patch(
            "manualtrace.demo.routines.divide",
            return_value=DivisionResult(-1, DivisionByZeroError()),
        ) as mock_divide:
            exception_function(Context(), tracer)

        mock_divide.assert_called_once_with(10, 0)

    def test_no_error_leaves_status_unset(self, tracer: Tracer, span_exporter: InMemorySpanExporter) -> None:
        """Test that a successful division leaves the span without an error."""
        with patch("manualtrace.demo.routines.divide", return_value=DivisionResult(5, None)):
            exception_function(Context(), tracer)

        (span,) = span_exporter.get_finished_spans()
        assert span.status.status_code == StatusCode.UNSET
        assert len(span.events) == 0

    def test_logs_before_division(self, tracer: Tracer) -> None:
        """Test the narration line."""
        with capture_logs() as logs:
            exception_function(Context(), tracer)

        assert [entry["event"] for entry in logs] == ["Call division function."]
