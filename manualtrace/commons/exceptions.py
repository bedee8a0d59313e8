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

"""The exceptions raised by the tracing bootstrap and the demonstration routines."""

from typing import Any, Dict, Optional


class ManualTraceException(Exception):
    """Base exception for all manualtrace errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the base exception.

        Args:
            message: Error message
            details: Optional structured context attached to the error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the error message, with details appended when present."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class TracerInitError(ManualTraceException):
    """Raised when the tracer provider or its exporter cannot be constructed."""

    def __init__(self, cause: BaseException, endpoint: Optional[str] = None) -> None:
        details = {"endpoint": endpoint} if endpoint else None
        super().__init__(f"failed to initialize tracer provider: {cause}", details=details)
        self.cause = cause
        self.endpoint = endpoint


class DivisionByZeroError(ManualTraceException, ZeroDivisionError):
    """Raised, or returned as an error value, when dividing by zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")
