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

"""Defines constant values used throughout the project, including span names and attribute keys."""

import logging
import re
from enum import Enum


DEFAULT_SERVICE_NAME = "manual-service"
DEFAULT_DEPLOYMENT_ENVIRONMENT = "manual-env"
DEFAULT_COLLECTOR_ENDPOINT = "http://localhost:14268/api/traces"
JAEGER_THRIFT_PATH = "/api/traces"

# Resource schema the service identity attributes are expressed in
RESOURCE_SCHEMA_URL = "https://opentelemetry.io/schemas/1.7.0"

# OTEL Semantic Convention attributes
SERVICE_NAME = "service.name"
DEPLOYMENT_ENVIRONMENT = "deployment.environment"

# Tracer scopes
BASIC_TRACER_NAME = "basic-tracer"
EXCEPTION_TRACER_NAME = "exception-tracer"

# Parent span
PARENT_SPAN_NAME = "parentSpanName"
PARENT_ATTRIBUTE_KEY = "parentAttributeKey1"
PARENT_ATTRIBUTE_VALUE = "parentAttributeValue1"
PARENT_EVENT_NAME = "ParentSpan-Event"

# Child span
CHILD_SPAN_NAME = "childSpanName"
CHILD_ATTRIBUTE_KEY = "childAttributeKey1"
CHILD_ATTRIBUTE_VALUE = "childAttributeValue1"
CHILD_EVENT_NAME = "ChildSpan-Event"

# Exception span
EXCEPTION_SPAN_NAME = "exceptionSpanName"
EXCEPTION_ATTRIBUTE_KEY = "exceptionAttributeKey1"
EXCEPTION_ATTRIBUTE_VALUE = "exceptionAttributeValue1"

# Sentinel quotient returned alongside a division error
DIVISION_ERROR_QUOTIENT = -1


class LogLevel(Enum):
    """Define logging levels with associated priority values.

    Each level has a string representation and a corresponding priority value, which aligns with Python's built-in
    `logging` module levels.
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    NOTSET = "NOTSET"

    @property
    def priority(self) -> int:
        """Return the `logging` module priority for this level."""
        return getattr(logging, self.value)


class Environment(str, Enum):
    """Enumerate application environments and provide environment-specific logging and debugging defaults."""

    PRODUCTION = "PRODUCTION"
    DEVELOPMENT = "DEVELOPMENT"
    TESTING = "TESTING"

    @staticmethod
    def from_string(value: str) -> "Environment":
        """Convert a string representation to an `Environment` instance.

        Args:
            value (str): The string representation of the environment, e.g. `dev`, `production`, `testing`.

        Returns:
            Environment: The corresponding `Environment` instance.

        Raises:
            ValueError: If the string does not match any valid environment.
        """
        matches = re.findall(r"(?i)\b(dev|prod|test)(elop|elopment|uction|ing|er)?\b", value)
        if not len(matches):
            raise ValueError(f"Invalid environment: {value}")

        prefix = matches[0][0].lower()
        if prefix == "dev":
            return Environment.DEVELOPMENT
        if prefix == "prod":
            return Environment.PRODUCTION
        return Environment.TESTING

    @property
    def log_level(self) -> LogLevel:
        """Return the default log level for the environment."""
        return {
            "PRODUCTION": LogLevel.INFO,
            "DEVELOPMENT": LogLevel.DEBUG,
            "TESTING": LogLevel.INFO,
        }[self.value]

    @property
    def debug(self) -> bool:
        """Return whether debugging is on by default for the environment."""
        return {
            "PRODUCTION": False,
            "DEVELOPMENT": True,
            "TESTING": True,
        }[self.value]
