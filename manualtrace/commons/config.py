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

"""Manages application configuration, read from environment variables and `.env` files."""

from functools import lru_cache
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings

from manualtrace.__about__ import __version__

from .constants import (
    DEFAULT_COLLECTOR_ENDPOINT,
    DEFAULT_DEPLOYMENT_ENVIRONMENT,
    DEFAULT_SERVICE_NAME,
    Environment,
    LogLevel,
)


load_dotenv()

_TRUTHY = ("true", "1", "yes", "y", "on")


class AppConfig(BaseSettings):
    """Manages configuration settings for the tracing walkthrough.

    Attributes:
        env (Environment): The environment the program runs in; drives the `log_level` and `debug` defaults.
        log_level (Optional[LogLevel]): Minimum level of emitted log lines.
        debug (Optional[bool]): Enable or disable debugging mode.
        json_logs (bool): Render log lines as JSON instead of plain console text.
        service_name (str): `service.name` resource attribute attached to every span.
        deployment_environment (str): `deployment.environment` resource attribute attached to every span.
        collector_endpoint (str): URL the span exporter sends finished spans to.
        export_timeout (int): Exporter request timeout in seconds.
        console_export (bool): Also print finished spans to stdout.
        fail_open (bool): Degrade to no-op tracing instead of exiting when bootstrap fails.

    Example:
        ```python
        from manualtrace.commons.config import get_app_settings

        print(get_app_settings().collector_endpoint)
        ```
    """

    model_config = ConfigDict(extra="forbid")

    # App Info
    name: str = Field(__version__.split("@")[0], alias="MANUALTRACE_NAME")
    version: str = Field(__version__.split("@")[-1], alias="MANUALTRACE_VERSION")

    # Deployment configs
    env: Environment = Field(Environment.DEVELOPMENT, alias="MANUALTRACE_NAMESPACE")
    debug: Optional[bool] = Field(None, alias="MANUALTRACE_DEBUG")
    log_level: Optional[LogLevel] = Field(None, alias="MANUALTRACE_LOG_LEVEL")
    json_logs: bool = Field(False, alias="MANUALTRACE_JSON_LOGS")

    # Tracing
    service_name: str = Field(DEFAULT_SERVICE_NAME, alias="MANUALTRACE_SERVICE_NAME")
    deployment_environment: str = Field(DEFAULT_DEPLOYMENT_ENVIRONMENT, alias="MANUALTRACE_DEPLOYMENT_ENVIRONMENT")
    collector_endpoint: str = Field(DEFAULT_COLLECTOR_ENDPOINT, alias="MANUALTRACE_COLLECTOR_ENDPOINT")
    export_timeout: int = Field(10, alias="MANUALTRACE_EXPORT_TIMEOUT", gt=0)
    console_export: bool = Field(False, alias="MANUALTRACE_CONSOLE_EXPORT")
    fail_open: bool = Field(False, alias="MANUALTRACE_FAIL_OPEN")

    @model_validator(mode="before")
    @classmethod
    def resolve_env(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Convert `MANUALTRACE_NAMESPACE`, `MANUALTRACE_LOG_LEVEL` and `MANUALTRACE_DEBUG` strings to their typed values.

        Args:
            data (dict): Raw configuration data.

        Returns:
            dict: The updated configuration data.
        """
        if not isinstance(data, dict):
            return data

        if isinstance(data.get("MANUALTRACE_NAMESPACE"), str):
            data["MANUALTRACE_NAMESPACE"] = Environment.from_string(data["MANUALTRACE_NAMESPACE"])
        if isinstance(data.get("MANUALTRACE_LOG_LEVEL"), str):
            data["MANUALTRACE_LOG_LEVEL"] = LogLevel(data["MANUALTRACE_LOG_LEVEL"].upper())
        if isinstance(data.get("MANUALTRACE_DEBUG"), str):
            data["MANUALTRACE_DEBUG"] = data["MANUALTRACE_DEBUG"].strip().lower() in _TRUTHY
        return data

    @model_validator(mode="after")
    def set_env_details(self) -> "AppConfig":
        """Fill `log_level` and `debug` from the environment defaults when they are not set explicitly.

        Returns:
            AppConfig: The updated instance.
        """
        if self.log_level is None:
            self.log_level = self.env.log_level
        if self.debug is None:
            self.debug = self.env.debug

        return self


@lru_cache(maxsize=1)
def get_app_settings() -> AppConfig:
    """Load the settings from the environment on first use and reuse them afterwards.

    Raises:
        pydantic.ValidationError: If a `MANUALTRACE_*` variable holds an invalid value.
    """
    return AppConfig()
