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

"""Manual OpenTelemetry tracing walkthrough.

Bootstraps a tracer provider, emits a parent span with a nested child span,
emits a span carrying a recorded error, and shuts the provider down.

Example:
    >>> from manualtrace.tracing import initialize
    >>> shutdown = initialize()
    >>> tracer = shutdown.provider.get_tracer("basic-tracer")
    >>> shutdown()
"""

from manualtrace.__about__ import __version__


__all__ = ["__version__"]
