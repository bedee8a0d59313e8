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

"""Integer division used to produce a realistic error for the exception span."""

from typing import NamedTuple, Optional

from manualtrace.commons.constants import DIVISION_ERROR_QUOTIENT
from manualtrace.commons.exceptions import DivisionByZeroError


class DivisionResult(NamedTuple):
    """Quotient and error pair returned by `divide`."""

    quotient: int
    error: Optional[DivisionByZeroError]


def divide(x: int, y: int) -> DivisionResult:
    """Divide `x` by `y`, truncating toward zero.

    A zero divisor is reported through the `error` field, with the quotient set
    to -1, rather than raised.

    Args:
        x: Dividend.
        y: Divisor.

    Returns:
        DivisionResult: `(x / y, None)` or `(-1, DivisionByZeroError)` when `y == 0`.
    """
    if y == 0:
        return DivisionResult(DIVISION_ERROR_QUOTIENT, DivisionByZeroError())

    quotient = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        quotient = -quotient
    return DivisionResult(quotient, None)
