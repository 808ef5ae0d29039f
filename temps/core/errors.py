# Copyright (c) 2025 Ming Yu (yuming@oppo.com)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Error taxonomy shared by the grammars, the resolver and the backends.

Every error carries a stable `kind` and a structured payload so callers can
branch on it without parsing messages::

    try:
        parse_and_resolve("next monday", "english")
    except TempsError as e:
        print(e.kind, e.to_dict())
"""

from typing import Any, Dict, Optional, Tuple

# Messages used by the resolver for calendar arithmetic failures.
ERR_MONTH_POSITIVE = "Month amount must be a positive number"
ERR_YEAR_POSITIVE = "Year amount must be a positive number"
ERR_INVALID_DATE_RESULT = "Date calculation resulted in invalid date"
ERR_YEAR_OVERFLOW = "Year calculation overflow"
ERR_DURATION_OVERFLOW = "Duration calculation overflow"
ERR_AMBIGUOUS_LOCAL = "Ambiguous or invalid local time"


class TempsError(Exception):
    """Base class for every error raised by temps."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def _payload(self) -> Tuple[Any, ...]:
        return (self.message,)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": str(self)}

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._payload() == other._payload()

    def __hash__(self):
        return hash((type(self), self._payload()))

    def __repr__(self):
        args = ", ".join(repr(v) for v in self._payload())
        return f"{type(self).__name__}({args})"


class ParseError(TempsError):
    """The text is not a complete expression of the requested language.

    Attributes:
        input: the text as given by the caller
        position: byte offset of the first character no rule could continue
            with, None when unknown
    """

    kind = "parse_error"

    def __init__(self, message: str, input: str = "", position: Optional[int] = None):
        super().__init__(message)
        self.input = input
        self.position = position

    def __str__(self):
        return f"Failed to parse time expression: {self.message}"

    def _payload(self):
        return (self.message, self.input, self.position)

    def to_dict(self):
        data = super().to_dict()
        data.update({"input": self.input, "position": self.position})
        return data


class DateCalculationError(TempsError):
    kind = "date_calculation_error"

    def __init__(self, message: str, context: Optional[str] = None):
        super().__init__(message)
        self.context = context

    def __str__(self):
        return f"Date calculation error: {self.message}"

    def _payload(self):
        return (self.message, self.context)

    def to_dict(self):
        data = super().to_dict()
        data["context"] = self.context
        return data


class InvalidDate(TempsError):
    kind = "invalid_date"

    def __init__(self, year: int, month: int, day: int):
        self.year = year
        self.month = month
        self.day = day
        super().__init__(f"Invalid date: year={year}, month={month}, day={day}")

    def _payload(self):
        return (self.year, self.month, self.day)

    def to_dict(self):
        data = super().to_dict()
        data.update({"year": self.year, "month": self.month, "day": self.day})
        return data


class InvalidTime(TempsError):
    kind = "invalid_time"

    def __init__(self, hour: int, minute: int, second: int):
        self.hour = hour
        self.minute = minute
        self.second = second
        super().__init__(f"Invalid time: {hour:02d}:{minute:02d}:{second:02d}")

    def _payload(self):
        return (self.hour, self.minute, self.second)

    def to_dict(self):
        data = super().to_dict()
        data.update({"hour": self.hour, "minute": self.minute, "second": self.second})
        return data


class InvalidTimezoneOffset(TempsError):
    kind = "invalid_timezone_offset"

    def __init__(self, hours: int, minutes: int):
        self.hours = hours
        self.minutes = minutes
        super().__init__(f"Invalid timezone offset: {hours:+03d}:{minutes:02d}")

    def _payload(self):
        return (self.hours, self.minutes)

    def to_dict(self):
        data = super().to_dict()
        data.update({"hours": self.hours, "minutes": self.minutes})
        return data


class AmbiguousTime(TempsError):
    """A local wall-clock time maps to zero or two instants (DST gap or fold)."""

    kind = "ambiguous_time"

    def __str__(self):
        return f"Ambiguous local time: {self.message}"


class ArithmeticOverflow(TempsError):
    kind = "arithmetic_overflow"

    def __init__(self, operation: str):
        super().__init__(operation)
        self.operation = operation

    def __str__(self):
        return f"Arithmetic overflow: {self.operation}"


class UnsupportedOperation(TempsError):
    kind = "unsupported_operation"

    def __init__(self, operation: str):
        super().__init__(operation)
        self.operation = operation

    def __str__(self):
        return f"Unsupported operation: {self.operation}"


class BackendError(TempsError):
    """The calendar backend failed for a reason outside the other kinds."""

    kind = "backend_error"

    def __init__(self, message: str, backend: str):
        super().__init__(message)
        self.backend = backend

    def __str__(self):
        return f"Backend error: {self.message}"

    def _payload(self):
        return (self.message, self.backend)

    def to_dict(self):
        data = super().to_dict()
        data["backend"] = self.backend
        return data
