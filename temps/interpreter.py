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
Resolve TimeExpression values to datetimes

    >>> from datetime import datetime
    >>> from dateutil import tz
    >>> backend = DateutilBackend(zone=tz.UTC)
    >>> now = datetime(2024, 1, 31, 10, 0, tzinfo=tz.UTC)
    >>> resolve(Relative(1, TimeUnit.MONTH, Direction.FUTURE), now, backend)
    datetime.datetime(2024, 2, 29, 10, 0, tzinfo=tzutc())
"""

from datetime import date, datetime
from typing import Optional, Union

from .backend import CalendarBackend, DateutilBackend
from .core.errors import (
    ERR_DURATION_OVERFLOW,
    ERR_MONTH_POSITIVE,
    ERR_YEAR_OVERFLOW,
    ERR_YEAR_POSITIVE,
    ArithmeticOverflow,
    DateCalculationError,
    InvalidTime,
    UnsupportedOperation,
)
from .core.expression import (
    Absolute,
    Date,
    Day,
    DayReference,
    DayShortcut,
    DayTime,
    Direction,
    Now,
    Offset,
    Relative,
    Time,
    TimeExpression,
    TimeUnit,
    Utc,
    WeekdayReference,
)
from .core.language import Language
from .core.logger import get_logger
from .core.time_utils import (
    I64_MAX,
    I64_MIN,
    MONTHS_PER_YEAR,
    U32_MAX,
    convert_12_to_24_hour,
    weekday_offset,
)
from .dispatcher import parse


class Interpreter:
    """
    Turns expressions into datetimes with the help of a calendar backend

    Args:
        backend (CalendarBackend): calendar primitives and local zone
    """

    def __init__(self, backend: CalendarBackend):
        self.backend = backend
        self.logger = get_logger(__name__)
        self.handlers = {
            Now: self._resolve_now,
            Relative: self._resolve_relative,
            Absolute: self._resolve_absolute,
            Day: self._resolve_day,
            Time: self._resolve_time,
            DayTime: self._resolve_day_time,
            Date: self._resolve_date,
        }

    def resolve(self, expr: TimeExpression, now: datetime) -> datetime:
        """
        Resolve `expr` relative to `now`

        Raises:
            TempsError: see the individual handlers
        """
        handler = self.handlers.get(type(expr))
        if handler is None:
            raise UnsupportedOperation(f"cannot resolve {type(expr).__name__}")
        self.logger.debug(f"Resolving {expr!r} at {now.isoformat()} with {self.backend.name}")
        return handler(expr, now)

    def _resolve_now(self, expr: Now, now: datetime) -> datetime:
        return now

    def _resolve_relative(self, expr: Relative, now: datetime) -> datetime:
        future = expr.direction == Direction.FUTURE

        if expr.unit == TimeUnit.MONTH:
            return self._shift_months(now, expr.amount, future, ERR_MONTH_POSITIVE)
        if expr.unit == TimeUnit.YEAR:
            months = expr.amount * MONTHS_PER_YEAR
            if not I64_MIN <= months <= I64_MAX:
                raise ArithmeticOverflow(ERR_YEAR_OVERFLOW)
            return self._shift_months(now, months, future, ERR_YEAR_POSITIVE)

        seconds = expr.amount * expr.unit.seconds
        if not I64_MIN <= seconds <= I64_MAX:
            raise ArithmeticOverflow(ERR_DURATION_OVERFLOW)
        return self.backend.add_duration(now, seconds if future else -seconds)

    def _shift_months(self, now: datetime, months: int, future: bool, message: str) -> datetime:
        if not 0 <= months <= U32_MAX:
            raise DateCalculationError(message, context=f"{months} months")
        if future:
            return self.backend.add_months(now, months)
        return self.backend.sub_months(now, months)

    def _resolve_absolute(self, expr: Absolute, now: datetime) -> datetime:
        day = self.backend.make_date(expr.year, expr.month, expr.day)
        if not expr.has_time:
            return self._midnight(day)

        clock = self.backend.make_time(expr.hour, expr.minute, expr.second or 0, expr.nanosecond or 0)
        naive = self.backend.combine(day, clock)

        if isinstance(expr.timezone, Utc):
            return self.backend.to_local(self.backend.at_offset(naive, self.backend.utc()))
        if isinstance(expr.timezone, Offset):
            zone = self.backend.fixed_offset(expr.timezone.hours, expr.timezone.minutes)
            return self.backend.to_local(self.backend.at_offset(naive, zone))
        return self.backend.localize(naive)

    def _resolve_day(self, expr: Day, now: datetime) -> datetime:
        return self._midnight(self._day_of(expr.reference, now))

    def _resolve_time(self, expr: Time, now: datetime) -> datetime:
        return self._at_time(self.backend.date_of(now), expr)

    def _resolve_day_time(self, expr: DayTime, now: datetime) -> datetime:
        return self._at_time(self._day_of(expr.day, now), expr.time)

    def _resolve_date(self, expr: Date, now: datetime) -> datetime:
        d = expr.date
        return self._midnight(self.backend.make_date(d.year, d.month, d.day))

    def _day_of(self, reference: DayReference, now: datetime) -> date:
        today = self.backend.date_of(now)
        if reference == DayShortcut.TODAY:
            return today
        if reference == DayShortcut.YESTERDAY:
            return self.backend.add_days(today, -1)
        if reference == DayShortcut.TOMORROW:
            return self.backend.add_days(today, 1)
        if isinstance(reference, WeekdayReference):
            offset = weekday_offset(today.weekday(), reference.day.value, reference.modifier)
            return self.backend.add_days(today, offset)
        raise UnsupportedOperation(f"day reference {reference!r}")

    def _at_time(self, day: date, expr: Time) -> datetime:
        hour = convert_12_to_24_hour(expr.hour, expr.meridiem)
        try:
            clock = self.backend.make_time(hour, expr.minute, expr.second)
        except InvalidTime:
            raise InvalidTime(expr.hour, expr.minute, expr.second) from None
        return self.backend.localize(self.backend.combine(day, clock))

    def _midnight(self, day: date) -> datetime:
        return self.backend.localize(self.backend.combine(day, self.backend.make_time(0, 0, 0)))


def resolve(expr: TimeExpression, now: datetime, backend: Optional[CalendarBackend] = None) -> datetime:
    """
    Resolve an expression against a reference time

    Args:
        expr (TimeExpression): parsed expression
        now (datetime): reference instant; its own zone is kept for Now and Relative
        backend (CalendarBackend, optional): defaults to DateutilBackend()

    Returns:
        datetime: resolved instant
    """
    if backend is None:
        backend = DateutilBackend()
    return Interpreter(backend).resolve(expr, now)


def parse_and_resolve(
    text: str, language: Union[Language, str], backend: Optional[CalendarBackend] = None
) -> datetime:
    """
    Parse `text` and resolve it against the backend clock

    Example:
        >>> parse_and_resolve("in 5 minutes", "english")
    """
    if backend is None:
        backend = DateutilBackend()
    expr = parse(text, language)
    return resolve(expr, backend.now(), backend)
