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
Calendar backend capability

The interpreter does all resolution logic once and asks a backend for the
primitive calendar operations: reading the clock, month arithmetic with
end-of-month clamping, building dates and times, mapping wall-clock times
to instants in the local zone and fixed offsets.

Backends differ in how they treat local times that fall into a DST gap or
fold; see `_resolve`.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional

from dateutil import tz
from dateutil.relativedelta import relativedelta

from ..core.errors import (
    ERR_AMBIGUOUS_LOCAL,
    ERR_DURATION_OVERFLOW,
    ERR_INVALID_DATE_RESULT,
    AmbiguousTime,
    ArithmeticOverflow,
    BackendError,
    DateCalculationError,
    InvalidDate,
    InvalidTime,
    InvalidTimezoneOffset,
)
from ..core.time_utils import (
    MINUTES_PER_HOUR,
    NANOS_PER_MICRO,
    NANOS_PER_SECOND,
    OFFSET_HOURS_MAX,
    OFFSET_HOURS_MIN,
    SECONDS_PER_HOUR,
    timezone_offset_seconds,
)


class CalendarBackend(ABC):
    """
    Base class for calendar backends

    Args:
        zone (tzinfo, optional): local zone, defaults to the system zone
    """

    name = "base"

    def __init__(self, zone: Optional[tzinfo] = None):
        self.zone = zone if zone is not None else tz.tzlocal()

    @abstractmethod
    def _resolve(self, naive: datetime, zone: tzinfo) -> Optional[datetime]:
        """
        Map a wall-clock time in `zone` to an aware datetime

        Returns None when the backend refuses a wall time that occurs zero
        or two times in `zone`.
        """

    def now(self) -> datetime:
        return datetime.now(self.zone)

    def utc(self) -> tzinfo:
        return tz.UTC

    def add_months(self, instant: datetime, months: int) -> datetime:
        """Add calendar months, clamping the day to the end of the month."""
        return self._shift_months(instant, months)

    def sub_months(self, instant: datetime, months: int) -> datetime:
        return self._shift_months(instant, -months)

    def _shift_months(self, instant: datetime, months: int) -> datetime:
        try:
            shifted = instant + relativedelta(months=months)
        except (ValueError, OverflowError) as e:
            raise DateCalculationError(ERR_INVALID_DATE_RESULT, context=str(e)) from e

        if shifted.tzinfo is None:
            return shifted
        resolved = self._resolve(shifted.replace(tzinfo=None), shifted.tzinfo)
        if resolved is None:
            raise DateCalculationError(ERR_INVALID_DATE_RESULT, context=shifted.replace(tzinfo=None).isoformat())
        return resolved

    def add_days(self, day: date, days: int) -> date:
        try:
            return day + timedelta(days=days)
        except OverflowError as e:
            raise DateCalculationError(ERR_INVALID_DATE_RESULT, context=str(e)) from e

    def add_duration(self, instant: datetime, seconds: int) -> datetime:
        """
        Add an exact number of elapsed seconds

        Aware datetimes are shifted on the UTC timeline, so "in 24 hours"
        across a DST change is 24 real hours.
        """
        try:
            delta = timedelta(seconds=seconds)
        except OverflowError as e:
            raise ArithmeticOverflow(ERR_DURATION_OVERFLOW) from e

        try:
            if instant.tzinfo is None:
                return instant + delta
            return (instant.astimezone(tz.UTC) + delta).astimezone(instant.tzinfo)
        except OverflowError as e:
            raise DateCalculationError(ERR_INVALID_DATE_RESULT, context=str(e)) from e

    def make_date(self, year: int, month: int, day: int) -> date:
        try:
            return date(year, month, day)
        except (ValueError, OverflowError):
            raise InvalidDate(year, month, day) from None

    def make_time(self, hour: int, minute: int, second: int, nanosecond: int = 0) -> time:
        """Wall-clock time; nanoseconds are truncated to microseconds."""
        if not 0 <= nanosecond < NANOS_PER_SECOND:
            raise InvalidTime(hour, minute, second)
        try:
            return time(hour, minute, second, nanosecond // NANOS_PER_MICRO)
        except (ValueError, OverflowError):
            raise InvalidTime(hour, minute, second) from None

    def combine(self, day: date, clock: time) -> datetime:
        return datetime.combine(day, clock)

    def localize(self, naive: datetime) -> datetime:
        """
        Interpret a wall-clock time in the local zone

        Raises:
            AmbiguousTime: if the backend refuses a gap or fold time
        """
        try:
            resolved = self._resolve(naive, self.zone)
        except (OSError, OverflowError) as e:
            raise BackendError(str(e), self.name) from e
        if resolved is None:
            raise AmbiguousTime(ERR_AMBIGUOUS_LOCAL)
        return resolved

    def fixed_offset(self, hours: int, minutes: int) -> tzinfo:
        """
        Fixed zone for an offset whose sign is carried on `hours`

        Raises:
            InvalidTimezoneOffset: outside -12:00..+14:00 or minutes > 59
        """
        if not OFFSET_HOURS_MIN <= hours <= OFFSET_HOURS_MAX or not 0 <= minutes < MINUTES_PER_HOUR:
            raise InvalidTimezoneOffset(hours, minutes)
        seconds = timezone_offset_seconds(hours, minutes)
        if not OFFSET_HOURS_MIN * SECONDS_PER_HOUR <= seconds <= OFFSET_HOURS_MAX * SECONDS_PER_HOUR:
            raise InvalidTimezoneOffset(hours, minutes)
        return tz.tzoffset(None, seconds)

    def at_offset(self, naive: datetime, zone: tzinfo) -> datetime:
        return naive.replace(tzinfo=zone)

    def to_local(self, instant: datetime) -> datetime:
        try:
            return instant.astimezone(self.zone)
        except (OSError, OverflowError) as e:
            raise BackendError(str(e), self.name) from e

    def date_of(self, instant: datetime) -> date:
        """Calendar date of `instant` as seen in the local zone."""
        if instant.tzinfo is None:
            return instant.date()
        return self.to_local(instant).date()

    def weekday(self, instant: datetime) -> int:
        """0 for Monday through 6 for Sunday."""
        return self.date_of(instant).weekday()

    def __repr__(self):
        return f"{type(self).__name__}(zone={self.zone!r})"
