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
Language-neutral representation of a parsed time expression.

Grammars produce these values, the interpreter consumes them. All types are
immutable and compare by value. Numeric ranges are not checked here: a
`Time(hour=25, ...)` is a valid value and only fails when resolved.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class TimeUnit(Enum):
    """Units ordered by calendar irregularity."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def is_calendar(self) -> bool:
        """True for units whose length depends on the calendar."""
        return self in (TimeUnit.MONTH, TimeUnit.YEAR)

    @property
    def seconds(self) -> Optional[int]:
        """Fixed length in seconds, None for month and year."""
        return _UNIT_SECONDS.get(self)


_UNIT_SECONDS = {
    TimeUnit.SECOND: 1,
    TimeUnit.MINUTE: 60,
    TimeUnit.HOUR: 3600,
    TimeUnit.DAY: 86400,
    TimeUnit.WEEK: 604800,
}


class Direction(Enum):
    PAST = "past"
    FUTURE = "future"


class Weekday(Enum):
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class WeekdayModifier(Enum):
    NEXT = "next"
    LAST = "last"


class Meridiem(Enum):
    AM = "am"
    PM = "pm"


class DayShortcut(Enum):
    TODAY = "today"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"


@dataclass(frozen=True)
class Utc:
    """The UTC designator (`Z`)."""


@dataclass(frozen=True)
class Offset:
    """Fixed offset from UTC. The sign is carried on `hours` only."""

    hours: int
    minutes: int = 0


Timezone = Union[Utc, Offset]


@dataclass(frozen=True)
class WeekdayReference:
    day: Weekday
    modifier: Optional[WeekdayModifier] = None


DayReference = Union[DayShortcut, WeekdayReference]


@dataclass(frozen=True)
class Now:
    pass


@dataclass(frozen=True)
class Relative:
    """An amount of a unit before or after now, e.g. "5 minutes ago"."""

    amount: int
    unit: TimeUnit
    direction: Direction


@dataclass(frozen=True)
class Absolute:
    """An ISO 8601 date with optional time of day and timezone.

    Without `hour`/`minute` the value is a date and resolves to midnight.
    """

    year: int
    month: int
    day: int
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None
    nanosecond: Optional[int] = None
    timezone: Optional[Timezone] = None

    @property
    def has_time(self) -> bool:
        return self.hour is not None and self.minute is not None


@dataclass(frozen=True)
class Day:
    reference: DayReference


@dataclass(frozen=True)
class Time:
    """A wall-clock time; `hour` is 1-12 when a meridiem is given."""

    hour: int
    minute: int = 0
    second: int = 0
    meridiem: Optional[Meridiem] = None


@dataclass(frozen=True)
class StandardDate:
    day: int
    month: int
    year: int


@dataclass(frozen=True)
class Date:
    """A locale formatted date such as 15/03/2024 or 15.03.2024."""

    date: StandardDate


@dataclass(frozen=True)
class DayTime:
    day: DayReference
    time: Time


TimeExpression = Union[Now, Relative, Absolute, Day, Time, Date, DayTime]
