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

"""Resolution of every expression type against a fixed reference time"""

from datetime import datetime

import pytest
from dateutil import tz

from temps import parse, resolve
from temps.backend import DateutilBackend
from temps.core.errors import (
    ERR_MONTH_POSITIVE,
    ERR_YEAR_POSITIVE,
    ArithmeticOverflow,
    DateCalculationError,
    InvalidDate,
    InvalidTime,
    InvalidTimezoneOffset,
    UnsupportedOperation,
)
from temps.core.expression import (
    Absolute,
    Date,
    Day,
    DayShortcut,
    DayTime,
    Direction,
    Meridiem,
    Now,
    Offset,
    Relative,
    StandardDate,
    Time,
    TimeUnit,
    Utc,
    Weekday,
    WeekdayModifier,
    WeekdayReference,
)
from temps.core.time_utils import I64_MAX, U32_MAX
from temps.interpreter import Interpreter

UTC = tz.UTC
# Monday
NOW = datetime(2024, 1, 15, 10, 30, tzinfo=UTC)


@pytest.fixture
def interpreter():
    return Interpreter(DateutilBackend(zone=UTC))


def test_now(interpreter):
    assert interpreter.resolve(Now(), NOW) == NOW


@pytest.mark.parametrize(
    "expr, expected",
    [
        (Relative(5, TimeUnit.MINUTE, Direction.PAST), datetime(2024, 1, 15, 10, 25, tzinfo=UTC)),
        (Relative(2, TimeUnit.HOUR, Direction.FUTURE), datetime(2024, 1, 15, 12, 30, tzinfo=UTC)),
        (Relative(30, TimeUnit.SECOND, Direction.FUTURE), datetime(2024, 1, 15, 10, 30, 30, tzinfo=UTC)),
        (Relative(3, TimeUnit.DAY, Direction.PAST), datetime(2024, 1, 12, 10, 30, tzinfo=UTC)),
        (Relative(1, TimeUnit.WEEK, Direction.FUTURE), datetime(2024, 1, 22, 10, 30, tzinfo=UTC)),
        (Relative(0, TimeUnit.DAY, Direction.FUTURE), NOW),
        (Relative(2, TimeUnit.MONTH, Direction.PAST), datetime(2023, 11, 15, 10, 30, tzinfo=UTC)),
        (Relative(1, TimeUnit.YEAR, Direction.FUTURE), datetime(2025, 1, 15, 10, 30, tzinfo=UTC)),
    ],
)
def test_relative(interpreter, expr, expected):
    assert interpreter.resolve(expr, NOW) == expected


@pytest.mark.parametrize(
    "now, expr, expected",
    [
        (
            datetime(2024, 1, 31, 10, 0, tzinfo=UTC),
            Relative(1, TimeUnit.MONTH, Direction.FUTURE),
            datetime(2024, 2, 29, 10, 0, tzinfo=UTC),
        ),
        (
            datetime(2023, 1, 31, 10, 0, tzinfo=UTC),
            Relative(1, TimeUnit.MONTH, Direction.FUTURE),
            datetime(2023, 2, 28, 10, 0, tzinfo=UTC),
        ),
        (
            datetime(2024, 3, 31, 10, 0, tzinfo=UTC),
            Relative(1, TimeUnit.MONTH, Direction.PAST),
            datetime(2024, 2, 29, 10, 0, tzinfo=UTC),
        ),
        (
            datetime(2024, 2, 29, 10, 0, tzinfo=UTC),
            Relative(1, TimeUnit.YEAR, Direction.FUTURE),
            datetime(2025, 2, 28, 10, 0, tzinfo=UTC),
        ),
        (
            datetime(2024, 2, 29, 10, 0, tzinfo=UTC),
            Relative(4, TimeUnit.YEAR, Direction.PAST),
            datetime(2020, 2, 29, 10, 0, tzinfo=UTC),
        ),
    ],
)
def test_month_end_clamping(interpreter, now, expr, expected):
    assert interpreter.resolve(expr, now) == expected


def test_negative_month_amount(interpreter):
    with pytest.raises(DateCalculationError) as excinfo:
        interpreter.resolve(Relative(-1, TimeUnit.MONTH, Direction.FUTURE), NOW)
    assert excinfo.value.message == ERR_MONTH_POSITIVE

    with pytest.raises(DateCalculationError) as excinfo:
        interpreter.resolve(Relative(-1, TimeUnit.YEAR, Direction.PAST), NOW)
    assert excinfo.value.message == ERR_YEAR_POSITIVE


def test_month_amount_out_of_range(interpreter):
    with pytest.raises(DateCalculationError):
        interpreter.resolve(Relative(U32_MAX + 1, TimeUnit.MONTH, Direction.FUTURE), NOW)
    with pytest.raises(DateCalculationError):
        interpreter.resolve(Relative(10**6, TimeUnit.MONTH, Direction.FUTURE), NOW)


def test_overflow(interpreter):
    with pytest.raises(ArithmeticOverflow):
        interpreter.resolve(Relative(I64_MAX, TimeUnit.YEAR, Direction.FUTURE), NOW)
    with pytest.raises(ArithmeticOverflow):
        interpreter.resolve(Relative(I64_MAX, TimeUnit.WEEK, Direction.FUTURE), NOW)
    with pytest.raises(ArithmeticOverflow):
        interpreter.resolve(Relative(10**15, TimeUnit.SECOND, Direction.PAST), NOW)


def test_result_out_of_calendar_range(interpreter):
    with pytest.raises(DateCalculationError):
        interpreter.resolve(Relative(10**12, TimeUnit.SECOND, Direction.FUTURE), NOW)


@pytest.mark.parametrize(
    "expr, expected",
    [
        (Absolute(2024, 1, 15, 14, 30, 0, None, Utc()), datetime(2024, 1, 15, 14, 30, tzinfo=UTC)),
        (Absolute(2024, 1, 15, 14, 30, 0, None, Offset(2, 0)), datetime(2024, 1, 15, 12, 30, tzinfo=UTC)),
        (Absolute(2024, 1, 15, 14, 30, None, None, Offset(-5, 30)), datetime(2024, 1, 15, 20, 0, tzinfo=UTC)),
        (Absolute(2024, 1, 15, 14, 30), datetime(2024, 1, 15, 14, 30, tzinfo=UTC)),
        (Absolute(2024, 1, 15), datetime(2024, 1, 15, tzinfo=UTC)),
        (
            Absolute(2024, 1, 15, 14, 30, 0, 123_456_789, Utc()),
            datetime(2024, 1, 15, 14, 30, 0, 123_456, tzinfo=UTC),
        ),
    ],
)
def test_absolute(interpreter, expr, expected):
    assert interpreter.resolve(expr, NOW) == expected


def test_absolute_in_local_zone():
    berlin = tz.gettz("Europe/Berlin")
    result = resolve(Absolute(2024, 7, 1, 12, 0), NOW, DateutilBackend(zone=berlin))
    assert result.tzinfo is berlin
    assert result.astimezone(UTC) == datetime(2024, 7, 1, 10, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    "expr, error",
    [
        (Absolute(2024, 2, 30), InvalidDate(2024, 2, 30)),
        (Absolute(2024, 13, 1, 10, 0), InvalidDate(2024, 13, 1)),
        (Absolute(2024, 1, 15, 25, 0), InvalidTime(25, 0, 0)),
        (Absolute(2024, 1, 15, 10, 60, 0), InvalidTime(10, 60, 0)),
        (Absolute(2024, 1, 15, 10, 0, 0, None, Offset(15, 0)), InvalidTimezoneOffset(15, 0)),
        (Absolute(2024, 1, 15, 10, 0, 0, None, Offset(-12, 30)), InvalidTimezoneOffset(-12, 30)),
        (Absolute(2024, 1, 15, 10, 0, 0, None, Offset(5, 60)), InvalidTimezoneOffset(5, 60)),
    ],
)
def test_absolute_errors(interpreter, expr, error):
    with pytest.raises(type(error)) as excinfo:
        interpreter.resolve(expr, NOW)
    assert excinfo.value == error


@pytest.mark.parametrize(
    "reference, expected_day",
    [
        (DayShortcut.TODAY, 15),
        (DayShortcut.YESTERDAY, 14),
        (DayShortcut.TOMORROW, 16),
        (WeekdayReference(Weekday.MONDAY), 15),
        (WeekdayReference(Weekday.MONDAY, WeekdayModifier.NEXT), 22),
        (WeekdayReference(Weekday.MONDAY, WeekdayModifier.LAST), 8),
        (WeekdayReference(Weekday.FRIDAY), 19),
        (WeekdayReference(Weekday.FRIDAY, WeekdayModifier.LAST), 12),
        (WeekdayReference(Weekday.SUNDAY, WeekdayModifier.NEXT), 21),
    ],
)
def test_day(interpreter, reference, expected_day):
    assert interpreter.resolve(Day(reference), NOW) == datetime(2024, 1, expected_day, tzinfo=UTC)


def test_day_uses_local_calendar_date():
    berlin = tz.gettz("Europe/Berlin")
    late_evening = datetime(2024, 1, 15, 23, 30, tzinfo=UTC)
    result = resolve(Day(DayShortcut.TODAY), late_evening, DateutilBackend(zone=berlin))
    assert result == datetime(2024, 1, 16, tzinfo=berlin)


@pytest.mark.parametrize(
    "expr, expected",
    [
        (Time(3, 30, 0, Meridiem.PM), datetime(2024, 1, 15, 15, 30, tzinfo=UTC)),
        (Time(12, 0, 0, Meridiem.AM), datetime(2024, 1, 15, 0, 0, tzinfo=UTC)),
        (Time(12, 0, 0, Meridiem.PM), datetime(2024, 1, 15, 12, 0, tzinfo=UTC)),
        (Time(9, 5, 10), datetime(2024, 1, 15, 9, 5, 10, tzinfo=UTC)),
    ],
)
def test_time(interpreter, expr, expected):
    assert interpreter.resolve(expr, NOW) == expected


def test_invalid_time_keeps_written_hour(interpreter):
    with pytest.raises(InvalidTime) as excinfo:
        interpreter.resolve(Time(13, 0, 0, Meridiem.PM), NOW)
    assert excinfo.value == InvalidTime(13, 0, 0)

    with pytest.raises(InvalidTime) as excinfo:
        interpreter.resolve(Time(25, 0), NOW)
    assert excinfo.value == InvalidTime(25, 0, 0)


def test_day_time(interpreter):
    expr = DayTime(DayShortcut.TOMORROW, Time(9, 0))
    assert interpreter.resolve(expr, NOW) == datetime(2024, 1, 16, 9, 0, tzinfo=UTC)

    expr = DayTime(WeekdayReference(Weekday.FRIDAY, WeekdayModifier.NEXT), Time(3, 0, 0, Meridiem.PM))
    assert interpreter.resolve(expr, NOW) == datetime(2024, 1, 19, 15, 0, tzinfo=UTC)


def test_date(interpreter):
    assert interpreter.resolve(Date(StandardDate(15, 3, 2024)), NOW) == datetime(2024, 3, 15, tzinfo=UTC)

    with pytest.raises(InvalidDate) as excinfo:
        interpreter.resolve(Date(StandardDate(32, 1, 2024)), NOW)
    assert excinfo.value == InvalidDate(2024, 1, 32)


def test_unsupported_expression(interpreter):
    with pytest.raises(UnsupportedOperation):
        interpreter.resolve("tomorrow", NOW)


def test_resolve_is_deterministic():
    backend = DateutilBackend(zone=UTC)
    expr = Relative(1, TimeUnit.MONTH, Direction.FUTURE)
    assert resolve(expr, NOW, backend) == resolve(expr, NOW, backend)


def test_parsed_english_and_german_agree():
    now = datetime(2024, 1, 31, 10, 0, tzinfo=UTC)
    backend = DateutilBackend(zone=UTC)
    english = resolve(parse("in 1 month", "english"), now, backend)
    german = resolve(parse("in 1 Monat", "german"), now, backend)
    assert english == german == datetime(2024, 2, 29, 10, 0, tzinfo=UTC)
