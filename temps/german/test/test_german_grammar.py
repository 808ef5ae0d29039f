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

"""German grammar tests"""

import pytest

from temps.core.errors import ParseError
from temps.core.expression import (
    Absolute,
    Date,
    Day,
    DayShortcut,
    DayTime,
    Direction,
    Now,
    Relative,
    StandardDate,
    Time,
    TimeUnit,
    Utc,
    Weekday,
    WeekdayModifier,
    WeekdayReference,
)
from temps.dispatcher import get_grammar


@pytest.fixture(scope="module")
def grammar():
    return get_grammar("german")


@pytest.mark.parametrize("text", ["jetzt", "JETZT", "Jetzt"])
def test_now(grammar, text):
    assert grammar.parse(text) == Now()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("vor 5 Minuten", Relative(5, TimeUnit.MINUTE, Direction.PAST)),
        ("in 2 Stunden", Relative(2, TimeUnit.HOUR, Direction.FUTURE)),
        ("vor einem Tag", Relative(1, TimeUnit.DAY, Direction.PAST)),
        ("in einer Woche", Relative(1, TimeUnit.WEEK, Direction.FUTURE)),
        ("vor drei Monaten", Relative(3, TimeUnit.MONTH, Direction.PAST)),
        ("in fünf Jahren", Relative(5, TimeUnit.YEAR, Direction.FUTURE)),
        ("vor 10 Sek", Relative(10, TimeUnit.SECOND, Direction.PAST)),
        ("in 3 Std", Relative(3, TimeUnit.HOUR, Direction.FUTURE)),
        ("vor 1 Min", Relative(1, TimeUnit.MINUTE, Direction.PAST)),
        ("VOR 2 TAGEN", Relative(2, TimeUnit.DAY, Direction.PAST)),
    ],
)
def test_relative(grammar, text, expected):
    assert grammar.parse(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("heute", Day(DayShortcut.TODAY)),
        ("gestern", Day(DayShortcut.YESTERDAY)),
        ("Morgen", Day(DayShortcut.TOMORROW)),
        ("Montag", Day(WeekdayReference(Weekday.MONDAY))),
        ("nächsten Freitag", Day(WeekdayReference(Weekday.FRIDAY, WeekdayModifier.NEXT))),
        ("NÄCHSTEN MONTAG", Day(WeekdayReference(Weekday.MONDAY, WeekdayModifier.NEXT))),
        ("letzten Sonntag", Day(WeekdayReference(Weekday.SUNDAY, WeekdayModifier.LAST))),
        ("Mo", Day(WeekdayReference(Weekday.MONDAY))),
    ],
)
def test_day(grammar, text, expected):
    assert grammar.parse(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("15:30", Time(15, 30)),
        ("15:30 Uhr", Time(15, 30)),
        ("9:05:10", Time(9, 5, 10)),
        ("15 Uhr", Time(15, 0)),
    ],
)
def test_clock(grammar, text, expected):
    assert grammar.parse(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("morgen um 15:30 Uhr", DayTime(DayShortcut.TOMORROW, Time(15, 30))),
        (
            "nächsten Montag um 9:00",
            DayTime(WeekdayReference(Weekday.MONDAY, WeekdayModifier.NEXT), Time(9, 0)),
        ),
        ("heute um 8 Uhr", DayTime(DayShortcut.TODAY, Time(8, 0))),
    ],
)
def test_day_time(grammar, text, expected):
    assert grammar.parse(text) == expected


def test_date(grammar):
    assert grammar.parse("15.03.2024") == Date(StandardDate(15, 3, 2024))
    assert grammar.parse("1.3.2024") == Date(StandardDate(1, 3, 2024))


def test_iso(grammar):
    assert grammar.parse("2024-01-15T14:30:00Z") == Absolute(2024, 1, 15, 14, 30, 0, None, Utc())


@pytest.mark.parametrize("text", ["now", "5 minutes ago", "tomorrow", "15/03/2024", "3pm"])
def test_rejects_english(grammar, text):
    with pytest.raises(ParseError):
        grammar.parse(text)


def test_failure_position(grammar):
    with pytest.raises(ParseError) as excinfo:
        grammar.parse("vor 5")
    assert excinfo.value.position == 5

    with pytest.raises(ParseError) as excinfo:
        grammar.parse("xyz")
    assert excinfo.value.position == 0
