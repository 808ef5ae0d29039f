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

"""Tests for error messages and payloads"""

from temps.core.errors import (
    ERR_MONTH_POSITIVE,
    AmbiguousTime,
    ArithmeticOverflow,
    BackendError,
    DateCalculationError,
    InvalidDate,
    InvalidTime,
    InvalidTimezoneOffset,
    ParseError,
    TempsError,
    UnsupportedOperation,
)


def test_messages():
    assert str(InvalidDate(2024, 13, 32)) == "Invalid date: year=2024, month=13, day=32"
    assert str(InvalidTime(25, 61, 61)) == "Invalid time: 25:61:61"
    assert str(InvalidTime(1, 2, 3)) == "Invalid time: 01:02:03"
    assert str(InvalidTimezoneOffset(15, 0)) == "Invalid timezone offset: +15:00"
    assert str(InvalidTimezoneOffset(-13, 30)) == "Invalid timezone offset: -13:30"
    assert str(ParseError("unexpected input", "foo", 0)) == "Failed to parse time expression: unexpected input"
    assert str(DateCalculationError(ERR_MONTH_POSITIVE)) == (
        "Date calculation error: Month amount must be a positive number"
    )
    assert str(AmbiguousTime("02:30")) == "Ambiguous local time: 02:30"
    assert str(ArithmeticOverflow("years to months")) == "Arithmetic overflow: years to months"
    assert str(UnsupportedOperation("language 'fr'")) == "Unsupported operation: language 'fr'"
    assert str(BackendError("clock unavailable", "zoned")) == "Backend error: clock unavailable"


def test_all_errors_share_the_base_class():
    errors = [
        ParseError("x"),
        DateCalculationError("x"),
        InvalidDate(1, 1, 1),
        InvalidTime(0, 0, 0),
        InvalidTimezoneOffset(0, 0),
        AmbiguousTime("x"),
        ArithmeticOverflow("x"),
        UnsupportedOperation("x"),
        BackendError("x", "dateutil"),
    ]
    assert all(isinstance(e, TempsError) for e in errors)
    assert len({e.kind for e in errors}) == len(errors)


def test_equality_by_payload():
    assert InvalidDate(2024, 2, 30) == InvalidDate(2024, 2, 30)
    assert InvalidDate(2024, 2, 30) != InvalidDate(2024, 2, 31)
    assert ParseError("m", "now!", 3) == ParseError("m", "now!", 3)
    assert ParseError("m", "now!", 3) != ParseError("m", "now!", 2)
    assert AmbiguousTime("x") != UnsupportedOperation("x")
    assert len({InvalidTime(1, 2, 3), InvalidTime(1, 2, 3)}) == 1


def test_to_dict():
    error = ParseError("unexpected input", "now!", 3)
    assert error.to_dict() == {
        "kind": "parse_error",
        "message": "Failed to parse time expression: unexpected input",
        "input": "now!",
        "position": 3,
    }
    assert InvalidDate(2024, 2, 30).to_dict()["day"] == 30
    assert BackendError("boom", "zoned").to_dict()["backend"] == "zoned"
