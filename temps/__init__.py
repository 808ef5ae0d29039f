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
temps - natural language time expressions for English and German

Parse text into a TimeExpression, then resolve it against a reference time:

    from temps import parse, resolve, parse_and_resolve

    expr = parse("next monday at 3pm", "english")
    when = resolve(expr, now)
    when = parse_and_resolve("vor 5 Minuten", "german")
"""

from .backend import CalendarBackend, DateutilBackend, ZonedBackend
from .core.errors import (
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
from .core.expression import (
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
from .core.hhmmss import hhmmss, hhmmssxxx
from .core.language import Language
from .dispatcher import get_grammar, parse
from .interpreter import Interpreter, parse_and_resolve, resolve

__version__ = "1.0.0"

__all__ = [
    "parse",
    "resolve",
    "parse_and_resolve",
    "get_grammar",
    "Interpreter",
    "Language",
    "CalendarBackend",
    "DateutilBackend",
    "ZonedBackend",
    "hhmmss",
    "hhmmssxxx",
    # expressions
    "Absolute",
    "Date",
    "Day",
    "DayShortcut",
    "DayTime",
    "Direction",
    "Meridiem",
    "Now",
    "Offset",
    "Relative",
    "StandardDate",
    "Time",
    "TimeUnit",
    "Utc",
    "Weekday",
    "WeekdayModifier",
    "WeekdayReference",
    # errors
    "TempsError",
    "ParseError",
    "DateCalculationError",
    "InvalidDate",
    "InvalidTime",
    "InvalidTimezoneOffset",
    "AmbiguousTime",
    "ArithmeticOverflow",
    "UnsupportedOperation",
    "BackendError",
]
