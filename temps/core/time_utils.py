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

from typing import Optional

from .expression import Meridiem, WeekdayModifier

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
MINUTES_PER_HOUR = 60
DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MICRO = 1_000

I64_MAX = 2**63 - 1
I64_MIN = -(2**63)
U32_MAX = 2**32 - 1
I32_MAX = 2**31 - 1
I32_MIN = -(2**31)

# Accepted range of a fixed UTC offset, in whole hours.
OFFSET_HOURS_MIN = -12
OFFSET_HOURS_MAX = 14


def convert_12_to_24_hour(hour: int, meridiem: Optional[Meridiem]) -> int:
    """
    Convert a 12-hour clock value to the 24-hour clock

    Args:
        hour (int): hour as written
        meridiem (Meridiem): AM/PM marker, None for a 24-hour value

    Returns:
        int: hour on the 24-hour clock, unchanged when no meridiem is given

    Examples:
        12 AM -> 0, 1 AM -> 1, 12 PM -> 12, 1 PM -> 13
    """
    if meridiem is None:
        return hour
    if meridiem == Meridiem.AM:
        return 0 if hour == 12 else hour
    return hour if hour == 12 else hour + 12


def timezone_offset_seconds(hours: int, minutes: int) -> int:
    """
    Total offset in seconds for a UTC offset whose sign sits on the hours

    The minutes take the sign of the hours, so -05:30 is -19800 seconds.
    The result saturates at the signed 32-bit range.
    """
    sign = -1 if hours < 0 else 1
    total = hours * SECONDS_PER_HOUR + sign * minutes * SECONDS_PER_MINUTE
    return max(I32_MIN, min(I32_MAX, total))


def weekday_offset(current: int, target: int, modifier: Optional[WeekdayModifier]) -> int:
    """
    Days from `current` to the wanted occurrence of `target` (0=Monday)

    Without a modifier the nearest occurrence from today onward is used
    (0..6), NEXT skips today (1..7) and LAST looks strictly back (-7..-1).
    """
    diff = target - current
    if modifier is None:
        return diff if diff >= 0 else diff + DAYS_PER_WEEK
    if modifier == WeekdayModifier.NEXT:
        return diff if diff > 0 else diff + DAYS_PER_WEEK
    return diff if diff < 0 else diff - DAYS_PER_WEEK


def fraction_to_nanoseconds(digits: str) -> int:
    """Fractional second digits to nanoseconds: "5" -> 500000000.

    Digits beyond nanosecond precision are dropped.
    """
    digits = digits[:9]
    return int(digits.ljust(9, "0"))
