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

"""Clock style rendering of durations, e.g. 01:02:03 or -00:00:05.250"""

from datetime import timedelta
from typing import Union

DurationLike = Union[timedelta, int, float]


def _split(duration: DurationLike):
    if not isinstance(duration, timedelta):
        duration = timedelta(seconds=duration)
    micros = (duration.days * 86400 + duration.seconds) * 1_000_000 + duration.microseconds
    sign = "-" if micros < 0 else ""
    micros = abs(micros)
    seconds, micros = divmod(micros, 1_000_000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return sign, hours, minutes, seconds, micros // 1000


def hhmmss(duration: DurationLike) -> str:
    """
    Format a duration as [-]HH:MM:SS

    Hours are not wrapped at 24, sub-second parts are truncated.

    Args:
        duration: timedelta or a number of seconds

    Returns:
        str: formatted duration
    """
    sign, hours, minutes, seconds, _ = _split(duration)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def hhmmssxxx(duration: DurationLike) -> str:
    """Format a duration as [-]HH:MM:SS.mmm"""
    sign, hours, minutes, seconds, millis = _split(duration)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"
