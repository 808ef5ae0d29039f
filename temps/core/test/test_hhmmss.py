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

"""Tests for duration formatting"""

from datetime import timedelta

from temps.core.hhmmss import hhmmss, hhmmssxxx


def test_seconds():
    assert hhmmss(5000.3) == "01:23:20"
    assert hhmmssxxx(5000.3) == "01:23:20.300"
    assert hhmmss(0) == "00:00:00"
    assert hhmmssxxx(0) == "00:00:00.000"


def test_timedelta():
    duration = timedelta(hours=2, minutes=2, seconds=200)
    assert hhmmss(duration) == "02:05:20"
    assert hhmmssxxx(duration) == "02:05:20.000"

    duration = timedelta(hours=2, milliseconds=200)
    assert hhmmss(duration) == "02:00:00"
    assert hhmmssxxx(duration) == "02:00:00.200"


def test_hours_do_not_wrap():
    assert hhmmss(timedelta(days=2, hours=1)) == "49:00:00"


def test_negative():
    assert hhmmss(timedelta(seconds=-5)) == "-00:00:05"
    assert hhmmssxxx(timedelta(seconds=-5, milliseconds=-250)) == "-00:00:05.250"
