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

from ..expression import Day, DayTime
from .base_parser import BaseParser


class DayParser(BaseParser):
    """
    Day reference parser

    Handles tokens such as:
    - time_day { shortcut: "tomorrow" }
    - time_day { modifier: "next" weekday: "0" }
    - time_day { weekday: "4" }
    """

    def parse(self, token):
        return Day(self._day_reference(token))


class ClockParser(BaseParser):
    """time_clock { hour: "3" minute: "30" meridiem: "pm" }"""

    def parse(self, token):
        return self._time(token)


class DayTimeParser(BaseParser):
    """Day reference combined with a time of day, e.g. "tomorrow at 3pm"."""

    def parse(self, token):
        return DayTime(day=self._day_reference(token), time=self._time(token))
