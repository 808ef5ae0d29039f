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

from ..expression import Absolute, Date, Offset, StandardDate, Utc
from ..time_utils import fraction_to_nanoseconds
from .base_parser import BaseParser


class AbsoluteParser(BaseParser):
    """
    ISO 8601 token parser

    time_absolute { year: "2024" month: "01" day: "15" hour: "14" minute: "30"
                    second: "00" fraction: "5" offset_sign: "-"
                    offset_hours: "05" offset_minutes: "30" }
    """

    def parse(self, token):
        second = self._get_int(token, "second")
        nanosecond = None
        if "fraction" in token:
            nanosecond = fraction_to_nanoseconds(token["fraction"])

        return Absolute(
            year=self._require_int(token, "year"),
            month=self._require_int(token, "month"),
            day=self._require_int(token, "day"),
            hour=self._get_int(token, "hour"),
            minute=self._get_int(token, "minute"),
            second=second,
            nanosecond=nanosecond,
            timezone=self._timezone(token),
        )

    def _timezone(self, token):
        if token.get("zone") == "utc":
            return Utc()
        if "offset_hours" not in token:
            return None

        hours = int(token["offset_hours"])
        if token.get("offset_sign") == "-":
            hours = -hours
        return Offset(hours=hours, minutes=self._get_int(token, "offset_minutes", 0))


class DateParser(BaseParser):
    """time_date { day: "15" month: "03" year: "2024" }"""

    def parse(self, token):
        return Date(
            StandardDate(
                day=self._require_int(token, "day"),
                month=self._require_int(token, "month"),
                year=self._require_int(token, "year"),
            )
        )
