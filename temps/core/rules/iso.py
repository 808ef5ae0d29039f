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

from pynini import closure, union
from pynini.lib import pynutil

from ..processor import Processor
from ..utils import DIGITS, FOUR_DIGITS, ONE_OR_TWO_DIGITS, field, fixed

delete = pynutil.delete


class IsoDateTimeRule(Processor):
    """
    ISO 8601 date with optional time and zone, shared by all languages

    Matches YYYY-MM-DD[(T| )HH:MM[:SS[.fraction]][Z|(+|-)HH[:MM]]] on
    lower-cased input, e.g. "2024-01-15", "2024-01-15t14:30:00.5z",
    "2024-01-15 14:30+02:00".
    """

    def __init__(self):
        super().__init__(name="time_absolute")
        self.build_tagger()

    def build_tagger(self):
        date = (
            field("year", FOUR_DIGITS)
            + delete("-")
            + field("month", ONE_OR_TWO_DIGITS)
            + delete("-")
            + field("day", ONE_OR_TWO_DIGITS)
        )

        fraction = delete(".") + field("fraction", DIGITS)
        seconds = delete(":") + field("second", ONE_OR_TWO_DIGITS) + closure(fraction, 0, 1)
        clock = (
            field("hour", ONE_OR_TWO_DIGITS)
            + delete(":")
            + field("minute", ONE_OR_TWO_DIGITS)
            + closure(seconds, 0, 1)
        )

        utc = delete("z") + fixed("zone", "utc")
        offset = (
            field("offset_sign", union("+", "-"))
            + field("offset_hours", ONE_OR_TWO_DIGITS)
            + closure(delete(":") + field("offset_minutes", ONE_OR_TWO_DIGITS), 0, 1)
        )
        zone = utc | offset

        time = delete(union("t", " ")) + clock + closure(zone, 0, 1)
        self.tagger = self.add_tokens(date + closure(time, 0, 1))
