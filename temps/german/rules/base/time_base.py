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

from pynini import closure, string_file
from pynini.lib import pynutil

from ....core.utils import (
    DIGITS,
    ONE_OR_TWO_DIGITS,
    delete_extra_space,
    field,
    get_abs_path,
    word,
)

delete = pynutil.delete


class TimeBaseRule:
    """Clock times and counted units for German"""

    def build_time_rules(self):
        """
        24-hour clock: HH:MM[:SS] [Uhr], or H Uhr

        Examples: "15:30", "15:30 Uhr", "9:05:10", "15 Uhr"
        """
        uhr = delete_extra_space + word("uhr")

        seconds = delete(":") + field("second", ONE_OR_TWO_DIGITS)
        digits = (
            field("hour", ONE_OR_TWO_DIGITS)
            + delete(":")
            + field("minute", ONE_OR_TWO_DIGITS)
            + closure(seconds, 0, 1)
        )
        hour_only = field("hour", ONE_OR_TWO_DIGITS) + uhr

        return (digits + closure(uhr, 0, 1) | hour_only).optimize()

    def build_amount_rules(self):
        """
        Counted unit: "5 Minuten", "einem Tag", "drei Wochen"

        Outputs `amount: "5" unit: "minute"`.
        """
        numbers = string_file(get_abs_path("../../data/numbers.tsv"))
        amount = field("amount", DIGITS | numbers)
        unit = field("unit", string_file(get_abs_path("../../data/units.tsv")))

        return (amount + delete_extra_space + unit).optimize()
