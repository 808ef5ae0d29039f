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

from pynini import closure, string_file, string_map
from pynini.lib import pynutil

from ....core.utils import (
    DIGITS,
    ONE_OR_TWO_DIGITS,
    delete_extra_space,
    delete_space,
    field,
    get_abs_path,
    num_to_word,
)

delete = pynutil.delete


class TimeBaseRule:
    """Clock times and counted units for English"""

    def build_time_rules(self):
        """
        Clock time: H:MM[:SS] with an optional am/pm marker, or H am/pm

        Examples: "14:30", "3:30pm", "3:30:15 p.m.", "3pm", "11 am"
        """
        meridiem = field("meridiem", string_file(get_abs_path("../../data/meridiem.tsv")))
        meridiem = delete_space + meridiem

        seconds = delete(":") + field("second", ONE_OR_TWO_DIGITS)
        digits = (
            field("hour", ONE_OR_TWO_DIGITS)
            + delete(":")
            + field("minute", ONE_OR_TWO_DIGITS)
            + closure(seconds, 0, 1)
        )
        clock = digits + closure(meridiem, 0, 1)
        hour_only = field("hour", ONE_OR_TWO_DIGITS) + meridiem

        return (clock | hour_only).optimize()

    def build_amount_rules(self):
        """
        Counted unit: "5 minutes", "an hour", "three weeks"

        Outputs `amount: "5" unit: "minute"`.
        """
        articles = string_file(get_abs_path("../../data/articles.tsv"))
        words = string_map([(num_to_word(i), str(i)) for i in range(1, 11)])
        amount = field("amount", DIGITS | articles | words)
        unit = field("unit", string_file(get_abs_path("../../data/units.tsv")))

        return (amount + delete_extra_space + unit).optimize()
