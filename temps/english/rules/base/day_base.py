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

from pynini import string_file

from ....core.utils import delete_extra_space, field, get_abs_path


class DayBaseRule:
    """Day references for English: today/yesterday/tomorrow, [next|last] weekday"""

    def build_rules(self):
        """
        Build the day reference graph

        Outputs either `shortcut: "tomorrow"` or `[modifier: "next"] weekday: "0"`.
        """
        shortcuts = string_file(get_abs_path("../../data/day_shortcuts.tsv"))
        weekdays = string_file(get_abs_path("../../data/weekdays.tsv"))
        modifiers = string_file(get_abs_path("../../data/modifiers.tsv"))

        shortcut = field("shortcut", shortcuts)
        weekday = field("weekday", weekdays)
        modified_weekday = field("modifier", modifiers) + delete_extra_space + weekday

        return (shortcut | modified_weekday | weekday).optimize()
