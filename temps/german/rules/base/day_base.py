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
    """Day references for German: heute/gestern/morgen, [nächsten|letzten] weekday"""

    def build_rules(self):
        shortcuts = string_file(get_abs_path("../../data/day_shortcuts.tsv"))
        weekdays = string_file(get_abs_path("../../data/weekdays.tsv"))
        modifiers = string_file(get_abs_path("../../data/modifiers.tsv"))

        weekday = field("weekday", weekdays)
        modified_weekday = field("modifier", modifiers) + delete_extra_space + weekday

        return (field("shortcut", shortcuts) | modified_weekday | weekday).optimize()
