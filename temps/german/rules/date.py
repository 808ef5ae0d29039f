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

from pynini.lib import pynutil

from ...core.processor import Processor
from ...core.utils import FOUR_DIGITS, ONE_OR_TWO_DIGITS, field

delete = pynutil.delete


class DateRule(Processor):
    """Dotted day-first dates: 15.03.2024, 1.3.2024"""

    def __init__(self):
        super().__init__(name="time_date")
        self.build_tagger()

    def build_tagger(self):
        date = (
            field("day", ONE_OR_TWO_DIGITS)
            + delete(".")
            + field("month", ONE_OR_TWO_DIGITS)
            + delete(".")
            + field("year", FOUR_DIGITS)
        )
        self.tagger = self.add_tokens(date)
