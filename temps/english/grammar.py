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

from pynini.lib.pynutil import add_weight

from ..core.grammar import Grammar
from ..core.language import Language
from ..core.rules import IsoDateTimeRule
from .rules import (
    ClockRule,
    DateRule,
    DayRule,
    DayTimeRule,
    NowRule,
    RelativeRule,
)


class EnglishGrammar(Grammar):
    """
    English time expression grammar

    Recognises, case-insensitively:
    - ISO 8601: "2024-01-15T14:30:00Z"
    - day-first dates: "15/03/2024", "15-03-2024"
    - day and time: "tomorrow at 3:30 pm", "next monday at 9am"
    - "now"
    - days: "today", "last friday", "sat"
    - times: "14:30", "3:30pm", "3 pm"
    - relative: "5 minutes ago", "in an hour"
    """

    language = Language.ENGLISH

    def __init__(self, cache_dir=None, overwrite_cache=False):
        """
        Args:
            cache_dir (str, optional): FST cache directory
            overwrite_cache (bool): rebuild the cached FST
        """
        super().__init__(name="en_time", cache_dir=cache_dir, overwrite_cache=overwrite_cache)

    def build_tagger(self):
        """Build English FST tagger"""
        # Lower weight = higher priority
        iso = add_weight(IsoDateTimeRule().tagger, 1.0)
        date = add_weight(DateRule().tagger, 1.1)
        day_time = add_weight(DayTimeRule().tagger, 1.2)
        now = add_weight(NowRule().tagger, 1.3)
        day = add_weight(DayRule().tagger, 1.4)
        clock = add_weight(ClockRule().tagger, 1.5)
        relative = add_weight(RelativeRule().tagger, 1.6)

        tagger = iso | date | day_time | now | day | clock | relative
        self.tagger = tagger.rmepsilon().optimize()
