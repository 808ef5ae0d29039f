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

from ...core.processor import Processor
from ...core.utils import delete_extra_space, fixed, word
from .base import TimeBaseRule


class RelativeRule(Processor):
    """Relative rule processor, handles "5 minutes ago" and "in 2 hours" """

    def __init__(self):
        super().__init__(name="time_relative")
        self.amount = TimeBaseRule().build_amount_rules()
        self.build_tagger()

    def build_tagger(self):
        # Pattern 1: "<amount> <unit> ago"
        past = self.amount + delete_extra_space + word("ago") + fixed("direction", "past")

        # Pattern 2: "in <amount> <unit>"
        future = word("in") + delete_extra_space + self.amount + fixed("direction", "future")

        self.tagger = self.add_tokens(past | future)
