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

from ..expression import Direction, Now, Relative, TimeUnit
from ..time_utils import I64_MAX
from .base_parser import BaseParser


class NowParser(BaseParser):
    """time_now { }"""

    def parse(self, token):
        return Now()


class RelativeParser(BaseParser):
    """
    Relative time parser

    Handles tokens such as
    time_relative { amount: "5" unit: "minute" direction: "past" }
    """

    def parse(self, token):
        amount = self._require_int(token, "amount")
        if amount > I64_MAX:
            raise ValueError(f"amount {token['amount']} does not fit a 64-bit integer")

        return Relative(
            amount=amount,
            unit=TimeUnit(token["unit"]),
            direction=Direction(token["direction"]),
        )
