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

"""
Token parsers

Turn tagged tokens into TimeExpression values. Grammars of every language
emit the same token types, so the parsers are shared.
"""

from .base_parser import BaseParser
from .absolute_parser import AbsoluteParser, DateParser
from .day_parser import ClockParser, DayParser, DayTimeParser
from .relative_parser import NowParser, RelativeParser

__all__ = [
    "BaseParser",
    "AbsoluteParser",
    "DateParser",
    "ClockParser",
    "DayParser",
    "DayTimeParser",
    "NowParser",
    "RelativeParser",
]
