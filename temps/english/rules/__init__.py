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
English time rules module

One Processor per token type; EnglishGrammar unions them by priority.
"""

from .date import DateRule
from .day import DayRule
from .clock import ClockRule
from .day_time import DayTimeRule
from .now import NowRule
from .relative import RelativeRule

__all__ = [
    "DateRule",
    "DayRule",
    "ClockRule",
    "DayTimeRule",
    "NowRule",
    "RelativeRule",
]
