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
Language independent core

- Processor: FST tagger base, used by every rule and grammar
- TokenParser: reader for the tagged FST output
- expression: the TimeExpression model
- errors: the TempsError hierarchy
"""

from .processor import Processor
from .token_parser import TokenParser, Token
from .utils import get_abs_path
from .logger import get_logger, setup_logging, auto_setup

__all__ = [
    "Processor",
    "TokenParser",
    "Token",
    "get_abs_path",
    "get_logger",
    "setup_logging",
    "auto_setup",
]
