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
Language grammar base

A grammar is a Processor whose tagger is the weighted union of its rule
taggers. Parsing lower-cases the trimmed input, requires the tagger to
consume all of it and hands the single resulting token to the token parser
registered for its type.
"""

from typing import Optional

from .errors import ParseError
from .expression import TimeExpression
from .language import Language
from .logger import get_logger
from .parser import (
    AbsoluteParser,
    ClockParser,
    DateParser,
    DayParser,
    DayTimeParser,
    NowParser,
    RelativeParser,
)
from .processor import Processor


class Grammar(Processor):
    """
    Base class for language grammars

    Subclasses set `language` and implement `build_tagger`, adding each rule
    tagger with `add_weight` (lower weight wins when rules overlap).
    """

    language: Language

    def __init__(self, name: str, cache_dir: Optional[str] = None, overwrite_cache: bool = False):
        """
        Args:
            name (str): grammar name, also the FST cache prefix
            cache_dir (str, optional): FST cache directory
            overwrite_cache (bool): rebuild the cached FST
        """
        super().__init__(name=name)
        self.logger = get_logger(__name__)
        self.parsers = {
            "time_absolute": AbsoluteParser(),
            "time_date": DateParser(),
            "time_daytime": DayTimeParser(),
            "time_now": NowParser(),
            "time_day": DayParser(),
            "time_clock": ClockParser(),
            "time_relative": RelativeParser(),
        }
        self.build_fst(name, cache_dir, overwrite_cache)

    def _preprocess_text(self, text: str) -> str:
        return text.lower()

    def parse(self, text: str) -> TimeExpression:
        """
        Parse a complete time expression

        Args:
            text (str): input, surrounding whitespace is ignored

        Returns:
            TimeExpression: the parsed expression

        Raises:
            ParseError: if the text is not a complete expression
        """
        stripped = text.strip()
        leading = len(text) - len(text.lstrip())
        normalized = self._preprocess_text(stripped)
        if not normalized:
            raise ParseError("empty input", text, position=0)

        try:
            tokens = self.tag(normalized)
        except ValueError as e:
            raise ParseError(str(e), text, position=None) from e

        if len(tokens) != 1:
            position = self._failure_position(text, stripped, normalized, leading)
            raise ParseError(
                f"'{stripped}' is not a recognised {self.language.value} time expression",
                text,
                position,
            )

        token = tokens[0]
        self.logger.debug(f"Tag: {token.string()}")
        parser = self.parsers.get(token.name)
        if parser is None:
            raise ParseError(f"no parser for token type {token.name}", text, position=None)

        try:
            return parser.parse(token.to_dict())
        except ValueError as e:
            raise ParseError(str(e), text, position=None) from e

    def _failure_position(self, text: str, stripped: str, normalized: str, leading: int) -> Optional[int]:
        """Byte offset into `text` where matching stopped, None if unknown."""
        # Offsets only map back when lower-casing kept the character count.
        if len(normalized) != len(stripped):
            return None
        consumed = self.matched_prefix_length(normalized)
        return len(text[: leading + consumed].encode("utf-8"))
