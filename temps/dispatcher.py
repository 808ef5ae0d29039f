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
Language dispatch

Grammars are compiled on first use and shared afterwards. Set
TEMPS_FST_CACHE_DIR to keep compiled taggers on disk between processes.
"""

import os
import threading
from typing import Dict, Union

from .core.expression import TimeExpression
from .core.grammar import Grammar
from .core.language import Language
from .core.logger import get_logger
from .english import EnglishGrammar
from .german import GermanGrammar

GRAMMARS = {
    Language.ENGLISH: EnglishGrammar,
    Language.GERMAN: GermanGrammar,
}

_grammars: Dict[Language, Grammar] = {}
_lock = threading.Lock()
logger = get_logger(__name__)


def get_grammar(language: Union[Language, str]) -> Grammar:
    """
    Compiled grammar for `language`, built once per process

    Raises:
        UnsupportedOperation: for unknown languages
    """
    language = Language.from_tag(language)
    grammar = _grammars.get(language)
    if grammar is not None:
        return grammar

    with _lock:
        grammar = _grammars.get(language)
        if grammar is None:
            cache_dir = os.environ.get("TEMPS_FST_CACHE_DIR") or None
            logger.info(f"Compiling {language.value} grammar")
            grammar = GRAMMARS[language](cache_dir=cache_dir)
            _grammars[language] = grammar
    return grammar


def parse(text: str, language: Union[Language, str]) -> TimeExpression:
    """
    Parse `text` with the grammar of `language`

    Args:
        text (str): time expression, e.g. "in 5 minutes"
        language (Language | str): Language member or tag ("english", "de", ...)

    Returns:
        TimeExpression: the parsed expression

    Raises:
        ParseError: if the text is not a complete expression
        UnsupportedOperation: for unknown languages
    """
    return get_grammar(language).parse(text)
