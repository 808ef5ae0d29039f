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
FST基础文本处理器模块

Base class for every rule and grammar: wraps rule output in tokens, builds
and caches the tagger FST and runs whole-input tagging.
"""

import os
from typing import List, Optional

from pynini import accep, arcmap, compose, escape, Fst, shortestpath
from pynini.lib.pynutil import insert

from .logger import get_logger
from .token_parser import Token, TokenParser


class Processor:
    """
    FST based tagger

    Attributes:
        name (str): token type emitted by `add_tokens`, also used in logs
        tagger (Optional[Fst]): compiled tagger, None until built
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.tagger: Optional[Fst] = None
        self._prefixes: Optional[Fst] = None

    def add_tokens(self, tagger: Fst) -> Fst:
        """
        Wraps the rule output as `name { ... }`

        Args:
            tagger: rule fst producing `key: "value"` members

        Returns:
            Fst: tagged fst
        """
        tagger = insert(f"{self.name} {{") + tagger + insert(" } ")
        return tagger.optimize()

    def build_fst(self, prefix: str, cache_dir: Optional[str] = None, overwrite_cache: bool = False) -> None:
        """
        Builds the tagger, reading or writing `<cache_dir>/<prefix>_tagger.fst`

        Args:
            prefix: cache file prefix
            cache_dir: FST cache directory, no caching when None
            overwrite_cache: rebuild even if a cached FST exists
        """
        logger = get_logger(__name__)

        tagger_path = None
        if cache_dir:
            os.makedirs(cache_dir, exist_ok=True)
            tagger_path = os.path.join(cache_dir, f"{prefix}_tagger.fst")

        if tagger_path and os.path.exists(tagger_path) and not overwrite_cache:
            logger.info(f"Found existing FST: {tagger_path}")
            self.tagger = Fst.read(tagger_path)
            return

        logger.info(f"Building FST for {self.name}...")
        self.build_tagger()
        if self.tagger is None:
            raise RuntimeError(f"build_tagger of {self.name} produced no FST")
        self.tagger = self.tagger.optimize()

        if tagger_path:
            self.tagger.write(tagger_path)
            logger.info(f"FST path: {tagger_path}")
        logger.info("done")

    def build_tagger(self) -> None:
        """
        Builds `self.tagger`. Subclasses must implement this.

        Raises:
            NotImplementedError: if not overridden
        """
        raise NotImplementedError("subclasses must implement build_tagger")

    def tag(self, text: str) -> List[Token]:
        """
        Tags `text`, which must be matched by the tagger in full

        Args:
            text: preprocessed input

        Returns:
            List[Token]: tokens on the best path, empty when nothing matches
        """
        if not text:
            return []
        if self.tagger is None:
            raise ValueError(f"tagger {self.name} is not built, call build_fst first")

        lattice = compose(accep(escape(text)), self.tagger)
        if lattice.num_states() == 0:
            return []

        tagged_text = shortestpath(lattice, nshortest=1).string()
        return TokenParser().parse(tagged_text)

    def matched_prefix_length(self, text: str) -> int:
        """
        Length in characters of the longest prefix of `text` that some path
        of the tagger can still continue from.
        """
        if self.tagger is None:
            raise ValueError(f"tagger {self.name} is not built, call build_fst first")

        if self._prefixes is None:
            prefixes = self.tagger.copy().project("input").rmepsilon().connect()
            prefixes = arcmap(prefixes, map_type="rmweight")
            for state in prefixes.states():
                prefixes.set_final(state)
            self._prefixes = prefixes.optimize()

        length = 0
        for end in range(1, len(text) + 1):
            if compose(accep(escape(text[:end])), self._prefixes).num_states() == 0:
                break
            length = end
        return length
