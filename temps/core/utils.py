# Copyright (c) 2021, NVIDIA CORPORATION.  All rights reserved.
# Copyright (c) 2024, WENET COMMUNITY.  Xingchen Song (sxc19@tsinghua.org.cn).
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
Lexical primitives shared by every language grammar.

Character classes, digit runs of bounded length, whitespace handling and the
tag field helper used to build `key: "value"` pairs inside a token.
"""

import os
import inspect

import inflect
import pynini
from pynini.lib import byte, pynutil

_inflect = inflect.engine()

NEMO_WHITE_SPACE = pynini.union(" ", "\t", "\n", "\r", "\u00a0").optimize()
NEMO_DIGIT = byte.DIGIT

# Numeric fields: one or two digits for day/month/hour/minute/second,
# exactly four digits for a year, any run of digits for amounts and fractions.
ONE_OR_TWO_DIGITS = pynini.closure(NEMO_DIGIT, 1, 2).optimize()
FOUR_DIGITS = pynini.closure(NEMO_DIGIT, 4, 4).optimize()
DIGITS = pynini.closure(NEMO_DIGIT, 1).optimize()

delete_space = pynutil.delete(pynini.closure(NEMO_WHITE_SPACE))
delete_extra_space = pynutil.delete(pynini.closure(NEMO_WHITE_SPACE, 1))


def field(key: str, graph: "pynini.FstLike") -> "pynini.FstLike":
    """
    Wraps the output of `graph` as a tag member, e.g. ` hour: "14"`

    Args:
        key: member name
        graph: fst producing the member value

    Returns:
        Fst: fst
    """
    return pynutil.insert(f' {key}: "') + graph + pynutil.insert('"')


def fixed(key: str, value: str) -> "pynini.FstLike":
    """Emits a constant tag member without consuming input."""
    return pynutil.insert(f' {key}: "{value}"')


def word(text: str) -> "pynini.FstLike":
    """Deletes a literal keyword from the input."""
    return pynutil.delete(pynini.accep(text))


def num_to_word(number: int) -> str:
    """Spoken English form of `number`, e.g. 21 -> "twenty one"."""
    words = _inflect.number_to_words(number)
    return words.replace("-", " ").replace(",", "")


def get_abs_path(rel_path: str) -> str:
    """
    Resolves `rel_path` against the directory of the calling module.

    Raises:
        ValueError: if the calling module has no file

    Example:
        >>> # called from temps/english/rules/base/time_base.py
        >>> get_abs_path("../../data/units.tsv")
        '/.../temps/english/rules/base/../../data/units.tsv'
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module_file = caller.f_globals.get("__file__") if caller is not None else None
    if module_file is None:
        raise ValueError("unable to locate the calling module")
    return os.path.join(os.path.dirname(os.path.abspath(module_file)), rel_path)
