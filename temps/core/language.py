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

from enum import Enum
from typing import Union

from .errors import UnsupportedOperation


class Language(Enum):
    ENGLISH = "english"
    GERMAN = "german"

    @classmethod
    def from_tag(cls, tag: Union["Language", str]) -> "Language":
        """
        Resolve a language from a member or a tag such as "en" or "German"

        Raises:
            UnsupportedOperation: for unknown tags
        """
        if isinstance(tag, cls):
            return tag
        key = str(tag).strip().lower()
        language = _ALIASES.get(key)
        if language is None:
            raise UnsupportedOperation(f"language '{tag}'")
        return language


_ALIASES = {
    "english": Language.ENGLISH,
    "en": Language.ENGLISH,
    "german": Language.GERMAN,
    "deutsch": Language.GERMAN,
    "de": Language.GERMAN,
}
