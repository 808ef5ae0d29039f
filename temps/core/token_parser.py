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
Reader for the tagged text produced by the grammar FSTs.

A tagged string is a sequence of tokens::

    time_relative { amount: "5" unit: "minute" direction: "future" }

which reads as::

    text   := (spaces token)* spaces
    token  := key " {" (spaces member)* spaces "}"
    member := key ": " '"' value '"'

Values may contain backslash-escaped characters.
"""

import string
from typing import Any, Dict, List

EOS = "<EOS>"
KEY_CHARS = frozenset(string.ascii_letters + string.digits + "_")


class Token:
    """A named token with ordered `key: "value"` members."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.members: Dict[str, str] = {}

    @property
    def order(self) -> List[str]:
        return list(self.members)

    def append(self, key: str, value: str) -> None:
        self.members[key] = value

    def string(self) -> str:
        """Renders the token back to the tag format."""
        body = "".join(f' {key}: "{value}"' for key, value in self.members.items())
        return f"{self.name} {{{body} }}"

    def to_dict(self) -> Dict[str, Any]:
        """Flattens the token to `{"type": name, **members}`."""
        return {"type": self.name, **self.members}

    def __repr__(self):
        return f"Token({self.string()!r})"


class TokenParser:
    """
    Cursor based reader for tagged text

    Raises:
        ValueError: on malformed input, with the character index
    """

    def __init__(self) -> None:
        self.text = ""
        self.pos = 0

    def parse(self, input_text: str) -> List[Token]:
        """
        Parses tagged text into tokens

        Args:
            input_text: FST output

        Returns:
            List[Token]: tokens in input order

        Raises:
            ValueError: if the text is not well formed
        """
        if not input_text:
            raise ValueError("parse error at position 0: tagged text is empty")

        self.text = input_text
        self.pos = 0
        tokens = []
        try:
            while self._skip_spaces():
                tokens.append(self._read_token())
        except ValueError as e:
            raise ValueError(f"parse error at position {self.pos}: {e}") from None
        return tokens

    def _peek(self) -> str:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return EOS

    def _skip_spaces(self) -> bool:
        """Moves past blanks; False once the text is exhausted."""
        while self._peek() == " ":
            self.pos += 1
        return self.pos < len(self.text)

    def _expect(self, literal: str) -> None:
        if not self.text.startswith(literal, self.pos):
            raise ValueError(f"expected {literal!r} but found {self._peek()!r}")
        self.pos += len(literal)

    def _read_key(self) -> str:
        start = self.pos
        while self._peek() in KEY_CHARS:
            self.pos += 1
        if self.pos == start:
            raise ValueError(f"invalid key character: {self._peek()!r}")
        return self.text[start : self.pos]

    def _read_value(self) -> str:
        self._expect('"')
        chars = []
        while True:
            char = self._peek()
            if char == EOS:
                raise ValueError("unterminated quote")
            self.pos += 1
            if char == '"':
                return "".join(chars).strip()
            if char == "\\":
                char = self._peek()
                if char == EOS:
                    raise ValueError("unterminated quote")
                self.pos += 1
            chars.append(char)

    def _read_token(self) -> Token:
        token = Token(self._read_key())
        self._expect(" {")
        while self._skip_spaces():
            if self._peek() == "}":
                self.pos += 1
                return token
            key = self._read_key()
            self._expect(": ")
            token.append(key, self._read_value())
        raise ValueError(f"token '{token.name}' is not closed")
