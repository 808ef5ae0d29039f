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

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..expression import (
    DayReference,
    DayShortcut,
    Meridiem,
    Time,
    TimeExpression,
    Weekday,
    WeekdayModifier,
    WeekdayReference,
)


class BaseParser(ABC):
    """
    Base class for token parsers

    A token parser turns one tagged token (as a dict with a "type" key and
    the token members) into a TimeExpression. Malformed tokens raise
    ValueError; the grammar reports them as parse errors.
    """

    @abstractmethod
    def parse(self, token: Dict[str, Any]) -> TimeExpression:
        """
        Parse a token into an expression

        Args:
            token (dict): {"type": ..., member: value, ...}

        Returns:
            TimeExpression: the parsed expression
        """
        raise NotImplementedError

    @staticmethod
    def _get_int(token: Dict[str, Any], key: str, default: Optional[int] = None) -> Optional[int]:
        value = token.get(key)
        if value is None:
            return default
        return int(value)

    @staticmethod
    def _require_int(token: Dict[str, Any], key: str) -> int:
        if key not in token:
            raise ValueError(f"token {token.get('type')} has no '{key}'")
        return int(token[key])

    def _day_reference(self, token: Dict[str, Any]) -> DayReference:
        """Day shortcut or weekday (with optional modifier) from a token."""
        if "shortcut" in token:
            return DayShortcut(token["shortcut"])
        if "weekday" in token:
            modifier = token.get("modifier")
            return WeekdayReference(
                day=Weekday(int(token["weekday"])),
                modifier=WeekdayModifier(modifier) if modifier else None,
            )
        raise ValueError(f"token {token.get('type')} has no day reference")

    def _time(self, token: Dict[str, Any]) -> Time:
        meridiem = token.get("meridiem")
        return Time(
            hour=self._require_int(token, "hour"),
            minute=self._get_int(token, "minute", 0),
            second=self._get_int(token, "second", 0),
            meridiem=Meridiem(meridiem) if meridiem else None,
        )
