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

from dateutil import tz

from .base import CalendarBackend


class DateutilBackend(CalendarBackend):
    """
    Strict backend

    A local time that does not exist (spring-forward gap) or exists twice
    (fall-back fold) is refused: localizing it raises AmbiguousTime and month
    arithmetic landing on it raises DateCalculationError.
    """

    name = "dateutil"

    def _resolve(self, naive, zone):
        aware = naive.replace(tzinfo=zone, fold=0)
        if not tz.datetime_exists(aware) or tz.datetime_ambiguous(aware):
            return None
        return aware
