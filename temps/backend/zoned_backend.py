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


class ZonedBackend(CalendarBackend):
    """
    Backend with compatible disambiguation

    A time inside a fold resolves to the earlier of its two instants, a time
    inside a gap is moved forward by the length of the gap (02:30 on a
    spring-forward night becomes 03:30). Never raises AmbiguousTime.
    """

    name = "zoned"

    def _resolve(self, naive, zone):
        aware = naive.replace(tzinfo=zone, fold=0)
        if not tz.datetime_exists(aware):
            aware = tz.resolve_imaginary(aware)
        return aware
