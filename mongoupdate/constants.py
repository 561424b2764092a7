# Copyright DataStax, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import warnings
from typing import Any, Dict

from deprecation import DeprecatedWarning

from mongoupdate.settings.defaults import FSYNCED_DEPRECATED_IN, FSYNCED_REMOVED_IN
from mongoupdate.utils.str_enum import StrEnum

WriteConcernType = Dict[str, Any]


class WriteOption(StrEnum):
    """
    Write acknowledgement modes for a write operation.

    Each mode stands for a write concern document, available through
    the `as_write_concern` method. When written in the structured form of
    the options, a mode is represented by its name; when parsed back, names
    are matched regardless of case.
    """

    ACKNOWLEDGED = "ACKNOWLEDGED"
    UNACKNOWLEDGED = "UNACKNOWLEDGED"
    FSYNCED = "FSYNCED"
    JOURNALED = "JOURNALED"
    REPLICA_ACKNOWLEDGED = "REPLICA_ACKNOWLEDGED"
    MAJORITY = "MAJORITY"

    @classmethod
    def coerce(cls, value: str | WriteOption) -> WriteOption:
        write_option = super().coerce(value)
        # warn on selecting FSYNCED by name only, not on passing the member along
        if write_option is WriteOption.FSYNCED and isinstance(value, str):
            the_warning = DeprecatedWarning(
                "Write option 'FSYNCED'",
                deprecated_in=FSYNCED_DEPRECATED_IN,
                removed_in=FSYNCED_REMOVED_IN,
                details="Please use 'JOURNALED' instead.",
            )
            warnings.warn(
                the_warning,
                stacklevel=3,
            )
        return write_option

    def as_write_concern(self) -> WriteConcernType:
        """Return the write concern document corresponding to this mode."""

        return dict(_WRITE_CONCERN_MAP[self])


_WRITE_CONCERN_MAP: dict[WriteOption, WriteConcernType] = {
    WriteOption.ACKNOWLEDGED: {"w": 1},
    WriteOption.UNACKNOWLEDGED: {"w": 0},
    WriteOption.FSYNCED: {"w": 1, "fsync": True},
    WriteOption.JOURNALED: {"w": 1, "j": True},
    WriteOption.REPLICA_ACKNOWLEDGED: {"w": 2},
    WriteOption.MAJORITY: {"w": "majority"},
}


class CollationCaseFirst(StrEnum):
    """
    Admitted values for the `case_first` setting of CollationOptions:
    whether uppercase or lowercase sorts first, or neither.
    """

    UPPER = "UPPER"
    LOWER = "LOWER"
    OFF = "OFF"


class CollationStrength(StrEnum):
    """
    Admitted values for the `strength` setting of CollationOptions,
    i.e. the level of comparison to perform (ICU levels 1 to 5).
    """

    PRIMARY = "PRIMARY"
    SECONDARY = "SECONDARY"
    TERTIARY = "TERTIARY"
    QUATERNARY = "QUATERNARY"
    IDENTICAL = "IDENTICAL"


class CollationAlternate(StrEnum):
    """
    Admitted values for the `alternate` setting of CollationOptions:
    whether whitespace and punctuation are considered as base characters.
    """

    NON_IGNORABLE = "NON_IGNORABLE"
    SHIFTED = "SHIFTED"


class CollationMaxVariable(StrEnum):
    """
    Admitted values for the `max_variable` setting of CollationOptions,
    meaningful only with `alternate` set to SHIFTED.
    """

    PUNCT = "PUNCT"
    SPACE = "SPACE"


__all__ = [
    "CollationAlternate",
    "CollationCaseFirst",
    "CollationMaxVariable",
    "CollationStrength",
    "WriteOption",
]

__pdoc__ = {
    "WriteConcernType": False,
}
