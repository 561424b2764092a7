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

from enum import Enum, EnumMeta
from typing import TypeVar

T = TypeVar("T", bound="StrEnum")


class StrEnumMeta(EnumMeta):
    def _name_lookup(cls, name: str) -> str | None:
        """Return the member name matching `name` case-insensitively, or None."""
        if name in cls._member_map_:
            return name
        u_names = {k.upper(): k for k in cls._member_map_.keys()}
        return u_names.get(name.upper())

    def __contains__(cls, value: object) -> bool:
        """Return True if the provided string names a member of the enum."""
        if isinstance(value, str):
            return cls._name_lookup(value) is not None
        return isinstance(value, cls)


class StrEnum(Enum, metaclass=StrEnumMeta):
    @classmethod
    def coerce(cls: type[T], value: str | T) -> T:
        """
        Accepts either a string or an instance of the Enum itself.
        If a string is passed, it is matched against the member *names*
        of the enum, ignoring case (e.g. "acknowledged" -> ACKNOWLEDGED).
        If an Enum instance is passed, it returns it as-is.
        Raises ValueError if the string does not name any enum member.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            norm_name = cls._name_lookup(value)
            if norm_name is not None:
                return cls[norm_name]
        raise ValueError(
            f"Invalid enum value '{value}' for {cls.__name__}. "
            f"Allowed values are: {[e.name for e in cls]}"
        )
