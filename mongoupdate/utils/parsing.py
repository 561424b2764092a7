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

import logging
from typing import Any, Hashable, Iterable

logger = logging.getLogger(__name__)


def _warn_residual_keys(
    klass: type, raw_dict: dict[str, Any], known_keys: Iterable[str]
) -> None:
    residual_keys = raw_dict.keys() - set(known_keys)
    if residual_keys:
        logger.warning(
            "Unexpected key(s) encountered parsing a dictionary into "
            f"a `{klass.__name__}`: '{','.join(sorted(residual_keys))}'"
        )


def _read_bool(raw_dict: dict[str, Any], key: str, default: bool) -> bool:
    """
    Read a boolean from a JSON-like dictionary. Missing keys and explicit
    nulls give the default; any other non-boolean is a type error.
    """

    value = raw_dict.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise TypeError(
            f"Value for '{key}' must be a boolean, found {type(value).__name__}."
        )
    return value


def _read_optional_bool(raw_dict: dict[str, Any], key: str) -> bool | None:
    value = raw_dict.get(key)
    if value is None:
        return None
    return _read_bool(raw_dict, key, False)


def _read_optional_str(raw_dict: dict[str, Any], key: str) -> str | None:
    value = raw_dict.get(key)
    if value is None or isinstance(value, str):
        return value
    raise TypeError(
        f"Value for '{key}' must be a string, found {type(value).__name__}."
    )


def _read_optional_list(raw_dict: dict[str, Any], key: str) -> list[Any] | None:
    value = raw_dict.get(key)
    if value is None:
        return None
    if isinstance(value, (str, bytes, dict)) or not isinstance(value, Iterable):
        raise TypeError(
            f"Value for '{key}' must be a list, found {type(value).__name__}."
        )
    return list(value)


def _read_optional_dict(raw_dict: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = raw_dict.get(key)
    if value is None or isinstance(value, dict):
        return value
    raise TypeError(
        f"Value for '{key}' must be a dictionary, found {type(value).__name__}."
    )


def _freeze(value: Any) -> Hashable:
    """
    Turn a JSON-like structure (dicts, lists, scalars) into a hashable one,
    so that equal structures hash equally.
    """

    if isinstance(value, dict):
        return frozenset((k, _freeze(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, set):
        return frozenset(_freeze(v) for v in value)
    return value  # type: ignore[no-any-return]
