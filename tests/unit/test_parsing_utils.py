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

import pytest

from mongoupdate.utils.parsing import _freeze, _read_bool, _read_optional_list


@pytest.mark.describe("test of reading booleans from dictionaries")
def test_read_bool() -> None:
    assert _read_bool({}, "k", False) is False
    assert _read_bool({}, "k", True) is True
    assert _read_bool({"k": None}, "k", True) is True
    assert _read_bool({"k": False}, "k", True) is False
    with pytest.raises(TypeError):
        _read_bool({"k": 0}, "k", False)


@pytest.mark.describe("test of reading lists from dictionaries")
def test_read_optional_list() -> None:
    assert _read_optional_list({}, "k") is None
    assert _read_optional_list({"k": ({"a": 1},)}, "k") == [{"a": 1}]
    with pytest.raises(TypeError):
        _read_optional_list({"k": "abc"}, "k")
    with pytest.raises(TypeError):
        _read_optional_list({"k": 3}, "k")


@pytest.mark.describe("test of freezing JSON-like structures for hashing")
def test_freeze() -> None:
    doc1 = {"a": [1, {"b": 2}], "c": {"d": None}}
    doc2 = {"c": {"d": None}, "a": [1, {"b": 2}]}
    assert hash(_freeze(doc1)) == hash(_freeze(doc2))
    assert _freeze(doc1) == _freeze(doc2)
    assert _freeze([{"a": 1}, {"b": 2}]) != _freeze([{"b": 2}, {"a": 1}])
    assert _freeze(None) is None
