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

"""
Main conftest for shared fixtures (if any).
"""

from __future__ import annotations

from typing import Any

import pytest

from mongoupdate.constants import WriteOption
from mongoupdate.info import CollationOptions, UpdateOptions


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "describe(text): human-readable description of a test"
    )


@pytest.fixture
def full_collation() -> CollationOptions:
    return CollationOptions(
        locale="en_US",
        case_level=True,
        case_first="upper",
        strength="tertiary",
        numeric_ordering=True,
        alternate="shifted",
        max_variable="space",
        normalization=False,
        backwards=False,
    )


@pytest.fixture
def full_update_options(full_collation: CollationOptions) -> UpdateOptions:
    return UpdateOptions(
        True,
        True,
        write_option=WriteOption.MAJORITY,
        return_new_document=True,
        array_filters=[{"elem.grade": {"$gte": 85}}, {"x.tag": "a"}],
        collation=full_collation,
    )


@pytest.fixture
def full_update_options_dict() -> dict[str, Any]:
    return {
        "writeOption": "MAJORITY",
        "upsert": True,
        "multi": True,
        "return_new_document": True,
        "arrayFilters": [{"elem.grade": {"$gte": 85}}, {"x.tag": "a"}],
        "collation": {
            "locale": "en_US",
            "caseLevel": True,
            "caseFirst": "UPPER",
            "strength": "TERTIARY",
            "numericOrdering": True,
            "alternate": "SHIFTED",
            "maxVariable": "SPACE",
            "normalization": False,
            "backwards": False,
        },
    }
