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


@pytest.mark.describe("test namespace")
def test_namespace() -> None:
    import mongoupdate

    assert str(mongoupdate.constants) != ""
    assert str(mongoupdate.info) != ""
    assert str(mongoupdate.__version__) != ""

    assert str(mongoupdate.constants.WriteOption.ACKNOWLEDGED) != ""
    assert str(mongoupdate.info.UpdateOptions) != ""


@pytest.mark.describe("test imports")
def test_imports() -> None:
    from mongoupdate import (  # noqa: F401
        CollationOptions,
        UpdateOptions,
        WriteOption,
    )
    from mongoupdate.constants import (  # noqa: F401
        CollationAlternate,
        CollationCaseFirst,
        CollationMaxVariable,
        CollationStrength,
    )
    from mongoupdate.settings.defaults import (  # noqa: F401
        DEFAULT_MULTI,
        DEFAULT_RETURN_NEW_DOCUMENT,
        DEFAULT_UPSERT,
    )
