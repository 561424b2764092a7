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

import importlib.metadata


def get_version() -> str:
    try:
        return importlib.metadata.version(__package__)

    # If the package is not installed (e.g. running from a checkout)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


__version__: str = get_version()


import mongoupdate.constants  # noqa: E402
import mongoupdate.info  # noqa: F401, E402
from mongoupdate.constants import WriteOption  # noqa: E402
from mongoupdate.info import CollationOptions, UpdateOptions  # noqa: E402

__all__ = [
    "CollationOptions",
    "UpdateOptions",
    "WriteOption",
    "__version__",
]
