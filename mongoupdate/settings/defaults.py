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

# Defaults for the update options
DEFAULT_UPSERT = False
DEFAULT_MULTI = False
DEFAULT_RETURN_NEW_DOCUMENT = False

# Keys of the structured (JSON-like) form of the update options.
# Note "return_new_document" is snake_case, unlike its siblings.
UPDATE_OPTIONS_WRITE_OPTION_KEY = "writeOption"
UPDATE_OPTIONS_UPSERT_KEY = "upsert"
UPDATE_OPTIONS_MULTI_KEY = "multi"
UPDATE_OPTIONS_RETURN_NEW_DOCUMENT_KEY = "return_new_document"
UPDATE_OPTIONS_ARRAY_FILTERS_KEY = "arrayFilters"
UPDATE_OPTIONS_COLLATION_KEY = "collation"

# Keys of the structured form of the collation options
COLLATION_LOCALE_KEY = "locale"
COLLATION_CASE_LEVEL_KEY = "caseLevel"
COLLATION_CASE_FIRST_KEY = "caseFirst"
COLLATION_STRENGTH_KEY = "strength"
COLLATION_NUMERIC_ORDERING_KEY = "numericOrdering"
COLLATION_ALTERNATE_KEY = "alternate"
COLLATION_MAX_VARIABLE_KEY = "maxVariable"
COLLATION_NORMALIZATION_KEY = "normalization"
COLLATION_BACKWARDS_KEY = "backwards"

# Deprecation bookkeeping for write options
FSYNCED_DEPRECATED_IN = "1.0.0"
FSYNCED_REMOVED_IN = "2.0.0"
