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
from dataclasses import dataclass
from typing import Any

from typing_extensions import Self

from mongoupdate.constants import (
    CollationAlternate,
    CollationCaseFirst,
    CollationMaxVariable,
    CollationStrength,
)
from mongoupdate.settings.defaults import (
    COLLATION_ALTERNATE_KEY,
    COLLATION_BACKWARDS_KEY,
    COLLATION_CASE_FIRST_KEY,
    COLLATION_CASE_LEVEL_KEY,
    COLLATION_LOCALE_KEY,
    COLLATION_MAX_VARIABLE_KEY,
    COLLATION_NORMALIZATION_KEY,
    COLLATION_NUMERIC_ORDERING_KEY,
    COLLATION_STRENGTH_KEY,
)
from mongoupdate.utils.parsing import (
    _read_optional_bool,
    _read_optional_str,
    _warn_residual_keys,
)

logger = logging.getLogger(__name__)

COLLATION_KEYS = {
    COLLATION_LOCALE_KEY,
    COLLATION_CASE_LEVEL_KEY,
    COLLATION_CASE_FIRST_KEY,
    COLLATION_STRENGTH_KEY,
    COLLATION_NUMERIC_ORDERING_KEY,
    COLLATION_ALTERNATE_KEY,
    COLLATION_MAX_VARIABLE_KEY,
    COLLATION_NORMALIZATION_KEY,
    COLLATION_BACKWARDS_KEY,
}

_STRENGTH_LEVELS = {
    CollationStrength.PRIMARY: 1,
    CollationStrength.SECONDARY: 2,
    CollationStrength.TERTIARY: 3,
    CollationStrength.QUATERNARY: 4,
    CollationStrength.IDENTICAL: 5,
}
_ALTERNATE_SERVER_VALUES = {
    CollationAlternate.NON_IGNORABLE: "non-ignorable",
    CollationAlternate.SHIFTED: "shifted",
}


def _coerce_optional_enum(enum_class: Any, value: Any) -> Any:
    if value is None:
        return None
    return enum_class.coerce(value)


@dataclass
class CollationOptions:
    """
    Locale-aware string comparison rules to apply to an operation.

    Every setting is optional: settings left to None are not sent, and the
    server defaults apply to them.

    Attributes:
        locale: the ICU locale, e.g. "en_US", or "simple" for binary comparison.
        case_level: whether to include case comparison at strength level 1 or 2.
        case_first: a `CollationCaseFirst`, the sort order of case differences
            during tertiary-level comparisons.
        strength: a `CollationStrength`, the level of comparison to perform.
        numeric_ordering: whether to compare numeric strings as numbers.
        alternate: a `CollationAlternate`, whether whitespace and punctuation
            are considered as base characters.
        max_variable: a `CollationMaxVariable`, which characters are ignorable
            when `alternate` is SHIFTED.
        normalization: whether to check if the text requires normalization.
        backwards: whether strings with diacritics sort from the back.

    Example:
        >>> from mongoupdate.constants import CollationStrength
        >>> from mongoupdate.info import CollationOptions
        >>>
        >>> collation = CollationOptions(locale="fr").set_strength("secondary")
        >>> collation.as_dict()
        {'locale': 'fr', 'strength': 'SECONDARY'}
        >>> collation.as_collation_document()
        {'locale': 'fr', 'strength': 2}
        >>> collation == CollationOptions.coerce(collation.as_dict())
        True
    """

    locale: str | None
    case_level: bool | None
    case_first: CollationCaseFirst | None
    strength: CollationStrength | None
    numeric_ordering: bool | None
    alternate: CollationAlternate | None
    max_variable: CollationMaxVariable | None
    normalization: bool | None
    backwards: bool | None

    def __init__(
        self,
        *,
        locale: str | None = None,
        case_level: bool | None = None,
        case_first: str | CollationCaseFirst | None = None,
        strength: str | CollationStrength | None = None,
        numeric_ordering: bool | None = None,
        alternate: str | CollationAlternate | None = None,
        max_variable: str | CollationMaxVariable | None = None,
        normalization: bool | None = None,
        backwards: bool | None = None,
    ) -> None:
        self.locale = locale
        self.case_level = case_level
        self.case_first = _coerce_optional_enum(CollationCaseFirst, case_first)
        self.strength = _coerce_optional_enum(CollationStrength, strength)
        self.numeric_ordering = numeric_ordering
        self.alternate = _coerce_optional_enum(CollationAlternate, alternate)
        self.max_variable = _coerce_optional_enum(CollationMaxVariable, max_variable)
        self.normalization = normalization
        self.backwards = backwards

    def __hash__(self) -> int:
        return hash(
            (
                self.locale,
                self.case_level,
                self.case_first,
                self.strength,
                self.numeric_ordering,
                self.alternate,
                self.max_variable,
                self.normalization,
                self.backwards,
            )
        )

    def __repr__(self) -> str:
        not_null_pieces = [
            f"{attr}={value.__repr__()}"
            for attr, value in (
                ("locale", self.locale),
                ("case_level", self.case_level),
                ("case_first", self.case_first),
                ("strength", self.strength),
                ("numeric_ordering", self.numeric_ordering),
                ("alternate", self.alternate),
                ("max_variable", self.max_variable),
                ("normalization", self.normalization),
                ("backwards", self.backwards),
            )
            if value is not None
        ]
        return f"{self.__class__.__name__}({', '.join(not_null_pieces)})"

    def copy(self) -> CollationOptions:
        return CollationOptions(
            locale=self.locale,
            case_level=self.case_level,
            case_first=self.case_first,
            strength=self.strength,
            numeric_ordering=self.numeric_ordering,
            alternate=self.alternate,
            max_variable=self.max_variable,
            normalization=self.normalization,
            backwards=self.backwards,
        )

    def __copy__(self) -> CollationOptions:
        return self.copy()

    def set_locale(self, locale: str | None) -> Self:
        self.locale = locale
        return self

    def set_case_level(self, case_level: bool | None) -> Self:
        self.case_level = case_level
        return self

    def set_case_first(self, case_first: str | CollationCaseFirst | None) -> Self:
        self.case_first = _coerce_optional_enum(CollationCaseFirst, case_first)
        return self

    def set_strength(self, strength: str | CollationStrength | None) -> Self:
        self.strength = _coerce_optional_enum(CollationStrength, strength)
        return self

    def set_numeric_ordering(self, numeric_ordering: bool | None) -> Self:
        self.numeric_ordering = numeric_ordering
        return self

    def set_alternate(self, alternate: str | CollationAlternate | None) -> Self:
        self.alternate = _coerce_optional_enum(CollationAlternate, alternate)
        return self

    def set_max_variable(
        self, max_variable: str | CollationMaxVariable | None
    ) -> Self:
        self.max_variable = _coerce_optional_enum(CollationMaxVariable, max_variable)
        return self

    def set_normalization(self, normalization: bool | None) -> Self:
        self.normalization = normalization
        return self

    def set_backwards(self, backwards: bool | None) -> Self:
        self.backwards = backwards
        return self

    def as_dict(self) -> dict[str, Any]:
        """Recast this object into a dictionary."""

        return {
            k: v
            for k, v in {
                COLLATION_LOCALE_KEY: self.locale,
                COLLATION_CASE_LEVEL_KEY: self.case_level,
                COLLATION_CASE_FIRST_KEY: (
                    None if self.case_first is None else self.case_first.name
                ),
                COLLATION_STRENGTH_KEY: (
                    None if self.strength is None else self.strength.name
                ),
                COLLATION_NUMERIC_ORDERING_KEY: self.numeric_ordering,
                COLLATION_ALTERNATE_KEY: (
                    None if self.alternate is None else self.alternate.name
                ),
                COLLATION_MAX_VARIABLE_KEY: (
                    None if self.max_variable is None else self.max_variable.name
                ),
                COLLATION_NORMALIZATION_KEY: self.normalization,
                COLLATION_BACKWARDS_KEY: self.backwards,
            }.items()
            if v is not None
        }

    def as_collation_document(self) -> dict[str, Any]:
        """
        Recast this object into a collation document in the form
        the database server expects, i.e. with the strength expressed as
        an integer level and the other enumerated settings in lowercase.
        """

        collation_document = self.as_dict()
        if self.case_first is not None:
            collation_document[COLLATION_CASE_FIRST_KEY] = self.case_first.name.lower()
        if self.strength is not None:
            collation_document[COLLATION_STRENGTH_KEY] = _STRENGTH_LEVELS[
                self.strength
            ]
        if self.alternate is not None:
            collation_document[COLLATION_ALTERNATE_KEY] = _ALTERNATE_SERVER_VALUES[
                self.alternate
            ]
        if self.max_variable is not None:
            collation_document[COLLATION_MAX_VARIABLE_KEY] = (
                self.max_variable.name.lower()
            )
        return collation_document

    @classmethod
    def _from_dict(cls, raw_dict: dict[str, Any]) -> CollationOptions:
        """
        Create an instance of CollationOptions from a dictionary
        such as one obtained from `as_dict`.
        """

        _warn_residual_keys(cls, raw_dict, COLLATION_KEYS)
        collation = CollationOptions(
            locale=_read_optional_str(raw_dict, COLLATION_LOCALE_KEY),
            case_level=_read_optional_bool(raw_dict, COLLATION_CASE_LEVEL_KEY),
            case_first=raw_dict.get(COLLATION_CASE_FIRST_KEY),
            strength=raw_dict.get(COLLATION_STRENGTH_KEY),
            numeric_ordering=_read_optional_bool(
                raw_dict, COLLATION_NUMERIC_ORDERING_KEY
            ),
            alternate=raw_dict.get(COLLATION_ALTERNATE_KEY),
            max_variable=raw_dict.get(COLLATION_MAX_VARIABLE_KEY),
            normalization=_read_optional_bool(raw_dict, COLLATION_NORMALIZATION_KEY),
            backwards=_read_optional_bool(raw_dict, COLLATION_BACKWARDS_KEY),
        )
        logger.debug(f"parsed {collation}")
        return collation

    @classmethod
    def from_dict(cls, raw_dict: dict[str, Any]) -> CollationOptions:
        """
        Create an instance of CollationOptions from a dictionary
        such as one obtained from `as_dict`.

        Args:
            raw_dict: a dictionary with the (camelCase) collation keys.
                Enumerated settings are matched by name, ignoring case.

        Returns:
            a CollationOptions object.

        Raises:
            ValueError: if an enumerated setting does not name a valid value.
            TypeError: if a setting has a value of the wrong type.
        """

        return cls._from_dict(raw_dict)

    @classmethod
    def coerce(cls, raw_input: CollationOptions | dict[str, Any]) -> CollationOptions:
        """
        Normalize the input, whether an object already or a plain dictionary
        of the right structure, into a CollationOptions.
        """

        if isinstance(raw_input, CollationOptions):
            return raw_input
        else:
            return cls._from_dict(raw_input)
