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
from typing import Any, Sequence

from typing_extensions import Self

from mongoupdate.constants import WriteOption
from mongoupdate.options.collation_options import CollationOptions
from mongoupdate.settings.defaults import (
    DEFAULT_MULTI,
    DEFAULT_RETURN_NEW_DOCUMENT,
    DEFAULT_UPSERT,
    UPDATE_OPTIONS_ARRAY_FILTERS_KEY,
    UPDATE_OPTIONS_COLLATION_KEY,
    UPDATE_OPTIONS_MULTI_KEY,
    UPDATE_OPTIONS_RETURN_NEW_DOCUMENT_KEY,
    UPDATE_OPTIONS_UPSERT_KEY,
    UPDATE_OPTIONS_WRITE_OPTION_KEY,
)
from mongoupdate.utils.parsing import (
    _freeze,
    _read_bool,
    _read_optional_dict,
    _read_optional_list,
    _warn_residual_keys,
)

logger = logging.getLogger(__name__)

UPDATE_OPTIONS_KEYS = {
    UPDATE_OPTIONS_WRITE_OPTION_KEY,
    UPDATE_OPTIONS_UPSERT_KEY,
    UPDATE_OPTIONS_MULTI_KEY,
    UPDATE_OPTIONS_RETURN_NEW_DOCUMENT_KEY,
    UPDATE_OPTIONS_ARRAY_FILTERS_KEY,
    UPDATE_OPTIONS_COLLATION_KEY,
}


def _normalize_array_filters(
    array_filters: Sequence[dict[str, Any]] | None,
) -> list[dict[str, Any]] | None:
    # an empty sequence is not serialized, hence is the same as no filters
    if not array_filters:
        return None
    return list(array_filters)


@dataclass
class UpdateOptions:
    """
    The settings of a single update operation.

    Instances can be created with positional `upsert` (and `multi`) flags,
    with keyword arguments, through the fluent setters, or by coercing
    a plain dictionary in the structured form (see `as_dict`).
    No consistency check across settings is made.

    Settings are to be changed through the `set_*` methods, which normalize
    their input (e.g. empty array filters become None): assigning the
    attributes directly bypasses this normalization.

    Attributes:
        upsert: whether to insert a new document if no document matches.
            Defaults to False.
        multi: whether the update can affect more than one matching document.
            Defaults to False.
        write_option: an optional `WriteOption`, the acknowledgement mode
            requested for the write.
        return_new_document: whether the updated (rather than the original)
            document is returned. Meaningful only for find-and-update
            operations, ignored otherwise (e.g. alongside `multi=True`).
            Defaults to False.
        array_filters: an optional list of filter expressions determining
            which elements of an array field the update modifies.
        collation: an optional `CollationOptions` for string comparisons.

    Example:
        >>> from mongoupdate.constants import WriteOption
        >>> from mongoupdate.info import CollationOptions, UpdateOptions
        >>>
        >>> # Configure an update with the fluent interface:
        >>> update_options = (
        ...     UpdateOptions(True)
        ...     .set_write_option("majority")
        ...     .set_array_filters([{"elem.grade": {"$gte": 85}}])
        ...     .set_collation(CollationOptions(locale="en"))
        ... )
        >>> update_options.as_dict()["writeOption"]
        'MAJORITY'
        >>>
        >>> # Same settings, passed to the constructor:
        >>> update_options_1 = UpdateOptions(
        ...     upsert=True,
        ...     write_option=WriteOption.MAJORITY,
        ...     array_filters=[{"elem.grade": {"$gte": 85}}],
        ...     collation=CollationOptions(locale="en"),
        ... )
        >>>
        >>> # Same settings, coerced from a dictionary:
        >>> update_options_2 = UpdateOptions.coerce(update_options.as_dict())
        >>>
        >>> update_options == update_options_1 == update_options_2
        True
        >>> # only non-default settings are written out:
        >>> UpdateOptions().as_dict()
        {}
    """

    upsert: bool
    multi: bool
    write_option: WriteOption | None
    return_new_document: bool
    array_filters: list[dict[str, Any]] | None
    collation: CollationOptions | None

    def __init__(
        self,
        upsert: bool = DEFAULT_UPSERT,
        multi: bool = DEFAULT_MULTI,
        *,
        write_option: str | WriteOption | None = None,
        return_new_document: bool = DEFAULT_RETURN_NEW_DOCUMENT,
        array_filters: Sequence[dict[str, Any]] | None = None,
        collation: CollationOptions | dict[str, Any] | None = None,
    ) -> None:
        self.upsert = upsert
        self.multi = multi
        self.write_option = (
            None if write_option is None else WriteOption.coerce(write_option)
        )
        self.return_new_document = return_new_document
        self.array_filters = _normalize_array_filters(array_filters)
        self.collation = (
            None if collation is None else CollationOptions.coerce(collation)
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.write_option,
                self.upsert,
                self.multi,
                self.return_new_document,
                _freeze(self.array_filters),
                self.collation,
            )
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"write_option={self.write_option.__repr__()}, "
            f"upsert={self.upsert}, "
            f"multi={self.multi}, "
            f"return_new_document={self.return_new_document}, "
            f"array_filters={self.array_filters.__repr__()}, "
            f"collation={self.collation.__repr__()})"
        )

    def copy(self) -> UpdateOptions:
        """
        Create a copy of these update options. Changing settings on the copy
        leaves this object untouched (and vice versa).

        Returns:
            a new UpdateOptions with the same settings as this one.
        """

        the_copy = UpdateOptions(
            self.upsert,
            self.multi,
            return_new_document=self.return_new_document,
            array_filters=self.array_filters,
            collation=None if self.collation is None else self.collation.copy(),
        )
        the_copy.write_option = self.write_option
        return the_copy

    def __copy__(self) -> UpdateOptions:
        return self.copy()

    def set_write_option(self, write_option: str | WriteOption | None) -> Self:
        """
        Set the write acknowledgement mode.

        Args:
            write_option: a `WriteOption`, or its name (in any case), or None
                to remove the setting.

        Returns:
            this same UpdateOptions, for fluency.
        """

        self.write_option = (
            None if write_option is None else WriteOption.coerce(write_option)
        )
        return self

    def set_upsert(self, upsert: bool) -> Self:
        self.upsert = upsert
        return self

    def set_multi(self, multi: bool) -> Self:
        """
        Set whether more than one document can be updated.

        Returns:
            this same UpdateOptions, for fluency.
        """

        self.multi = multi
        return self

    def set_return_new_document(self, return_new_document: bool) -> Self:
        """
        Set whether to return the updated document.
        This is valid only on find-and-update operations.

        Returns:
            this same UpdateOptions, for fluency.
        """

        self.return_new_document = return_new_document
        return self

    def set_array_filters(
        self, array_filters: Sequence[dict[str, Any]] | None
    ) -> Self:
        self.array_filters = _normalize_array_filters(array_filters)
        return self

    def set_collation(
        self, collation: CollationOptions | dict[str, Any] | None
    ) -> Self:
        self.collation = (
            None if collation is None else CollationOptions.coerce(collation)
        )
        return self

    def as_dict(self) -> dict[str, Any]:
        """
        Recast this object into a dictionary.
        Settings at their default (False, None, no array filters) are omitted.
        """

        return {
            k: v
            for k, v in {
                UPDATE_OPTIONS_WRITE_OPTION_KEY: (
                    None if self.write_option is None else self.write_option.name
                ),
                UPDATE_OPTIONS_UPSERT_KEY: True if self.upsert else None,
                UPDATE_OPTIONS_MULTI_KEY: True if self.multi else None,
                UPDATE_OPTIONS_RETURN_NEW_DOCUMENT_KEY: (
                    True if self.return_new_document else None
                ),
                UPDATE_OPTIONS_ARRAY_FILTERS_KEY: (
                    list(self.array_filters) if self.array_filters else None
                ),
                UPDATE_OPTIONS_COLLATION_KEY: (
                    None if self.collation is None else self.collation.as_dict()
                ),
            }.items()
            if v is not None
        }

    @classmethod
    def _from_dict(cls, raw_dict: dict[str, Any]) -> UpdateOptions:
        """
        Create an instance of UpdateOptions from a dictionary
        such as one obtained from `as_dict`.
        """

        _warn_residual_keys(cls, raw_dict, UPDATE_OPTIONS_KEYS)
        raw_collation = _read_optional_dict(raw_dict, UPDATE_OPTIONS_COLLATION_KEY)
        update_options = UpdateOptions(
            _read_bool(raw_dict, UPDATE_OPTIONS_UPSERT_KEY, DEFAULT_UPSERT),
            _read_bool(raw_dict, UPDATE_OPTIONS_MULTI_KEY, DEFAULT_MULTI),
            write_option=raw_dict.get(UPDATE_OPTIONS_WRITE_OPTION_KEY),
            return_new_document=_read_bool(
                raw_dict,
                UPDATE_OPTIONS_RETURN_NEW_DOCUMENT_KEY,
                DEFAULT_RETURN_NEW_DOCUMENT,
            ),
            array_filters=_read_optional_list(
                raw_dict, UPDATE_OPTIONS_ARRAY_FILTERS_KEY
            ),
            collation=(
                None
                if raw_collation is None
                else CollationOptions._from_dict(raw_collation)
            ),
        )
        logger.debug(f"parsed {update_options}")
        return update_options

    @classmethod
    def from_dict(cls, raw_dict: dict[str, Any]) -> UpdateOptions:
        """
        Create an instance of UpdateOptions from a dictionary
        such as one obtained from `as_dict`.

        Args:
            raw_dict: a dictionary with any of the keys "writeOption", "upsert",
                "multi", "return_new_document", "arrayFilters" and "collation".
                Missing (or null) flags are taken to be False.

        Returns:
            an UpdateOptions object.

        Raises:
            ValueError: if "writeOption" does not name a `WriteOption`
                (the match ignores case).
            TypeError: if a setting has a value of the wrong type.
        """

        return cls._from_dict(raw_dict)

    @classmethod
    def coerce(cls, raw_input: UpdateOptions | dict[str, Any]) -> UpdateOptions:
        """
        Normalize the input, whether an object already or a plain dictionary
        of the right structure, into an UpdateOptions.
        """

        if isinstance(raw_input, UpdateOptions):
            return raw_input
        else:
            return cls._from_dict(raw_input)
