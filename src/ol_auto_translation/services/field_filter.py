"""Decide which record fields are eligible for translation."""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from ol_auto_translation.config import parse_field_list
from ol_auto_translation.constants import (
    DEFAULT_EXCLUDED_FIELDS,
    DEFAULT_FIELD_TYPE,
    RICH_CONTENT_TYPES,
)


class FieldFilter:
    """
    Field eligibility rules.

    ``should_translate`` applies the rules in order and the first one that
    matches decides:

    1. an explicit boolean ``translatable`` flag in the field config
    2. a name matching one of the exclusion patterns -> not translated
    3. a name in the custom exclusion list -> not translated
    4. a type in the excluded types -> not translated
    5. a type in the translatable types -> translated, anything else is not
    """

    def __init__(  # noqa: PLR0913
        self,
        excluded_types: Iterable[str] = (),
        translatable_types: Iterable[str] = (),
        excluded_patterns: Iterable[str] = (),
        custom_exclusions: Iterable[str] | str = (),
        *,
        include_default_exclusions: bool = True,
    ):
        self.excluded_types = list(excluded_types)
        self.translatable_types = list(translatable_types)
        self.excluded_patterns = list(excluded_patterns)
        self._compiled_patterns = [re.compile(p) for p in self.excluded_patterns]
        self.custom_exclusions = parse_field_list(custom_exclusions)
        if include_default_exclusions:
            self.custom_exclusions.extend(
                name
                for name in DEFAULT_EXCLUDED_FIELDS
                if name not in self.custom_exclusions
            )

    @classmethod
    def from_config(cls, config) -> "FieldFilter":
        return cls(
            excluded_types=config.excluded_types,
            translatable_types=config.translatable_types,
            excluded_patterns=config.excluded_patterns,
            custom_exclusions=config.custom_exclusions,
        )

    def should_translate(
        self, field_name: str, field_config: Mapping[str, Any] | None = None
    ) -> bool:
        field_config = field_config or {}
        if isinstance(field_config.get("translatable"), bool):
            return field_config["translatable"]

        if self.matches_excluded_pattern(field_name):
            return False

        if field_name in self.get_custom_exclusions():
            return False

        field_type = self.get_field_type(field_config)
        if field_type in self.excluded_types:
            return False
        return field_type in self.translatable_types

    def is_rich_content(self, field_config: Mapping[str, Any] | None = None) -> bool:
        """Return True for rich/markdown editor fields, which carry HTML."""
        return self.get_field_type(field_config or {}) in RICH_CONTENT_TYPES

    def matches_excluded_pattern(self, field_name: str) -> bool:
        return any(pattern.search(field_name) for pattern in self._compiled_patterns)

    def get_custom_exclusions(self) -> list[str]:
        return self.custom_exclusions

    @staticmethod
    def get_field_type(field_config: Mapping[str, Any]) -> str:
        return field_config.get("type") or DEFAULT_FIELD_TYPE

    def add_exclusion_pattern(self, pattern: str) -> None:
        if pattern not in self.excluded_patterns:
            self.excluded_patterns.append(pattern)
            self._compiled_patterns.append(re.compile(pattern))

    def add_translatable_type(self, field_type: str) -> None:
        if field_type not in self.translatable_types:
            self.translatable_types.append(field_type)
