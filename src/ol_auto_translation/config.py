"""Configuration snapshot for the translation pipeline."""

import re
from dataclasses import dataclass, field

from django.conf import settings

from ol_auto_translation.constants import (
    DEEPL_DEFAULT_MAX_RETRIES,
    DEEPL_DEFAULT_REQUEST_TIMEOUT,
    DEEPL_LOCALE_MAPPINGS,
    DEEPL_MAX_BATCH_SIZE,
    DEEPL_SERVER_TYPE_FREE,
    DEFAULT_EXCLUDED_PATTERNS,
    DEFAULT_EXCLUDED_TYPES,
    DEFAULT_LOCALE,
    DEFAULT_TRANSLATABLE_TYPES,
)


def parse_field_list(value) -> list[str]:
    """
    Parse a list of field names.

    Accepts either a sequence of names or a single string separated by commas
    and/or newlines, as entered in a settings text area.

    Examples:
        >>> parse_field_list("title, body\\nsummary")
        ['title', 'body', 'summary']
    """
    if not value:
        return []
    if isinstance(value, str):
        value = re.split(r"[\r\n,]+", value)
    return [name.strip() for name in value if name and name.strip()]


@dataclass(frozen=True)
class TranslationConfig:
    """Read-only configuration passed to every pipeline component."""

    api_key: str = ""
    server_type: str = DEEPL_SERVER_TYPE_FREE
    request_timeout: float = DEEPL_DEFAULT_REQUEST_TIMEOUT
    default_locale: str = DEFAULT_LOCALE
    source_locale: str = ""
    max_batch_size: int = DEEPL_MAX_BATCH_SIZE
    max_retries: int = DEEPL_DEFAULT_MAX_RETRIES
    preserve_html: bool = True
    locale_mappings: dict[str, str] = field(
        default_factory=lambda: dict(DEEPL_LOCALE_MAPPINGS)
    )
    excluded_types: tuple[str, ...] = tuple(DEFAULT_EXCLUDED_TYPES)
    translatable_types: tuple[str, ...] = tuple(DEFAULT_TRANSLATABLE_TYPES)
    excluded_patterns: tuple[str, ...] = tuple(DEFAULT_EXCLUDED_PATTERNS)
    custom_exclusions: tuple[str, ...] = ()

    @property
    def effective_source_locale(self) -> str:
        """Source locale configured for the plugin, or the site default locale."""
        return self.source_locale or self.default_locale

    @classmethod
    def from_settings(cls, django_settings=None) -> "TranslationConfig":
        """
        Build the configuration from Django settings.

        Missing settings fall back to the plugin defaults so the pipeline works
        even when `plugin_settings` has not been applied.
        """
        django_settings = django_settings or settings
        mappings = dict(DEEPL_LOCALE_MAPPINGS)
        mappings.update(
            {
                code.lower(): provider_code
                for code, provider_code in getattr(
                    django_settings, "AUTO_TRANSLATION_LOCALE_MAPPINGS", {}
                ).items()
            }
        )
        default_locale = getattr(
            django_settings, "AUTO_TRANSLATION_DEFAULT_LOCALE", ""
        ) or getattr(django_settings, "LANGUAGE_CODE", DEFAULT_LOCALE)

        return cls(
            api_key=getattr(django_settings, "DEEPL_API_KEY", ""),
            server_type=getattr(
                django_settings, "DEEPL_SERVER_TYPE", DEEPL_SERVER_TYPE_FREE
            ),
            request_timeout=getattr(
                django_settings, "DEEPL_REQUEST_TIMEOUT", DEEPL_DEFAULT_REQUEST_TIMEOUT
            ),
            default_locale=default_locale,
            source_locale=getattr(django_settings, "AUTO_TRANSLATION_SOURCE_LOCALE", ""),
            max_batch_size=getattr(
                django_settings, "AUTO_TRANSLATION_MAX_BATCH_SIZE", DEEPL_MAX_BATCH_SIZE
            ),
            max_retries=getattr(
                django_settings,
                "AUTO_TRANSLATION_MAX_RETRIES",
                DEEPL_DEFAULT_MAX_RETRIES,
            ),
            preserve_html=getattr(django_settings, "AUTO_TRANSLATION_PRESERVE_HTML", True),
            locale_mappings=mappings,
            excluded_types=tuple(
                getattr(
                    django_settings,
                    "AUTO_TRANSLATION_EXCLUDED_TYPES",
                    DEFAULT_EXCLUDED_TYPES,
                )
            ),
            translatable_types=tuple(
                getattr(
                    django_settings,
                    "AUTO_TRANSLATION_TRANSLATABLE_TYPES",
                    DEFAULT_TRANSLATABLE_TYPES,
                )
            ),
            excluded_patterns=tuple(
                getattr(
                    django_settings,
                    "AUTO_TRANSLATION_EXCLUDED_PATTERNS",
                    DEFAULT_EXCLUDED_PATTERNS,
                )
            ),
            custom_exclusions=tuple(
                parse_field_list(
                    getattr(django_settings, "AUTO_TRANSLATION_EXCLUDED_FIELDS", "")
                )
            ),
        )
