"""Base classes for translation providers."""

import logging
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)


def is_blank(text: Any) -> bool:
    """Return True for None, empty and whitespace-only values."""
    return not text or (isinstance(text, str) and not text.strip())


class TranslationProvider(ABC):
    """Abstract base class for translation providers."""

    @abstractmethod
    def translate_text(
        self,
        text: str,
        source_language: str | None,
        target_language: str,
        options: dict | None = None,
    ) -> str:
        """Translate a single text."""

    @abstractmethod
    def translate_batch(
        self,
        texts: list[str],
        source_language: str | None,
        target_language: str,
        options: dict | None = None,
    ) -> list[str]:
        """Translate several texts in one call, preserving order and length."""

    @abstractmethod
    def get_source_languages(self) -> dict[str, str]:
        """Return the supported source languages as ``{code: name}``."""

    @abstractmethod
    def get_target_languages(self) -> dict[str, str]:
        """Return the supported target languages as ``{code: name}``."""

    @abstractmethod
    def get_usage(self):
        """Return provider usage information, or None if unavailable."""

    @abstractmethod
    def test_connection(self) -> bool:
        """Return True if the provider can be reached with the configured key."""
