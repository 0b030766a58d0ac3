"""
Interfaces the host CMS implements so its content can be translated.

The plugin never talks to the host ORM directly. Records and messages are
duck-typed against the protocols below; ``isinstance`` checks work because
they are runtime checkable.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LocalizableRecord(Protocol):
    """A record whose attributes are stored once per locale."""

    pk: Any

    def get_locale_context(self) -> str:
        """Return the locale attribute reads currently resolve against."""

    def set_locale_context(self, locale: str) -> None:
        """Switch the locale attribute reads resolve against."""

    def get_attribute(self, name: str, use_fallback: bool = True) -> Any:  # noqa: FBT001, FBT002
        """
        Read an attribute in the current locale context.

        With ``use_fallback`` disabled a missing translation reads as empty
        instead of the default locale's value.
        """

    def set_attribute_for_locale(self, name: str, value: Any, locale: str) -> None:
        """Stage ``value`` for ``name`` in an explicit locale."""

    def save(self) -> None:
        """Persist staged attribute values."""

    def translatable_fields(self) -> Mapping[str, Mapping[str, Any]]:
        """Return ``{field_name: field_config}`` for the declared fields."""


@runtime_checkable
class Message(Protocol):
    """A UI string with one text per locale."""

    id: Any

    def text_for_locale(self, locale: str) -> str | None:
        """Return the text for ``locale``, possibly resolved through fallback."""

    def raw_locale_data(self) -> Mapping[str, str]:
        """Return the stored ``{locale: text}`` data without any fallback."""

    def set_locale(self, locale: str, text: str) -> None:
        """Store and persist ``text`` for ``locale``."""


@runtime_checkable
class MessageStore(Protocol):
    """Access to the host's message storage."""

    def query(self, ids: Iterable[Any] | None = None) -> list[Message]:
        """Return the messages with the given ids, or all messages."""
