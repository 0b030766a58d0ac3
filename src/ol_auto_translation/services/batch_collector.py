"""Collect translatable texts and map batch results back to their origins."""

import logging
from collections.abc import Iterable, Sequence

from ol_auto_translation.exceptions import ResultMismatchError
from ol_auto_translation.providers.base import is_blank
from ol_auto_translation.structures import (
    AttributeRef,
    Collection,
    MappedResult,
    TranslationUnit,
)

log = logging.getLogger(__name__)


class TranslationBatchCollector:
    """
    Gather source texts from records or messages into an ordered unit list.

    Values that are blank in the source locale, or already translated in the
    target locale (unless overwriting), are counted and skipped.
    """

    def __init__(self, default_locale: str, logger: logging.Logger | None = None):
        self.default_locale = default_locale
        self.log = logger or log

    def collect_from_models(  # noqa: PLR0913
        self,
        records: Iterable,
        attributes: Sequence[str],
        source_locale: str,
        target_locale: str,
        overwrite: bool = False,  # noqa: FBT001, FBT002
    ) -> Collection:
        collection = Collection()

        for record in records:
            original_context = record.get_locale_context()
            record.set_locale_context(source_locale)
            try:
                for attribute in attributes:
                    source_value = record.get_attribute(attribute)

                    if is_blank(source_value):
                        self.log.debug(
                            "Record %s attribute '%s' empty in locale '%s'",
                            record.pk,
                            attribute,
                            source_locale,
                        )
                        collection.stats.skipped_empty += 1
                        continue

                    if not overwrite and self.record_has_translation(
                        record, attribute, target_locale
                    ):
                        self.log.debug(
                            "Record %s attribute '%s' already translated, skipping",
                            record.pk,
                            attribute,
                        )
                        collection.stats.skipped_existing += 1
                        continue

                    collection.units.append(
                        TranslationUnit(
                            source_text=source_value,
                            origin_index=len(collection.units),
                            origin_ref=AttributeRef(record, attribute),
                        )
                    )
            finally:
                record.set_locale_context(original_context)

        return collection

    def collect_from_messages(
        self,
        messages: Iterable,
        source_locale: str,
        target_locale: str,
        overwrite: bool = False,  # noqa: FBT001, FBT002
    ) -> Collection:
        collection = Collection()

        for message in messages:
            source_text = self.get_message_source_text(message, source_locale)

            if is_blank(source_text):
                self.log.debug("Message ID %s - SKIPPED: empty source", message.id)
                collection.stats.skipped_empty += 1
                continue

            if not overwrite and self.message_has_translation(message, target_locale):
                self.log.debug(
                    "Message ID %s - SKIPPED: already translated", message.id
                )
                collection.stats.skipped_existing += 1
                continue

            collection.units.append(
                TranslationUnit(
                    source_text=source_text,
                    origin_index=len(collection.units),
                    origin_ref=message,
                )
            )

        return collection

    def map_results(
        self, results: Sequence[str], units: Sequence[TranslationUnit]
    ) -> list[MappedResult]:
        """
        Pair each result with the unit at the same position.

        Raises:
            ResultMismatchError: If the counts differ. Nothing is mapped, since
                a shifted list would write translations to the wrong origins.
        """
        if len(results) != len(units):
            self.log.error(
                "Got %d translation results for %d units, discarding batch",
                len(results),
                len(units),
            )
            raise ResultMismatchError(len(units), len(results))

        return [
            MappedResult(origin_ref=unit.origin_ref, translated_text=result)
            for unit, result in zip(units, results, strict=True)
        ]

    def get_message_source_text(self, message, source_locale: str) -> str | None:
        """
        Return the message text in the source locale.

        If that is blank, the first non-blank value stored for any locale is
        used instead.
        """
        source_text = message.text_for_locale(source_locale)
        if not is_blank(source_text):
            return source_text

        for locale, text in (message.raw_locale_data() or {}).items():
            if not is_blank(text):
                self.log.debug(
                    "Message ID %s: No text in '%s', using locale '%s' instead",
                    message.id,
                    source_locale,
                    locale,
                )
                return text
        return None

    @staticmethod
    def message_has_translation(message, target_locale: str) -> bool:
        # Raw data only, text_for_locale would resolve through the fallback
        locale_data = message.raw_locale_data() or {}
        return not is_blank(locale_data.get(target_locale))

    def record_has_translation(self, record, attribute: str, target_locale: str) -> bool:
        # The default locale holds the source content, so it always "exists"
        if target_locale == self.default_locale:
            return not is_blank(record.get_attribute(attribute))

        original_context = record.get_locale_context()
        record.set_locale_context(target_locale)
        try:
            translated_value = record.get_attribute(attribute, use_fallback=False)
        finally:
            record.set_locale_context(original_context)
        return not is_blank(translated_value)
