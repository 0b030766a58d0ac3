"""Translate host UI messages."""

import logging
from collections.abc import Iterable

from ol_auto_translation.constants import LOG_PREVIEW_LENGTH
from ol_auto_translation.exceptions import UnsupportedLanguageError
from ol_auto_translation.providers.base import is_blank
from ol_auto_translation.structures import TranslationReport

log = logging.getLogger(__name__)


class MessageTranslationService:
    """Translate messages from a ``MessageStore`` into a target locale."""

    def __init__(  # noqa: PLR0913
        self,
        provider,
        strategy,
        collector,
        normalizer,
        message_store,
        logger: logging.Logger | None = None,
    ):
        self.provider = provider
        self.strategy = strategy
        self.collector = collector
        self.normalizer = normalizer
        self.message_store = message_store
        self.log = logger or log

    def translate_messages(
        self,
        source_locale: str,
        target_locale: str,
        ids: Iterable | None = None,
        overwrite: bool = False,  # noqa: FBT001, FBT002
    ) -> int:
        """
        Translate messages one provider call at a time.

        Returns:
            The number of messages written

        Raises:
            UnsupportedLanguageError: If DeepL does not offer the target locale
        """
        provider_target = self.validate_target_language(target_locale)
        provider_source = self.normalizer.normalize(source_locale)

        translated = 0
        for message in self.message_store.query(ids):
            source_text = self.collector.get_message_source_text(message, source_locale)
            if is_blank(source_text):
                continue
            if not overwrite and self.collector.message_has_translation(
                message, target_locale
            ):
                continue

            try:
                translated_text = self.provider.translate_text(
                    source_text, provider_source, provider_target
                )
                message.set_locale(target_locale, translated_text)
            except Exception:
                self.log.exception(
                    "Failed to translate message %s: %s",
                    message.id,
                    source_text[:LOG_PREVIEW_LENGTH],
                )
                continue
            translated += 1

        self.log.info("Translated %d messages to '%s'", translated, target_locale)
        return translated

    def translate_messages_in_batch(
        self,
        source_locale: str,
        target_locale: str,
        ids: Iterable | None = None,
        overwrite: bool = False,  # noqa: FBT001, FBT002
    ) -> TranslationReport:
        """
        Translate messages with batched provider calls.

        Batches that fail after retrying are logged and counted as failed,
        the other batches are still written.

        Raises:
            UnsupportedLanguageError: If DeepL does not offer the target locale
        """
        provider_target = self.validate_target_language(target_locale)
        provider_source = self.normalizer.normalize(source_locale)
        report = TranslationReport(
            kind="messages",
            source_locale=source_locale,
            target_locale=target_locale,
        )

        collection = self.collector.collect_from_messages(
            self.message_store.query(ids), source_locale, target_locale, overwrite
        )
        report.stats.merge(collection.stats)
        if not collection.units:
            self.log.info("No messages need translation to '%s'", target_locale)
            return report

        batches = self.strategy.create_batches(collection.units)
        self.log.info(
            "Translating %d messages to '%s' in %d batches",
            len(collection.units),
            target_locale,
            len(batches),
        )

        for batch_number, batch in enumerate(batches, start=1):
            report.batches += 1
            try:
                results = self.strategy.process_batch(
                    [unit.source_text for unit in batch],
                    provider_source,
                    provider_target,
                )
                mapped = self.collector.map_results(results, batch)
            except Exception as error:
                self.log.exception(
                    "Message batch %d/%d failed, skipping %d messages",
                    batch_number,
                    len(batches),
                    len(batch),
                )
                report.stats.failed += len(batch)
                for unit in batch:
                    report.add_failure(f"message#{unit.origin_ref.id}", error)
                continue

            for result in mapped:
                message = result.origin_ref
                try:
                    message.set_locale(target_locale, result.translated_text)
                except Exception as error:
                    self.log.exception("Failed to save message %s", message.id)
                    report.stats.failed += 1
                    report.add_failure(f"message#{message.id}", error)
                    continue
                report.stats.translated += 1
                report.count += 1

        self.log.info(
            "Translated %d messages to '%s' (%s)",
            report.count,
            target_locale,
            report.stats.as_dict(),
        )
        return report

    def validate_target_language(self, target_locale: str) -> str:
        """
        Check the target locale against the provider's target catalog.

        Returns:
            The normalized provider code for ``target_locale``

        Raises:
            UnsupportedLanguageError: If the code is not in the catalog
        """
        provider_target = self.normalizer.normalize(target_locale)
        available_languages = self.provider.get_target_languages()
        if provider_target not in available_languages:
            raise UnsupportedLanguageError(provider_target, available_languages.keys())
        return provider_target

    def get_translation_stats(self, source_locale: str, target_locale: str) -> dict:
        """
        Count messages already translated to, and still missing in, a locale.

        A message is missing when it has source text but no stored target text.
        """
        stats = {
            "messages_total": 0,
            "messages_translated": 0,
            "messages_missing": 0,
        }
        for message in self.message_store.query():
            stats["messages_total"] += 1
            if self.collector.message_has_translation(message, target_locale):
                stats["messages_translated"] += 1
            elif not is_blank(message.text_for_locale(source_locale)):
                stats["messages_missing"] += 1
        return stats
