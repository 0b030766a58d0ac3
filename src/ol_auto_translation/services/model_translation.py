"""Translate localizable host records."""

import logging
from collections.abc import Iterable, Sequence

from ol_auto_translation.constants import LOG_PREVIEW_LENGTH
from ol_auto_translation.contracts import LocalizableRecord
from ol_auto_translation.exceptions import ValidationError
from ol_auto_translation.structures import TranslationReport

log = logging.getLogger(__name__)


class ModelTranslationService:
    """
    Translate record attributes one by one or in DeepL sized batches.

    Translations are written through ``set_attribute_for_locale`` with the
    host's own locale code; only the provider sees normalized codes.
    """

    def __init__(  # noqa: PLR0913
        self,
        provider,
        strategy,
        collector,
        field_filter,
        normalizer,
        registry=None,
        logger: logging.Logger | None = None,
    ):
        self.provider = provider
        self.strategy = strategy
        self.collector = collector
        self.field_filter = field_filter
        self.normalizer = normalizer
        self.registry = registry
        self.log = logger or log

    def translate_model(
        self,
        record,
        source_locale: str,
        target_locale: str,
        options: dict | None = None,
    ) -> dict[str, str]:
        """
        Translate the eligible attributes of a single record.

        Args:
            record: A ``LocalizableRecord``
            source_locale: Host locale to read from
            target_locale: Host locale to write to
            options: ``fields`` (restrict attributes), ``overwrite`` and
                ``formality``

        Returns:
            ``{attribute: translated_text}`` for the attributes written. A
            failing attribute is logged and left out.

        Raises:
            ValidationError: If the record has no localizable storage
        """
        self._validate_record(record)
        options = options or {}

        attributes = self._resolve_attributes(record, options.get("fields"))
        if not attributes:
            return {}

        collection = self.collector.collect_from_models(
            [record],
            attributes,
            source_locale,
            target_locale,
            overwrite=options.get("overwrite", False),
        )
        field_configs = record.translatable_fields()
        provider_source = self.normalizer.normalize(source_locale)
        provider_target = self.normalizer.normalize(target_locale)

        translations = {}
        for unit in collection.units:
            attribute = unit.origin_ref.attribute
            rich_content = self.field_filter.is_rich_content(
                field_configs.get(attribute)
            )
            try:
                translations[attribute] = self.provider.translate_text(
                    unit.source_text,
                    provider_source,
                    provider_target,
                    self._provider_options(options, rich_content),
                )
            except Exception:
                self.log.exception(
                    "Failed to translate %s to '%s': %s",
                    unit.origin_ref.describe(),
                    target_locale,
                    unit.source_text[:LOG_PREVIEW_LENGTH],
                )

        if translations:
            self._persist(record, translations, target_locale)
        return translations

    def translate_models(  # noqa: PLR0913
        self,
        model_name: str,
        source_locale: str,
        target_locale: str,
        ids: Iterable | None = None,
        options: dict | None = None,
    ) -> int:
        """
        Translate records one at a time, one provider call per attribute.

        Returns:
            The number of records processed without error
        """
        processed = 0
        for record in self.load_records(model_name, ids):
            try:
                self.translate_model(record, source_locale, target_locale, options)
            except ValidationError:
                raise
            except Exception:
                self.log.exception(
                    "Failed to translate %s record %s", model_name, record.pk
                )
                continue
            processed += 1
        return processed

    def translate_models_in_batch(  # noqa: PLR0913
        self,
        model_name: str,
        source_locale: str,
        target_locale: str,
        ids: Iterable | None = None,
        options: dict | None = None,
    ) -> TranslationReport:
        """
        Translate the records of a registered model with batched provider calls.

        A failing batch is logged and its units are counted as failed; the
        remaining batches still run. Each record is saved at most once.

        Returns:
            A report whose ``count`` is the number of records written

        Raises:
            ValidationError: If the model is unknown or its records are not
                localizable
        """
        options = options or {}
        report = TranslationReport(
            kind="models",
            source_locale=source_locale,
            target_locale=target_locale,
            model_name=model_name,
        )

        records = self.load_records(model_name, ids)
        if not records:
            self.log.info("No %s records to translate", model_name)
            return report

        self._validate_record(records[0])
        attributes = self._resolve_attributes(records[0], options.get("fields"))
        if not attributes:
            self.log.info("%s has no translatable attributes", model_name)
            return report

        collection = self.collector.collect_from_models(
            records,
            attributes,
            source_locale,
            target_locale,
            overwrite=options.get("overwrite", False),
        )
        report.stats.merge(collection.stats)
        if not collection.units:
            return report

        field_configs = records[0].translatable_fields()
        provider_source = self.normalizer.normalize(source_locale)
        provider_target = self.normalizer.normalize(target_locale)
        batches = [
            (rich_content, batch)
            for rich_content, units in self._split_by_content(
                collection.units, field_configs
            )
            for batch in self.strategy.create_batches(units)
        ]
        self.log.info(
            "Translating %d %s attributes to '%s' in %d batches",
            len(collection.units),
            model_name,
            target_locale,
            len(batches),
        )

        # id(record) -> (record, {attribute: translated_text})
        pending = {}
        for batch_number, (rich_content, batch) in enumerate(batches, start=1):
            report.batches += 1
            provider_options = self._provider_options(options, rich_content)
            try:
                results = self.strategy.process_batch(
                    [unit.source_text for unit in batch],
                    provider_source,
                    provider_target,
                    provider_options,
                )
                mapped = self.collector.map_results(results, batch)
            except Exception as error:
                self.log.exception(
                    "Batch %d/%d of %s failed, skipping %d attributes",
                    batch_number,
                    len(batches),
                    model_name,
                    len(batch),
                )
                report.stats.failed += len(batch)
                for unit in batch:
                    report.add_failure(unit.origin_ref.describe(), error)
                continue

            for result in mapped:
                record = result.origin_ref.record
                _, translations = pending.setdefault(id(record), (record, {}))
                translations[result.origin_ref.attribute] = result.translated_text

        for record, translations in pending.values():
            try:
                self._persist(record, translations, target_locale)
            except Exception as error:
                self.log.exception(
                    "Failed to save %s record %s", model_name, record.pk
                )
                report.stats.failed += len(translations)
                report.add_failure(f"{model_name}#{record.pk}", error)
                continue
            report.stats.translated += len(translations)
            report.count += 1

        self.log.info(
            "Translated %d %s records to '%s' (%s)",
            report.count,
            model_name,
            target_locale,
            report.stats.as_dict(),
        )
        return report

    def get_translatable_attributes(self, record) -> list[str]:
        return [
            name
            for name, field_config in record.translatable_fields().items()
            if self.field_filter.should_translate(name, field_config)
        ]

    def load_records(self, model_name: str, ids: Iterable | None = None) -> list:
        if self.registry is None:
            msg = "No model registry configured"
            raise ValidationError(msg)
        return list(self.registry.get(model_name).load(ids))

    def _resolve_attributes(self, record, fields: Sequence[str] | None) -> list[str]:
        attributes = self.get_translatable_attributes(record)
        if fields:
            attributes = [name for name in attributes if name in fields]
        return attributes

    def _split_by_content(self, units, field_configs: dict) -> list[tuple[bool, list]]:
        """
        Group units into plain text and rich content, keeping their order.

        Only rich content units are sent with HTML tag handling.
        """
        plain_units, rich_units = [], []
        for unit in units:
            field_config = field_configs.get(unit.origin_ref.attribute)
            if self.field_filter.is_rich_content(field_config):
                rich_units.append(unit)
            else:
                plain_units.append(unit)
        return [
            (rich_content, group)
            for rich_content, group in ((False, plain_units), (True, rich_units))
            if group
        ]

    @staticmethod
    def _provider_options(options: dict, rich_content: bool) -> dict:  # noqa: FBT001
        provider_options = {"rich_content": rich_content}
        if options.get("formality"):
            provider_options["formality"] = options["formality"]
        return provider_options

    def _persist(self, record, translations: dict[str, str], target_locale: str):
        original_context = record.get_locale_context()
        try:
            for attribute, translated_text in translations.items():
                record.set_attribute_for_locale(
                    attribute, translated_text, target_locale
                )
            record.save()
        finally:
            record.set_locale_context(original_context)

    @staticmethod
    def _validate_record(record):
        if not isinstance(record, LocalizableRecord):
            msg = (
                f"{type(record).__name__} does not provide localizable storage "
                "and cannot be translated"
            )
            raise ValidationError(msg)
