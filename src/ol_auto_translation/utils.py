"""Factories wiring the translation pipeline from Django settings."""

import logging

from django.conf import settings
from django.utils.module_loading import import_string

from ol_auto_translation.config import TranslationConfig
from ol_auto_translation.constants import (
    JOB_TYPE_MODELS,
    RUN_STATUS_NOTHING,
    RUN_STATUS_PARTIAL,
    RUN_STATUS_SUCCESS,
)
from ol_auto_translation.exceptions import ConfigurationError, ValidationError
from ol_auto_translation.models import TranslationRunLog
from ol_auto_translation.providers.deepl_provider import DeepLProvider
from ol_auto_translation.services.batch_collector import TranslationBatchCollector
from ol_auto_translation.services.field_filter import FieldFilter
from ol_auto_translation.services.locale_normalizer import LocaleNormalizer
from ol_auto_translation.services.message_translation import (
    MessageTranslationService,
)
from ol_auto_translation.services.model_discovery import (
    ModelDiscoveryService,
    ModelRegistry,
)
from ol_auto_translation.services.model_translation import ModelTranslationService
from ol_auto_translation.strategies.deepl_strategy import DeepLBatchStrategy

logger = logging.getLogger(__name__)


def get_translation_config() -> TranslationConfig:
    return TranslationConfig.from_settings(settings)


def get_translation_provider(config: TranslationConfig | None = None) -> DeepLProvider:
    """
    Get the DeepL provider for the configured account.

    Raises:
        ConfigurationError: If DEEPL_API_KEY is missing
    """
    return DeepLProvider(config or get_translation_config())


def get_message_store():
    """
    Load the host message store named by ``AUTO_TRANSLATION_MESSAGE_STORE``.

    The setting is a dotted path to either a store object or a callable
    returning one.

    Raises:
        ConfigurationError: If the setting is empty or cannot be imported
    """
    store_path = getattr(settings, "AUTO_TRANSLATION_MESSAGE_STORE", "")
    if not store_path:
        msg = "AUTO_TRANSLATION_MESSAGE_STORE is not configured"
        raise ConfigurationError(msg)

    try:
        store = import_string(store_path)
    except ImportError as exc:
        msg = f"Could not import message store '{store_path}'"
        raise ConfigurationError(msg) from exc

    if callable(store) and not hasattr(store, "query"):
        store = store()
    return store


def get_model_registry() -> ModelRegistry:
    return ModelRegistry.from_settings(settings)


def get_model_translation_service(
    config: TranslationConfig | None = None, provider=None
) -> ModelTranslationService:
    config = config or get_translation_config()
    provider = provider or get_translation_provider(config)
    return ModelTranslationService(
        provider=provider,
        strategy=DeepLBatchStrategy(
            provider,
            max_batch_size=config.max_batch_size,
            max_retries=config.max_retries,
        ),
        collector=TranslationBatchCollector(config.default_locale),
        field_filter=FieldFilter.from_config(config),
        normalizer=LocaleNormalizer(config.locale_mappings),
        registry=get_model_registry(),
    )


def get_message_translation_service(
    config: TranslationConfig | None = None, provider=None
) -> MessageTranslationService:
    config = config or get_translation_config()
    provider = provider or get_translation_provider(config)
    return MessageTranslationService(
        provider=provider,
        strategy=DeepLBatchStrategy(
            provider,
            max_batch_size=config.max_batch_size,
            max_retries=config.max_retries,
        ),
        collector=TranslationBatchCollector(config.default_locale),
        normalizer=LocaleNormalizer(config.locale_mappings),
        message_store=get_message_store(),
    )


def get_message_stats_service(
    config: TranslationConfig | None = None,
) -> MessageTranslationService:
    """
    Get a message service for coverage stats only.

    No provider is built, so stats stay available without a DeepL key.
    """
    config = config or get_translation_config()
    return MessageTranslationService(
        provider=None,
        strategy=None,
        collector=TranslationBatchCollector(config.default_locale),
        normalizer=LocaleNormalizer(config.locale_mappings),
        message_store=get_message_store(),
    )


def get_model_discovery_service(
    config: TranslationConfig | None = None,
) -> ModelDiscoveryService:
    config = config or get_translation_config()
    return ModelDiscoveryService(get_model_registry(), FieldFilter.from_config(config))


def get_run_status(report) -> str:
    if report.count == 0:
        return RUN_STATUS_NOTHING
    if report.stats.failed:
        return RUN_STATUS_PARTIAL
    return RUN_STATUS_SUCCESS


def record_translation_run(report, job_type: str):
    """
    Store a ``TranslationRunLog`` entry for a finished report.

    Returns:
        The created log entry
    """
    stats = report.stats
    run_log = TranslationRunLog.objects.create(
        job_type=job_type,
        model_name=report.model_name if job_type == JOB_TYPE_MODELS else "",
        source_locale=report.source_locale,
        target_locale=report.target_locale,
        translated_count=stats.translated,
        skipped_empty_count=stats.skipped_empty,
        skipped_existing_count=stats.skipped_existing,
        failed_count=stats.failed,
        records_translated=report.count,
        status=get_run_status(report),
        report=report.as_dict(),
    )
    logger.info("Recorded translation run %s", run_log)
    return run_log


def run_translation_job(job_type: str, target_locales, translate, source_locale: str):
    """
    Run ``translate(source_locale, target_locale)`` for every target locale.

    The source locale itself is skipped. A run log entry is stored for every
    locale translated.

    Returns:
        The list of ``TranslationReport`` objects, one per translated locale

    Raises:
        ValidationError: If no target locale is given
    """
    if not target_locales:
        msg = "Please select at least one target language"
        raise ValidationError(msg)

    reports = []
    for target_locale in target_locales:
        if target_locale == source_locale:
            logger.info("Skipping target locale '%s', same as source", target_locale)
            continue
        report = translate(source_locale, target_locale)
        record_translation_run(report, job_type)
        reports.append(report)
    return reports
