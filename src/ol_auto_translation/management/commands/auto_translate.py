"""
Management command to translate host messages or model records with DeepL.
"""

import logging

from django.core.management.base import BaseCommand, CommandError

from ol_auto_translation.constants import JOB_TYPE_MESSAGES, JOB_TYPE_MODELS
from ol_auto_translation.exceptions import AutoTranslationError
from ol_auto_translation.utils import (
    get_message_translation_service,
    get_model_translation_service,
    get_translation_config,
    run_translation_job,
)

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Translate messages or registered model records into target locales."""

    help = "Translate messages or registered model records into target locales."

    def add_arguments(self, parser) -> None:
        """Entry point for subclassed commands to add custom arguments."""
        parser.add_argument(
            "job_type",
            choices=[JOB_TYPE_MESSAGES, JOB_TYPE_MODELS],
            help="What to translate: UI messages or the records of a model.",
        )
        parser.add_argument(
            "--target-locales",
            dest="target_locales",
            nargs="+",
            required=True,
            help="Host locale codes to translate into, e.g. `de fr`.",
        )
        parser.add_argument(
            "--model",
            dest="model_name",
            help="Registered model name, required for `models`.",
        )
        parser.add_argument(
            "--ids",
            dest="ids",
            nargs="+",
            help="Only translate the messages or records with these ids.",
        )
        parser.add_argument(
            "--fields",
            dest="fields",
            nargs="+",
            help="Only translate these model fields.",
        )
        parser.add_argument(
            "--overwrite",
            dest="overwrite",
            action="store_true",
            help="Replace translations that already exist.",
        )

    def handle(self, **options) -> None:
        """Handle the auto_translate command."""
        job_type = options["job_type"]
        if job_type == JOB_TYPE_MODELS and not options.get("model_name"):
            msg = "--model is required when translating models"
            raise CommandError(msg)

        try:
            config = get_translation_config()
            if job_type == JOB_TYPE_MESSAGES:
                reports = self._translate_messages(config, options)
            else:
                reports = self._translate_models(config, options)
        except AutoTranslationError as error:
            msg = f"Translation failed: {error}"
            raise CommandError(msg) from error

        for report in reports:
            stats = report.stats
            self.stdout.write(
                f"{report.target_locale}: {report.count} written, "
                f"{stats.translated} translated, "
                f"{stats.skipped_empty} empty, "
                f"{stats.skipped_existing} already translated, "
                f"{stats.failed} failed"
            )

        total = sum(report.count for report in reports)
        if total > 0:
            self.stdout.write(
                self.style.SUCCESS(f"Successfully translated {total} {job_type}")
            )
        else:
            self.stdout.write(self.style.WARNING(f"No {job_type} were translated"))

    def _translate_messages(self, config, options):
        service = get_message_translation_service(config)
        return run_translation_job(
            JOB_TYPE_MESSAGES,
            options["target_locales"],
            lambda source, target: service.translate_messages_in_batch(
                source, target, options.get("ids"), options["overwrite"]
            ),
            config.effective_source_locale,
        )

    def _translate_models(self, config, options):
        service = get_model_translation_service(config)
        model_options = {
            "overwrite": options["overwrite"],
            "fields": options.get("fields") or [],
        }
        return run_translation_job(
            JOB_TYPE_MODELS,
            options["target_locales"],
            lambda source, target: service.translate_models_in_batch(
                options["model_name"], source, target, options.get("ids"), model_options
            ),
            config.effective_source_locale,
        )
