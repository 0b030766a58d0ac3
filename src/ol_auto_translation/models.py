"""Models for the auto translation plugin"""

from django.db import models

from ol_auto_translation.constants import JOB_TYPE_CHOICES, RUN_STATUS_CHOICES


class TranslationRunLog(models.Model):
    """Log entry for one translation run into one target locale."""

    job_type = models.CharField(
        max_length=20,
        choices=JOB_TYPE_CHOICES,
        db_index=True,
    )
    model_name = models.CharField(
        max_length=255,
        blank=True,
        help_text="Registered model name for model translation runs",
    )
    source_locale = models.CharField(
        max_length=10,
        help_text="Host locale code translated from (e.g., 'en')",
    )
    target_locale = models.CharField(
        max_length=10,
        help_text="Host locale code translated to (e.g., 'de')",
    )
    translated_count = models.PositiveIntegerField(default=0)
    skipped_empty_count = models.PositiveIntegerField(default=0)
    skipped_existing_count = models.PositiveIntegerField(default=0)
    failed_count = models.PositiveIntegerField(default=0)
    records_translated = models.PositiveIntegerField(
        default=0,
        help_text="Records or messages that received at least one translation",
    )
    status = models.CharField(max_length=20, choices=RUN_STATUS_CHOICES)
    report = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(
        auto_now_add=True,
    )
    updated_at = models.DateTimeField(
        auto_now=True,
    )

    class Meta:
        """Meta options for TranslationRunLog."""

        app_label = "ol_auto_translation"
        ordering = ("-created_at",)

    def __str__(self):
        """Return a string representation of the run log."""
        name = self.model_name or self.job_type
        return f"{name} ({self.source_locale} → {self.target_locale}): {self.status}"
