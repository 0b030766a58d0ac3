"""Django admin configuration for the auto translation plugin."""

from django.contrib import admin

from ol_auto_translation.models import TranslationRunLog


@admin.register(TranslationRunLog)
class TranslationRunLogAdmin(admin.ModelAdmin):
    """Read-only admin interface for TranslationRunLog model."""

    _count_fields = (
        "translated_count",
        "skipped_empty_count",
        "skipped_existing_count",
        "failed_count",
        "records_translated",
    )

    list_display = (
        "id",
        "job_type",
        "model_name",
        "source_locale",
        "target_locale",
        "status",
        *_count_fields,
        "created_at",
    )
    list_filter = ("job_type", "status", "target_locale")
    readonly_fields = (
        "job_type",
        "model_name",
        "source_locale",
        "target_locale",
        "status",
        *_count_fields,
        "report",
        "created_at",
        "updated_at",
    )
    search_fields = ("model_name",)

    def has_add_permission(self, request):  # noqa: ARG002
        return False
