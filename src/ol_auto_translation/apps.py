"""
ol_auto_translation Django application initialization.
"""

from django.apps import AppConfig
from edx_django_utils.plugins import PluginSettings, PluginURLs

from ol_auto_translation.constants import PROJECT_TYPE_CMS, SETTINGS_TYPE_COMMON


class OLAutoTranslationConfig(AppConfig):
    """
    Configuration for the ol_auto_translation Django application.
    """

    name = "ol_auto_translation"
    verbose_name = "Auto Translation"
    default_auto_field = "django.db.models.AutoField"

    plugin_app = {
        PluginURLs.CONFIG: {
            PROJECT_TYPE_CMS: {
                PluginURLs.NAMESPACE: "ol_auto_translation",
                PluginURLs.REGEX: "^auto-translation/",
                PluginURLs.RELATIVE_PATH: "urls",
            }
        },
        PluginSettings.CONFIG: {
            PROJECT_TYPE_CMS: {
                SETTINGS_TYPE_COMMON: {PluginSettings.RELATIVE_PATH: "settings.common"},
            },
        },
    }
