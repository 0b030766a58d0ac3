"""Tests for plugin settings and the configuration snapshot"""

from django.test import override_settings
from edx_django_utils.plugins import PluginSettings, PluginURLs

from ol_auto_translation.apps import OLAutoTranslationConfig
from ol_auto_translation.config import TranslationConfig
from ol_auto_translation.constants import DEEPL_MAX_BATCH_SIZE
from ol_auto_translation.settings.common import plugin_settings


class SettingsClass:
    """dummy settings class"""


def test_plugin_settings_defaults():
    settings = SettingsClass()
    plugin_settings(settings)

    assert settings.DEEPL_API_KEY == ""
    assert settings.DEEPL_SERVER_TYPE == "free"
    assert settings.AUTO_TRANSLATION_MAX_BATCH_SIZE == DEEPL_MAX_BATCH_SIZE
    assert settings.AUTO_TRANSLATION_MODELS == {}

    config = TranslationConfig.from_settings(settings)
    assert config.api_key == ""
    assert config.default_locale == "en"
    assert config.effective_source_locale == "en"


def test_from_settings():
    config = TranslationConfig.from_settings()

    assert config.api_key == "test-deepl-key"  # pragma: allowlist secret
    assert config.max_batch_size == DEEPL_MAX_BATCH_SIZE
    assert config.locale_mappings["en"] == "EN-US"


@override_settings(
    AUTO_TRANSLATION_SOURCE_LOCALE="de",
    AUTO_TRANSLATION_LOCALE_MAPPINGS={"PT": "PT-BR"},
    AUTO_TRANSLATION_EXCLUDED_FIELDS="subtitle\nteaser",
    AUTO_TRANSLATION_MAX_RETRIES=5,
    DEEPL_SERVER_TYPE="pro",
)
def test_from_settings_overrides():
    config = TranslationConfig.from_settings()

    assert config.effective_source_locale == "de"
    assert config.locale_mappings["pt"] == "PT-BR"
    assert config.locale_mappings["zh"] == "ZH-HANS"
    assert config.custom_exclusions == ("subtitle", "teaser")
    assert config.max_retries == 5
    assert config.server_type == "pro"


def test_plugin_app_config():
    plugin_app = OLAutoTranslationConfig.plugin_app
    url_config = plugin_app[PluginURLs.CONFIG]["cms.djangoapp"]
    settings_config = plugin_app[PluginSettings.CONFIG]["cms.djangoapp"]["common"]

    assert url_config[PluginURLs.NAMESPACE] == "ol_auto_translation"
    assert url_config[PluginURLs.RELATIVE_PATH] == "urls"
    assert settings_config[PluginSettings.RELATIVE_PATH] == "settings.common"
