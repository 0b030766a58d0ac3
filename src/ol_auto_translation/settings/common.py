# noqa: INP001

"""Common settings to provide to the host CMS"""

from ol_auto_translation.constants import (
    DEEPL_DEFAULT_MAX_RETRIES,
    DEEPL_DEFAULT_REQUEST_TIMEOUT,
    DEEPL_MAX_BATCH_SIZE,
    DEEPL_SERVER_TYPE_FREE,
)


def plugin_settings(settings):
    """
    Populate default settings for the auto translation plugin.
    """
    # .. setting_name: DEEPL_API_KEY
    # .. setting_default: ""
    # .. setting_description: Authentication key of the DeepL account.
    settings.DEEPL_API_KEY = ""
    # .. setting_name: DEEPL_SERVER_TYPE
    # .. setting_default: "free"
    # .. setting_description: "free" targets api-free.deepl.com, "pro" the
    # paid endpoint.
    settings.DEEPL_SERVER_TYPE = DEEPL_SERVER_TYPE_FREE
    settings.DEEPL_REQUEST_TIMEOUT = DEEPL_DEFAULT_REQUEST_TIMEOUT
    # Locale the content is translated from. Empty means the site default.
    settings.AUTO_TRANSLATION_SOURCE_LOCALE = ""
    settings.AUTO_TRANSLATION_DEFAULT_LOCALE = ""
    settings.AUTO_TRANSLATION_MAX_BATCH_SIZE = DEEPL_MAX_BATCH_SIZE
    settings.AUTO_TRANSLATION_MAX_RETRIES = DEEPL_DEFAULT_MAX_RETRIES
    settings.AUTO_TRANSLATION_PRESERVE_HTML = True
    # Extra {host_locale: deepl_code} entries merged over the built-in table
    settings.AUTO_TRANSLATION_LOCALE_MAPPINGS = {}
    # Comma or newline separated field names never to translate
    settings.AUTO_TRANSLATION_EXCLUDED_FIELDS = ""
    # {model_name: "dotted.path.to.loader"}, loader(ids) returns records. The
    # value may also be a dict with "loader" and optional "fields", "count"
    # paths and "label", so model listing never loads every record.
    settings.AUTO_TRANSLATION_MODELS = {}
    # Dotted path to the message store (an object or a zero argument factory)
    settings.AUTO_TRANSLATION_MESSAGE_STORE = ""
