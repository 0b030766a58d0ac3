"""Constants for the auto translation plugin."""

# Plugin registration
PROJECT_TYPE_CMS = "cms.djangoapp"
SETTINGS_TYPE_COMMON = "common"

# DeepL API constants
DEEPL_MAX_BATCH_SIZE = 50
DEEPL_DEFAULT_MAX_RETRIES = 3
DEEPL_FREE_SERVER_URL = "https://api-free.deepl.com"
DEEPL_SERVER_TYPE_FREE = "free"
DEEPL_SERVER_TYPE_PRO = "pro"
DEEPL_DEFAULT_REQUEST_TIMEOUT = 10.0
DEEPL_TAG_HANDLING_HTML = "html"

# Substrings of DeepL error messages that must not be retried
DEEPL_NON_RETRYABLE_KEYWORDS = [
    "unauthorized",
    "forbidden",
    "invalid",
    "bad request",
]

DEFAULT_LOCALE = "en"

# Locale code mappings for DeepL API
# DeepL wants uppercase codes and explicit regional variants (EN-US, PT-PT)
DEEPL_LOCALE_MAPPINGS = {
    "ar": "AR",
    "bg": "BG",
    "cs": "CS",
    "da": "DA",
    "de": "DE",
    "el": "EL",
    "es": "ES",
    "et": "ET",
    "fi": "FI",
    "fr": "FR",
    "hu": "HU",
    "id": "ID",
    "it": "IT",
    "ja": "JA",
    "ko": "KO",
    "lt": "LT",
    "lv": "LV",
    "nb": "NB",
    "nl": "NL",
    "pl": "PL",
    "ro": "RO",
    "ru": "RU",
    "sk": "SK",
    "sl": "SL",
    "sv": "SV",
    "tr": "TR",
    "uk": "UK",
    # Regional variants
    "en": "EN-US",
    "pt": "PT-PT",
    "zh": "ZH-HANS",
    # Alternative codes
    "sp": "ES",
    "no": "NB",
}

# Field names that are never translated
DEFAULT_EXCLUDED_FIELDS = [
    "slug",
    "url",
    "uri",
    "code",
    "key",
    "api_key",
    "secret",
    "token",
    "password",
    "hash",
]

# Field name patterns that are never translated
DEFAULT_EXCLUDED_PATTERNS = [
    r"_id$",
    r"_at$",
    r"^slug$",
    r"url$",
    r"key$",
    r"^id$",
]

DEFAULT_EXCLUDED_TYPES = [
    "dropdown",
    "radio",
    "checkbox",
    "checkboxlist",
    "switch",
    "balloon-selector",
    "datepicker",
    "colorpicker",
    "number",
    "fileupload",
    "mediafinder",
    "relation",
    "recordfinder",
    "repeater",
    "partial",
    "section",
]

DEFAULT_TRANSLATABLE_TYPES = [
    "text",
    "textarea",
    "richeditor",
    "markdown",
    "mltext",
    "mltextarea",
    "mlricheditor",
    "mlmarkdowneditor",
]

RICH_CONTENT_TYPES = [
    "richeditor",
    "mlricheditor",
    "markdown",
    "mlmarkdowneditor",
]

DEFAULT_FIELD_TYPE = "text"

# Naming heuristics used when listing model fields
RICH_TEXT_FIELD_NAMES = ["content", "description", "body", "text", "excerpt", "summary"]
SLUG_FIELD_NAMES = ["slug", "code", "url"]
META_FIELD_NAMES = [
    "keywords",
    "meta_title",
    "meta_description",
    "seo_title",
    "seo_description",
]
NOT_RECOMMENDED_FIELD_NAMES = ["slug", "code", "url", "published", "external", "type"]

# Run log
JOB_TYPE_MESSAGES = "messages"
JOB_TYPE_MODELS = "models"
JOB_TYPE_CHOICES = [
    (JOB_TYPE_MESSAGES, "Messages"),
    (JOB_TYPE_MODELS, "Models"),
]

RUN_STATUS_SUCCESS = "success"
RUN_STATUS_PARTIAL = "partial"
RUN_STATUS_NOTHING = "nothing"
RUN_STATUS_CHOICES = [
    (RUN_STATUS_SUCCESS, "Success"),
    (RUN_STATUS_PARTIAL, "Partial"),
    (RUN_STATUS_NOTHING, "Nothing translated"),
]

# Characters of a text shown in log previews
LOG_PREVIEW_LENGTH = 50
