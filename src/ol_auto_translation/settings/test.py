# noqa: INP001

"""
Settings for running the ol_auto_translation tests
"""

from .common import *  # noqa: F403


class SettingsClass:
    """dummy settings class"""


SETTINGS = SettingsClass()
plugin_settings(SETTINGS)  # noqa: F405
vars().update(SETTINGS.__dict__)

DEEPL_API_KEY = "test-deepl-key"  # pragma: allowlist secret
AUTO_TRANSLATION_DEFAULT_LOCALE = "en"
AUTO_TRANSLATION_MODELS = {"article": "tests.utils.load_articles"}
AUTO_TRANSLATION_MESSAGE_STORE = "tests.utils.get_message_store"

SECRET_KEY = "ol-auto-translation-tests"  # noqa: S105
LANGUAGE_CODE = "en"
USE_TZ = True
ROOT_URLCONF = "tests.urls"
ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "rest_framework",
    "ol_auto_translation",
]

MIDDLEWARE = [
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "django.template.context_processors.request",
            ],
        },
    },
]

DATABASES = {"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}}
DEFAULT_AUTO_FIELD = "django.db.models.AutoField"
