"""
In-memory stand-ins for the host CMS storage and the DeepL provider.
"""

import deepl

from ol_auto_translation.providers.base import TranslationProvider

DEFAULT_FIELDS = {
    "title": {"type": "text"},
    "content": {"type": "richeditor"},
    "slug": {"type": "text"},
}

TARGET_LANGUAGES = {
    "BG": "Bulgarian",
    "DE": "German",
    "EN-US": "English (American)",
    "FR": "French",
    "PT-PT": "Portuguese",
}


class FakeRecord:
    """A record storing one value per locale, with default locale fallback."""

    def __init__(self, pk, values=None, fields=None, default_locale="en"):
        self.pk = pk
        self.default_locale = default_locale
        self.locale_context = default_locale
        self.data = {
            locale: dict(attributes) for locale, attributes in (values or {}).items()
        }
        self.fields = DEFAULT_FIELDS if fields is None else fields
        self.staged = {}
        self.save_count = 0

    def get_locale_context(self):
        return self.locale_context

    def set_locale_context(self, locale):
        self.locale_context = locale

    def get_attribute(self, name, use_fallback=True):  # noqa: FBT002
        value = self.data.get(self.locale_context, {}).get(name)
        if not value and use_fallback:
            value = self.data.get(self.default_locale, {}).get(name)
        return value

    def set_attribute_for_locale(self, name, value, locale):
        self.staged.setdefault(locale, {})[name] = value

    def save(self):
        for locale, attributes in self.staged.items():
            self.data.setdefault(locale, {}).update(attributes)
        self.staged = {}
        self.save_count += 1

    def translatable_fields(self):
        return self.fields

    def value(self, name, locale):
        """Stored value without any fallback, for assertions."""
        return self.data.get(locale, {}).get(name)


class PlainObject:
    """An object without localizable storage."""

    pk = 1


class FakeMessage:
    """A UI message with a ``{locale: text}`` payload."""

    def __init__(self, message_id, data, default_locale="en"):
        self.id = message_id
        self.data = dict(data)
        self.default_locale = default_locale
        self.save_count = 0

    def text_for_locale(self, locale):
        return self.data.get(locale) or self.data.get(self.default_locale)

    def raw_locale_data(self):
        return self.data

    def set_locale(self, locale, text):
        self.data[locale] = text
        self.save_count += 1


class FakeMessageStore:
    def __init__(self, messages=None):
        self.messages = list(messages or [])

    def query(self, ids=None):
        if ids is None:
            return list(self.messages)
        wanted = {str(message_id) for message_id in ids}
        return [message for message in self.messages if str(message.id) in wanted]


class FakeProvider(TranslationProvider):
    """
    Provider translating by prefixing the target code, e.g. ``[DE] Hello``.

    ``fail_when`` receives the submitted texts and returns an exception to raise,
    or None.
    """

    def __init__(self, fail_when=None, echo=False, target_languages=None):
        self.fail_when = fail_when
        self.echo = echo
        self.target_languages = (
            TARGET_LANGUAGES if target_languages is None else target_languages
        )
        self.calls = []

    def _translate(self, text, target_language):
        if self.echo:
            return text
        return f"[{target_language}] {text}"

    def _check_failure(self, texts):
        error = self.fail_when(texts) if self.fail_when else None
        if error is not None:
            raise error

    def translate_text(self, text, source_language, target_language, options=None):
        self.calls.append(
            {"texts": [text], "target": target_language, "options": options}
        )
        self._check_failure([text])
        return self._translate(text, target_language)

    def translate_batch(self, texts, source_language, target_language, options=None):
        self.calls.append(
            {"texts": list(texts), "target": target_language, "options": options}
        )
        self._check_failure(texts)
        return [self._translate(text, target_language) for text in texts]

    def get_source_languages(self):
        return {"EN": "English", "DE": "German"}

    def get_target_languages(self):
        return dict(self.target_languages)

    def get_usage(self):
        return None

    def test_connection(self):
        return True


def fail_on_text(text, message="Service temporarily unavailable"):
    """Return a ``fail_when`` callback failing every batch containing ``text``."""

    def fail_when(texts):
        if text in texts:
            return deepl.DeepLException(message)
        return None

    return fail_when


ARTICLES = []
MESSAGE_STORE = FakeMessageStore()


def load_articles(ids=None):
    """Loader registered for the ``article`` model in the test settings."""
    if ids is None:
        return list(ARTICLES)
    wanted = {str(pk) for pk in ids}
    return [article for article in ARTICLES if str(article.pk) in wanted]


def get_message_store():
    return MESSAGE_STORE


def article_fields():
    return DEFAULT_FIELDS


def count_articles():
    return len(ARTICLES)
