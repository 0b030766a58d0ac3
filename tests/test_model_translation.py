"""Tests for the model translation service"""

from unittest import mock

import pytest

from ol_auto_translation.config import TranslationConfig
from ol_auto_translation.exceptions import ValidationError
from ol_auto_translation.services.batch_collector import TranslationBatchCollector
from ol_auto_translation.services.field_filter import FieldFilter
from ol_auto_translation.services.locale_normalizer import LocaleNormalizer
from ol_auto_translation.services.model_discovery import ModelRegistry
from ol_auto_translation.services.model_translation import ModelTranslationService
from ol_auto_translation.strategies.deepl_strategy import DeepLBatchStrategy
from tests.utils import (
    ARTICLES,
    FakeProvider,
    FakeRecord,
    PlainObject,
    fail_on_text,
    load_articles,
)


def make_service(provider, sleep=None):
    config = TranslationConfig(api_key="key")
    registry = ModelRegistry()
    registry.register("article", load_articles)
    return ModelTranslationService(
        provider=provider,
        strategy=DeepLBatchStrategy(provider, sleep=sleep or mock.Mock()),
        collector=TranslationBatchCollector(config.default_locale),
        field_filter=FieldFilter.from_config(config),
        normalizer=LocaleNormalizer(config.locale_mappings),
        registry=registry,
    )


def test_translate_model(provider):
    """Eligible attributes are translated and saved together"""
    record = FakeRecord(
        1, {"en": {"title": "Hello", "content": "<p>Body</p>", "slug": "hello"}}
    )
    record.set_locale_context("fr")
    service = make_service(provider)

    translations = service.translate_model(record, "en", "pt")

    assert translations == {"title": "[PT-PT] Hello", "content": "[PT-PT] <p>Body</p>"}
    assert record.value("title", "pt") == "[PT-PT] Hello"
    assert record.value("slug", "pt") is None
    assert record.save_count == 1
    assert record.get_locale_context() == "fr"
    assert [call["options"]["rich_content"] for call in provider.calls] == [
        False,
        True,
    ]


def test_translate_model_fields_option(provider):
    record = FakeRecord(1, {"en": {"title": "Hello", "content": "Body"}})
    service = make_service(provider)

    translations = service.translate_model(record, "en", "de", {"fields": ["content"]})

    assert translations == {"content": "[DE] Body"}
    assert record.value("title", "de") is None


def test_translate_model_rejects_plain_objects(provider):
    with pytest.raises(ValidationError):
        make_service(provider).translate_model(PlainObject(), "en", "de")
    assert provider.calls == []


def test_translate_model_failing_attribute_is_omitted():
    provider = FakeProvider(fail_when=fail_on_text("Hello"))
    record = FakeRecord(1, {"en": {"title": "Hello", "content": "Body"}})

    translations = make_service(provider).translate_model(record, "en", "de")

    assert translations == {"content": "[DE] Body"}
    assert record.value("title", "de") is None
    assert record.value("content", "de") == "[DE] Body"


def test_translate_models_in_batch(provider, articles):
    report = make_service(provider).translate_models_in_batch("article", "en", "de")

    assert report.count == 2
    assert report.batches == 2
    assert report.stats.as_dict() == {
        "translated": 3,
        "skipped_empty": 2,
        "skipped_existing": 1,
        "failed": 0,
    }
    assert articles[0].value("title", "de") == "[DE] Hello"
    assert articles[0].value("content", "de") == "[DE] <p>Body</p>"
    assert articles[1].value("title", "de") == "Welt"
    assert articles[1].value("content", "de") == "[DE] <p>More</p>"
    assert [article.save_count for article in articles] == [1, 1, 0]


def test_batches_split_by_rich_content(provider, articles):
    """Only rich content fields are sent with HTML tag handling"""
    make_service(provider).translate_models_in_batch("article", "en", "de")

    assert [
        (call["texts"], call["options"]["rich_content"]) for call in provider.calls
    ] == [
        (["Hello"], False),
        (["<p>Body</p>", "<p>More</p>"], True),
    ]


def test_short_provider_result_fails_the_batch(articles):
    """A provider answering with fewer texts than sent writes nothing for the batch"""

    class ShortProvider(FakeProvider):
        def translate_batch(self, texts, *args, **kwargs):
            return super().translate_batch(texts, *args, **kwargs)[:-1]

    provider = ShortProvider()
    report = make_service(provider).translate_models_in_batch("article", "en", "de")

    assert report.batches == 2
    assert report.stats.failed == 3
    assert report.count == 0
    assert len(provider.calls) == 2
    assert "1 results for 2 texts" in report.failures[-1]["error"]
    assert [article.save_count for article in articles] == [0, 0, 0]


def test_translate_models_in_batch_ids_and_overwrite(provider, articles):
    report = make_service(provider).translate_models_in_batch(
        "article", "en", "de", ids=["2"], options={"overwrite": True}
    )

    assert report.count == 1
    assert articles[1].value("title", "de") == "[DE] World"
    assert articles[0].value("title", "de") is None


def test_echo_round_trip(articles):
    """An identity provider writes the source text back to every origin"""
    service = make_service(FakeProvider(echo=True))

    service.translate_models_in_batch(
        "article", "en", "fr", options={"fields": ["title", "content"]}
    )

    for article in articles[:2]:
        assert article.value("title", "fr") == article.value("title", "en")
        assert article.value("content", "fr") == article.value("content", "en")


def test_second_run_translates_nothing(provider, articles):
    service = make_service(provider)
    service.translate_models_in_batch("article", "en", "de")
    call_count = len(provider.calls)

    report = service.translate_models_in_batch("article", "en", "de")

    assert report.count == 0
    assert report.stats.translated == 0
    assert report.stats.skipped_existing == 4
    assert len(provider.calls) == call_count


def test_failed_batch_does_not_stop_the_run():
    """120 attributes, the second batch of 50 fails on every attempt"""
    ARTICLES.extend(
        FakeRecord(pk, {"en": {"title": f"title {pk}"}}, fields={"title": {}})
        for pk in range(120)
    )
    sleep = mock.Mock()
    provider = FakeProvider(fail_when=fail_on_text("title 50"))

    report = make_service(provider, sleep=sleep).translate_models_in_batch(
        "article", "en", "de"
    )

    assert report.batches == 3
    assert report.count == 70
    assert report.stats.translated == 70
    assert report.stats.failed == 50
    assert len(report.failures) == 50
    assert report.failures[0]["origin"] == "FakeRecord#50.title"
    assert ARTICLES[49].value("title", "de") == "[DE] title 49"
    assert ARTICLES[50].value("title", "de") is None
    assert ARTICLES[100].value("title", "de") == "[DE] title 100"
    assert [len(call["texts"]) for call in provider.calls] == [50, 50, 50, 50, 20]
    assert sleep.call_args_list == [mock.call(2), mock.call(4)]


def test_unknown_model(provider):
    with pytest.raises(ValidationError, match="Unknown model"):
        make_service(provider).translate_models_in_batch("page", "en", "de")


def test_no_records(provider):
    report = make_service(provider).translate_models_in_batch("article", "en", "de")
    assert report.count == 0
    assert provider.calls == []


def test_translate_models(provider, articles):
    """The unbatched path calls the provider once per attribute"""
    processed = make_service(provider).translate_models("article", "en", "de")

    assert processed == 3
    assert len(provider.calls) == 3
    assert articles[0].value("title", "de") == "[DE] Hello"


def test_get_translatable_attributes(provider):
    record = FakeRecord(
        1,
        fields={
            "title": {"type": "text"},
            "category_id": {"type": "text"},
            "status": {"type": "dropdown"},
            "body": {"type": "markdown"},
        },
    )
    assert make_service(provider).get_translatable_attributes(record) == [
        "title",
        "body",
    ]
