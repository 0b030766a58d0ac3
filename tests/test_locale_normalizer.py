"""Tests for the locale normalizer"""

import pytest

from ol_auto_translation.constants import DEEPL_LOCALE_MAPPINGS
from ol_auto_translation.services.locale_normalizer import LocaleNormalizer


@pytest.fixture()
def normalizer():
    return LocaleNormalizer(DEEPL_LOCALE_MAPPINGS)


@pytest.mark.parametrize(
    ("locale_code", "expected"),
    [
        ("en", "EN-US"),
        ("EN", "EN-US"),
        ("pt", "PT-PT"),
        ("zh", "ZH-HANS"),
        ("sp", "ES"),
        ("no", "NB"),
        ("de", "DE"),
        ("xx", "XX"),
        ("pt-br", "PT-BR"),
    ],
)
def test_normalize(normalizer, locale_code, expected):
    """Mapped codes use the table, anything else is uppercased"""
    assert normalizer.normalize(locale_code) == expected


@pytest.mark.parametrize("locale_code", ["DE", "FR", "PT-BR", "EN-GB"])
def test_normalize_unmapped_uppercase_is_stable(normalizer, locale_code):
    """Normalizing an already normalized unmapped code changes nothing"""
    once = normalizer.normalize(locale_code)
    assert once == locale_code
    assert normalizer.normalize(once) == once
    assert not normalizer.needs_normalization(locale_code)


def test_normalize_multiple_keeps_order_and_duplicates(normalizer):
    assert normalizer.normalize_multiple(["en", "de", "en", "xx"]) == [
        "EN-US",
        "DE",
        "EN-US",
        "XX",
    ]


def test_custom_mapping_keys_are_case_insensitive():
    normalizer = LocaleNormalizer({"PT": "PT-BR"})
    assert normalizer.normalize("pt") == "PT-BR"
    assert normalizer.needs_normalization("pt")
