"""Map host CMS locale codes to the codes DeepL expects."""

from collections.abc import Iterable, Mapping


class LocaleNormalizer:
    """
    Normalize host locale codes for the translation provider.

    The host stores lowercase ISO codes (``en``, ``pt``) while DeepL wants
    uppercase codes and explicit regional variants (``EN-US``, ``PT-PT``).
    Codes missing from the mapping table are uppercased.
    """

    def __init__(self, mappings: Mapping[str, str]):
        self.mappings = {code.lower(): value for code, value in mappings.items()}

    def normalize(self, locale_code: str) -> str:
        return self.mappings.get(locale_code.lower(), locale_code.upper())

    def normalize_multiple(self, locale_codes: Iterable[str]) -> list[str]:
        return [self.normalize(locale_code) for locale_code in locale_codes]

    def needs_normalization(self, locale_code: str) -> bool:
        return self.normalize(locale_code) != locale_code
