"""DeepL translation provider."""

import logging

import deepl

from ol_auto_translation.config import TranslationConfig
from ol_auto_translation.constants import (
    DEEPL_FREE_SERVER_URL,
    DEEPL_SERVER_TYPE_FREE,
    DEEPL_TAG_HANDLING_HTML,
)
from ol_auto_translation.exceptions import ConfigurationError, ResultMismatchError

from .base import TranslationProvider, is_blank

logger = logging.getLogger(__name__)


class DeepLProvider(TranslationProvider):
    """DeepL translation provider."""

    def __init__(
        self,
        config: TranslationConfig,
        deepl_translator: deepl.Translator | None = None,
    ):
        """
        Initialize DeepL provider.

        Args:
            config: Plugin configuration holding the API key and server type
            deepl_translator: Pre-built DeepL client (optional, mostly for tests)

        Raises:
            ConfigurationError: If no client is given and the API key is missing
        """
        self.config = config
        self.deepl_translator = deepl_translator or self._build_translator()

    def _build_translator(self) -> deepl.Translator:
        if not self.config.api_key:
            msg = "DeepL API key is not configured. Please set DEEPL_API_KEY."
            raise ConfigurationError(msg)

        # The SDK has no per-client timeout, only this module level setting
        deepl.http_client.min_connection_timeout = self.config.request_timeout

        server_url = None
        if self.config.server_type == DEEPL_SERVER_TYPE_FREE:
            server_url = DEEPL_FREE_SERVER_URL
        return deepl.Translator(auth_key=self.config.api_key, server_url=server_url)

    def _build_translation_options(self, options: dict | None) -> dict:
        """
        Build keyword arguments for ``deepl.Translator.translate_text``.

        HTML tag handling is requested when preserve-HTML is enabled or the
        caller flags the text as rich content.
        """
        options = options or {}
        deepl_options = {}
        if self.config.preserve_html or options.get("rich_content"):
            deepl_options["tag_handling"] = DEEPL_TAG_HANDLING_HTML
        if options.get("formality"):
            deepl_options["formality"] = options["formality"]
        return deepl_options

    def translate_text(
        self,
        text: str,
        source_language: str | None,  # noqa: ARG002
        target_language: str,
        options: dict | None = None,
    ) -> str:
        """
        Translate text using DeepL.

        The source language is always left for DeepL to detect; passing regional
        variants (EN-US, PT-BR) as a source makes the API reject the request.

        Args:
            text: Text to translate
            source_language: Source language code (ignored, auto-detected)
            target_language: DeepL target language code
            options: ``formality`` and ``rich_content`` flags

        Returns:
            Translated text, or the input unchanged if it is blank

        Raises:
            deepl.DeepLException: If the API call fails
        """
        if is_blank(text):
            return text

        try:
            translation_result = self.deepl_translator.translate_text(
                text,
                source_lang=None,
                target_lang=target_language,
                **self._build_translation_options(options),
            )
        except deepl.DeepLException as deepl_error:
            logger.error("DeepL translation failed: %s", deepl_error)  # noqa: TRY400
            raise
        return translation_result.text

    def translate_batch(
        self,
        texts: list[str],
        source_language: str | None,  # noqa: ARG002
        target_language: str,
        options: dict | None = None,
    ) -> list[str]:
        """
        Translate several texts with a single DeepL request.

        Blank entries are not sent; they stay in place in the returned list.

        Raises:
            deepl.DeepLException: If the API call fails
            ResultMismatchError: If DeepL returns a different number of results
        """
        if not texts:
            return []

        positions = [index for index, text in enumerate(texts) if not is_blank(text)]
        if not positions:
            return list(texts)

        try:
            translation_results = self.deepl_translator.translate_text(
                [texts[index] for index in positions],
                source_lang=None,
                target_lang=target_language,
                **self._build_translation_options(options),
            )
        except deepl.DeepLException as deepl_error:
            logger.error("DeepL batch translation failed: %s", deepl_error)  # noqa: TRY400
            raise

        translation_results = list(translation_results)
        if len(translation_results) != len(positions):
            logger.error(
                "DeepL returned %d results for %d texts",
                len(translation_results),
                len(positions),
            )
            raise ResultMismatchError(len(positions), len(translation_results))

        translated_texts = list(texts)
        for position, translation_result in zip(
            positions, translation_results, strict=True
        ):
            translated_texts[position] = translation_result.text
        return translated_texts

    def get_source_languages(self) -> dict[str, str]:
        try:
            languages = self.deepl_translator.get_source_languages()
        except deepl.DeepLException:
            logger.exception("Failed to get source languages from DeepL")
            return {}
        return {language.code: language.name for language in languages}

    def get_target_languages(self) -> dict[str, str]:
        try:
            languages = self.deepl_translator.get_target_languages()
        except deepl.DeepLException:
            logger.exception("Failed to get target languages from DeepL")
            return {}
        return {language.code: language.name for language in languages}

    def get_usage(self):
        try:
            return self.deepl_translator.get_usage()
        except deepl.DeepLException:
            logger.exception("Failed to get DeepL usage")
            return None

    def test_connection(self) -> bool:
        try:
            self.deepl_translator.get_usage()
        except deepl.DeepLException:
            logger.exception("DeepL connection test failed")
            return False
        return True
