"""Exceptions for the auto translation plugin"""


class AutoTranslationError(Exception):
    """
    Base class for errors raised by the auto translation plugin
    """

    def __init__(self, message):
        # Force the lazy i18n values to turn into actual unicode objects
        super().__init__(str(message))


class ConfigurationError(AutoTranslationError):
    """
    Raised when the plugin is misconfigured (missing API key, bad settings)
    """


class UnsupportedLanguageError(ConfigurationError):
    """
    Raised when the requested target language is not offered by the provider
    """

    def __init__(self, language_code, available_languages):
        self.language_code = language_code
        self.available_languages = list(available_languages)
        super().__init__(
            f"Language '{language_code}' is not supported by your DeepL account. "
            f"Available languages: {', '.join(self.available_languages)}. "
            "Please ensure your locale code matches DeepL's format "
            "(e.g., EN-US, BG, PT-BR)."
        )


class ValidationError(AutoTranslationError):
    """
    Raised when a translation request is invalid before any remote call is made
    """


class BatchSizeError(AutoTranslationError):
    """
    Raised when a batch is empty or larger than the provider allows
    """


class ResultMismatchError(AutoTranslationError):
    """
    Raised when the provider returns a different number of results than units
    """

    def __init__(self, expected, received):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Translation provider returned {received} results for {expected} texts"
        )
