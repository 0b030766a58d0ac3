"""DeepL batch strategy with retry and exponential backoff."""

import logging
import math
import time
from collections.abc import Callable, Sequence

import deepl

from ol_auto_translation.constants import (
    DEEPL_DEFAULT_MAX_RETRIES,
    DEEPL_MAX_BATCH_SIZE,
    DEEPL_NON_RETRYABLE_KEYWORDS,
)
from ol_auto_translation.exceptions import BatchSizeError
from ol_auto_translation.providers.base import TranslationProvider

from .base import BatchStrategy

log = logging.getLogger(__name__)


class DeepLBatchStrategy(BatchStrategy):
    """
    Batching strategy for the DeepL API.

    DeepL accepts up to 50 texts per request. Failed requests are retried
    with a 2s, 4s, 8s... backoff unless the error says the request itself
    is wrong (bad credentials, invalid input).
    """

    def __init__(  # noqa: PLR0913
        self,
        provider: TranslationProvider,
        max_batch_size: int | None = None,
        max_retries: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
        logger: logging.Logger | None = None,
    ):
        """
        Args:
            provider: Provider the batches are submitted to
            max_batch_size: Texts per batch, capped at DeepL's limit of 50
            max_retries: Attempts per batch, at least 1
            sleep: Called with the backoff delay in seconds
            logger: Logger to report retries on
        """
        self.provider = provider
        self.max_batch_size = DEEPL_MAX_BATCH_SIZE
        self.max_retries = DEEPL_DEFAULT_MAX_RETRIES
        self.sleep = sleep
        self.log = logger or log

        if max_batch_size is not None:
            self.set_max_batch_size(max_batch_size)
        if max_retries is not None:
            self.set_max_retries(max_retries)

    def get_max_batch_size(self) -> int:
        return self.max_batch_size

    def set_max_batch_size(self, size: int) -> None:
        self.max_batch_size = max(1, min(size, DEEPL_MAX_BATCH_SIZE))

    def get_max_retries(self) -> int:
        return self.max_retries

    def set_max_retries(self, max_retries: int) -> None:
        self.max_retries = max(1, max_retries)

    def create_batches(self, items: Sequence) -> list[list]:
        return [
            list(items[start : start + self.max_batch_size])
            for start in range(0, len(items), self.max_batch_size)
        ]

    def is_valid_batch_size(self, size: int) -> bool:
        return 0 < size <= self.max_batch_size

    def estimate_api_calls(self, item_count: int) -> int:
        return math.ceil(item_count / self.max_batch_size)

    def process_batch(
        self,
        batch: Sequence[str],
        source_language: str | None,
        target_language: str,
        options: dict | None = None,
    ) -> list[str]:
        """
        Translate a single batch, retrying transient DeepL failures.

        Raises:
            BatchSizeError: If the batch is larger than the configured maximum
            deepl.DeepLException: If the batch still fails after all retries,
                or fails with a non-retryable error
        """
        if not batch:
            return []

        if not self.is_valid_batch_size(len(batch)):
            msg = f"Batch size exceeds maximum of {self.max_batch_size}"
            raise BatchSizeError(msg)

        return self.process_batch_with_retry(
            batch, source_language, target_language, options
        )

    def process_multiple_batches(
        self,
        batches: Sequence[Sequence[str]],
        source_language: str | None,
        target_language: str,
        options: dict | None = None,
    ) -> list[str]:
        """Translate batches in order; the first failing batch aborts the call."""
        all_results = []
        for batch in batches:
            all_results.extend(
                self.process_batch(batch, source_language, target_language, options)
            )
        return all_results

    def process_batch_with_retry(
        self,
        batch: Sequence[str],
        source_language: str | None,
        target_language: str,
        options: dict | None = None,
    ) -> list[str]:
        last_exception = None

        for attempt in range(1, self.max_retries + 1):
            if attempt > 1:
                self.log.info(
                    "DeepL batch translation retry attempt %d/%d",
                    attempt,
                    self.max_retries,
                )
            try:
                results = self.provider.translate_batch(
                    list(batch), source_language, target_language, options
                )
            except deepl.DeepLException as deepl_error:
                last_exception = deepl_error

                if self.should_not_retry(deepl_error):
                    self.log.error(  # noqa: TRY400
                        "DeepL batch translation failed with non-retryable error: %s",
                        deepl_error,
                    )
                    raise

                if attempt < self.max_retries:
                    wait_time = self.calculate_backoff_time(attempt)
                    self.log.warning(
                        "DeepL batch translation failed (attempt %d/%d): %s. "
                        "Retrying in %ds...",
                        attempt,
                        self.max_retries,
                        deepl_error,
                        wait_time,
                    )
                    self.sleep(wait_time)
                else:
                    self.log.error(  # noqa: TRY400
                        "DeepL batch translation failed after %d attempts: %s",
                        self.max_retries,
                        deepl_error,
                    )
            except Exception as error:
                self.log.error(  # noqa: TRY400
                    "Unexpected error during batch translation: %s", error
                )
                raise
            else:
                if attempt > 1:
                    self.log.info(
                        "DeepL batch translation succeeded on retry attempt %d",
                        attempt,
                    )
                return results

        raise last_exception

    @staticmethod
    def should_not_retry(error: Exception) -> bool:
        """Authentication, authorization and invalid input errors are final."""
        if isinstance(error, deepl.AuthorizationException):
            return True
        message = str(error).lower()
        return any(keyword in message for keyword in DEEPL_NON_RETRYABLE_KEYWORDS)

    @staticmethod
    def calculate_backoff_time(attempt: int) -> int:
        return 2**attempt
