"""Base class for batch translation strategies."""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class BatchStrategy(ABC):
    """
    Splits texts into provider-sized batches and submits them.

    Providers differ in how many texts one request may carry and in which
    errors are worth retrying.
    """

    @abstractmethod
    def get_max_batch_size(self) -> int:
        """Return the maximum number of texts per batch."""

    @abstractmethod
    def create_batches(self, items: Sequence) -> list[list]:
        """Split items into contiguous batches."""

    @abstractmethod
    def process_batch(
        self,
        batch: Sequence[str],
        source_language: str | None,
        target_language: str,
        options: dict | None = None,
    ) -> list[str]:
        """Translate one batch, returning results in submission order."""

    @abstractmethod
    def is_valid_batch_size(self, size: int) -> bool:
        """Return True if a batch of ``size`` texts may be submitted."""
