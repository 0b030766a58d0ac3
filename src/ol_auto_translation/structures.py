"""Value types passed between the translation pipeline components."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AttributeRef:
    """Reference to one attribute of one record."""

    record: Any
    attribute: str

    def describe(self) -> str:
        return f"{type(self.record).__name__}#{self.record.pk}.{self.attribute}"


@dataclass(frozen=True)
class TranslationUnit:
    """
    One piece of source text scheduled for translation.

    ``origin_index`` is the position of the unit in the collected list, and
    ``origin_ref`` points back to where the translation must be written
    (an ``AttributeRef`` or a message).
    """

    source_text: str
    origin_index: int
    origin_ref: Any


@dataclass(frozen=True)
class MappedResult:
    """A translated text paired with the origin it belongs to."""

    origin_ref: Any
    translated_text: str


@dataclass
class TranslationStats:
    """Counters accumulated during a single translation run."""

    translated: int = 0
    skipped_empty: int = 0
    skipped_existing: int = 0
    failed: int = 0

    def merge(self, other: "TranslationStats") -> None:
        self.translated += other.translated
        self.skipped_empty += other.skipped_empty
        self.skipped_existing += other.skipped_existing
        self.failed += other.failed

    def as_dict(self) -> dict[str, int]:
        return {
            "translated": self.translated,
            "skipped_empty": self.skipped_empty,
            "skipped_existing": self.skipped_existing,
            "failed": self.failed,
        }


@dataclass
class Collection:
    """Units gathered by the batch collector plus the skip counters."""

    units: list[TranslationUnit] = field(default_factory=list)
    stats: TranslationStats = field(default_factory=TranslationStats)

    @property
    def texts(self) -> list[str]:
        return [unit.source_text for unit in self.units]


@dataclass
class TranslationReport:
    """
    Structured outcome of one run for one target locale.

    ``count`` holds the number of records (models) or messages that received
    at least one successful write.
    """

    kind: str
    source_locale: str
    target_locale: str
    model_name: str = ""
    stats: TranslationStats = field(default_factory=TranslationStats)
    count: int = 0
    batches: int = 0
    failures: list[dict[str, str]] = field(default_factory=list)

    def add_failure(self, origin: str, error: Exception | str) -> None:
        self.failures.append({"origin": origin, "error": str(error)})

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "model_name": self.model_name,
            "source_locale": self.source_locale,
            "target_locale": self.target_locale,
            "count": self.count,
            "batches": self.batches,
            "stats": self.stats.as_dict(),
            "failures": list(self.failures),
        }
