"""Labeled corpus entries used for nearest-neighbour retrieval."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ..exceptions import DatasetValidationError
from .classification import Category, Energy, ExampleSource


@dataclass(frozen=True)
class TrainingExample:
    """A single immutable labeled journal entry."""

    id: str
    version: int
    text: str
    expected_category: Category
    expected_mood: str
    expected_energy: Energy
    confidence_range: tuple[int, int]
    business_context: str = ""
    source: ExampleSource = ExampleSource.HANDWRITTEN

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TrainingExample":
        """Build an example from a raw record.

        Enumerated fields are parsed leniently; unknown values are kept as
        raw strings so that validate_dataset can report them with the id.
        """
        category = data.get("expected_category")
        energy = data.get("expected_energy")
        source = data.get("source") or ExampleSource.HANDWRITTEN.value
        bounds = tuple(data.get("confidence_range") or ())
        if len(bounds) != 2:
            raise DatasetValidationError(f"Bad confidence_range in {data.get('id')}")
        low, high = bounds
        return cls(
            id=str(data.get("id") or ""),
            version=data.get("version", 1),
            text=data.get("text") or "",
            expected_category=Category.from_string(category) or category,
            expected_mood=data.get("expected_mood") or "",
            expected_energy=Energy.from_string(energy) or energy,
            confidence_range=(low, high),
            business_context=data.get("business_context") or "",
            source=ExampleSource.from_string(source) or source,
        )


def validate_dataset(examples: Iterable[TrainingExample]) -> list[TrainingExample]:
    """Check every corpus invariant, failing on the first violation.

    Args:
        examples: Corpus entries to check

    Returns:
        The examples as a list, in their original order

    Raises:
        DatasetValidationError: On a duplicate id, unknown enum value,
            malformed confidence range, empty text or version below 1

    """
    seen: set[str] = set()
    checked = list(examples)

    for ex in checked:
        if not ex.id:
            raise DatasetValidationError(f"Missing id for: {ex.text[:60]!r}")
        if ex.id in seen:
            raise DatasetValidationError(f"Duplicate id: {ex.id}")
        seen.add(ex.id)

        if not isinstance(ex.expected_category, Category):
            raise DatasetValidationError(
                f"Bad category {ex.expected_category!r} in {ex.id}"
            )
        if not isinstance(ex.expected_energy, Energy):
            raise DatasetValidationError(
                f"Bad energy {ex.expected_energy!r} in {ex.id}"
            )
        if not isinstance(ex.source, ExampleSource):
            raise DatasetValidationError(f"Bad source {ex.source!r} in {ex.id}")

        low, high = ex.confidence_range
        if not (0 <= low <= high <= 100):
            raise DatasetValidationError(f"Bad confidence_range in {ex.id}")

        if not isinstance(ex.version, int) or ex.version < 1:
            raise DatasetValidationError(f"Invalid version {ex.version!r} in {ex.id}")

        if not ex.text or not ex.text.strip():
            raise DatasetValidationError(f"Empty text content in {ex.id}")

    return checked
