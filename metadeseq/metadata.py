"""Sample metadata: conditions and extra attributes per sample."""

from __future__ import annotations

import csv
import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_SAMPLE_HEADERS = ("sampleid", "sample")
_CONDITION_HEADERS = ("condition", "group")


class MetadataError(ValueError):
    """Raised when a metadata file is malformed."""


@dataclass
class Metadata:
    """Conditions and attributes for a collection of samples."""

    condition_map: dict[str, str] = field(default_factory=dict)
    sample_attributes: dict[str, dict[str, str]] = field(default_factory=dict)

    def add_sample(self, sample_id: str, condition: str) -> None:
        """Record the condition of a sample."""
        self.condition_map[sample_id] = condition

    def add_sample_attribute(self, sample_id: str, attribute: str, value: str) -> None:
        """Record an extra attribute for a sample."""
        self.sample_attributes.setdefault(sample_id, {})[attribute] = value

    def conditions(self) -> list[str]:
        """Return the distinct conditions, sorted."""
        return sorted(set(self.condition_map.values()))

    def sample_count(self) -> int:
        """Return the number of samples."""
        return len(self.condition_map)


def _find_column(headers: list[str], names: tuple[str, ...]) -> int | None:
    return next(
        (i for i, header in enumerate(headers) if header.strip().lower() in names),
        None,
    )


def load_metadata(path: str | os.PathLike) -> Metadata:
    """Load metadata from a CSV file with SampleID/Sample and Condition/Group columns.

    Other columns are stored as sample attributes.
    """
    with open(path, newline="", encoding="utf-8") as handle:
        rows = [row for row in csv.reader(handle) if row]

    if not rows:
        raise MetadataError(f"Metadata file '{path}' is empty")
    headers, records = rows[0], rows[1:]

    sample_col = _find_column(headers, _SAMPLE_HEADERS)
    if sample_col is None:
        raise MetadataError("Metadata CSV missing 'SampleID'/'Sample' column")
    condition_col = _find_column(headers, _CONDITION_HEADERS)
    if condition_col is None:
        raise MetadataError("Metadata CSV missing 'Condition'/'Group' column")

    metadata = Metadata()
    for line_no, record in enumerate(records, start=2):
        if len(record) != len(headers):
            raise MetadataError(
                f"Metadata row {line_no} has {len(record)} fields, expected {len(headers)}"
            )
        sample_id = record[sample_col].strip()
        condition = record[condition_col].strip()

        if not sample_id:
            logger.warning("Skipping metadata row with empty sample ID.")
            continue
        if not condition:
            logger.warning("Sample '%s' has an empty condition in metadata.", sample_id)

        metadata.add_sample(sample_id, condition)
        for i, value in enumerate(record):
            if i not in (sample_col, condition_col):
                metadata.add_sample_attribute(sample_id, headers[i], value)

    if metadata.sample_count() == 0:
        raise MetadataError(f"No valid sample entries found in metadata file '{path}'")
    return metadata