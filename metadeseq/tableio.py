"""Writing count tables and reading sample metadata."""

from __future__ import annotations

import csv
import os

from metadeseq.count_table import CountTable
from metadeseq.metadata import Metadata, load_metadata


def write_count_table(table: CountTable, output_path: str | os.PathLike) -> None:
    """Write ``table`` as CSV: a ``Feature`` column followed by one column per sample."""
    with open(output_path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(["Feature", *table.sample_names])
        for name, row in zip(table.feature_names, table.counts):
            writer.writerow([name, *(repr(float(value)) for value in row)])


def read_metadata(metadata_path: str | os.PathLike) -> Metadata:
    """Load sample metadata from a CSV file."""
    return load_metadata(metadata_path)