"""Reading sequence records from FASTQ files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_FASTQ_EXTENSIONS = (".fastq", ".fq")


class FastqError(ValueError):
    """Raised when no input files are found or a FASTQ record is malformed."""


@dataclass
class SequenceRecord:
    """One sequencing read."""

    id: str
    seq: str
    qual: str | None = None


def find_sequence_files(input_paths: Iterable[str | os.PathLike]) -> list[str]:
    """Return the given paths that are existing files ending in .fastq or .fq."""
    return [
        os.fspath(path)
        for path in input_paths
        if Path(path).is_file() and Path(path).suffix.lower() in _FASTQ_EXTENSIONS
    ]


def _parse_fastq(path: str) -> Iterator[SequenceRecord]:
    with open(path, encoding="utf-8", errors="replace") as handle:
        lines = (line.rstrip("\r\n") for line in handle)
        for header in lines:
            if not header.strip():
                continue
            if not header.startswith("@"):
                raise FastqError(
                    f"Failed to parse record in file {path!r}: expected '@' at record start"
                )
            fields = header[1:].split(maxsplit=1)
            record_id = fields[0] if fields else ""
            seq = next(lines, None)
            separator = next(lines, None)
            qual = next(lines, None)
            if seq is None or separator is None or qual is None:
                raise FastqError(
                    f"Failed to parse record in file {path!r}: incomplete record {record_id!r}"
                )
            if not separator.startswith("+"):
                raise FastqError(
                    f"Failed to parse record in file {path!r}: expected '+' separator"
                )
            if len(seq) != len(qual):
                raise FastqError(
                    f"Failed to parse record in file {path!r}: sequence and quality "
                    f"lengths differ for {record_id!r}"
                )
            yield SequenceRecord(id=record_id, seq=seq, qual=qual)


def iter_sequences(input_paths: Iterable[str | os.PathLike]) -> Iterator[SequenceRecord]:
    """Yield the records of every FASTQ file among ``input_paths``, in order."""
    paths = list(input_paths)
    files = find_sequence_files(paths)
    if not files:
        raise FastqError(f"No sequence files found in the provided paths: {paths!r}")
    logger.info("Reading sequences from %d file(s).", len(files))
    for path in files:
        yield from _parse_fastq(path)


def read_sequences(input_paths: Iterable[str | os.PathLike]) -> list[SequenceRecord]:
    """Read every record of every FASTQ file among ``input_paths`` into a list."""
    records = list(iter_sequences(input_paths))
    logger.info("Finished reading %d sequences.", len(records))
    return records