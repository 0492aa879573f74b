"""K-mer extraction and counting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from metadeseq.sequence import is_valid_base, reverse_complement


def _as_bytes(sequence: bytes | str) -> bytes:
    return sequence.encode("ascii") if isinstance(sequence, str) else bytes(sequence)


def _windows(seq: bytes, k: int) -> Iterator[bytes]:
    if k <= 0 or len(seq) < k:
        return
    for start in range(len(seq) - k + 1):
        yield seq[start:start + k]


def _canonical(kmer: bytes) -> bytes:
    rc = reverse_complement(kmer)
    return kmer if kmer < rc else rc


def _restore_type(counts: Counter, as_str: bool) -> Counter:
    if not as_str:
        return counts
    return Counter({key.decode("ascii"): value for key, value in counts.items()})


def canonical_kmers(sequence: bytes | str, k: int) -> Iterator[bytes | str]:
    """Yield the canonical form of each k-mer in ``sequence``.

    The canonical form is the lexicographically smaller of a k-mer and its
    reverse complement. K-mers holding any base other than A, C, G or T are
    skipped.
    """
    as_str = isinstance(sequence, str)
    for kmer in _windows(_as_bytes(sequence), k):
        if not all(is_valid_base(b) for b in kmer):
            continue
        canonical = _canonical(kmer)
        yield canonical.decode("ascii") if as_str else canonical


def count_canonical_kmers(sequence: bytes | str, k: int) -> Counter:
    """Count canonical k-mers in one sequence, skipping k-mers containing N."""
    counts: Counter = Counter()
    for kmer in _windows(_as_bytes(sequence), k):
        if b"N" in kmer or b"n" in kmer:
            continue
        counts[_canonical(kmer)] += 1
    return _restore_type(counts, isinstance(sequence, str))


def process_sequences(sequences: Iterable[bytes | str], k: int) -> Counter:
    """Total the canonical k-mer counts over many sequences."""
    total: Counter = Counter()
    for sequence in sequences:
        total.update(count_canonical_kmers(sequence, k))
    return total


@dataclass
class KmerExtractor:
    """Configurable k-mer counter."""

    k: int
    canonical: bool = True
    skip_invalid: bool = True

    def count_kmers(self, seq: bytes | str) -> Counter:
        """Count the k-mers in ``seq`` according to the extractor's settings."""
        counts: Counter = Counter()
        for kmer in _windows(_as_bytes(seq), self.k):
            if self.skip_invalid and not all(is_valid_base(b) for b in kmer):
                continue
            counts[_canonical(kmer) if self.canonical else kmer] += 1
        return _restore_type(counts, isinstance(seq, str))