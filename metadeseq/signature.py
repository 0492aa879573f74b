"""Sketch signatures: collections of k-mer hash values with Jaccard comparison."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class SignatureError(ValueError):
    """Raised when signatures cannot be combined or compared."""


@dataclass
class Signature:
    """A set of hash values summarising a sequence or dataset."""

    algorithm: str
    kmer_size: int
    num_hashes: int
    hashes: list[int] = field(default_factory=list)
    name: str | None = None
    filename: str | None = None

    def add_hash(self, value: int) -> None:
        """Append ``value`` unless the signature is already at capacity."""
        if len(self.hashes) < self.num_hashes:
            self.hashes.append(value)
        else:
            logger.warning(
                "Signature hash capacity (%d) reached. Ignoring new hash %d.",
                self.num_hashes,
                value,
            )

    def _check_compatible(self, other: Signature, action: str) -> None:
        if self.algorithm != other.algorithm or self.kmer_size != other.kmer_size:
            raise SignatureError(
                f"Cannot {action} signatures with different algorithms or k-mer sizes."
            )

    def merge(self, other: Signature) -> None:
        """Merge ``other`` into this signature.

        The hash sets are united and the smallest ``num_hashes`` values are kept.
        """
        self._check_compatible(other, "merge")
        union = sorted(set(self.hashes) | set(other.hashes))
        self.hashes = union[: self.num_hashes]

    def jaccard(self, other: Signature) -> float:
        """Return |intersection| / |union| of the two hash sets."""
        self._check_compatible(other, "compare")
        if self.num_hashes != other.num_hashes:
            logger.warning(
                "Comparing signatures with different numbers of hashes (%d vs %d). "
                "Jaccard estimate might be less accurate.",
                self.num_hashes,
                other.num_hashes,
            )
        if not self.hashes and not other.hashes:
            return 1.0
        if not self.hashes or not other.hashes:
            return 0.0
        mine, theirs = set(self.hashes), set(other.hashes)
        union = mine | theirs
        if not union:
            return 1.0
        return len(mine & theirs) / len(union)