"""Basic DNA sequence helpers: base validation and reverse complement."""

from __future__ import annotations

CANONICAL_BASES = b"ACGT"

_COMPLEMENT = {ord("A"): ord("T"), ord("C"): ord("G"), ord("G"): ord("C"), ord("T"): ord("A")}
_N = ord("N")


def is_valid_base(base: int | str | bytes) -> bool:
    """Return True if ``base`` is A, C, G or T, ignoring case.

    ``base`` may be a byte value, a one-character string or a one-byte bytes object.
    """
    if isinstance(base, int):
        value = base
    elif len(base) == 1:
        value = base[0] if isinstance(base, (bytes, bytearray)) else ord(base)
    else:
        raise ValueError(f"expected a single base, got {base!r}")
    return value < 128 and chr(value).upper() in "ACGT"


def _complement(value: int) -> int:
    upper = ord(chr(value).upper()) if value < 128 else value
    return _COMPLEMENT.get(upper, _N)


def reverse_complement(dna: bytes | str) -> bytes | str:
    """Return the reverse complement of ``dna`` in upper case.

    Any base other than A, C, G or T becomes N. The result has the same type
    as the input (``str`` or ``bytes``).
    """
    if isinstance(dna, str):
        return reverse_complement(dna.encode("ascii")).decode("ascii")
    return bytes(_complement(value) for value in reversed(dna))