"""Metagenomic count processing: k-mers, signatures, lineages, count tables, normalization and FASTQ input."""

__version__ = "0.1.0"

__all__ = [
    "sequence",
    "kmers",
    "taxonomy",
    "signature",
    "count_table",
    "metadata",
    "normalization",
    "fastq",
    "tableio",
]