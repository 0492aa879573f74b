"""Normalisation of count tables across samples."""

from __future__ import annotations

import logging
import statistics

import numpy as np

from metadeseq.count_table import CountTable

logger = logging.getLogger(__name__)


class NormalizationError(ValueError):
    """Raised when a normalisation method is unknown or cannot be applied."""


def normalize(table: CountTable, method: str) -> None:
    """Normalise ``table`` in place with the named method.

    Supported methods are ``median-of-ratios`` (alias ``deseq2``), ``cpm``,
    ``tpm`` and ``none``; names are case-insensitive.
    """
    key = method.lower()
    if key in ("median-of-ratios", "deseq2"):
        normalize_median_of_ratios(table)
    elif key == "tpm":
        normalize_tpm(table)
    elif key == "cpm":
        normalize_cpm(table)
    elif key == "none":
        logger.warning("No normalization applied.")
    else:
        raise NormalizationError(f"Unsupported normalization method: {method}")


def _pseudo_reference(counts: np.ndarray) -> np.ndarray:
    """Geometric mean of each feature's positive counts; zero if it has none."""
    positive = counts > 0
    logs = np.where(positive, np.log(np.where(positive, counts, 1.0)), 0.0)
    n_positive = positive.sum(axis=1)
    reference = np.zeros(counts.shape[0])
    has_counts = n_positive > 0
    reference[has_counts] = np.exp(logs[has_counts].sum(axis=1) / n_positive[has_counts])
    return reference


def _size_factor(column: np.ndarray, reference: np.ndarray, sample_name: str) -> float:
    usable = (column > 0) & (reference > 0)
    if not usable.any():
        logger.warning(
            "Sample %s has no features with positive counts common with the "
            "pseudo-reference. Setting size factor to 1.0.",
            sample_name,
        )
        return 1.0
    factor = float(statistics.median((column[usable] / reference[usable]).tolist()))
    if factor <= 0.0 or not np.isfinite(factor):
        logger.warning(
            "Calculated non-positive or non-finite size factor (%s) for sample %s. "
            "Setting to 1.0.",
            factor,
            sample_name,
        )
        return 1.0
    return factor


def normalize_median_of_ratios(table: CountTable) -> None:
    """Divide each sample by the median ratio of its counts to a pseudo-reference.

    The pseudo-reference of a feature is the geometric mean of its positive
    counts across samples.
    """
    counts = table.counts
    n_features, n_samples = counts.shape
    if n_features == 0 or n_samples == 0:
        logger.warning("Count table is empty, skipping median-of-ratios normalization.")
        return

    reference = _pseudo_reference(counts)
    factors = [
        _size_factor(counts[:, c], reference, name)
        for c, name in enumerate(table.sample_names)
    ]
    table.counts = counts / np.asarray(factors)


def normalize_cpm(table: CountTable) -> None:
    """Scale each sample to counts per million; samples with no counts become zeros."""
    counts = table.counts
    totals = counts.sum(axis=0)
    if np.any(totals <= 0):
        logger.warning(
            "Some samples have zero or negative total counts. "
            "CPM normalization might produce NaNs or Infs."
        )
    scale = np.zeros_like(totals)
    positive = totals > 0
    scale[positive] = 1_000_000.0 / totals[positive]
    table.counts = counts * scale


def normalize_tpm(table: CountTable) -> None:
    """Transcripts per million needs feature lengths, which a count table lacks."""
    raise NormalizationError(
        "TPM normalization requires feature lengths, which the count table "
        f"({table.dimensions()[0]} features) does not provide."
    )