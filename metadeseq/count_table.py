"""Count tables: features (rows) by samples (columns)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import numpy as np


class CountTableError(ValueError):
    """Raised when count data is inconsistent."""


@dataclass
class CountTable:
    """A matrix of counts with named features (rows) and samples (columns)."""

    counts: np.ndarray = field(default_factory=lambda: np.zeros((0, 0)))
    feature_names: list[str] = field(default_factory=list)
    sample_names: list[str] = field(default_factory=list)
    feature_map: dict[str, int] = field(init=False, repr=False)
    sample_map: dict[str, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.counts = np.asarray(self.counts, dtype=float)
        if self.counts.ndim != 2:
            raise CountTableError("count matrix must be two-dimensional")
        n_features, n_samples = self.counts.shape
        if n_features != len(self.feature_names) or n_samples != len(self.sample_names):
            raise CountTableError(
                f"count matrix shape {self.counts.shape} does not match "
                f"{len(self.feature_names)} features and {len(self.sample_names)} samples"
            )
        self.feature_map = {name: i for i, name in enumerate(self.feature_names)}
        self.sample_map = {name: i for i, name in enumerate(self.sample_names)}
        if len(self.feature_map) != len(self.feature_names):
            raise CountTableError("duplicate feature names")
        if len(self.sample_map) != len(self.sample_names):
            raise CountTableError("duplicate sample names")

    @classmethod
    def from_data(cls, data: Mapping[str, Mapping[str, float]]) -> CountTable:
        """Build a table from ``{sample: {feature: count}}``.

        Samples keep the mapping's order; features appear in first-seen order.
        """
        table = cls()
        for sample_name, sample_counts in data.items():
            table.add_sample(sample_name, sample_counts)
        return table

    def add_sample(self, sample_name: str, sample_counts: Mapping[str, float]) -> None:
        """Add a sample column; unseen features become new rows of zeros."""
        if sample_name in self.sample_map:
            raise CountTableError(f"sample '{sample_name}' already exists")
        for feature in sample_counts:
            if feature not in self.feature_map:
                self.feature_map[feature] = len(self.feature_names)
                self.feature_names.append(feature)

        old_features, old_samples = self.counts.shape
        grown = np.zeros((len(self.feature_names), old_samples + 1))
        grown[:old_features, :old_samples] = self.counts
        for feature, value in sample_counts.items():
            grown[self.feature_map[feature], old_samples] = float(value)

        self.counts = grown
        self.sample_map[sample_name] = old_samples
        self.sample_names.append(sample_name)

    def feature_counts(self, feature_name: str) -> np.ndarray | None:
        """Return the row of counts for a feature, or None if it is absent."""
        index = self.feature_map.get(feature_name)
        return None if index is None else self.counts[index, :]

    def sample_counts(self, sample_name: str) -> np.ndarray | None:
        """Return the column of counts for a sample, or None if it is absent."""
        index = self.sample_map.get(sample_name)
        return None if index is None else self.counts[:, index]

    def dimensions(self) -> tuple[int, int]:
        """Return (number of features, number of samples)."""
        rows, cols = self.counts.shape
        return rows, cols