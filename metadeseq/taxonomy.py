"""Taxonomic levels and lineages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TaxonomicLevel(Enum):
    """Taxonomic ranks from domain down to strain."""

    DOMAIN = "domain"
    PHYLUM = "phylum"
    CLASS = "class"
    ORDER = "order"
    FAMILY = "family"
    GENUS = "genus"
    SPECIES = "species"
    STRAIN = "strain"

    def __str__(self) -> str:
        return self.value

    def depth(self) -> int:
        """Return the 1-based depth of this level in the hierarchy."""
        return list(TaxonomicLevel).index(self) + 1

    @classmethod
    def all_levels(cls) -> list[TaxonomicLevel]:
        """Return every level in hierarchical order."""
        return list(cls)


@dataclass
class TaxonomicLineage:
    """A lineage mapping taxonomic levels to taxon names."""

    levels: dict[TaxonomicLevel, str] = field(default_factory=dict)
    tax_id: str | None = None

    def set_level(self, level: TaxonomicLevel, name: str) -> None:
        """Set the taxon name at ``level``."""
        self.levels[level] = name

    def get_level(self, level: TaxonomicLevel) -> str | None:
        """Return the taxon name at ``level``, or None if it is not set."""
        return self.levels.get(level)

    def most_specific_level(self) -> TaxonomicLevel | None:
        """Return the deepest level that has a name, or None."""
        return next(
            (level for level in reversed(TaxonomicLevel.all_levels()) if level in self.levels),
            None,
        )

    def to_list(self) -> list[tuple[TaxonomicLevel, str]]:
        """Return the defined (level, name) pairs ordered by depth."""
        return sorted(self.levels.items(), key=lambda item: item[0].depth())

    def __str__(self) -> str:
        return "; ".join(name for _, name in self.to_list())


def parse_lineage(lineage_str: str) -> TaxonomicLineage:
    """Parse a semicolon-separated lineage, assigning parts to levels in order.

    Empty parts are skipped but still take up a level; parts beyond strain are ignored.
    """
    lineage = TaxonomicLineage()
    parts = (part.strip() for part in lineage_str.split(";"))
    for level, part in zip(TaxonomicLevel.all_levels(), parts):
        if part:
            lineage.set_level(level, part)
    return lineage