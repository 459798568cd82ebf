"""Scanner result types.

A PackSummary is built fresh on each inspection and never persisted.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from mcpack.elements import ELEMENT_TYPES
from mcpack.models.manifest import BlockPattern, Feature, Overlay


@dataclass
class NamespaceCounts:
    """Element tally for one namespace.

    Counts are keyed by element type name ("function", "recipe", ...).

    Invariants:
        - counts only holds positive values
        - has_content is False iff no count is positive and world_gen is unset
    """
    counts: Counter[str] = field(default_factory=Counter)
    world_gen: bool = False

    def add(self, element_type: str) -> None:
        self.counts[element_type] += 1

    def get(self, element_type: str) -> int:
        return self.counts.get(element_type, 0)

    @property
    def functions(self) -> int:
        return self.get("function")

    @property
    def advancements(self) -> int:
        return self.get("advancement")

    @property
    def recipes(self) -> int:
        return self.get("recipe")

    @property
    def loot_tables(self) -> int:
        return self.get("loot_table")

    @property
    def predicates(self) -> int:
        return self.get("predicate")

    @property
    def tags(self) -> int:
        return self.get("tag")

    @property
    def has_content(self) -> bool:
        return self.world_gen or any(count > 0 for count in self.counts.values())

    def ordered_counts(self) -> list[tuple[str, int]]:
        """Nonzero counts in catalog order."""
        return [
            (element.name, self.counts[element.name])
            for element in ELEMENT_TYPES
            if self.counts.get(element.name, 0) > 0
        ]


@dataclass
class PackSummary:
    """Everything `info` reports about a pack.

    Invariants:
        - namespaces only holds entries whose has_content is True
        - supported_formats is never empty
    """
    name: str
    description: str
    pack_format: int
    supported_formats: list[int]
    namespaces: dict[str, NamespaceCounts] = field(default_factory=dict)
    features: list[Feature] = field(default_factory=list)
    block_patterns: list[BlockPattern] = field(default_factory=list)
    overlays: list[Overlay] = field(default_factory=list)
