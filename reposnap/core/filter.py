"""
Selection of tree entries for extraction.
"""

from typing import Iterable, Iterator, Sequence

from ..models import FilterCriteria, TreeEntry


class FilterEngine:
    """Applies ``FilterCriteria`` to tree entries."""

    def __init__(self, criteria: FilterCriteria):
        self.criteria = criteria

    @classmethod
    def for_suffixes(cls, suffixes: Sequence[str]) -> "FilterEngine":
        return cls(FilterCriteria(suffixes=tuple(suffixes)))

    def should_include_entry(self, entry: TreeEntry) -> bool:
        return self.criteria.matches_path(entry.path)

    def select(self, entries: Iterable[TreeEntry]) -> Iterator[TreeEntry]:
        """Lazily yield matching entries, preserving traversal order."""

        for entry in entries:
            if self.should_include_entry(entry):
                yield entry


__all__ = [
    "FilterEngine",
]
