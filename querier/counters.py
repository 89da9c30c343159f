"""
Sparse score sets keyed by document ID.

A ScoreSet maps a positive document ID to a non-negative count. Reading an
absent key yields 0. Entries whose count is 0 are allowed to stay in the set:
a failed intersection zero-fills the running result instead of deleting its
keys, and the ranker is the one that drops zero scores.
"""

from typing import Callable, Dict, Iterator, Tuple


class ScoreSet:
    """A sparse docID -> count mapping with default-zero reads."""

    def __init__(self, counts: Dict[int, int] = None):
        self._counts = {}
        if counts:
            for key, count in counts.items():
                self.set(key, count)

    def get(self, key: int) -> int:
        return self._counts.get(key, 0)

    def set(self, key: int, count: int) -> None:
        """
        Store count for key, replacing any previous value.

        Raises:
            ValueError: If key is not a positive integer or count is negative.
        """
        if key < 1:
            raise ValueError(f"document ID must be positive, got {key}")
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self._counts[key] = count

    def iterate(self, visitor: Callable[[int, int], None]) -> None:
        """Call visitor(key, count) once per entry, zero counts included."""
        # Snapshot so visitors may write back into this same set.
        for key, count in list(self._counts.items()):
            visitor(key, count)

    def items(self) -> Iterator[Tuple[int, int]]:
        return iter(self._counts.items())

    def keys(self):
        return self._counts.keys()

    def copy(self) -> 'ScoreSet':
        duplicate = ScoreSet()
        copy_into(duplicate, self)
        return duplicate

    def __contains__(self, key) -> bool:
        return key in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ScoreSet):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"ScoreSet({dict(sorted(self._counts.items()))})"


def copy_into(dest: ScoreSet, src: ScoreSet) -> None:
    """Write every entry of src into dest."""
    src.iterate(dest.set)


def intersect(dest: ScoreSet, src: ScoreSet) -> None:
    """
    Intersect dest with src in place.

    Every key already in dest gets min(dest[key], src[key]); keys that only
    exist in src are never added.
    """
    def visit(key, count):
        dest.set(key, min(count, src.get(key)))
    dest.iterate(visit)


def union(dest: ScoreSet, src: ScoreSet) -> None:
    """
    Union src into dest in place.

    Every key in src has its count added to dest[key]; keys only in dest keep
    their score.
    """
    def visit(key, count):
        dest.set(key, dest.get(key) + count)
    src.iterate(visit)


def zero_fill(dest: ScoreSet) -> None:
    """Set every count in dest to 0 while keeping the keys."""
    dest.iterate(lambda key, _count: dest.set(key, 0))
