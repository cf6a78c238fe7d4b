"""
Counter set and inverted index data structures.

A counter set maps a document id to the number of times a word occurs in
that document. The inverted index maps each word to its counter set.
"""

from typing import Iterator


class CounterSet:
    """
    Mapping doc_id -> occurrence count. Every stored count is >= 1;
    a missing doc_id reads as 0.
    """

    def __init__(self, counts: dict[int, int] | None = None) -> None:
        self._counts: dict[int, int] = {}
        if counts:
            for doc_id, count in counts.items():
                self.set(doc_id, count)

    def increment(self, doc_id: int) -> int:
        """Add one occurrence for doc_id and return the new count."""
        count = self._counts.get(doc_id, 0) + 1
        self._counts[doc_id] = count
        return count

    def get(self, doc_id: int) -> int:
        return self._counts.get(doc_id, 0)

    def set(self, doc_id: int, count: int) -> None:
        if doc_id < 1:
            raise ValueError(f"doc_id must be positive, got {doc_id}")
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        self._counts[doc_id] = count

    def doc_ids(self) -> Iterator[int]:
        return iter(self._counts)

    def items(self) -> Iterator[tuple[int, int]]:
        """Iterate over (doc_id, count) pairs in insertion order."""
        return iter(self._counts.items())

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._counts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CounterSet):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"CounterSet({self._counts!r})"


class InvertedIndex:
    """
    Inverted index: map from word -> counter set.
    Populated by increments while building, read-only afterwards.
    """

    def __init__(self) -> None:
        self._index: dict[str, CounterSet] = {}

    def increment(self, word: str, doc_id: int) -> int:
        """Count one more occurrence of word in doc_id."""
        counters = self._index.get(word)
        if counters is None:
            counters = CounterSet()
            self._index[word] = counters
        return counters.increment(doc_id)

    def add_counters(self, word: str, counters: CounterSet) -> None:
        """Attach a complete counter set to a word not yet in the index."""
        if word in self._index:
            raise KeyError(f"duplicate word in index: {word!r}")
        self._index[word] = counters

    def get_counters(self, word: str) -> CounterSet:
        """Return the counter set for a word, or an empty one."""
        return self._index.get(word, CounterSet())

    def count(self, word: str, doc_id: int) -> int:
        counters = self._index.get(word)
        return counters.get(doc_id) if counters is not None else 0

    def words(self) -> Iterator[str]:
        """Iterate over all words in the index."""
        return iter(self._index)

    def triples(self) -> set[tuple[str, int, int]]:
        """Return the index contents as a set of (word, doc_id, count)."""
        return {
            (word, doc_id, count)
            for word, counters in self._index.items()
            for doc_id, count in counters.items()
        }

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvertedIndex):
            return NotImplemented
        return self.triples() == other.triples()

    @classmethod
    def from_dict(cls, data: dict[str, dict[int, int]]) -> "InvertedIndex":
        """Build an index from a plain {word: {doc_id: count}} mapping."""
        index = cls()
        for word, counts in data.items():
            index.add_counters(word, CounterSet(counts))
        return index

    def to_dict(self) -> dict[str, dict[int, int]]:
        """Return a plain {word: {doc_id: count}} copy of the index."""
        return {
            word: dict(counters.items())
            for word, counters in self._index.items()
        }
