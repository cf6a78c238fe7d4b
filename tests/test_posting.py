"""Tests for counter sets and the inverted index."""

import pytest

from tse.posting import CounterSet, InvertedIndex


def test_counter_set_increment_and_get():
    counters = CounterSet()
    assert counters.get(1) == 0
    assert counters.increment(1) == 1
    assert counters.increment(1) == 2
    assert counters.get(1) == 2
    assert 1 in counters
    assert 2 not in counters
    assert len(counters) == 1


@pytest.mark.parametrize("doc_id, count", [(0, 1), (1, 0), (-1, 3), (2, -5)])
def test_counter_set_rejects_non_positive(doc_id, count):
    with pytest.raises(ValueError):
        CounterSet().set(doc_id, count)


def test_index_increment_creates_entries():
    index = InvertedIndex()
    index.increment("cat", 1)
    index.increment("cat", 1)
    index.increment("cat", 3)
    assert "cat" in index
    assert index.count("cat", 1) == 2
    assert index.count("cat", 3) == 1
    assert index.count("cat", 2) == 0
    assert index.triples() == {("cat", 1, 2), ("cat", 3, 1)}


def test_unknown_word_has_empty_counters():
    index = InvertedIndex()
    assert len(index.get_counters("nothing")) == 0
    assert index.count("nothing", 1) == 0
    assert "nothing" not in index


def test_index_equality_ignores_insertion_order():
    a = InvertedIndex.from_dict({"cat": {1: 2, 2: 1}, "dog": {2: 3}})
    b = InvertedIndex.from_dict({"dog": {2: 3}, "cat": {2: 1, 1: 2}})
    assert a == b
    assert a.to_dict() == {"cat": {1: 2, 2: 1}, "dog": {2: 3}}


def test_add_counters_rejects_duplicate_word():
    index = InvertedIndex.from_dict({"cat": {1: 1}})
    with pytest.raises(KeyError):
        index.add_counters("cat", CounterSet({2: 1}))
