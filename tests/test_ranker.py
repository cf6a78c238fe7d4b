"""Tests for AND/OR scoring and ranking."""

from tse.posting import InvertedIndex
from tse.query import parse_query
from tse.ranker import rank, score_documents, score_group


def test_and_takes_minimum(pet_index):
    assert rank(parse_query("cat and dog"), pet_index) == [(2, 1)]


def test_or_sums_groups(pet_index):
    assert rank(parse_query("cat or dog"), pet_index) == [(2, 4), (1, 2)]


def test_single_word(pet_index):
    results = rank(parse_query("cat"), pet_index)
    assert [(r.doc_id, r.score) for r in results] == [(1, 2), (2, 1)]


def test_unknown_word_contributes_nothing(pet_index):
    assert rank(parse_query("cat and zebra"), pet_index) == []
    assert rank(parse_query("zebra or dog"), pet_index) == [(2, 3)]
    assert rank(parse_query("zebra"), pet_index) == []


def test_empty_query_ranks_nothing(pet_index):
    assert rank(parse_query(""), pet_index) == []


def test_ties_broken_by_doc_id():
    index = InvertedIndex.from_dict({"cat": {7: 2, 3: 2, 5: 4}})
    assert rank(parse_query("cat"), index) == [(5, 4), (3, 2), (7, 2)]


def test_repeated_group_counts_twice(pet_index):
    assert score_documents(parse_query("dog or dog"), pet_index) == {2: 6}


def test_score_group(pet_index):
    assert score_group(("cat",), pet_index) == {1: 2, 2: 1}
    assert score_group(("cat", "dog"), pet_index) == {2: 1}
    assert score_group(("cat", "zebra"), pet_index) == {}
