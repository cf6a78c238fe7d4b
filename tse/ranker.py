"""
Boolean ranked retrieval over an inverted index.

Within an AND-group a document scores the minimum of its counts for the
group's words (0 if any word is missing). A document's total score is the
sum of its group scores. Documents scoring 0 are not returned.
"""

from typing import NamedTuple

from .posting import InvertedIndex
from .query import Group, Query


class RankedResult(NamedTuple):
    doc_id: int
    score: int


def score_group(group: Group, index: InvertedIndex) -> dict[int, int]:
    """
    Score every document matching all words of an AND-group.
    Returns {doc_id: min count}; documents missing any word are omitted.
    """
    counter_sets = [index.get_counters(word) for word in group]
    if not counter_sets or any(len(c) == 0 for c in counter_sets):
        return {}

    # Candidates come from the smallest counter set.
    counter_sets.sort(key=len)
    scores: dict[int, int] = {}
    for doc_id in counter_sets[0].doc_ids():
        score = min(c.get(doc_id) for c in counter_sets)
        if score > 0:
            scores[doc_id] = score
    return scores


def score_documents(query: Query, index: InvertedIndex) -> dict[int, int]:
    """Sum group scores per document. Only positive totals are kept."""
    totals: dict[int, int] = {}
    for group in query:
        for doc_id, score in score_group(group, index).items():
            totals[doc_id] = totals.get(doc_id, 0) + score
    return totals


def rank(query: Query, index: InvertedIndex) -> list[RankedResult]:
    """
    Rank documents for a parsed query: highest score first, ties broken
    by ascending doc id. An empty query ranks nothing.
    """
    scores = score_documents(query, index)
    ranked = sorted(scores.items(), key=lambda x: (-x[1], x[0]))
    return [RankedResult(doc_id, score) for doc_id, score in ranked]
