"""Tests for building the index from a page directory."""

import pytest

from tse.errors import PageDirectoryError
from tse.index_builder import build_index, build_index_from_directory
from tse.pagedir import PageDirectory

from conftest import write_page


def test_build_counts_words_per_document(pet_pages):
    index, num_docs = build_index_from_directory(pet_pages, text_only=True)
    assert num_docs == 3
    assert index.to_dict() == {
        "cat": {1: 2, 2: 1},
        "dog": {2: 3},
        "fish": {3: 1},
    }


def test_build_indexes_raw_body_by_default(pet_pages):
    index, _ = build_index_from_directory(pet_pages)
    assert index.count("p", 1) == 2
    assert index.count("cat", 1) == 2


def test_url_and_depth_are_not_indexed(page_dir):
    write_page(page_dir, 1, "http://example.com/zebra", "apple", depth=7)
    index, _ = build_index_from_directory(page_dir)
    assert "zebra" not in index
    assert "http" not in index
    assert index.triples() == {("apple", 1, 1)}


def test_build_stops_at_first_missing_id(page_dir):
    for doc_id in (1, 2, 3, 5):
        write_page(page_dir, doc_id, f"http://example.com/{doc_id}", f"word{doc_id} common")
    index, num_docs = build_index_from_directory(page_dir)
    assert num_docs == 3
    assert index.to_dict()["common"] == {1: 1, 2: 1, 3: 1}
    assert index.to_dict()["word"] == {1: 1, 2: 1, 3: 1}


def test_unreadable_document_is_skipped(page_dir, caplog):
    write_page(page_dir, 1, "http://example.com/1", "alpha")
    (page_dir / "2").write_text("http://example.com/2\nnot-a-depth\nbeta")
    write_page(page_dir, 3, "http://example.com/3", "gamma")
    index, num_docs = build_index_from_directory(page_dir)
    assert num_docs == 2
    assert "beta" not in index
    assert index.triples() == {("alpha", 1, 1), ("gamma", 3, 1)}
    assert "document 2" in caplog.text


def test_empty_corpus(page_dir):
    index, num_docs = build_index(PageDirectory(page_dir))
    assert num_docs == 0
    assert len(index) == 0


def test_invalid_directory_raises(tmp_path):
    with pytest.raises(PageDirectoryError):
        build_index_from_directory(tmp_path)
