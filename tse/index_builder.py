"""
Index builder: constructs the inverted index from crawled documents.
Documents are read by id starting at 1 until the first missing id.
"""

import logging
from pathlib import Path

from .errors import DocumentError
from .pagedir import Document, PageDirectory
from .posting import InvertedIndex
from .tokenizer import get_tokens_from_html, tokenize

logger = logging.getLogger(__name__)

FIRST_DOC_ID = 1


def document_tokens(document: Document, *, text_only: bool = False) -> list[str]:
    """
    Words of a document body. By default the body is tokenized verbatim
    (tag and attribute names included); text_only keeps visible text only.
    URL and depth never contribute words.
    """
    if text_only:
        return get_tokens_from_html(document.body)
    return tokenize(document.body)


def index_document(
    index: InvertedIndex,
    document: Document,
    *,
    text_only: bool = False,
) -> int:
    """Add every word occurrence of document to index. Returns the word count."""
    tokens = document_tokens(document, text_only=text_only)
    for word in tokens:
        index.increment(word, document.doc_id)
    return len(tokens)


def build_index(source, *, text_only: bool = False) -> tuple[InvertedIndex, int]:
    """
    Build an inverted index from a document source.

    source must provide load(doc_id) -> Document | None, where None means
    the document does not exist. Ids are requested from 1 upward and the
    build stops at the first missing id. A document that exists but cannot
    be read (DocumentError) is skipped with a warning and does not end
    the corpus.

    Returns (index, number of documents indexed).
    """
    index = InvertedIndex()
    num_docs = 0
    doc_id = FIRST_DOC_ID

    while True:
        try:
            document = source.load(doc_id)
        except DocumentError as e:
            logger.warning("Skipping %s", e)
            doc_id += 1
            continue
        if document is None:
            break

        num_words = index_document(index, document, text_only=text_only)
        num_docs += 1
        logger.debug("Indexed document %d (%d words): %s", doc_id, num_words, document.url)
        doc_id += 1

    logger.info("Indexed %d documents, %d unique words", num_docs, len(index))
    return index, num_docs


def build_index_from_directory(
    page_dir: Path | str,
    *,
    text_only: bool = False,
) -> tuple[InvertedIndex, int]:
    """
    Validate a crawler page directory and build the index from it.
    Raises PageDirectoryError if the directory is not crawler output.
    """
    source = PageDirectory(page_dir)
    source.validate()
    return build_index(source, text_only=text_only)
