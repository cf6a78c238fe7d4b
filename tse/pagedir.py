"""
Page directory reader.

The crawler saves one file per fetched page, named by its id (1, 2, 3, ...):
    line 1: URL
    line 2: depth
    rest:   page body (HTML or plain text)
and drops a `.crawler` marker file in the directory.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import DocumentError, PageDirectoryError
from .tokenizer import read_text_file

logger = logging.getLogger(__name__)

CRAWLER_MARKER = ".crawler"


@dataclass(frozen=True)
class Document:
    """One crawled page: id, source URL, crawl depth and raw body."""

    doc_id: int
    url: str
    depth: int
    body: str


class PageDirectory:
    """Document source backed by a crawler page directory."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def validate(self) -> None:
        """Raise PageDirectoryError unless this is a crawler output directory."""
        if not self.path.is_dir():
            raise PageDirectoryError(f"{self.path} is not a directory")
        if not (self.path / CRAWLER_MARKER).is_file():
            raise PageDirectoryError(
                f"{self.path} is not a crawler directory (no {CRAWLER_MARKER} file)"
            )

    def document_path(self, doc_id: int) -> Path:
        return self.path / str(doc_id)

    def load(self, doc_id: int) -> Document | None:
        """
        Load document doc_id. Returns None if there is no such file,
        which marks the end of the corpus. Raises DocumentError if the
        file exists but cannot be read or parsed.
        """
        filepath = self.document_path(doc_id)
        if not filepath.is_file():
            return None
        logger.debug("Reading %s", filepath)
        try:
            content = read_text_file(filepath)
        except (OSError, ValueError) as e:
            raise DocumentError(doc_id, f"could not read {filepath}: {e}") from e

        lines = content.split("\n", 2)
        if len(lines) < 2 or not lines[0].strip():
            raise DocumentError(doc_id, f"{filepath} has no URL/depth header")
        url = lines[0].strip()
        try:
            depth = int(lines[1].strip())
        except ValueError as e:
            raise DocumentError(
                doc_id, f"{filepath} has invalid depth {lines[1].strip()!r}"
            ) from e
        body = lines[2] if len(lines) > 2 else ""
        return Document(doc_id=doc_id, url=url, depth=depth, body=body)

    def get_url(self, doc_id: int) -> str | None:
        """Return just the URL line of a document, or None if unavailable."""
        filepath = self.document_path(doc_id)
        try:
            with open(filepath, "r", encoding="utf-8", errors="replace") as f:
                url = f.readline().strip()
        except OSError as e:
            logger.warning("Could not read URL of document %d: %s", doc_id, e)
            return None
        return url or None
