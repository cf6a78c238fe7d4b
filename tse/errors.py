"""Exception types raised by the indexer and querier."""

from pathlib import Path


class TSEError(Exception):
    """Base class for tiny-search-engine errors."""


class PageDirectoryError(TSEError):
    """The page directory is missing or was not produced by the crawler."""


class DocumentError(TSEError):
    """A single document file could not be read or parsed."""

    def __init__(self, doc_id: int, message: str) -> None:
        super().__init__(f"document {doc_id}: {message}")
        self.doc_id = doc_id


class IndexFormatError(TSEError, ValueError):
    """
    Malformed index file. Carries the file path and the 1-based line number
    of the offending line when known.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | str | None = None,
        line_number: int | None = None,
    ) -> None:
        location = ""
        if path is not None:
            location = f"{path}:"
            if line_number is not None:
                location += f"{line_number}:"
            location += " "
        elif line_number is not None:
            location = f"line {line_number}: "
        super().__init__(location + message)
        self.path = path
        self.line_number = line_number


class QuerySyntaxError(TSEError, ValueError):
    """The query line is not a valid AND/OR query."""
