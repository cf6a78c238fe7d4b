"""
Querier: answers AND/OR queries against a saved index.

Reads one query per line from standard input until end of input and prints
the matching documents ranked by score, with their URLs from the crawler's
page directory.

Usage (from repo root, after building the index):
    python -m tse.search_cli data/letters data/letters.index < queries.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, TextIO

from .errors import IndexFormatError, PageDirectoryError, QuerySyntaxError
from .index_file import load_index
from .pagedir import PageDirectory
from .posting import InvertedIndex
from .query import format_query, parse_query
from .ranker import RankedResult, rank

logger = logging.getLogger(__name__)

PROMPT = "Query? "
SEPARATOR = "-" * 45

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def configure_logging(verbose: bool = False) -> None:
    """Send diagnostics to stderr; results stay on stdout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
    )


def print_results(
    results: list[RankedResult],
    pages: PageDirectory,
    out: TextIO,
    limit: int | None = None,
) -> None:
    """Print ranked results with each document's URL."""
    if not results:
        print("No documents match.", file=out)
    else:
        print(f"Matches {len(results)} documents (ranked):", file=out)
        shown = results if limit is None else results[:limit]
        for result in shown:
            url = pages.get_url(result.doc_id) or f"<doc {result.doc_id}>"
            print(f"score {result.score:3d} doc {result.doc_id:3d}: {url}", file=out)
    print(SEPARATOR, file=out)


def answer_query(
    raw_query: str,
    index: InvertedIndex,
    pages: PageDirectory,
    out: TextIO,
    limit: int | None = None,
) -> list[RankedResult]:
    """
    Parse, rank and print one query line. QuerySyntaxError propagates.
    An empty line prints nothing and returns no results.
    """
    query = parse_query(raw_query)
    if not query:
        return []
    print(f"Query: {format_query(query)}", file=out)
    results = rank(query, index)
    logger.debug("%d documents match %r", len(results), format_query(query))
    print_results(results, pages, out, limit=limit)
    return results


def run_search_loop(
    index: InvertedIndex,
    pages: PageDirectory,
    *,
    stream: TextIO | None = None,
    out: TextIO | None = None,
    limit: int | None = None,
    interactive: bool | None = None,
) -> int:
    """
    Read queries line by line until end of input. A malformed query is
    reported and skipped. Returns the number of queries answered.
    Ctrl+C ends the loop like end of input.
    Read failures (OSError, UnicodeDecodeError) propagate.
    """
    stream = stream if stream is not None else sys.stdin
    out = out if out is not None else sys.stdout
    if interactive is None:
        interactive = stream.isatty()

    answered = 0
    while True:
        if interactive:
            print(PROMPT, end="", file=out, flush=True)
        try:
            line = stream.readline()
        except KeyboardInterrupt:
            line = ""
        if not line:
            if interactive:
                print(file=out)
            break
        try:
            answer_query(line, index, pages, out, limit=limit)
        except QuerySyntaxError as e:
            print(f"Error: {e}", file=sys.stderr)
            continue
        if line.strip():
            answered += 1
    return answered


def positive_int(value: str) -> int:
    """argparse type for options that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Tiny search engine querier.")
    parser.add_argument(
        "page_directory",
        type=Path,
        help="Directory of crawled pages (must contain a .crawler file).",
    )
    parser.add_argument(
        "index_filename",
        type=Path,
        help="Index file written by the indexer.",
    )
    parser.add_argument(
        "--limit",
        type=positive_int,
        default=None,
        help="Print at most this many results per query.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug diagnostics to stderr.",
    )
    try:
        args = parser.parse_args(list(argv) if argv is not None else None)
    except SystemExit as e:
        return 0 if e.code == 0 else 1
    configure_logging(args.verbose)

    pages = PageDirectory(args.page_directory)
    try:
        pages.validate()
        index = load_index(args.index_filename)
    except (PageDirectoryError, IndexFormatError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        run_search_loop(index, pages, limit=args.limit)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: failed reading queries: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
