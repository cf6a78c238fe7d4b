"""
Indexer: build the inverted index for a crawler page directory and save it.

Usage:
    python build_index.py <pageDirectory> <indexFilename> [--text-only]

The page directory must have been produced by the crawler (it holds a
.crawler marker and files named 1, 2, 3, ...). Documents are read in id
order until the first missing id.

Output:
  - <indexFilename>  one line per word: "<word> <docId> <count> ..."
  - Summary table printed to console
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable

from tse.errors import PageDirectoryError
from tse.index_builder import build_index_from_directory
from tse.index_file import save_index
from tse.search_cli import configure_logging


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Tiny search engine indexer.")
    parser.add_argument(
        "page_directory",
        type=Path,
        help="Directory of crawled pages (must contain a .crawler file).",
    )
    parser.add_argument(
        "index_filename",
        type=Path,
        help="Output path for the index file.",
    )
    parser.add_argument(
        "--text-only",
        action="store_true",
        help="Index only visible page text instead of the raw body (tags included).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every document read to stderr.",
    )
    try:
        args = parser.parse_args(list(argv) if argv is not None else None)
    except SystemExit as e:
        return 0 if e.code == 0 else 1
    configure_logging(args.verbose)

    try:
        index, num_docs = build_index_from_directory(
            args.page_directory,
            text_only=args.text_only,
        )
    except PageDirectoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        save_index(index, args.index_filename)
    except OSError as e:
        print(f"Error: could not write {args.index_filename}: {e}", file=sys.stderr)
        return 1

    index_size_kb = args.index_filename.stat().st_size / 1024

    print()
    print("| Metric                      | Value |")
    print("|-----------------------------|-------|")
    print(f"| Number of indexed documents | {num_docs} |")
    print(f"| Number of unique words      | {len(index)} |")
    print(f"| Total size of index (KB)    | {index_size_kb:.2f} |")
    print()
    print(f"Index saved to: {args.index_filename}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
