"""
Index file reader/writer.

The index file is plain text, one line per word:
    <word> <docId> <count> <docId> <count> ...
Fields are separated by single spaces; the word is lowercase alphabetic and
ids and counts are positive decimal integers. The writer emits words in
sorted order and pairs in ascending doc id order so output is reproducible.
"""

import logging
from pathlib import Path

from .errors import IndexFormatError
from .posting import CounterSet, InvertedIndex
from .tokenizer import is_word

logger = logging.getLogger(__name__)


def format_index_line(word: str, counters: CounterSet) -> str:
    """Render one word and its counters as an index line (no newline)."""
    fields = [word]
    for doc_id, count in sorted(counters.items()):
        fields.append(str(doc_id))
        fields.append(str(count))
    return " ".join(fields)


def save_index(index: InvertedIndex, index_path: Path | str) -> int:
    """
    Write the index to index_path, replacing any existing file.
    Returns the number of lines written. OSError propagates to the caller.
    """
    index_path = Path(index_path)
    num_lines = 0
    with open(index_path, "w", encoding="utf-8") as f:
        for word in sorted(index.words()):
            counters = index.get_counters(word)
            if not counters:
                continue
            f.write(format_index_line(word, counters) + "\n")
            num_lines += 1
    logger.info("Saved %d words to %s", num_lines, index_path)
    return num_lines


def _parse_positive_int(field: str, what: str) -> int:
    if not (field.isascii() and field.isdigit()):
        raise IndexFormatError(f"{what} {field!r} is not a decimal integer")
    value = int(field)
    if value < 1:
        raise IndexFormatError(f"{what} must be positive, got {value}")
    return value


def parse_index_line(line: str) -> tuple[str, CounterSet]:
    """
    Parse one index line into (word, counters).
    Raises IndexFormatError (without location) if the line is malformed.
    """
    fields = line.split()
    if not fields:
        raise IndexFormatError("empty line")

    word, pairs = fields[0], fields[1:]
    if not is_word(word) or word != word.lower():
        raise IndexFormatError(f"invalid word {word!r}")
    if not pairs:
        raise IndexFormatError(f"word {word!r} has no (docId, count) pairs")
    if len(pairs) % 2 != 0:
        raise IndexFormatError(f"word {word!r} has an unpaired field {pairs[-1]!r}")

    counters = CounterSet()
    for i in range(0, len(pairs), 2):
        doc_id = _parse_positive_int(pairs[i], "docId")
        count = _parse_positive_int(pairs[i + 1], "count")
        if doc_id in counters:
            raise IndexFormatError(f"duplicate docId {doc_id} for word {word!r}")
        counters.set(doc_id, count)
    return word, counters


def load_index(index_path: Path | str) -> InvertedIndex:
    """
    Read an index file written by save_index.

    Blank lines are ignored. Any malformed line, or a word that appears on
    more than one line, raises IndexFormatError, as do bytes that are not
    valid UTF-8; no partial index is returned. FileNotFoundError/OSError
    propagate unchanged.
    """
    index_path = Path(index_path)
    index = InvertedIndex()
    with open(index_path, "rb") as f:
        for line_number, raw_line in enumerate(f, start=1):
            try:
                line = raw_line.decode("utf-8")
            except UnicodeDecodeError as e:
                raise IndexFormatError(
                    f"not valid UTF-8: {e}", path=index_path, line_number=line_number
                ) from e
            if not line.strip():
                continue
            try:
                word, counters = parse_index_line(line)
            except IndexFormatError as e:
                raise IndexFormatError(
                    str(e), path=index_path, line_number=line_number
                ) from e
            if word in index:
                raise IndexFormatError(
                    f"duplicate word {word!r}", path=index_path, line_number=line_number
                )
            index.add_counters(word, counters)
    logger.info("Loaded %d words from %s", len(index), index_path)
    return index
