"""
Query parser.

A query is a sequence of words separated by whitespace. Adjacent words are
implicitly AND'ed; the word "and" may be written between them and is
dropped. The word "or" separates AND-groups. Connectors are case-insensitive.

    "cat and dog or fish"  ->  (("cat", "dog"), ("fish",))
"""

from .errors import QuerySyntaxError
from .tokenizer import normalize

AND = "and"
OR = "or"
CONNECTORS = (AND, OR)

Group = tuple[str, ...]
Query = tuple[Group, ...]


def _check_characters(token: str) -> None:
    for ch in token:
        if not (ch.isascii() and ch.isalpha()):
            raise QuerySyntaxError(f"invalid character {ch!r} in query")


def split_query(raw_query: str) -> list[str]:
    """
    Split a query line on whitespace and normalize every token.
    Raises QuerySyntaxError on any non-alphabetic character.
    """
    tokens = raw_query.split()
    for token in tokens:
        _check_characters(token)
    return [normalize(t) for t in tokens]


def parse_query(raw_query: str) -> Query:
    """
    Parse and validate a raw query line into AND-groups.

    An empty or all-whitespace line yields an empty query. Raises
    QuerySyntaxError if the line starts or ends with a connector, has two
    connectors in a row, or contains a non-alphabetic character.
    """
    tokens = split_query(raw_query)
    if not tokens:
        return ()

    if tokens[0] in CONNECTORS:
        raise QuerySyntaxError(f"'{tokens[0]}' cannot be first")
    if tokens[-1] in CONNECTORS:
        raise QuerySyntaxError(f"'{tokens[-1]}' cannot be last")

    groups: list[Group] = []
    current: list[str] = []
    previous = None
    for token in tokens:
        if token in CONNECTORS:
            if previous in CONNECTORS:
                raise QuerySyntaxError(f"'{previous}' and '{token}' cannot be adjacent")
            if token == OR:
                groups.append(tuple(current))
                current = []
        else:
            current.append(token)
        previous = token
    groups.append(tuple(current))

    if any(not group for group in groups):
        raise QuerySyntaxError("empty AND-group in query")
    return tuple(groups)


def format_query(query: Query) -> str:
    """Render a parsed query back to its normalized text form."""
    return f" {OR} ".join(f" {AND} ".join(group) for group in query)
