"""
Word tokenizer and normalizer shared by the indexer and the querier.
A word is a maximal run of ASCII letters, folded to lowercase.
Optionally strips HTML markup (title, body text) before tokenizing.
"""

import warnings
from pathlib import Path
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk.tokenize import RegexpTokenizer

WORD_PATTERN = r"[A-Za-z]+"

_TOKENIZER = RegexpTokenizer(WORD_PATTERN)


def normalize(token: str) -> str:
    """Return the lowercase form of an alphabetic token."""
    return token.lower()


def is_word(token: str) -> bool:
    """True if token is non-empty and made only of ASCII letters."""
    return bool(token) and token.isascii() and token.isalpha()


def tokenize(text: str) -> list[str]:
    """
    Split text into maximal alphabetic runs and normalize each one.
    Digits, punctuation and markup characters act as separators.
    """
    if not text:
        return []
    return [normalize(t) for t in _TOKENIZER.tokenize(text)]


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def get_tokens_from_html(html_content: str) -> list[str]:
    """
    Extract text from HTML and return its token list.
    """
    return tokenize(extract_text_from_html(html_content))


def read_text_file(filepath: Path) -> str:
    """
    Read a text file, handling common encodings.
    """
    for encoding in ("utf-8", "cp1252", "latin-1"):
        try:
            return Path(filepath).read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode file: {filepath}")
