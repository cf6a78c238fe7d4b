"""Shared test fixtures."""

from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from tse.pagedir import CRAWLER_MARKER  # noqa: E402
from tse.posting import InvertedIndex  # noqa: E402


def write_page(page_dir: Path, doc_id: int, url: str, body: str, depth: int = 0) -> Path:
    path = page_dir / str(doc_id)
    path.write_text(f"{url}\n{depth}\n{body}", encoding="utf-8")
    return path


@pytest.fixture
def page_dir(tmp_path):
    """Empty crawler page directory."""
    directory = tmp_path / "pages"
    directory.mkdir()
    (directory / CRAWLER_MARKER).write_text("crawler output\n")
    return directory


@pytest.fixture
def pet_pages(page_dir):
    """Three pages about cats and dogs."""
    write_page(page_dir, 1, "http://example.com/cats.html", "<p>Cat cat.</p>")
    write_page(page_dir, 2, "http://example.com/both.html", "cat DOG dog, dog!", depth=1)
    write_page(page_dir, 3, "http://example.com/fish.html", "fish", depth=1)
    return page_dir


@pytest.fixture
def pet_index():
    return InvertedIndex.from_dict({"cat": {1: 2, 2: 1}, "dog": {2: 3}})
