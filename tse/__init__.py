"""Tiny search engine: inverted index builder and boolean querier."""

from .posting import CounterSet, InvertedIndex
from .index_builder import build_index, build_index_from_directory
from .index_file import load_index, save_index
from .pagedir import Document, PageDirectory
from .query import parse_query
from .ranker import RankedResult, rank
from .tokenizer import normalize, tokenize
