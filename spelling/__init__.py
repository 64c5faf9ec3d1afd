"""
Spelling alphabet package - greedy matching of text against spelling alphabets.

This package turns text into the words of a spelling or phonetic alphabet
(NATO: "abc" -> Alpha Bravo Charlie), broken down into focused modules:

- alphabet_ast: Data structures (AlphabetEntry, AlphabetSource, Spelling)
- alphabet_parser: Lark-based parsing of alphabet source files
- alphabet_transformer: Parse tree to AlphabetSource conversion
- matcher: Greedy longest-match engine (Matcher)
- registry: Alphabet lookup, listing and cached loading
- errors: Exception hierarchy
"""

from .alphabet_ast import AlphabetEntry, AlphabetSource, Spelling
from .alphabet_parser import parse_file, parse_string
from .errors import (
    AlphabetError,
    AlphabetFormatError,
    AlphabetNotFoundError,
    EmptyAlphabetError,
    UnmatchedCharacterError,
)
from .matcher import Matcher
from .registry import AlphabetRegistry, list_alphabets, load_alphabet

__all__ = [
    "AlphabetEntry",
    "AlphabetSource",
    "Spelling",
    "parse_file",
    "parse_string",
    "AlphabetError",
    "AlphabetFormatError",
    "AlphabetNotFoundError",
    "EmptyAlphabetError",
    "UnmatchedCharacterError",
    "Matcher",
    "AlphabetRegistry",
    "list_alphabets",
    "load_alphabet",
]
