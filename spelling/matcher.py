"""
Matcher: greedy longest-match engine for spelling alphabets.

This module provides the Matcher class that owns an immutable symbol table
and segments input text into the longest known symbols, left to right,
mapping each one to its alphabet word.
"""

import logging
import re
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .alphabet_ast import AlphabetSource, Spelling
from .errors import AlphabetFormatError, EmptyAlphabetError, UnmatchedCharacterError

logger = logging.getLogger(__name__)

# Integer literal as accepted for numeric tagging: optional sign, ASCII digits
RE_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


def is_integer_literal(text: str) -> bool:
    """Return True if text parses as an integer literal."""
    return RE_INTEGER_LITERAL.fullmatch(text) is not None


def fold_symbol(symbol: str) -> str:
    """Normalize a symbol or input fragment for lookup."""
    return symbol.lower()


class Matcher:
    """
    Immutable symbol table with greedy maximal-munch matching.

    Instances are built once per alphabet with Matcher.build() (or
    Matcher.from_source()) and are read-only afterwards, so a single matcher
    may be shared freely between threads.
    """

    __slots__ = ("_symbols", "_max_symbol_length", "_name", "_display_name")

    def __init__(
        self,
        symbols: Mapping[str, str],
        name: Optional[str] = None,
        display_name: Optional[str] = None,
    ):
        """
        Create a matcher from a symbol → word mapping.

        Symbols are lower-cased; if two fold to the same key the later one
        wins. Use build() for ordered pairs with duplicate reporting.

        Raises:
            EmptyAlphabetError: if symbols is empty
            AlphabetFormatError: if a symbol is empty
        """
        folded: Dict[str, str] = {}
        for symbol, word in symbols.items():
            key = fold_symbol(symbol)
            if not key:
                raise AlphabetFormatError(
                    f"Empty symbol for word {word!r}", source=name
                )
            folded[key] = word

        if not folded:
            raise EmptyAlphabetError(name)

        self._symbols = MappingProxyType(folded)
        self._max_symbol_length = max(len(key) for key in folded)
        self._name = name
        self._display_name = display_name

    @classmethod
    def build(
        cls,
        pairs: Iterable[Tuple[str, str]],
        name: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> "Matcher":
        """
        Build a matcher from (symbol, word) pairs.

        Symbols are lower-cased to form lookup keys. When two symbols fold to
        the same key the later word replaces the earlier one, keeping the
        position of the first occurrence.

        Args:
            pairs: Ordered (raw symbol, word) pairs
            name: Optional alphabet name, used in messages
            display_name: Optional human-readable alphabet name

        Returns:
            A new Matcher

        Raises:
            EmptyAlphabetError: if pairs is empty
            AlphabetFormatError: if a symbol is empty
        """
        symbols: Dict[str, str] = {}
        for raw_symbol, word in pairs:
            key = fold_symbol(raw_symbol)
            if key in symbols:
                logger.warning(
                    "Duplicate symbol %r in alphabet %s: %r replaces %r",
                    key,
                    name or "<unnamed>",
                    word,
                    symbols[key],
                )
            symbols[key] = word

        matcher = cls(symbols, name=name, display_name=display_name)
        logger.debug(
            "Built matcher %s with %s symbols (longest %s)",
            name or "<unnamed>",
            len(matcher),
            matcher.max_symbol_length,
        )
        return matcher

    @classmethod
    def from_source(cls, source: AlphabetSource) -> "Matcher":
        """Build a matcher from a parsed alphabet source."""
        return cls.build(
            source.pairs(), name=source.name, display_name=source.display_name
        )

    @property
    def symbols(self) -> Mapping[str, str]:
        """Read-only view of the folded symbol → word table."""
        return self._symbols

    @property
    def max_symbol_length(self) -> int:
        return self._max_symbol_length

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def display_name(self) -> Optional[str]:
        return self._display_name

    def match(self, text: str, strict: bool = False) -> List[Spelling]:
        """
        Segment text into the longest known symbols and spell each one.

        At every position the longest candidate is tried first, down to a
        single character. Characters that start no known symbol are skipped,
        or reported when strict is set.

        Args:
            text: Input text
            strict: Raise on characters that start no known symbol

        Returns:
            List of Spelling objects in input order

        Raises:
            UnmatchedCharacterError: in strict mode, for the first unmatched character
        """
        spellings: List[Spelling] = []
        text_len = len(text)
        start = 0
        while start < text_len:
            matched = self._match_at(text, start, text_len)
            if matched is None:
                if strict:
                    raise UnmatchedCharacterError(text[start], start)
                logger.debug("Skipping unmatched character %r at %s", text[start], start)
                start += 1
                continue
            spellings.append(matched)
            start += matched.length
        return spellings

    def _match_at(self, text: str, start: int, text_len: int) -> Optional[Spelling]:
        """Return the longest spelling starting at start, or None."""
        longest = min(self._max_symbol_length, text_len - start)
        for j in range(longest, 0, -1):
            fragment = text[start : start + j]
            word = self._symbols.get(fold_symbol(fragment))
            if word is not None:
                return Spelling(
                    word=word,
                    is_numeric=is_integer_literal(fragment),
                    symbol=fragment,
                    offset=start,
                )
        return None

    def words(self, text: str, strict: bool = False) -> List[str]:
        """Spell text and return only the words."""
        return [spelling.word for spelling in self.match(text, strict=strict)]

    def to_display_string(self) -> str:
        """
        Render the alphabet as one 'SYMBOL word' line per entry, in the
        order the symbols were first defined.
        """
        return "\n".join(
            f"{symbol.upper()} {word}" for symbol, word in self._symbols.items()
        )

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return (
            f"Matcher(name={self._name!r}, symbols={len(self._symbols)}, "
            f"max_symbol_length={self._max_symbol_length})"
        )

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and fold_symbol(symbol) in self._symbols
