from dataclasses import dataclass, field
from typing import Optional, Tuple

# === Parsed Alphabet Source ===


@dataclass(frozen=True)
class Comment:
    """Represents a comment line in an alphabet source."""

    text: str
    line: int


@dataclass(frozen=True)
class AlphabetEntry:
    """Represents a single SYMBOL WORD line of an alphabet source."""

    symbol: str
    word: str
    line: Optional[int] = None

    def as_pair(self) -> Tuple[str, str]:
        return (self.symbol, self.word)


@dataclass(frozen=True)
class AlphabetSource:
    """Represents a parsed alphabet file."""

    name: str
    display_name: str
    entries: Tuple[AlphabetEntry, ...] = field(default_factory=tuple)
    path: Optional[str] = None

    def pairs(self) -> Tuple[Tuple[str, str], ...]:
        """
        The (symbol, word) pairs in source order, as consumed by Matcher.build.
        """
        return tuple(entry.as_pair() for entry in self.entries)


# === Match Result Structures ===


@dataclass(frozen=True)
class Spelling:
    """Represents one matched symbol and the word it is spelled as."""

    word: str
    is_numeric: bool = False
    symbol: str = ""  # The matched input text, original casing
    offset: int = 0  # Character position of the match in the input

    @property
    def length(self) -> int:
        """
        The number of input characters consumed by this match.
        """
        return len(self.symbol)

    def __str__(self) -> str:
        return self.word
