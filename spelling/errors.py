"""
Exceptions raised by the spelling alphabet package.

Every error derives from AlphabetError and from the builtin exception that
best describes it, so callers may catch either.
"""

from typing import Optional


class AlphabetError(Exception):
    """Base class for all alphabet errors."""


class EmptyAlphabetError(AlphabetError, ValueError):
    """Raised when a matcher is built from an alphabet without entries."""

    def __init__(self, name: Optional[str] = None):
        self.name = name
        if name:
            message = f"Alphabet '{name}' has no entries"
        else:
            message = "Alphabet has no entries"
        super().__init__(message)


class AlphabetFormatError(AlphabetError, ValueError):
    """Raised for malformed alphabet source lines or invalid symbols."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.source = source
        self.line = line
        self.column = column
        location = []
        if source:
            location.append(source)
        if line is not None:
            location.append(f"line {line}")
            if column is not None:
                location.append(f"column {column}")
        if location:
            message = f"{', '.join(location)}: {message}"
        super().__init__(message)


class AlphabetNotFoundError(AlphabetError, LookupError):
    """Raised when an alphabet name is not known to a registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown alphabet: {name}")

    def __str__(self):
        # LookupError would otherwise repr() the single argument
        return self.args[0]


class UnmatchedCharacterError(AlphabetError, ValueError):
    """Raised by strict matching when a character starts no known symbol."""

    def __init__(self, character: str, offset: int):
        self.character = character
        self.offset = offset
        super().__init__(
            f"No symbol matches {character!r} at position {offset}"
        )
