"""
Alphabet Transformer: Lark tree transformer for alphabet sources.

This module provides the AlphabetTransformer class that converts Lark parse
trees of alphabet files into AlphabetSource structures. The first comment of a
source names the alphabet; every other comment is dropped.
"""

from typing import Optional

from lark import Transformer, v_args

from spelling import alphabet_ast as ast
from spelling.errors import AlphabetFormatError


@v_args(inline=True)  # This simplifies most method signatures
class AlphabetTransformer(Transformer):
    """
    Transformer that converts Lark parse trees into AlphabetSource structures.
    """

    def __init__(self, name: str, path: Optional[str] = None):
        super().__init__()
        self.name = name
        self.path = path

    def start(self, *items):
        """Transform the whole source into an AlphabetSource."""
        display_name = self.name
        if items and isinstance(items[0], ast.Comment) and items[0].text:
            display_name = items[0].text
        entries = tuple(item for item in items if isinstance(item, ast.AlphabetEntry))
        return ast.AlphabetSource(
            name=self.name,
            display_name=display_name,
            entries=entries,
            path=self.path,
        )

    def comment(self, token):
        """Transform a comment line, stripping the marker."""
        return ast.Comment(text=token.value[1:].strip(), line=token.line)

    def entry(self, symbol, word):
        """Transform a SYMBOL WORD line."""
        text = word.value.strip()
        if not text:
            raise AlphabetFormatError(
                f"Missing word for symbol {symbol.value!r}",
                source=self.path or self.name,
                line=symbol.line,
                column=symbol.column,
            )
        return ast.AlphabetEntry(symbol=symbol.value, word=text, line=symbol.line)
