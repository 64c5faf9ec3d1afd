from pathlib import Path
from typing import Optional, Union

from lark import Lark
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedInput,
    UnexpectedToken,
    VisitError,
)

from spelling.alphabet_ast import AlphabetSource
from spelling.alphabet_transformer import AlphabetTransformer
from spelling.errors import AlphabetFormatError

GRAMMAR_PATH = Path(__file__).parent / "alphabet_grammar.lark"
with open(GRAMMAR_PATH, "r", encoding="utf-8") as f:
    ALPHABET_GRAMMAR = f.read()

alphabet_parser = Lark(
    ALPHABET_GRAMMAR, start="start", parser="lalr", propagate_positions=True
)

# Tokens that end a line early, i.e. a symbol without a word
LINE_END_TOKENS = {"_NL", "$END"}


def _describe_error(error: UnexpectedInput) -> str:
    if isinstance(error, UnexpectedEOF):
        return "Unexpected end of input, expected 'SYMBOL WORD'"
    if isinstance(error, UnexpectedToken) and error.token.type in LINE_END_TOKENS:
        return "Expected 'SYMBOL WORD', found a symbol without a word"
    if isinstance(error, UnexpectedCharacters):
        return f"Unexpected character {error.char!r}, expected 'SYMBOL WORD'"
    return "Expected 'SYMBOL WORD'"


def parse_string(
    text: str,
    name: str = "<string>",
    *,
    path: Optional[str] = None,
    unwrap: bool = True,
) -> AlphabetSource:
    """
    Parse alphabet source text.

    Args:
        text: Alphabet source, one 'SYMBOL WORD' entry per line
        name: Alphabet name recorded on the result
        path: File the text was read from, used in error messages
        unwrap: Re-raise the original exception of a failed transformation

    Returns:
        The parsed AlphabetSource

    Raises:
        AlphabetFormatError: if a line is not a comment, blank or an entry
    """
    try:
        tree = alphabet_parser.parse(text)
    except UnexpectedInput as e:
        line = e.line if e.line and e.line > 0 else None
        column = e.column if e.column and e.column > 0 else None
        raise AlphabetFormatError(
            _describe_error(e), source=path or name, line=line, column=column
        ) from e
    try:
        transformer = AlphabetTransformer(name=name, path=path)
        return transformer.transform(tree)
    except VisitError as ve:
        if unwrap:
            raise ve.orig_exc from ve
        raise


def parse_file(
    path: Union[str, Path], name: Optional[str] = None, *, unwrap: bool = True
) -> AlphabetSource:
    """Parse an alphabet file; the alphabet is named after the file by default."""
    path = Path(path)
    # utf-8-sig drops a leading byte order mark
    with open(path, "r", encoding="utf-8-sig") as file:
        try:
            text = file.read()
        except UnicodeDecodeError as e:
            raise AlphabetFormatError(
                f"Not valid UTF-8 ({e.reason} at byte {e.start})", source=str(path)
            ) from e
    return parse_string(text, name or path.name, path=str(path), unwrap=unwrap)
