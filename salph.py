#!/usr/bin/env python3

import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence, TextIO

import lark
from rich.console import Console, RenderableType
from rich.measure import Measurement
from rich.table import Table
from rich.text import Text

from spelling.alphabet_ast import Spelling
from spelling.errors import AlphabetError, AlphabetNotFoundError
from spelling.matcher import Matcher
from spelling.registry import ALPHABETS_DIR, AlphabetRegistry

__version__ = "0.1.0"

DEFAULT_ALPHABET = "nato"
ALPHABET_ENV_VAR = "SALPH"

# Output styles: input word, numeric spelling, spelling
WORD_STYLE = "bold bright_cyan"
NUMBER_STYLE = "yellow"
SPELLING_STYLE = "green"

logger = logging.getLogger("salph")


def read_sentence(stream: TextIO) -> List[str]:
    """Read a single line and split it into words."""
    return stream.readline().split()


def format_spellings(
    spellings: Sequence[Spelling], separator: str = " ", color: bool = True
) -> Text:
    """Join spellings with separator, numbers and words styled differently."""
    text = Text()
    for i, spelling in enumerate(spellings):
        if i:
            text.append(separator)
        if not color:
            text.append(spelling.word)
        elif spelling.is_numeric:
            text.append(spelling.word, style=NUMBER_STYLE)
        else:
            text.append(spelling.word, style=SPELLING_STYLE)
    return text


def build_table(
    matcher: Matcher,
    sentence: Sequence[str],
    separator: str = " ",
    color: bool = True,
    strict: bool = False,
) -> Table:
    """
    Build a two-column table mapping every word of the sentence to its spelling.

    Raises:
        UnmatchedCharacterError: in strict mode, for the first unmatched character
    """
    table = Table(
        box=None, show_header=False, show_edge=False, pad_edge=False, padding=(0, 1)
    )
    table.add_column(no_wrap=True)
    table.add_column(no_wrap=True)
    for word in sentence:
        spellings = matcher.match(word, strict=strict)
        table.add_row(
            Text(word, style=WORD_STYLE if color else ""),
            format_spellings(spellings, separator, color),
        )
    return table


def fit_to_width(console: Console, renderable: RenderableType):
    """Widen the console so every row of renderable fits on one line."""
    measurement = Measurement.get(
        console, console.options.update_width(sys.maxsize), renderable
    )
    if measurement.maximum > console.width:
        console.width = measurement.maximum


def show_alphabet_list(console: Console, registry: AlphabetRegistry):
    """Print every available alphabet with its display name."""
    console.print("Available alphabets: ", markup=False)
    for name, display_name in registry.list():
        console.print(f"  - {name}: {display_name}", markup=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Spell words with a spelling alphabet (e.g. NATO: abc -> Alpha Bravo Charlie)."
    )
    parser.add_argument(
        "sentence",
        nargs="*",
        help="Words to spell. If omitted, a line is read from stdin.",
    )
    parser.add_argument(
        "-a",
        "--alphabet",
        default=os.environ.get(ALPHABET_ENV_VAR, DEFAULT_ALPHABET),
        help=f"Alphabet to use (default: ${ALPHABET_ENV_VAR} or {DEFAULT_ALPHABET})",
    )
    parser.add_argument(
        "-l",
        "--list-alphabets",
        action="store_true",
        help="List available alphabets",
    )
    parser.add_argument(
        "-s",
        "--show-alphabet",
        metavar="ALPHABET",
        default=None,
        help="Show the contents of an alphabet",
    )
    parser.add_argument(
        "-d",
        "--disable-color",
        action="store_true",
        help="Disable colored output (word = green, number = yellow)",
    )
    parser.add_argument(
        "-S",
        "--separator",
        default=" ",
        help="Separator to use when printing",
    )
    parser.add_argument(
        "--alphabet-dir",
        action="append",
        default=[],
        metavar="DIR",
        help="Additional directory of alphabet files (may be repeated; later ones win)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on characters that are not part of the alphabet instead of skipping them",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print("Version information:")
        print(f"  lark: {lark.__version__}")
        print(f"  salph: {__version__}")
        return 0

    logging.basicConfig(
        level=getattr(logging, args.log_level), format="[%(levelname)s] %(message)s"
    )

    registry = AlphabetRegistry(ALPHABETS_DIR, *args.alphabet_dir)
    color = not args.disable_color
    console = Console(highlight=False, no_color=not color)

    try:
        # List available alphabets
        if args.list_alphabets:
            show_alphabet_list(console, registry)
            return 0

        # Show the contents of an alphabet
        if args.show_alphabet:
            matcher = registry.load(registry.validate(args.show_alphabet))
            console.print(matcher.to_display_string(), markup=False, soft_wrap=True)
            return 0

        matcher = registry.load(registry.validate(args.alphabet))
    except AlphabetNotFoundError as e:
        parser.error(str(e))
    except AlphabetError as e:
        logger.error("%s", e)
        return 1

    # Read the sentence from either arguments or stdin
    sentence = args.sentence or read_sentence(sys.stdin)
    if not sentence:
        logger.info("Nothing to spell")
        return 0

    logger.info("Spelling %s words with alphabet %s", len(sentence), matcher.name)
    try:
        table = build_table(
            matcher, sentence, args.separator, color=color, strict=args.strict
        )
    except AlphabetError as e:
        logger.error("%s", e)
        return 1

    # One row per input word, however long its spelling
    fit_to_width(console, table)
    console.print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
