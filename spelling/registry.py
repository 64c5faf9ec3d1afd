"""
Alphabet registry for the spelling package.

Maps alphabet names to source files in one or more directories, lists the
available alphabets with their display names and loads them into matchers,
with caching.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .alphabet_ast import AlphabetSource
from .alphabet_parser import parse_file
from .errors import AlphabetNotFoundError
from .matcher import Matcher

logger = logging.getLogger(__name__)

ALPHABETS_DIR = Path(__file__).parent / "alphabets"


class AlphabetRegistry:
    """
    Resolves alphabet names to files and loads them.

    An alphabet is a file in one of the registry directories; its name is the
    file name. When two directories hold the same name, the later directory
    wins, so user directories can override the bundled alphabets.
    """

    def __init__(self, *directories: Union[str, Path]):
        if not directories:
            directories = (ALPHABETS_DIR,)
        self.directories = tuple(Path(d) for d in directories)
        self._source_cache: Dict[str, AlphabetSource] = {}
        self._matcher_cache: Dict[str, Matcher] = {}

    def _scan(self) -> Dict[str, Path]:
        """Map every alphabet name to its file; a later directory overrides an earlier one."""
        found: Dict[str, Path] = {}
        for directory in self.directories:
            if not directory.is_dir():
                logger.warning("Alphabet directory not found: %s", directory)
                continue
            for entry in sorted(directory.iterdir()):
                # Skip hidden files and packaging leftovers such as __init__.py
                if entry.name.startswith((".", "_")) or not entry.is_file():
                    continue
                found[entry.name] = entry
        return found

    def names(self) -> List[str]:
        """Return the available alphabet names, sorted."""
        return sorted(self._scan())

    def path_for(self, name: str) -> Path:
        """
        Return the source file of an alphabet.

        Raises:
            AlphabetNotFoundError: if no directory holds the alphabet
        """
        # Names are file names, never paths
        if not name or os.sep in name or (os.altsep and os.altsep in name):
            raise AlphabetNotFoundError(name)
        for directory in reversed(self.directories):
            candidate = directory / name
            if candidate.is_file():
                return candidate
        raise AlphabetNotFoundError(name)

    def validate(self, name: str) -> str:
        """
        Check that an alphabet exists and return its name.

        Raises:
            AlphabetNotFoundError: if the alphabet is unknown
        """
        self.path_for(name)
        return name

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        try:
            self.path_for(name)
        except AlphabetNotFoundError:
            return False
        return True

    def load_source(self, name: str) -> AlphabetSource:
        """Parse an alphabet file, with caching."""
        if name in self._source_cache:
            return self._source_cache[name]

        path = self.path_for(name)
        source = parse_file(path, name)
        logger.debug(
            "Loaded alphabet %s (%s) with %s entries from %s",
            name,
            source.display_name,
            len(source.entries),
            path,
        )
        self._source_cache[name] = source
        return source

    def load(self, name: str) -> Matcher:
        """
        Load an alphabet and build its matcher, with caching.

        Raises:
            AlphabetNotFoundError: if the alphabet is unknown
            AlphabetFormatError: if the alphabet file is malformed
            EmptyAlphabetError: if the alphabet file has no entries
        """
        if name in self._matcher_cache:
            return self._matcher_cache[name]

        matcher = Matcher.from_source(self.load_source(name))
        self._matcher_cache[name] = matcher
        return matcher

    def list(self) -> List[Tuple[str, str]]:
        """
        List the available alphabets as (name, display name) tuples sorted
        by name, e.g. ("nato", "NATO phonetic alphabet").
        """
        return [(name, self.load_source(name).display_name) for name in self.names()]


_default_registry: Optional[AlphabetRegistry] = None


def default_registry() -> AlphabetRegistry:
    """Return the shared registry of bundled alphabets."""
    global _default_registry  # pylint: disable=global-statement
    if _default_registry is None:
        _default_registry = AlphabetRegistry()
    return _default_registry


def list_alphabets() -> List[Tuple[str, str]]:
    """List the bundled alphabets."""
    return default_registry().list()


def load_alphabet(name: str) -> Matcher:
    """Load a bundled alphabet by name."""
    return default_registry().load(name)
