"""Lookup of mapping resources along a search path or by file path."""

import errno
import logging
from collections.abc import Iterable
from pathlib import Path

from headermap.properties_format import parse_properties

logger = logging.getLogger(__name__)


class ResourceLoader:
    """Finds named resources below a list of search directories or as files."""

    def __init__(self, search_paths: str | Path | Iterable[str | Path] = ()) -> None:
        """Initialize the loader with directories searched in order.

        A single string or path is one directory, not a sequence of characters.
        """
        if isinstance(search_paths, (str, Path)):
            search_paths = [search_paths]
        self.search_paths = [Path(p) for p in search_paths]

    def find(self, name: str) -> Path:
        """Return the file backing ``name``.

        Search directories are tried first, then ``name`` itself as a path.
        Raises FileNotFoundError if none of them holds it.
        """
        for root in self.search_paths:
            candidate = root / name
            if candidate.is_file():
                logger.debug("Resolved resource %s to %s", name, candidate)
                return candidate
        direct = Path(name)
        if direct.is_file():
            return direct
        raise FileNotFoundError(errno.ENOENT, "No such resource", name)

    def open_text(self, name: str) -> str:
        """Read the named resource as UTF-8 text, dropping a leading BOM."""
        return self.find(name).read_text(encoding="utf-8-sig")

    def load_properties(self, name: str) -> list[tuple[str, str]]:
        """Read and parse the named properties resource."""
        return parse_properties(self.open_text(name))
