"""Table of explicit qualified-name to header-path overrides."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class MappingOrigin(Enum):
    """Where a mapping entry came from."""

    DEFAULT_RESOURCE = "default_resource"
    EXPLICIT_SOURCE = "explicit_source"
    PROGRAMMATIC = "programmatic"


@dataclass(frozen=True)
class MappingSource:
    """Provenance of one mapping entry."""

    origin: MappingOrigin
    resource: str = ""

    def label(self) -> str:
        """Return a short human readable description."""
        if self.resource:
            return f"{self.origin.value}:{self.resource}"
        return self.origin.value


PROGRAMMATIC = MappingSource(MappingOrigin.PROGRAMMATIC)


class MappingTable:
    """Maps erased qualified type names to header paths.

    Keys are unique and the last write wins, whatever its source. The source of
    each entry is kept for diagnostics only and never affects lookups.
    """

    def __init__(self) -> None:
        """Create an empty table."""
        self.mapping: dict[str, str] = {}
        self.sources: dict[str, MappingSource] = {}

    def __len__(self) -> int:
        return len(self.mapping)

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self.mapping

    def __iter__(self) -> Iterator[str]:
        return iter(self.mapping)

    def lookup(self, qualified_name: str) -> str | None:
        """Return the header path mapped for a type, if any."""
        return self.mapping.get(qualified_name)

    def source_of(self, qualified_name: str) -> MappingSource | None:
        """Return the provenance of a mapped type, if any."""
        return self.sources.get(qualified_name)

    def put(
        self, qualified_name: str, header: str, source: MappingSource = PROGRAMMATIC
    ) -> None:
        """Insert or overwrite the mapping for a type."""
        self.mapping[qualified_name] = header
        self.sources[qualified_name] = source

    def update(self, entries: Iterable[tuple[str, str]], source: MappingSource) -> int:
        """Merge entries in order and return how many were merged."""
        count = 0
        for qualified_name, header in entries:
            self.put(qualified_name, header, source)
            count += 1
        return count

    def sorted_items(self) -> list[tuple[str, str]]:
        """Return all entries ordered by qualified name."""
        return sorted(self.mapping.items())

    def as_dict(self) -> dict[str, str]:
        """Return a copy of the name to header mapping."""
        return dict(self.mapping)
