"""Tests for the mapping table."""

from headermap.mapping_table import MappingOrigin, MappingSource, MappingTable


def test_put_and_lookup() -> None:
    """Verify insert, overwrite and membership."""
    table = MappingTable()
    assert table.lookup("com.x.Y") is None

    table.put("com.x.Y", "A.h")
    table.put("com.x.Y", "B.h")

    assert "com.x.Y" in table
    assert len(table) == 1
    assert table.lookup("com.x.Y") == "B.h"


def test_provenance_follows_last_write() -> None:
    """Verify that the source of an entry is the one that wrote it last."""
    table = MappingTable()
    loaded = MappingSource(MappingOrigin.EXPLICIT_SOURCE, "a.properties")
    table.update([("com.x.Y", "A.h")], loaded)
    assert table.source_of("com.x.Y") == loaded
    assert table.source_of("com.x.Y").label() == "explicit_source:a.properties"  # type: ignore[union-attr]

    table.put("com.x.Y", "B.h")
    assert table.source_of("com.x.Y").origin is MappingOrigin.PROGRAMMATIC  # type: ignore[union-attr]


def test_sorted_items() -> None:
    """Verify that entries are listed by key."""
    table = MappingTable()
    table.update([("b", "2"), ("a", "1"), ("c", "3")], MappingSource(MappingOrigin.PROGRAMMATIC))
    assert table.sorted_items() == [("a", "1"), ("b", "2"), ("c", "3")]
    assert list(table) == ["b", "a", "c"]
