"""Tests for persisting the header mapping table."""

from pathlib import Path

import pytest

from headermap.error_reporter import ErrorReporter
from headermap.mapping_loader import load_mappings
from headermap.mapping_table import MappingTable
from headermap.mapping_writer import write_mappings
from headermap.resolver_config import ResolverConfig
from headermap.resource_loader import ResourceLoader


def test_no_destination_is_noop(tmp_path: Path) -> None:
    """Verify that nothing is written without a destination."""
    table = MappingTable()
    table.put("com.x.Y", "Y.h")

    assert not write_mappings(ResolverConfig(), table, ErrorReporter())
    assert list(tmp_path.iterdir()) == []


def test_sorted_output_creates_parents(tmp_path: Path) -> None:
    """Verify sorted key=value lines and parent directory creation."""
    out = tmp_path / "nested" / "dir" / "mappings.j2objc"
    table = MappingTable()
    table.put("org.b.Second", "org/b/Second.h")
    table.put("com.a.First", "com/a/First.h")

    assert write_mappings(
        ResolverConfig(output_mapping_destination=out), table, ErrorReporter()
    )

    assert out.read_text(encoding="utf-8") == (
        "com.a.First=com/a/First.h\norg.b.Second=org/b/Second.h\n"
    )


def test_round_trip(tmp_path: Path) -> None:
    """Verify that reloading the written file reproduces the table."""
    out = tmp_path / "out.properties"
    table = MappingTable()
    table.put("com.x.Y", "x/Y.h")
    table.put("com.x.Win", "C:\\headers\\Win.h")
    table.put("com.x.Odd", " leading space=and:colon.h")
    table.put("#com.x.Hash", "Hash.h")
    table.put("com.x.Uni", "ünï/Cödé.h")

    write_mappings(ResolverConfig(output_mapping_destination=out), table, ErrorReporter())

    reloaded = MappingTable()
    reporter = ErrorReporter()
    load_mappings(
        ResolverConfig(input_mapping_sources=[str(out)]),
        reloaded,
        ResourceLoader(),
        reporter,
    )

    assert reporter.error_count == 0
    assert reloaded.as_dict() == table.as_dict()


def test_write_failure_reported(tmp_path: Path) -> None:
    """Verify that I/O errors are reported instead of raised."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    table = MappingTable()
    table.put("com.x.Y", "Y.h")
    reporter = ErrorReporter()

    ok = write_mappings(
        ResolverConfig(output_mapping_destination=blocker / "mappings.j2objc"),
        table,
        reporter,
    )

    assert not ok
    assert reporter.error_count == 1
    assert "Cannot write header mappings" in reporter.errors[0]


def test_non_bmp_entries_written(tmp_path: Path) -> None:
    """Verify that escaped emoji mappings load, write and reload unchanged."""
    source = tmp_path / "emoji.properties"
    source.write_text("com.x.Y=\\uD83D\\uDE00.h\n", encoding="utf-8")
    out = tmp_path / "out.properties"
    table = MappingTable()
    reporter = ErrorReporter()
    load_mappings(
        ResolverConfig(input_mapping_sources=[str(source)]),
        table,
        ResourceLoader(),
        reporter,
    )
    table.put("com.x.Lone", "half\ud83d.h")

    assert write_mappings(
        ResolverConfig(output_mapping_destination=out), table, reporter
    )

    reloaded = MappingTable()
    load_mappings(
        ResolverConfig(input_mapping_sources=[str(out)]),
        reloaded,
        ResourceLoader(),
        reporter,
    )
    assert reporter.error_count == 0
    assert reloaded.lookup("com.x.Y") == "\U0001f600.h"
    assert reloaded.as_dict() == table.as_dict()


def test_encoding_failure_reported(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Verify that formatting errors are reported instead of raised."""

    def broken(key: str, value: str) -> str:
        raise UnicodeEncodeError("utf-8", key, 0, 1, "surrogates not allowed")

    monkeypatch.setattr("headermap.mapping_writer.format_property", broken)
    table = MappingTable()
    table.put("com.x.Y", "Y.h")
    reporter = ErrorReporter()

    ok = write_mappings(
        ResolverConfig(output_mapping_destination=tmp_path / "m.properties"),
        table,
        reporter,
    )

    assert not ok
    assert reporter.error_count == 1
