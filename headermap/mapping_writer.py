"""Persistence of the header mapping table."""

import logging

from headermap.error_reporter import ErrorReporter
from headermap.errors import MappingWriteError
from headermap.mapping_table import MappingTable
from headermap.properties_format import format_property
from headermap.resolver_config import ResolverConfig

logger = logging.getLogger(__name__)


def write_mappings(
    config: ResolverConfig, table: MappingTable, reporter: ErrorReporter
) -> bool:
    """Write the table to the configured output mapping file.

    Only explicit entries are written, one ``key=value`` line each, sorted by
    key. Failures are reported, not raised. Returns True if a file was written.
    """
    path = config.output_mapping_destination
    if path is None:
        return False

    try:
        lines = [
            format_property(key, value) + "\n" for key, value in table.sorted_items()
        ]
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as f:
            f.writelines(lines)
    except (OSError, ValueError) as e:
        reporter.error(str(MappingWriteError(path, e)))
        return False

    logger.info("Wrote %d header mappings to %s", len(lines), path)
    return True
