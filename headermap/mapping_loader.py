"""Loading of header mapping resources into a mapping table."""

import logging

from headermap.error_reporter import ErrorReporter
from headermap.errors import MappingLoadError
from headermap.mapping_table import MappingOrigin, MappingSource, MappingTable
from headermap.resolver_config import ResolverConfig
from headermap.resource_loader import ResourceLoader

logger = logging.getLogger(__name__)

DEFAULT_HEADER_MAPPING_FILE = "mappings.j2objc"


def load_mappings(
    config: ResolverConfig,
    table: MappingTable,
    resource_loader: ResourceLoader,
    reporter: ErrorReporter,
) -> int:
    """Merge the configured mapping resources into ``table``.

    With no sources configured, the default resource is loaded if present and
    silently skipped otherwise. Explicit sources load in order, later ones
    overriding earlier ones; the first failure is reported and the remaining
    sources are not attempted. Returns the number of entries merged.
    """
    if config.input_mapping_sources is None:
        return _load_default(table, resource_loader, reporter)

    merged = 0
    try:
        for name in config.input_mapping_sources:
            merged += _load_source(
                name,
                table,
                resource_loader,
                MappingSource(MappingOrigin.EXPLICIT_SOURCE, name),
            )
    except MappingLoadError as e:
        reporter.error(str(e))
    return merged


def _load_default(
    table: MappingTable, resource_loader: ResourceLoader, reporter: ErrorReporter
) -> int:
    source = MappingSource(MappingOrigin.DEFAULT_RESOURCE, DEFAULT_HEADER_MAPPING_FILE)
    try:
        return _load_source(DEFAULT_HEADER_MAPPING_FILE, table, resource_loader, source)
    except MappingLoadError as e:
        # Not configuring mappings is normal; only a broken default is reported.
        if isinstance(e.cause, FileNotFoundError):
            logger.debug("No default header mapping %s", DEFAULT_HEADER_MAPPING_FILE)
            return 0
        reporter.error(str(e))
        return 0


def _load_source(
    name: str,
    table: MappingTable,
    resource_loader: ResourceLoader,
    source: MappingSource,
) -> int:
    try:
        entries = resource_loader.load_properties(name)
    except (OSError, ValueError) as e:
        raise MappingLoadError(name, e) from e
    count = table.update(entries, source)
    logger.info("Loaded %d header mappings from %s", count, name)
    return count
