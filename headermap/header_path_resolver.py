"""Resolution of header and output paths for translated types."""

import os
from collections.abc import Callable
from pathlib import Path

from headermap.error_reporter import ErrorReporter
from headermap.mapping_loader import load_mappings
from headermap.mapping_table import MappingTable
from headermap.mapping_writer import write_mappings
from headermap.output_style import OutputStyle
from headermap.platform_packages import is_platform_package
from headermap.resolution_result import HeaderResolution
from headermap.resolver_config import ResolverConfig, parse_mapping_sources
from headermap.resource_loader import ResourceLoader
from headermap.type_identifier import CompilationUnitDescriptor, TypeIdentifier

ExplicitHeaderLookup = Callable[[TypeIdentifier], str | None]


def _package_dir(package: str) -> str:
    return package.replace(".", os.sep) + os.sep


def _no_dir(package: str) -> str:  # noqa: ARG001
    return ""


# SOURCE and NONE placement is left to the caller, which consults the
# uses_* queries.
PREFIX_RULES: dict[OutputStyle, Callable[[str], str]] = {
    OutputStyle.PACKAGE: _package_dir,
    OutputStyle.SOURCE: _no_dir,
    OutputStyle.NONE: _no_dir,
}


class HeaderPathResolver:
    """Decides the header file path of each translated type.

    The resolver is configured and loaded once per run and only read from
    afterwards. It does no locking, so overrides must not be added while other
    workers are resolving.
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        table: MappingTable | None = None,
        *,
        resource_loader: ResourceLoader | None = None,
        reporter: ErrorReporter | None = None,
        explicit_header_lookup: ExplicitHeaderLookup | None = None,
    ) -> None:
        """Initialize the resolver with its settings and collaborators."""
        self.config = config if config is not None else ResolverConfig()
        self.table = table if table is not None else MappingTable()
        self.resource_loader = resource_loader or ResourceLoader()
        self.reporter = reporter or ErrorReporter()
        self.explicit_header_lookup = explicit_header_lookup

    # Configuration

    def set_output_style(self, style: OutputStyle | str) -> None:
        """Select the output style."""
        self.config.output_style = OutputStyle.parse(style)

    def enable_combine_jars(self) -> None:
        """Combine jar sources into one output; implies SOURCE style."""
        self.config.enable_combine_jars()

    def enable_include_generated_sources(self) -> None:
        """Emit generated sources with their origin; implies SOURCE style."""
        self.config.enable_include_generated_sources()

    def set_input_mapping_sources(self, sources: str | list[str] | None) -> None:
        """Set the mapping resources to load; None means the default one."""
        self.config.input_mapping_sources = parse_mapping_sources(sources)

    def set_output_mapping_destination(self, path: str | Path | None) -> None:
        """Set where the mapping table is written; None disables writing."""
        self.config.output_mapping_destination = Path(path) if path is not None else None

    # Layout policy

    def uses_source_directories(self) -> bool:
        """If true, output locations follow the input source location, not the package."""
        return self.config.output_style is OutputStyle.SOURCE

    def uses_combined_source_jars(self) -> bool:
        """Check if jar sources are combined into a single output."""
        return self.uses_source_directories() and self.config.combine_jars

    def uses_generated_source_inclusion(self) -> bool:
        """Check if generated sources go into the output of their origin."""
        return self.uses_source_directories() and self.config.include_generated_sources

    # Queries

    def resolve(
        self,
        type_id: TypeIdentifier,
        explicit_header_lookup: ExplicitHeaderLookup | None = None,
    ) -> HeaderResolution:
        """Resolve a type's header path and record which rule decided it."""
        lookup = explicit_header_lookup or self.explicit_header_lookup
        platform = is_platform_package(type_id.package)

        # 1. Header declared on the type itself
        if lookup is not None:
            explicit = lookup(type_id)
            if explicit is not None:
                return HeaderResolution(
                    type_id.qualified_name, explicit, "explicit", platform=platform
                )

        # 2. Mapping table
        mapped = self.table.lookup(type_id.qualified_name)
        if mapped is not None:
            source = self.table.source_of(type_id.qualified_name)
            return HeaderResolution(
                type_id.qualified_name,
                mapped,
                "mapping",
                mapping_source=source.label() if source else "",
                platform=platform,
            )

        # 3. Computed from the package
        path = self.directory_prefix(type_id.package) + type_id.simple_name + ".h"
        return HeaderResolution(
            type_id.qualified_name, path, "computed", platform=platform
        )

    def resolve_header_path(
        self,
        type_id: TypeIdentifier,
        explicit_header_lookup: ExplicitHeaderLookup | None = None,
    ) -> str:
        """Return the header path for a type."""
        return self.resolve(type_id, explicit_header_lookup).header_path

    def resolve_output_path(self, unit: CompilationUnitDescriptor) -> str:
        """Return the extension-less output path of a unit's main type."""
        return self.directory_prefix(unit.package) + unit.main_type_name

    def directory_prefix(self, package: str | None) -> str:
        """Return the directory prefix for files of the given package."""
        if not package:
            return ""
        style = self.config.output_style
        if is_platform_package(package):
            # Platform types keep package directories unless mapped explicitly.
            style = OutputStyle.PACKAGE
        return PREFIX_RULES[style](package)

    # Mapping table

    def lookup_override(self, qualified_name: str) -> str | None:
        """Return the mapped header of a type, ignoring computed defaults."""
        return self.table.lookup(qualified_name)

    def add_override(self, qualified_name: str, header: str) -> None:
        """Map a type to a header path."""
        self.table.put(qualified_name, header)

    def load_mappings(self) -> int:
        """Load the configured mapping resources into the table."""
        return load_mappings(self.config, self.table, self.resource_loader, self.reporter)

    def write_mappings(self) -> bool:
        """Write the table to the configured output mapping file."""
        return write_mappings(self.config, self.table, self.reporter)
