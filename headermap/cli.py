"""Command line front end resolving header paths for qualified type names."""

import argparse
import logging
from pathlib import Path
from typing import Any

from headermap.compute_config_hash import compute_config_hash
from headermap.header_path_resolver import HeaderPathResolver
from headermap.load_config import load_config
from headermap.output_style import OutputStyle
from headermap.resolution_report import ResolutionReport
from headermap.resolver_config import ResolverConfig, parse_resource_paths
from headermap.resource_loader import ResourceLoader
from headermap.type_identifier import TypeIdentifier

logger = logging.getLogger(__name__)


def run_resolution(args: argparse.Namespace) -> int:
    """Load mappings, resolve the requested types and persist the table."""
    config = _merge_cli_overrides(load_config(args.config), args)
    search_paths = parse_resource_paths(config.get("resource_paths"))
    resolver = HeaderPathResolver(
        ResolverConfig.from_dict(config),
        resource_loader=ResourceLoader(search_paths),
    )
    resolver.load_mappings()

    for entry in args.map:
        name, sep, header = entry.partition("=")
        if not sep or not name:
            resolver.reporter.error(f"Invalid --map entry {entry!r}, expected NAME=PATH")
            continue
        resolver.add_override(name, header)

    report = ResolutionReport(compute_config_hash(config))
    for type_name in args.types:
        res = resolver.resolve(TypeIdentifier.from_qualified_name(type_name))
        report.add_result(res)
        print(f"{res.qualified_name} -> {res.header_path}")

    if args.report:
        report.generate_report(args.report)
        logger.info("Resolution report written to %s", args.report)

    resolver.write_mappings()

    if resolver.reporter.has_errors():
        print(f"Finished with {resolver.reporter.error_count} error(s)")
        return 1
    return 0


def _merge_cli_overrides(
    config: dict[str, Any], args: argparse.Namespace
) -> dict[str, Any]:
    """Apply command line flags on top of the loaded configuration."""
    config = config.copy()
    if args.output_style:
        config["output_style"] = args.output_style
    if args.combine_jars:
        config["combine_jars"] = True
    if args.include_generated_sources:
        config["include_generated_sources"] = True
    if args.mapping_files is not None:
        config["mapping_files"] = args.mapping_files
    if args.output_mapping_file is not None:
        config["output_mapping_file"] = str(args.output_mapping_file)
    if args.resource_path:
        config["resource_paths"] = [
            *parse_resource_paths(config.get("resource_paths")),
            *(str(p) for p in args.resource_path),
        ]
    return config


def main(argv: list[str] | None = None) -> int:
    """Run the header resolution command."""
    ap = argparse.ArgumentParser(
        description="Resolve generated header paths for translated types.",
    )
    ap.add_argument(
        "types",
        nargs="*",
        help="Qualified type names to resolve, e.g. java.util.List",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--output-style",
        choices=[s.value for s in OutputStyle],
        help="Directory layout of generated files (default: package)",
    )
    ap.add_argument(
        "--combine-jars",
        action="store_true",
        help="Combine sources from jars into one output (implies source style)",
    )
    ap.add_argument(
        "--include-generated-sources",
        action="store_true",
        help="Emit generated sources with their origin (implies source style)",
    )
    ap.add_argument(
        "--mapping-files",
        help="Comma separated header mapping files; an empty value loads none",
    )
    ap.add_argument(
        "--output-mapping-file",
        type=Path,
        help="Write the header mapping table to this file",
    )
    ap.add_argument(
        "--resource-path",
        type=Path,
        action="append",
        default=[],
        help="Directory searched for mapping files (repeatable)",
    )
    ap.add_argument(
        "--map",
        action="append",
        default=[],
        metavar="NAME=PATH",
        help="Add a header mapping override (repeatable)",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON resolution report to this path",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_resolution(args)


if __name__ == "__main__":
    raise SystemExit(main())
