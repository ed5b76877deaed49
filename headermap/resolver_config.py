"""Typed settings controlling header and output path resolution."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from headermap.output_style import OutputStyle


def parse_mapping_sources(value: str | list[str] | None) -> list[str] | None:
    """Normalize a mapping source setting.

    None keeps the default resource. A comma-separated string is split, and an
    empty string means an explicitly empty list.
    """
    if value is None:
        return None
    if isinstance(value, str):
        if not value:
            return []
        return value.split(",")
    return list(value)


def parse_resource_paths(value: str | list[str] | None) -> list[str]:
    """Normalize the resource search path; a single string is one directory."""
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(p) for p in value]


@dataclass
class ResolverConfig:
    """Output layout policy and mapping file locations for one run."""

    output_style: OutputStyle = OutputStyle.PACKAGE
    # Variant of SOURCE style: sources from .jar files are combined into a
    # single output header and source file.
    combine_jars: bool = False
    # Variant of SOURCE style: annotation generated sources are emitted with
    # the source they are generated from.
    include_generated_sources: bool = False
    input_mapping_sources: list[str] | None = None
    output_mapping_destination: Path | None = None

    def enable_combine_jars(self) -> None:
        """Combine jar sources; implies SOURCE style."""
        self.output_style = OutputStyle.SOURCE
        self.combine_jars = True

    def enable_include_generated_sources(self) -> None:
        """Include generated sources; implies SOURCE style."""
        self.output_style = OutputStyle.SOURCE
        self.include_generated_sources = True

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "ResolverConfig":
        """Build settings from a loaded configuration dictionary."""
        style = OutputStyle.parse(config.get("output_style", "package"))
        result = cls(output_style=style)
        if config.get("combine_jars"):
            result.enable_combine_jars()
        if config.get("include_generated_sources"):
            result.enable_include_generated_sources()
        result.input_mapping_sources = parse_mapping_sources(config.get("mapping_files"))
        output_file = config.get("output_mapping_file")
        if output_file:
            result.output_mapping_destination = Path(output_file)
        return result
