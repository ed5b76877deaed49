"""Data model for header resolution results."""

from dataclasses import dataclass


@dataclass
class HeaderResolution:
    """Represents the outcome of resolving a type to its header path."""

    qualified_name: str
    header_path: str
    winning_rule: str  # explicit, mapping or computed
    mapping_source: str = ""  # provenance label when the mapping rule won
    platform: bool = False
