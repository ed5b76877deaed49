"""Logic for generating reports on header path resolution."""

import json
import time
from pathlib import Path
from typing import Any

from headermap.resolution_result import HeaderResolution


class ResolutionReport:
    """Collects and summarizes the results of header path resolution."""

    def __init__(self, config_hash: str) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.results: list[HeaderResolution] = []
        self.start_time = time.time()

    def add_result(self, result: HeaderResolution) -> None:
        """Add a single resolution result to the report."""
        self.results.append(result)

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_items": len(self.results),
            },
            "results": [
                {
                    "qualified_name": r.qualified_name,
                    "header_path": r.header_path,
                    "winning_rule": r.winning_rule,
                    "mapping_source": r.mapping_source,
                    "platform": r.platform,
                }
                for r in self.results
            ],
            "stats": self._compute_stats(),
        }

        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        rule_counts: dict[str, int] = {}
        source_counts: dict[str, int] = {}
        platform_count = 0

        for r in self.results:
            rule_counts[r.winning_rule] = rule_counts.get(r.winning_rule, 0) + 1
            if r.mapping_source:
                source_counts[r.mapping_source] = (
                    source_counts.get(r.mapping_source, 0) + 1
                )
            if r.platform:
                platform_count += 1

        return {
            "rule_counts": rule_counts,
            "mapping_source_counts": source_counts,
            "platform_types": platform_count,
        }
