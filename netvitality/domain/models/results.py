"""
Vitality Result Models

Outcome of one analysis run: per-node scores, the selected minimum set, the
component snapshots and the graph summary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .graph import Component, GraphSummary


def format_names(names: List[str]) -> str:
    """Render names as the single result line, e.g. ``['A', 'B']``."""
    return "[" + ", ".join(f"'{name}'" for name in names) + "]"


@dataclass
class VitalityResult:
    """Scores and selection for one analysed graph."""

    scores: Dict[str, int] = field(default_factory=dict)
    minimum: Optional[int] = None
    selected: List[str] = field(default_factory=list)
    components: Tuple[Component, ...] = ()
    summary: GraphSummary = field(default_factory=GraphSummary)

    @property
    def is_empty(self) -> bool:
        return not self.scores

    def format_line(self) -> str:
        return format_names(self.selected)

    def top(self, n: int = 10) -> List[Tuple[str, int]]:
        """The *n* lowest-scoring nodes, ties broken by name."""
        return sorted(self.scores.items(), key=lambda item: (item[1], item[0]))[:n]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "selected": list(self.selected),
            "minimum": self.minimum,
            "scores": dict(sorted(self.scores.items())),
            "components": [c.to_dict() for c in self.components],
            "summary": self.summary.to_dict(),
        }
