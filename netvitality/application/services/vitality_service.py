"""
Vitality Service

Application service implementing IVitalityUseCase.
Orchestrates the analysis pipeline for one graph:

    1. Format Parser        → WeightedGraph (adjacency map + node table)
    2. Component Decomposer → component ids, cut vertices, Component snapshots
    3. Graph Reducer        → non-cut regions collapsed into representatives
    4. Vitality Evaluator   → name → score table
    5. Selector             → minimum-score names

Each run owns its own graph, node table and components; the service itself
keeps no per-graph state and can be reused for any number of inputs.
"""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path
from typing import Optional, TextIO, Union

from netvitality.application.ports import IVitalityUseCase
from netvitality.domain.models import GraphSummary, VitalityResult, WeightedGraph
from netvitality.domain.services import (
    ComponentDecomposer,
    GraphReducer,
    InputFormatError,
    VitalityEvaluator,
    parse_stream,
    select_minimum,
)


class VitalityService(IVitalityUseCase):
    """
    Main service for node vitality analysis.

    Follows the hexagonal architecture pattern:
    - Inbound port: IVitalityUseCase
    - Domain services are injected or default-constructed
    """

    def __init__(
        self,
        decomposer: Optional[ComponentDecomposer] = None,
        reducer: Optional[GraphReducer] = None,
        evaluator: Optional[VitalityEvaluator] = None,
        encoding: str = "utf-8",
    ) -> None:
        self._decomposer = decomposer or ComponentDecomposer()
        self._reducer = reducer or GraphReducer()
        self._evaluator = evaluator or VitalityEvaluator()
        self._encoding = encoding
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def analyze(self, state: WeightedGraph) -> VitalityResult:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._dump_graph("Parsed graph", state)

        components = self._decomposer.decompose(state)
        summary = GraphSummary.from_graph(state)

        if self._logger.isEnabledFor(logging.DEBUG):
            for comp in components:
                self._logger.debug(
                    "comp %d, value %d: %s",
                    comp.component_id, comp.value, " ".join(sorted(comp.names)),
                )
            self._logger.debug("cutpoints: %s", " ".join(state.cut_vertices()))

        self._reducer.reduce(state, components)
        if self._logger.isEnabledFor(logging.DEBUG):
            self._dump_graph("Reduced graph", state)

        scores = self._evaluator.evaluate(state, components)
        minimum, selected = select_minimum(scores)

        self._logger.info(
            "Vitality analysis: %d nodes, %d edges, %d components, %d cut vertices, "
            "minimum=%s, selected=%d",
            summary.nodes, summary.edges, summary.num_components,
            summary.num_cut_vertices, minimum, len(selected),
        )
        return VitalityResult(
            scores=scores,
            minimum=minimum,
            selected=selected,
            components=tuple(components),
            summary=summary,
        )

    def analyze_stream(self, stream: TextIO) -> VitalityResult:
        return self.analyze(parse_stream(stream))

    def analyze_text(self, text: str) -> VitalityResult:
        return self.analyze_stream(io.StringIO(text))

    def analyze_file(self, path: Union[str, Path]) -> VitalityResult:
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")
        with open(file_path, "r", encoding=self._encoding) as f:
            return self.analyze_stream(f)

    def process_stream(self, in_stream: TextIO, out_stream: TextIO) -> bool:
        try:
            result = self.analyze_stream(in_stream)
        except InputFormatError as exc:
            self._logger.warning("Rejected input: %s", exc)
            out_stream.write(f"{exc}\n")
            out_stream.flush()
            return False

        out_stream.write(result.format_line() + "\n")
        out_stream.flush()
        return True

    def export_results(self, results: object, output_path: Union[str, Path]) -> str:
        """Write results (anything with to_dict, or a plain dict) as JSON."""
        if hasattr(results, "to_dict"):
            results = results.to_dict()
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(results, f, indent=2, default=str)
        self._logger.info("Results exported to %s", path)
        return str(path)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _dump_graph(self, title: str, state: WeightedGraph) -> None:
        self._logger.debug("%s:", title)
        for name in state.graph.names():
            self._logger.debug("  %s: %s", name, " ".join(state.graph.neighbors(name)))
        for name in sorted(state.nodes):
            node = state.nodes[name]
            self._logger.debug("  %s - %d (sum %d)", name, node.weight, node.reduced_sum)
