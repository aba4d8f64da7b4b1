"""
Vitality Evaluator

Scores the fragmentation cost of removing each node:

    score(n) = Σ value(o)²                    over components o ≠ comp(n)
             + (value(comp(n)) − weight(n))²  if n is not a cut vertex
             + Σ branch(n, b)²                if n is a cut vertex
             + weight(n)

where branch(n, b) is the summed ``reduced_sum`` of everything reachable from
reduced-graph neighbor b without passing through n. Absorbed nodes are scored
from their node-table records like any other non-cut node.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Set

from netvitality.domain.models.graph import Component, WeightedGraph


class VitalityEvaluator:
    """Computes the name → score table over a reduced graph."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def evaluate(self, state: WeightedGraph, components: Iterable[Component]) -> Dict[str, int]:
        """
        Score every original node.

        Args:
            state: graph after GraphReducer has run
            components: snapshots taken by ComponentDecomposer

        Returns:
            Mapping of node name to vitality score
        """
        by_id: Dict[int, Component] = {c.component_id: c for c in components}
        total_squares = sum(c.value * c.value for c in by_id.values())

        scores: Dict[str, int] = {}
        for name in sorted(state.nodes):
            node = state.nodes[name]
            own = by_id[node.component_id]
            score = total_squares - own.value * own.value

            if node.is_cut_vertex:
                score += sum(b * b for b in self.branch_weights(state, name))
            else:
                rest = own.value - node.weight
                score += rest * rest

            score += node.weight
            scores[name] = score
            self._logger.debug("Vitality %s = %d", name, score)

        return scores

    @staticmethod
    def branch_weights(state: WeightedGraph, name: str) -> List[int]:
        """Weights of the pieces left in the reduced graph when *name* is removed."""
        graph, nodes = state.graph, state.nodes
        used: Set[str] = {name}
        weights: List[int] = []

        for start in graph.neighbors(name):
            if start in used:
                continue
            used.add(start)
            stack = [start]
            total = 0
            while stack:
                current = stack.pop()
                total += nodes[current].reduced_sum
                for link in graph.neighbors(current):
                    if link not in used:
                        used.add(link)
                        stack.append(link)
            weights.append(total)

        return weights
