"""
Graph Reducer

Collapses every maximal connected region of non-cut vertices into a single
representative node carrying the region's total weight. After reduction the
adjacency map holds only cut vertices and representatives, and every cut
vertex's ``reduced_sum`` equals its own weight.

Absorbed nodes are removed from the Graph but keep their node-table record
(flagged ``is_absorbed``) so they can still be scored.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable

from netvitality.domain.models.graph import Component, WeightedGraph


class GraphReducer:
    """Implodes non-critical regions component by component."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def reduce(self, state: WeightedGraph, components: Iterable[Component]) -> None:
        """Reduce every component in place, then reset cut-vertex sums."""
        for component in components:
            self.reduce_component(state, component)

        for node in state.nodes.values():
            if node.is_cut_vertex:
                node.reduced_sum = node.weight

        self._logger.debug("Reduced graph: %d nodes remain", len(state.graph))

    def reduce_component(self, state: WeightedGraph, component: Component) -> None:
        """Pick representatives in lexicographic order and absorb their regions."""
        for name in sorted(component.names):
            node = state.nodes[name]
            if node.is_cut_vertex or node.is_absorbed:
                continue
            self._absorb_region(state, name)

    def _absorb_region(self, state: WeightedGraph, representative: str) -> None:
        graph, nodes = state.graph, state.nodes
        accumulated = 0
        worklist = deque(graph.neighbors(representative))

        while worklist:
            victim = worklist.popleft()
            record = nodes[victim]
            if victim == representative or record.is_cut_vertex or record.is_absorbed:
                continue

            accumulated += record.weight
            for neighbor in graph.neighbors(victim):
                if neighbor in (representative, victim):
                    continue
                graph.add_edge(representative, neighbor)
                graph.remove_edge(victim, neighbor)
                worklist.append(neighbor)
            graph.remove_node(victim)
            record.is_absorbed = True

        rep = nodes[representative]
        rep.reduced_sum = rep.weight + accumulated
        if accumulated:
            self._logger.debug(
                "Representative %s absorbed weight %d (sum=%d)",
                representative, accumulated, rep.reduced_sum,
            )
