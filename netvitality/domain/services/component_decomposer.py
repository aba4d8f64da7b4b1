"""
Component Decomposer

Assigns every node a connected-component id and marks articulation (cut)
vertices with the discovery-time / low-link depth-first search.

The traversal runs on an explicit stack, so chain-shaped graphs of any length
are handled without growing the interpreter stack. Discovery counters live in
a TraversalContext created per call; nothing is shared between runs.

Usage:
    components = ComponentDecomposer().decompose(state)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from netvitality.domain.models.graph import Component, WeightedGraph


# ---------------------------------------------------------------------------
# Traversal state
# ---------------------------------------------------------------------------

@dataclass
class TraversalContext:
    """Discovery times and low-link values of one decomposition pass."""

    timer: int = 0
    discovery: Dict[str, int] = field(default_factory=dict)
    lowlink: Dict[str, int] = field(default_factory=dict)
    next_component_id: int = 0

    def enter(self, name: str) -> None:
        self.discovery[name] = self.lowlink[name] = self.timer
        self.timer += 1

    def visited(self, name: str) -> bool:
        return name in self.discovery

    def tighten(self, name: str, value: int) -> None:
        if value < self.lowlink[name]:
            self.lowlink[name] = value

    def allocate_component_id(self) -> int:
        component_id = self.next_component_id
        self.next_component_id += 1
        return component_id


@dataclass
class _Frame:
    """One node on the explicit DFS stack."""

    name: str
    parent: Optional[str]
    neighbors: Iterator[str]
    children: int = 0
    subtree_weight: int = 0


# ---------------------------------------------------------------------------
# Decomposer
# ---------------------------------------------------------------------------

class ComponentDecomposer:
    """Finds connected components and articulation points in one pass."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def decompose(self, state: WeightedGraph) -> List[Component]:
        """
        Run the DFS from every unvisited node (lexicographic order).

        Side effects on the node table: ``component_id`` and
        ``is_cut_vertex`` are set for every node.

        Returns:
            One Component per DFS root, ordered by component id.
        """
        ctx = TraversalContext()
        values: Dict[int, int] = {}

        for root in state.graph.names():
            if ctx.visited(root):
                continue
            component_id = ctx.allocate_component_id()
            values[component_id] = self._visit(state, ctx, root, component_id)

        members: Dict[int, List[str]] = {cid: [] for cid in values}
        for name, node in state.nodes.items():
            members[node.component_id].append(name)

        components = [
            Component(
                component_id=cid,
                names=frozenset(names),
                cutpoints=frozenset(n for n in names if state.nodes[n].is_cut_vertex),
                value=values[cid],
            )
            for cid, names in sorted(members.items())
        ]

        self._logger.info(
            "Decomposition: %d components, %d cut vertices",
            len(components), sum(len(c.cutpoints) for c in components),
        )
        return components

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _visit(
        self,
        state: WeightedGraph,
        ctx: TraversalContext,
        root: str,
        component_id: int,
    ) -> int:
        """Iterative DFS from *root*; returns the weight of the whole tree."""
        graph, nodes = state.graph, state.nodes

        ctx.enter(root)
        nodes[root].component_id = component_id
        stack = [_Frame(root, None, iter(graph.neighbors(root)))]

        while stack:
            frame = stack[-1]
            child = self._next_child(ctx, frame)
            if child is not None:
                ctx.enter(child)
                nodes[child].component_id = component_id
                frame.children += 1
                stack.append(_Frame(child, frame.name, iter(graph.neighbors(child))))
                continue

            # all neighbors of frame.name are done
            stack.pop()
            frame.subtree_weight += nodes[frame.name].weight
            if not stack:
                if frame.children > 1:
                    nodes[frame.name].is_cut_vertex = True
                return frame.subtree_weight

            parent = stack[-1]
            parent.subtree_weight += frame.subtree_weight
            ctx.tighten(parent.name, ctx.lowlink[frame.name])
            if parent.parent is not None and ctx.lowlink[frame.name] >= ctx.discovery[parent.name]:
                nodes[parent.name].is_cut_vertex = True

        return 0

    @staticmethod
    def _next_child(ctx: TraversalContext, frame: _Frame) -> Optional[str]:
        """Advance *frame* to its next unvisited neighbor, updating low-links."""
        for neighbor in frame.neighbors:
            if neighbor == frame.parent:
                continue
            if ctx.visited(neighbor):
                ctx.tighten(frame.name, ctx.discovery[neighbor])
                continue
            return neighbor
        return None
