"""
Graph Domain Models

Core entities for the vitality pipeline:

    Node          : weighted vertex record, flags set by decomposition/reduction
    Graph         : symmetric adjacency map (name -> set of neighbor names)
    WeightedGraph : Graph + node table, the single state owned by one run
    Component     : immutable snapshot of one connected component
    GraphSummary  : graph-level statistics computed with NetworkX

Nodes are addressed by name everywhere, so rewiring the adjacency map during
reduction never leaves dangling references: an absorbed node disappears from
the Graph but its record stays in the node table for scoring.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

import networkx as nx


# =============================================================================
# Vertices
# =============================================================================

@dataclass
class Node:
    """Weighted vertex with the bookkeeping of one analysis run."""
    name: str
    weight: int = 0
    component_id: int = -1
    reduced_sum: int = 0
    is_cut_vertex: bool = False
    is_absorbed: bool = False


# =============================================================================
# Adjacency
# =============================================================================

class Graph:
    """
    Undirected adjacency map.

    Every mutation touches both endpoints, so the map stays symmetric
    through parsing and reduction alike.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, Set[str]] = {}

    # Vertex operations
    def add_node(self, name: str) -> None:
        self._adjacency.setdefault(name, set())

    def remove_node(self, name: str) -> None:
        for neighbor in self._adjacency.pop(name, set()):
            if neighbor != name:
                self._adjacency[neighbor].discard(name)

    def names(self) -> List[str]:
        return sorted(self._adjacency)

    # Edge operations
    def add_edge(self, a: str, b: str) -> None:
        self._adjacency.setdefault(a, set()).add(b)
        self._adjacency.setdefault(b, set()).add(a)

    def remove_edge(self, a: str, b: str) -> None:
        if a in self._adjacency:
            self._adjacency[a].discard(b)
        if b in self._adjacency:
            self._adjacency[b].discard(a)

    def has_edge(self, a: str, b: str) -> bool:
        return b in self._adjacency.get(a, ())

    def neighbors(self, name: str) -> List[str]:
        """Neighbors of *name* in lexicographic order (empty if absent)."""
        return sorted(self._adjacency.get(name, ()))

    def edges(self) -> List[Tuple[str, str]]:
        """Each undirected edge once, as an ordered (low, high) pair."""
        return sorted(
            (a, b) for a, links in self._adjacency.items() for b in links if a <= b
        )

    def is_symmetric(self) -> bool:
        return all(
            a in self._adjacency.get(b, ())
            for a, links in self._adjacency.items()
            for b in links
        )

    def __contains__(self, name: object) -> bool:
        return name in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)


# =============================================================================
# Components
# =============================================================================

@dataclass(frozen=True)
class Component:
    """Connected component as it was right after decomposition."""
    component_id: int
    names: FrozenSet[str]
    cutpoints: FrozenSet[str]
    value: int

    def to_dict(self) -> Dict:
        return {
            'id': self.component_id,
            'names': sorted(self.names),
            'cutpoints': sorted(self.cutpoints),
            'value': self.value,
        }


# =============================================================================
# Run state
# =============================================================================

@dataclass
class WeightedGraph:
    """Adjacency map plus node table; owned by exactly one analysis run."""
    graph: Graph = field(default_factory=Graph)
    nodes: Dict[str, Node] = field(default_factory=dict)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[str, str]],
        weights: Optional[Dict[str, int]] = None,
    ) -> 'WeightedGraph':
        """Build a reconciled graph from an edge list and weight mapping."""
        state = cls()
        for a, b in edges:
            state.graph.add_edge(a, b)
        for name, weight in (weights or {}).items():
            state.nodes[name] = Node(name, weight)
        state.reconcile()
        return state

    def reconcile(self) -> None:
        """Make every named node present in both the Graph and the node table."""
        for name in list(self.nodes):
            self.graph.add_node(name)
        for name in self.graph.names():
            if name not in self.nodes:
                self.nodes[name] = Node(name)

    def total_weight(self) -> int:
        return sum(n.weight for n in self.nodes.values())

    def cut_vertices(self) -> List[str]:
        return sorted(name for name, n in self.nodes.items() if n.is_cut_vertex)

    def to_networkx(self) -> nx.Graph:
        """Snapshot of the current adjacency map as a NetworkX graph."""
        G = nx.Graph()
        for name in self.graph.names():
            node = self.nodes.get(name)
            G.add_node(name, weight=node.weight if node else 0)
        G.add_edges_from(self.graph.edges())
        return G


@dataclass
class GraphSummary:
    """Graph-level statistics of the parsed (unreduced) graph."""
    nodes: int = 0
    edges: int = 0
    density: float = 0.0
    num_components: int = 0
    num_cut_vertices: int = 0
    total_weight: int = 0

    @classmethod
    def from_graph(cls, state: WeightedGraph) -> 'GraphSummary':
        G = state.to_networkx()
        return cls(
            nodes=G.number_of_nodes(),
            edges=G.number_of_edges(),
            density=nx.density(G) if G.number_of_nodes() > 1 else 0.0,
            num_components=nx.number_connected_components(G) if len(G) else 0,
            num_cut_vertices=len(state.cut_vertices()),
            total_weight=state.total_weight(),
        )

    def to_dict(self) -> Dict:
        return {
            'nodes': self.nodes,
            'edges': self.edges,
            'density': round(self.density, 6),
            'num_components': self.num_components,
            'num_cut_vertices': self.num_cut_vertices,
            'total_weight': self.total_weight,
        }
