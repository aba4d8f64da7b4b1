"""
NetVitality - Node vitality analysis for weighted undirected graphs.

Estimates the fragmentation cost of removing every node of a network and
reports the node(s) whose removal hurts the least.

Pipeline:
    1. Format Parser        → adjacency map + node weights
    2. Component Decomposer → component ids + articulation points
    3. Graph Reducer        → non-critical regions collapsed into representatives
    4. Vitality Evaluator   → per-node fragmentation score
    5. Selector             → minimum-score node names

Usage:
    from netvitality import VitalityService
    result = VitalityService().analyze_text("{[['A','B'],['B','C']],{'A':1,'B':1,'C':1}}")
    print(result.format_line())   # ['B']
"""

from .application.services.vitality_service import VitalityService
from .domain.models import Component, Graph, Node, VitalityResult, WeightedGraph
from .domain.services import InputFormatError, parse_text

__all__ = [
    "VitalityService",
    "Component",
    "Graph",
    "Node",
    "VitalityResult",
    "WeightedGraph",
    "InputFormatError",
    "parse_text",
]

__version__ = "1.0.0"
