"""
Domain Models Package

Graph entities and analysis results.
"""

from .graph import Component, Graph, GraphSummary, Node, WeightedGraph
from .results import VitalityResult, format_names

__all__ = [
    "Node",
    "Graph",
    "Component",
    "WeightedGraph",
    "GraphSummary",
    "VitalityResult",
    "format_names",
]
