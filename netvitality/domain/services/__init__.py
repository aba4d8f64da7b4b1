"""
Domain Services Package

The vitality pipeline stages. Pure graph logic, no I/O beyond the text
stream handed to the parser.
"""

from .format_parser import FormatParser, InputFormatError, parse_stream, parse_text
from .component_decomposer import ComponentDecomposer, TraversalContext
from .graph_reducer import GraphReducer
from .vitality_evaluator import VitalityEvaluator
from .selector import select_minimum

__all__ = [
    # Parser
    "FormatParser",
    "InputFormatError",
    "parse_stream",
    "parse_text",
    # Decomposition
    "ComponentDecomposer",
    "TraversalContext",
    # Reduction
    "GraphReducer",
    # Scoring
    "VitalityEvaluator",
    "select_minimum",
]
