"""
CLI Inbound Adapter Package

Command-line interface for node vitality analysis.
"""

from .app import build_parser, main

__all__ = [
    "build_parser",
    "main",
]
