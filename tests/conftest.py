"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for the netvitality test suite.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ -k "parser"        # Run only parser tests
    pytest tests/ --quick            # Skip slow tests
"""

import sys
from pathlib import Path
from typing import Dict

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from netvitality.domain.models import WeightedGraph
from netvitality.domain.services import parse_text


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Graph Text Fixtures
# =============================================================================

GRAPH_TEXTS: Dict[str, str] = {
    "path": "{[['A','B'],['B','C']],{'A':1,'B':1,'C':1}}",
    "triangle": "{[['A','B'],['B','C'],['C','A']],{'A':10,'B':10,'C':10}}",
    "disjoint": "{[['A','B'],['C','D']],{'A':1,'B':1,'C':5,'D':5}}",
    "isolated": "{[],{'Solo':7}}",
    # two triangles joined by a bridge C-D, plus a pendant E on D
    "barbell": (
        "{[['A','B'],['B','C'],['C','A'],['C','D'],['D','E'],['D','F'],['F','G'],['G','D']],"
        "{'A':1,'B':2,'C':3,'D':4,'E':5,'F':6,'G':7}}"
    ),
}


@pytest.fixture
def graph_texts() -> Dict[str, str]:
    return dict(GRAPH_TEXTS)


@pytest.fixture
def path_graph() -> WeightedGraph:
    """A–B–C, all weights 1"""
    return parse_text(GRAPH_TEXTS["path"])


@pytest.fixture
def triangle_graph() -> WeightedGraph:
    """A–B–C–A, all weights 10"""
    return parse_text(GRAPH_TEXTS["triangle"])


@pytest.fixture
def disjoint_graph() -> WeightedGraph:
    """A–B (1, 1) and C–D (5, 5)"""
    return parse_text(GRAPH_TEXTS["disjoint"])


@pytest.fixture
def barbell_graph() -> WeightedGraph:
    return parse_text(GRAPH_TEXTS["barbell"])


# =============================================================================
# File Fixtures
# =============================================================================

@pytest.fixture
def graph_file(tmp_path) -> Path:
    """Path graph saved to a temp file"""
    filepath = tmp_path / "path_graph.txt"
    filepath.write_text(GRAPH_TEXTS["path"] + "\n", encoding="utf-8")
    return filepath


@pytest.fixture
def broken_file(tmp_path) -> Path:
    """Truncated description: missing closing bracket and value section"""
    filepath = tmp_path / "broken.txt"
    filepath.write_text("{[['A','B']", encoding="utf-8")
    return filepath
