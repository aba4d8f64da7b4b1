"""
Unit Tests for vitality scoring and selection

Tests for:
    - Scores on the reference scenarios
    - Brute-force agreement: remove the node, square every piece's weight
    - Selector ties and empty tables
"""

import networkx as nx
import pytest

from netvitality.domain.models import WeightedGraph
from netvitality.domain.services import (
    ComponentDecomposer,
    GraphReducer,
    VitalityEvaluator,
    parse_text,
    select_minimum,
)


def score(state: WeightedGraph):
    components = ComponentDecomposer().decompose(state)
    GraphReducer().reduce(state, components)
    return VitalityEvaluator().evaluate(state, components)


def brute_force_vitality(G: nx.Graph) -> dict:
    """Square of every remaining piece's weight after deleting each node."""
    result = {}
    for removed in G.nodes:
        rest = G.subgraph(n for n in G.nodes if n != removed)
        total = sum(
            sum(G.nodes[n]["weight"] for n in piece) ** 2
            for piece in nx.connected_components(rest)
        )
        result[removed] = total + G.nodes[removed]["weight"]
    return result


# =============================================================================
# Reference scenarios
# =============================================================================

class TestScenarioScores:

    def test_path(self, path_graph):
        assert score(path_graph) == {"A": 5, "B": 3, "C": 5}

    def test_triangle(self, triangle_graph):
        assert score(triangle_graph) == {"A": 410, "B": 410, "C": 410}

    def test_disjoint_edges(self, disjoint_graph):
        assert score(disjoint_graph) == {"A": 102, "B": 102, "C": 34, "D": 34}

    def test_isolated_node_scores_own_weight(self):
        assert score(parse_text("{[],{'Solo':7}}")) == {"Solo": 7}

    def test_barbell(self, barbell_graph):
        assert score(barbell_graph) == {
            "A": 730, "B": 678, "C": 496, "D": 234,
            "E": 534, "F": 490, "G": 448,
        }

    def test_absorbed_nodes_are_scored(self, barbell_graph):
        scores = score(barbell_graph)
        assert barbell_graph.nodes["G"].is_absorbed
        assert scores["G"] == 21 ** 2 + 7

    def test_zero_weight_nodes(self):
        scores = score(parse_text("{[['A','B'],['B','C']],{}}"))
        assert scores == {"A": 0, "B": 0, "C": 0}

    def test_branch_weights_of_cut_vertex(self, barbell_graph):
        score(barbell_graph)
        assert VitalityEvaluator.branch_weights(barbell_graph, "D") == [6, 5, 13]


# =============================================================================
# Brute-force agreement
# =============================================================================

class TestAgainstBruteForce:

    @pytest.mark.parametrize("seed", range(25))
    def test_random_graph_scores(self, seed):
        G = nx.gnm_random_graph(18, 20, seed=seed)
        weights = {str(v): (v * 13 + seed) % 9 for v in G.nodes}
        state = WeightedGraph.from_edges(((str(a), str(b)) for a, b in G.edges), weights)

        expected = brute_force_vitality(state.to_networkx())
        assert score(state) == expected

    @pytest.mark.parametrize("seed", range(5))
    def test_random_tree_scores(self, seed):
        # every vertex i > 0 hangs off an earlier vertex
        T = nx.Graph([(i, (i * 7 + seed) % i) for i in range(1, 20)])
        state = WeightedGraph.from_edges(
            ((str(a), str(b)) for a, b in T.edges),
            {str(v): v + 1 for v in T.nodes},
        )

        expected = brute_force_vitality(state.to_networkx())
        assert score(state) == expected

    @pytest.mark.slow
    def test_long_chain(self):
        n = 1500
        names = [f"n{i:05d}" for i in range(n)]
        state = WeightedGraph.from_edges(zip(names, names[1:]), {name: 1 for name in names})

        scores = score(state)

        # middle nodes split the chain most evenly
        assert scores[names[n // 2]] == min(scores.values())
        assert scores[names[0]] == (n - 1) ** 2 + 1


# =============================================================================
# Selector
# =============================================================================

class TestSelector:

    def test_single_minimum(self):
        assert select_minimum({"A": 5, "B": 3, "C": 5}) == (3, ["B"])

    def test_all_ties_reported_in_name_order(self):
        assert select_minimum({"C": 1, "A": 1, "B": 1}) == (1, ["A", "B", "C"])

    def test_empty_table(self):
        assert select_minimum({}) == (None, [])
