"""Tests for the union-find zero-dimensional persistence."""
import math

import pytest

from phcore.computing import (
    compute_connected_components,
    compute_persistence_diagrams,
    compute_zero_dimensional_persistence,
)
from phcore.data import InvalidComplexError, SimplicialComplex


class TestElderRule:
    def test_two_vertices(self, two_vertices):
        pairing = compute_connected_components(two_vertices)
        assert pairing.pairs == [(1, 2)]
        assert pairing.unpaired == [0]

    def test_younger_component_dies(self):
        K = SimplicialComplex([([0], 0.0), ([1], 1.0), ([0, 1], 2.0)]).sort()
        pairing = compute_connected_components(K)
        assert pairing.pairs == [(1, 2)]
        assert pairing.unpaired == [0]

    def test_merged_component_keeps_elder(self):
        K = SimplicialComplex(
            [([0], 0.0), ([1], 1.0), ([2], 2.0), ([1, 2], 3.0), ([0, 1], 4.0)]
        ).sort()
        diagram, pairing = compute_zero_dimensional_persistence(K)
        assert pairing.pairs == [(2, 3), (1, 4)]
        assert sorted((p.x, p.y) for p in diagram) == [
            (0.0, math.inf),
            (1.0, 4.0),
            (2.0, 3.0),
        ]

    def test_cycle_edge_not_paired(self, hollow_triangle):
        pairing = compute_connected_components(hollow_triangle)
        assert pairing.pairs == [(1, 3), (2, 4)]
        assert pairing.unpaired == [0]
        assert 5 not in pairing.destroyers

    def test_higher_simplices_ignored(self, filled_triangle):
        pairing = compute_connected_components(filled_triangle)
        assert pairing.pairs == [(1, 3), (2, 4)]

    def test_disconnected(self):
        K = SimplicialComplex([[0], [1], [2], [3], [0, 1]]).sort()
        diagram, pairing = compute_zero_dimensional_persistence(K)
        assert diagram.betti == 3
        assert pairing.unpaired == [0, 2, 3]

    def test_empty(self):
        diagram, pairing = compute_zero_dimensional_persistence(SimplicialComplex())
        assert len(diagram) == 0
        assert not pairing


class TestCrossCheck:
    def test_matches_reduction(self, random_graph):
        diagram, pairing = compute_zero_dimensional_persistence(random_graph)
        diagrams, full = compute_persistence_diagrams(random_graph)
        dims = random_graph.dimensions

        assert diagram == diagrams[0]
        assert pairing.pairs == [p for p in full.pairs if dims[p[0]] == 0]
        assert pairing.unpaired == [i for i in full.unpaired if dims[i] == 0]


class TestUnpairedValue:
    def test_sentinel_only_in_diagram(self, two_vertices):
        diagram, pairing = compute_zero_dimensional_persistence(
            two_vertices, unpaired_value=-1.0
        )
        assert sorted(diagram.deaths.tolist()) == [-1.0, 1.0]
        assert diagram.betti == 1
        assert pairing.unpaired == [0]

    def test_default_is_infinite(self, two_vertices):
        diagram, _ = compute_zero_dimensional_persistence(two_vertices)
        assert math.inf in diagram.deaths.tolist()


class TestErrors:
    def test_edge_before_vertex(self):
        K = SimplicialComplex([[0], [0, 1], [1]])
        with pytest.raises(InvalidComplexError):
            compute_connected_components(K)
