"""Tests for filtered simplicial complexes."""
import pytest
from pydantic import ValidationError

from phcore.data import (
    DimensionMismatchError,
    InvalidComplexError,
    Simplex,
    SimplicialComplex,
)


class TestConstruction:
    def test_mixed_inputs(self):
        K = SimplicialComplex([Simplex([0], 0.0), [1], ([0, 1], 2.0), (2, 3)])
        assert len(K) == 4
        assert K[2].data == 2.0
        assert K[3].vertices == (2, 3)
        assert K.dimension == 1

    def test_duplicate_simplex(self):
        with pytest.raises(InvalidComplexError):
            SimplicialComplex([[0, 1], [1, 0]])

    def test_append(self):
        K = SimplicialComplex()
        assert not K
        assert K.dimension == -1
        K.append([0])
        K.append(Simplex([0, 1], 1.0))
        assert K
        assert [0, 1] in K
        assert [1, 2] not in K
        assert K.index([1, 0]) == 1

    def test_index_missing(self):
        with pytest.raises(ValueError):
            SimplicialComplex([[0]]).index([1])

    def test_invalid_simplex(self):
        with pytest.raises(ValidationError):
            SimplicialComplex([[0, 0]])


class TestCloseFaces:
    def test_missing_faces_added(self):
        K = SimplicialComplex([([0, 1, 2], 2.0), ([0, 1, 3], 1.0)])
        K.close_faces()
        assert len(K) == 11
        assert K[K.index([0, 1])].data == 1.0
        assert K[K.index([0, 2])].data == 2.0
        assert K[K.index([0])].data == 1.0
        assert K[K.index([2])].data == 2.0

    def test_existing_faces_untouched(self):
        K = SimplicialComplex([([0], 0.5), ([0, 1], 1.0)])
        K.close_faces()
        assert len(K) == 3
        assert K[K.index([0])].data == 0.5
        assert K[K.index([1])].data == 1.0

    def test_closed_after_sort(self):
        K = SimplicialComplex([([0, 1, 2, 3], 1.0)]).close_faces().sort()
        assert len(K) == 15
        K.check_closure()


class TestSort:
    def test_default_order(self):
        K = SimplicialComplex(
            [([0, 1], 1.0), ([1], 0.0), ([0], 0.0), ([2], 1.0), ([1, 2], 1.0)]
        ).sort()
        assert [s.vertices for s in K] == [(0,), (1,), (2,), (0, 1), (1, 2)]
        K.check_closure()

    def test_reverse_flips_values_only(self):
        K = SimplicialComplex(
            [([0], 1.0), ([1], 1.0), ([0, 1], 0.5), ([2], 1.0), ([1, 2], 0.8)]
        ).sort(reverse=True)
        assert [s.vertices for s in K] == [(0,), (1,), (2,), (1, 2), (0, 1)]

    def test_less_predicate(self):
        K = SimplicialComplex([[0], [1], [2]])
        K.sort(less=lambda s, t: s.vertices > t.vertices)
        assert [s.vertices for s in K] == [(2,), (1,), (0,)]
        assert K.index([2]) == 0

    def test_key_function(self):
        K = SimplicialComplex([[0], [1], [0, 1]]).sort(key=lambda s: -s.dimension)
        assert K[0].vertices == (0, 1)
        with pytest.raises(InvalidComplexError):
            K.check_closure()

    def test_key_and_less_exclusive(self):
        with pytest.raises(ValueError):
            SimplicialComplex([[0]]).sort(key=len, less=lambda s, t: False)

    def test_nan_rejected(self):
        K = SimplicialComplex([([0], float("nan"))])
        with pytest.raises(InvalidComplexError):
            K.sort()


class TestBoundary:
    def test_positions_ascending(self, filled_triangle):
        assert filled_triangle.boundary(3) == [0, 1]
        assert filled_triangle.boundary(6) == [3, 4, 5]
        assert filled_triangle.boundary(-1) == [3, 4, 5]
        assert filled_triangle.boundary(0) == []

    def test_missing_facet(self):
        K = SimplicialComplex([[0], [0, 1]])
        with pytest.raises(InvalidComplexError, match="position 1"):
            K.boundary(1)

    def test_facet_after_coface(self):
        K = SimplicialComplex([[0], [0, 1], [1]])
        with pytest.raises(InvalidComplexError):
            K.check_closure()


class TestDimension:
    def test_check_dimension(self, filled_triangle):
        filled_triangle.check_dimension(2)
        with pytest.raises(DimensionMismatchError):
            filled_triangle.check_dimension(3)
        with pytest.raises(DimensionMismatchError):
            filled_triangle.check_dimension(-1)

    def test_skeleton(self, filled_triangle):
        L = filled_triangle.skeleton(1)
        assert len(L) == 6
        assert L.dimension == 1
        L[0].data = 5.0
        assert filled_triangle[0].data == 0.0

    def test_arrays(self, two_vertices):
        assert two_vertices.filtration_values.tolist() == [0.0, 0.0, 1.0]
        assert two_vertices.dimensions.tolist() == [0, 0, 1]
