"""Tests for the public reduction API."""
import pytest
from loguru import logger
from pydantic import ValidationError

from phcore import tl
from phcore.data import DimensionMismatchError, ReductionConfig, SimplicialComplex


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(messages.append, level="INFO", format="{message}")
    yield messages
    logger.remove(handler_id)


class TestReduce:
    def test_prepares_complex(self):
        K = SimplicialComplex([([0, 1, 2], 1.0)])
        diagrams = tl.reduce(K, ReductionConfig(close_faces=True))
        assert len(K) == 7
        assert tl.betti_numbers(diagrams) == [1, 0, 0]

    def test_keyword_overrides(self, filled_triangle):
        diagrams = tl.reduce(filled_triangle, ReductionConfig(algorithm="twist"), max_dimension=1)
        assert tl.betti_numbers(diagrams) == [1, 1]

    def test_keywords_only(self, hollow_triangle):
        diagrams, pairing = tl.reduce(hollow_triangle, algorithm="twist", return_pairing=True)
        assert tl.betti_numbers(diagrams) == [1, 1]
        assert pairing.unpaired == [0, 5]

    def test_invalid_config(self, filled_triangle):
        with pytest.raises(ValidationError):
            tl.reduce(filled_triangle, algorithm="chunk")
        with pytest.raises(ValidationError):
            tl.reduce(filled_triangle, colour="red")

    def test_not_a_complex(self):
        with pytest.raises(ValidationError):
            tl.reduce([[0], [1]])

    def test_verbose(self, hollow_triangle, log_messages):
        tl.reduce(hollow_triangle, verbose=True)
        assert any("Betti numbers [1, 1]" in str(m) for m in log_messages)


class TestZeroDimensional:
    def test_reduce_zero_dimensional(self, two_vertices, log_messages):
        diagram, pairing = tl.reduce_zero_dimensional(
            two_vertices, unpaired_value=5.0, verbose=True
        )
        assert sorted(diagram.deaths.tolist()) == [1.0, 5.0]
        assert pairing.pairs == [(1, 2)]
        assert any("1 surviving components" in str(m) for m in log_messages)


class TestBetti:
    def test_betti_number(self, hollow_triangle):
        diagrams = tl.reduce(hollow_triangle)
        assert tl.betti_number(diagrams, 1) == 1
        with pytest.raises(DimensionMismatchError):
            tl.betti_number(diagrams, 2)
        with pytest.raises(DimensionMismatchError):
            tl.betti_number(diagrams, -1)
