"""Tests for cosine similarity."""

import pytest

from lumos.utils.similarity import cosine_similarity


class TestCosineSimilarity:

    @pytest.mark.parametrize(
        ("vec1", "vec2", "expected"),
        [
            ([1.0, 0.0, 0.0], [1.0, 0.0, 0.0], 1.0),
            ([1.0, 0.0, 0.0], [-1.0, 0.0, 0.0], 0.0),
            ([1.0, 0.0, 0.0], [0.0, 1.0, 0.0], 0.5),
            ([3.0, 4.0], [6.0, 8.0], 1.0),
        ],
    )
    def test_mapped_to_unit_interval(self, vec1, vec2, expected):
        assert cosine_similarity(vec1, vec2) == pytest.approx(expected)

    def test_zero_vector(self):
        assert cosine_similarity([0.0, 0.0], [1.0, 0.0]) == 0.5

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError, match="dimension mismatch"):
            cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0])

    def test_empty_vectors(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            cosine_similarity([], [])

    def test_tiny_magnitudes(self):
        assert 0.0 <= cosine_similarity([1e-10, 1e-10], [1e-10, 1e-10]) <= 1.0
