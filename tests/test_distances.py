"""
Tests for the distance and threshold helpers.
"""

import math

import numpy as np
import pytest

from chunking.distances import (
    calculate_threshold,
    cosine_distances,
    cosine_similarity,
    dot,
    find_cut_points,
)


class TestVectorMath:
    def test_dot(self):
        assert dot([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == pytest.approx(32.0)

    def test_dot_accepts_numpy_arrays(self):
        assert dot(np.array([1.0, 0.0]), np.array([0.5, 2.0])) == pytest.approx(0.5)

    def test_cosine_similarity_identical(self):
        assert cosine_similarity([1.0, 2.0], [2.0, 4.0]) == pytest.approx(1.0)

    def test_cosine_similarity_orthogonal(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 3.0]) == pytest.approx(0.0)

    def test_cosine_similarity_opposite(self):
        assert cosine_similarity([1.0, 1.0], [-1.0, -1.0]) == pytest.approx(-1.0)

    def test_zero_vector_has_zero_similarity(self):
        """A zero-norm vector yields 0.0 instead of NaN."""
        sim = cosine_similarity([0.0, 0.0], [1.0, 2.0])
        assert sim == 0.0
        assert not math.isnan(sim)
        assert cosine_similarity([0.0, 0.0], [0.0, 0.0]) == 0.0


class TestCosineDistances:
    def test_first_distance_is_zero(self):
        distances = cosine_distances([[1.0, 0.0], [0.0, 1.0], [0.0, 1.0]])
        assert distances == pytest.approx([0.0, 1.0, 0.0])

    def test_same_length_as_input(self):
        vectors = np.random.default_rng(7).random((9, 4))
        assert len(cosine_distances(vectors)) == 9

    def test_zero_vector_is_maximally_distant(self):
        distances = cosine_distances([[1.0, 0.0], [0.0, 0.0]])
        assert distances == [0.0, 1.0]

    def test_empty(self):
        assert cosine_distances([]) == []


class TestCalculateThreshold:
    distances = [0.0, 0.3, 0.1, 0.2]

    def test_median(self):
        # int(0.5 * 4) = 2 -> second smallest non-zero
        assert calculate_threshold(self.distances, 0.5) == 0.2

    def test_index_zero_is_bumped_to_one(self):
        """The leading zero distance is never the threshold."""
        assert calculate_threshold(self.distances, 1.0) == 0.1
        assert calculate_threshold(self.distances, 0.9999) == 0.1

    def test_tiny_percentile_picks_maximum(self):
        assert calculate_threshold(self.distances, 0.00001) == 0.3

    def test_does_not_reorder_input(self):
        distances = list(self.distances)
        calculate_threshold(distances, 0.5)
        assert distances == self.distances

    def test_single_distance(self):
        assert calculate_threshold([0.0], 0.9) == 0.0

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            calculate_threshold([], 0.9)


class TestFindCutPoints:
    def test_cuts_at_or_below_threshold(self):
        assert find_cut_points([0.0, 0.5, 0.1, 0.3], 0.3) == [2, 3]

    def test_index_zero_never_cut(self):
        assert find_cut_points([0.0, 0.0], 0.0) == [1]

    def test_no_cuts_below_minimum(self):
        assert find_cut_points([0.0, 0.5, 0.6], 0.4) == []
