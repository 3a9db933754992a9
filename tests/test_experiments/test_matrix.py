"""
Тесты построения матрицы тестовых случаев.
"""

import dataclasses

import numpy as np
import pytest

from kmbench.experiments.matrix import build_matrix


class TestBuildMatrix:
    """Тесты build_matrix."""

    def test_cross_product_order(self, rng):
        """K-major, D-minor порядок пар."""
        matrix = build_matrix([2, 10, 50], [3, 10, 50], 20, rng)

        assert [(c.k, c.dimensions) for c in matrix] == [
            (2, 3), (2, 10), (2, 50),
            (10, 3), (10, 10), (10, 50),
            (50, 3), (50, 10), (50, 50),
        ]

    def test_dataset_shapes(self, rng):
        matrix = build_matrix([2, 4], [3, 7], 15, rng)

        for case in matrix:
            assert case.data.shape == (15, case.dimensions)
            assert np.all((case.data >= 0.0) & (case.data < 1.0))

    def test_independent_datasets(self, rng):
        """Каждый случай получает собственный датасет."""
        matrix = build_matrix([2, 2], [3], 10, rng)

        assert matrix[0].data is not matrix[1].data
        assert not np.array_equal(matrix[0].data, matrix[1].data)

    def test_duplicates_are_kept(self, rng):
        matrix = build_matrix([2, 2], [3, 3], 5, rng)

        assert len(matrix) == 4
        assert all((c.k, c.dimensions) == (2, 3) for c in matrix)

    def test_empty_inputs(self, rng):
        assert build_matrix([], [3], 5, rng) == []
        assert build_matrix([2], [], 5, rng) == []

    def test_default_generator(self):
        matrix = build_matrix([2], [3], 5)

        assert len(matrix) == 1
        assert matrix[0].data.shape == (5, 3)

    def test_test_case_is_frozen(self, rng):
        case = build_matrix([2], [3], 5, rng)[0]

        with pytest.raises(dataclasses.FrozenInstanceError):
            case.k = 3

    def test_cases_compare_by_identity(self, rng):
        """Случаи с массивами сравниваются по идентичности и хешируются."""
        first, second = build_matrix([2, 2], [3], 5, rng)

        assert first == first
        assert first != second
        assert len({first, second}) == 2
