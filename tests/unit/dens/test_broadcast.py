"""
Tests for bulk density evaluation and parameter broadcasting
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings

import numpy as np
import pytest

from pysatl_dens.dens import broadcast_parameter, dlnorm, evaluate_bulk
from pysatl_dens.dens.lognormal import LOGNORMAL_KERNEL
from pysatl_dens.errors import ShapeMismatchError

from ..base import BaseDistributionTest


def _scalar_loop(x, mu, sigma, log_form=False):
    x = np.asarray(x, dtype=float)
    mu = np.broadcast_to(np.asarray(mu, dtype=float).reshape(-1), x.size) if np.ndim(mu) else mu
    sigma = (
        np.broadcast_to(np.asarray(sigma, dtype=float).reshape(-1), x.size)
        if np.ndim(sigma)
        else sigma
    )
    flat = x.ravel()
    values = [
        dlnorm(
            float(flat[i]),
            float(mu[i]) if np.ndim(mu) else mu,
            float(sigma[i]) if np.ndim(sigma) else sigma,
            log_form,
        )
        for i in range(flat.size)
    ]
    return np.array(values, dtype=float).reshape(x.shape)


class TestBulkScalarConsistency(BaseDistributionTest):
    def test_vector_example(self):
        result = dlnorm([1, 2, 3], 0.0, 1.0, False)

        assert isinstance(result, list)
        assert len(result) == 3
        expected = [dlnorm(1, 0, 1, False), dlnorm(2, 0, 1, False), dlnorm(3, 0, 1, False)]
        self.assert_arrays_close(result, expected, rtol=1e-14)

    @pytest.mark.parametrize("log_form", [False, True])
    @pytest.mark.parametrize("mu, sigma", [(0.0, 1.0), (1.2, 0.4), (-3.0, 2.5)])
    def test_matrix_with_scalar_parameters(self, mu, sigma, log_form):
        x = np.array([[0.1, 0.5, 1.0], [2.0, -1.0, 0.0], [7.5, np.inf, 30.0]])
        result = dlnorm(x, mu, sigma, log_form)

        assert result.shape == x.shape
        self.assert_arrays_close(result, _scalar_loop(x, mu, sigma, log_form), rtol=1e-14)

    def test_per_element_sigma(self):
        x = np.array([[0.5, 1.0, 2.0], [3.0, 4.0, 5.0]])
        sigma = np.array([[0.5, 1.0, 1.5], [2.0, 2.5, 3.0]])

        result = dlnorm(x, 0.0, sigma)
        self.assert_arrays_close(result, _scalar_loop(x, 0.0, sigma), rtol=1e-14)

    def test_per_element_mu_and_sigma(self):
        x = np.array([0.5, 1.0, 2.0, 3.0])
        mu = [0.0, -1.0, 0.5, 2.0]
        sigma = (0.3, 0.6, 0.9, 1.2)

        result = dlnorm(x, mu, sigma, True)
        self.assert_arrays_close(result, _scalar_loop(x, mu, sigma, True), rtol=1e-14)

    def test_per_element_parameters_match_row_major(self):
        x = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        sigma_flat = [0.5, 1.0, 1.5, 2.0, 2.5, 3.0]

        result = dlnorm(x, 0.0, sigma_flat)
        expected = dlnorm(x, 0.0, np.array(sigma_flat).reshape(2, 3))
        np.testing.assert_array_equal(result, expected)
        assert result[1, 0] == pytest.approx(dlnorm(4.0, 0.0, 2.0), rel=1e-14)

    def test_evaluate_bulk_directly(self):
        x = np.array([1.0, 2.0])
        result = evaluate_bulk(LOGNORMAL_KERNEL, x, (0.0, 1.0), log_form=False)
        np.testing.assert_array_equal(result, dlnorm(x))


class TestShapeMismatch:
    @pytest.mark.parametrize(
        "x_shape, param_shape",
        [
            ((3,), (2,)),
            ((3,), (4,)),
            ((2, 3), (3,)),
            ((2, 3), (1, 3)),
            ((2, 3), (2,)),
            ((4,), (1,)),
            ((0,), (1,)),
            ((1,), (2,)),
        ],
    )
    @pytest.mark.parametrize("parameter", ["mu", "sigma"])
    def test_mismatched_counts_rejected(self, x_shape, param_shape, parameter):
        x = np.ones(x_shape)
        value = np.full(param_shape, 1.0)

        with pytest.raises(ShapeMismatchError, match=f"'{parameter}'") as exc_info:
            dlnorm(x, **{parameter: value})

        assert exc_info.value.parameter == parameter
        assert exc_info.value.expected == int(np.prod(x_shape))
        assert exc_info.value.actual == int(np.prod(param_shape))

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            dlnorm([1.0, 2.0, 3.0], [0.0, 1.0], 1.0)

    def test_single_element_container_matches_single_point(self):
        result = dlnorm([2.0], [0.5], [1.5])
        assert result == [pytest.approx(dlnorm(2.0, 0.5, 1.5), rel=1e-14)]

    def test_broadcast_parameter(self):
        assert broadcast_parameter("mu", 0.5, 10) == 0.5
        np.testing.assert_array_equal(
            broadcast_parameter("mu", [[1.0, 2.0], [3.0, 4.0]], 4), [1.0, 2.0, 3.0, 4.0]
        )
        with pytest.raises(ShapeMismatchError):
            broadcast_parameter("mu", [1.0, 2.0], 3)


class TestOutputContainers:
    def test_ndarray_shape_and_dtype(self):
        x = np.arange(1, 25, dtype=np.int64).reshape(2, 3, 4)
        result = dlnorm(x)

        assert isinstance(result, np.ndarray)
        assert result.shape == (2, 3, 4)
        assert result.dtype == np.float64

    def test_nested_list(self):
        result = dlnorm([[1.0, 2.0], [3.0, 4.0]], 0.0, 1.0)

        assert isinstance(result, list)
        assert len(result) == 2
        assert all(isinstance(row, list) and len(row) == 2 for row in result)
        assert result[1][0] == pytest.approx(float(dlnorm(3.0)), rel=1e-14)

    def test_tuple_gives_list(self):
        result = dlnorm((1.0, 2.0))
        assert isinstance(result, list)
        assert len(result) == 2

    def test_matrix_type_preserved(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", PendingDeprecationWarning)
            x = np.matrix([[1.0, 2.0], [3.0, 4.0]])

        result = dlnorm(x, 0.0, [0.5, 1.0, 1.5, 2.0])

        assert isinstance(result, np.matrix)
        assert result.shape == (2, 2)
        assert result[1, 1] == pytest.approx(float(dlnorm(4.0, 0.0, 2.0)), rel=1e-14)

    def test_empty_input(self):
        result = dlnorm(np.empty((0, 3)), 0.0, 1.0)
        assert result.shape == (0, 3)
        assert dlnorm([]) == []

    def test_ragged_input_rejected(self):
        with pytest.raises(ValueError, match="rectangular"):
            dlnorm([[1.0, 2.0], [3.0]])

    def test_inputs_not_mutated(self):
        x = np.array([[0.5, -1.0], [2.0, 3.0]])
        sigma = np.array([[1.0, 2.0], [-1.0, 0.5]])
        x_copy, sigma_copy = x.copy(), sigma.copy()

        dlnorm(x, 0.0, sigma, True)

        np.testing.assert_array_equal(x, x_copy)
        np.testing.assert_array_equal(sigma, sigma_copy)

    def test_output_is_new_buffer(self):
        x = np.array([1.0, 2.0, 3.0])
        result = dlnorm(x)
        assert not np.shares_memory(result, x)

    def test_invalid_elements_only_affect_their_position(self):
        x = np.array([1.0, 2.0, 3.0])
        result = dlnorm(x, 0.0, [1.0, -1.0, 1.0])

        assert np.isnan(result[1])
        assert result[0] == pytest.approx(float(dlnorm(1.0)), rel=1e-14)
        assert result[2] == pytest.approx(float(dlnorm(3.0)), rel=1e-14)
