import numpy as np
import pytest

import gpdraw.num as gnp
from gpdraw.config import get_config
from gpdraw.core import kriging, linalg
from gpdraw.core.utils import GRID
from gpdraw.exceptions import NumericInstabilityError, SamplingUnavailableError


def test_regularized_cholesky_on_singular_matrix():
    # duplicate inputs with zero noise: rank one
    K = gnp.ones((3, 3))
    C, epsilon = linalg.regularized_cholesky(K)
    assert epsilon > 0.0
    assert gnp.allclose(gnp.matmul(C, C.T), K + epsilon * gnp.eye(3))


def test_regularized_solve_is_finite():
    K = 2.0 * gnp.ones((4, 4))
    b = gnp.asarray([1.0, 1.0, 1.0, 1.0])
    x, _ = linalg.regularized_solve(K, b)
    assert gnp.all(gnp.isfinite(x))


def test_regularized_cholesky_gives_up():
    with pytest.raises(NumericInstabilityError):
        linalg.regularized_cholesky(-gnp.eye(3))


def test_sampling_cholesky_reconstruction():
    xi = gnp.asarray([-1.0, 0.0, 0.0, 2.0])
    zi = gnp.asarray([0.3, -0.2, -0.1, 1.0])
    noise_std = gnp.asarray([0.1, 0.0, 0.0, 0.05])
    _, cov = kriging.posterior(xi, zi, noise_std, GRID, 0.5, 1.5)
    C, epsilon = linalg.sampling_cholesky(cov)
    cov_jittered = 0.5 * (cov + cov.T) + epsilon * gnp.eye(cov.shape[0])
    assert gnp.allclose(gnp.matmul(C, C.T), cov_jittered, atol=1e-10)
    assert gnp.allclose(C, np.tril(C))


def test_sampling_cholesky_jitter_is_relative():
    K = 1e4 * gnp.eye(5)
    _, epsilon = linalg.sampling_cholesky(K)
    assert epsilon == pytest.approx(get_config().jitter * 1e4)


def test_sampling_cholesky_unavailable():
    with pytest.raises(SamplingUnavailableError):
        linalg.sampling_cholesky(-gnp.eye(3))


def test_sampling_cholesky_retries_with_larger_jitter():
    # slightly indefinite: the first jitter is too small, the retry is not
    cov = np.diag([1.0, -1e-7])
    config = get_config()
    C, epsilon = linalg.sampling_cholesky(cov)
    assert epsilon == pytest.approx(config.jitter * config.jitter_retry_factor)
    assert gnp.allclose(gnp.matmul(C, C.T), cov + epsilon * gnp.eye(2))


def test_regularized_cholesky_escalates_jitter():
    K = np.diag([1.0, -1e-7])
    C, epsilon = linalg.regularized_cholesky(K)
    assert epsilon > get_config().jitter
    assert epsilon > 1e-7
    assert gnp.allclose(gnp.matmul(C, C.T), K + epsilon * gnp.eye(2))


def test_regularized_solve_uses_factor():
    K = gnp.asarray([[4.0, 1.0], [1.0, 3.0]])
    b = gnp.asarray([1.0, 2.0])
    x, C = linalg.regularized_solve(K, b)
    epsilon = get_config().jitter * 4.0
    assert gnp.allclose(gnp.matmul(K + epsilon * gnp.eye(2), x), b)
    assert gnp.allclose(x, np.linalg.solve(K, b), atol=1e-7)


def test_try_cholesky_non_finite_matrix():
    assert linalg.try_cholesky(gnp.asarray([[np.nan, 0.0], [0.0, 1.0]]), 1e-8) is None


def test_try_cholesky_propagates_unrelated_errors(monkeypatch):
    def broken(A):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(gnp, "cholesky", broken)
    with pytest.raises(RuntimeError):
        linalg.try_cholesky(gnp.eye(2), 1e-8)
