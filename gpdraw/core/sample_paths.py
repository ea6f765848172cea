# gpdraw/core/sample_paths.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Sampling routines for the 1-D RBF model.

This module provides:
- Sample paths from a Gaussian distribution N(mean, cov) on a grid,
  through a jittered Cholesky factor (used for posterior draws).
- Sample paths from the prior when there are no observations, either
  correlated (through K**) or independent per grid point.
"""
import gpdraw.num as gnp
from gpdraw.exceptions import InvalidParameterError

from . import covariance
from . import linalg

PRIOR_SAMPLING_METHODS = ("correlated", "independent")


def sample_paths(zt_mean, zt_covariance, nb_paths, rng=None):
    """Generate ``nb_paths`` draws from N(zt_mean, zt_covariance).

    Parameters
    ----------
    zt_mean : array_like, shape (m,)
        Mean vector.
    zt_covariance : array_like, shape (m, m)
        Covariance matrix, symmetric positive semidefinite up to rounding.
    nb_paths : int
        Number of sample paths.
    rng : None, int or numpy.random.Generator, optional
        Random source, see `gpdraw.num.get_rng`.

    Returns
    -------
    ndarray, shape (m, nb_paths)
        Sample paths, one per column.

    Raises
    ------
    SamplingUnavailableError
        If the covariance cannot be factored, even after the jitter retry.

    Notes
    -----
    cov + eps I = C Cᵀ, then draw as mean + C @ N(0, I). The innovations
    are standard normal.
    """
    zt_mean = gnp.asarray(zt_mean).reshape(-1, 1)
    K = gnp.asarray(zt_covariance)
    m = K.shape[0]
    if nb_paths == 0:
        return gnp.zeros((m, 0))

    C, _ = linalg.sampling_cholesky(K)
    zsim = gnp.matmul(C, gnp.randn(m, nb_paths, rng=rng))
    return zt_mean + zsim


def prior_sample_paths(
    xt, lengthscale, variance, nb_paths, noise_std=0.0, method="correlated", rng=None
):
    """Generate ``nb_paths`` sample paths from the zero-mean prior on xt.

    Parameters
    ----------
    xt : array_like, shape (m,)
        Grid points.
    lengthscale, variance : float
        Kernel parameters.
    nb_paths : int
        Number of sample paths.
    noise_std : float, optional
        Standard deviation of an additive white noise on each grid value.
    method : {'correlated', 'independent'}, optional
        'correlated' draws from N(0, K** + noise_std² I);
        'independent' draws each grid value separately with standard
        deviation sqrt(variance + noise_std²).
    rng : None, int or numpy.random.Generator, optional

    Returns
    -------
    ndarray, shape (m, nb_paths)
    """
    xt = gnp.asarray(xt).reshape(-1)
    m = xt.shape[0]
    if method == "correlated":
        K = covariance.grid_covariance(xt, lengthscale, variance)
        K = K + noise_std**2 * gnp.eye(m)
        return sample_paths(gnp.zeros((m,)), K, nb_paths, rng=rng)
    elif method == "independent":
        sigma = gnp.sqrt(variance + noise_std**2)
        return sigma * gnp.randn(m, nb_paths, rng=rng)
    else:
        raise InvalidParameterError(
            f"prior sampling method must be one of {PRIOR_SAMPLING_METHODS}, got {method!r}"
        )
