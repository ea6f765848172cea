# gpdraw/core/kriging.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kriging predictor and posterior covariance for the zero-mean RBF model.

Functions
---------
kriging_weights(xi, noise_std, xt, lengthscale, variance)
    Solve K lambda_t = K*ᵀ for the kriging weights.

posterior(xi, zi, noise_std, xt, lengthscale, variance, return_type=1)
    Posterior mean and variance (or full covariance) on xt.

posterior_std(zt_posterior_variance)
    Clamped standard deviation.

confidence_bounds(zt_mean, zt_std, factor=None)
    Upper and lower bounds mean ± factor * std.
"""
import gpdraw.num as gnp
from gpdraw.config import get_config
from gpdraw.exceptions import InvalidParameterError

from . import covariance
from . import linalg


def kriging_weights(xi, noise_std, xt, lengthscale, variance):
    """Compute the kriging weights lambda_t = K⁻¹ K*ᵀ.

    Parameters
    ----------
    xi : array_like, shape (n,)
        Observation points.
    noise_std : array_like, shape (n,)
        Observation noise standard deviations.
    xt : array_like, shape (m,)
        Prediction points.
    lengthscale, variance : float
        Kernel parameters.

    Returns
    -------
    lambda_t : gnp.array, shape (n, m)
        Kriging weights.
    Kit : gnp.array, shape (n, m)
        K*ᵀ, covariances between observations and prediction points.
    """
    Kii = covariance.observation_covariance(xi, noise_std, lengthscale, variance)
    Kit = covariance.cross_covariance(xt, xi, lengthscale, variance).T
    lambda_t, _ = linalg.regularized_solve(Kii, Kit)
    return lambda_t, Kit


def posterior(xi, zi, noise_std, xt, lengthscale, variance, return_type=1):
    """Posterior mean and covariance of the zero-mean GP on xt.

    mean = K* K⁻¹ y,  cov = K** - K* K⁻¹ K*ᵀ

    Parameters
    ----------
    xi, zi, noise_std : array_like, shape (n,)
        Observations. n may be zero, in which case the prior is returned.
    xt : array_like, shape (m,)
        Prediction points.
    lengthscale, variance : float
        Kernel parameters.
    return_type : int, optional
        0: marginal variances, 1: full covariance (default).

    Returns
    -------
    zt_mean : gnp.array, shape (m,)
    zt_posterior_variance : gnp.array, shape (m,) or (m, m)
        Not clamped; may hold tiny negative values from cancellation.

    Raises
    ------
    InvalidParameterError
        If xi, zi and noise_std differ in length.
    """
    if return_type not in (0, 1):
        raise ValueError("return_type must be in {0, 1}")

    xt = gnp.asarray(xt).reshape(-1)
    xi = gnp.asarray(xi).reshape(-1)
    zi = gnp.asarray(zi).reshape(-1)
    noise_std = gnp.asarray(noise_std).reshape(-1)
    if not (xi.shape[0] == zi.shape[0] == noise_std.shape[0]):
        raise InvalidParameterError(
            "xi, zi and noise_std must have the same length, got "
            f"{xi.shape[0]}, {zi.shape[0]} and {noise_std.shape[0]}"
        )
    pairwise = return_type == 0
    zt_prior_variance = covariance.grid_covariance(
        xt, lengthscale, variance, pairwise=pairwise
    )

    if zi.shape[0] == 0:
        return gnp.zeros((xt.shape[0],)), zt_prior_variance

    lambda_t, Kit = kriging_weights(xi, noise_std, xt, lengthscale, variance)
    zt_mean = gnp.matmul(lambda_t.T, zi)

    if pairwise:
        zt_posterior_variance = zt_prior_variance - gnp.einsum(
            "i..., i...", lambda_t, Kit
        )
    else:
        zt_posterior_variance = zt_prior_variance - gnp.matmul(lambda_t.T, Kit)
        # K* K⁻¹ K*ᵀ is symmetric up to rounding
        zt_posterior_variance = 0.5 * (zt_posterior_variance + zt_posterior_variance.T)

    return zt_mean, zt_posterior_variance


def posterior_std(zt_posterior_variance):
    """sqrt(max(var, 0)) from a variance vector or a covariance matrix."""
    v = gnp.asarray(zt_posterior_variance)
    if v.ndim == 2:
        v = gnp.diagonal(v)
    return gnp.sqrt(gnp.maximum(v, 0.0))


def confidence_bounds(zt_mean, zt_std, factor=None):
    """Return (upper, lower) = mean ± factor * std, factor defaults to 1.96."""
    if factor is None:
        factor = get_config().confidence_factor
    delta = factor * zt_std
    return zt_mean + delta, zt_mean - delta
