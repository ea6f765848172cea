# gpdraw/core/covariance.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance matrices of the 1-D RBF model.

K   = k(xi, xi) + diag(noise_std**2)   (observations, n x n)
K*  = k(xt, xi)                        (grid vs observations, m x n)
K** = k(xt, xt)                        (grid, m x m)
"""
import gpdraw.num as gnp
from gpdraw.kernel import rbf_covariance


def observation_covariance(xi, noise_std, lengthscale, variance):
    """Covariance of the noisy observations.

    The noise term is added on the diagonal only, with each observation's
    own standard deviation.
    """
    xi = gnp.asarray(xi).reshape(-1)
    noise_std = gnp.asarray(noise_std).reshape(-1)
    if noise_std.shape[0] != xi.shape[0]:
        raise ValueError("xi and noise_std must have the same length")
    K = rbf_covariance(xi, None, lengthscale, variance)
    return K + gnp.diag(noise_std**2)


def cross_covariance(xt, xi, lengthscale, variance):
    """Covariance between grid points xt and observation points xi, shape (m, n)."""
    return rbf_covariance(xt, xi, lengthscale, variance)


def grid_covariance(xt, lengthscale, variance, pairwise=False):
    """Prior covariance on the grid, (m, m), or its diagonal if pairwise."""
    return rbf_covariance(xt, None, lengthscale, variance, pairwise=pairwise)
