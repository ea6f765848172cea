# gpdraw/kernel/rbf.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpdraw.num as gnp


def rbf_kernel(x1, x2, lengthscale, variance):
    """Squared-exponential (RBF) kernel.

    .. math::
        k(x_1, x_2) = \\sigma^2 \\exp\\left(-\\frac{(x_1 - x_2)^2}{2\\rho^2}\\right)

    Parameters
    ----------
    x1, x2 : float or gnp.array
        Input points. Arrays are broadcast against each other.
    lengthscale : float
        Length scale :math:`\\rho > 0`.
    variance : float
        Variance :math:`\\sigma^2 > 0`, equal to :math:`k(x, x)`.

    Returns
    -------
    float or gnp.array
        Kernel values.
    """
    h = (x1 - x2) / lengthscale
    return variance * gnp.exp(-0.5 * h * h)


def rbf_covariance(x, y, lengthscale, variance, pairwise=False):
    """RBF covariance between 1-D point sets.

    Parameters
    ----------
    x : gnp.array, shape (n,)
    y : gnp.array, shape (m,) or None
        If None, y := x.
    lengthscale, variance : float
        Kernel parameters.
    pairwise : bool
        If True, return the vector of k(x_i, y_i) (n == m); else the
        (n, m) covariance matrix.

    Returns
    -------
    gnp.array
        (n, m) matrix or (n,) vector if pairwise.
    """
    x = gnp.asarray(x).reshape(-1)
    if y is None:
        if pairwise:
            return variance * gnp.ones((x.shape[0],))
        y = x
    else:
        y = gnp.asarray(y).reshape(-1)

    if pairwise:
        if x.shape[0] != y.shape[0]:
            raise ValueError("x and y must have the same length when pairwise=True")
        return rbf_kernel(x, y, lengthscale, variance)
    return rbf_kernel(x[:, None], y[None, :], lengthscale, variance)
