# gpdraw/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process model class.
"""
import gpdraw.num as gnp
from gpdraw.kernel import rbf_covariance

from . import kriging
from . import sample_paths as sample_paths
from . import utils


class Model:
    """Zero-mean 1-D Gaussian Process model with an RBF covariance.

    A model only holds its two kernel parameters; observations are
    passed to every method and never retained.

    Attributes
    ----------
    lengthscale : float
        Length scale of the RBF kernel, > 0. Controls smoothness.
    variance : float
        Variance of the RBF kernel, > 0. Equal to k(x, x).

    Public API (methods)
    --------------------
    covariance
        RBF covariance between point sets.
    predict
        Posterior mean/variance at target points.
    posterior
        Posterior mean and full covariance at target points.
    sample_paths
        Posterior sample paths on xt.
    prior_sample_paths
        Prior sample paths on xt.

    Examples
    --------
    >>> import gpdraw as gd
    >>> import gpdraw.num as gnp
    >>> model = gd.core.Model(lengthscale=1.0, variance=1.0)
    >>> xi = gnp.asarray([-2.0, 0.0, 1.5])
    >>> zi = gnp.asarray([0.5, -0.3, 1.0])
    >>> noise_std = gnp.asarray([0.1, 0.1, 0.2])
    >>> zt_mean, zt_var = model.predict(xi, zi, noise_std, gd.core.utils.GRID)
    """

    def __init__(self, lengthscale=1.0, variance=1.0):
        utils.validate_hyperparameters(lengthscale, variance)
        self.lengthscale = float(lengthscale)
        self.variance = float(variance)

    def __repr__(self):
        output = str("<gpdraw.core.Model object> " + hex(id(self)))
        return output

    def __str__(self):
        return (
            f"GP Model:\n"
            f"  Mean Type: zero\n"
            f"  Covariance Function: rbf\n"
            f"  Length Scale: {self.lengthscale}\n"
            f"  Variance: {self.variance}"
        )

    def covariance(self, x, y=None, pairwise=False):
        """RBF covariance between x and y (y=None means y := x)."""
        return rbf_covariance(x, y, self.lengthscale, self.variance, pairwise=pairwise)

    # ------------------------------------------------------------------
    # Prediction (delegating to gpdraw.core.kriging)
    # ------------------------------------------------------------------
    def predict(self, xi, zi, noise_std, xt):
        """Posterior mean and clamped marginal variance at xt.

        Parameters
        ----------
        xi, zi, noise_std : array_like, shape (n,)
            Observation points, values and noise standard deviations.
        xt : array_like, shape (m,)
            Prediction points.

        Returns
        -------
        zt_mean : ndarray, shape (m,)
        zt_var : ndarray, shape (m,)
            Posterior variances, clamped at zero.
        """
        zt_mean, zt_var = kriging.posterior(
            xi, zi, noise_std, xt, self.lengthscale, self.variance, return_type=0
        )
        return zt_mean, gnp.maximum(zt_var, 0.0)

    def posterior(self, xi, zi, noise_std, xt):
        """Posterior mean and full (unclamped) covariance at xt."""
        return kriging.posterior(
            xi, zi, noise_std, xt, self.lengthscale, self.variance, return_type=1
        )

    # ------------------------------------------------------------------
    # Sample paths (delegating to gpdraw.core.sample_paths)
    # ------------------------------------------------------------------
    def sample_paths(self, xi, zi, noise_std, xt, nb_paths, rng=None):
        """Posterior sample paths on xt, shape (m, nb_paths).

        Raises
        ------
        SamplingUnavailableError
            If the posterior covariance cannot be factored.
        """
        zt_mean, zt_cov = self.posterior(xi, zi, noise_std, xt)
        return sample_paths.sample_paths(zt_mean, zt_cov, nb_paths, rng=rng)

    def prior_sample_paths(
        self, xt, nb_paths, noise_std=0.0, method="correlated", rng=None
    ):
        """Prior sample paths on xt, shape (m, nb_paths).

        See `gpdraw.core.sample_paths.prior_sample_paths`.
        """
        return sample_paths.prior_sample_paths(
            xt,
            self.lengthscale,
            self.variance,
            nb_paths,
            noise_std=noise_std,
            method=method,
            rng=rng,
        )
