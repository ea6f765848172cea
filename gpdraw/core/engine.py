# gpdraw/core/engine.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Single entry point of the engine.

`compute_posterior` takes a list of observations and the kernel
parameters, and returns plottable curves on the fixed evaluation grid:
posterior mean, 95% upper and lower bounds, and posterior sample paths.
"""
from typing import List, NamedTuple

import gpdraw.num as gnp
from gpdraw.config import get_logger
from gpdraw.exceptions import InvalidParameterError, SamplingUnavailableError

from . import kriging
from . import utils
from .model import Model
from . import sample_paths
from .sample_paths import PRIOR_SAMPLING_METHODS

_logger = get_logger()


class PosteriorCurves(NamedTuple):
    """Curves on the evaluation grid.

    Each curve is an array of shape (100, 2) whose rows are (x, y).
    """

    mean_curve: gnp.ndarray
    upper_curve: gnp.ndarray
    lower_curve: gnp.ndarray
    sample_curves: List[gnp.ndarray]
    posterior_std: gnp.ndarray
    sampling_failed: bool = False

    def to_dict(self):
        """Nested lists keyed as meanLine, upperBound, lowerBound, samples."""
        return {
            "meanLine": self.mean_curve.tolist(),
            "upperBound": self.upper_curve.tolist(),
            "lowerBound": self.lower_curve.tolist(),
            "samples": [s.tolist() for s in self.sample_curves],
        }


def _curve(xt, zt):
    return gnp.column_stack((xt, zt))


def compute_posterior(
    observations,
    lengthscale,
    variance,
    nb_samples,
    default_noise_std=0.0,
    rng=None,
    prior_sampling="correlated",
):
    """Posterior curves of the 1-D RBF GP on the evaluation grid.

    Parameters
    ----------
    observations : sequence
        (x, y, noise_std) triples, or (x, y) pairs which take
        `default_noise_std`. May be empty.
    lengthscale : float
        RBF length scale, > 0.
    variance : float
        RBF variance, > 0.
    nb_samples : int
        Number of sample curves, >= 0.
    default_noise_std : float, optional
        Noise standard deviation, >= 0, used for (x, y) pairs and, with
        no observations, added to the prior sample paths.
    rng : None, int or numpy.random.Generator, optional
        Random source for the sample curves.
    prior_sampling : {'correlated', 'independent'}, optional
        How sample curves are drawn when there are no observations.

    Returns
    -------
    PosteriorCurves

    Raises
    ------
    InvalidParameterError
        On non-physical parameters or malformed observations.
    NumericInstabilityError
        If the observation covariance cannot be factored.

    Notes
    -----
    If the posterior covariance cannot be factored, the sample curves are
    dropped (``sampling_failed`` is True) but mean and bounds are still
    returned.
    """
    utils.validate_hyperparameters(lengthscale, variance)
    utils.validate_nb_samples(nb_samples)
    xi, zi, noise_std = utils.observations_to_arrays(observations, default_noise_std)
    if prior_sampling not in PRIOR_SAMPLING_METHODS:
        raise InvalidParameterError(
            f"prior_sampling must be one of {PRIOR_SAMPLING_METHODS}, got {prior_sampling!r}"
        )

    model = Model(lengthscale, variance)
    xt = utils.GRID
    n = xi.shape[0]

    if n == 0:
        # prior: only the diagonal of K** is needed for the bounds
        zt_mean, zt_var = model.predict(xi, zi, noise_std, xt)
        zt_std = kriging.posterior_std(zt_var)
    else:
        zt_mean, zt_cov = model.posterior(xi, zi, noise_std, xt)
        zt_std = kriging.posterior_std(zt_cov)
    upper, lower = kriging.confidence_bounds(zt_mean, zt_std)

    sampling_failed = False
    try:
        if n == 0:
            zsim = model.prior_sample_paths(
                xt, nb_samples, noise_std=default_noise_std, method=prior_sampling, rng=rng
            )
        else:
            zsim = sample_paths.sample_paths(zt_mean, zt_cov, nb_samples, rng=rng)
    except SamplingUnavailableError as exc:
        _logger.warning("Sample curves unavailable: %s", exc)
        zsim = gnp.zeros((xt.shape[0], 0))
        sampling_failed = True

    sample_curves = [_curve(xt, zsim[:, j]) for j in range(zsim.shape[1])]

    _logger.debug(
        "Posterior computed: %d observations, %d sample curves", n, len(sample_curves)
    )
    return PosteriorCurves(
        mean_curve=_curve(xt, zt_mean),
        upper_curve=_curve(xt, upper),
        lower_curve=_curve(xt, lower),
        sample_curves=sample_curves,
        posterior_std=zt_std,
        sampling_failed=sampling_failed,
    )
