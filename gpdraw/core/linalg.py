# gpdraw/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Linear-algebra utilities shared across gpdraw.core modules.

Both the observation solve and the posterior factorization go through
a jittered Cholesky decomposition: a small multiple of the identity,
relative to the largest diagonal entry, is added before factoring.
"""
import gpdraw.num as gnp
from gpdraw.config import get_config, get_logger
from gpdraw.exceptions import NumericInstabilityError, SamplingUnavailableError

_logger = get_logger()


def jitter_scale(A):
    """Reference magnitude for the jitter: max(|diag(A)|), or 1 if A is zero."""
    if A.shape[0] == 0:
        return 1.0
    s = gnp.to_scalar(gnp.max(gnp.abs(gnp.diagonal(A))))
    return s if s > 0.0 else 1.0


def add_jitter(A, epsilon):
    """Return A + epsilon * I."""
    return A + epsilon * gnp.eye(A.shape[0])


def try_cholesky(A, epsilon):
    """Cholesky factor of A + epsilon * I, or None if the factorization fails."""
    try:
        return gnp.cholesky(add_jitter(A, epsilon))
    except (gnp.LinAlgError, ValueError):
        # not positive definite, or non-finite entries
        return None


def regularized_cholesky(K):
    """Factor K + eps I with an escalating jitter.

    eps starts at ``config.jitter * scale`` (never below
    ``config.jitter_floor``) and is multiplied by 10 at each failure, for
    at most ``config.max_jitter_tries`` attempts.

    Returns
    -------
    C : gnp.array, shape (n, n)
        Lower Cholesky factor of K + eps I.
    epsilon : float
        Jitter actually used.

    Raises
    ------
    NumericInstabilityError
        If every attempt fails.
    """
    config = get_config()
    epsilon = max(config.jitter * jitter_scale(K), config.jitter_floor)
    for attempt in range(config.max_jitter_tries):
        C = try_cholesky(K, epsilon)
        if C is not None:
            if attempt > 0:
                _logger.debug(
                    "Observation covariance factored with escalated jitter %.3e", epsilon
                )
            return C, epsilon
        epsilon *= 10.0
    raise NumericInstabilityError(
        f"Observation covariance is not positive definite even with jitter {epsilon / 10.0:.3e}"
    )


def regularized_solve(K, b):
    """Solve (K + eps I) x = b through `regularized_cholesky`.

    Returns
    -------
    x : gnp.array
        Solution, same shape as b.
    C : gnp.array
        Cholesky factor used.

    Raises
    ------
    NumericInstabilityError
        If K cannot be factored, or the solution is not finite.
    """
    C, _ = regularized_cholesky(K)
    x = gnp.cholesky_factor_solve(C, b)
    if not gnp.all(gnp.isfinite(x)):
        raise NumericInstabilityError("Linear solve produced non-finite values")
    return x, C


def sampling_cholesky(cov):
    """Cholesky factor of a (posterior) covariance for drawing sample paths.

    cov is symmetrized, a jitter ``config.jitter * scale`` is added, and
    on failure the factorization is retried once with the jitter
    multiplied by ``config.jitter_retry_factor``.

    Returns
    -------
    C : gnp.array, shape (m, m)
        Lower triangular, C Cᵀ = cov + epsilon I.
    epsilon : float
        Jitter actually used.

    Raises
    ------
    SamplingUnavailableError
        If both attempts fail.
    """
    config = get_config()
    cov = 0.5 * (cov + cov.T)
    epsilon = max(config.jitter * jitter_scale(cov), config.jitter_floor)
    C = try_cholesky(cov, epsilon)
    if C is None:
        epsilon *= config.jitter_retry_factor
        _logger.debug("Retrying covariance factorization with jitter %.3e", epsilon)
        C = try_cholesky(cov, epsilon)
    if C is None or not gnp.all(gnp.isfinite(C)):
        raise SamplingUnavailableError(
            f"Covariance is not positive semidefinite within jitter {epsilon:.3e}"
        )
    return C, epsilon
