# gpdraw/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `gpdraw.core` modules.

This file hosts:
- The fixed evaluation grid
- Hyperparameter validation
- Conversion of observation tuples to (xi, zi, noise_std) arrays
"""
import math
from numbers import Integral, Real
from typing import Tuple

import gpdraw.num as gnp
from gpdraw.exceptions import InvalidParameterError

GRID_SIZE = 100
GRID_START = -5.0
GRID_STEP = 0.1


def evaluation_grid():
    """Return the evaluation grid x_i = i * 0.1 - 5, i = 0..99."""
    return gnp.arange(GRID_SIZE, dtype=gnp.float64) * GRID_STEP + GRID_START


GRID = evaluation_grid()
GRID.setflags(write=False)


def _is_finite_real(v):
    return isinstance(v, Real) and not isinstance(v, bool) and math.isfinite(v)


def validate_hyperparameters(lengthscale, variance):
    """Check that the kernel parameters are finite and strictly positive.

    Raises
    ------
    InvalidParameterError
    """
    if not _is_finite_real(lengthscale) or lengthscale <= 0:
        raise InvalidParameterError(
            f"lengthscale must be a finite real > 0, got {lengthscale!r}"
        )
    if not _is_finite_real(variance) or variance <= 0:
        raise InvalidParameterError(
            f"variance must be a finite real > 0, got {variance!r}"
        )


def validate_noise_std(noise_std, name="noise_std"):
    if not _is_finite_real(noise_std) or noise_std < 0:
        raise InvalidParameterError(
            f"{name} must be a finite real >= 0, got {noise_std!r}"
        )


def validate_nb_samples(nb_samples):
    if not isinstance(nb_samples, Integral) or isinstance(nb_samples, bool):
        raise InvalidParameterError(
            f"nb_samples must be an integer, got {type(nb_samples).__name__}"
        )
    if nb_samples < 0:
        raise InvalidParameterError(f"nb_samples must be >= 0, got {nb_samples}")


def observations_to_arrays(observations, default_noise_std=0.0) -> Tuple:
    """Split observations into (xi, zi, noise_std) arrays.

    Parameters
    ----------
    observations : sequence
        Items are (x, y, noise_std) triples or (x, y) pairs; pairs take
        `default_noise_std`.
    default_noise_std : float, optional
        Noise standard deviation used for pairs.

    Returns
    -------
    xi, zi, noise_std : gnp.array, shape (n,)

    Raises
    ------
    InvalidParameterError
        On malformed items, non-finite coordinates or negative noise.
    """
    validate_noise_std(default_noise_std, "default_noise_std")

    xs, zs, ss = [], [], []
    for k, obs in enumerate(observations):
        try:
            items = tuple(obs)
        except TypeError:
            raise InvalidParameterError(
                f"observation {k} is not a (x, y) or (x, y, noise_std) tuple: {obs!r}"
            )
        if len(items) == 2:
            x, z = items
            s = default_noise_std
        elif len(items) == 3:
            x, z, s = items
        else:
            raise InvalidParameterError(
                f"observation {k} must have 2 or 3 components, got {len(items)}"
            )
        try:
            x, z, s = float(x), float(z), float(s)
        except (TypeError, ValueError):
            raise InvalidParameterError(f"observation {k} has non-numeric components")
        if not (math.isfinite(x) and math.isfinite(z)):
            raise InvalidParameterError(f"observation {k} has a non-finite x or y")
        validate_noise_std(s, f"noise_std of observation {k}")
        xs.append(x)
        zs.append(z)
        ss.append(s)

    return gnp.asarray(xs), gnp.asarray(zs), gnp.asarray(ss)
