# gpdraw/num.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical layer for gpdraw.

Every array operation, linear-algebra routine and random draw used by
the engine goes through this module (conventionally imported as
``gnp``), so that the rest of the package only depends on a narrow
interface: ``cholesky``, ``cholesky_factor_solve``, ``randn`` and a
handful of elementwise functions.
"""

from typing import Any, Optional

from gpdraw.config import get_config

ArrayLike = Any

_config = get_config()

import numpy
from numpy.typing import NDArray

_np_dtype = numpy.float64

ndarray = NDArray[numpy.floating]
from numpy import (
    isfinite,
    allclose,
    column_stack,
    diag,
    diagonal,
    abs,
    sqrt,
    exp,
    max,
    maximum,
    einsum,
    matmul,
    all,
)
from numpy.linalg import LinAlgError
from numpy import float64
from scipy.linalg import cho_factor, cho_solve


# ..................................................

def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        return x
    elif isinstance(x, (int, float)):
        return numpy.array([x], dtype=_np_dtype)
    else:
        out = numpy.asarray(x)
        if numpy.issubdtype(out.dtype, numpy.integer):
            return out.astype(_np_dtype, copy=False)
        if numpy.issubdtype(out.dtype, numpy.floating):
            return out.astype(_np_dtype, copy=False)
        return out


def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)


def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)


def eye(n, dtype=None):
    return numpy.eye(n, dtype=_np_dtype if dtype is None else dtype)


def arange(start, stop=None, step=1, dtype=None):
    if stop is None:
        return numpy.arange(start, dtype=dtype)
    return numpy.arange(start, stop, step, dtype=dtype)


def to_scalar(x):
    return numpy.asarray(x).item()


# ..................................................

def cholesky(A):
    """Lower-triangular Cholesky factor of a symmetric positive definite A.

    Raises
    ------
    numpy.linalg.LinAlgError
        If A is not numerically positive definite.
    ValueError
        If A holds infs or NaNs.
    """
    C, _ = cho_factor(A, lower=True, check_finite=True)
    # cho_factor leaves garbage in the upper triangle
    return numpy.tril(C)


def cholesky_factor_solve(C, b):
    """Solve (C Cᵀ) x = b given the lower Cholesky factor C."""
    return cho_solve((C, True), b, check_finite=False)


# ..................................................

# Build one global RNG (or let the user set the seed with gpdraw.config.set_seed)
_np_rng = numpy.random.default_rng(seed=_config.seed)


def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _np_rng = numpy.random.default_rng(seed=seed)


def get_rng(rng: Optional[Any] = None) -> numpy.random.Generator:
    """Resolve a random source.

    ``None`` gives the package generator, an int is used as a seed for a
    fresh generator and a ``numpy.random.Generator`` is returned as is.
    """
    if rng is None:
        return _np_rng
    if isinstance(rng, numpy.random.Generator):
        return rng
    if isinstance(rng, (int, numpy.integer)) and not isinstance(rng, bool):
        return numpy.random.default_rng(seed=int(rng))
    raise TypeError(
        "rng must be None, an integer seed or a numpy.random.Generator, "
        f"got {type(rng).__name__}"
    )


def randn(*shape: int, rng: Optional[Any] = None) -> ArrayLike:
    return get_rng(rng).standard_normal(size=shape).astype(_np_dtype, copy=False)
