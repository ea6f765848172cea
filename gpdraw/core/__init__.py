# gpdraw/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gpdraw package.

This subpackage contains the numerical routines of the 1-D RBF
Gaussian Process engine: covariance matrices, kriging predictor,
jittered linear algebra, and sample paths.

Public API
----------
Model : class
    Zero-mean RBF Gaussian Process model façade.
compute_posterior : function
    Posterior curves on the evaluation grid.
PosteriorCurves : class
    Result of `compute_posterior`.
"""

from . import utils
from .model import Model
from .engine import PosteriorCurves, compute_posterior

__all__ = ["Model", "PosteriorCurves", "compute_posterior"]
