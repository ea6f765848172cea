# gpdraw/exceptions.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Custom exceptions for gpdraw.
"""


class GPDrawError(Exception):
    """Base exception for all gpdraw errors."""
    pass


class InvalidParameterError(GPDrawError, ValueError):
    """Raised when hyperparameters, noise levels or observations are non-physical."""
    pass


class NumericInstabilityError(GPDrawError, ArithmeticError):
    """Raised when the observation covariance cannot be factored or solved."""
    pass


class SamplingUnavailableError(GPDrawError):
    """Raised when the posterior covariance cannot be factored for sampling."""
    pass
