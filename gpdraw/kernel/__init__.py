# gpdraw/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance functions for gpdraw.

Modules
-------
rbf
    Squared-exponential (RBF) kernel on the real line.

Public API
-----------
rbf_kernel, rbf_covariance
"""

from .rbf import rbf_kernel, rbf_covariance

__all__ = [
    "rbf_kernel",
    "rbf_covariance",
]
