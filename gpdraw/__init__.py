# gpdraw/__init__.py

from . import config
from . import num
from . import exceptions
from . import kernel
from . import core
from . import misc
from .core import Model, PosteriorCurves, compute_posterior
from .exceptions import (
    GPDrawError,
    InvalidParameterError,
    NumericInstabilityError,
    SamplingUnavailableError,
)

__all__ = [
    "num",
    "kernel",
    "Model",
    "PosteriorCurves",
    "compute_posterior",
    "GPDrawError",
    "InvalidParameterError",
    "NumericInstabilityError",
    "SamplingUnavailableError",
    "__version__",
]

__version__ = config.__version__
