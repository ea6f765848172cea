# gpdraw/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"


def _seed_from_env(default=1234):
    env = os.environ.get("GPDRAW_SEED")
    if env is None:
        return default
    try:
        return int(env)
    except ValueError:
        raise ValueError(f"GPDRAW_SEED must be an integer, got {env!r}")


class _GPDrawConfig:
    def __init__(self):
        self.version = __version__
        self.seed = _seed_from_env()
        # relative diagonal jitter added before Cholesky factorizations
        self.jitter = 1e-8
        self.jitter_floor = 1e-12
        self.jitter_retry_factor = 1e3
        self.max_jitter_tries = 6
        # norminv(1 - 0.05/2)
        self.confidence_factor = 1.96
        # logger lives in config
        self.logger = logging.getLogger("gpdraw")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.WARNING)

    def __str__(self):
        return (
            f"GPDrawConfig("
            f"version={self.version}, "
            f"seed={self.seed}, "
            f"jitter={self.jitter}, "
            f"jitter_retry_factor={self.jitter_retry_factor}, "
            f"max_jitter_tries={self.max_jitter_tries}, "
            f"confidence_factor={self.confidence_factor})"
        )

    def __repr__(self):
        return (
            f"<GPDrawConfig "
            f"version={self.version!r}, "
            f"seed={self.seed!r}, "
            f"jitter={self.jitter!r}, "
            f"confidence_factor={self.confidence_factor!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"unknown configuration field {k!r}")
            setattr(self, k, v)
        return self


_config = _GPDrawConfig()


def get_config():
    return _config


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)


def set_seed(seed: int):
    """Set the seed of the package-wide random generator."""
    _config.seed = int(seed)
    # the generator itself lives in gpdraw.num
    from gpdraw import num

    num.set_seed(_config.seed)
