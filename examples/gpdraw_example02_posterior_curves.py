"""
Posterior curves from a handful of noisy observations

Observations are (x, y, noise_std) triples, as collected from mouse
clicks by an interactive front end; (x, y) pairs take the default noise
level. The script computes the posterior mean, the 95% band and three
posterior sample curves, then plots them with the observations.

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gpdraw as gd
import gpdraw.misc.plotutils as plotutils


def generate_data():
    return [
        (-3.5, -1.0, 0.2),
        (-1.0, 0.8, 0.1),
        (0.5, 0.3, 0.05),
        (0.5, 0.4, 0.05),  # repeated input
        (2.7, -0.6),  # uses default_noise_std
    ]


def main():
    observations = generate_data()

    curves = gd.compute_posterior(
        observations,
        lengthscale=1.0,
        variance=1.0,
        nb_samples=3,
        default_noise_std=0.15,
        rng=42,
    )
    plotutils.plot_posterior(curves, observations, title="GP posterior, RBF kernel")


if __name__ == "__main__":
    main()
