"""
Sample paths from the GP prior

With no observations, the posterior is the prior: zero mean and
variance equal to the kernel variance everywhere. This script draws
prior sample curves, correlated through the RBF covariance and
independent per grid point, and plots both.

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gpdraw as gd
import gpdraw.misc.plotutils as plotutils


def main():
    lengthscale = 0.8
    variance = 2.0
    nb_samples = 4

    curves = gd.compute_posterior([], lengthscale, variance, nb_samples, rng=0)
    plotutils.plot_posterior(curves, title="Prior sample paths (correlated)")

    curves = gd.compute_posterior(
        [], lengthscale, variance, nb_samples, rng=0, prior_sampling="independent"
    )
    plotutils.plot_posterior(curves, title="Prior sample paths (independent)")


if __name__ == "__main__":
    main()
