"""
Model facade: prediction and conditional sample paths

Uses gpdraw.core.Model directly on a user-supplied grid instead of the
fixed evaluation grid of compute_posterior.

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import numpy as np
import gpdraw as gd
import gpdraw.misc.plotutils as plotutils


def generate_data():
    xt = np.linspace(-2.0, 2.0, 200)
    zt = np.sin(2.0 * xt) + 0.3 * xt

    ind = [15, 60, 110, 160, 185]
    xi = xt[ind]
    zi = zt[ind]
    noise_std = np.full(xi.shape, 0.05)

    return xt, zt, xi, zi, noise_std


def main():
    xt, zt, xi, zi, noise_std = generate_data()

    model = gd.Model(lengthscale=0.5, variance=1.0)
    zpm, zpv = model.predict(xi, zi, noise_std, xt)
    zpsim = model.sample_paths(xi, zi, noise_std, xt, nb_paths=5, rng=1)

    fig = plotutils.Figure(isinteractive=True)
    fig.plot(xt, zt, "C2", linewidth=1, label="truth")
    fig.plot(xt, zpsim[:, 0], "C0", linewidth=1, label="posterior sample paths")
    fig.plot(xt, zpsim[:, 1:], "C0", linewidth=1)
    fig.plotdata(xi, zi)
    fig.plotgp(xt, zpm, zpv)
    fig.title("Conditional sample paths")
    fig.legend()
    fig.show()


if __name__ == "__main__":
    main()
