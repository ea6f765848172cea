## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import sys
import numpy as np
import scipy.stats as stats
import matplotlib.pyplot as plt
from matplotlib import interactive


class Figure:
    """Figures manager class.

    Thin wrapper around a matplotlib figure with helpers to draw
    GP predictions and the curves returned by
    `gpdraw.core.compute_posterior`.
    """

    def __init__(self, nrows=1, ncols=1, isinteractive=True, boxoff=True, **kargs):
        # Check if we run in interpreter mode
        self.interpreter = False
        try:
            if sys.ps1:
                self.interpreter = True
        except AttributeError:
            self.interpreter = False
            if sys.flags.interactive:
                self.interpreter = True

        if isinteractive & self.interpreter:
            interactive(True)

        self.boxoff = boxoff

        self.fig = plt.figure(**kargs)

        self.nrows = nrows
        self.ncols = ncols
        self.axes = []
        for i in range(nrows * ncols):
            self.axes.append(self.fig.add_subplot(nrows, ncols, i + 1))
        self.ax = self.axes[0]
        if self.boxoff:
            self.set_boxoff()

    def set_boxoff(self):
        self.ax.spines["right"].set_visible(False)
        self.ax.spines["top"].set_visible(False)
        self.ax.tick_params(direction="in")

    def subplot(self, i):
        self.ax = self.axes[i - 1]
        if self.boxoff:
            self.set_boxoff()

    def show(self, grid=None, legend=None, xlim=None):
        if grid:
            self.grid()
        if legend:
            self.legend()
        if xlim is not None:
            self.ax.set_xlim(xlim)
        plt.show()

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def plotdata(self, x, z, label="data"):
        self.ax.plot(x, z, "rs", markerfacecolor="none", markersize=6, label=label)

    def title(self, s):
        self.ax.set_title(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(self, visible=True, which="major", linestyle=(0, (1, 5)), linewidth=0.5):
        self.ax.grid(visible, which, linestyle=linestyle, linewidth=linewidth)

    def plotgp(
        self,
        x,
        mean,
        variance,
        mean_label="posterior mean",
        ci=0.95,
        ci_label="CI 95%",
        **kwargs
    ):
        """Posterior mean with a coverage interval.

        norminv (1 - 0.05/2)  = 1.959964
        """
        mean = np.asarray(mean).flatten()
        x = np.asarray(x).flatten()
        delta = stats.norm.ppf((1 + ci) / 2)
        std = np.sqrt(np.maximum(np.asarray(variance).flatten(), 0.0))
        self._band(x, mean + delta * std, mean - delta * std, ci_label, **kwargs)
        self.ax.plot(x, mean, "#F2404C", linewidth=2.0, label=mean_label)

    def plotcurves(self, curves, mean_label="posterior mean", ci_label="CI 95%"):
        """Draw a `PosteriorCurves` result: band, sample curves and mean."""
        x = curves.mean_curve[:, 0]
        self._band(x, curves.upper_curve[:, 1], curves.lower_curve[:, 1], ci_label)
        for j, s in enumerate(curves.sample_curves):
            self.ax.plot(
                s[:, 0],
                s[:, 1],
                "C0",
                linewidth=0.8,
                label="posterior samples" if j == 0 else "_nolegend_",
            )
        self.ax.plot(x, curves.mean_curve[:, 1], "#F2404C", linewidth=2.0, label=mean_label)

    def _band(self, x, upper, lower, label, **kwargs):
        kwargs.setdefault("linewidth", 0.5)
        kwargs.setdefault("alpha", 0.8)
        self.ax.fill(
            np.hstack((x, x[::-1])),
            np.hstack((upper, lower[::-1])),
            color="#D8D8D8",
            label=label,
            **kwargs
        )


def plot_posterior(curves, observations=(), title=None, show=True):
    """Plot the output of `compute_posterior` together with the observations.

    Parameters
    ----------
    curves : gpdraw.core.PosteriorCurves
    observations : sequence, optional
        (x, y) or (x, y, noise_std) tuples; noise is drawn as 1.96 sigma
        error bars.
    title : str, optional
    show : bool, optional
        Call `plt.show()` if True.

    Returns
    -------
    Figure
    """
    fig = Figure(isinteractive=show)
    fig.plotcurves(curves)
    obs = [tuple(o) for o in observations]
    if obs:
        xi = np.array([o[0] for o in obs], dtype=float)
        zi = np.array([o[1] for o in obs], dtype=float)
        si = np.array([o[2] if len(o) > 2 else 0.0 for o in obs], dtype=float)
        fig.ax.errorbar(xi, zi, 1.96 * si, fmt="none", ecolor="r", linewidth=0.8)
        fig.plotdata(xi, zi)
    if title is not None:
        fig.title(title)
    fig.legend()
    if show:
        fig.show(grid=True)
    return fig
