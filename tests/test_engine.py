import logging
import math
import unittest

import numpy as np
import pytest

import gpdraw as gd
import gpdraw.num as gnp
from gpdraw.core import linalg
from gpdraw.exceptions import (
    InvalidParameterError,
    NumericInstabilityError,
    SamplingUnavailableError,
)


class TestComputePosterior(unittest.TestCase):
    def test_prior_band(self):
        for variance in (0.5, 1.0, 2.0, 7.3):
            curves = gd.compute_posterior([], 1.0, variance, 2, rng=0)
            width = curves.upper_curve[:, 1] - curves.lower_curve[:, 1]
            self.assertTrue(np.all(curves.mean_curve[:, 1] == 0.0))
            self.assertTrue(np.allclose(width, 2 * 1.96 * math.sqrt(variance)))

    def test_prior_band_variance_two(self):
        curves = gd.compute_posterior([], 1.0, 2.0, 0)
        self.assertAlmostEqual(curves.upper_curve[0, 1], 1.96 * math.sqrt(2.0))
        self.assertAlmostEqual(
            curves.upper_curve[0, 1] - curves.lower_curve[0, 1], 2 * 1.96 * math.sqrt(2.0)
        )

    def test_grid(self):
        curves = gd.compute_posterior([(0.0, 1.0, 0.1)], 1.0, 1.0, 1, rng=0)
        expected = np.arange(100) * 0.1 - 5.0
        for curve in (curves.mean_curve, curves.upper_curve, curves.lower_curve):
            self.assertEqual(curve.shape, (100, 2))
            self.assertTrue(np.allclose(curve[:, 0], expected))
        self.assertTrue(np.allclose(curves.sample_curves[0][:, 0], expected))
        self.assertAlmostEqual(curves.mean_curve[0, 0], -5.0)
        self.assertAlmostEqual(curves.mean_curve[-1, 0], 4.9)

    def test_single_observation_scenario(self):
        curves = gd.compute_posterior([(0.0, 0.0, 0.1)], 1.0, 1.0, 3, rng=0)
        mean = curves.mean_curve[:, 1]
        upper = curves.upper_curve[:, 1]
        lower = curves.lower_curve[:, 1]
        self.assertEqual(len(mean), 100)
        self.assertTrue(np.allclose(mean, 0.0))
        self.assertTrue(np.all(upper >= mean))
        self.assertTrue(np.all(mean >= lower))
        # uncertainty shrinks at the observation
        self.assertLess(curves.posterior_std[50], 0.15)
        self.assertGreater(curves.posterior_std[0], 0.99)
        self.assertEqual(len(curves.sample_curves), 3)
        for s in curves.sample_curves:
            self.assertEqual(s.shape, (100, 2))
        self.assertFalse(curves.sampling_failed)

    def test_idempotence(self):
        obs = [(-1.0, 0.5, 0.2), (2.0, -0.3, 0.1), (2.0, -0.2, 0.1)]
        a = gd.compute_posterior(obs, 0.8, 1.5, 2)
        b = gd.compute_posterior(obs, 0.8, 1.5, 2)
        self.assertTrue(np.array_equal(a.mean_curve, b.mean_curve))
        self.assertTrue(np.array_equal(a.upper_curve, b.upper_curve))
        self.assertTrue(np.array_equal(a.lower_curve, b.lower_curve))

    def test_seeded_samples(self):
        obs = [(-1.0, 0.5, 0.2), (2.0, -0.3, 0.1)]
        a = gd.compute_posterior(obs, 0.8, 1.5, 2, rng=11)
        b = gd.compute_posterior(obs, 0.8, 1.5, 2, rng=11)
        for sa, sb in zip(a.sample_curves, b.sample_curves):
            self.assertTrue(np.array_equal(sa, sb))

    def test_pairs_take_default_noise(self):
        a = gd.compute_posterior([(0.5, 1.0)], 1.0, 1.0, 0, default_noise_std=0.3)
        b = gd.compute_posterior([(0.5, 1.0, 0.3)], 1.0, 1.0, 0)
        self.assertTrue(np.array_equal(a.mean_curve, b.mean_curve))
        self.assertTrue(np.array_equal(a.upper_curve, b.upper_curve))

    def test_to_dict(self):
        curves = gd.compute_posterior([(0.0, 1.0, 0.1)], 1.0, 1.0, 2, rng=0)
        d = curves.to_dict()
        self.assertEqual(set(d), {"meanLine", "upperBound", "lowerBound", "samples"})
        self.assertEqual(len(d["meanLine"]), 100)
        self.assertEqual(len(d["meanLine"][0]), 2)
        self.assertEqual(len(d["samples"]), 2)
        self.assertIsInstance(d["upperBound"][10][1], float)


def test_std_nonnegative_with_duplicates():
    obs = [(1.0, 0.5, 0.0), (1.0, 0.5, 0.0), (1.0, 0.6, 0.0), (-3.0, 0.0, 0.0)]
    curves = gd.compute_posterior(obs, 0.05, 1.0, 2, rng=0)
    assert np.all(curves.posterior_std >= 0.0)
    for curve in (curves.mean_curve, curves.upper_curve, curves.lower_curve):
        assert np.all(np.isfinite(curve))


def test_interpolation_property():
    curves = gd.compute_posterior([(0.0, 2.0, 1e-6)], 1.0, 1.0, 0)
    i = int(np.argmin(np.abs(curves.mean_curve[:, 0] - 0.0)))
    assert curves.mean_curve[i, 1] == pytest.approx(2.0, abs=1e-6)


def test_prior_sampling_modes():
    a = gd.compute_posterior([], 1.0, 1.0, 2, rng=0, prior_sampling="independent")
    b = gd.compute_posterior([], 1.0, 1.0, 2, rng=0, prior_sampling="correlated")
    assert len(a.sample_curves) == len(b.sample_curves) == 2
    # correlated paths are smooth, independent ones are not
    assert np.mean(np.abs(np.diff(b.sample_curves[0][:, 1]))) < np.mean(
        np.abs(np.diff(a.sample_curves[0][:, 1]))
    )


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(lengthscale=0.0),
        dict(lengthscale=-1.0),
        dict(lengthscale=float("nan")),
        dict(variance=0.0),
        dict(variance=-2.0),
        dict(variance=float("inf")),
        dict(nb_samples=-1),
        dict(nb_samples=2.5),
        dict(nb_samples=True),
        dict(default_noise_std=-0.1),
        dict(observations=[(0.0, 1.0, -0.1)]),
        dict(observations=[(0.0,)]),
        dict(observations=[(0.0, 1.0, 0.1, 2.0)]),
        dict(observations=[(float("nan"), 1.0, 0.1)]),
        dict(observations=[("a", 1.0, 0.1)]),
        dict(observations=[3.0]),
        dict(prior_sampling="uniform"),
    ],
)
def test_invalid_parameters(kwargs):
    args = dict(observations=[(0.0, 1.0, 0.1)], lengthscale=1.0, variance=1.0, nb_samples=1)
    args.update(kwargs)
    with pytest.raises(InvalidParameterError):
        gd.compute_posterior(**args)


def test_invalid_parameter_is_value_error():
    with pytest.raises(ValueError):
        gd.compute_posterior([], -1.0, 1.0, 0)


def test_sampling_failure_keeps_curves(monkeypatch, caplog):
    def failing(cov):
        raise SamplingUnavailableError("not positive semidefinite")

    monkeypatch.setattr(linalg, "sampling_cholesky", failing)
    with caplog.at_level(logging.WARNING, logger="gpdraw"):
        curves = gd.compute_posterior([(0.0, 1.0, 0.1)], 1.0, 1.0, 3, rng=0)
    assert curves.sampling_failed
    assert curves.sample_curves == []
    assert curves.mean_curve.shape == (100, 2)
    assert np.all(np.isfinite(curves.upper_curve))
    assert "Sample curves unavailable" in caplog.text


def test_unfactorable_observation_covariance(monkeypatch):
    monkeypatch.setattr(linalg, "try_cholesky", lambda A, epsilon: None)
    with pytest.raises(NumericInstabilityError):
        gd.compute_posterior([(0.0, 1.0, 0.1)], 1.0, 1.0, 0)


def test_model_facade():
    model = gd.Model(lengthscale=0.5, variance=2.0)
    xi = gnp.asarray([0.0, 1.0])
    zi = gnp.asarray([1.0, -1.0])
    noise_std = gnp.asarray([0.1, 0.1])
    xt = gnp.asarray([-0.5, 0.0, 0.5, 1.0])
    zt_mean, zt_var = model.predict(xi, zi, noise_std, xt)
    assert zt_mean.shape == (4,)
    assert np.all(zt_var >= 0.0)
    zsim = model.sample_paths(xi, zi, noise_std, xt, 5, rng=0)
    assert zsim.shape == (4, 5)
    assert model.prior_sample_paths(xt, 2, rng=0).shape == (4, 2)
    assert "Length Scale: 0.5" in str(model)
    with pytest.raises(InvalidParameterError):
        gd.Model(lengthscale=0.0)


def test_model_predict_checks_lengths():
    model = gd.Model(lengthscale=1.0, variance=1.0)
    with pytest.raises(InvalidParameterError):
        model.predict(gnp.asarray([0.0, 1.0]), gnp.asarray([1.0]), gnp.asarray([0.1, 0.1]), gnp.asarray([0.5]))


def test_no_full_grid_covariance_without_observations(monkeypatch):
    from gpdraw.core import covariance

    calls = []
    grid_covariance = covariance.grid_covariance

    def recording(xt, lengthscale, variance, pairwise=False):
        calls.append(pairwise)
        return grid_covariance(xt, lengthscale, variance, pairwise=pairwise)

    monkeypatch.setattr(covariance, "grid_covariance", recording)
    curves = gd.compute_posterior([], 1.0, 2.0, 3, rng=0, prior_sampling="independent")
    assert calls == [True]
    assert np.allclose(curves.posterior_std, math.sqrt(2.0))
    assert len(curves.sample_curves) == 3
