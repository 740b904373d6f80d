"""Tests for the cumulative time and distance integrals."""

import math

import pytest
import numpy as np
from numpy.testing import assert_allclose
from scipy.integrate import quad

from cosmic_expansion import integration
from cosmic_expansion.background import integrands
from cosmic_expansion.integration import (
    IntegrationResult,
    build_breakpoints,
    check_stretch_values,
    integrate_stretch_values,
)
from cosmic_expansion.utils.config import build_parameters


@pytest.fixture(scope="module")
def params():
    """Default (Planck 2018) parameters."""
    return build_parameters()


def reference_integral(f, lower, upper):
    """Independent high-accuracy quadrature for comparisons."""
    value, _ = quad(f, lower, upper, epsabs=1e-12, epsrel=1e-12, limit=500)
    return value


class TestBreakpoints:
    """Tests for breakpoint construction."""

    def test_single_point(self):
        """A single value is bracketed by 0 and inf."""
        points, included = build_breakpoints([1.0])
        assert points == [0.0, 1.0, math.inf]
        assert not included

    def test_descending_input(self):
        """Values are sorted into ascending order."""
        points, _ = build_breakpoints([10.0, 2.0, 0.5])
        assert points == [0.0, 0.5, 2.0, 10.0, math.inf]

    def test_duplicates_removed(self):
        """Repeated values give a single breakpoint."""
        points, _ = build_breakpoints([2.0, 1.0, 2.0, 1.0])
        assert points == [0.0, 1.0, 2.0, math.inf]

    def test_infinity_requested(self):
        """An explicit inf is not appended twice."""
        points, included = build_breakpoints([math.inf, 3.0, math.inf])
        assert points == [0.0, 3.0, math.inf]
        assert included

    @pytest.mark.parametrize("values", [[], [0.0], [-1.0], [1.0, math.nan]])
    def test_invalid_values(self, values):
        """Empty, non-positive and NaN requests are rejected."""
        with pytest.raises(ValueError):
            check_stretch_values(values)


class TestIntegrateStretchValues:
    """Tests for integrate_stretch_values."""

    def test_age(self, params):
        """Time since the singularity today is about 13.8 Gyr."""
        results = integrate_stretch_values(params, [1.0])
        assert len(results) == 1
        assert isinstance(results[0], IntegrationResult)
        assert results[0].s == 1.0
        assert abs(results[0].t - 13.8) < 0.05

    def test_ascending_distinct(self, params):
        """One result per distinct finite value, ascending."""
        results = integrate_stretch_values(params, [5.0, 0.5, 2.0, 5.0])
        assert [r.s for r in results] == [0.5, 2.0, 5.0]

    def test_time_matches_direct_quadrature(self, params):
        """t(s) = ∫_s^∞ THs / H₀."""
        _, ths = integrands(params)
        results = integrate_stretch_values(params, [0.5, 2.0, 11.0])
        for r in results:
            expected = reference_integral(ths, r.s, math.inf) / params.h0_gy
            assert_allclose(r.t, expected, rtol=1e-6)

    def test_distance_matches_direct_quadrature(self, params):
        """d_now(s) = |∫_1^s TH| / H₀ on both sides of the present."""
        th, _ = integrands(params)
        results = integrate_stretch_values(params, [0.5, 3.0])
        future, past = results
        assert_allclose(
            future.d_now, reference_integral(th, 0.5, 1.0) / params.h0_gy, rtol=1e-6
        )
        assert_allclose(
            past.d_now, reference_integral(th, 1.0, 3.0) / params.h0_gy, rtol=1e-6
        )
        assert future.d_now > 0
        assert past.d_now > 0

    def test_particle_horizon(self, params):
        """d_par(s) = ∫_s^∞ TH / s / H₀; about 46 Gly today."""
        th, _ = integrands(params)
        (today,) = integrate_stretch_values(params, [1.0])
        expected = reference_integral(th, 1.0, math.inf) / params.h0_gy
        assert_allclose(today.d_par, expected, rtol=1e-6)
        assert 44.5 < today.d_par < 47.5

    def test_time_decreases_with_stretch(self, params):
        """Earlier epochs (larger s) have smaller t."""
        values = [0.2, 0.5, 1.0, 2.0, 10.0, 1090.0, 1e4]
        results = integrate_stretch_values(params, values)
        times = [r.t for r in results]
        assert np.all(np.diff(times) < 0)

    def test_infinity_result(self, params):
        """Requesting inf gives t = 0 and d_par = 0 exactly."""
        results = integrate_stretch_values(params, [1.0, math.inf])
        assert len(results) == 2
        singularity = results[-1]
        assert math.isinf(singularity.s)
        assert singularity.t == 0.0
        assert singularity.d_par == 0.0
        assert math.isfinite(singularity.d_now)

    def test_only_infinity(self, params):
        """inf alone still goes through the breakpoint path."""
        (result,) = integrate_stretch_values(params, [math.inf])
        assert result.t == 0.0
        assert result.d_par == 0.0
        th, _ = integrands(params)
        expected = reference_integral(th, 1.0, math.inf) / params.h0_gy
        assert_allclose(result.d_now, expected, rtol=1e-6)

    def test_extra_points_do_not_change_values(self, params):
        """Values at a point agree whatever else is requested."""
        (alone,) = integrate_stretch_values(params, [2.0])
        crowded = integrate_stretch_values(params, [0.3, 1.5, 2.0, 7.0, 400.0])
        at_two = next(r for r in crowded if r.s == 2.0)
        assert_allclose(at_two.t, alone.t, rtol=1e-7)
        assert_allclose(at_two.d_now, alone.d_now, rtol=1e-6)
        assert_allclose(at_two.d_par, alone.d_par, rtol=1e-7)

    def test_one_quadrature_pass_per_integrand(self, params, monkeypatch):
        """Any number of points costs two segmented passes plus th(1)."""
        calls = []
        original = integration.segment_integrate

        def counting(f, breakpoints, tolerance):
            calls.append(list(breakpoints))
            return original(f, breakpoints, tolerance)

        monkeypatch.setattr(integration, "segment_integrate", counting)
        integrate_stretch_values(params, [0.5, 1.0, 2.0, 4.0, 8.0, 16.0])

        assert len(calls) == 3
        assert calls[0] == [0.0, 0.5, 1.0, 2.0, 4.0, 8.0, 16.0, math.inf]
        # THs skips the 0 sentinel
        assert calls[1] == [0.5, 1.0, 2.0, 4.0, 8.0, 16.0, math.inf]
        assert calls[2] == [0.0, 1.0]
