"""Cumulative time and distance integrals over stretch.

With s = 1/a the cosmic time and the comoving distance follow from two
improper integrals of the Friedmann rate:

    t(s)    = (1/H₀) ∫_s^∞ ds' / (s' E(s'))
    d_C(s)  = (c/H₀) |∫_1^s ds' / E(s')|
    d_par(s) = (c/H₀) ∫_s^∞ ds' / E(s') / s

All requested stretch values are resolved from one segmented quadrature
pass per integrand: the breakpoints are the requested values bracketed by
0 (the asymptotic future) and +inf (the initial singularity), and each
cumulative integral is a running sum of segment integrals.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .background import integrands
from .utils.config import CosmologicalParameters
from .utils.numerics import (
    DEFAULT_TOLERANCE,
    QuadratureResult,
    segment_integrate,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntegrationResult:
    """Cumulative integrals at one requested stretch value.

    th and ths are the dimensionless integrals of TH and THs accumulated
    from the first breakpoint; t, d_now and d_par are in Gyr and Gly.
    """

    s: float
    th: float
    ths: float
    t: float
    d_now: float
    d_par: float


@dataclass(frozen=True)
class ReferenceIntegrals:
    """Fixed integrals every cumulative value is measured against."""

    th_at_one: float  # ∫_0^1 TH
    th_at_infinity: float  # ∫_0^∞ TH
    ths_at_infinity: float  # ∫_{s_min}^∞ THs


def check_stretch_values(stretch_values: Iterable[float]) -> List[float]:
    """Validate requested stretch values.

    Raises:
        ValueError: if the list is empty or holds a non-positive or NaN value
    """
    values = [float(s) for s in stretch_values]
    if not values:
        raise ValueError("At least one stretch value is required")

    for s in values:
        if math.isnan(s) or not s > 0:
            raise ValueError(f"Stretch values must be positive, got {s}")

    return values


def build_breakpoints(stretch_values: Iterable[float]) -> Tuple[List[float], bool]:
    """Ascending integration breakpoints for the requested stretch values.

    The sequence starts with the 0 sentinel and ends with +inf; duplicates
    (including an explicitly requested +inf) appear only once.

    Returns:
        Tuple of (breakpoints, is_infinity_included)
    """
    ascending = sorted(check_stretch_values(stretch_values))
    is_infinity_included = math.isinf(ascending[-1])

    points = [0.0] + ascending
    if not is_infinity_included:
        points.append(math.inf)

    # dict preserves insertion order
    return list(dict.fromkeys(points)), is_infinity_included


def integrate_stretch_values(
    params: CosmologicalParameters,
    stretch_values: Iterable[float],
    tolerance: float = DEFAULT_TOLERANCE,
) -> List[IntegrationResult]:
    """Cumulative integrals at every distinct requested stretch value.

    Args:
        params: Model parameters
        stretch_values: Positive stretch values in any order, may contain +inf
        tolerance: Absolute and relative quadrature tolerance

    Returns:
        One IntegrationResult per distinct value, in ascending order of s
    """
    breakpoints, is_infinity_included = build_breakpoints(stretch_values)
    th_func, ths_func = integrands(params)

    th_quad = segment_integrate(th_func, breakpoints, tolerance)

    # THs is never evaluated at s = 0
    ths_breakpoints = breakpoints[1:]
    if len(ths_breakpoints) > 1:
        ths_quad = segment_integrate(ths_func, ths_breakpoints, tolerance)
    else:
        # Only +inf was requested: nothing to integrate
        ths_quad = QuadratureResult(total=0.0)

    th_segments = [segment.integral for segment in th_quad.segments]
    # Zero-width entry for [0, s_min] keeps the indices aligned with TH
    ths_segments = [0.0] + [segment.integral for segment in ths_quad.segments]

    references = ReferenceIntegrals(
        th_at_one=segment_integrate(th_func, [0.0, 1.0], tolerance).total,
        th_at_infinity=th_quad.total,
        ths_at_infinity=ths_quad.total,
    )
    logger.debug(
        "Integrated %d breakpoints: th(1)=%.10g th(inf)=%.10g ths(inf)=%.10g",
        len(breakpoints),
        references.th_at_one,
        references.th_at_infinity,
        references.ths_at_infinity,
    )

    return accumulate(
        params.h0_gy,
        breakpoints[1:],
        th_segments,
        ths_segments,
        references,
        is_infinity_included,
    )


def accumulate(
    h0_gy: float,
    points: List[float],
    th_segments: List[float],
    ths_segments: List[float],
    references: ReferenceIntegrals,
    is_infinity_included: bool,
) -> List[IntegrationResult]:
    """Walk the breakpoints, turning running sums into physical quantities.

    The trailing +inf breakpoint only yields a result when it was requested.
    """
    count = len(points) if is_infinity_included else len(points) - 1

    results = []
    th = 0.0
    ths = 0.0
    for i in range(count):
        th += th_segments[i]
        ths += ths_segments[i]
        s = points[i]

        results.append(
            IntegrationResult(
                s=s,
                th=th,
                ths=ths,
                t=(references.ths_at_infinity - ths) / h0_gy,
                d_now=abs(th - references.th_at_one) / h0_gy,
                d_par=(references.th_at_infinity - th) / s / h0_gy,
            )
        )

    return results
