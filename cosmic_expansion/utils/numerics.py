"""Numerical utilities for expansion computations."""

import logging
import math
import warnings
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray
from scipy.integrate import quad


logger = logging.getLogger(__name__)

# Absolute and relative tolerance used for every expansion integral
DEFAULT_TOLERANCE = 1e-8

# Maximum number of subintervals per segment
DEFAULT_LIMIT = 200


class ConfigurationError(ValueError):
    """Raised when model parameters are inconsistent or unphysical.

    The offending messages are kept on ``errors`` so callers can report
    every problem at once rather than only the first.
    """

    def __init__(self, errors: Sequence[str], message: Optional[str] = None):
        self.errors = list(errors)
        if message is None:
            message = "Invalid cosmological parameters: " + "; ".join(self.errors)
        super().__init__(message)


class QuadratureWarning(UserWarning):
    """Emitted when an adaptive quadrature segment fails to converge."""


@dataclass(frozen=True)
class SegmentDiagnostics:
    """Integral over one pair of consecutive breakpoints."""

    integral: float
    steps: int = 0  # Function evaluations
    error_estimate: float = 0.0
    depth: int = 0  # Subintervals used by the adaptive scheme
    converged: bool = True
    message: str = ""


@dataclass(frozen=True)
class QuadratureResult:
    """Grand total over a breakpoint sequence plus its segment integrals."""

    total: float
    segments: Tuple[SegmentDiagnostics, ...] = field(default_factory=tuple)

    @property
    def converged(self) -> bool:
        """True when every segment met the requested tolerance."""
        return all(segment.converged for segment in self.segments)


def check_breakpoints(breakpoints: Sequence[float]) -> List[float]:
    """Validate a breakpoint sequence for segmented integration.

    Args:
        breakpoints: Strictly increasing points; only the last may be +inf

    Returns:
        The breakpoints as a list of floats
    """
    points = [float(p) for p in breakpoints]
    if len(points) < 2:
        raise ValueError(f"At least two breakpoints are required, got {len(points)}")

    if any(math.isnan(p) for p in points):
        raise ValueError("Breakpoints must not contain NaN")

    if math.isinf(points[0]):
        raise ValueError("The first breakpoint must be finite")

    for lower, upper in zip(points[:-1], points[1:]):
        if not upper > lower:
            raise ValueError(
                f"Breakpoints must be strictly increasing: {lower} >= {upper}"
            )

    return points


def segment_integrate(
    f: Callable[[float], float],
    breakpoints: Sequence[float],
    tolerance: float = DEFAULT_TOLERANCE,
    limit: int = DEFAULT_LIMIT,
) -> QuadratureResult:
    """Integrate f over consecutive breakpoint pairs.

    Each segment [p_i, p_{i+1}] is integrated with QUADPACK (scipy's quad),
    which switches to its infinite-range transform when p_{i+1} is +inf.
    The total is the running sum of the segments, accumulated in order.

    Args:
        f: Integrand
        breakpoints: Strictly increasing points, last one may be +inf
        tolerance: Absolute and relative tolerance
        limit: Maximum number of subintervals per segment

    Returns:
        QuadratureResult with one SegmentDiagnostics per consecutive pair
    """
    points = check_breakpoints(breakpoints)

    segments = []
    total = 0.0
    for lower, upper in zip(points[:-1], points[1:]):
        result = quad(
            f,
            lower,
            upper,
            epsabs=tolerance,
            epsrel=tolerance,
            limit=limit,
            full_output=1,
        )
        value, abserr, infodict = result[:3]
        # quad only appends a message when ier > 0
        converged = len(result) == 3
        message = "" if converged else str(result[3])

        if not converged:
            logger.warning(
                "Quadrature on [%g, %g] did not converge: %s", lower, upper, message
            )
            warnings.warn(
                f"Quadrature on [{lower:g}, {upper:g}] did not converge "
                f"(error estimate {abserr:.3e}): {message}",
                QuadratureWarning,
                stacklevel=2,
            )

        segments.append(
            SegmentDiagnostics(
                integral=float(value),
                steps=int(infodict.get("neval", 0)),
                error_estimate=float(abserr),
                depth=int(infodict.get("last", 0)),
                converged=converged,
                message=message,
            )
        )
        total += float(value)

    return QuadratureResult(total=total, segments=tuple(segments))


def check_positivity(
    values: NDArray[np.floating],
    name: str = "quantity",
    threshold: float = 0.0,
) -> Tuple[bool, str]:
    """Check that values are non-negative (not below threshold).

    Args:
        values: Array to check
        name: Name of quantity for error message
        threshold: Values below this are considered negative

    Returns:
        Tuple of (all_positive, error_message)
    """
    values = np.asarray(values, dtype=float)
    if np.any(np.isnan(values)):
        idx = int(np.argmax(np.isnan(values)))
        return False, f"{name} is NaN at index {idx}"

    min_val = np.min(values)
    if min_val < threshold:
        idx = int(np.argmin(values))
        return False, f"{name} becomes negative: min = {min_val:.3e} at index {idx}"
    return True, ""
