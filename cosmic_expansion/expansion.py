"""Expansion inputs and the tabulated expansion results."""

import math
from dataclasses import dataclass, asdict
from typing import List, Sequence

from .background import density_state
from .integration import IntegrationResult
from .utils.config import CosmologicalParameters


@dataclass(frozen=True)
class ExpansionInputs:
    """What to tabulate.

    Attributes:
        stretch: A single stretch value, or the [upper, lower] bounds of a range
        steps: Number of intervals the range is divided into
        exponential: Space range values geometrically instead of linearly
        include_present: Add s = 1 when it lies inside the range
        include_infinity: Add s = inf (the initial singularity) to the range
    """

    stretch: Sequence[float] = (1.0,)
    steps: int = 8
    exponential: bool = False
    include_present: bool = True
    include_infinity: bool = False


@dataclass(frozen=True)
class ExpansionResult:
    """Expansion quantities at one stretch value.

    Times are in Gyr, distances in Gly (c = 1), velocities in units of c,
    H in km/s/Mpc.
    """

    z: float  # Redshift
    a: float  # Scale factor
    s: float  # Stretch
    t: float  # Cosmic time since the initial singularity
    d_now: float  # Proper distance now
    d: float  # Proper distance when the light was emitted
    r: float  # Hubble radius c/H
    d_par: float  # Particle horizon
    v_gen: float  # ȧ/ȧ₀, recession velocity of the Hubble sphere
    v_now: float  # Recession velocity now
    v: float  # Recession velocity at emission

    h: float
    omega_m: float
    omega_lambda: float
    omega_rad: float
    temperature: float
    rho_crit: float

    def as_dict(self) -> dict:
        return asdict(self)


def create_expansion_result(
    params: CosmologicalParameters,
    integrated: IntegrationResult,
) -> ExpansionResult:
    """Combine the integrals at one stretch value with its density state."""
    s = integrated.s
    state = density_state(params, s)
    h_gy = state.h * params.kmsmpsc_to_gyr

    # Present epoch is exact
    d_now = 0.0 if s == 1 else integrated.d_now

    if math.isinf(s):
        # Limits as a -> 0
        d = 0.0
        v_gen = math.inf
        v = math.inf if d_now > 0 else 0.0
    else:
        d = d_now / s
        v_gen = state.h / (s * params.h0)
        v = d_now * h_gy / s

    return ExpansionResult(
        z=s - 1,
        a=1 / s,
        s=s,
        t=integrated.t,
        d_now=d_now,
        d=d,
        r=1 / h_gy,
        d_par=integrated.d_par,
        v_gen=v_gen,
        v_now=d_now * params.h0_gy,
        v=v,
        **state.as_dict(),
    )


def assemble_results(
    params: CosmologicalParameters,
    integration_results: Sequence[IntegrationResult],
    stretch_values: Sequence[float],
) -> List[ExpansionResult]:
    """Build the result table in the caller's order.

    Args:
        params: Model parameters
        integration_results: One entry per distinct stretch value
        stretch_values: The values as requested, in the requested order

    Returns:
        One ExpansionResult per requested stretch value
    """
    # Walk from the highest stretch down so each value is built once
    by_stretch = {}
    for integrated in reversed(integration_results):
        by_stretch[integrated.s] = create_expansion_result(params, integrated)

    return [by_stretch[float(s)] for s in stretch_values]
