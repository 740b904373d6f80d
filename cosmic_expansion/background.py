"""Background Friedmann equation for the expansion model.

Everything here is expressed in the stretch s = 1/a = 1 + z:

    E²(s) = (H/H₀)² = Ω_Λ + Ω_k s² + Ω_m s³ + Ω_rad s⁴

and the instantaneous density parameters follow by dividing each
component's contribution by E²(s).
"""

import math
from dataclasses import dataclass, asdict
from typing import Callable, Tuple

from .utils.config import CosmologicalParameters


@dataclass(frozen=True)
class DensityState:
    """Hubble rate, density fractions and temperature at a given stretch."""

    h: float  # Hubble parameter [km/s/Mpc]
    omega_m: float
    omega_lambda: float
    omega_rad: float
    temperature: float  # [K]
    rho_crit: float  # Critical density [kg/m³]

    def as_dict(self) -> dict:
        return asdict(self)


def e_squared(params: CosmologicalParameters, s: float) -> float:
    """Dimensionless Hubble rate squared, E²(s) = H(s)²/H₀².

    Not guaranteed non-negative for arbitrary parameters; models built with
    build_parameters have been checked over the integration domain.
    """
    s2 = s * s
    return (
        params.omega_lambda0
        + params.omega_k0 * s2
        + params.omega_m0 * s2 * s
        + params.omega_rad0 * s2 * s2
    )


def _density_state_at_infinity(params: CosmologicalParameters) -> DensityState:
    """Limit of the density state as s -> inf.

    The highest power of s with a non-zero coefficient dominates E²(s), so
    that component's fraction tends to its share (1 for a single dominant
    component) and the others vanish.
    """
    omega_m, omega_lambda, omega_rad = 0.0, 0.0, 0.0
    if params.omega_rad0 > 0:
        omega_rad = 1.0
    elif params.omega_m0 > 0:
        omega_m = 1.0
    elif params.omega_k0 == 0:
        omega_lambda = 1.0

    return DensityState(
        h=math.inf,
        omega_m=omega_m,
        omega_lambda=omega_lambda,
        omega_rad=omega_rad,
        temperature=math.inf if params.temperature0 > 0 else 0.0,
        rho_crit=math.inf,
    )


def density_state(params: CosmologicalParameters, s: float) -> DensityState:
    """Instantaneous density parameters, Hubble rate and temperature.

    Satisfies Ω_m(s) + Ω_Λ(s) + Ω_rad(s) = 1 - Ω_k s²/E²(s).

    Args:
        params: Model parameters
        s: Stretch value (positive, may be +inf)

    Returns:
        DensityState at s
    """
    if math.isinf(s):
        return _density_state_at_infinity(params)

    e_sq = e_squared(params, s)
    s2 = s * s
    return DensityState(
        h=params.h0 * math.sqrt(e_sq),
        omega_m=params.omega_m0 * s2 * s / e_sq,
        omega_lambda=params.omega_lambda0 / e_sq,
        omega_rad=params.omega_rad0 * s2 * s2 / e_sq,
        temperature=params.temperature0 * s,
        rho_crit=params.rho_crit0 * e_sq,
    )


def integrands(
    params: CosmologicalParameters,
) -> Tuple[Callable[[float], float], Callable[[float], float]]:
    """Return the time and distance integrands (TH, THs).

    TH(s) = 1/E(s) is finite at s = 0 when Ω_Λ > 0; THs(s) = 1/(s E(s))
    is singular there and is never integrated from s = 0.
    """

    def th(s: float) -> float:
        return 1.0 / math.sqrt(e_squared(params, s))

    def ths(s: float) -> float:
        return 1.0 / (s * math.sqrt(e_squared(params, s)))

    return th, ths
