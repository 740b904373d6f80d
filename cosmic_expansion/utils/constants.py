"""Physical constants and survey presets for the expansion model.

Both tables are immutable: the constants are a frozen dataclass and the
surveys are exposed through a read-only registry keyed by survey name.
"""

from dataclasses import dataclass, asdict
from types import MappingProxyType
from typing import Final, Mapping


@dataclass(frozen=True)
class PhysicalConstants:
    """Unit conversions used when deriving model parameters."""

    # Multiply a Hubble factor in km/s/Mpc to get Gyr⁻¹
    kmsmpsc_to_gyr: float
    # Gyr in seconds (Julian years)
    gyr_to_seconds: float
    # 3/(8πG) in SI units [kg s² m⁻³]
    rho_const: float

    def as_dict(self) -> dict:
        return asdict(self)


DEFAULT_CONSTANTS: Final[PhysicalConstants] = PhysicalConstants(
    kmsmpsc_to_gyr=1.0227121650537077e-3,
    gyr_to_seconds=3.15576e16,
    rho_const=1.7884453398696718e9,
)


@dataclass(frozen=True)
class SurveyParameters:
    """Cosmological parameters published by a survey.

    Attributes:
        h0: Hubble constant H₀ [km/s/Mpc]
        omega0: Total density parameter Ω_tot
        omega_lambda0: Dark energy density parameter Ω_Λ
        zeq: Redshift of matter-radiation equality
        temperature0: CMB temperature today [K]
    """

    h0: float
    omega0: float
    omega_lambda0: float
    zeq: float
    temperature0: float

    def as_dict(self) -> dict:
        return asdict(self)


# Planck 2018 (TT,TE,EE+lowE+lensing+BAO)
PLANCK_2018: Final[SurveyParameters] = SurveyParameters(
    h0=67.66,
    omega0=1.0,
    omega_lambda0=0.6889,
    zeq=3387.0,
    temperature0=2.7255,
)

# Planck 2015 (TT,TE,EE+lowP+lensing+ext)
PLANCK_2015: Final[SurveyParameters] = SurveyParameters(
    h0=67.74,
    omega0=1.0,
    omega_lambda0=0.6911,
    zeq=3371.0,
    temperature0=2.7255,
)

# WMAP nine-year (2013), combined with eCMB+BAO+H0
WMAP_2013: Final[SurveyParameters] = SurveyParameters(
    h0=69.32,
    omega0=1.0,
    omega_lambda0=0.7135,
    zeq=3293.0,
    temperature0=2.725,
)

DEFAULT_SURVEY: Final[str] = "planck2018"

SURVEYS: Final[Mapping[str, SurveyParameters]] = MappingProxyType(
    {
        "planck2018": PLANCK_2018,
        "planck2015": PLANCK_2015,
        "wmap2013": WMAP_2013,
    }
)


def hubble_time(h0_km_s_Mpc: float) -> float:
    """Return the Hubble time 1/H₀ in Gyr."""
    return 1.0 / (h0_km_s_Mpc * DEFAULT_CONSTANTS.kmsmpsc_to_gyr)
