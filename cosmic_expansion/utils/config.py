"""Configuration and parameter classes for the expansion model."""

import logging
from dataclasses import dataclass, fields, asdict
from typing import Optional, Mapping, Any

import numpy as np

from .constants import DEFAULT_CONSTANTS, DEFAULT_SURVEY, SURVEYS
from .numerics import ConfigurationError, check_positivity


logger = logging.getLogger(__name__)

# Stretch values at which E²(s) must be non-negative
VALIDATION_STRETCH = np.concatenate(([0.0], np.geomspace(1e-4, 1e6, 241)))


@dataclass(frozen=True)
class ModelConfig:
    """Options accepted when building a model.

    Every field is optional; unset fields take the value of the chosen
    survey preset, or of the physical constants for the conversions.

    Attributes:
        survey: Key of a survey preset ('planck2018', 'planck2015', 'wmap2013')
        h0: Hubble constant H₀ [km/s/Mpc]
        omega0: Total density parameter Ω_tot
        omega_lambda0: Dark energy density parameter Ω_Λ
        zeq: Redshift of matter-radiation equality
        temperature0: CMB temperature today [K]
        kmsmpsc_to_gyr: Conversion km/s/Mpc -> Gyr⁻¹
        gyr_to_seconds: Conversion Gyr -> s
        rho_const: 3/(8πG) [kg s² m⁻³]
    """

    survey: Optional[str] = None
    h0: Optional[float] = None
    omega0: Optional[float] = None
    omega_lambda0: Optional[float] = None
    zeq: Optional[float] = None
    temperature0: Optional[float] = None
    kmsmpsc_to_gyr: Optional[float] = None
    gyr_to_seconds: Optional[float] = None
    rho_const: Optional[float] = None

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "ModelConfig":
        """Build a config from a mapping, rejecting unknown option names."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigurationError(
                [f"Unknown configuration option '{name}'" for name in unknown]
            )
        return cls(**options)

    def overrides(self) -> dict:
        """Explicitly set numeric options."""
        return {
            name: value
            for name, value in asdict(self).items()
            if name != "survey" and value is not None
        }


@dataclass(frozen=True)
class CosmologicalParameters:
    """Derived parameters of an FLRW model.

    The density parameters today always close:
    Ω_m + Ω_rad + Ω_Λ + Ω_k = 1, with curvature taking the residual.
    """

    survey: str
    h0: float  # km/s/Mpc
    h0_gy: float  # Gyr⁻¹
    omega0: float
    zeq: float
    omega_m0: float
    omega_rad0: float
    omega_lambda0: float
    omega_k0: float
    rho_crit0: float  # kg/m³
    temperature0: float  # K

    kmsmpsc_to_gyr: float
    gyr_to_seconds: float
    rho_const: float

    @property
    def omega_total(self) -> float:
        """Sum of the four density parameters today."""
        return self.omega_m0 + self.omega_rad0 + self.omega_lambda0 + self.omega_k0

    @property
    def hubble_time(self) -> float:
        """1/H₀ in Gyr."""
        return 1.0 / self.h0_gy

    def validate(self) -> tuple[bool, list[str]]:
        """Validate parameter values.

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        errors = []

        if not self.h0 > 0:
            errors.append(f"Unphysical h0 = {self.h0}")

        if not self.zeq > -1:
            errors.append(f"zeq = {self.zeq} must be > -1")

        if self.omega_m0 < 0:
            errors.append(
                f"Negative omega_m0 = {self.omega_m0} "
                f"(omega0 = {self.omega0} < omega_lambda0 = {self.omega_lambda0})"
            )

        if self.omega_rad0 < 0:
            errors.append(f"Negative omega_rad0 = {self.omega_rad0}")

        if self.temperature0 < 0:
            errors.append(f"Negative temperature0 = {self.temperature0}")

        for name in ("kmsmpsc_to_gyr", "gyr_to_seconds", "rho_const"):
            value = getattr(self, name)
            if not value > 0:
                errors.append(f"Conversion constant {name} = {value} must be positive")

        # E²(s) as a polynomial in s, highest power first
        e_squared = np.polyval(
            [self.omega_rad0, self.omega_m0, self.omega_k0, 0.0, self.omega_lambda0],
            VALIDATION_STRETCH,
        )
        positive, message = check_positivity(e_squared, name="E²(s)")
        if not positive:
            errors.append(message)

        return len(errors) == 0, errors


def resolve_survey(survey: Optional[str]) -> str:
    """Return a known survey key, falling back to the default preset."""
    if survey is None:
        return DEFAULT_SURVEY
    if survey not in SURVEYS:
        logger.warning(
            "Unknown survey '%s', using '%s' parameters", survey, DEFAULT_SURVEY
        )
        return DEFAULT_SURVEY
    return survey


def build_parameters(config: Optional[ModelConfig] = None) -> CosmologicalParameters:
    """Merge constants, survey preset and overrides, then derive parameters.

    Precedence (later wins): physical constants < survey preset < explicit
    options in the config.

    Raises:
        ConfigurationError: if the derived model is unphysical
    """
    config = config or ModelConfig()
    survey = resolve_survey(config.survey)

    props = {
        **DEFAULT_CONSTANTS.as_dict(),
        **SURVEYS[survey].as_dict(),
        **config.overrides(),
    }

    h0 = props["h0"]
    kmsmpsc_to_gyr = props["kmsmpsc_to_gyr"]
    gyr_to_seconds = props["gyr_to_seconds"]
    omega0 = props["omega0"]
    omega_lambda0 = props["omega_lambda0"]
    zeq = props["zeq"]

    # Guard the divisions by zeq + 1, zeq + 2 and gyr_to_seconds
    errors = []
    if not zeq > -1:
        errors.append(f"zeq = {zeq} must be > -1")
    if not gyr_to_seconds > 0:
        errors.append(f"Conversion constant gyr_to_seconds = {gyr_to_seconds} must be positive")
    if errors:
        raise ConfigurationError(errors)

    h0_gy = h0 * kmsmpsc_to_gyr
    seq = zeq + 1
    h0_seconds = h0_gy / gyr_to_seconds

    rho_crit0 = props["rho_const"] * h0_seconds * h0_seconds
    omega_m0 = (omega0 - omega_lambda0) * seq / (seq + 1)
    omega_rad0 = omega_m0 / seq
    omega_k0 = 1 - omega_m0 - omega_rad0 - omega_lambda0

    params = CosmologicalParameters(
        survey=survey,
        h0=h0,
        h0_gy=h0_gy,
        omega0=omega0,
        zeq=zeq,
        omega_m0=omega_m0,
        omega_rad0=omega_rad0,
        omega_lambda0=omega_lambda0,
        omega_k0=omega_k0,
        rho_crit0=rho_crit0,
        temperature0=props["temperature0"],
        kmsmpsc_to_gyr=kmsmpsc_to_gyr,
        gyr_to_seconds=gyr_to_seconds,
        rho_const=props["rho_const"],
    )

    valid, errors = params.validate()
    if not valid:
        raise ConfigurationError(errors)

    logger.debug(
        "Derived parameters for %s: omega_m0=%.6g omega_rad0=%.6g omega_k0=%.6g",
        survey,
        omega_m0,
        omega_rad0,
        omega_k0,
    )
    return params
