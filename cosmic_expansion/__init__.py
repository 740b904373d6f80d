"""Cosmic Expansion - expansion history of FLRW universes.

This package tabulates the expansion of a Friedmann-Lemaître-Robertson-Walker
model as a function of the stretch s = 1/a = 1 + z:
- Density parameters are derived from a survey preset plus overrides
- Cosmic time and distances come from two improper integrals of 1/E(s),
  resolved at every requested stretch from one quadrature pass each
- Results include recession velocities, density fractions and temperature

Key modules:
    utils.constants: Physical constants and survey presets
    utils.config: Model configuration and parameter derivation
    utils.numerics: Segmented adaptive quadrature and error types
    background: Friedmann rate E²(s) and density state
    integration: Cumulative time and distance integrals
    expansion: Expansion inputs and result assembly
    stretch_range: Sampling of stretch ranges
    model: The expansion model

Example usage:
    >>> from cosmic_expansion import create, ExpansionInputs
    >>> model = create(survey="planck2018")
    >>> print(f"Age: {model.calculate_age():.2f} Gyr")
    >>> table = model.calculate_expansion(
    ...     ExpansionInputs(stretch=[1090, 0.5], steps=20, exponential=True)
    ... )
"""

__version__ = "1.0.0"

# Core configuration
from .utils.config import ModelConfig, CosmologicalParameters, build_parameters
from .utils.constants import (
    PhysicalConstants,
    SurveyParameters,
    DEFAULT_CONSTANTS,
    DEFAULT_SURVEY,
    SURVEYS,
    PLANCK_2018,
    PLANCK_2015,
    WMAP_2013,
)
from .utils.numerics import (
    ConfigurationError,
    QuadratureWarning,
    QuadratureResult,
    SegmentDiagnostics,
    segment_integrate,
)

# Friedmann equation
from .background import DensityState, density_state, e_squared

# Integration and results
from .integration import IntegrationResult, integrate_stretch_values
from .expansion import ExpansionInputs, ExpansionResult, assemble_results
from .stretch_range import get_stretch_values

# Model
from .model import CosmicExpansionModel, create

__all__ = [
    # Configuration
    "ModelConfig",
    "CosmologicalParameters",
    "build_parameters",
    "PhysicalConstants",
    "SurveyParameters",
    "DEFAULT_CONSTANTS",
    "DEFAULT_SURVEY",
    "SURVEYS",
    "PLANCK_2018",
    "PLANCK_2015",
    "WMAP_2013",
    # Numerics
    "ConfigurationError",
    "QuadratureWarning",
    "QuadratureResult",
    "SegmentDiagnostics",
    "segment_integrate",
    # Background
    "DensityState",
    "density_state",
    "e_squared",
    # Integration and results
    "IntegrationResult",
    "integrate_stretch_values",
    "ExpansionInputs",
    "ExpansionResult",
    "assemble_results",
    "get_stretch_values",
    # Model
    "CosmicExpansionModel",
    "create",
]
