"""Expansion model utility modules."""

from .constants import (
    PhysicalConstants,
    SurveyParameters,
    DEFAULT_CONSTANTS,
    DEFAULT_SURVEY,
    SURVEYS,
)
from .config import ModelConfig, CosmologicalParameters, build_parameters
from .numerics import (
    ConfigurationError,
    QuadratureWarning,
    QuadratureResult,
    SegmentDiagnostics,
    segment_integrate,
)

__all__ = [
    "PhysicalConstants",
    "SurveyParameters",
    "DEFAULT_CONSTANTS",
    "DEFAULT_SURVEY",
    "SURVEYS",
    "ModelConfig",
    "CosmologicalParameters",
    "build_parameters",
    "ConfigurationError",
    "QuadratureWarning",
    "QuadratureResult",
    "SegmentDiagnostics",
    "segment_integrate",
]
