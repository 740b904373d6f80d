"""FLRW expansion model.

    H(s)² = H₀² (Ω_m s³ + Ω_rad s⁴ + Ω_Λ + Ω_k s²)

A model is built once from a configuration; its parameters never change
afterwards, so one instance can serve any number of expansion tables.
"""

import logging
from typing import Iterable, List, Optional

from .background import DensityState, density_state, e_squared
from .expansion import ExpansionInputs, ExpansionResult, assemble_results
from .integration import IntegrationResult, integrate_stretch_values
from .stretch_range import get_stretch_values
from .utils.config import CosmologicalParameters, ModelConfig, build_parameters
from .utils.numerics import DEFAULT_TOLERANCE


logger = logging.getLogger(__name__)


class CosmicExpansionModel:
    """Expansion history of an FLRW universe.

    Example:
        >>> model = CosmicExpansionModel(ModelConfig(survey="planck2015"))
        >>> age = model.calculate_age()
        >>> table = model.calculate_expansion(ExpansionInputs(stretch=[1090, 0.5]))
    """

    def __init__(
        self,
        config: Optional[ModelConfig] = None,
        tolerance: float = DEFAULT_TOLERANCE,
    ):
        """Initialize the model.

        Args:
            config: Survey choice and parameter overrides
            tolerance: Absolute and relative quadrature tolerance

        Raises:
            ConfigurationError: if the configuration gives an unphysical model
        """
        self.config = config or ModelConfig()
        self.tolerance = tolerance
        self._params = build_parameters(self.config)

    @property
    def params(self) -> CosmologicalParameters:
        """Derived cosmological parameters."""
        return self._params

    def e_squared(self, s: float) -> float:
        """E²(s) = H(s)²/H₀²."""
        return e_squared(self._params, s)

    def density_state(self, s: float) -> DensityState:
        """Density parameters, Hubble rate and temperature at stretch s."""
        return density_state(self._params, s)

    def integrate(self, stretch_values: Iterable[float]) -> List[IntegrationResult]:
        """Cumulative integrals at each distinct stretch value, ascending."""
        return integrate_stretch_values(self._params, stretch_values, self.tolerance)

    def calculate_age(self) -> float:
        """Age of the universe today [Gyr]."""
        return self.integrate([1.0])[0].t

    def calculate_expansion_for_stretch_values(
        self,
        stretch_values: Iterable[float],
    ) -> List[ExpansionResult]:
        """Expansion results at explicit stretch values, in the given order."""
        values = [float(s) for s in stretch_values]
        logger.debug("Calculating expansion at %d stretch values", len(values))
        return assemble_results(self._params, self.integrate(values), values)

    def calculate_expansion(self, inputs: ExpansionInputs) -> List[ExpansionResult]:
        """Tabulate the expansion for a single stretch value or a range.

        Args:
            inputs: One stretch value, or range bounds plus sampling options

        Returns:
            One ExpansionResult per stretch value, past to future for ranges
        """
        if len(inputs.stretch) == 1:
            stretch_values = [float(inputs.stretch[0])]
        else:
            stretch_values = get_stretch_values(inputs)

        return self.calculate_expansion_for_stretch_values(stretch_values)


def create(**options) -> CosmicExpansionModel:
    """Build a model from keyword options.

    Accepts the ModelConfig field names; anything else is rejected.
    """
    return CosmicExpansionModel(ModelConfig.from_dict(options))
