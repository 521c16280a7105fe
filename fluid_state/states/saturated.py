"""
Two-phase equilibrium of a pure fluid on its saturation curve.

Liquid and vapor of a single substance coexist at the saturation
temperature of the given pressure. The split between the phases is given
by the vapor quality (mass fraction of vapor).
"""

from typing import Tuple

from fluid_state.core.fluid_state import FluidState
from fluid_state.properties.coolprop_wrapper import fluid_properties


class SaturatedFluidState(FluidState[float]):
    """
    Saturated liquid/vapor state of a pure fluid, backed by CoolProp.

    Phases:
        0 (LIQUID_PHASE_IDX): saturated liquid
        1 (GAS_PHASE_IDX): saturated vapor

    Both phases are at the same pressure (no capillary pressure) and at the
    saturation temperature of that pressure. The fugacity query is not
    provided.

    Phase quantities are stored as (liquid, vapor) tuples: a phase index of
    2 or more raises IndexError, negative indices count from the end.

    Parameters:
        fluid: CoolProp fluid name (default 'Water')
        P: Pressure [Pa]
        quality: Vapor quality in [0, 1]

    Example:
        state = SaturatedFluidState('Water', P=1e5, quality=0.1)
        state.temperature()     # ~373.12 K
        state.saturation(1)     # vapor volume fraction, ~0.995
    """

    num_phases = 2
    num_components = 1
    num_solvents = 1

    LIQUID_PHASE_IDX = 0
    GAS_PHASE_IDX = 1

    def __init__(self, fluid: str = 'Water', *, P: float, quality: float):
        if P <= 0:
            raise ValueError(f"Pressure must be positive, got {P}")
        if not 0 <= quality <= 1:
            raise ValueError(f"Quality must be in [0, 1], got {quality}")

        self.fluid_name = fluid
        self.fluid = fluid_properties(fluid)
        self.P = P
        self.quality = quality

        self._T = self.fluid.saturation_temperature(P)
        self._M = self.fluid.molar_mass()

        alpha = self.fluid.vapor_volume_fraction(P, quality)
        self._saturations: Tuple[float, float] = (1.0 - alpha, alpha)
        self._densities: Tuple[float, float] = (
            self.fluid.saturated_liquid_density(P),
            self.fluid.saturated_vapor_density(P),
        )
        self._pressures: Tuple[float, float] = (P, P)
        self._molar_masses: Tuple[float, float] = (self._M, self._M)
        self._mole_fracs = ((1.0,), (1.0,))

    def saturation(self, phase_idx):
        return self._saturations[phase_idx]

    def mole_frac(self, phase_idx, comp_idx):
        return self._mole_fracs[phase_idx][comp_idx]

    def phase_concentration(self, phase_idx):
        return self._densities[phase_idx] / self._molar_masses[phase_idx]

    def concentration(self, phase_idx, comp_idx):
        return self.mole_frac(phase_idx, comp_idx) * self.phase_concentration(phase_idx)

    def density(self, phase_idx):
        return self._densities[phase_idx]

    def average_molar_mass(self, phase_idx):
        return self._molar_masses[phase_idx]

    def phase_pressure(self, phase_idx):
        return self._pressures[phase_idx]

    def temperature(self):
        return self._T

    def __repr__(self) -> str:
        return (f"SaturatedFluidState('{self.fluid_name}', P={self.P}, "
                f"quality={self.quality}, T={self._T:.2f})")
