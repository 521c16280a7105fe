"""
Single-phase ideal gas mixture fluid state.

All components are fully miscible in one gas phase, so every component is a
solvent. The number of components is fixed per fluid system: use
IdealGasMixtureState.for_components(n) to obtain the state class for an
n-component mixture.
"""

from functools import lru_cache
from typing import Sequence

import numpy as np
from scipy.constants import R

from fluid_state.core.fluid_state import FluidState


class IdealGasMixtureState(FluidState[float], abstract=True):
    """
    Equilibrium of an ideal gas mixture at given concentrations and temperature.

    Relations:
        p_i = R * T * c_i          (fugacity = partial pressure)
        p = R * T * sum(c_i)
        rho = sum(c_i) * M_avg

    Parameters:
        concentrations: Molar concentration of each component [mol/m³]
        temperature: Temperature [K]
        molar_masses: Molar mass of each component [kg/mol]

    Out-of-range indices raise IndexError (numpy indexing); negative indices
    count from the end.

    Example:
        Air = IdealGasMixtureState.for_components(2)
        air = Air.from_mole_fractions(1e5, 300.0, [0.79, 0.21], [0.028, 0.032])
        air.phase_pressure(0)   # 1e5 Pa
        air.fugacity(1)         # 2.1e4 Pa
    """

    num_phases = 1
    GAS_PHASE_IDX = 0

    def __init__(self,
                 concentrations: Sequence[float],
                 temperature: float,
                 molar_masses: Sequence[float]):
        c = self._component_array(concentrations, 'concentrations')
        M = self._component_array(molar_masses, 'molar_masses')

        if not temperature > 0:
            raise ValueError(f"Temperature must be positive, got {temperature}")
        if not np.all(c >= 0):
            raise ValueError(f"Concentrations must be non-negative, got {c.tolist()}")
        if not np.all(M > 0):
            raise ValueError(f"Molar masses must be positive, got {M.tolist()}")

        c_total = c.sum()
        if not c_total > 0:
            raise ValueError("Mixture contains no moles (all concentrations are zero)")

        self._T = float(temperature)
        self._molar_masses = M

        # Phase-indexed storage, shape (num_phases, num_components)
        self._concentrations = c.reshape(1, -1)
        self._mole_fracs = self._concentrations / c_total
        self._phase_concentrations = np.array([c_total])
        self._average_molar_masses = self._mole_fracs @ M
        self._saturations = np.ones(1)

        for array in (self._concentrations, self._mole_fracs, self._phase_concentrations,
                      self._average_molar_masses, self._saturations):
            array.flags.writeable = False

    @classmethod
    def _component_array(cls, values: Sequence[float], label: str) -> np.ndarray:
        array = np.array(values, dtype=float)
        if array.shape != (cls.num_components,):
            raise ValueError(
                f"{cls.__name__} expects {cls.num_components} {label}, "
                f"got shape {array.shape}"
            )
        array.flags.writeable = False
        return array

    @classmethod
    @lru_cache(maxsize=None)
    def for_components(cls, num_components: int) -> type:
        """
        Return the state class for an ideal gas mixture of num_components species.

        Repeated calls with the same count return the same class.

        Raises:
            ValueError: If num_components < 1
        """
        if num_components < 1:
            raise ValueError(f"An ideal gas mixture needs at least one component, got {num_components}")

        return type(
            f"{cls.__name__}{num_components}",
            (cls,),
            {
                'num_components': num_components,
                'num_solvents': num_components,
                '__module__': cls.__module__,
            },
        )

    @classmethod
    def from_mole_fractions(cls,
                            pressure: float,
                            temperature: float,
                            mole_fractions: Sequence[float],
                            molar_masses: Sequence[float]) -> 'IdealGasMixtureState':
        """
        Build a state from total pressure [Pa] and composition.

        Mole fractions are normalized to sum to one.

        Raises:
            ValueError: If pressure or temperature is not positive, or the
                mole fractions do not sum to a positive number
        """
        if not pressure > 0:
            raise ValueError(f"Pressure must be positive, got {pressure}")
        if not temperature > 0:
            raise ValueError(f"Temperature must be positive, got {temperature}")

        x = np.asarray(mole_fractions, dtype=float)
        total = x.sum()
        if not total > 0:
            raise ValueError("Mole fractions must sum to a positive value")

        c_total = pressure / (R * temperature)
        return cls(x / total * c_total, temperature, molar_masses)

    def saturation(self, phase_idx):
        return float(self._saturations[phase_idx])

    def mole_frac(self, phase_idx, comp_idx):
        return float(self._mole_fracs[phase_idx, comp_idx])

    def phase_concentration(self, phase_idx):
        return float(self._phase_concentrations[phase_idx])

    def concentration(self, phase_idx, comp_idx):
        return float(self._concentrations[phase_idx, comp_idx])

    def density(self, phase_idx):
        return float(self._phase_concentrations[phase_idx] * self._average_molar_masses[phase_idx])

    def average_molar_mass(self, phase_idx):
        return float(self._average_molar_masses[phase_idx])

    def fugacity(self, comp_idx):
        return R * self._T * float(self._concentrations[self.GAS_PHASE_IDX, comp_idx])

    def phase_pressure(self, phase_idx):
        return R * self._T * float(self._phase_concentrations[phase_idx])

    def temperature(self):
        return self._T
