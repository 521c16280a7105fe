"""
Wrapper around CoolProp with caching for performance.

Used by the pure-fluid reference states to obtain saturation properties.
Every property call is LRU cached because equilibrium states are usually
rebuilt many times at the same pressure.
"""

from functools import lru_cache
from CoolProp.CoolProp import PropsSI


class FluidProperties:
    """
    Interface to pure-fluid thermodynamic properties via CoolProp.

    All methods use SI units:
        Pressure: Pa
        Temperature: K
        Density: kg/m³
        Molar mass: kg/mol

    Example:
        water = FluidProperties('Water')
        T_sat = water.saturation_temperature(1e5)       # ~373.12 K
        rho_l = water.saturated_liquid_density(1e5)     # ~958 kg/m³
    """

    def __init__(self, fluid_name: str):
        """
        Initialize for a specific fluid.

        Args:
            fluid_name: CoolProp fluid name (e.g., 'Water', 'CO2', 'Nitrogen')

        Raises:
            ValueError: If CoolProp does not know the fluid
        """
        self.fluid = fluid_name

        try:
            PropsSI('T', 'P', 1e5, 'Q', 0, fluid_name)
        except ValueError as e:
            raise ValueError(f"Unknown fluid '{fluid_name}' for CoolProp") from e

    @lru_cache(maxsize=100)
    def molar_mass(self) -> float:
        """Get molar mass [kg/mol]"""
        return PropsSI('M', self.fluid)

    @lru_cache(maxsize=1000)
    def saturation_temperature(self, P: float) -> float:
        """
        Get saturation temperature at pressure P.

        Args:
            P: Pressure [Pa]

        Returns:
            T_sat: Saturation temperature [K]
        """
        return PropsSI('T', 'P', P, 'Q', 0.0, self.fluid)

    @lru_cache(maxsize=1000)
    def saturation_pressure(self, T: float) -> float:
        """
        Get saturation pressure at temperature T.

        Args:
            T: Temperature [K]

        Returns:
            P_sat: Saturation pressure [Pa]
        """
        return PropsSI('P', 'T', T, 'Q', 0.0, self.fluid)

    @lru_cache(maxsize=1000)
    def saturated_liquid_density(self, P: float) -> float:
        """Get density of the saturated liquid at pressure P [kg/m³]"""
        return PropsSI('D', 'P', P, 'Q', 0.0, self.fluid)

    @lru_cache(maxsize=1000)
    def saturated_vapor_density(self, P: float) -> float:
        """Get density of the saturated vapor at pressure P [kg/m³]"""
        return PropsSI('D', 'P', P, 'Q', 1.0, self.fluid)

    def vapor_volume_fraction(self, P: float, quality: float) -> float:
        """
        Convert vapor quality (mass fraction) to vapor volume fraction.

        Args:
            P: Pressure [Pa]
            quality: Vapor quality (0 = saturated liquid, 1 = saturated vapor)

        Returns:
            alpha: Volume fraction of the vapor in [0, 1]

        Raises:
            ValueError: If quality is not in [0, 1]
        """
        if not 0 <= quality <= 1:
            raise ValueError(f"Quality must be in [0, 1], got {quality}")

        v_l = (1.0 - quality) / self.saturated_liquid_density(P)
        v_g = quality / self.saturated_vapor_density(P)
        return v_g / (v_l + v_g)

    def clear_cache(self):
        """Clear LRU caches (useful for memory management in long runs)"""
        self.molar_mass.cache_clear()
        self.saturation_temperature.cache_clear()
        self.saturation_pressure.cache_clear()
        self.saturated_liquid_density.cache_clear()
        self.saturated_vapor_density.cache_clear()


@lru_cache(maxsize=None)
def fluid_properties(fluid_name: str) -> FluidProperties:
    """
    Return the shared FluidProperties instance for a fluid.

    The property caches are keyed on the instance, so states rebuilt for the
    same fluid must reuse one wrapper to hit them.
    """
    return FluidProperties(fluid_name)
