"""
FluidState: the query contract for computed thermodynamic equilibria.

A fluid state represents the equilibrium (saturations, compositions,
densities, pressures, fugacities, temperature) of a multi-phase,
multi-component fluid at a single point. This module does not compute that
equilibrium. It only defines how the resulting quantities are accessed:
  - Concrete fluid states declare num_phases, num_components, num_solvents
  - Concrete fluid states override the subset of queries they can answer
  - Every query that is not overridden raises FluidStateNotImplementedError
"""

from typing import ClassVar, Generic, List, Tuple, Type, TypeVar, Union
import warnings

from fluid_state.core.exceptions import FluidStateNotImplementedError
from fluid_state.core.quantity import QUANTITY_NAMES


Scalar = TypeVar('Scalar')
ImpT = TypeVar('ImpT', bound='FluidState')

REQUIRED_COUNTS: Tuple[str, ...] = ('num_phases', 'num_components', 'num_solvents')


class FluidState(Generic[Scalar]):
    """
    Base class for fluid states of a specific fluid system.

    Subclasses must declare as class attributes:
        - num_phases: number of phases the fluid system can resolve
        - num_components: number of chemical (pseudo-) species
        - num_solvents: number of highly miscible components in which only
          traces of the remaining components are resolved

    The declarations are checked when the subclass is defined, so a fluid
    state with a missing count never exists as a class. Intermediate base
    classes that leave counts open are declared with abstract=True and
    cannot be instantiated:

        class TwoPhaseStates(FluidState[float], abstract=True):
            num_phases = 2

    Indices are zero-based: phase_idx in [0, num_phases) and comp_idx in
    [0, num_components). They are not bounds-checked here; what happens for
    an out-of-range index is up to the concrete implementation.

    Example:
        class BrineState(FluidState[float]):
            num_phases = 1
            num_components = 2
            num_solvents = 1

            def temperature(self):
                return 293.15

        BrineState().temperature()   # 293.15
        BrineState().density(0)      # raises FluidStateNotImplementedError
    """

    num_phases: ClassVar[int]
    num_components: ClassVar[int]
    num_solvents: ClassVar[int]

    _is_abstract_state: ClassVar[bool] = True

    def __init_subclass__(cls, abstract: bool = False, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._is_abstract_state = abstract
        if abstract:
            return

        missing = [name for name in REQUIRED_COUNTS if not hasattr(cls, name)]
        if missing:
            raise TypeError(
                f"Fluid state '{cls.__name__}' must declare "
                f"{', '.join(missing)}"
            )

        for name in REQUIRED_COUNTS:
            value = getattr(cls, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"{cls.__name__}.{name} must be an int, got {value!r}"
                )

        # Legal but almost certainly a typo in the fluid system definition
        if cls.num_solvents > cls.num_components:
            warnings.warn(
                f"{cls.__name__} declares num_solvents={cls.num_solvents} "
                f"> num_components={cls.num_components}",
                stacklevel=2,
            )

    def __new__(cls, *args, **kwargs):
        if cls.__dict__.get('_is_abstract_state', False):
            raise TypeError(
                f"Cannot instantiate abstract fluid state '{cls.__name__}'"
            )
        return super().__new__(cls)

    def _as_imp(self: ImpT) -> ImpT:
        """Return this object as its concrete implementation type."""
        return self

    def _not_implemented(self, operation: str) -> FluidStateNotImplementedError:
        return FluidStateNotImplementedError(operation, type(self).__name__)

    def saturation(self, phase_idx: int) -> Scalar:
        """
        Return the saturation of a phase.

        Unit: [-] (volume fraction of the pore space, nominally in [0, 1])
        """
        raise self._not_implemented('saturation')

    def mole_frac(self, phase_idx: int, comp_idx: int) -> Scalar:
        """
        Return the mole fraction of a component within a phase.

        Unit: [-]
        """
        raise self._not_implemented('mole_frac')

    def phase_concentration(self, phase_idx: int) -> Scalar:
        """
        Return the sum of the concentrations of all components in a phase.

        Unit: [mol/m^3]
        """
        raise self._not_implemented('phase_concentration')

    def concentration(self, phase_idx: int, comp_idx: int) -> Scalar:
        """
        Return the concentration of an individual component in a phase.

        Unit: [mol/m^3]
        """
        raise self._not_implemented('concentration')

    def density(self, phase_idx: int) -> Scalar:
        """
        Return the mass density of a phase.

        Unit: [kg/m^3]
        """
        raise self._not_implemented('density')

    def average_molar_mass(self, phase_idx: int) -> Scalar:
        """
        Return the average molar mass of a phase.

        This is the sum of all component molar masses times their
        respective mole fractions in the phase.

        Unit: [kg/mol]
        """
        raise self._not_implemented('average_molar_mass')

    def fugacity(self, comp_idx: int) -> Scalar:
        """
        Return the fugacity of a component.

        For an ideal gas this is the partial pressure R*T*c.

        Unit: [Pa]
        """
        raise self._not_implemented('fugacity')

    def phase_pressure(self, phase_idx: int) -> Scalar:
        """
        Return the total pressure of a phase.

        Unit: [Pa]
        """
        raise self._not_implemented('phase_pressure')

    def temperature(self) -> Scalar:
        """
        Return the temperature at which the equilibrium was calculated.

        The temperature is the same for all phases.

        Unit: [K]
        """
        raise self._not_implemented('temperature')

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(phases={self.num_phases}, "
                f"components={self.num_components}, solvents={self.num_solvents})")


StateOrType = Union[FluidState, Type[FluidState]]


def _state_type(state_or_type: StateOrType) -> Type[FluidState]:
    if isinstance(state_or_type, type):
        if not issubclass(state_or_type, FluidState):
            raise TypeError(f"{state_or_type.__name__} is not a FluidState")
        return state_or_type
    if not isinstance(state_or_type, FluidState):
        raise TypeError(f"{state_or_type!r} is not a FluidState")
    return type(state_or_type)


def is_implemented(state_or_type: StateOrType, name: str) -> bool:
    """
    Check whether a fluid state overrides the given query.

    Args:
        state_or_type: FluidState instance or subclass
        name: Query name (e.g., 'density')

    Raises:
        KeyError: If name is not a FluidState query
    """
    if name not in QUANTITY_NAMES:
        raise KeyError(f"Unknown fluid state quantity '{name}'")
    cls = _state_type(state_or_type)
    return getattr(cls, name) is not getattr(FluidState, name)


def implemented_quantities(state_or_type: StateOrType) -> List[str]:
    """Return the names of all queries a fluid state overrides, in contract order."""
    return [name for name in QUANTITY_NAMES if is_implemented(state_or_type, name)]
