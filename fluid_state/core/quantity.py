"""
Metadata for the quantities a fluid state can be queried for.
"""

from dataclasses import dataclass
from typing import Tuple, Literal


IndexArg = Literal['phase_idx', 'comp_idx']


@dataclass(frozen=True)
class Quantity:
    """
    Describes one query operation of the FluidState contract.

    Attributes:
        name: Method name on FluidState (e.g., 'density', 'mole_frac')
        indices: Index arguments the query takes, in call order
        units: SI units of the returned value ('1' for dimensionless)
        description: One-line physical meaning
    """
    name: str
    indices: Tuple[IndexArg, ...]
    units: str
    description: str = ""

    def __repr__(self) -> str:
        args = ', '.join(self.indices)
        return f"Quantity({self.name}({args}) [{self.units}])"


QUANTITIES: Tuple[Quantity, ...] = (
    Quantity('saturation', ('phase_idx',), '1',
             'Fraction of the pore volume occupied by the phase'),
    Quantity('mole_frac', ('phase_idx', 'comp_idx'), '1',
             'Mole fraction of a component within a phase'),
    Quantity('phase_concentration', ('phase_idx',), 'mol/m^3',
             'Sum of the molar concentrations of all components in a phase'),
    Quantity('concentration', ('phase_idx', 'comp_idx'), 'mol/m^3',
             'Molar concentration of a component in a phase'),
    Quantity('density', ('phase_idx',), 'kg/m^3',
             'Mass density of a phase'),
    Quantity('average_molar_mass', ('phase_idx',), 'kg/mol',
             'Mole-fraction weighted molar mass of a phase'),
    Quantity('fugacity', ('comp_idx',), 'Pa',
             'Effective partial pressure of a component'),
    Quantity('phase_pressure', ('phase_idx',), 'Pa',
             'Pressure of a phase'),
    Quantity('temperature', (), 'K',
             'Temperature at which the equilibrium was calculated'),
)

QUANTITY_NAMES: Tuple[str, ...] = tuple(q.name for q in QUANTITIES)


def get_quantity(name: str) -> Quantity:
    """Look up quantity metadata by operation name."""
    for quantity in QUANTITIES:
        if quantity.name == name:
            return quantity
    raise KeyError(f"Unknown fluid state quantity '{name}'")
