"""Core abstractions for fluid states."""

from fluid_state.core.exceptions import FluidStateNotImplementedError
from fluid_state.core.quantity import Quantity, QUANTITIES, get_quantity
from fluid_state.core.fluid_state import FluidState, is_implemented, implemented_quantities
from fluid_state.core.validation import validate_counts, check_counts, validate_physical_bounds

__all__ = [
    'FluidState',
    'FluidStateNotImplementedError',
    'Quantity',
    'QUANTITIES',
    'get_quantity',
    'is_implemented',
    'implemented_quantities',
    'validate_counts',
    'check_counts',
    'validate_physical_bounds',
]
