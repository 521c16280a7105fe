"""Fluid state contract for multi-phase, multi-component thermodynamic equilibria."""

from fluid_state.core import (
    FluidState,
    FluidStateNotImplementedError,
    implemented_quantities,
    is_implemented,
)

__all__ = [
    'FluidState',
    'FluidStateNotImplementedError',
    'implemented_quantities',
    'is_implemented',
]
