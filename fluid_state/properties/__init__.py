"""Thermodynamic property backends."""

from fluid_state.properties.coolprop_wrapper import FluidProperties, fluid_properties

__all__ = [
    'FluidProperties',
    'fluid_properties',
]
