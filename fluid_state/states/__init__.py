"""Reference fluid state implementations."""

from fluid_state.states.ideal_gas import IdealGasMixtureState
from fluid_state.states.saturated import SaturatedFluidState

__all__ = [
    'IdealGasMixtureState',
    'SaturatedFluidState',
]
