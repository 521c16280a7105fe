"""Integration tests: generic consumer code running against different fluid systems."""

import pytest

from fluid_state.core.exceptions import FluidStateNotImplementedError
from fluid_state.core.fluid_state import FluidState
from fluid_state.core.validation import validate_counts, validate_physical_bounds
from fluid_state.states.ideal_gas import IdealGasMixtureState
from fluid_state.states.saturated import SaturatedFluidState


# ============================================================================
# Storage terms of a finite-volume cell, written only against the FluidState
# queries. Nothing here knows which fluid system it is given.
# ============================================================================

def stored_mass(state: FluidState, porosity: float, volume: float) -> float:
    """Total fluid mass in a cell [kg]: sum over phases of phi*V*S*rho"""
    return sum(
        porosity * volume * state.saturation(p) * state.density(p)
        for p in range(state.num_phases)
    )


def stored_moles(state: FluidState, comp_idx: int, porosity: float, volume: float) -> float:
    """Moles of one component in a cell [mol]: sum over phases of phi*V*S*c"""
    return sum(
        porosity * volume * state.saturation(p) * state.concentration(p, comp_idx)
        for p in range(state.num_phases)
    )


def mean_pressure(state: FluidState) -> float:
    """Saturation-weighted pressure [Pa]"""
    return sum(state.saturation(p) * state.phase_pressure(p) for p in range(state.num_phases))


def total_fugacity(state: FluidState) -> float:
    return sum(state.fugacity(i) for i in range(state.num_components))


def build_states():
    Air = IdealGasMixtureState.for_components(2)
    return [
        Air.from_mole_fractions(1e5, 300.0, [0.79, 0.21], [28.0134e-3, 31.9988e-3]),
        SaturatedFluidState('Water', P=1e5, quality=0.2),
        SaturatedFluidState('CO2', P=5e6, quality=0.5),
    ]


@pytest.mark.parametrize('state', build_states(), ids=repr)
def test_counts_and_values_valid(state):
    """Every fluid system under test satisfies the count invariants"""
    assert validate_counts(state) == []
    assert validate_physical_bounds(state) == []


@pytest.mark.parametrize('state', build_states(), ids=repr)
def test_mass_equals_moles_times_molar_mass(state):
    """Mass and molar storage terms agree through the average molar mass"""
    phi, V = 0.3, 2.0

    mass = stored_mass(state, phi, V)
    mass_from_moles = sum(
        phi * V * state.saturation(p) * state.phase_concentration(p) * state.average_molar_mass(p)
        for p in range(state.num_phases)
    )

    assert mass > 0
    assert mass == pytest.approx(mass_from_moles, rel=1e-9)


def test_saturated_state_vapor_mass_fraction_recovers_quality():
    """S_g*rho_g / sum(S*rho) is the vapor quality the state was built from"""
    state = SaturatedFluidState('Water', P=2e5, quality=0.35)
    gas = SaturatedFluidState.GAS_PHASE_IDX

    vapor_mass = state.saturation(gas) * state.density(gas)
    total_mass = stored_mass(state, porosity=1.0, volume=1.0)

    assert vapor_mass / total_mass == pytest.approx(0.35, rel=1e-9)


def test_ideal_gas_storage():
    """A fully gas-filled pore holds phi*V*c_i moles of each component"""
    Gas3 = IdealGasMixtureState.for_components(3)
    state = Gas3([10.0, 20.0, 30.0], 320.0, [2.016e-3, 16.04e-3, 44.01e-3])

    assert stored_moles(state, 2, porosity=0.25, volume=4.0) == pytest.approx(30.0)
    assert mean_pressure(state) == pytest.approx(total_fugacity(state))


def test_saturated_state_mean_pressure():
    state = SaturatedFluidState('Water', P=3e5, quality=0.5)
    assert mean_pressure(state) == pytest.approx(3e5)


def test_missing_query_propagates_through_consumer():
    """A consumer that needs fugacity fails loudly on a state without it"""
    state = SaturatedFluidState('Water', P=1e5, quality=0.5)

    with pytest.raises(FluidStateNotImplementedError, match="fugacity"):
        total_fugacity(state)
