"""
Consistency checks for fluid state declarations and values.

The FluidState contract does not enforce the count invariants or the
physical range of the values it returns. Producers of fluid states and
test suites use these helpers to check them explicitly.
"""

from typing import List

from fluid_state.core.fluid_state import FluidState, StateOrType, _state_type, is_implemented


def validate_counts(state_or_type: StateOrType) -> List[str]:
    """
    Check the declared phase/component/solvent counts of a fluid state.

    Returns:
        List of problem messages (empty if no issues)

    Checks:
        - num_phases >= 1
        - num_components >= 1
        - 0 <= num_solvents <= num_components

    Raises:
        TypeError: If given an abstract fluid state, whose counts are incomplete
    """
    cls = _state_type(state_or_type)
    if cls.__dict__.get('_is_abstract_state', False):
        raise TypeError(
            f"Abstract fluid state '{cls.__name__}' has no complete counts to validate"
        )
    problems = []

    if cls.num_phases < 1:
        problems.append(f"{cls.__name__}: num_phases must be >= 1, got {cls.num_phases}")
    if cls.num_components < 1:
        problems.append(
            f"{cls.__name__}: num_components must be >= 1, got {cls.num_components}"
        )
    if cls.num_solvents < 0:
        problems.append(
            f"{cls.__name__}: num_solvents must be >= 0, got {cls.num_solvents}"
        )
    if cls.num_solvents > cls.num_components:
        problems.append(
            f"{cls.__name__}: num_solvents ({cls.num_solvents}) exceeds "
            f"num_components ({cls.num_components})"
        )

    return problems


def check_counts(state_or_type: StateOrType) -> None:
    """
    Raise if the declared counts of a fluid state are inconsistent.

    Raises:
        ValueError: Listing every problem found by validate_counts()
    """
    problems = validate_counts(state_or_type)
    if problems:
        raise ValueError("; ".join(problems))


def validate_physical_bounds(state: FluidState, tol: float = 1e-9) -> List[str]:
    """
    Check the values of a fluid state for physically impossible results.

    Only queries the state implements are evaluated; missing queries are
    skipped, never substituted.

    Args:
        state: Fluid state instance to check
        tol: Tolerance for the [0, 1] range of fractions

    Returns:
        List of problem messages (empty if no issues)
    """
    problems = []
    name = type(state).__name__
    phases = range(state.num_phases)
    components = range(state.num_components)

    if is_implemented(state, 'saturation'):
        for phase_idx in phases:
            S = state.saturation(phase_idx)
            if not -tol <= S <= 1 + tol:
                problems.append(f"{name}: saturation({phase_idx}) = {S} outside [0, 1]")

    if is_implemented(state, 'mole_frac'):
        for phase_idx in phases:
            for comp_idx in components:
                x = state.mole_frac(phase_idx, comp_idx)
                if not -tol <= x <= 1 + tol:
                    problems.append(
                        f"{name}: mole_frac({phase_idx}, {comp_idx}) = {x} outside [0, 1]"
                    )

    if is_implemented(state, 'density'):
        for phase_idx in phases:
            rho = state.density(phase_idx)
            if not rho > 0:
                problems.append(f"{name}: density({phase_idx}) = {rho} is not positive")

    if is_implemented(state, 'temperature'):
        T = state.temperature()
        if not T > 0:
            problems.append(f"{name}: temperature() = {T} K is not positive")

    return problems
