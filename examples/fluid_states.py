"""
Fluid state example - querying two different fluid systems through one contract.

- Dry air as a single-phase, three-component ideal gas mixture
- Boiling water as a two-phase, single-component saturated state

The report function below only uses FluidState queries; queries a fluid
system does not provide are reported as such instead of guessed.
"""

from fluid_state.core.exceptions import FluidStateNotImplementedError
from fluid_state.core.quantity import QUANTITIES
from fluid_state.core.validation import validate_counts, validate_physical_bounds
from fluid_state.states.ideal_gas import IdealGasMixtureState
from fluid_state.states.saturated import SaturatedFluidState


def report(title, state):
    print(f"\n{title}")
    print("-" * 60)
    print(f"  {state!r}")

    for problem in validate_counts(state) + validate_physical_bounds(state):
        print(f"  ⚠ {problem}")

    for quantity in QUANTITIES:
        query = getattr(state, quantity.name)
        if quantity.indices == ():
            calls = [()]
        elif quantity.indices == ('phase_idx',):
            calls = [(p,) for p in range(state.num_phases)]
        elif quantity.indices == ('comp_idx',):
            calls = [(c,) for c in range(state.num_components)]
        else:
            calls = [(p, c) for p in range(state.num_phases) for c in range(state.num_components)]

        for args in calls:
            label = f"{quantity.name}({', '.join(str(a) for a in args)})"
            try:
                value = query(*args)
            except FluidStateNotImplementedError:
                print(f"  {label:<28} not provided")
                break
            print(f"  {label:<28} {value:12.6g} {quantity.units}")


def main():
    print("=" * 60)
    print("FLUID STATES")
    print("=" * 60)

    Air = IdealGasMixtureState.for_components(3)
    air = Air.from_mole_fractions(
        pressure=1e5,
        temperature=300.0,
        mole_fractions=[0.7808, 0.2095, 0.0097],  # N2, O2, Ar
        molar_masses=[28.0134e-3, 31.9988e-3, 39.948e-3],
    )
    report("Dry air at 1 bar, 300 K", air)

    water = SaturatedFluidState('Water', P=1e5, quality=0.1)
    report("Boiling water at 1 bar, 10% quality", water)

    return 0


if __name__ == '__main__':
    exit(main())
