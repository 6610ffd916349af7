"""
Fractional error of a MERA energy against the reference table.
"""

from typing import Sequence

from .reference import exact_energy_per_site


def fractional_energy_error(energy_per_site: float, n_layers: int) -> float:
    """
    Fractional error (E - E_ref) / |E_ref| of a per-site energy.

    Positive when the measured energy lies above the reference, as for a
    variational solver.

    Args:
        energy_per_site: Measured energy per site
        n_layers: Number of MERA layers

    Returns:
        Fractional energy error
    """
    exact_persite = exact_energy_per_site(n_layers)
    return (energy_per_site - exact_persite) / abs(exact_persite)


def fractional_energy_errors(energies: Sequence[float]) -> list[float]:
    """Fractional errors for energies indexed by layer count."""
    return [fractional_energy_error(E, n_lyr) for n_lyr, E in enumerate(energies)]
