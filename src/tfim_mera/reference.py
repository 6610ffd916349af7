"""
Reference ground-state energies per site for MERA benchmarks.

A MERA with n layers describes a periodic critical Ising chain of
9 * 2^n spins. Up to 7 layers the reference is exact; beyond that the
universal energy density with its leading finite-size correction is used,

    E/N = -4/π - (π/6) / N²

since the MERA itself is not accurate enough to resolve the difference.
"""

import numbers

import numpy as np


# Exact periodic-chain energies per site for layers 0..7, obtained by
# diagonalizing the equivalent free-fermion system with the opposite
# (anti-periodic) boundary condition.
EXACT_ENERGY_PBC = (
    -1.2797267740319183,
    -1.2748570272966502,
    -1.273643645891852,
    -1.273340553194287,
    -1.2732647957982595,
    -1.273245857435202,
    -1.273241122906045,
    -1.273239939277603,
)

# Anti-periodic spin-chain energies per site. Kept as reference data only:
# no lookup returns them. Entry 0 is a placeholder and entry k corresponds
# to layer k - 1, so this table is offset by one with respect to the one above.
EXACT_ENERGY_APBC = (
    0.0,
    -1.270005811417927,
    -1.2724314193572888,
    -1.2730375326245706,
    -1.273189042909428,
    -1.2732269193538452,
    -1.2732363883945284,
)

N_EXACT_LAYERS = len(EXACT_ENERGY_PBC)
MAX_LAYERS = 14


def _check_integer(value, name: str, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return int(value)


def approximate_energy_per_site_pbc(n_sites: int) -> float:
    """
    Critical energy per site with the leading finite-size correction.

    E/N = -4/π - (π/6)/N² for a periodic chain of N sites.

    Args:
        n_sites: Number of sites N (positive)

    Returns:
        Approximate ground state energy per site
    """
    n_sites = _check_integer(n_sites, "n_sites", 1)
    return float(-4 / np.pi - (np.pi / 6) / (n_sites * n_sites))


# Layers 8..14, generated once from the formula above
APPROXIMATE_ENERGY_PBC = tuple(
    approximate_energy_per_site_pbc(81 * 4**n_lyr)
    for n_lyr in range(N_EXACT_LAYERS, MAX_LAYERS + 1)
)


def mera_system_size(n_layers: int) -> int:
    """Number of spins described by a MERA with n_layers layers."""
    n_layers = _check_integer(n_layers, "n_layers", 0)
    return 9 * 2**n_layers


def exact_energy_per_site(n_layers: int) -> float:
    """
    Reference ground state energy per site for a MERA with n_layers layers.

    Exact for layers 0..7; for 8..14 layers returns
    approximate_energy_per_site_pbc(81 * 4**n_layers).

    Args:
        n_layers: Number of MERA layers

    Returns:
        Energy per site

    Raises:
        ValueError: if n_layers is negative or not an integer
        IndexError: if n_layers > MAX_LAYERS
    """
    n_layers = _check_integer(n_layers, "n_layers", 0)
    if n_layers < N_EXACT_LAYERS:
        return EXACT_ENERGY_PBC[n_layers]
    if n_layers <= MAX_LAYERS:
        return APPROXIMATE_ENERGY_PBC[n_layers - N_EXACT_LAYERS]
    raise IndexError(f"No reference energy for {n_layers} layers "
                     f"(maximum is {MAX_LAYERS})")
