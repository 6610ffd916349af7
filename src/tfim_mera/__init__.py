"""
TFIM-MERA: microscopic Ising operator and reference energies for MERA.

Builds the renormalized three-site (bond dimension 8) Hamiltonian of the
critical transverse-field Ising chain consumed by ternary MERA solvers,
and provides the reference energies per site used to validate them.

Hamiltonian: H = -Σ X_i X_{i+1} - h Σ Z_i

References:
    [1] P. Pfeuty, Ann. Phys. 57, 79 (1970) - Exact 1D solution
    [2] G. Vidal, Phys. Rev. Lett. 101, 110501 (2008) - MERA
"""

from .hamiltonian import (
    build_interaction_operator,
    chain_hamiltonian,
    two_site_hamiltonian,
    overlap_factor,
    bond_weights,
    operator_to_matrix,
)
from .reference import (
    exact_energy_per_site,
    approximate_energy_per_site_pbc,
    mera_system_size,
    EXACT_ENERGY_PBC,
    EXACT_ENERGY_APBC,
    MAX_LAYERS,
)
from .accuracy import fractional_energy_error, fractional_energy_errors
from .exact import (
    exact_energy,
    critical_point,
    open_chain_ground_energy,
    chain_max_eigenvalue,
)
from .constants import PAULI_X, PAULI_Z, IDENTITY

__version__ = "0.1.0"

__all__ = [
    # Operator builder
    "build_interaction_operator",
    "chain_hamiltonian",
    "two_site_hamiltonian",
    "overlap_factor",
    "bond_weights",
    "operator_to_matrix",
    # Reference energies
    "exact_energy_per_site",
    "approximate_energy_per_site_pbc",
    "mera_system_size",
    "EXACT_ENERGY_PBC",
    "EXACT_ENERGY_APBC",
    "MAX_LAYERS",
    # Error evaluation
    "fractional_energy_error",
    "fractional_energy_errors",
    # Free-fermion references
    "exact_energy",
    "critical_point",
    "open_chain_ground_energy",
    "chain_max_eigenvalue",
    # Constants
    "PAULI_X",
    "PAULI_Z",
    "IDENTITY",
]
