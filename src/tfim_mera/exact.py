"""
Free-fermion reference values for the transverse-field Ising chain.

Hamiltonian: H = -Σ J_i X_i X_{i+1} - Σ g_i Z_i

The chain maps to free fermions by a Jordan-Wigner transformation
(Pfeuty 1970), so ground energies of inhomogeneous open chains follow
from the singular values of an N x N bidiagonal matrix instead of a
2^N x 2^N diagonalization.
"""

from typing import Sequence

import numpy as np
from scipy import integrate
from scipy.linalg import svdvals

from .constants import CRITICAL_FIELD
from .hamiltonian import bond_weights, validate_field


def critical_point() -> float:
    """Critical transverse field strength g_c = h_c/J of the 1D chain."""
    return CRITICAL_FIELD


def exact_energy(g: float, J: float = 1.0) -> float:
    """
    Exact ground state energy per site for the infinite chain.

    E_0/N = -(1/π) ∫_0^π dk √(J² + g² - 2Jg cos(k))

    At the critical point g = J = 1 this is -4/π.

    Args:
        g: Transverse field strength (h/J)
        J: Coupling strength (default 1.0)

    Returns:
        Ground state energy per site

    Reference:
        P. Pfeuty, Ann. Phys. 57, 79 (1970)
    """
    def integrand(k: float) -> float:
        return np.sqrt(J**2 + g**2 - 2*J*g*np.cos(k))

    result, _ = integrate.quad(integrand, 0, np.pi)
    return -result / np.pi


def open_chain_ground_energy(couplings: Sequence[float],
                             fields: Sequence[float]) -> float:
    """
    Ground state energy of an inhomogeneous open chain.

    The single-particle energies are twice the singular values of the
    bidiagonal matrix with the fields g_i on the diagonal and the couplings
    J_i above it, so E_0 = -Σ_k σ_k.

    Args:
        couplings: Bond couplings J_1..J_{N-1}
        fields: Site fields g_1..g_N

    Returns:
        Ground state energy E_0
    """
    couplings = np.asarray(couplings, dtype=float)
    fields = np.asarray(fields, dtype=float)
    if len(couplings) != len(fields) - 1:
        raise ValueError(f"Need {len(fields) - 1} couplings for {len(fields)} sites, "
                         f"got {len(couplings)}")

    M = np.diag(fields) + np.diag(couplings, k=1)
    return -float(np.sum(svdvals(M)))


def chain_max_eigenvalue(h: float = 1.0) -> float:
    """
    Largest eigenvalue of the weighted nine-site chain.

    Each bond of weight w contributes coupling w and field h*w/2 to both
    of its sites. The spectrum of the open chain is symmetric about zero
    (flip Z on every other site, then X on all sites), so the largest
    eigenvalue is -E_0.

    Args:
        h: Transverse field strength

    Returns:
        Largest eigenvalue, to compare with build_interaction_operator(h)
    """
    h = validate_field(h)
    weights = np.array(bond_weights())
    padded = np.concatenate([[0.0], weights, [0.0]])
    fields = (h / 2.0) * (padded[:-1] + padded[1:])
    return -open_chain_ground_energy(weights, fields)
