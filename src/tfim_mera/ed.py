"""
Exact diagonalization of small dense Ising chains.

Builds chain Hamiltonians term by term, as an independent check of the
recursive construction in hamiltonian.py.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy.linalg import eigh

from .constants import PAULI_X, PAULI_Z, IDENTITY
from .hamiltonian import two_site_hamiltonian


@dataclass
class EDResult:
    """Result from exact diagonalization."""
    n_sites: int
    energy: float
    energy_per_site: float
    gap: float
    eigenvalues: np.ndarray
    ground_state: np.ndarray


def embed_operator(op: np.ndarray, site: int, n_sites: int) -> np.ndarray:
    """
    Embed an operator acting on consecutive sites into an n_sites chain.

    Args:
        op: 2^k x 2^k operator on sites site..site+k-1
        site: First site (0-based)
        n_sites: Chain length

    Returns:
        Dense 2^n_sites x 2^n_sites matrix
    """
    k = int(np.log2(op.shape[0]))
    if site < 0 or site + k > n_sites:
        raise ValueError(f"{k}-site operator at site {site} does not fit "
                         f"in {n_sites} sites")
    left = np.eye(2**site)
    right = np.eye(2**(n_sites - site - k))
    return np.kron(np.kron(left, op), right)


def build_weighted_chain(h: float, weights: Sequence[float]) -> np.ndarray:
    """
    Open chain Σ_b w_b H2_{b,b+1} with one weight per bond.

    Args:
        h: Transverse field strength
        weights: Bond weights, left to right

    Returns:
        Dense Hamiltonian on len(weights) + 1 sites
    """
    H2 = two_site_hamiltonian(h)
    n_sites = len(weights) + 1
    H = np.zeros((2**n_sites, 2**n_sites))
    for b, w in enumerate(weights):
        H += w * embed_operator(H2, b, n_sites)
    return H


def build_periodic_chain(n_sites: int, h: float = 1.0) -> np.ndarray:
    """
    Uniform periodic chain H = -Σ_i (X_i X_{i+1} + h Z_i).

    Args:
        n_sites: Number of sites
        h: Transverse field strength

    Returns:
        Dense 2^n_sites x 2^n_sites Hamiltonian
    """
    dim = 2**n_sites
    H = np.zeros((dim, dim))

    # Transverse field terms: -h Σ Z_i
    for i in range(n_sites):
        H -= h * embed_operator(PAULI_Z, i, n_sites)

    # XX coupling terms, including the bond closing the ring
    for i in range(n_sites):
        j = (i + 1) % n_sites
        ops = [IDENTITY] * n_sites
        ops[i] = PAULI_X
        ops[j] = PAULI_X
        term = ops[0]
        for op in ops[1:]:
            term = np.kron(term, op)
        H -= term

    return H


def shift_sites(matrix: np.ndarray, shift: int) -> np.ndarray:
    """
    Translate a chain operator cyclically by `shift` sites.

    The operator acting on site i is moved to site (i + shift) mod N.
    """
    dim = matrix.shape[0]
    n_sites = int(np.log2(dim))
    tensor = matrix.reshape((2,) * (2 * n_sites))
    order = [(i - shift) % n_sites for i in range(n_sites)]
    axes = order + [n_sites + i for i in order]
    return tensor.transpose(axes).reshape(dim, dim)


def exact_diagonalization(matrix: np.ndarray, n_sites: int) -> EDResult:
    """
    Full dense diagonalization of a chain Hamiltonian.

    Args:
        matrix: Hermitian Hamiltonian
        n_sites: Number of sites it acts on

    Returns:
        EDResult with energies sorted in ascending order
    """
    eigenvalues, eigenvectors = eigh(matrix)

    E0 = eigenvalues[0]
    E1 = eigenvalues[1] if len(eigenvalues) > 1 else np.nan

    return EDResult(
        n_sites=n_sites,
        energy=E0,
        energy_per_site=E0 / n_sites,
        gap=E1 - E0,
        eigenvalues=eigenvalues,
        ground_state=eigenvectors[:, 0],
    )
