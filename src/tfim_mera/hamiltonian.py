"""
Renormalized three-site operator for the transverse-field Ising chain.

Builds the microscopic Hamiltonian of nine spins, grouped into three
blocks of bond dimension 8, as consumed by a ternary MERA:

    H = -Σ_b w_b [X_b X_{b+1} + (h/2)(Z_b + Z_{b+1})]

The weights w_b are 1/3 for bonds inside a block and 1/2 for bonds
between blocks. Adding the operator at three consecutive block positions
therefore counts every bond (and every field term) exactly once, which is
how the solver assembles the periodic Hamiltonian. No boundary condition
is imposed here.
"""

import numbers

import numpy as np
from scipy.linalg import eigh

from .constants import PAULI_X, PAULI_Z, IDENTITY, N_SITES, BOND_DIMENSION


def validate_field(h) -> float:
    """Validate the transverse field strength."""
    if isinstance(h, bool) or not isinstance(h, numbers.Real):
        raise ValueError(f"Field strength must be a real number, got {h!r}")
    if not np.isfinite(h):
        raise ValueError(f"Field strength must be finite, got {h}")
    return float(h)


def two_site_hamiltonian(h: float = 1.0) -> np.ndarray:
    """
    Two-site interaction H2 = -(X⊗X + (h/2)(Z⊗I + I⊗Z)).

    The field on each site is split evenly between its two bonds.

    Args:
        h: Transverse field strength

    Returns:
        Real 4x4 matrix
    """
    h = validate_field(h)
    XX = np.kron(PAULI_X, PAULI_X)
    ZI = np.kron(PAULI_Z, IDENTITY)
    IZ = np.kron(IDENTITY, PAULI_Z)
    return -(XX + (h / 2.0) * (ZI + IZ))


def overlap_factor(n: int) -> float:
    """
    Weight of the bond added when the chain is extended to n sites.

    Bonds closing a block of three (n = 4, 7) are shared by two block
    windows and get 1/2; all others are shared by three and get 1/3.
    """
    if not 3 <= n <= N_SITES:
        raise ValueError(f"Chain extension must be to 3..{N_SITES} sites, got {n}")
    return 1 / 2 if n in (4, 7) else 1 / 3


def bond_weights() -> tuple[float, ...]:
    """Weights of the N_SITES - 1 bonds of the chain, left to right."""
    return (1 / 3,) + tuple(overlap_factor(n) for n in range(3, N_SITES + 1))


def chain_hamiltonian(h: float = 1.0) -> np.ndarray:
    """
    Unshifted 9-site chain Hamiltonian (512x512).

    Starts from H2/3 on two sites and extends one site at a time:
    H <- H⊗I + (1^{n-2} ⊗ H2) * overlap_factor(n).

    Args:
        h: Transverse field strength

    Returns:
        Real symmetric 2^9 x 2^9 matrix
    """
    H2 = two_site_hamiltonian(h)
    H = H2 / 3
    for n in range(3, N_SITES + 1):
        eye_n2 = np.eye(2**(n - 2))
        H = np.kron(H, IDENTITY) + np.kron(eye_n2, H2) * overlap_factor(n)
    return H


def build_interaction_operator(h: float = 1.0) -> tuple[np.ndarray, float]:
    """
    Three-site operator of bond dimension 8 and its energy shift.

    The chain Hamiltonian is fully diagonalized and its largest eigenvalue
    subtracted, so every eigenvalue of the returned operator is <= 0.

    Args:
        h: Transverse field strength (default: critical point)

    Returns:
        (operator, max_eigenvalue): complex tensor of shape (8,)*6 with
        axes (out1, out2, out3, in1, in2, in3), and the largest eigenvalue
        of the unshifted chain.

    Raises:
        ValueError: if h is not a finite real number
        numpy.linalg.LinAlgError: if the eigendecomposition does not converge
    """
    H = chain_hamiltonian(h)
    dim = H.shape[0]

    eigenvalues, _ = eigh(H)
    max_eigenvalue = float(eigenvalues[-1])

    H = H - np.eye(dim) * max_eigenvalue
    operator = H.reshape((BOND_DIMENSION,) * 6).astype(complex)
    return operator, max_eigenvalue


def operator_to_matrix(operator: np.ndarray) -> np.ndarray:
    """Flatten a (8,)*6 three-block operator back into a 512x512 matrix."""
    operator = np.asarray(operator)
    if operator.shape != (BOND_DIMENSION,) * 6:
        raise ValueError(f"Expected operator of shape {(BOND_DIMENSION,) * 6}, "
                         f"got {operator.shape}")
    dim = BOND_DIMENSION**3
    return operator.reshape(dim, dim)
