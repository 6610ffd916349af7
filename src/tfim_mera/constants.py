"""
Standard matrices and chain geometry for the MERA Ising operator.
"""

import numpy as np

# Pauli matrices (real, read-only)
PAULI_X = np.array([[0., 1.], [1., 0.]])
PAULI_Z = np.array([[1., 0.], [0., -1.]])
IDENTITY = np.eye(2)

for _op in (PAULI_X, PAULI_Z, IDENTITY):
    _op.setflags(write=False)

# Critical transverse field of the 1D chain
CRITICAL_FIELD = 1.0

# Geometry: three blocks of three spins
SITES_PER_BLOCK = 3
N_BLOCKS = 3
N_SITES = SITES_PER_BLOCK * N_BLOCKS
BOND_DIMENSION = 2**SITES_PER_BLOCK
