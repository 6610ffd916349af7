"""Tests for exact diagonalization of dense chains."""

import numpy as np
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tfim_mera.ed import (
    embed_operator,
    build_weighted_chain,
    build_periodic_chain,
    shift_sites,
    exact_diagonalization,
)
from tfim_mera.constants import PAULI_X, PAULI_Z, IDENTITY
from tfim_mera.hamiltonian import chain_hamiltonian, bond_weights, two_site_hamiltonian
from tfim_mera.reference import exact_energy_per_site


@pytest.fixture(scope="module")
def critical_chain():
    return chain_hamiltonian(1.0)


class TestEmbedOperator:
    """Tests for placing local operators in a chain."""

    def test_single_site(self):
        """Z on the middle of three sites is I⊗Z⊗I."""
        expected = np.kron(np.kron(IDENTITY, PAULI_Z), IDENTITY)
        assert np.array_equal(embed_operator(PAULI_Z, 1, 3), expected)

    def test_two_site_at_edge(self):
        """Two-site operator on the last bond."""
        XX = np.kron(PAULI_X, PAULI_X)
        expected = np.kron(np.eye(4), XX)
        assert np.array_equal(embed_operator(XX, 2, 4), expected)

    def test_does_not_fit(self):
        """Operators running past the chain end raise error."""
        with pytest.raises(ValueError):
            embed_operator(np.kron(PAULI_X, PAULI_X), 3, 4)


class TestWeightedChain:
    """Tests for the explicit bond sum."""

    def test_matches_recursive_build(self, critical_chain):
        """Bond-by-bond sum equals the Kronecker recursion."""
        H = build_weighted_chain(1.0, bond_weights())
        assert np.allclose(H, critical_chain, atol=1e-13)

    def test_single_bond(self):
        """One bond of weight w is w * H2."""
        assert np.allclose(build_weighted_chain(0.6, [0.5]), 0.5 * two_site_hamiltonian(0.6))


class TestPeriodicChain:
    """Tests for the uniform periodic chain."""

    def test_hermitian(self):
        """Periodic chain is real symmetric."""
        H = build_periodic_chain(4, 1.0)
        assert np.allclose(H, H.T)

    def test_classical_limit(self):
        """At h=0 the ring has N satisfied bonds."""
        E0 = np.linalg.eigvalsh(build_periodic_chain(5, 0.0))[0]
        assert np.isclose(E0, -5.0)

    def test_translation_invariant(self):
        """Shifting a periodic chain by one site leaves it unchanged."""
        H = build_periodic_chain(5, 0.8)
        assert np.allclose(shift_sites(H, 1), H)


class TestShiftSites:
    """Tests for cyclic translation of chain operators."""

    def test_moves_local_operator(self):
        """Z on site 0 moves to site 2."""
        Z0 = embed_operator(PAULI_Z, 0, 4)
        assert np.array_equal(shift_sites(Z0, 2), embed_operator(PAULI_Z, 2, 4))

    def test_wraps_around(self):
        """Shift past the end wraps to the start."""
        Z3 = embed_operator(PAULI_Z, 3, 4)
        assert np.array_equal(shift_sites(Z3, 1), embed_operator(PAULI_Z, 0, 4))

    def test_full_cycle(self):
        """Shifting by N sites is the identity."""
        H = build_weighted_chain(0.7, [0.2, 0.5])
        assert np.array_equal(shift_sites(H, 3), H)


class TestBlockAssembly:
    """The chain operator at three block offsets builds the periodic ring."""

    def test_three_shifts_give_periodic_chain(self, critical_chain):
        """Σ_{s=0,3,6} shift(H, s) is the uniform periodic 9-site chain."""
        total = sum(shift_sites(critical_chain, s) for s in (0, 3, 6))
        assert np.allclose(total, build_periodic_chain(9, 1.0), atol=1e-12)

    def test_periodic_energy_matches_table(self, critical_chain):
        """Ground energy per site of the ring is the zero-layer reference."""
        total = sum(shift_sites(critical_chain, s) for s in (0, 3, 6))
        result = exact_diagonalization(total, 9)
        assert np.isclose(result.energy_per_site, exact_energy_per_site(0), atol=1e-10)


class TestExactDiagonalization:
    """Tests for the dense solver."""

    def test_result_fields(self):
        """ED returns all expected fields."""
        result = exact_diagonalization(build_periodic_chain(4, 1.0), 4)
        assert result.n_sites == 4
        assert len(result.eigenvalues) == 16
        assert len(result.ground_state) == 16
        assert np.isclose(result.energy_per_site, result.energy / 4)

    def test_eigenvalues_sorted(self):
        """Eigenvalues ascend and the gap is non-negative."""
        result = exact_diagonalization(build_periodic_chain(4, 0.5), 4)
        assert np.all(np.diff(result.eigenvalues) >= 0)
        assert result.gap >= 0

    def test_ground_state_normalized(self):
        """Ground state has unit norm."""
        result = exact_diagonalization(build_periodic_chain(4, 1.0), 4)
        assert np.isclose(np.linalg.norm(result.ground_state), 1.0)
