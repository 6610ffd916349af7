"""
Utility functions for MERA Ising calculations.

Provides JSON I/O, plotting, and formatting utilities.
"""

import json
from pathlib import Path
from typing import Any, Optional, Sequence

import numpy as np


def save_results_json(results: dict | list, filename: str | Path,
                      description: str = "MERA Ising results") -> None:
    """
    Save results to JSON file, handling numpy types.

    Args:
        results: Results dictionary or list
        filename: Output file path
        description: Description to include in file
    """
    def convert_numpy(obj: Any) -> Any:
        if isinstance(obj, (np.floating, np.integer)):
            val = float(obj)
            if np.isfinite(val):
                return val
            return None
        elif isinstance(obj, float):
            if np.isfinite(obj):
                return obj
            return None
        elif isinstance(obj, np.ndarray):
            return [convert_numpy(x) for x in obj.tolist()]
        elif isinstance(obj, dict):
            return {k: convert_numpy(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [convert_numpy(v) for v in obj]
        return obj

    output = {
        'description': description,
        'hamiltonian': 'H = -Σ_b w_b [X_b X_b+1 + (h/2)(Z_b + Z_b+1)]',
    }

    if isinstance(results, list):
        output['results'] = convert_numpy(results)
    else:
        output.update(convert_numpy(results))

    with open(filename, 'w') as f:
        json.dump(output, f, indent=2)


def load_results_json(filename: str | Path) -> dict:
    """Load results from JSON file."""
    with open(filename, 'r') as f:
        return json.load(f)


def format_energy_error(E: float, E_exact: float) -> str:
    """Format absolute energy error for display."""
    err = abs(E - E_exact)
    if err < 1e-14:
        return "< 1e-14"
    return f"{err:.2e}"


def format_fractional_error(err: Optional[float]) -> str:
    """Format fractional error for display (handles None)."""
    if err is None:
        return "N/A"
    return f"{err:+.3e}"


def print_header(title: str, width: int = 80) -> None:
    """Print formatted report header."""
    print("=" * width)
    print(title)
    print("=" * width)


def create_reference_plot(energies: Sequence[float],
                          measured: Optional[Sequence[float]] = None,
                          save_path: Optional[str] = None,
                          show: bool = True) -> None:
    """
    Plot reference energies per site against the number of MERA layers.

    Args:
        energies: Reference energies, indexed by layer count
        measured: Measured energies for the first layers (optional); their
                  fractional errors are drawn in a second panel
        save_path: Path to save figure (optional)
        show: Whether to display the figure
    """
    import matplotlib.pyplot as plt

    from .accuracy import fractional_energy_errors

    layers = np.arange(len(energies))
    n_panels = 2 if measured is not None else 1
    fig, axes = plt.subplots(1, n_panels, figsize=(6 * n_panels, 5), squeeze=False)

    ax1 = axes[0, 0]
    ax1.plot(layers, energies, 'bo-', linewidth=2, label='Reference')
    ax1.axhline(y=-4 / np.pi, color='gray', linestyle='--', alpha=0.5, label='-4/π')
    ax1.set_xlabel('MERA layers', fontsize=12)
    ax1.set_ylabel('Energy per site', fontsize=12)
    ax1.set_title('Reference Ground State Energy', fontsize=14)
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    if measured is not None:
        errors = np.abs(fractional_energy_errors(measured))
        ax2 = axes[0, 1]
        ax2.semilogy(np.arange(len(measured)), errors, 'ro-', markersize=8)
        ax2.set_xlabel('MERA layers', fontsize=12)
        ax2.set_ylabel('|Fractional error|', fontsize=12)
        ax2.set_title('Energy Error', fontsize=14)
        ax2.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Figure saved to {save_path}")

    if show:
        plt.show()
