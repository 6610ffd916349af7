#!/usr/bin/env python3
"""
Print the reference energy table and evaluate MERA energies against it.

Usage:
    python scripts/run_reference_table.py
    python scripts/run_reference_table.py --energies -1.2797 -1.2748 -1.2736 --plot
"""

import argparse
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tfim_mera.reference import (
    exact_energy_per_site,
    mera_system_size,
    MAX_LAYERS,
    N_EXACT_LAYERS,
)
from tfim_mera.accuracy import fractional_energy_errors
from tfim_mera.exact import exact_energy
from tfim_mera.utils import (
    save_results_json,
    print_header,
    format_fractional_error,
    create_reference_plot,
)


def build_reference_table(max_layers: int) -> list[dict]:
    """Reference energy per site for 0..max_layers layers."""
    rows = []
    for n_lyr in range(max_layers + 1):
        rows.append({
            'n_layers': n_lyr,
            'n_sites': mera_system_size(n_lyr),
            'energy_per_site': exact_energy_per_site(n_lyr),
            'exact': n_lyr < N_EXACT_LAYERS,
        })
    return rows


def main():
    parser = argparse.ArgumentParser(description='MERA Ising reference energies')
    parser.add_argument('--layers', type=int, default=MAX_LAYERS,
                        help='Largest layer count to tabulate')
    parser.add_argument('--energies', type=float, nargs='*', default=None,
                        help='Measured energies per site for layers 0, 1, ...')
    parser.add_argument('--output', type=str, default='reference_table.json',
                        help='Output JSON file')
    parser.add_argument('--plot', action='store_true', help='Generate plots')
    args = parser.parse_args()

    rows = build_reference_table(args.layers)
    errors = fractional_energy_errors(args.energies) if args.energies else []

    print_header("Reference energy per site (critical TFIM, periodic)")
    print(f"  Thermodynamic limit: {exact_energy(1.0):.16f}")
    for row in rows:
        n_lyr = row['n_layers']
        err = errors[n_lyr] if n_lyr < len(errors) else None
        row['fractional_error'] = err
        kind = "exact" if row['exact'] else "approx"
        print(f"  layers={n_lyr:>2} N={row['n_sites']:>6}: "
              f"E/N = {row['energy_per_site']:.16f} ({kind}), "
              f"error = {format_fractional_error(err)}")

    save_results_json(rows, args.output, description="MERA Ising reference energies")
    print(f"\nResults saved to {args.output}")

    if args.plot:
        create_reference_plot([r['energy_per_site'] for r in rows],
                              measured=args.energies or None,
                              save_path='reference_plot.png')


if __name__ == "__main__":
    main()
