#!/usr/bin/env python3
"""
Benchmark script comparing ring perception speed between RDKit and ringfinder.

Usage:
    python benchmarks/bench_rings.py [--extended]

Options:
    --extended    Run extended benchmark with multiple molecules and detailed metrics
"""

import sys
import os
import time
from dataclasses import dataclass
from typing import Optional

# Ensure local ringfinder is used (not installed version)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Test molecules with varying ring complexity
TEST_MOLECULES = {
    "naphthalene": "c1ccc2ccccc2c1",
    "steroid": "CC12CCC3C(CCC4=CC(=O)CCC34C)C1CCC2O",  # testosterone
    "cubane": "C12C3C4C1C5C2C3C45",
    "large_complex": "CCn1c2ccc3cc2c2cc(ccc21)C(=O)c1ccc(cc1)Cn1c[n+](c2ccccc21)Cc1ccc(cc1)C(=O)c1ccc2c(c1)c1cc(ccc1n2CC)C(=O)c1ccc(cc1)C[n+]1cn(c2ccccc21)Cc1ccc(cc1)C3=O",
}

# Default molecule for quick benchmark
DEFAULT_MOLECULE = TEST_MOLECULES["steroid"]

ITERATIONS = 200
EXTENDED_ITERATIONS = 50


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    smiles: str
    time_seconds: float
    iterations: int
    num_rings: int
    num_atoms: int
    num_bonds: int

    @property
    def time_per_call_ms(self) -> float:
        return (self.time_seconds / self.iterations) * 1000

    @property
    def time_per_bond_us(self) -> float:
        """Microseconds per bond per call."""
        return (self.time_seconds / self.iterations / self.num_bonds) * 1_000_000


def benchmark_rdkit(smiles: str, iterations: int) -> BenchmarkResult:
    """Benchmark RDKit SSSR perception."""
    from rdkit import Chem

    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"RDKit failed to parse SMILES: {smiles}")

    # Warmup
    rings = Chem.GetSymmSSSR(mol)

    start = time.perf_counter()
    for _ in range(iterations):
        rings = Chem.GetSymmSSSR(mol)
    end = time.perf_counter()

    return BenchmarkResult(
        smiles=smiles,
        time_seconds=end - start,
        iterations=iterations,
        num_rings=len(rings),
        num_atoms=mol.GetNumAtoms(),
        num_bonds=mol.GetNumBonds(),
    )


def benchmark_ringfinder(smiles: str, iterations: int, exhaustive: bool) -> BenchmarkResult:
    """Benchmark ringfinder exhaustive search or cycle basis extraction."""
    from ringfinder import find_all_rings, find_cycle_basis
    from ringfinder.interop import graph_from_smiles

    graph = graph_from_smiles(smiles)
    search = find_all_rings if exhaustive else find_cycle_basis

    # Warmup
    rings = search(graph)

    start = time.perf_counter()
    for _ in range(iterations):
        rings = search(graph)
    end = time.perf_counter()

    return BenchmarkResult(
        smiles=smiles,
        time_seconds=end - start,
        iterations=iterations,
        num_rings=len(rings),
        num_atoms=graph.num_vertices,
        num_bonds=graph.num_edges,
    )


def _report(label: str, result: BenchmarkResult) -> None:
    print(f"  {label:<12} {result.time_per_call_ms:>10.4f} ms/call | {result.num_rings} rings")


def run_single_benchmark():
    """Run basic single-molecule benchmark."""
    print("=" * 70)
    print("Ring Perception Benchmark: RDKit vs ringfinder")
    print("=" * 70)
    print(f"\nTest molecule: {DEFAULT_MOLECULE}")
    print(f"Iterations: {ITERATIONS}")
    print("-" * 70)

    rdkit_result: Optional[BenchmarkResult] = None
    basis_result: Optional[BenchmarkResult] = None

    try:
        rdkit_result = benchmark_rdkit(DEFAULT_MOLECULE, ITERATIONS)
        _report("RDKit SSSR", rdkit_result)
    except ImportError:
        print("SKIPPED (rdkit not installed)")
        return

    basis_result = benchmark_ringfinder(DEFAULT_MOLECULE, ITERATIONS, exhaustive=False)
    _report("basis", basis_result)
    _report("all rings", benchmark_ringfinder(DEFAULT_MOLECULE, ITERATIONS, exhaustive=True))

    ratio = basis_result.time_seconds / rdkit_result.time_seconds
    print("\n" + "=" * 70)
    if ratio < 1:
        print(f"ringfinder basis is {1/ratio:.2f}x FASTER than RDKit")
    else:
        print(f"ringfinder basis is {ratio:.2f}x SLOWER than RDKit")


def run_extended_benchmark():
    """Run extended benchmark with multiple molecules."""
    print("=" * 90)
    print("EXTENDED Ring Perception Benchmark: RDKit vs ringfinder")
    print("=" * 90)
    print(f"\nIterations per molecule: {EXTENDED_ITERATIONS}")

    header = f"{'Molecule':<16} {'Bonds':>6} {'RDKit ms':>10} {'basis ms':>10} {'all ms':>10} {'all rings':>10} {'µs/bond':>10}"
    print(header)
    print("-" * 90)

    for name, smiles in TEST_MOLECULES.items():
        try:
            rdkit_res = benchmark_rdkit(smiles, EXTENDED_ITERATIONS)
        except ImportError:
            print("RDKit not installed")
            return
        basis_res = benchmark_ringfinder(smiles, EXTENDED_ITERATIONS, exhaustive=False)
        all_res = benchmark_ringfinder(smiles, EXTENDED_ITERATIONS, exhaustive=True)
        print(f"{name:<16} "
              f"{basis_res.num_bonds:>6} "
              f"{rdkit_res.time_per_call_ms:>10.4f} "
              f"{basis_res.time_per_call_ms:>10.4f} "
              f"{all_res.time_per_call_ms:>10.4f} "
              f"{all_res.num_rings:>10} "
              f"{all_res.time_per_bond_us:>10.2f}")


def main():
    if "--extended" in sys.argv or "-e" in sys.argv:
        run_extended_benchmark()
    else:
        run_single_benchmark()
        print("\n" + "-" * 70)
        print("TIP: Run with --extended for detailed multi-molecule analysis")


if __name__ == "__main__":
    main()
