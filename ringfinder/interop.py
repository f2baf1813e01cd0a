"""
Conversion from RDKit molecules.

RDKit is an optional dependency, imported only when these functions are
called. Atom indices become vertex ids and bond indices become edge indices,
so ring edge sets can be mapped straight back onto RDKit bonds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ringfinder.types import Graph

if TYPE_CHECKING:
    from rdkit.Chem import Mol


def graph_from_rdkit(mol: "Mol") -> Graph:
    """Build a graph from an RDKit molecule.

    Args:
        mol: RDKit molecule.

    Returns:
        Graph whose edge ``i`` is RDKit bond ``i``.
    """
    graph = Graph(atom.GetIdx() for atom in mol.GetAtoms())
    for bond in mol.GetBonds():
        graph.add_edge(bond.GetBeginAtomIdx(), bond.GetEndAtomIdx())
    return graph


def graph_from_smiles(smiles: str) -> Graph:
    """Parse a SMILES string with RDKit and build its graph.

    Raises:
        ValueError: If RDKit cannot parse the string.

    Example:
        >>> graph_from_smiles("c1ccccc1CC").circuit_rank
        1
    """
    from rdkit import Chem

    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"RDKit could not parse: {smiles}")
    return graph_from_rdkit(mol)
