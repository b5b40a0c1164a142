"""
Structure accessor

Minimal in-memory molecule: atom index -> chain label, residue number,
residue name, atom name, center and radius. File readers (see
io_utils.pdb_loader) fill it; the SASA core only reads it.
"""

from dataclasses import dataclass

import numpy as np

from ..utils.diagnostics import fail


def format_atom_name(atom_name: str) -> str:
    """Four character PDB-aligned atom name, 'CA' -> ' CA '"""
    if len(atom_name) >= 4:
        return atom_name[:4]
    return (" " + atom_name).ljust(4)


def residue_descriptor(chain: str, res_number: str | int, res_name: str) -> str:
    """Format: "A    1 ALA" (chain label, residue number, residue type)"""
    return f"{chain[:1]:1}{str(res_number).strip():>4} {res_name.strip()[:3]:<3}"


def atom_descriptor(
    chain: str, res_number: str | int, res_name: str, atom_name: str
) -> str:
    """Format: "A    1 ALA  CA " (chain label, residue number, residue type, atom name)"""
    return (
        residue_descriptor(chain, res_number, res_name)
        + " "
        + format_atom_name(atom_name)
    )


@dataclass(frozen=True)
class AtomRecord:
    """One atom of a structure"""

    atom_name: str
    res_name: str
    res_number: str
    chain: str


class Structure:
    """Atoms grouped into residues and chains, in input order"""

    def __init__(self):
        self._atoms: list[AtomRecord] = []
        self._coords: list[tuple[float, float, float]] = []
        self._radii: list[float] = []
        # (first atom, last atom) per residue
        self._residues: list[tuple[int, int]] = []
        self._chains: list[str] = []
        self._coord_cache: np.ndarray | None = None

    def add_atom(
        self,
        atom_name: str,
        res_name: str,
        res_number: str | int,
        chain: str,
        coord,
        radius: float | None = None,
    ) -> int:
        """
        Append an atom. A new residue starts whenever the chain label or the
        residue number changes.

        Returns:
            int: Index of the new atom
        """
        xyz = tuple(float(v) for v in coord)
        if len(xyz) != 3:
            raise ValueError(f"coord must be a 3D vector, got {len(xyz)} values")
        record = AtomRecord(
            atom_name=atom_name,
            res_name=res_name.strip(),
            res_number=str(res_number).strip(),
            chain=chain,
        )
        index = len(self._atoms)

        if self._atoms and (
            self._atoms[-1].chain == record.chain
            and self._atoms[-1].res_number == record.res_number
        ):
            first, _ = self._residues[-1]
            self._residues[-1] = (first, index)
        else:
            self._residues.append((index, index))
        if record.chain not in self._chains:
            self._chains.append(record.chain)

        self._atoms.append(record)
        self._coords.append(xyz)
        self._radii.append(np.nan if radius is None else float(radius))
        self._coord_cache = None
        return index

    @property
    def n_atoms(self) -> int:
        return len(self._atoms)

    @property
    def n_residues(self) -> int:
        return len(self._residues)

    @property
    def n_chains(self) -> int:
        return len(self._chains)

    @property
    def chain_labels(self) -> str:
        """All chain labels, in order of appearance"""
        return "".join(self._chains)

    @property
    def coords(self) -> np.ndarray:
        """Atom centers, shape (n_atoms, 3)"""
        if self._coord_cache is None:
            self._coord_cache = np.array(self._coords, dtype=float).reshape(-1, 3)
        return self._coord_cache

    @property
    def radii(self) -> np.ndarray:
        """Atom radii, NaN where no radius was given"""
        return np.array(self._radii, dtype=float)

    def atom_name(self, i: int) -> str:
        return self._atoms[i].atom_name

    def atom_res_name(self, i: int) -> str:
        return self._atoms[i].res_name

    def atom_res_number(self, i: int) -> str:
        return self._atoms[i].res_number

    def atom_chain(self, i: int) -> str:
        return self._atoms[i].chain

    def atom_radius(self, i: int) -> float:
        return self._radii[i]

    def atom_descriptor(self, i: int) -> str:
        a = self._atoms[i]
        return atom_descriptor(a.chain, a.res_number, a.res_name, a.atom_name)

    def residue_atoms(self, r: int) -> tuple[int, int]:
        """First and last atom index (inclusive) of residue r"""
        return self._residues[r]

    def residue_name(self, r: int) -> str:
        return self._atoms[self._residues[r][0]].res_name

    def residue_number(self, r: int) -> str:
        return self._atoms[self._residues[r][0]].res_number

    def residue_chain(self, r: int) -> str:
        return self._atoms[self._residues[r][0]].chain

    def residue_descriptor(self, r: int) -> str:
        a = self._atoms[self._residues[r][0]]
        return residue_descriptor(a.chain, a.res_number, a.res_name)

    def chain_index(self, chain: str) -> int:
        """
        Index of a chain.

        Status.FAIL is -1, which is also a valid Python index (the last
        chain). Compare the return value against Status.FAIL, or check
        has_chain() first, before indexing with it.

        Returns:
            int: Position of chain in chain_labels, or Status.FAIL if the
            structure has no such chain.
        """
        try:
            return self._chains.index(chain)
        except ValueError:
            return fail("Chain '%s' not found", chain)

    def has_chain(self, chain: str) -> bool:
        return chain in self._chains

    def chain_atoms(self, chain: str) -> list[int]:
        """Indices of all atoms in a chain"""
        return [i for i, a in enumerate(self._atoms) if a.chain == chain]

    def __len__(self) -> int:
        return self.n_atoms

