import collections
from collections.abc import MutableMapping

from Bio.PDB import PDBParser  # type: ignore

from ..core.structure import Structure
from ..utils.validation import validate_pdb_file

# vdW radii taken from:
# https://en.wikipedia.org/wiki/Atomic_radii_of_the_elements_(data_page)
ATOMIC_RADII: MutableMapping[str, float] = collections.defaultdict(lambda: 2.0)
ATOMIC_RADII.update(
    {
        "H": 1.200,
        "C": 1.700,
        "N": 1.550,
        "O": 1.520,
        "F": 1.470,
        "NA": 2.270,
        "MG": 1.730,
        "P": 1.800,
        "S": 1.800,
        "CL": 1.750,
        "K": 2.750,
        "CA": 2.310,
        "MN": 1.610,
        "FE": 1.560,
        "NI": 1.630,
        "CU": 1.400,
        "ZN": 1.390,
        "SE": 1.900,
        "BR": 1.850,
        "CD": 1.580,
        "I": 1.980,
        "HG": 1.550,
    }
)


class PDBLoader:
    WATER_NAMES = {"HOH", "WAT", "SOL", "H2O", "TIP3", "TIP3P", "T3P", "W"}

    def __init__(
        self,
        quiet: bool = False,
        include_hydrogens: bool = False,
        include_hetatm: bool = False,
    ):
        """
        Args:
            quiet: suspend BioPython warning
            include_hydrogens: keep hydrogen atoms
            include_hetatm: keep HETATM residues (waters are always skipped)
        """
        self.quiet = quiet
        self.include_hydrogens = include_hydrogens
        self.include_hetatm = include_hetatm

    def load(self, pdb_path: str) -> Structure:
        """
        load the first model of a pdb file

        Returns:
            Structure: atoms with element based van der Waals radii
        """
        validate_pdb_file(pdb_path)
        parser = PDBParser(QUIET=self.quiet)
        bio_structure = parser.get_structure("prot", pdb_path)

        structure = Structure()
        models = list(bio_structure) if bio_structure is not None else []
        if not models:
            return structure

        for chain in models[0]:
            for residue in chain:
                resname = residue.get_resname().upper().strip()
                het_flag, resseq, icode = residue.id

                if resname in self.WATER_NAMES:
                    continue
                if het_flag.strip() and not self.include_hetatm:
                    continue

                res_number = f"{resseq}{icode.strip()}"
                for atom in residue:
                    element = self._element(atom)
                    if element == "H" and not self.include_hydrogens:
                        continue
                    structure.add_atom(
                        atom_name=atom.get_fullname(),
                        res_name=resname,
                        res_number=res_number,
                        chain=chain.id,
                        coord=atom.coord,
                        radius=ATOMIC_RADII[element],
                    )

        return structure

    @staticmethod
    def _element(atom) -> str:
        element = (getattr(atom, "element", "") or "").upper().strip()
        if not element or element == "X":
            element = atom.get_name().strip().upper().lstrip("0123456789")[:1]
        if element == "D":
            element = "H"
        return element


def load_pdb(
    pdb_path: str,
    quiet: bool = False,
) -> Structure:
    """
    Load a PDB file into a Structure

    Args:
        pdb_path: Path to the PDB file
        quiet: Whether to operate in silent mode

    Returns:
        Structure: Atoms of the first model, waters and HETATM records skipped
    """
    loader = PDBLoader(quiet=quiet)
    return loader.load(pdb_path)
