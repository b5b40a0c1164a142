"""
Atom classifiers and residue reference areas
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping

from .data_models import AtomClass, Subarea
from ..utils.logger import LogMixin

BACKBONE_ATOMS = frozenset({"CA", "N", "O", "C"})

# Wildcard residue name in user classifier tables
ANY_RESIDUE = "ANY"

# Tien et al. 2013 empirical maximum accessible surface areas (Å²)
# Tien MZ, Meyer AG, Sydykova DK, Spielman SJ, Wilke CO.
# Maximum allowed solvent accessibilities of residues in proteins.
# PLoS One. 2013;8(11):e80635. doi: 10.1371/journal.pone.0080635
TIEN_2013_MAX_AREA: tuple[tuple[str, float], ...] = (
    ("ALA", 121.0),
    ("ARG", 265.0),
    ("ASN", 187.0),
    ("ASP", 187.0),
    ("CYS", 148.0),
    ("GLN", 214.0),
    ("GLU", 214.0),
    ("GLY", 97.0),
    ("HIS", 216.0),
    ("ILE", 195.0),
    ("LEU", 191.0),
    ("LYS", 230.0),
    ("MET", 203.0),
    ("PHE", 228.0),
    ("PRO", 154.0),
    ("SER", 143.0),
    ("THR", 163.0),
    ("TRP", 264.0),
    ("TYR", 255.0),
    ("VAL", 165.0),
)

# Heavy side-chain atoms of the standard amino acids (PDB names)
SIDE_CHAIN_ATOMS: dict[str, tuple[str, ...]] = {
    "ALA": ("CB",),
    "ARG": ("CB", "CG", "CD", "NE", "CZ", "NH1", "NH2"),
    "ASN": ("CB", "CG", "OD1", "ND2"),
    "ASP": ("CB", "CG", "OD1", "OD2"),
    "CYS": ("CB", "SG"),
    "GLN": ("CB", "CG", "CD", "OE1", "NE2"),
    "GLU": ("CB", "CG", "CD", "OE1", "OE2"),
    "GLY": (),
    "HIS": ("CB", "CG", "ND1", "CD2", "CE1", "NE2"),
    "ILE": ("CB", "CG1", "CG2", "CD1"),
    "LEU": ("CB", "CG", "CD1", "CD2"),
    "LYS": ("CB", "CG", "CD", "CE", "NZ"),
    "MET": ("CB", "CG", "SD", "CE"),
    "PHE": ("CB", "CG", "CD1", "CD2", "CE1", "CE2", "CZ"),
    "PRO": ("CB", "CG", "CD"),
    "SER": ("CB", "OG"),
    "THR": ("CB", "OG1", "CG2"),
    "TRP": ("CB", "CG", "CD1", "CD2", "NE1", "CE2", "CE3", "CZ2", "CZ3", "CH2"),
    "TYR": ("CB", "CG", "CD1", "CD2", "CE1", "CE2", "CZ", "OH"),
    "VAL": ("CB", "CG1", "CG2"),
}

MAIN_CHAIN_ATOMS = ("N", "CA", "C", "O")

# Van der Waals radii of the heavy elements (Å) and water probe radius,
# used to weight atoms when splitting reference totals
HEAVY_ATOM_RADII = {"C": 1.70, "N": 1.55, "O": 1.52, "S": 1.80, "SE": 1.90}
REFERENCE_PROBE_RADIUS = 1.4


def atom_is_backbone(atom_name: str) -> bool:
    """
    Is an atom a backbone atom

    True if the name equals CA, N, O or C after surrounding whitespace is
    trimmed. Does not check that the atom really is part of a backbone.
    """
    if not atom_name:
        return False
    return atom_name.strip() in BACKBONE_ATOMS


def atom_element(atom_name: str) -> str:
    """Element symbol guessed from a PDB atom name ('1HG2' -> 'H', 'SE' -> 'SE')"""
    name = atom_name.strip().upper().lstrip("0123456789")
    if name.startswith("SE"):
        return "SE"
    return name[:1]


class ReferenceTable:
    """
    Ordered, explicitly sized sequence of (residue name, maximum Subarea).

    Lookups are linear scans in table order; the first match wins.
    """

    def __init__(self, entries: Iterable[tuple[str, Subarea]] = ()):
        table = []
        for name, area in entries:
            if not isinstance(area, Subarea):
                raise ValueError(f"reference for {name} must be a Subarea, got {type(area)}")
            table.append((name.strip().upper(), Subarea(name=name.strip().upper()).add(area)))
        self._entries: tuple[tuple[str, Subarea], ...] = tuple(table)

    def lookup(self, res_name: str) -> Subarea | None:
        """Maximum areas of a residue, None if the table has no entry"""
        key = res_name.strip().upper()
        for name, area in self._entries:
            if name == key:
                return area
        return None

    def names(self) -> list[str]:
        return [name for name, _ in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, Subarea]]:
        return iter(self._entries)

    def __contains__(self, res_name: str) -> bool:
        return self.lookup(res_name) is not None


def split_reference_totals(
    totals: Iterable[tuple[str, float]], classifier: "Classifier"
) -> ReferenceTable:
    """
    Reference table with every Subarea field filled from total maxima.

    The total of each residue is split over the fields in proportion to the
    solvent accessible sphere area, 4 pi (r + 1.4)^2, of the residue's
    standard heavy atoms, classified by classifier. Residues without a
    side-chain entry in SIDE_CHAIN_ATOMS are weighted by their main chain only.
    """
    entries = []
    for name, total in totals:
        atoms = MAIN_CHAIN_ATOMS + SIDE_CHAIN_ATOMS.get(name, ())
        weights = Subarea(name=name)
        for atom in atoms:
            r = HEAVY_ATOM_RADII[atom_element(atom)] + REFERENCE_PROBE_RADIUS
            atom_class = classifier.classify(name, atom)
            weights.add(Subarea.from_atom(atom, r * r, atom_class, atom_is_backbone(atom)))

        scale = total / weights.total
        area = Subarea(name=name)
        for field_name in Subarea.area_fields():
            setattr(area, field_name, getattr(weights, field_name) * scale)
        area.total = total
        entries.append((name, area))
    return ReferenceTable(entries)


class Classifier(ABC, LogMixin):
    """Maps atoms to chemical classes and residues to reference areas"""

    name: str = "classifier"
    reference: ReferenceTable | None = None

    @abstractmethod
    def classify(self, res_name: str, atom_name: str) -> AtomClass:
        """
        Class of an atom

        Args:
            res_name: Residue name, e.g. "ALA"
            atom_name: Atom name, e.g. " CA "

        Returns:
            AtomClass: POLAR, APOLAR or UNKNOWN
        """
        pass

    def residue_max_area(self, res_name: str) -> Subarea | None:
        """Maximum areas of a residue, None if there is no reference"""
        if self.reference is None:
            return None
        return self.reference.lookup(res_name)


class ResidueClassifier(Classifier):
    """
    Built-in classifier for amino acids.

    N and O atoms are polar, C, S and Se atoms apolar, everything else
    (hydrogens, metals) unknown.
    """

    POLAR_ELEMENTS = frozenset({"N", "O"})
    APOLAR_ELEMENTS = frozenset({"C", "S", "SE"})

    def __init__(self, reference: ReferenceTable | None = None):
        """
        Args:
            reference: Residue maxima, defaults to the Tien et al. 2013 totals
                split over all fields (see split_reference_totals)
        """
        self.name = "residue"
        if reference is None:
            reference = split_reference_totals(TIEN_2013_MAX_AREA, self)
        self.reference = reference

    def classify(self, res_name: str, atom_name: str) -> AtomClass:
        element = atom_element(atom_name)
        if element in self.POLAR_ELEMENTS:
            return AtomClass.POLAR
        if element in self.APOLAR_ELEMENTS:
            return AtomClass.APOLAR
        return AtomClass.UNKNOWN


class BackboneClassifier(Classifier):
    """Main-chain / side-chain only; carries no polarity and no reference"""

    def __init__(self):
        self.name = "backbone"
        self.reference = None

    def classify(self, res_name: str, atom_name: str) -> AtomClass:
        return AtomClass.UNKNOWN

    def is_backbone(self, atom_name: str) -> bool:
        return atom_is_backbone(atom_name)


class UserClassifier(Classifier):
    """
    Classifier built from caller-supplied tables.

    ``atom_classes`` maps (residue name, atom name) to a class. The residue
    name "ANY" matches every residue, a residue-specific entry takes
    precedence. Reading such tables from configuration files is left to the
    caller.
    """

    def __init__(
        self,
        name: str,
        atom_classes: Mapping[tuple[str, str], AtomClass | str],
        reference: ReferenceTable | None = None,
    ):
        self.name = name
        self.reference = reference
        self._classes: dict[tuple[str, str], AtomClass] = {
            (res.strip().upper(), atom.strip().upper()): AtomClass(cls)
            for (res, atom), cls in atom_classes.items()
        }

    def classify(self, res_name: str, atom_name: str) -> AtomClass:
        res = res_name.strip().upper()
        atom = atom_name.strip().upper()
        cls = self._classes.get((res, atom))
        if cls is None:
            cls = self._classes.get((ANY_RESIDUE, atom))
        if cls is None:
            self.logger.debug("%s: no class for atom '%s' in '%s'", self.name, atom, res)
            return AtomClass.UNKNOWN
        return cls


DEFAULT_CLASSIFIER = ResidueClassifier()


def residue_max_area(res_name: str, classifier: Classifier) -> Subarea | None:
    """The maximum areas of a residue according to a classifier"""
    return classifier.residue_max_area(res_name)


def classifier_name(classifier: Classifier) -> str | None:
    """The name of a classifier, None if not defined"""
    return getattr(classifier, "name", None)
