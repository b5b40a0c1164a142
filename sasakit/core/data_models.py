"""
Core data model definitions
"""

from dataclasses import dataclass, field, fields, replace as dc_replace
from enum import Enum, IntEnum
import numpy as np


class Status(IntEnum):
    """Return codes shared by every calculation and lookup"""

    SUCCESS = 0
    FAIL = -1
    WARN = -2


class Algorithm(str, Enum):
    """SASA algorithm"""

    SHRAKE_RUPLEY = "shrake-rupley"
    LEE_RICHARDS = "lee-richards"


class AtomClass(str, Enum):
    """Chemical category of an atom"""

    POLAR = "polar"
    APOLAR = "apolar"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Parameters:
    """Calculation parameters"""

    algorithm: Algorithm = Algorithm.LEE_RICHARDS
    probe_radius: float = 1.4  # Water probe (Å)

    # Sampling density
    shrake_rupley_n_points: int = 100  # Test points per atom
    lee_richards_n_slices: int = 20  # Slices per atom
    lee_richards_delta: float | None = None  # Explicit slice spacing (Å)

    n_threads: int = 1

    def __post_init__(self):
        if isinstance(self.algorithm, str) and not isinstance(self.algorithm, Algorithm):
            object.__setattr__(self, "algorithm", Algorithm(self.algorithm.lower()))

    def validate(self):
        """Validate parameters"""
        if not isinstance(self.algorithm, Algorithm):
            raise ValueError(f"Unknown algorithm: {self.algorithm}")
        if not self.probe_radius >= 0:
            raise ValueError(f"probe_radius must be non-negative: {self.probe_radius}")
        if self.shrake_rupley_n_points <= 0:
            raise ValueError(
                f"shrake_rupley_n_points must be greater than 0: "
                f"{self.shrake_rupley_n_points}"
            )
        if self.lee_richards_n_slices <= 0:
            raise ValueError(
                f"lee_richards_n_slices must be greater than 0: "
                f"{self.lee_richards_n_slices}"
            )
        if self.lee_richards_delta is not None and not self.lee_richards_delta > 0:
            raise ValueError(
                f"lee_richards_delta must be greater than 0: {self.lee_richards_delta}"
            )
        if self.n_threads < 1:
            raise ValueError(f"n_threads must be at least 1: {self.n_threads}")

    def replace(self, **changes) -> "Parameters":
        """Copy with some fields changed"""
        return dc_replace(self, **changes)


DEFAULT_PARAMETERS = Parameters()


@dataclass
class Subarea:
    """
    SASA broken down by chemical category and structural scope.

    ``name`` is None for the "no classification available" sentinel.
    """

    name: str | None = None
    total: float = 0.0
    polar: float = 0.0
    apolar: float = 0.0
    main_chain: float = 0.0
    side_chain: float = 0.0
    side_chain_polar: float = 0.0
    side_chain_apolar: float = 0.0

    @classmethod
    def from_atom(
        cls, name: str | None, area: float, atom_class: AtomClass, backbone: bool
    ) -> "Subarea":
        """
        Subarea of one atom: polar/apolar from atom_class, main-chain or
        side-chain from backbone.
        """
        sub = cls(name=name, total=area)
        polar = atom_class == AtomClass.POLAR
        apolar = atom_class == AtomClass.APOLAR
        if polar:
            sub.polar = area
        elif apolar:
            sub.apolar = area
        if backbone:
            sub.main_chain = area
        else:
            sub.side_chain = area
            if polar:
                sub.side_chain_polar = area
            elif apolar:
                sub.side_chain_apolar = area
        return sub

    @staticmethod
    def area_fields() -> tuple[str, ...]:
        """Names of the numeric fields"""
        return tuple(f.name for f in fields(Subarea) if f.name != "name")

    def add(self, term: "Subarea") -> "Subarea":
        """Add all members of term to this object (in place)"""
        for name in self.area_fields():
            setattr(self, name, getattr(self, name) + getattr(term, name))
        return self

    def __add__(self, other: "Subarea") -> "Subarea":
        if not isinstance(other, Subarea):
            return NotImplemented
        return Subarea(name=self.name).add(self).add(other)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary"""
        out: dict[str, object] = {"name": self.name}
        for name in self.area_fields():
            out[name] = getattr(self, name)
        return out


NULL_SUBAREA = Subarea()


@dataclass
class Result:
    """Per-atom SASA of one calculation"""

    atom_area: np.ndarray
    parameters: Parameters = field(default_factory=Parameters)
    status: Status = Status.SUCCESS

    def __post_init__(self):
        """Data validation"""
        if not isinstance(self.atom_area, np.ndarray):
            raise ValueError(
                f"atom_area must be a numpy array, got: {type(self.atom_area)}"
            )
        if self.atom_area.ndim != 1:
            raise ValueError(f"atom_area must be 1D, shape: {self.atom_area.shape}")

    @property
    def n_atoms(self) -> int:
        return len(self.atom_area)

    @property
    def total(self) -> float:
        """Total SASA"""
        return float(np.sum(self.atom_area))

    def __len__(self) -> int:
        return self.n_atoms


@dataclass(frozen=True)
class FileRange:
    """Byte range in a file, usable with seek()"""

    begin: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.begin
