__version__ = "0.1.0"
__author__ = "sasakit developers"

from .core import (
    DEFAULT_CLASSIFIER,
    DEFAULT_PARAMETERS,
    Algorithm,
    AtomClass,
    Parameters,
    Result,
    Status,
    Structure,
    Subarea,
)
from .algorithms import (
    calc,
    calc_coord,
    calc_lee_richards,
    calc_shrake_rupley,
    calc_structure,
)

__all__ = [
    "DEFAULT_CLASSIFIER",
    "DEFAULT_PARAMETERS",
    "Algorithm",
    "AtomClass",
    "Parameters",
    "Result",
    "Status",
    "Structure",
    "Subarea",
    "calc",
    "calc_coord",
    "calc_lee_richards",
    "calc_shrake_rupley",
    "calc_structure",
]
