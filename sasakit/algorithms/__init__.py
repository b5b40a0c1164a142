"""
Algorithm module
"""

from .shrake_rupley import ShrakeRupley
from .lee_richards import LeeRichards
from .method_factory import MethodFactory
from .calculation import (
    calc,
    calc_coord,
    calc_lee_richards,
    calc_shrake_rupley,
    calc_structure,
)

__all__ = [
    "ShrakeRupley",
    "LeeRichards",
    "MethodFactory",
    "calc",
    "calc_coord",
    "calc_lee_richards",
    "calc_shrake_rupley",
    "calc_structure",
]
