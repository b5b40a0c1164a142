"""
Input/output helpers
"""

from .pdb_loader import PDBLoader, load_pdb
from .file_range import read_range, whole_file

__all__ = [
    "PDBLoader",
    "load_pdb",
    "read_range",
    "whole_file",
]
