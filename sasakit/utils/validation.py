"""
Validation Utilities
"""

from pathlib import Path

import numpy as np

from ..core.data_models import Parameters


def validate_coordinates(coords) -> np.ndarray:
    """
    Validates atom center coordinates.

    Args:
        coords: Array-like of shape (n, 3).

    Returns:
        np.ndarray: The coordinates as a float64 array.
    """
    arr = np.asarray(coords, dtype=float)
    if arr.size == 0:
        return arr.reshape(0, 3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"coordinates shape must be (n, 3), got: {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("coordinates contain non-finite values")
    return arr


def validate_radii(radii, n_atoms: int) -> np.ndarray:
    """
    Validates atom radii against the number of atoms.

    Args:
        radii: Array-like of shape (n,).
        n_atoms: Expected number of atoms.

    Returns:
        np.ndarray: The radii as a float64 array.
    """
    arr = np.asarray(radii, dtype=float).reshape(-1)
    if len(arr) != n_atoms:
        raise ValueError(
            f"radii length must match coordinates: {len(arr)} != {n_atoms}"
        )
    if not np.all(np.isfinite(arr)):
        raise ValueError("radii contain non-finite values")
    if np.any(arr < 0):
        raise ValueError(f"radii must be non-negative, found: {arr.min()}")
    return arr


def validate_parameters(parameters: Parameters) -> bool:
    """
    Validates the calculation parameters.

    Args:
        parameters: Parameters object.

    Returns:
        bool: True if the parameters are valid.
    """
    parameters.validate()
    return True


def validate_output(sasa_out, n_atoms: int) -> bool:
    """
    Validates a caller-allocated output array.

    Args:
        sasa_out: Writable numpy array.
        n_atoms: Number of atoms.

    Returns:
        bool: True if results can be written to the array.
    """
    if not isinstance(sasa_out, np.ndarray):
        raise ValueError(f"output must be a numpy array, got: {type(sasa_out)}")
    if sasa_out.shape != (n_atoms,):
        raise ValueError(
            f"output shape must be ({n_atoms},), got: {sasa_out.shape}"
        )
    if not np.issubdtype(sasa_out.dtype, np.floating):
        raise ValueError(f"output must have a floating dtype, got: {sasa_out.dtype}")
    if not sasa_out.flags.writeable:
        raise ValueError("output array is not writeable")
    return True


def validate_pdb_file(filepath: str | Path) -> bool:
    """
    Validates a PDB file.

    Args:
        filepath: Path to the PDB file.

    Returns:
        bool: True if the file is valid.
    """
    path = Path(filepath)

    if not path.exists():
        raise FileNotFoundError(f"PDB file not found: {filepath}")

    if path.stat().st_size == 0:
        raise ValueError(f"PDB file is empty: {filepath}")

    if path.suffix.lower() not in [".pdb", ".ent"]:
        raise ValueError(f"File extension is not a recognized PDB format: {filepath}")

    try:
        with open(path, "r") as f:
            first_line = f.readline().rstrip("\n")
    except UnicodeDecodeError:
        raise ValueError(f"PDB file is not a text file: {filepath}")

    record_type = first_line[0:6].strip()
    if record_type and record_type not in [
        "HEADER",
        "TITLE",
        "REMARK",
        "CRYST1",
        "ATOM",
        "HETATM",
        "MODEL",
        "ENDMDL",
        "TER",
        "END",
    ]:
        raise ValueError(f"Invalid PDB file format. First line: {first_line[:50]}...")

    return True
