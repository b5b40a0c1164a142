"""
Coordinate/radius store
"""

import numpy as np

from ..utils.validation import validate_coordinates, validate_radii


class CoordinateStore:
    """
    Read-only, index-aligned atom centers and expanded radii.

    The radii kept here already include the probe radius.
    """

    def __init__(self, coords, radii, probe_radius: float = 0.0):
        """
        Args:
            coords: Atom centers, shape (n, 3)
            radii: Van der Waals radii, shape (n,)
            probe_radius: Solvent probe radius added to every atom (Å)
        """
        if probe_radius < 0:
            raise ValueError(f"probe_radius must be non-negative: {probe_radius}")
        xyz = validate_coordinates(coords)
        r = validate_radii(radii, len(xyz))

        self._coords = np.array(xyz, dtype=np.float64)
        self._radii = r + probe_radius
        self._coords.flags.writeable = False
        self._radii.flags.writeable = False
        self.probe_radius = probe_radius

    @property
    def n_atoms(self) -> int:
        return len(self._coords)

    @property
    def coords(self) -> np.ndarray:
        """Atom centers, shape (n, 3)"""
        return self._coords

    @property
    def radii(self) -> np.ndarray:
        """Expanded radii, shape (n,)"""
        return self._radii

    @property
    def max_radius(self) -> float:
        if self.n_atoms == 0:
            return 0.0
        return float(self._radii.max())

    def z_extent(self) -> tuple[float, float]:
        """Lowest and highest z reached by any expanded sphere"""
        if self.n_atoms == 0:
            return 0.0, 0.0
        z = self._coords[:, 2]
        return float(np.min(z - self._radii)), float(np.max(z + self._radii))

    def sphere_areas(self) -> np.ndarray:
        """Area of every isolated expanded sphere"""
        return 4.0 * np.pi * self._radii**2

    def __len__(self) -> int:
        return self.n_atoms
