"""
Neighbor search
"""

import numpy as np
from scipy.spatial import KDTree

from .coordinates import CoordinateStore


class NeighborList:
    """
    For every atom, the atoms whose expanded spheres intersect its own.

    The KDTree ball query uses the radius R_i + R_max, which is never smaller
    than R_i + R_j, so no true contact can be missed. Candidates are then
    filtered with the exact test |c_i - c_j| < R_i + R_j.
    """

    def __init__(self, store: CoordinateStore, workers: int = 1):
        """
        Args:
            store: Coordinates and expanded radii
            workers: Threads used by the KDTree query
        """
        self.store = store
        self._neighbors: list[np.ndarray] = self._build(store, workers)

    @staticmethod
    def _build(store: CoordinateStore, workers: int) -> list[np.ndarray]:
        n = store.n_atoms
        empty = np.empty(0, dtype=np.intp)
        if n == 0:
            return []

        coords = store.coords
        radii = store.radii
        tree = KDTree(coords)
        candidates = tree.query_ball_point(
            coords, radii + store.max_radius, workers=workers
        )

        neighbors = []
        for i in range(n):
            if radii[i] <= 0:
                neighbors.append(empty)
                continue
            idx = np.asarray(candidates[i], dtype=np.intp)
            idx = idx[(idx != i) & (radii[idx] > 0)]
            if len(idx) == 0:
                neighbors.append(empty)
                continue
            diff = coords[idx] - coords[i]
            d2 = np.einsum("ij,ij->i", diff, diff)
            reach = radii[i] + radii[idx]
            neighbors.append(np.sort(idx[d2 < reach * reach]))
        return neighbors

    def neighbors(self, i: int) -> np.ndarray:
        """Indices of the atoms that intersect atom i, ascending"""
        return self._neighbors[i]

    @property
    def n_pairs(self) -> int:
        """Number of intersecting (unordered) pairs"""
        return sum(len(nb) for nb in self._neighbors) // 2

    def __len__(self) -> int:
        return len(self._neighbors)
