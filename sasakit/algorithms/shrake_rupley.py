"""
Shrake-Rupley method implementation

Every atom is covered by a fixed set of test points; the exposed fraction of
those points times the sphere area is the atom's SASA.

Reference:
    Shrake, A; Rupley, JA. (1973). J Mol Biol 79(2):351-371.
    "Environment and exposure to solvent of protein atoms. Lysozyme and insulin".
"""

import functools

import numpy as np

from ..core.coordinates import CoordinateStore
from ..core.data_models import Algorithm, Parameters
from ..core.neighbors import NeighborList
from ..core.parallel import ThreadDispatcher
from ..utils.logger import LogMixin


@functools.lru_cache(maxsize=8)
def golden_spiral(n_points: int) -> np.ndarray:
    """
    Quasi-uniform points on the unit sphere (golden section spiral).

    The same n_points always gives the same points.

    Returns:
        np.ndarray: shape (n_points, 3), read-only
    """
    if n_points <= 0:
        raise ValueError(f"n_points must be greater than 0: {n_points}")
    dl = np.pi * (3.0 - np.sqrt(5.0))
    dz = 2.0 / n_points
    k = np.arange(n_points, dtype=np.float64)

    z = 1.0 - dz / 2.0 - k * dz
    r = np.sqrt(1.0 - z * z)
    longitude = k * dl

    points = np.column_stack((np.cos(longitude) * r, np.sin(longitude) * r, z))
    points.flags.writeable = False
    return points


class ShrakeRupley(LogMixin):
    """Shrake-Rupley method"""

    def __init__(self, parameters: Parameters | None = None):
        """
        Args:
            parameters: Calculation parameters
        """
        self.parameters = parameters or Parameters()
        self.n_points = self.parameters.shrake_rupley_n_points
        self.points = golden_spiral(self.n_points)

    def atom_area(
        self, i: int, store: CoordinateStore, neighbors: NeighborList
    ) -> float:
        """SASA of atom i"""
        radius = store.radii[i]
        if radius <= 0:
            return 0.0
        sphere_area = 4.0 * np.pi * radius * radius

        nb = neighbors.neighbors(i)
        if len(nb) == 0:
            return sphere_area

        coords = store.coords
        test_points = coords[i] + radius * self.points
        diff = test_points[:, None, :] - coords[nb][None, :, :]
        d2 = np.einsum("pnk,pnk->pn", diff, diff)
        buried = np.any(d2 < store.radii[nb] ** 2, axis=1)

        n_exposed = self.n_points - int(np.count_nonzero(buried))
        return n_exposed / self.n_points * sphere_area

    def compute(
        self,
        sasa_out: np.ndarray,
        store: CoordinateStore,
        neighbors: NeighborList,
        dispatcher: ThreadDispatcher,
    ) -> None:
        """
        Write the SASA of every atom to sasa_out.

        Args:
            sasa_out: Output array, shape (n_atoms,)
            store: Coordinates and expanded radii
            neighbors: Neighbor list of store
            dispatcher: Splits the atoms over worker threads
        """
        self.logger.debug(
            "Shrake-Rupley: %d atoms, %d test points, %d threads",
            store.n_atoms,
            self.n_points,
            dispatcher.n_threads,
        )

        def kernel(start: int, end: int):
            for i in range(start, end):
                sasa_out[i] = self.atom_area(i, store, neighbors)

        dispatcher.run(kernel, store.n_atoms)

    def get_method_type(self) -> Algorithm:
        """Get method type"""
        return Algorithm.SHRAKE_RUPLEY
