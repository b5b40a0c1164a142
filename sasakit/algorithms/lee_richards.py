"""
Lee-Richards method implementation

Every atom sphere is cut by parallel planes perpendicular to z, spaced
for that atom alone. Each plane cuts the sphere and its neighbors in
circles; the part of each circle's circumference not covered by neighboring
circles, times the slice thickness, approximates the atom's exposed area.

Reference:
    Lee, B; Richards, FM. (1971). J Mol Biol 55(3):379-400.
    "The interpretation of protein structures: estimation of static accessibility".
"""

import math

import numpy as np

from ..core.coordinates import CoordinateStore
from ..core.data_models import Algorithm, Parameters
from ..core.neighbors import NeighborList
from ..core.parallel import ThreadDispatcher
from ..utils.logger import LogMixin

TWO_PI = 2.0 * math.pi


def exposed_arc_length(starts: np.ndarray, widths: np.ndarray) -> float:
    """
    Angle of a circle left uncovered by a set of arcs.

    Args:
        starts: Start angle of each covering arc (any real value)
        widths: Angular width of each arc, in [0, 2 pi]

    Returns:
        float: Uncovered angle in [0, 2 pi]
    """
    if len(starts) == 0:
        return TWO_PI

    starts = np.mod(starts, TWO_PI)
    ends = starts + widths

    # Arcs that cross 2 pi are split in two
    wrap = ends > TWO_PI
    if np.any(wrap):
        starts = np.concatenate((starts, np.zeros(np.count_nonzero(wrap))))
        ends = np.concatenate((np.minimum(ends, TWO_PI), ends[wrap] - TWO_PI))

    order = np.argsort(starts, kind="stable")
    covered = 0.0
    cur_start = float(starts[order[0]])
    cur_end = float(ends[order[0]])
    for k in order[1:]:
        s, e = float(starts[k]), float(ends[k])
        if s > cur_end:
            covered += cur_end - cur_start
            cur_start, cur_end = s, e
        elif e > cur_end:
            cur_end = e
    covered += cur_end - cur_start

    return max(0.0, TWO_PI - covered)


def atom_slice_count(radius: float, parameters: Parameters) -> int:
    """
    Number of slices across one atom sphere.

    With an explicit lee_richards_delta the sphere is cut into slices no
    thicker than delta, and at least one. Otherwise every atom gets
    lee_richards_n_slices slices, whatever its size.
    """
    if parameters.lee_richards_delta is not None:
        return max(1, math.ceil(2.0 * radius / parameters.lee_richards_delta))
    return parameters.lee_richards_n_slices


class LeeRichards(LogMixin):
    """Lee-Richards method"""

    def __init__(self, parameters: Parameters | None = None):
        """
        Args:
            parameters: Calculation parameters
        """
        self.parameters = parameters or Parameters()

    def atom_slices(self, z: float, radius: float) -> tuple[np.ndarray, np.ndarray]:
        """
        Planes that cut atom sphere (z, radius) and their thicknesses.

        The diameter is divided into equal slices, each evaluated at its
        mid-plane z - R + delta_i * (k + 1/2). The thicknesses add up to the
        diameter, and by Archimedes' hat-box theorem a sphere band of height h
        has area 2 pi R h, so an isolated sphere comes out exact.

        Returns:
            (z_planes, thickness): both empty for a zero radius
        """
        if radius <= 0:
            return np.empty(0), np.empty(0)
        n = atom_slice_count(radius, self.parameters)
        delta = 2.0 * radius / n
        planes = z - radius + delta * (np.arange(n) + 0.5)
        return planes, np.full(n, delta)

    def atom_area(
        self, i: int, store: CoordinateStore, neighbors: NeighborList
    ) -> float:
        """SASA of atom i"""
        radius = float(store.radii[i])
        if radius <= 0:
            return 0.0
        xi, yi, zi = store.coords[i]

        planes, thickness = self.atom_slices(zi, radius)
        if len(planes) == 0:
            return 0.0
        ri = np.sqrt(radius * radius - (planes - zi) ** 2)

        nb = neighbors.neighbors(i)
        if len(nb) == 0:
            return radius * TWO_PI * float(np.sum(thickness))

        nb_xyz = store.coords[nb]
        nb_r = store.radii[nb]
        dx = nb_xyz[:, 0] - xi
        dy = nb_xyz[:, 1] - yi
        d = np.hypot(dx, dy)
        beta = np.arctan2(dy, dx)

        # Neighbor circle radii in every plane, shape (n_planes, n_neighbors)
        rj2 = nb_r[None, :] ** 2 - (planes[:, None] - nb_xyz[None, :, 2]) ** 2
        rj = np.sqrt(np.clip(rj2, 0.0, None))
        ri2d = ri[:, None]

        overlap = (rj2 > 0) & (d[None, :] < ri2d + rj)
        engulfed = overlap & (d[None, :] + ri2d <= rj)
        partial = overlap & ~engulfed & (d[None, :] + rj > ri2d)

        with np.errstate(divide="ignore", invalid="ignore"):
            cos_alpha = (ri2d**2 + d[None, :] ** 2 - rj**2) / (2.0 * ri2d * d[None, :])
        alpha = np.arccos(np.clip(np.where(partial, cos_alpha, 1.0), -1.0, 1.0))

        buried_plane = np.any(engulfed, axis=1)
        area = 0.0
        for s in range(len(planes)):
            if buried_plane[s]:
                continue
            cover = partial[s]
            if np.any(cover):
                a = alpha[s, cover]
                exposed = exposed_arc_length(beta[cover] - a, 2.0 * a)
            else:
                exposed = TWO_PI
            area += exposed * thickness[s]
        return radius * area

    def compute(
        self,
        sasa_out: np.ndarray,
        store: CoordinateStore,
        neighbors: NeighborList,
        dispatcher: ThreadDispatcher,
    ) -> None:
        """
        Write the SASA of every atom to sasa_out.

        Work is split by atom: each worker scans all slices of its own atoms,
        so each output slot has exactly one writer.
        """
        params = self.parameters
        self.logger.debug(
            "Lee-Richards: %d atoms, %s, %d threads",
            store.n_atoms,
            f"slices of at most {params.lee_richards_delta} Å"
            if params.lee_richards_delta is not None
            else f"{params.lee_richards_n_slices} slices per atom",
            dispatcher.n_threads,
        )

        def kernel(start: int, end: int):
            for i in range(start, end):
                sasa_out[i] = self.atom_area(i, store, neighbors)

        dispatcher.run(kernel, store.n_atoms)

    def get_method_type(self) -> Algorithm:
        """Get method type"""
        return Algorithm.LEE_RICHARDS
