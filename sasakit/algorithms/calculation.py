"""
SASA calculation entry points

All entry points validate their input before doing any work and report
problems as a Status plus a diagnostic message; none of them raise for bad
input.
"""

import numpy as np

from ..core.coordinates import CoordinateStore
from ..core.data_models import (
    DEFAULT_PARAMETERS,
    Algorithm,
    Parameters,
    Result,
    Status,
)
from ..core.neighbors import NeighborList
from ..core.parallel import ThreadDispatcher, ThreadStartError, threads_available
from ..core.structure import Structure
from ..utils.diagnostics import fail, mem_fail, thread_error, warn
from ..utils.logger import get_logger
from ..utils.validation import validate_coordinates, validate_output, validate_parameters
from .method_factory import MethodFactory

logger = get_logger(__name__)


def _run(
    algorithm: Algorithm,
    sasa_out: np.ndarray,
    coords,
    radii,
    parameters: Parameters | None,
) -> Status:
    parameters = parameters or DEFAULT_PARAMETERS
    try:
        validate_parameters(parameters)
        store = CoordinateStore(coords, radii, parameters.probe_radius)
        validate_output(sasa_out, store.n_atoms)
    except ValueError as e:
        return fail("%s", e)

    status = Status.SUCCESS
    n_threads = parameters.n_threads
    if n_threads > 1 and not threads_available():
        status = warn(
            "Multithreading not available on this platform, "
            "running on 1 thread instead of %d",
            n_threads,
        )
        n_threads = 1

    method = MethodFactory.create_method(algorithm, parameters)
    try:
        neighbors = NeighborList(store, workers=n_threads)
        method.compute(sasa_out, store, neighbors, ThreadDispatcher(n_threads))
    except MemoryError:
        return mem_fail()
    except ThreadStartError as e:
        return fail("%s", thread_error(e.cause))

    logger.debug(
        "%s: %d atoms, total SASA %.3f",
        algorithm.value,
        store.n_atoms,
        float(np.sum(sasa_out)),
    )
    return status


def calc_shrake_rupley(
    sasa_out: np.ndarray, coords, radii, parameters: Parameters | None = None
) -> Status:
    """
    Calculate SASA using the Shrake-Rupley algorithm.

    Args:
        sasa_out: Results are written here, shape (n_atoms,)
        coords: Atom centers, shape (n_atoms, 3)
        radii: Atom radii (without probe), shape (n_atoms,)
        parameters: Resolution, probe radius and thread count; defaults if None

    Returns:
        Status: SUCCESS; WARN if several threads were requested but the
        platform has none (the result is then computed on one thread); FAIL
        for invalid input, memory exhaustion or a thread error. After FAIL
        the content of sasa_out is unspecified.
    """
    return _run(Algorithm.SHRAKE_RUPLEY, sasa_out, coords, radii, parameters)


def calc_lee_richards(
    sasa_out: np.ndarray, coords, radii, parameters: Parameters | None = None
) -> Status:
    """
    Calculate SASA using the Lee-Richards algorithm.

    Same arguments and return values as calc_shrake_rupley.
    """
    return _run(Algorithm.LEE_RICHARDS, sasa_out, coords, radii, parameters)


def calc(
    sasa_out: np.ndarray, coords, radii, parameters: Parameters | None = None
) -> Status:
    """Calculate SASA with the algorithm selected in parameters"""
    parameters = parameters or DEFAULT_PARAMETERS
    if not isinstance(parameters.algorithm, Algorithm):
        return fail("Unknown algorithm '%s'", parameters.algorithm)
    return _run(parameters.algorithm, sasa_out, coords, radii, parameters)


def calc_coord(coords, radii, parameters: Parameters | None = None) -> Result | None:
    """
    Calculate SASA for a set of spheres, allocating the output.

    Returns:
        Result | None: None if the calculation failed.
    """
    parameters = parameters or DEFAULT_PARAMETERS
    try:
        n_atoms = len(validate_coordinates(coords))
    except ValueError as e:
        fail("%s", e)
        return None

    sasa = np.zeros(n_atoms, dtype=np.float64)
    status = calc(sasa, coords, radii, parameters)
    if status == Status.FAIL:
        return None
    return Result(atom_area=sasa, parameters=parameters, status=status)


def calc_structure(
    structure: Structure, parameters: Parameters | None = None
) -> Result | None:
    """
    Calculate SASA for a structure, using the radii stored in it.

    Returns:
        Result | None: None if the calculation failed, e.g. if some atom
        has no radius.
    """
    if np.any(np.isnan(structure.radii)):
        fail("Structure has atoms without radius")
        return None
    return calc_coord(structure.coords, structure.radii, parameters)
