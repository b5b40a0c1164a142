"""Cross-check against the freesasa C library, when it is installed."""

from __future__ import annotations

import numpy as np
import pytest

from sasakit.algorithms import calc_coord
from sasakit.core.data_models import Algorithm, Parameters

freesasa = pytest.importorskip("freesasa")


@pytest.mark.parametrize(
    "algorithm, options",
    [
        (Algorithm.LEE_RICHARDS, {"n-slices": 50}),
        (Algorithm.SHRAKE_RUPLEY, {"n-points": 500}),
    ],
)
def test_total_matches_freesasa(random_cluster, algorithm, options):
    coords, radii = random_cluster
    fs_algorithm = (
        freesasa.LeeRichards
        if algorithm == Algorithm.LEE_RICHARDS
        else freesasa.ShrakeRupley
    )
    fs_params = freesasa.Parameters(
        {"algorithm": fs_algorithm, "probe-radius": 1.4, **options}
    )
    reference = freesasa.calcCoord(coords.flatten().tolist(), radii.tolist(), fs_params)

    params = Parameters(
        algorithm=algorithm,
        probe_radius=1.4,
        lee_richards_n_slices=options.get("n-slices", 20),
        shrake_rupley_n_points=options.get("n-points", 100),
    )
    result = calc_coord(coords, radii, params)
    assert result is not None
    assert result.total == pytest.approx(reference.totalArea(), rel=2e-2)

    reference_atoms = np.array([reference.atomArea(i) for i in range(len(radii))])
    assert np.abs(result.atom_area - reference_atoms).sum() < 0.1 * reference.totalArea()
