"""Shared fixtures for the sasakit test suite."""

from __future__ import annotations

import io

import numpy as np
import pytest

from sasakit.core.structure import Structure
from sasakit.utils import diagnostics


@pytest.fixture
def err_out():
    """Route diagnostics to a string buffer for the duration of a test."""
    buffer = io.StringIO()
    old_verbosity = diagnostics.get_verbosity()
    diagnostics.set_err_out(buffer)
    yield buffer
    diagnostics.set_verbosity(old_verbosity)
    diagnostics.set_err_out(None)


@pytest.fixture
def random_cluster():
    """60 carbon-sized spheres packed into a 12 Å box (fixed seed)."""
    rng = np.random.default_rng(20240607)
    coords = rng.uniform(0.0, 12.0, size=(60, 3))
    radii = rng.uniform(1.4, 2.0, size=60)
    return coords, radii


@pytest.fixture
def dipeptide():
    """Two residues on chain A and one on chain B, with radii."""
    s = Structure()
    atoms = [
        (" N  ", "ALA", 1, "A", (0.0, 0.0, 0.0), 1.55),
        (" CA ", "ALA", 1, "A", (1.5, 0.0, 0.0), 1.70),
        (" C  ", "ALA", 1, "A", (2.0, 1.4, 0.0), 1.70),
        (" O  ", "ALA", 1, "A", (1.3, 2.4, 0.0), 1.52),
        (" CB ", "ALA", 1, "A", (2.0, -0.8, 1.2), 1.70),
        (" N  ", "SER", 2, "A", (3.3, 1.6, 0.0), 1.55),
        (" CA ", "SER", 2, "A", (4.0, 2.9, 0.0), 1.70),
        (" OG ", "SER", 2, "A", (5.0, 3.2, 1.1), 1.52),
        (" SD ", "XYZ", 7, "B", (12.0, 0.0, 0.0), 1.80),
    ]
    for name, res, num, chain, xyz, r in atoms:
        s.add_atom(name, res, num, chain, xyz, r)
    return s
