"""Tests for the coordinate store and the KDTree neighbor list."""

from __future__ import annotations

import numpy as np
import pytest

from sasakit.core.coordinates import CoordinateStore
from sasakit.core.neighbors import NeighborList


def brute_force_neighbors(store: CoordinateStore) -> list[set[int]]:
    coords, radii = store.coords, store.radii
    out = []
    for i in range(store.n_atoms):
        found = set()
        for j in range(store.n_atoms):
            if i == j or radii[i] <= 0 or radii[j] <= 0:
                continue
            if np.linalg.norm(coords[i] - coords[j]) < radii[i] + radii[j]:
                found.add(j)
        out.append(found)
    return out


class TestCoordinateStore:
    def test_radii_are_expanded_by_solvent_radius(self):
        store = CoordinateStore([[0, 0, 0], [1, 2, 3]], [1.5, 2.0], probe_radius=1.4)
        np.testing.assert_allclose(store.radii, [2.9, 3.4])
        assert store.max_radius == pytest.approx(3.4)

    def test_inputs_are_read_only(self):
        store = CoordinateStore([[0, 0, 0]], [1.0])
        with pytest.raises(ValueError):
            store.coords[0, 0] = 5.0
        with pytest.raises(ValueError):
            store.radii[0] = 5.0

    def test_caller_arrays_are_copied(self):
        coords = np.zeros((1, 3))
        store = CoordinateStore(coords, [1.0])
        coords[0, 0] = 9.0
        assert store.coords[0, 0] == 0.0

    def test_z_extent(self):
        store = CoordinateStore([[0, 0, -1.0], [0, 0, 4.0]], [1.0, 0.5], 0.0)
        assert store.z_extent() == pytest.approx((-2.0, 4.5))

    @pytest.mark.parametrize(
        "coords, radii",
        [
            ([[0, 0]], [1.0]),
            ([[0, 0, 0]], [1.0, 1.0]),
            ([[0, 0, np.nan]], [1.0]),
            ([[0, 0, 0]], [-1.0]),
        ],
    )
    def test_invalid_input_rejected(self, coords, radii):
        with pytest.raises(ValueError):
            CoordinateStore(coords, radii)

    def test_negative_solvent_radius_rejected(self):
        with pytest.raises(ValueError):
            CoordinateStore([[0, 0, 0]], [1.0], probe_radius=-0.1)


class TestNeighborList:
    def test_matches_brute_force(self, random_cluster):
        coords, radii = random_cluster
        store = CoordinateStore(coords, radii, 1.4)
        nl = NeighborList(store)
        expected = brute_force_neighbors(store)
        for i in range(store.n_atoms):
            assert set(nl.neighbors(i).tolist()) == expected[i]

    def test_sparse_system_matches_brute_force(self):
        rng = np.random.default_rng(7)
        coords = rng.uniform(-40.0, 40.0, size=(150, 3))
        radii = rng.uniform(0.5, 3.0, size=150)
        store = CoordinateStore(coords, radii, 1.4)
        nl = NeighborList(store, workers=2)
        expected = brute_force_neighbors(store)
        for i in range(store.n_atoms):
            assert set(nl.neighbors(i).tolist()) == expected[i]

    def test_symmetric(self, random_cluster):
        coords, radii = random_cluster
        nl = NeighborList(CoordinateStore(coords, radii, 1.4))
        for i in range(len(nl)):
            for j in nl.neighbors(i):
                assert i in nl.neighbors(int(j))
        assert nl.n_pairs == sum(len(nl.neighbors(i)) for i in range(len(nl))) // 2

    def test_tangent_spheres_not_neighbors(self):
        store = CoordinateStore([[0, 0, 0], [3.0, 0, 0]], [1.0, 2.0], 0.0)
        nl = NeighborList(store)
        assert len(nl.neighbors(0)) == 0
        assert nl.n_pairs == 0

    def test_unequal_radii_reached(self):
        # A large and a small sphere: the small one's own radius alone
        # would not reach the large one's center region.
        store = CoordinateStore([[0, 0, 0], [6.0, 0, 0]], [0.5, 6.0], 0.0)
        nl = NeighborList(store)
        assert nl.neighbors(0).tolist() == [1]
        assert nl.neighbors(1).tolist() == [0]

    def test_zero_radius_atoms_have_no_neighbors(self):
        store = CoordinateStore([[0, 0, 0], [0.5, 0, 0]], [0.0, 2.0], 0.0)
        nl = NeighborList(store)
        assert len(nl.neighbors(0)) == 0
        assert len(nl.neighbors(1)) == 0

    def test_empty_store(self):
        nl = NeighborList(CoordinateStore(np.empty((0, 3)), []))
        assert len(nl) == 0
        assert nl.n_pairs == 0
