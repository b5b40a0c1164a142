"""Tests for the structure accessor and descriptor strings."""

from __future__ import annotations

import numpy as np
import pytest

from sasakit.algorithms import calc_structure
from sasakit.core.data_models import Status
from sasakit.core.structure import (
    Structure,
    atom_descriptor,
    format_atom_name,
    residue_descriptor,
)


class TestDescriptors:
    def test_atom_descriptor_layout(self):
        assert atom_descriptor("A", 1, "ALA", "CA") == "A    1 ALA  CA "

    def test_atom_descriptor_with_pdb_name(self):
        assert atom_descriptor("A", "1", "ALA", " CA ") == "A    1 ALA  CA "

    def test_four_character_atom_name(self):
        assert atom_descriptor("B", 10, "LEU", "HD12") == "B   10 LEU HD12"

    def test_residue_descriptor_layout(self):
        assert residue_descriptor("A", 1, "ALA") == "A    1 ALA"
        assert residue_descriptor("C", "12A", "GLY") == "C 12A GLY"

    @pytest.mark.parametrize(
        "name, expected",
        [("CA", " CA "), ("N", " N  "), ("OXT", " OXT"), ("HG12", "HG12")],
    )
    def test_format_atom_name(self, name, expected):
        assert format_atom_name(name) == expected


class TestStructure:
    def test_counts(self, dipeptide):
        assert dipeptide.n_atoms == len(dipeptide) == 9
        assert dipeptide.n_residues == 3
        assert dipeptide.n_chains == 2
        assert dipeptide.chain_labels == "AB"

    def test_atom_accessors(self, dipeptide):
        assert dipeptide.atom_name(1) == " CA "
        assert dipeptide.atom_res_name(1) == "ALA"
        assert dipeptide.atom_res_number(6) == "2"
        assert dipeptide.atom_chain(8) == "B"
        assert dipeptide.atom_radius(0) == 1.55
        assert dipeptide.atom_descriptor(1) == "A    1 ALA  CA "

    def test_residue_accessors(self, dipeptide):
        assert dipeptide.residue_atoms(0) == (0, 4)
        assert dipeptide.residue_atoms(1) == (5, 7)
        assert dipeptide.residue_name(1) == "SER"
        assert dipeptide.residue_number(2) == "7"
        assert dipeptide.residue_chain(2) == "B"
        assert dipeptide.residue_descriptor(1) == "A    2 SER"

    def test_chain_index(self, dipeptide):
        assert dipeptide.chain_index("A") == 0
        assert dipeptide.chain_index("B") == 1
        assert dipeptide.chain_atoms("B") == [8]

    def test_unknown_chain_fails(self, dipeptide, err_out):
        assert dipeptide.chain_index("Z") == Status.FAIL
        assert "Chain 'Z' not found" in err_out.getvalue()

    def test_has_chain_guards_chain_index(self, dipeptide, err_out):
        # a miss is -1, which would index the last chain if used unchecked
        assert dipeptide.has_chain("A")
        assert not dipeptide.has_chain("Z")
        index = dipeptide.chain_index("Z")
        assert index == Status.FAIL == -1
        assert index < 0

    def test_coords_and_radii(self, dipeptide):
        assert dipeptide.coords.shape == (9, 3)
        np.testing.assert_allclose(dipeptide.coords[1], [1.5, 0.0, 0.0])
        assert dipeptide.radii.shape == (9,)

    def test_new_residue_on_chain_change(self):
        s = Structure()
        s.add_atom("CA", "ALA", 1, "A", (0, 0, 0), 1.7)
        s.add_atom("CA", "ALA", 1, "B", (5, 0, 0), 1.7)
        assert s.n_residues == 2

    def test_bad_coordinate_rejected(self):
        with pytest.raises(ValueError):
            Structure().add_atom("CA", "ALA", 1, "A", (0, 0), 1.7)

    def test_missing_radius_fails_calculation(self, err_out):
        s = Structure()
        s.add_atom("CA", "ALA", 1, "A", (0, 0, 0))
        assert np.isnan(s.atom_radius(0))
        assert calc_structure(s) is None
        assert "without radius" in err_out.getvalue()
