"""
Subarea aggregation and relative areas

Turns a per-atom SASA array into additive Subarea records at atom, residue,
chain and structure scope, and normalizes residue records by reference
maxima.
"""

from dataclasses import dataclass, field

import numpy as np

from .classifier import Classifier, ReferenceTable, atom_is_backbone
from .data_models import Result, Status, Subarea
from .structure import Structure
from ..utils.diagnostics import fail, warn


@dataclass
class AreaSummary:
    """All subareas of one structure"""

    atoms: list[Subarea] = field(default_factory=list)
    residues: list[Subarea] = field(default_factory=list)
    chains: dict[str, Subarea] = field(default_factory=dict)
    total: Subarea = field(default_factory=lambda: Subarea(name="total"))


def _atom_areas(result: Result | np.ndarray) -> np.ndarray:
    if isinstance(result, Result):
        return result.atom_area
    return np.asarray(result, dtype=float)


def _check_size(areas: np.ndarray, structure: Structure) -> Status:
    if len(areas) != structure.n_atoms:
        return fail(
            "Inconsistent input: result has %d atoms, structure has %d",
            len(areas),
            structure.n_atoms,
        )
    return Status.SUCCESS


def add_subarea(total: Subarea, term: Subarea) -> Subarea:
    """Adds all members of term to corresponding members of total"""
    return total.add(term)


def atom_subarea(
    structure: Structure,
    result: Result | np.ndarray,
    classifier: Classifier,
    atom_index: int,
) -> Subarea:
    """
    Subarea of a single atom

    Polar/apolar comes from the classifier, main-chain/side-chain from
    atom_is_backbone.
    """
    area = float(_atom_areas(result)[atom_index])
    atom_name = structure.atom_name(atom_index)
    atom_class = classifier.classify(structure.atom_res_name(atom_index), atom_name)
    return Subarea.from_atom(
        atom_name.strip(), area, atom_class, atom_is_backbone(atom_name)
    )


def single_residue_sasa(
    result: Result | np.ndarray, structure: Structure, residue_index: int
) -> float:
    """Total SASA of one residue, summed over its atoms in index order"""
    areas = _atom_areas(result)
    first, last = structure.residue_atoms(residue_index)
    total = 0.0
    for i in range(first, last + 1):
        total += float(areas[i])
    return total


def residue_subarea(
    structure: Structure,
    result: Result | np.ndarray,
    classifier: Classifier,
    residue_index: int,
) -> Subarea:
    """Subarea of one residue, named after the residue type"""
    first, last = structure.residue_atoms(residue_index)
    sub = Subarea(name=structure.residue_name(residue_index))
    for i in range(first, last + 1):
        sub.add(atom_subarea(structure, result, classifier, i))
    return sub


def aggregate(
    result: Result | np.ndarray, structure: Structure, classifier: Classifier
) -> AreaSummary | None:
    """
    Visit every atom once and accumulate its subarea into its residue, its
    chain and the whole structure.

    Returns:
        AreaSummary | None: None (with a diagnostic) if the result does not
        match the structure.
    """
    areas = _atom_areas(result)
    if _check_size(areas, structure) == Status.FAIL:
        return None

    summary = AreaSummary()
    for label in structure.chain_labels:
        summary.chains[label] = Subarea(name=label)

    for r in range(structure.n_residues):
        first, last = structure.residue_atoms(r)
        residue = Subarea(name=structure.residue_name(r))
        chain = summary.chains[structure.residue_chain(r)]
        for i in range(first, last + 1):
            atom = atom_subarea(structure, areas, classifier, i)
            summary.atoms.append(atom)
            residue.add(atom)
            chain.add(atom)
            summary.total.add(atom)
        summary.residues.append(residue)
    return summary


def structure_subarea(
    result: Result | np.ndarray, structure: Structure, classifier: Classifier
) -> Subarea | None:
    """Subarea of the whole structure, None on inconsistent input"""
    summary = aggregate(result, structure, classifier)
    return None if summary is None else summary.total


def residue_subareas(
    result: Result | np.ndarray, structure: Structure, classifier: Classifier
) -> list[Subarea] | None:
    """Subareas of all residues, in structure order; None on inconsistent input"""
    summary = aggregate(result, structure, classifier)
    return None if summary is None else summary.residues


def chain_subareas(
    result: Result | np.ndarray, structure: Structure, classifier: Classifier
) -> dict[str, Subarea] | None:
    """Subareas of all chains, keyed by chain label; None on inconsistent input"""
    summary = aggregate(result, structure, classifier)
    return None if summary is None else summary.chains


def _relative(abs_area: Subarea, max_area: Subarea) -> Subarea:
    rel = Subarea(name=abs_area.name)
    for name in Subarea.area_fields():
        maximum = getattr(max_area, name)
        if maximum > 0:
            setattr(rel, name, getattr(abs_area, name) / maximum)
    return rel


def relative_subarea(
    abs_area: Subarea, reference: ReferenceTable
) -> tuple[Subarea, Status]:
    """
    Relative SASA of a residue

    Returns:
        (relative, status): relative has the same name as abs_area and every
        field divided by the reference maximum, or 0 where the maximum is 0.
        If the table has no entry for the residue, relative is all zero with
        name None and status is WARN.
    """
    max_area = reference.lookup(abs_area.name or "")
    if max_area is None:
        return Subarea(), warn("No reference area for residue '%s'", abs_area.name)
    return _relative(abs_area, max_area), Status.SUCCESS


def residue_rel_subarea(
    abs_area: Subarea, classifier: Classifier
) -> tuple[Subarea, Status]:
    """Relative SASA of a residue using the classifier's reference areas"""
    max_area = classifier.residue_max_area(abs_area.name or "")
    if max_area is None:
        return Subarea(), warn(
            "Classifier '%s' has no reference area for residue '%s'",
            classifier.name,
            abs_area.name,
        )
    return _relative(abs_area, max_area), Status.SUCCESS


def rsa_val(
    residue_index: int,
    structure: Structure,
    result: Result | np.ndarray,
    classifier: Classifier,
) -> tuple[Subarea, Subarea, Status]:
    """
    Absolute and relative SASA of one residue

    If the classifier has no reference table at all, the relative subarea is
    all zero with name None and the status is still SUCCESS, so absolute
    values can be computed without references.

    Returns:
        (absolute, relative, status): status is FAIL if the residue index is
        out of range or the result does not match the structure.
    """
    areas = _atom_areas(result)
    if _check_size(areas, structure) == Status.FAIL:
        return Subarea(), Subarea(), Status.FAIL
    if not 0 <= residue_index < structure.n_residues:
        return Subarea(), Subarea(), fail(
            "Residue index %d out of range (structure has %d residues)",
            residue_index,
            structure.n_residues,
        )

    abs_area = residue_subarea(structure, areas, classifier, residue_index)
    if classifier.reference is None:
        return abs_area, Subarea(), Status.SUCCESS
    rel, status = residue_rel_subarea(abs_area, classifier)
    return abs_area, rel, status


def relative_subareas(
    summary: AreaSummary, classifier: Classifier
) -> tuple[list[Subarea], Status]:
    """
    Relative subareas for every residue of a summary

    Returns:
        (relative, status): status is WARN if at least one residue had no
        reference, those residues get the null subarea.
    """
    out = []
    missing: list[str] = []
    for residue in summary.residues:
        max_area = classifier.residue_max_area(residue.name or "")
        if max_area is None:
            out.append(Subarea())
            if str(residue.name) not in missing:
                missing.append(str(residue.name))
            continue
        out.append(_relative(residue, max_area))

    if missing:
        return out, warn(
            "Classifier '%s' has no reference area for: %s",
            classifier.name,
            ", ".join(missing),
        )
    return out, Status.SUCCESS
