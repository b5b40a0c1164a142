"""
Core data models, geometry and aggregation
"""

from .data_models import (
    DEFAULT_PARAMETERS,
    NULL_SUBAREA,
    Algorithm,
    AtomClass,
    FileRange,
    Parameters,
    Result,
    Status,
    Subarea,
)
from .coordinates import CoordinateStore
from .neighbors import NeighborList
from .parallel import ThreadDispatcher, threads_available
from .structure import Structure, atom_descriptor, residue_descriptor
from .classifier import (
    DEFAULT_CLASSIFIER,
    BackboneClassifier,
    Classifier,
    ReferenceTable,
    ResidueClassifier,
    UserClassifier,
    atom_is_backbone,
    classifier_name,
    residue_max_area,
    split_reference_totals,
)
from .subarea import (
    AreaSummary,
    add_subarea,
    aggregate,
    atom_subarea,
    chain_subareas,
    relative_subarea,
    relative_subareas,
    residue_rel_subarea,
    residue_subareas,
    rsa_val,
    single_residue_sasa,
    structure_subarea,
)

__all__ = [
    "DEFAULT_PARAMETERS",
    "NULL_SUBAREA",
    "Algorithm",
    "AtomClass",
    "FileRange",
    "Parameters",
    "Result",
    "Status",
    "Subarea",
    "CoordinateStore",
    "NeighborList",
    "ThreadDispatcher",
    "threads_available",
    "Structure",
    "atom_descriptor",
    "residue_descriptor",
    "DEFAULT_CLASSIFIER",
    "BackboneClassifier",
    "Classifier",
    "ReferenceTable",
    "ResidueClassifier",
    "UserClassifier",
    "atom_is_backbone",
    "classifier_name",
    "residue_max_area",
    "split_reference_totals",
    "AreaSummary",
    "add_subarea",
    "aggregate",
    "atom_subarea",
    "chain_subareas",
    "relative_subarea",
    "relative_subareas",
    "residue_rel_subarea",
    "residue_subareas",
    "rsa_val",
    "single_residue_sasa",
    "structure_subarea",
]
