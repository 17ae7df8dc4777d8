"""
Core fuzzy zip engine.

Pure matching logic with no I/O: element models, the cost matrix and the
result sequencer. The assignment solver lives in `fuzip.assignment`.
"""

from __future__ import annotations

from .matrix import Orientation, build_cost_matrix, key_distance, orient
from .models import Fuzip, FuzipMissing, Fuzippable, FuzipText, NoMatch, OutOfBounds
from .two import Fuzip2Iterator, fuzzy_zip_two

__all__ = [
    "Fuzip",
    "Fuzip2Iterator",
    "FuzipMissing",
    "FuzipText",
    "Fuzippable",
    "NoMatch",
    "Orientation",
    "OutOfBounds",
    "build_cost_matrix",
    "fuzzy_zip_two",
    "key_distance",
    "orient",
]
