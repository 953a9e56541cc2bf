# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, shape
from .errors import DimensionMismatch

def check_pos(msg: str, value: int | float):
    if value <= 0:
        raise ValueError(f"{msg} must be above zero, got {value}")

def check_non_neg(msg: str, value: int | float):
    if value < 0:
        raise ValueError(f"{msg} must be non-negative, got {value}")

def check_vector(msg: str, vec: ArrayLike, dim: int) -> None:
    if shape(vec) != (dim,):
        raise DimensionMismatch(
            f"{msg} must be a vector of length {dim}, got shape {tuple(vec.shape)}")
