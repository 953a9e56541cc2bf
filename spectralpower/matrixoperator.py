# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, ArrayNamespace, Device, DType, namespace_of_arrays, shape, device
from .errors import DimensionMismatch
from .utils import check_vector

class MatrixOperator[T: ArrayLike]:
    """
    Operator for an explicitly stored square matrix of any array-API backend.
    The matrix is referenced, not copied.
    """

    matrix: T

    @property
    def namespace(self) -> ArrayNamespace[T]:
        return namespace_of_arrays(self.matrix)

    @property
    def dtype(self) -> DType:
        return self.matrix.dtype

    @property
    def device(self) -> Device:
        return device(self.matrix)

    def __init__(self, matrix: T) -> None:
        shp = shape(matrix)
        if len(shp) != 2 or shp[0] != shp[1]:
            raise DimensionMismatch(f"Matrix must be square, got shape {shp}")
        self.matrix = matrix

    def dimension(self) -> int:
        return shape(self.matrix)[0]

    def apply(self, vec: T, /) -> T:
        check_vector("Operand", vec, self.dimension())
        return self.matrix @ vec
