# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol, runtime_checkable
from .backend import ArrayLike, ArrayNamespace, Device, DType

@runtime_checkable
class Operator[T: ArrayLike](Protocol):
    """
    Protocol for a square linear operator, which only exposes its action on a vector.
    Repeated application has to be deterministic and must not modify the argument.
    """

    def dimension(self) -> int:
        """Number of rows and columns of the operator."""
        ...

    def apply(self, vec: T, /) -> T:
        """Matrix-vector product of the operator with a vector of length dimension()."""
        ...

@runtime_checkable
class ArrayOperator[T: ArrayLike](Operator[T], Protocol):
    """Operator bound to an array namespace, dtype and device."""

    @property
    def namespace(self) -> ArrayNamespace[T]: ...

    @property
    def dtype(self) -> DType: ...

    @property
    def device(self) -> Device: ...
