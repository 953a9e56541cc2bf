# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Protocol, Self

Device = Any
DType = Any

class ArrayLike(Protocol):
    """Minimal protocol of an array-API array as used by spectralpower."""

    @property
    def shape(self) -> tuple[int | None, ...]: ...
    @property
    def dtype(self) -> DType: ...
    @property
    def ndim(self) -> int: ...

    def __add__(self, other: Any, /) -> Self: ...
    def __sub__(self, other: Any, /) -> Self: ...
    def __mul__(self, other: Any, /) -> Self: ...
    def __rmul__(self, other: Any, /) -> Self: ...
    def __truediv__(self, other: Any, /) -> Self: ...
    def __matmul__(self, other: Any, /) -> Self: ...
    def __float__(self) -> float: ...

class ArrayNamespace[T](Protocol):
    """Subset of the array-API namespace used by spectralpower."""

    float64: DType

    def asarray(self, obj: Any, /, *, dtype: DType = None,
                device: Device = None, copy: bool | None = None) -> T: ...
    def zeros(self, shape: int | tuple[int, ...], *,
              dtype: DType = None, device: Device = None) -> T: ...
    def sum(self, x: T, /) -> T: ...
    def sqrt(self, x: T, /) -> T: ...
    def finfo(self, type: Any, /) -> Any: ...
    def isdtype(self, dtype: DType, kind: Any) -> bool: ...
    def result_type(self, *arrays_and_dtypes: Any) -> DType: ...
