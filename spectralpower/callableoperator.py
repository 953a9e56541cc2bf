# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Optional

from .backend import ArrayLike, ArrayNamespace, Device, DType, get_namespace
from .utils import check_pos, check_vector

class CallableOperator[T: ArrayLike]:
    """
    Matrix free operator, defined by a function computing the matrix-vector product.
    """

    func: Callable[[T], T]
    _dim: int
    _namespace: ArrayNamespace[T]
    _dtype: DType
    _device: Device

    @property
    def namespace(self) -> ArrayNamespace[T]:
        return self._namespace

    @property
    def dtype(self) -> DType:
        return self._dtype

    @property
    def device(self) -> Device:
        return self._device

    def __init__(
            self,
            dimension: int,
            func: Callable[[T], T], *,
            namespace: Optional[Any] = None,
            dtype: Optional[DType] = None,
            device: Optional[Device] = None) -> None:
        check_pos("dimension", dimension)
        if namespace is None:
            import numpy as np
            namespace = np
        self.func = func
        self._dim = dimension
        self._namespace = get_namespace(namespace)
        self._dtype = self._namespace.float64 if dtype is None else dtype
        self._device = device

    def dimension(self) -> int:
        return self._dim

    def apply(self, vec: T, /) -> T:
        res = self.func(vec)
        check_vector("Result of the operator", res, self._dim)
        return res
