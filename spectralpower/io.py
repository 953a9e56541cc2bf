# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional, Type, overload
import h5py
import numpy as np

from .backend import ArrayNamespace, ArrayLike, to_device
from .linearoperator import Operator
from .powermethod import PowerMethod
from .poweriteration import PowerIterationResult

@overload
def write(group: h5py.Group, obj: PowerMethod) -> None: ...
@overload
def write(group: h5py.Group, obj: PowerIterationResult) -> None: ...
#implementation
def write(group: h5py.Group, obj: Any) -> None:
    if isinstance(obj, PowerMethod):
        group.attrs["ritz_value"] = obj.eigenvalue()
        group.attrs["iterations"] = obj.iterations_performed()
        group.create_dataset("ritz_vector", data=_host(obj.eigenvector()))
    elif isinstance(obj, PowerIterationResult):
        group.attrs["value"] = obj.value
        group.attrs["time"] = obj.time
        group.attrs["converged"] = obj.converged
        group.attrs["iterations"] = obj.iterations
        group.create_dataset("array", data=_host(obj.array))
        group.create_dataset("residuals", data=np.asarray(obj.residuals, dtype=np.float64))
    else:
        raise NotImplementedError(f"Writing objects of type {type(obj)} is not supported.")

@overload
def read[T: ArrayLike](group: h5py.Group, cls: Type[PowerIterationResult[T]], xp: ArrayNamespace[T]) -> PowerIterationResult[T]: ...
@overload
def read[T: ArrayLike](group: h5py.Group, cls: Type[PowerMethod[T]], xp: ArrayNamespace[T], operator: Operator[T]) -> PowerMethod[T]: ...
#implementation
def read(group: h5py.Group, cls: Any, xp: ArrayNamespace, operator: Optional[Operator] = None) -> Any:
    if cls == PowerIterationResult:
        return PowerIterationResult(array=xp.asarray(_dataset(group, "array")),
                                    value=float(get_attr(group, "value")),
                                    time=float(get_attr(group, "time")),
                                    residuals=[float(r) for r in _dataset(group, "residuals")],
                                    converged=bool(get_attr(group, "converged")),
                                    iterations=int(get_attr(group, "iterations")))
    elif cls == PowerMethod:
        if operator is None:
            raise ValueError("Operator must be provided to read PowerMethod.")
        vec = xp.asarray(_dataset(group, "ritz_vector"))
        return PowerMethod.restore(operator, vec, int(get_attr(group, "iterations")))

    raise ValueError("Invalid class.")

def get_attr(group: h5py.Group, name: str) -> Any:
    return group.attrs[name]

def _dataset(group: h5py.Group, name: str) -> np.ndarray:
    dataset = group[name]
    assert isinstance(dataset, h5py.Dataset)
    return np.asarray(dataset)

def _host(array: ArrayLike) -> np.ndarray:
    return np.asarray(to_device(array, "cpu"))
