# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Literal, Any, Optional, Self, overload
from enum import Enum
import threading

from .backend import ArrayNamespace, DType
from .utils import check_non_neg

class OptionType(Enum):
    ITERATION = 0
    RANDOM = 1

class Options:

    key: Hashable

    def __init__(self, namespace: ArrayNamespace, category: OptionType):
        self.key = (namespace, category, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class IterationOptions(Options):
    """
    Context manager for the default budget and tolerance of the power iteration.
    """

    #: Maximum number of power iterations per call of compute.
    max_iterations: int
    #: Ritz residual below which the iteration counts as converged.
    tol: float

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            max_iterations: int = 1000,
            tol: float = 1e-8):
        check_non_neg("max_iterations", max_iterations)
        check_non_neg("tol", tol)
        self.max_iterations = max_iterations
        self.tol = tol
        super().__init__(namespace, OptionType.ITERATION)

class RandomOptions(Options):
    """
    Context manager for the generation of random initial vectors.
    """

    #: Seed of the random generator. None draws fresh entropy for every vector.
    seed: Optional[int]
    #: Data type of random vectors for operators without a dtype. None selects float64.
    dtype: Optional[DType]

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            seed: Optional[int] = None,
            dtype: Optional[DType] = None):
        self.seed = seed
        self.dtype = dtype
        super().__init__(namespace, OptionType.RANDOM)

_opts: dict[Any, Options] = {}

@overload
def get_options(namespace: ArrayNamespace, otype: Literal[OptionType.ITERATION]) -> IterationOptions: ...
@overload
def get_options(namespace: ArrayNamespace, otype: Literal[OptionType.RANDOM]) -> RandomOptions: ...
# implementation
def get_options(namespace: ArrayNamespace, otype: OptionType) -> Options:
    """
    Options of the current thread. If none are set, the defaults are registered and returned.
    """
    global _opts
    key = (namespace, otype, threading.get_ident())
    if key not in _opts:
        if otype == OptionType.ITERATION:
            set_options(IterationOptions(namespace=namespace))
        else:
            set_options(RandomOptions(namespace=namespace))
    return _opts[key]

def set_options(opts: IterationOptions | RandomOptions) -> None:
    global _opts
    _opts[opts.key] = opts
