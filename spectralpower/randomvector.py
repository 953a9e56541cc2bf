# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional
import numpy as np

from .backend import ArrayLike, ArrayNamespace, Device, DType
from .utils import check_pos

def random_vector[T: ArrayLike](
        xp: ArrayNamespace[T],
        dim: int, *,
        dtype: Optional[DType] = None,
        device: Optional[Device] = None,
        seed: Optional[int] = None) -> T:
    """
    Vector with independent entries drawn uniformly from [-1, 1]. The entries are generated
    on the host with numpy and moved to the namespace and device afterwards.
    """
    check_pos("dim", dim)
    data = np.random.default_rng(seed).uniform(-1.0, 1.0, dim)
    dtype = xp.float64 if dtype is None else dtype
    return xp.asarray(data, dtype=dtype, device=device)
