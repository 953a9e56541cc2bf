import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#tr.set_default_dtype(tr.float64)
#backends.append(api.array_namespace(tr.zeros(1)))

#import cupy as cp
#backends.append(api.array_namespace(cp.zeros(1)))

def rand_data(xp, *shape: int):
    data = np.random.rand(*shape)
    if api.is_cupy_namespace(xp):
        return xp.asarray(data)
    elif api.is_torch_namespace(xp):
        return xp.asarray(data)
    else:
        return data

def symmetric_matrix(xp, eigvals, seed: int = 0):
    """Symmetric matrix with the given eigenvalues and a random orthogonal basis."""
    rng = np.random.default_rng(seed)
    q, _ = np.linalg.qr(rng.standard_normal((len(eigvals), len(eigvals))))
    mat = q @ np.diag(np.asarray(eigvals, dtype=np.float64)) @ q.T
    return xp.asarray(mat), xp.asarray(q[:, 0])
