from typing import Sequence
import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#tr.set_default_dtype(tr.float64)
#backends.append(api.array_namespace(tr.zeros(1)))

#import cupy as cp
#backends.append(api.array_namespace(cp.zeros(1)))

def to_backend(xp, data):
    if api.is_cupy_namespace(xp):
        return xp.asarray(data)
    elif api.is_torch_namespace(xp):
        return xp.asarray(data)
    else:
        return data

def rand_symmetric(xp, n: int, seed: int = 0):
    rng = np.random.default_rng(seed)
    data = rng.standard_normal((n, n))
    return to_backend(xp, 0.5 * (data + data.T))

def symmetric_with_spectrum(xp, eigvals: Sequence[float], seed: int = 0):
    rng = np.random.default_rng(seed)
    n = len(eigvals)
    q, _ = np.linalg.qr(rng.standard_normal((n, n)))
    data = q @ np.diag(np.asarray(eigvals, dtype=np.float64)) @ q.T
    return to_backend(xp, 0.5 * (data + data.T))

def max_abs(xp, arr) -> float:
    return float(xp.max(xp.abs(arr)))

def off_tridiagonal(xp, mat) -> float:
    n = mat.shape[0]
    val = 0.0
    for i in range(n):
        for j in range(n):
            if abs(i - j) > 1:
                val = max(val, abs(float(mat[i, j])))
    return val

def lower_part(xp, mat) -> float:
    n = mat.shape[0]
    val = 0.0
    for i in range(n):
        for j in range(i):
            val = max(val, abs(float(mat[i, j])))
    return val
