# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
import array_api_compat as api
from array_api_compat import device

from .array_namespace import ArrayNamespace, ArrayLike, Device, DType


def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except AttributeError:
            raise TypeError("Provided object is not a recognized array or namespace.")
    return api.array_namespace(obj) # type: ignore

def namespace_of_arrays[T: ArrayLike](*arrays: T) -> ArrayNamespace[T]:
    return api.array_namespace(*arrays) # type: ignore

def shape(array: ArrayLike) -> tuple[int, ...]:
    shp = array.shape
    if any(s is None for s in shp):
        raise ValueError("Array shape contains None dimension(s).")
    return shp  # type: ignore

def matrix_size(mat: ArrayLike) -> int:
    shp = shape(mat)
    if len(shp) != 2 or shp[0] != shp[1]:
        raise ValueError(f"Expected a square matrix, got shape {shp}.")
    return shp[0]

def identity[T: ArrayLike](xp: ArrayNamespace[T], n: int, like: T) -> T:
    return xp.eye(n, dtype=like.dtype, device=device(like))

def clone[T: ArrayLike](xp: ArrayNamespace[T], mat: T) -> T:
    return xp.asarray(mat, copy=True)

def diagonal[T: ArrayLike](xp: ArrayNamespace[T], mat: T) -> T:
    n = matrix_size(mat)
    return xp.sum(mat * identity(xp, n, mat), axis=1)

REQUIRED_FUNCTIONS = ("asarray", "eye", "sum", "sqrt", "abs", "max", "all",
                      "isfinite", "isdtype", "argsort", "take")

def check_namespace(xp: ArrayNamespace) -> None:
    missing = [name for name in REQUIRED_FUNCTIONS if not hasattr(xp, name)]
    if missing:
        raise NotImplementedError(
            f"Namespace {xp} is missing {', '.join(missing)}, which are needed for the eigenvalue algorithms.")

def is_real_floating(xp: ArrayNamespace, dtype: DType) -> bool:
    return xp.isdtype(dtype, "real floating")

__all__ = ["ArrayNamespace", "ArrayLike", "Device", "DType", "device",
           "get_namespace", "namespace_of_arrays", "shape", "matrix_size",
           "identity", "clone", "diagonal", "is_real_floating",
           "check_namespace", "REQUIRED_FUNCTIONS"]
