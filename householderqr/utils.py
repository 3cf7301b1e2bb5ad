# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from math import isfinite

from .backend import ArrayLike, namespace_of_arrays, matrix_size, is_real_floating, check_namespace
from .exceptions import InvalidParameterError

def check_non_neg(msg: str, value: int | float):
    if not value >= 0:
        raise InvalidParameterError(f"{msg} must be non-negative, got {value}")

def check_tolerance(msg: str, value: float):
    check_non_neg(msg, value)
    if not isfinite(value):
        raise InvalidParameterError(f"{msg} must be finite, got {value}")

def check_symmetric(mat: ArrayLike, rtol: float = 1e-10) -> int:
    """
    Check that mat is a non-empty, finite, real floating, square and symmetric matrix and return its size.
    Symmetry is checked relative to the largest absolute entry.
    """
    xp = namespace_of_arrays(mat)
    check_namespace(xp)
    try:
        n = matrix_size(mat)
    except ValueError as err:
        raise InvalidParameterError(str(err)) from err
    if n == 0:
        raise InvalidParameterError("Matrix must not be empty.")
    if not is_real_floating(xp, mat.dtype):
        raise InvalidParameterError(f"Expected a real floating point matrix, got dtype {mat.dtype}.")
    if not bool(xp.all(xp.isfinite(mat))):
        raise InvalidParameterError("Matrix contains NaN or infinite entries.")
    scale = float(xp.max(xp.abs(mat)))
    if float(xp.max(xp.abs(mat - mat.T))) > rtol * scale:
        raise InvalidParameterError("Matrix is not symmetric.")
    return n
