# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, namespace_of_arrays, matrix_size, shape, clone

def _check_input(mat: ArrayLike, col: int, v: ArrayLike, norm: ArrayLike | float) -> int:
    n = matrix_size(mat)
    if not 0 <= col <= n:
        raise ValueError(f"Pivot {col} out of range for a matrix of size {n}.")
    if shape(v)[0] != n - col:
        raise ValueError(f"Householder vector must have {n - col} elements, got {shape(v)[0]}.")
    if float(norm) == 0.0:
        raise ValueError("Householder vector must not be zero.")
    return n

def householder_similarity(mat: ArrayLike, col: int, v: ArrayLike, norm: ArrayLike | float) -> None:
    """
    Apply the similarity transform :math:`H M H` in place, where :math:`H = I - 2 v v^T / norm`
    acts on the rows and columns starting at col. Rows above col are left untouched by the
    left product and columns left of col by the right product.
    """
    _check_input(mat, col, v, norm)
    xp = namespace_of_arrays(mat)
    scale = 2 / norm

    # left product into the scratch buffer
    buff = clone(xp, mat)
    proj = v @ mat[col:, :]
    buff[col:, :] = mat[col:, :] - scale * v[:, xp.newaxis] * proj[xp.newaxis, :]

    # right product back into mat
    mat[:, :col] = buff[:, :col]
    proj = buff[:, col:] @ v
    mat[:, col:] = buff[:, col:] - scale * proj[:, xp.newaxis] * v[xp.newaxis, :]

def householder_accumulate(q: ArrayLike, col: int, v: ArrayLike, norm: ArrayLike | float) -> None:
    """Left multiply the running orthogonal product q in place by the reflector of v at col."""
    _check_input(q, col, v, norm)
    xp = namespace_of_arrays(q)
    proj = v @ q[col:, :]
    q[col:, :] = q[col:, :] - (2 / norm) * v[:, xp.newaxis] * proj[xp.newaxis, :]
