# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional

from .backend import ArrayLike, namespace_of_arrays, identity, clone, matrix_size

def _rotate_rows(mat: ArrayLike, i: int, begin: int, end: int, cos: ArrayLike, sin: ArrayLike) -> None:
    xp = namespace_of_arrays(mat)
    top = clone(xp, mat[i, begin:end])
    bot = clone(xp, mat[i+1, begin:end])
    mat[i, begin:end] = top * cos + bot * sin
    mat[i+1, begin:end] = bot * cos - top * sin

def givens_qr_step[T: ArrayLike](r: T, sz: int, compute_q: bool = True) -> Optional[T]:
    """
    Reduce the tridiagonal matrix r in place to its upper triangular factor with Givens rotations
    on the rows 0..sz and return the orthogonal factor :math:`Q` of :math:`R_{old} = Q R`.

    The rotations are accumulated as :math:`G_{sz-1} \\cdots G_0` and transposed before returning.
    The caller completes the QR step with ``r @ q`` and updates an eigenvector basis with ``basis @ q``.
    """
    xp = namespace_of_arrays(r)
    n = matrix_size(r)
    if not 0 <= sz <= max(n - 1, 0):
        raise ValueError(f"Active range {sz} out of range for a matrix of size {n}.")
    q = identity(xp, n, r) if compute_q else None

    if n < 2:
        return q

    for i in range(sz):
        if r[i+1, i] == 0:
            continue

        # scaled by the larger entry so the squares neither underflow nor overflow
        a, b = xp.abs(r[i, i]), xp.abs(r[i+1, i])
        scale = a if a > b else b
        d = scale * xp.sqrt((r[i, i] / scale)**2 + (r[i+1, i] / scale)**2)
        sin = r[i+1, i] / d
        cos = r[i, i] / d

        # only the band and the fill-in column are touched
        end = min(i + 3, n)
        if end == i + 3:
            r[i, i+2] = 0
        _rotate_rows(r, i, i, end, cos, sin)

        if q is None:
            continue
        if i == 0:
            q[0, 0] = cos
            q[1, 1] = cos
            q[0, 1] = sin
            q[1, 0] = -sin
        else:
            _rotate_rows(q, i, 0, n, cos, sin)

    if q is not None:
        q = clone(xp, q.T)
    return q
