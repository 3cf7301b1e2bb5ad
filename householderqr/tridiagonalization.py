# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional
from dataclasses import dataclass
import logging
import time

from .backend import ArrayLike, namespace_of_arrays, identity, clone, matrix_size
from .reflector import householder_vector
from .similaritytransform import householder_similarity, householder_accumulate
from .utils import check_symmetric

logger = logging.getLogger(__name__)

def tridiagonalize[T: ArrayLike](mat: T, compute_basis: bool = True) -> tuple[T, Optional[T]]:
    """
    Reduce a copy of the symmetric matrix mat to tridiagonal form :math:`R` with Householder
    reflections. If compute_basis is set, the orthogonal :math:`Q` with :math:`Q^T M Q = R` is
    returned as well, otherwise None.
    """
    xp = namespace_of_arrays(mat)
    n = matrix_size(mat)
    r = clone(xp, mat)
    q = identity(xp, n, mat) if compute_basis else None

    if n < 3:
        return r, q

    for c in range(n - 2):
        v = clone(xp, r[c+1:, c])
        norm = householder_vector(v)
        if float(norm) == 0.0:
            # column is already zero below the sub-diagonal
            logger.debug("Pivot %d needs no reflection.", c)
            continue

        householder_similarity(r, c + 1, v, norm)

        if q is None:
            continue
        if c == 0:
            q[1:, 1:] = identity(xp, n - 1, mat) - (2 / norm) * v[:, xp.newaxis] * v[xp.newaxis, :]
        else:
            householder_accumulate(q, c + 1, v, norm)

    # q holds H_k ... H_1, the transpose is the basis
    if q is not None:
        q = clone(xp, q.T)
    return r, q

@dataclass(kw_only=True)
class TridiagonalizationResult[T: ArrayLike]:
    #: Tridiagonal matrix.
    matrix: T
    #: Orthogonal basis with :math:`Q^T M Q = R` or None if not requested.
    basis: Optional[T]
    #: Time taken for the reduction.
    time: float

@dataclass
class Tridiagonalization:
    """
    Householder reduction of a symmetric matrix to tridiagonal form.
    """

    #: Whether the orthogonal transformation is accumulated.
    basis: bool = True

    def __call__[T: ArrayLike](self, mat: T, /) -> TridiagonalizationResult[T]:
        check_symmetric(mat)
        stamp = time.time()
        r, q = tridiagonalize(mat, self.basis)
        return TridiagonalizationResult(matrix=r, basis=q, time=time.time() - stamp)

    def __repr__(self) -> str:
        return f"Tridiagonalization(basis={self.basis})"
