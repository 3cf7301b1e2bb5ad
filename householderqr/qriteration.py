# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional
from dataclasses import dataclass, field
import logging
import time

from .backend import ArrayLike, namespace_of_arrays, diagonal
from .tridiagonalization import tridiagonalize
from .givensrotation import givens_qr_step
from .eigenvalue2x2 import eigenvalue_2x2
from .exceptions import ExcessLimitError
from .options import DEFAULT_EPS, DEFAULT_MAXCNT
from .utils import check_non_neg, check_tolerance, check_symmetric

logger = logging.getLogger(__name__)

@dataclass(kw_only=True)
class QRIterationResult[T: ArrayLike]:
    #: Final, nearly diagonal, matrix.
    matrix: T
    #: Orthogonal matrix whose columns are the eigenvectors, None if not requested.
    basis: Optional[T]
    #: Diagonal of the final matrix.
    eigenvalues: T
    #: Number of QR steps performed.
    iterations: int
    #: Whether all eigenvalues were deflated.
    converged: bool
    #: Magnitude of the trailing sub-diagonal entry of the active range after each step.
    residuals: list[float] = field(default_factory=list)
    #: Time taken for tridiagonalization and iteration.
    time: float = 0.0

@dataclass
class QRIteration:
    """
    Unshifted QR eigenvalue iteration for symmetric matrices. The matrix is reduced to
    tridiagonal form and then repeatedly factorized with Givens rotations and recombined
    as :math:`RQ`. The active range shrinks by one whenever its trailing sub-diagonal entry
    drops below eps, until every eigenvalue sits on the diagonal.
    """

    #: Threshold below which the trailing sub-diagonal entry counts as converged.
    eps: float = DEFAULT_EPS

    #: Maximum number of QR steps.
    maxcnt: int = DEFAULT_MAXCNT

    #: Whether the eigenvectors are accumulated.
    basis: bool = True

    #: Raise ExcessLimitError on non-convergence. Otherwise the result is returned with converged=False.
    strict: bool = True

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "eps":
            check_tolerance(name, value)
        elif name == "maxcnt":
            check_non_neg(name, value)
        super().__setattr__(name, value)

    def __call__[T: ArrayLike](self, mat: T, /) -> QRIterationResult[T]:
        """
        Compute the eigenvalues, and the eigenvectors if basis is set, of the symmetric matrix mat.
        """
        check_tolerance("eps", self.eps)
        n = check_symmetric(mat)
        xp = namespace_of_arrays(mat)

        stamp = time.time()
        r, q = tridiagonalize(mat, self.basis)

        sz = n - 1
        cnt = 0
        residuals: list[float] = []
        while sz > 0 and cnt < self.maxcnt:
            r, qk = self._step(r, sz)
            if q is not None:
                q = q @ qk

            residuals.append(float(xp.abs(r[sz, sz-1])))
            if residuals[-1] < self.eps:
                sz -= 1
                logger.debug("Deflated eigenvalue %d after %d steps.", sz + 1, len(residuals))
            if sz == 0:
                break
            cnt += 1

        result = QRIterationResult(matrix=r,
                                   basis=q,
                                   eigenvalues=diagonal(xp, r),
                                   iterations=len(residuals),
                                   converged=sz == 0,
                                   residuals=residuals,
                                   time=time.time() - stamp)
        if not result.converged:
            if self.strict:
                raise ExcessLimitError(self.maxcnt, result)
            logger.warning("%s stopped after %d steps with %d eigenvalues left.",
                           type(self).__name__, self.maxcnt, sz + 1)
        else:
            logger.debug("%s converged after %d steps.", type(self).__name__, result.iterations)
        return result

    def _step[T: ArrayLike](self, r: T, sz: int) -> tuple[T, T]:
        qk = givens_qr_step(r, sz)
        assert qk is not None
        return r @ qk, qk

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(eps={self.eps}, maxcnt={self.maxcnt}, "
                f"basis={self.basis}, strict={self.strict})")

@dataclass
class DoubleShiftQRIteration(QRIteration):
    """
    QR eigenvalue iteration with origin shift. Before each step the eigenvalue of the trailing
    2x2 block of the active range that is closest to its last diagonal entry is subtracted from
    the active diagonal and added back after the recombination.
    """

    def _step[T: ArrayLike](self, r: T, sz: int) -> tuple[T, T]:
        u = eigenvalue_2x2(float(r[sz-1, sz-1]), float(r[sz-1, sz]),
                           float(r[sz, sz-1]), float(r[sz, sz]))
        for i in range(sz + 1):
            r[i, i] = r[i, i] - u

        qk = givens_qr_step(r, sz)
        assert qk is not None
        r = r @ qk

        for i in range(sz + 1):
            r[i, i] = r[i, i] + u
        return r, qk
