# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Literal
from dataclasses import dataclass

from .backend import ArrayLike, namespace_of_arrays
from .qriteration import QRIteration, DoubleShiftQRIteration
from .options import DEFAULT_EPS, DEFAULT_MAXCNT
from .utils import check_non_neg, check_tolerance

@dataclass
class HouseholderEigHSolver:
    """
    Drop-in replacement for ``linalg.eigh`` based on the Householder-QR iteration.
    Eigenvalues are returned in ascending order, the eigenvectors as matching columns.
    """

    #: Threshold below which the trailing sub-diagonal entry counts as converged.
    eps: float = DEFAULT_EPS
    #: Maximum number of QR steps.
    maxcnt: int = DEFAULT_MAXCNT
    #: Iteration variant.
    shift: Literal["none", "double"] = "double"

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "eps":
            check_tolerance(name, value)
        elif name == "maxcnt":
            check_non_neg(name, value)
        elif name == "shift" and value not in ("none", "double"):
            raise ValueError(f"shift must be 'none' or 'double', got {value!r}")
        super().__setattr__(name, value)

    def __call__[T: ArrayLike](self, mat: T, /) -> tuple[T, T]:
        cls = DoubleShiftQRIteration if self.shift == "double" else QRIteration
        res = cls(eps=self.eps, maxcnt=self.maxcnt, basis=True)(mat)
        assert res.basis is not None

        xp = namespace_of_arrays(mat)
        idxs = xp.argsort(res.eigenvalues)
        vals = xp.take(res.eigenvalues, idxs)
        vecs = xp.take(res.basis, idxs, axis=1)
        return vals, vecs
