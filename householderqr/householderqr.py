# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Literal, Optional
from dataclasses import dataclass

from .backend import ArrayNamespace, get_namespace, check_namespace
from .tridiagonalization import Tridiagonalization, TridiagonalizationResult
from .qriteration import QRIteration, DoubleShiftQRIteration, QRIterationResult
from .eighsolver import HouseholderEigHSolver
from .options import IterationOptions, OptionType, set_options, get_options, DEFAULT_EPS, DEFAULT_MAXCNT

@dataclass(frozen=True)
class HouseholderQR[NDArray: Any]:
    """
    Entry point bound to an array namespace. Solvers created here take eps, maxcnt and strict
    from the active IterationOptions unless they are passed explicitly.
    """

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace[NDArray]

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))
        check_namespace(self.namespace)
        try:
            get_options(self.namespace, OptionType.ITERATION)
        except KeyError:
            set_options(self.iteration())

    #-------------------------------------------------------------------------------------------------
    # solvers

    def tridiagonalization(self, basis: bool = True) -> Tridiagonalization:
        """
        Householder reduction to tridiagonal form.
        """
        return Tridiagonalization(basis=basis)

    def qr_iteration(
            self, *,
            eps: Optional[float] = None,
            maxcnt: Optional[int] = None,
            basis: bool = True,
            strict: Optional[bool] = None) -> QRIteration:
        """
        Unshifted QR eigenvalue iteration.
        """
        return QRIteration(**self._iteration_args(eps, maxcnt, strict), basis=basis)

    def double_shift_qr_iteration(
            self, *,
            eps: Optional[float] = None,
            maxcnt: Optional[int] = None,
            basis: bool = True,
            strict: Optional[bool] = None) -> DoubleShiftQRIteration:
        """
        QR eigenvalue iteration with a shift taken from the trailing 2x2 block.
        """
        return DoubleShiftQRIteration(**self._iteration_args(eps, maxcnt, strict), basis=basis)

    def eighsolver(
            self, *,
            eps: Optional[float] = None,
            maxcnt: Optional[int] = None,
            shift: Literal["none", "double"] = "double") -> HouseholderEigHSolver:
        """
        Solver with the calling convention of ``linalg.eigh``.
        """
        args = self._iteration_args(eps, maxcnt, None)
        return HouseholderEigHSolver(eps=args["eps"], maxcnt=args["maxcnt"], shift=shift)

    #-------------------------------------------------------------------------------------------------
    # direct calls

    def tridiagonalize(self, mat: NDArray, basis: bool = True) -> TridiagonalizationResult[NDArray]:
        """
        Reduce the symmetric matrix mat to tridiagonal form.
        """
        return self.tridiagonalization(basis)(mat)

    def eig(
            self,
            mat: NDArray,
            shift: Literal["none", "double"] = "double",
            basis: bool = True) -> QRIterationResult[NDArray]:
        """
        Run the QR eigenvalue iteration selected by shift with the current options.
        """
        if shift == "double":
            return self.double_shift_qr_iteration(basis=basis)(mat)
        elif shift == "none":
            return self.qr_iteration(basis=basis)(mat)
        raise ValueError(f"shift must be 'none' or 'double', got {shift!r}")

    def eigh(self, mat: NDArray, shift: Literal["none", "double"] = "double") -> tuple[NDArray, NDArray]:
        """
        Ascending eigenvalues and matching eigenvectors of the symmetric matrix mat.
        """
        return self.eighsolver(shift=shift)(mat)

    #-------------------------------------------------------------------------------------------------
    # default options

    def iteration(
            self, *,
            eps: float = DEFAULT_EPS,
            maxcnt: int = DEFAULT_MAXCNT,
            strict: bool = True) -> IterationOptions:
        """
        Defaults for the QR eigenvalue iterations.
        """
        return IterationOptions(namespace=self.namespace, eps=eps, maxcnt=maxcnt, strict=strict)

    def set_options(self, options: IterationOptions) -> None:
        """
        Set options globally. The options are stored per thread and used by every solver
        created through this object.
        """
        set_options(options)

    def get_options(self, otype: OptionType) -> IterationOptions:
        """
        Get the current options.
        """
        return get_options(self.namespace, otype) # type: ignore

    def _iteration_args(
            self,
            eps: Optional[float],
            maxcnt: Optional[int],
            strict: Optional[bool]) -> dict[str, Any]:
        try:
            opts = self.get_options(OptionType.ITERATION)
        except KeyError:
            opts = self.iteration()
        return {"eps": opts.eps if eps is None else eps,
                "maxcnt": opts.maxcnt if maxcnt is None else maxcnt,
                "strict": opts.strict if strict is None else strict}
