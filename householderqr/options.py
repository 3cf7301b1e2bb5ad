# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Any, Self
from enum import Enum
import threading

from .backend import ArrayNamespace
from .utils import check_non_neg, check_tolerance

DEFAULT_EPS = 1e-10
DEFAULT_MAXCNT = 10000

class OptionType(Enum):
    ITERATION = 0

class Options:

    key: Hashable

    def __init__(self, namespace: ArrayNamespace, category: OptionType):
        self.key = (namespace, category, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class IterationOptions(Options):
    """
    Context manager for the defaults of the QR eigenvalue iterations.
    """

    #: Convergence threshold for the trailing sub-diagonal entry.
    eps: float
    #: Maximum number of QR steps.
    maxcnt: int
    #: Raise on non-convergence instead of returning a result flagged as not converged.
    strict: bool

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            eps: float = DEFAULT_EPS,
            maxcnt: int = DEFAULT_MAXCNT,
            strict: bool = True):
        check_tolerance("eps", eps)
        check_non_neg("maxcnt", maxcnt)
        self.eps = eps
        self.maxcnt = maxcnt
        self.strict = strict
        super().__init__(namespace, OptionType.ITERATION)

    def __repr__(self) -> str:
        return f"IterationOptions(eps={self.eps}, maxcnt={self.maxcnt}, strict={self.strict})"

_opts: dict[Any, Options] = {}

def get_options(namespace: ArrayNamespace, otype: OptionType) -> Options:
    global _opts
    key = (namespace, otype, threading.get_ident())
    if key in _opts:
        return _opts[key]
    else:
        raise KeyError("No options set for the current thread.")

def set_options(opts: IterationOptions) -> None:
    global _opts
    _opts[opts.key] = opts
