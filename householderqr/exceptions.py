# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any


class InvalidParameterError(ValueError):
    """Raised when a tolerance, iteration cap or input matrix is rejected before any work is done."""
    pass


class ConvergenceError(RuntimeError):
    """Base class for iterations that did not converge."""
    pass


class ExcessLimitError(ConvergenceError):
    """
    Raised when the QR iteration exhausts its iteration cap before every eigenvalue is deflated.
    The last, non-converged, result is attached and must not be treated as a decomposition.
    """

    #: Number of iterations that were attempted.
    count: int
    #: Last state of the iteration.
    result: Any

    def __init__(self, count: int, result: Any = None) -> None:
        super().__init__(f"QR iteration did not converge within {count} iterations.")
        self.count = count
        self.result = result
