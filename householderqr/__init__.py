# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Eigenvalues and eigenvectors of real symmetric matrices with the Householder-QR algorithm."""

import logging

from .householderqr import HouseholderQR
from .tridiagonalization import tridiagonalize
from .givensrotation import givens_qr_step
from .reflector import householder_vector
from .similaritytransform import householder_similarity, householder_accumulate
from .eigenvalue2x2 import eigenvalue_2x2
from .exceptions import InvalidParameterError, ConvergenceError, ExcessLimitError

__all__ = [
    "HouseholderQR",
    "tridiagonalize",
    "givens_qr_step",
    "householder_vector",
    "householder_similarity",
    "householder_accumulate",
    "eigenvalue_2x2",
    "InvalidParameterError",
    "ConvergenceError",
    "ExcessLimitError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
