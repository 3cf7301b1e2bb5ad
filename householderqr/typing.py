# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of householderqr."""

from .tridiagonalization import Tridiagonalization, TridiagonalizationResult
from .qriteration import QRIteration, DoubleShiftQRIteration, QRIterationResult
from .eighsolver import HouseholderEigHSolver
from .matrixeigenvaluedecomposition import MatrixEigenvalueDecomposition

from .options import Options, IterationOptions, OptionType
from .exceptions import InvalidParameterError, ConvergenceError, ExcessLimitError

from .householderqr import HouseholderQR
