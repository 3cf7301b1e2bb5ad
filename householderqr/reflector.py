# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, namespace_of_arrays, shape

def householder_vector(x: ArrayLike) -> ArrayLike:
    """
    Turn x in place into the Householder vector :math:`v` that reflects the original x onto
    :math:`(\\pm\\|x\\|, 0, \\dots, 0)` and return :math:`v \\cdot v`.
    The norm is added to the leading element when it is positive and subtracted otherwise,
    so that no cancellation happens.
    """
    if shape(x)[0] == 0:
        raise ValueError("Cannot build a Householder vector from an empty vector.")
    xp = namespace_of_arrays(x)
    nrm = xp.sqrt(xp.sum(x * x))
    if x[0] > 0:
        x[0] += nrm
    else:
        x[0] -= nrm
    return xp.sum(x * x)
