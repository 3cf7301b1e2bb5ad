# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from math import sqrt

def eigenvalue_2x2(a: float, b: float, c: float, d: float) -> float:
    """
    Eigenvalue of the 2x2 matrix :math:`[[a, b], [c, d]]` that is closest to d.
    Raises ValueError if the eigenvalues are complex, which cannot happen for symmetric blocks.
    """
    scale = max(abs(a), abs(b), abs(c), abs(d))
    if scale == 0:
        return d
    a, b, c, d = a / scale, b / scale, c / scale, d / scale

    trace = a + d
    # trace**2 - 4*det, written without the cancellation of the two large terms
    disc = (a - d) * (a - d) + 4 * b * c
    if disc < 0:
        raise ValueError(f"2x2 block has complex eigenvalues (discriminant {disc * scale**2}).")

    root = sqrt(disc)
    a1 = (trace + root) / 2
    a2 = (trace - root) / 2
    return scale * (a1 if abs(d - a1) < abs(d - a2) else a2)
