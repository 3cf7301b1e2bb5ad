# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Structural types for the subset of the Array API used by householderqr."""

from typing import Any, Protocol, Self

type Device = Any
type DType = Any

class ArrayLike(Protocol):

    @property
    def shape(self) -> tuple[int | None, ...]: ...
    @property
    def ndim(self) -> int: ...
    @property
    def dtype(self) -> DType: ...
    @property
    def device(self) -> Device: ...
    @property
    def T(self) -> Self: ...

    def __getitem__(self, key: Any, /) -> Self: ...
    def __setitem__(self, key: Any, value: Any, /) -> None: ...
    def __matmul__(self, other: Self, /) -> Self: ...
    def __mul__(self, other: Any, /) -> Self: ...
    def __sub__(self, other: Any, /) -> Self: ...
    def __add__(self, other: Any, /) -> Self: ...
    def __float__(self) -> float: ...

class ArrayNamespace[T: ArrayLike](Protocol):

    newaxis: Any
    float32: DType
    float64: DType

    def __array_namespace_info__(self) -> Any: ...
    def asarray(self, obj: Any, /, *, dtype: DType = None, device: Device = None, copy: bool | None = None) -> T: ...
    def zeros(self, shape: int | tuple[int, ...], *, dtype: DType = None, device: Device = None) -> T: ...
    def eye(self, n_rows: int, /, *, dtype: DType = None, device: Device = None) -> T: ...
    def sum(self, x: T, /, *, axis: Any = None) -> T: ...
    def sqrt(self, x: T, /) -> T: ...
    def abs(self, x: T, /) -> T: ...
    def max(self, x: T, /, *, axis: Any = None) -> T: ...
    def argsort(self, x: T, /, *, axis: int = -1) -> T: ...
    def take(self, x: T, indices: T, /, *, axis: int | None = None) -> T: ...
    def all(self, x: T, /, *, axis: Any = None) -> T: ...
    def isfinite(self, x: T, /) -> T: ...
    def isdtype(self, dtype: DType, kind: Any) -> bool: ...
    def matmul(self, x1: T, x2: T, /) -> T: ...
