# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from math import prod
from typing import Any, Literal, Sequence, TypeVar
import array_api_compat as api
from array_api_compat import device
from array_api_compat import size as _size

ArrayLike = Any
ArrayNamespace = Any
DType = Any

T = TypeVar("T", bound=ArrayLike)

#: Memory order of flat buffers, row-major ("C") or column-major ("F").
MemoryOrder = Literal["C", "F"]

def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except Exception as exc:
            raise TypeError("Provided object is not a recognized array or namespace.") from exc
    return api.array_namespace(obj)

def shape_size(shape: Sequence[int]) -> int:
    return prod(shape)

def size(array: ArrayLike) -> int:
    val = _size(array)
    if val is None:
        raise ValueError("Array size is unknown (None).")
    return val

def shape(array: ArrayLike) -> tuple[int, ...]:
    shp = array.shape
    if any(s is None for s in shp):
        raise ValueError("Array shape contains None dimension(s).")
    return shp

def is_dense(array: ArrayLike) -> bool:
    """Check that a flat buffer is stored without gaps."""
    if api.is_numpy_array(array) or api.is_cupy_array(array):
        return bool(array.flags.c_contiguous)
    if api.is_torch_array(array):
        return bool(array.is_contiguous())
    return True

def flatten(xp: ArrayNamespace, array: T, order: MemoryOrder) -> T:
    """Flatten an n-dimensional array into a vector with the given memory order."""
    if order == "F" and array.ndim > 1:
        array = xp.permute_dims(array, tuple(reversed(range(array.ndim))))
    return xp.reshape(array, (-1,))

def unflatten(xp: ArrayNamespace, vector: T, shp: Sequence[int], order: MemoryOrder) -> T:
    """Inverse of :func:`flatten`."""
    if order == "F" and len(shp) > 1:
        array = xp.reshape(vector, tuple(reversed(shp)))
        return xp.permute_dims(array, tuple(reversed(range(len(shp)))))
    return xp.reshape(vector, tuple(shp))
