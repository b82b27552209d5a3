# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Sequence

from .backend import ArrayLike, is_dense, shape_size, size
from .errors import ShapeMismatchError

def check_operand(name: str, array: ArrayLike, shape: Sequence[int], check_dense: bool = True) -> None:
    """Check that ``array`` is a dense flat buffer holding an array of the given shape."""
    if array.ndim != 1:
        raise ShapeMismatchError(f"Buffer must be one-dimensional, got {array.ndim} dimensions",
                                 operand=name)
    if check_dense and not is_dense(array):
        raise ShapeMismatchError("Buffer must be dense", operand=name)
    if size(array) != shape_size(shape):
        raise ShapeMismatchError(f"Buffer holds {size(array)} elements, but shape {tuple(shape)} "\
                                 f"requires {shape_size(shape)}", operand=name)

def check_operands(arrays: Sequence[ArrayLike],
                   shapes: Sequence[Sequence[int]],
                   check_dense: bool = True) -> None:
    for name, array, shp in zip(("A", "B", "C"), arrays, shapes):
        check_operand(name, array, shp, check_dense)
