# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Sequence
from numbers import Integral
from dataclasses import dataclass

from .errors import ShapeMismatchError

@dataclass(frozen=True, init=False)
class Fixed:
    """
    A literal index into an operand axis. The axis is not iterated, it only
    contributes a constant offset to the operand's base position.
    """

    #: Position along the axis.
    index: int

    def __init__(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, Integral):
            raise ShapeMismatchError(f"Fixed index must be an integer, got {index!r}")
        if index < 0:
            raise ShapeMismatchError(f"Fixed index must be non-negative, got {index}")
        object.__setattr__(self, "index", int(index))

    def __str__(self) -> str:
        return f"[{self.index}]"

@dataclass(frozen=True)
class Axis:
    """
    A named iteration axis. Operand axes carrying the same name are iterated
    together and must have the same size.
    """

    #: Identity of the axis, shared by all operands using it.
    name: Hashable

    def __str__(self) -> str:
        return f"Axis({self.name!r})"

Label = Fixed | Axis

def as_label(value: int | Label) -> Label:
    """
    Translate the integer convention into a label. Non-negative integers are literal
    indices, negative integers name iteration axes.
    """
    if isinstance(value, (Fixed, Axis)):
        return value
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ShapeMismatchError(f"Labels must be integers, Fixed or Axis, got {value!r}")
    if value < 0:
        return Axis(int(value))
    return Fixed(int(value))

def as_labels(values: Sequence[int | Label]) -> tuple[Label, ...]:
    return tuple(as_label(v) for v in values)
