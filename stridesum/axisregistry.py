# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Sequence
from math import prod

from .label import Axis, Label
from .errors import AxisMismatchError

class AxisRegistry:
    """
    Sizes of all named axes of a contraction, in order of first appearance.
    Every reuse of an axis is checked against the size recorded first.
    """

    _sizes: dict[Axis, int]
    _origin: dict[Axis, str]

    def __init__(self) -> None:
        self._sizes = {}
        self._origin = {}

    def register(self, axis: Axis, size: int, operand: str) -> None:
        if axis not in self._sizes:
            self._sizes[axis] = size
            self._origin[axis] = operand
        elif self._sizes[axis] != size:
            raise AxisMismatchError(f"{axis} has size {size}, but operand "\
                                    f"{self._origin[axis]} introduced it with size {self._sizes[axis]}",
                                    operand=operand)

    def scan(self, shape: Sequence[int], labels: Sequence[Label], operand: str) -> None:
        for size, label in zip(shape, labels):
            if isinstance(label, Axis):
                self.register(label, size, operand)

    def sorted_axes(self) -> list[tuple[Axis, int]]:
        """Axes sorted by ascending size, equal sizes keep their order of appearance."""
        return sorted(self._sizes.items(), key=lambda item: item[1])

    def n_iter(self) -> int:
        return prod(self._sizes.values())

    def __len__(self) -> int:
        return len(self._sizes)
