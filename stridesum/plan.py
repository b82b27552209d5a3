# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import logging
from typing import Sequence
from dataclasses import dataclass
from math import prod
from numbers import Integral
import opt_einsum as oe

from .backend import MemoryOrder
from .label import Axis, Fixed, Label, as_labels
from .axisregistry import AxisRegistry
from .errors import AxisMismatchError, ShapeMismatchError

logger = logging.getLogger(__name__)

OPERANDS = ("A", "B", "C")

@dataclass(frozen=True)
class ContractionPlan:
    """
    Iteration space of a contraction ``C[...] += A[...] * B[...]``. Every stride vector
    has ``len(iter_dims) + 1`` entries, the first one is the base offset of the operand
    and the remaining ones the flat-buffer step per iteration axis (zero if the operand
    does not use the axis).
    """

    #: Distinct iteration axes, in iteration order.
    axes: tuple[Axis, ...]

    #: Sizes of the iteration axes.
    iter_dims: tuple[int, ...]

    strides_a: tuple[int, ...]
    strides_b: tuple[int, ...]
    strides_c: tuple[int, ...]

    #: Total number of element triples visited.
    n_iter: int

    #: Labels of the operands A, B and C.
    labels: tuple[tuple[Label, ...], tuple[Label, ...], tuple[Label, ...]]

    def __str__(self) -> str:
        symbols = {axis: oe.get_symbol(i) for i, axis in enumerate(self.axes)}
        ops = ["".join(symbols[l] if isinstance(l, Axis) else str(l) for l in labels)
               for labels in self.labels]
        return f"{ops[0]},{ops[1]}->{ops[2]}"

def plan(shape_a: Sequence[int],
         shape_b: Sequence[int],
         shape_c: Sequence[int],
         labels_a: Sequence[int | Label],
         labels_b: Sequence[int | Label],
         labels_c: Sequence[int | Label],
         *,
         order: MemoryOrder = "C") -> ContractionPlan:
    """
    Derive the iteration space and per operand strides for the contraction of A and B
    into C. Negative integer labels (or :class:`Axis` labels) name iteration axes,
    non-negative ones (or :class:`Fixed` labels) pin an axis to a single index.
    """
    if order not in ("C", "F"):
        raise ValueError(f"Memory order must be 'C' or 'F', got {order!r}")
    shapes, labels = check_labels(shape_a, shape_b, shape_c, labels_a, labels_b, labels_c)
    if len(labels[2]) > len(labels[0]) + len(labels[1]):
        raise AxisMismatchError(f"Result has {len(labels[2])} labels, but the inputs "\
                                f"only have {len(labels[0]) + len(labels[1])} together")

    registry = AxisRegistry()
    for name, shp, lbls in zip(OPERANDS, shapes, labels):
        registry.scan(shp, lbls, name)

    sorted_axes = registry.sorted_axes()
    axes = tuple(axis for axis, _ in sorted_axes)
    positions = {axis: i for i, axis in enumerate(axes)}
    strides = [operand_strides(shp, lbls, positions, order) for shp, lbls in zip(shapes, labels)]

    res = ContractionPlan(axes=axes,
                          iter_dims=tuple(size for _, size in sorted_axes),
                          strides_a=strides[0],
                          strides_b=strides[1],
                          strides_c=strides[2],
                          n_iter=registry.n_iter(),
                          labels=(labels[0], labels[1], labels[2]))
    logger.debug("planned %s over %s with %d iterations", res, res.iter_dims, res.n_iter)
    return res

def check_labels(shape_a: Sequence[int],
                 shape_b: Sequence[int],
                 shape_c: Sequence[int],
                 labels_a: Sequence[int | Label],
                 labels_b: Sequence[int | Label],
                 labels_c: Sequence[int | Label]
                 ) -> tuple[list[tuple[int, ...]], list[tuple[Label, ...]]]:
    """Check shapes and labels of all operands, returning them normalized."""
    shapes = [tuple(shape_a), tuple(shape_b), tuple(shape_c)]
    labels = [as_labels(labels_a), as_labels(labels_b), as_labels(labels_c)]
    for name, shp, lbls in zip(OPERANDS, shapes, labels):
        _check_operand(name, shp, lbls)
    return [tuple(int(s) for s in shp) for shp in shapes], labels

def axis_strides(shape: Sequence[int], order: MemoryOrder = "C") -> list[int]:
    """Flat-buffer step of each axis of a dense array."""
    if order == "C":
        return [prod(shape[i+1:]) for i in range(len(shape))]
    return [prod(shape[:i]) for i in range(len(shape))]

def operand_strides(shape: Sequence[int],
                    labels: Sequence[Label],
                    positions: dict[Axis, int],
                    order: MemoryOrder = "C") -> tuple[int, ...]:
    strides = [0] * (len(positions) + 1)
    for label, step in zip(labels, axis_strides(shape, order)):
        if isinstance(label, Axis):
            # an axis repeated within one operand walks its diagonal
            strides[1 + positions[label]] += step
        else:
            strides[0] += label.index * step
    return tuple(strides)

def _check_operand(name: str, shape: Sequence[int], labels: Sequence[Label]) -> None:
    if any(isinstance(s, bool) or not isinstance(s, Integral) or s < 0 for s in shape):
        raise ShapeMismatchError(f"Shape must consist of non-negative integers, got {shape}",
                                 operand=name)
    if len(labels) != len(shape):
        raise ShapeMismatchError(f"{len(labels)} labels given for an operand of rank {len(shape)}",
                                 operand=name)
    for i, (size, label) in enumerate(zip(shape, labels)):
        if isinstance(label, Fixed) and label.index >= size:
            raise ShapeMismatchError(f"Fixed index {label.index} is out of range for axis {i} "\
                                     f"of size {size}", operand=name)
