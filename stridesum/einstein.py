# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Sequence, TypeVar

from .backend import ArrayLike, MemoryOrder
from .label import Label
from .plan import ContractionPlan, check_labels, plan
from .operand import check_operands
from .operation import ContractionOperation
from .executor import execute

T = TypeVar("T", bound=ArrayLike)

def einstein(
        a: T, b: T, c: T,
        shape_a: Sequence[int],
        shape_b: Sequence[int],
        shape_c: Sequence[int],
        labels_a: Sequence[int | Label],
        labels_b: Sequence[int | Label],
        labels_c: Sequence[int | Label],
        *,
        operation: ContractionOperation,
        order: MemoryOrder = "C",
        check_dense: bool = True) -> ContractionPlan:
    """
    Validate, plan and execute the contraction of the flat buffers ``a`` and ``b``
    into ``c``. The output buffer is accumulated into, not overwritten. Returns the
    plan that was executed.
    """
    shapes, _ = check_labels(shape_a, shape_b, shape_c, labels_a, labels_b, labels_c)
    check_operands((a, b, c), shapes, check_dense)
    cplan = plan(shape_a, shape_b, shape_c, labels_a, labels_b, labels_c, order=order)
    execute(cplan, a, b, c, operation)
    return cplan
