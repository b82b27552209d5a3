# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Sequence, TypeVar
from dataclasses import dataclass
from opt_einsum.parser import is_valid_einsum_char

from .backend import ArrayLike, ArrayNamespace, MemoryOrder, device, flatten, unflatten, shape, shape_size
from .label import Axis
from .errors import ShapeMismatchError
from .operation import ContractionOperation, OperationKind, get_operation
from .einstein import einstein

@dataclass(frozen=True, init=False)
class EinsumEquation:
    """
    Equation of the form ``"ij,j->i"`` with one or two operands. Characters repeated
    within an operand select its diagonal, characters missing in the result are summed.
    """

    result: str
    operands: Sequence[str]

    def __init__(self, eq: str) -> None:
        eq = eq.replace(" ", "")
        if eq.count("->") != 1:
            raise ValueError(f"Einsum equation requires exactly one '->', got '{eq}'")
        ops, res_str = eq.split("->")
        op_strs = ops.split(",")
        _check_equation(op_strs, res_str)
        object.__setattr__(self, "result", res_str)
        object.__setattr__(self, "operands", op_strs)

    def labels(self, op: str) -> tuple[Axis, ...]:
        return tuple(Axis(char) for char in op)

    def result_shape(self, shapes: Sequence[Sequence[int]]) -> tuple[int, ...]:
        sizes = {}
        for op_str, shp in zip(self.operands, shapes):
            for char, size in zip(op_str, shp):
                sizes.setdefault(char, size)
        return tuple(sizes[char] for char in self.result)

    def __str__(self) -> str:
        return ",".join(self.operands) + f"->{self.result}"

T = TypeVar("T", bound=ArrayLike)

def einsum(
        xp: ArrayNamespace,
        eq: str,
        *operands: T,
        operation: OperationKind | ContractionOperation = "auto",
        order: MemoryOrder = "C") -> T:
    """
    Contract one or two n-dimensional arrays according to an einsum equation. The
    operands are flattened in the given memory order and contracted into a freshly
    zeroed result.
    """
    equation = EinsumEquation(eq)
    shapes = [shape(op) for op in operands]
    _check_dimensions(equation.operands, shapes)

    dtype = xp.result_type(*operands)
    dev = device(operands[0])
    if isinstance(operation, str):
        operation = get_operation(operation, dtype, xp)
    bufs = [flatten(xp, xp.astype(op, dtype), order) for op in operands]
    labels = [equation.labels(op_str) for op_str in equation.operands]
    if len(operands) == 1:
        bufs.append(xp.full((1,), operation.unit, dtype=dtype, device=dev))
        shapes.append(())
        labels.append(())

    res_shape = equation.result_shape(shapes)
    res = xp.zeros((shape_size(res_shape),), dtype=dtype, device=dev)
    # buffers are produced here, so their storage is not checked again
    einstein(bufs[0], bufs[1], res,
             shapes[0], shapes[1], res_shape,
             labels[0], labels[1], equation.labels(equation.result),
             operation=operation, order=order, check_dense=False)
    return unflatten(xp, res, res_shape, order)

def _check_equation(ops: Sequence[str], res: str) -> None:
    """Check the validity of an einsum equation."""
    if len(ops) not in (1, 2):
        raise ValueError(f"An einsum equation needs one or two operands, got {len(ops)}.")

    for char in "".join([*ops, res]):
        if char in ".->" or not is_valid_einsum_char(char):
            raise ValueError(f"Invalid character '{char}' in einsum equation.")

    if any(char not in ''.join(ops) for char in res):
        raise ValueError("Result dimensions must appear in at least one operand.")

    if len(set(res)) != len(res):
        raise ValueError(f"Duplicate dimensions in the result are not allowed, {res}")

def _check_dimensions(op_strs: Sequence[str], shapes: Sequence[Sequence[int]]) -> None:
    """Check if the operand ranks are compatible with the einsum equation."""
    if len(op_strs) != len(shapes):
        raise ValueError(f"Number of provided operands in the equation "\
                         f"({len(op_strs)}) and in the function call "\
                         f"({len(shapes)}) do not match")
    for name, str_op, shp in zip(("A", "B"), op_strs, shapes):
        if len(str_op) != len(shp):
            raise ShapeMismatchError(f"Equation term '{str_op}' does not match rank {len(shp)}",
                                     operand=name)
