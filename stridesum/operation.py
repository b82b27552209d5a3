# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Literal, Protocol
from dataclasses import dataclass

from .backend import ArrayNamespace, DType

OperationKind = Literal["auto", "multiply", "or"]
OPERATION_KINDS: tuple[OperationKind, ...] = ("auto", "multiply", "or")

class ContractionOperation(Protocol):
    """
    Elementwise combine-and-accumulate step of a contraction. Called with one element
    of each operand, it returns the new value of the output element.
    """

    #: Value of B that leaves A unchanged, used when contracting a single operand.
    unit: Any

    def __call__(self, a: Any, b: Any, c: Any) -> Any: ...

@dataclass(frozen=True)
class MultiplyAccumulate:
    """:math:`c \\leftarrow c + ab`, the summation of Einstein notation."""

    unit: Any = 1

    def __call__(self, a: Any, b: Any, c: Any) -> Any:
        return c + a * b

@dataclass(frozen=True)
class BitwiseOrAccumulate:
    """
    :math:`c \\leftarrow c \\vee (a \\vee b)`. Propagates dependency bit masks instead of
    values, set bits of the output are never cleared.
    """

    unit: Any = 0

    def __call__(self, a: Any, b: Any, c: Any) -> Any:
        return c | (a | b)

def get_operation(kind: OperationKind, dtype: DType, xp: ArrayNamespace) -> ContractionOperation:
    """
    Resolve an operation kind for an output element type. 'auto' selects the bitwise
    or for boolean masks and the multiply-accumulate otherwise.
    """
    if kind == "auto":
        kind = "or" if xp.isdtype(dtype, "bool") else "multiply"
    if kind == "multiply":
        return MultiplyAccumulate()
    if kind == "or":
        return BitwiseOrAccumulate(unit=False if xp.isdtype(dtype, "bool") else 0)
    raise ValueError(f"Unknown operation {kind!r}, expected one of {OPERATION_KINDS}")
