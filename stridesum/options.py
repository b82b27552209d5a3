# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Literal, Any, Self, overload
from enum import Enum
import threading

from .backend import ArrayNamespace, MemoryOrder
from .operation import OperationKind, OPERATION_KINDS

class OptionType(Enum):
    PLAN = 0
    EXECUTE = 1

class Options:

    key: Hashable

    def __init__(self, namespace: ArrayNamespace, category: OptionType):
        self.key = (namespace, category, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class PlanOptions(Options):
    """
    Context manager for planning options.
    """

    #: Memory order of the flat operand buffers.
    order: MemoryOrder
    #: Whether operand buffers are checked for dense storage.
    check_dense: bool

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            order: MemoryOrder = "C",
            check_dense: bool = True):
        if order not in ("C", "F"):
            raise ValueError(f"Memory order must be 'C' or 'F', got {order!r}")
        self.order = order
        self.check_dense = check_dense
        super().__init__(namespace, OptionType.PLAN)

class ExecutionOptions(Options):
    """
    Context manager for execution options.
    """

    #: Combine-and-accumulate step, 'auto' selects it by the output element type.
    operation: OperationKind

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            operation: OperationKind = "auto"):
        if operation not in OPERATION_KINDS:
            raise ValueError(f"Unknown operation {operation!r}, expected one of {OPERATION_KINDS}")
        self.operation = operation
        super().__init__(namespace, OptionType.EXECUTE)

_opts: dict[Any, Options] = {}

@overload
def get_options(namespace: ArrayNamespace, otype: Literal[OptionType.PLAN]) -> PlanOptions: ...
@overload
def get_options(namespace: ArrayNamespace, otype: Literal[OptionType.EXECUTE]) -> ExecutionOptions: ...
# implementation
def get_options(namespace: ArrayNamespace, otype: OptionType) -> Options:
    global _opts
    key = (namespace, otype, threading.get_ident())
    if key in _opts:
        return _opts[key]
    else:
        raise KeyError("No options set for the current thread.")

def set_options(opts: PlanOptions | ExecutionOptions) -> None:
    global _opts
    _opts[opts.key] = opts
