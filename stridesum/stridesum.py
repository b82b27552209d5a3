# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Generic, Hashable, Optional, Sequence, TypeVar
from dataclasses import dataclass

from .backend import ArrayNamespace, MemoryOrder, get_namespace, shape_size
from .label import Axis, Fixed, Label
from .plan import ContractionPlan, plan as _plan
from .executor import execute as _execute
from .einstein import einstein as _einstein
from .einsumequation import einsum as _einsum
from .operation import ContractionOperation, OperationKind, get_operation
from .options import PlanOptions, ExecutionOptions, OptionType, set_options, get_options

NDArray = TypeVar("NDArray", bound=Any)

@dataclass(frozen=True)
class StrideSum(Generic[NDArray]):

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))

        set_options(self.planning())
        set_options(self.execution())

    #-------------------------------------------------------------------------------------------------
    # base wrapper

    def fixed(self, index: int) -> Fixed:
        """
        Label pinning an operand axis to a single index.
        """
        return Fixed(index)

    def axis(self, name: Hashable) -> Axis:
        """
        Label of an iteration axis. Operand axes with the same name are iterated together.
        """
        return Axis(name)

    def zeros(self, shape: Sequence[int], dtype: Any = None) -> NDArray:
        """
        Zero initialized flat buffer for an array of the given shape.
        """
        return self.namespace.zeros((shape_size(shape),), dtype=dtype)

    #-------------------------------------------------------------------------------------------------
    # operation wrapper

    def plan(
            self,
            shape_a: Sequence[int],
            shape_b: Sequence[int],
            shape_c: Sequence[int],
            labels_a: Sequence[int | Label],
            labels_b: Sequence[int | Label],
            labels_c: Sequence[int | Label]
            ) -> ContractionPlan:
        """
        Derive iteration dimensions and operand strides of the contraction
        ``C[...] += A[...] * B[...]``. Affected by the planning context manager.
        """
        opts = self.get_options(OptionType.PLAN)
        return _plan(shape_a, shape_b, shape_c, labels_a, labels_b, labels_c, order=opts.order)

    def execute(
            self,
            plan: ContractionPlan,
            a: NDArray, b: NDArray, c: NDArray,
            operation: Optional[OperationKind | ContractionOperation] = None
            ) -> None:
        """
        Execute a plan on flat buffers, accumulating into ``c`` in place. Affected by
        the execution context manager unless an operation is given.
        """
        _execute(plan, a, b, c, self._operation(operation, c))

    def einstein(
            self,
            a: NDArray, b: NDArray, c: NDArray,
            shape_a: Sequence[int],
            shape_b: Sequence[int],
            shape_c: Sequence[int],
            labels_a: Sequence[int | Label],
            labels_b: Sequence[int | Label],
            labels_c: Sequence[int | Label],
            operation: Optional[OperationKind | ContractionOperation] = None
            ) -> ContractionPlan:
        """
        Check the flat buffers against their shapes, plan and execute the contraction.
        ``c`` has to be zero initialized for a plain contraction. Affected by both
        context managers.
        """
        opts = self.get_options(OptionType.PLAN)
        return _einstein(a, b, c, shape_a, shape_b, shape_c, labels_a, labels_b, labels_c,
                         operation=self._operation(operation, c),
                         order=opts.order,
                         check_dense=opts.check_dense)

    def einsum(
            self,
            eq: str,
            *ops: NDArray,
            operation: Optional[OperationKind | ContractionOperation] = None
            ) -> NDArray:
        """
        Contract one or two n-dimensional arrays with an einsum equation like ``"ij,j->i"``.
        Affected by both context managers.
        """
        if operation is None:
            operation = self.get_options(OptionType.EXECUTE).operation
        order = self.get_options(OptionType.PLAN).order
        return _einsum(self.namespace, eq, *ops, operation=operation, order=order)

    def _operation(
            self,
            operation: Optional[OperationKind | ContractionOperation],
            c: NDArray) -> ContractionOperation:
        if operation is None:
            operation = self.get_options(OptionType.EXECUTE).operation
        if isinstance(operation, str):
            return get_operation(operation, c.dtype, self.namespace)
        return operation

    #-------------------------------------------------------------------------------------------------
    # default options

    def planning(
            self, *,
            order: MemoryOrder = "C",
            check_dense: bool = True) -> PlanOptions:
        """
        Memory order of the flat buffers and storage checks.
        """
        return PlanOptions(namespace=self.namespace, order=order, check_dense=check_dense)

    def execution(
            self, *,
            operation: OperationKind = "auto") -> ExecutionOptions:
        """
        Combine-and-accumulate step used by execute, einstein and einsum.
        """
        return ExecutionOptions(namespace=self.namespace, operation=operation)

    def set_options(self, options: PlanOptions | ExecutionOptions) -> None:
        """
        Set options globally. The options are stored per thread.
        """
        set_options(options)

    def get_options(self, otype: OptionType) -> Any:
        """
        Get the current options.
        """
        return get_options(self.namespace, otype)
