# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of stridesum."""

from .label import Label, Axis, Fixed
from .axisregistry import AxisRegistry
from .plan import ContractionPlan
from .operation import ContractionOperation, MultiplyAccumulate, BitwiseOrAccumulate, OperationKind
from .options import Options, PlanOptions, ExecutionOptions, OptionType
from .errors import StrideSumError, ShapeMismatchError, AxisMismatchError

from .stridesum import StrideSum
