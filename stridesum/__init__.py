# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .stridesum import StrideSum
from .label import Axis, Fixed, as_label, as_labels
from .plan import ContractionPlan, plan
from .executor import execute
from .einstein import einstein
from .operation import MultiplyAccumulate, BitwiseOrAccumulate, get_operation
from .errors import StrideSumError, ShapeMismatchError, AxisMismatchError
