# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import logging
from math import prod
from typing import TypeVar

from .backend import ArrayLike
from .plan import ContractionPlan
from .operation import ContractionOperation

logger = logging.getLogger(__name__)

#: Number of innermost axes handled by explicit loops.
INNER_LEVELS = 3

T = TypeVar("T", bound=ArrayLike)

def execute(plan: ContractionPlan, a: T, b: T, c: T, operation: ContractionOperation) -> None:
    """
    Accumulate ``operation`` over every index combination of the plan, writing into
    ``c`` in place. The last three iteration axes are walked by a fixed loop nest, all
    remaining axes by a mixed-radix decomposition of the outer loop counter. The plan
    must come from :func:`stridesum.plan.plan` for buffers of the same shapes.
    """
    if plan.n_iter == 0:
        return

    n = len(plan.iter_dims)
    sa, sb, sc = plan.strides_a[1:], plan.strides_b[1:], plan.strides_c[1:]
    n_outer = max(n - INNER_LEVELS, 0)

    # inner levels padded with size one, stride zero
    pad = INNER_LEVELS - (n - n_outer)
    dims = (1,) * pad + plan.iter_dims[n_outer:]
    sa_in = (0,) * pad + sa[n_outer:]
    sb_in = (0,) * pad + sb[n_outer:]
    sc_in = (0,) * pad + sc[n_outer:]
    dim1, dim2, dim3 = dims

    outer_iter = plan.n_iter // prod(dims)
    logger.debug("executing %s: %d outer iterations over inner block %s", plan, outer_iter, dims)

    for i in range(outer_iter):
        ia, ib, ic = plan.strides_a[0], plan.strides_b[0], plan.strides_c[0]
        sub = i
        for j in range(n_outer):
            idx = sub % plan.iter_dims[j]
            ia += sa[j] * idx
            ib += sb[j] * idx
            ic += sc[j] * idx
            sub //= plan.iter_dims[j]

        ia1, ib1, ic1 = ia, ib, ic
        for _ in range(dim1):
            ia2, ib2, ic2 = ia1, ib1, ic1
            for _ in range(dim2):
                ia3, ib3, ic3 = ia2, ib2, ic2
                for _ in range(dim3):
                    c[ic3] = operation(a[ia3], b[ib3], c[ic3])
                    ia3 += sa_in[2]
                    ib3 += sb_in[2]
                    ic3 += sc_in[2]
                ia2 += sa_in[1]
                ib2 += sb_in[1]
                ic2 += sc_in[1]
            ia1 += sa_in[0]
            ib1 += sb_in[0]
            ic1 += sc_in[0]
