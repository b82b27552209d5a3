from typing import Sequence
from string import ascii_lowercase
import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#tr.set_default_dtype(tr.float64)
#backends.append(api.array_namespace(tr.zeros(1)))

def rand_data(xp, *shape: int):
    data = np.asarray(np.random.rand(*shape))
    if api.is_torch_namespace(xp):
        return xp.asarray(data)
    else:
        return data

def int_labels(term: str) -> list[int]:
    """Negative integer labels for an einsum term, 'a' -> -1, 'b' -> -2, ..."""
    return [-(ascii_lowercase.index(char) + 1) for char in term]

def flat(xp, data):
    return xp.reshape(xp.asarray(data), (-1,))
