from typing import TypeAlias

import numpy as np

DTYPE = np.float64

Scalar: TypeAlias = float | int | np.float64
Vector: TypeAlias = np.ndarray[tuple[int,], np.dtype[np.float64]]
Array: TypeAlias = np.ndarray[tuple[int, int], np.dtype[np.float64]]
