from typing import TypeAlias
import numpy as np
from numpy.typing import NDArray

ndarray_1d: TypeAlias = NDArray[np.floating]
ndarray_2d: TypeAlias = NDArray[np.floating]
Matrix3x3: TypeAlias = NDArray[np.float64]
