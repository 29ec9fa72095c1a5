"""
NumPy implementation of the LinearAlgebra capability.

All functions follow these conventions:
    - Inputs are treated as read-only; new arrays are returned
    - Scalars are returned as Python floats
    - Shape errors from NumPy propagate unchanged
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


class NumpyLinearAlgebra:
    """
    Default LinearAlgebra backed by NumPy (BLAS under the hood).

    Stateless; a single instance may be shared between predictors.
    """

    @property
    def name(self) -> str:
        return 'numpy'

    def dot(self, x: NDArray[np.floating[Any]], y: NDArray[np.floating[Any]]) -> float:
        return float(np.dot(x, y))

    def append(self, x: NDArray[np.floating[Any]], value: float) -> NDArray[np.floating[Any]]:
        return np.append(x, value)

    def quadratic_form(
        self,
        x: NDArray[np.floating[Any]],
        A: NDArray[np.floating[Any]],
    ) -> float:
        """Compute x' A x without forming an outer product."""
        return float(x @ A @ x)

    def row(self, M: NDArray[np.floating[Any]], i: int) -> NDArray[np.floating[Any]]:
        return M[i]

    def nrow(self, M: NDArray[np.floating[Any]]) -> int:
        return int(M.shape[0])

    def __repr__(self) -> str:
        return "NumpyLinearAlgebra()"
