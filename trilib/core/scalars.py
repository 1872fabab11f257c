"""Generic scalar contract shared by the kernels.

Coordinates arrive as any array-like of 2 or 3 numbers. Arithmetic is done
in float64 and the result is cast back to the scalar dtype of the inputs,
so integral inputs truncate toward zero and float32 inputs stay float32.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from .errors import InvalidArgumentError
from .logging_utils import get_logger

logger = get_logger('trilib.scalars')

_DIMENSIONS = (2, 3)


def _is_numeric(dtype: np.dtype) -> bool:
    return np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)


def as_coords(value, name: str = 'point') -> np.ndarray:
    """Validate a 2D/3D coordinate tuple and return it as a 1-D array."""
    arr = np.asarray(value)
    if arr.ndim != 1 or arr.shape[0] not in _DIMENSIONS:
        logger.debug("rejecting %s with shape %s", name, arr.shape)
        raise InvalidArgumentError(f"{name} must be a 2D or 3D coordinate tuple, got shape {arr.shape}")
    if not _is_numeric(arr.dtype):
        raise InvalidArgumentError(f"{name} has non-numeric dtype {arr.dtype}")
    return arr


def as_samples(values: Sequence, name: str = 'values') -> np.ndarray:
    """Validate a non-empty 1-D sequence of scalars."""
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise InvalidArgumentError(f"{name} must be a flat sequence of scalars, got shape {arr.shape}")
    if arr.size == 0:
        logger.debug("rejecting empty %s", name)
        raise InvalidArgumentError(f"{name} must not be empty")
    if not _is_numeric(arr.dtype):
        raise InvalidArgumentError(f"{name} has non-numeric dtype {arr.dtype}")
    return arr


def same_dimension(*arrays: np.ndarray) -> int:
    """Return the shared dimension of the arrays or raise on a mismatch."""
    dims = {a.shape[0] for a in arrays}
    if len(dims) != 1:
        raise InvalidArgumentError(f"dimension mismatch: {sorted(dims)}")
    return dims.pop()


def result_dtype(*arrays: np.ndarray) -> np.dtype:
    """Scalar dtype the result of an operation over ``arrays`` is reported in."""
    return np.result_type(*arrays)


def cast(value, dtype: np.dtype):
    """Cast a float64 scalar or array back to ``dtype`` (truncating for ints)."""
    if np.ndim(value) == 0:
        return dtype.type(value)
    return np.asarray(value).astype(dtype)


def lift3(arr: np.ndarray) -> np.ndarray:
    """Float64 copy of a coordinate tuple with 2D input placed on z = 0."""
    out = np.zeros(3, dtype=np.float64)
    out[:arr.shape[0]] = arr
    return out


__all__ = ['as_coords', 'as_samples', 'same_dimension', 'result_dtype', 'cast', 'lift3']
