# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/langtour/core/values.py
from __future__ import annotations

from typing import Iterator, Sequence, Tuple

import numpy as np

__all__ = [
    "Triple",
    "make_triple",
    "positional",
    "destructured",
    "format_scalar",
    "format_triple",
    "iter_by_index",
    "shadowed_bindings",
]

# (i32, f64, u8)
Triple = Tuple[np.int32, np.float64, np.uint8]


def _fit_int(value, dtype, label: str):
    info = np.iinfo(dtype)
    if isinstance(value, (bool, np.bool_)):
        raise ValueError(f"{label} must be an integer, got {value!r}")
    try:
        as_int = int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValueError(f"{label} must be an integer, got {value!r}") from exc
    if as_int != value:
        raise ValueError(f"{label} must be an integer, got {value!r}")
    if not info.min <= as_int <= info.max:
        raise ValueError(f"{label}={as_int} outside [{info.min}, {info.max}]")
    return dtype(as_int)


def make_triple(a, b, c) -> Triple:
    """
    Build the heterogeneous (int32, float64, uint8) tuple.

    Raises ValueError when `a` or `c` does not fit its fixed-width type, or
    when `b` is not numeric.
    """
    first = _fit_int(a, np.int32, "int32 slot")
    try:
        second = np.float64(float(b))
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValueError(f"float64 slot must be numeric, got {b!r}") from exc
    third = _fit_int(c, np.uint8, "uint8 slot")
    return (first, second, third)


def positional(t: Triple) -> tuple:
    return (t[0], t[1], t[2])


def destructured(t: Triple) -> tuple:
    a, b, c = t
    return (a, b, c)


def format_scalar(v) -> str:
    """Render a scalar the way a Display formatter would: 6.4 -> '6.4', 1e-7 -> '0.0000001'."""
    if isinstance(v, (float, np.floating)):
        f = float(v)
        if np.isnan(f):
            return "NaN"
        if np.isinf(f):
            return "inf" if f > 0 else "-inf"
        # shortest round-trip digits, never in exponent form
        return np.format_float_positional(f, unique=True, trim="-")
    if isinstance(v, (int, np.integer)):
        return str(int(v))
    return str(v)


def format_triple(values: Sequence) -> str:
    return ", ".join(format_scalar(v) for v in values)


def iter_by_index(arr: Sequence[str]) -> Iterator[str]:
    # loop bound is the array's own length, so indexing never goes out of range
    for i in range(len(arr)):
        yield arr[i]


def shadowed_bindings(first, second) -> tuple[str, str]:
    """
    Bind `x` twice. The second binding hides the first; the first value is
    reported before it goes out of reach and is never modified.
    """
    x = first
    line1 = f"Value of x: {format_scalar(x)}"
    x = str(second)
    line2 = f"Value of x: {x}"
    return line1, line2
