# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/langtour/core/records.py
from __future__ import annotations

import dataclasses
import unicodedata
from dataclasses import dataclass

import numpy as np

__all__ = ["Student", "Vector3", "STUDENT_FIELDS"]

STUDENT_FIELDS = ("name", "email", "age", "marks", "favourite_subject")


def _check_range(value, dtype, label: str) -> int:
    info = np.iinfo(dtype)
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{label} must be an integer, got {type(value).__name__}")
    if not info.min <= int(value) <= info.max:
        raise ValueError(f"{label}={int(value)} outside [{info.min}, {info.max}]")
    return int(value)


_DEBUG_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def _debug_str(s: str) -> str:
    out = []
    for ch in s:
        if ch in _DEBUG_ESCAPES:
            out.append(_DEBUG_ESCAPES[ch])
        elif unicodedata.category(ch)[0] in ("C", "Z") and ch != " ":
            # control, format, separator and unassigned code points
            out.append(f"\\u{{{ord(ch):x}}}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


@dataclass(frozen=True)
class Student:
    """
    A student record. Every field is required; there is no partial state.

    `age` and `marks` are small unsigned integers (0..255).
    """

    name: str
    email: str
    age: int
    marks: int
    favourite_subject: str

    def __post_init__(self):
        for field in ("name", "email", "favourite_subject"):
            value = getattr(self, field)
            if not isinstance(value, str):
                raise TypeError(f"{field} must be str, got {type(value).__name__}")
        object.__setattr__(self, "age", _check_range(self.age, np.uint8, "age"))
        object.__setattr__(self, "marks", _check_range(self.marks, np.uint8, "marks"))

    @classmethod
    def new(cls, name: str, email: str, age: int, marks: int, favourite_subject: str) -> "Student":
        return cls(
            name=name,
            email=email,
            age=age,
            marks=marks,
            favourite_subject=favourite_subject,
        )

    def get_marks(self) -> int:
        return self.marks

    def with_overrides(self, **fields) -> "Student":
        """
        Copy this record, replacing only the named fields.

        The source is left untouched and stays readable.
        """
        unknown = sorted(set(fields) - set(STUDENT_FIELDS))
        if unknown:
            raise TypeError(f"Unknown Student field(s): {unknown}")
        return dataclasses.replace(self, **fields)

    def pretty(self) -> str:
        lines = ["Student {"]
        for field in STUDENT_FIELDS:
            value = getattr(self, field)
            shown = _debug_str(value) if isinstance(value, str) else str(value)
            lines.append(f"    {field}: {shown},")
        lines.append("}")
        return "\n".join(lines)


class Vector3(tuple):
    """Three signed 32-bit integers, addressed only by position."""

    __slots__ = ()

    def __new__(cls, x: int, y: int, z: int):
        comps = tuple(
            _check_range(v, np.int32, f"component {i}") for i, v in enumerate((x, y, z))
        )
        return super().__new__(cls, comps)

    def __repr__(self) -> str:
        return f"Vector3({self[0]}, {self[1]}, {self[2]})"

    def __str__(self) -> str:
        return f"{self[0]}, {self[1]}, {self[2]}"
