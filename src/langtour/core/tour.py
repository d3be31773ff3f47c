# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/langtour/core/tour.py
from __future__ import annotations

# Re-export import-safe implementations (no I/O here)
from .records import Student, Vector3
from .values import destructured, format_triple, iter_by_index, make_triple, positional

__all__ = [
    "Student",
    "Vector3",
    "make_triple",
    "positional",
    "destructured",
    "format_triple",
    "iter_by_index",
]

# Optional: dev-only smoke test (no filesystem access)
if __name__ == "__main__":
    t = make_triple(500, 6.4, 1)
    assert positional(t) == destructured(t)
    s = Student.new("Ram", "ram@example.com", 20, 75, "Physics")
    print("tour dev smoke OK;", format_triple(t), "/", s.get_marks())
