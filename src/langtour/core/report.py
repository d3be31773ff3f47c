# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/langtour/core/report.py
from __future__ import annotations

import dataclasses
import os
from typing import Iterable

import matplotlib.pyplot as plt
import pandas as pd

from .records import STUDENT_FIELDS, Student

__all__ = ["roster", "plot_marks"]


def roster(students: Iterable[Student]) -> pd.DataFrame:
    """One row per student, columns in field order."""
    rows = [dataclasses.asdict(s) for s in students]
    return pd.DataFrame(rows, columns=list(STUDENT_FIELDS))


def plot_marks(students: Iterable[Student], out_path: str) -> str:
    """
    Bar chart of marks per student, saved as PDF.
    Returns the path written.
    """
    df = roster(students)
    if df.empty:
        raise ValueError("plot_marks needs at least one student")

    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    plt.figure(figsize=(6, 4))
    # one slot per row, so students sharing a name never overlap
    xs = range(len(df))
    plt.bar(xs, df["marks"])
    plt.xticks(xs, df["name"])
    plt.ylim(0, 255)
    plt.xlabel("Student")
    plt.ylabel("Marks")
    plt.tight_layout()
    plt.savefig(out_path, format="pdf", bbox_inches="tight")
    plt.close()
    return out_path
