# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/structs_demo.py
from __future__ import annotations

import os
from typing import Sequence

from langtour.core.records import Student, Vector3
from langtour.core.report import plot_marks, roster


def main(
    vector: Sequence[int] = (10, 20, 30),
    student1: dict | None = None,
    overrides: dict | None = None,
    student3: Sequence | None = None,
    table: bool = False,
    outputs_dir: str | None = None,
):
    # 1) Positional record
    vec1 = Vector3(*vector)
    print(f"Vector : {vec1[0]}, {vec1[1]}, {vec1[2]}")

    # 2) Field-literal construction
    s1 = Student(**(student1 if student1 is not None else {
        "name": "Mahendra Dani",
        "email": "mahendra@example.com",
        "age": 20,
        "marks": 98,
        "favourite_subject": "Maths",
    }))

    # 3) Clone-with-overrides: everything not named comes from s1
    s2 = s1.with_overrides(**(overrides if overrides is not None else {
        "name": "Vikram",
        "email": "vikram@example.com",
        "age": 20,
        "marks": 80,
    }))

    # 4) Associated constructor
    if student3 is None:
        student3 = ("Ram", "ram@example.com", 20, 75, "Physics")
    s3 = Student.new(*student3)
    print(f"Student : {s3.pretty()}")

    print(s2.pretty())
    print(f"Marks: {s2.get_marks()}")

    # s1 is still readable after s2 was derived from it
    name1 = s1.name
    name2 = s2.name
    print(f"Names : {name1}, {name2}")

    if table:
        print(roster([s1, s2, s3]).to_string(index=False))

    if outputs_dir is not None:
        out = plot_marks([s1, s2, s3], os.path.join(outputs_dir, "marks.pdf"))
        print("Saved:", out)

    return 0


if __name__ == "__main__":
    main()
