# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/values_demo.py
from typing import Sequence

from langtour.core.values import (
    destructured,
    format_triple,
    iter_by_index,
    make_triple,
    positional,
    shadowed_bindings,
)


def main(
    x: int = 10,
    greeting: str = "Hello World",
    triple: Sequence = (500, 6.4, 1),
    fruits: Sequence[str] = ("Orange", "Apples", "Mango"),
):
    # 1) Scalar, then the same name rebound to text
    for line in shadowed_bindings(x, greeting):
        print(line)

    # 2) Tuple: positional access vs destructuring
    t = make_triple(*triple)
    five_hundred, six_point_four, one = positional(t)
    a, b, c = destructured(t)
    print(format_triple((five_hundred, six_point_four, one)))
    print(format_triple((a, b, c)))

    # 3) Fixed-size array walked by index
    arr = tuple(fruits)
    for item in iter_by_index(arr):
        print(item)

    return 0


if __name__ == "__main__":
    main()
