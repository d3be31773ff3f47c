# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/langtour/cli.py
from __future__ import annotations

import argparse
import sys


def _add_structs_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--table", action="store_true", help="Also print the students as a table")
    parser.add_argument("--outputs_dir", default=None, help="Save a marks chart into this folder")


def cmd_values(args: argparse.Namespace) -> None:
    from langtour.demos.values_demo import main

    main()


def cmd_structs(args: argparse.Namespace) -> None:
    from langtour.demos.structs_demo import main

    main(table=args.table, outputs_dir=args.outputs_dir)


def cmd_all(args: argparse.Namespace) -> None:
    cmd_values(args)
    cmd_structs(args)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    p = argparse.ArgumentParser(prog="langtour-demo", description="Run langtour demos")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("values", help="Shadowing, tuples and arrays")
    sp.set_defaults(func=cmd_values)

    sp = sub.add_parser("structs", help="Named and positional records")
    _add_structs_options(sp)
    sp.set_defaults(func=cmd_structs)

    sp = sub.add_parser("all", help="values, then structs")
    _add_structs_options(sp)
    sp.set_defaults(func=cmd_all)

    args = p.parse_args(argv)
    args.func(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
