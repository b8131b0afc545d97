"""imtuple CLI: print a short tour of the tuple container."""

from __future__ import annotations

import logging
import math
import os
import sys

from . import Char, RenderOptions, Tuple, TupleError


USAGE: str = """\
imtuple [OPTIONS]

Print example tuples and how their elements are accessed.

Options:
  --radius N   Radius used for the circle example (default 5)
  --color      Always highlight nulls, booleans and escapes
  --no-color   Never highlight (also honoured via NO_COLOR)
  --verbose    Log debug output to stderr
  --help       Show this help message
"""

DIVIDER: str = "-" * 60


def circle_properties(radius: int) -> Tuple:
    """Return (name, radius, diameter, area) for a circle."""
    if radius < 0:
        raise ValueError("radius must not be negative")
    return Tuple("Circle", radius, radius * 2, math.pi * radius * radius)


def run_demo(radius: int, options: RenderOptions) -> str:
    lines: list[str] = [DIVIDER]

    sample = Tuple(1, Char("2"), "3", Tuple(4.0, None, "4\t\n", True))
    lines.append("Format of Tuple Printing: " + sample.render(options))

    props = circle_properties(radius)
    lines.append(" ".join(str(v) for v in props))
    lines.append(props.get_str(0) + " has the following properties:")
    lines.append("\tRadius: " + str(props.get_int(1)))
    lines.append("\tDiameter: " + str(props.get_int(2)))
    lines.append("\tTotal Area: " + str(props.get_float(3)))

    numbers = Tuple(1, 2.0, 3)
    i = numbers.get_int(0)
    f = numbers.get_float(1)
    unknown = numbers.get(2)
    lines.append(
        "Int: "
        + str(i)
        + "; Float: "
        + str(f)
        + "; unknownType's class: "
        + type(unknown).__name__
        + " ("
        + numbers.kind(2).display()
        + ")"
    )

    lines.append(DIVIDER)
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    radius = 5
    color: bool | None = None
    verbose = False
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return 0
        elif arg == "--radius":
            if i + 1 >= len(args):
                print("imtuple: --radius requires a value", file=sys.stderr)
                return 2
            try:
                radius = int(args[i + 1])
            except ValueError:
                print("imtuple: invalid radius '" + args[i + 1] + "'", file=sys.stderr)
                return 2
            i += 2
        elif arg == "--color":
            color = True
            i += 1
        elif arg == "--no-color":
            color = False
            i += 1
        elif arg == "--verbose" or arg == "-v":
            verbose = True
            i += 1
        elif arg.startswith("-"):
            print("imtuple: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        else:
            print("imtuple: unexpected argument '" + arg + "'", file=sys.stderr)
            return 2

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    options = RenderOptions.from_env(os.environ)
    if color is not None:
        options = RenderOptions(color=color)

    try:
        out = run_demo(radius, options)
    except (TupleError, ValueError) as e:
        print("imtuple: error: " + str(e), file=sys.stderr)
        return 1
    sys.stdout.write(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
