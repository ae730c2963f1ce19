"""Command line entry point: solve one contest problem from an input file or stdin."""

import argparse
import sys

from . import (
    abc341,
    abc343,
    abc344,
    abc345,
    abc346,
    abc347,
    abc350,
    abc356,
    abc357,
    abc358,
    abc361,
    abc362,
    abc363,
    abc372,
    abc373,
    abc375,
    abc429,
    abc441,
)

SOLVERS = {
    "341": abc341.run,
    "343": abc343.run,
    "344": abc344.run,
    "345": abc345.run,
    "346": abc346.run,
    "347": abc347.run,
    "350": abc350.run,
    "356": abc356.run,
    "357": abc357.run,
    "358": abc358.run,
    "361": abc361.run,
    "362": abc362.run,
    "363": abc363.run,
    "372": abc372.run,
    "373": abc373.run,
    "375": abc375.run,
    "429": abc429.run,
    "441": abc441.run,
}


def _contest_key(name):
    name = name.strip().lower()
    return name[3:] if name.startswith("abc") else name


def main(argv=None):
    """Read a problem input, solve it and print the answer; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="abcsolve", description="Solve a contest problem from its input."
    )
    parser.add_argument("contest", help="contest number, e.g. 341 or abc341")
    parser.add_argument("problem", help="problem letter, e.g. A")
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)

    solver = SOLVERS.get(_contest_key(args.contest))
    if solver is None:
        parser.error(f"unknown contest: {args.contest}")

    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        output = solver(args.problem, text)
    except (OSError, ValueError) as exc:
        print(f"abcsolve: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())