"""Command-line entry point: load a circuit file and run the shell."""

from __future__ import annotations

import sys

from .parsing import parse_file
from .shell import Shell

_FAILURE = 84


def print_hello_world() -> None:
    print("Hello World!")


def main(argv: list[str] | None = None) -> int:
    """Run the simulator on the circuit file given as the single argument."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Invalid number of arguments.", file=sys.stderr)
        return _FAILURE
    shell = Shell()
    try:
        parse_file(shell, args[0])
        shell.run(sys.stdin, sys.stdout)
    except Exception as exc:
        print(exc, file=sys.stderr)
        return _FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())