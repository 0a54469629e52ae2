"""Command-line entry point: run a Monty bytecode file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .interpreter import Interpreter, MontyError


def main(argv: Sequence[str] | None = None) -> int:
    """Run the bytecode file named in *argv*; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write("USAGE: monty file\n")
        return 1
    filename = args[0]
    try:
        source = open(filename, encoding="utf-8", errors="replace", newline="\n")
    except OSError:
        sys.stderr.write(f"Error: Can't open file {filename}\n")
        return 1

    interpreter = Interpreter(sys.stdout)
    with source:
        try:
            interpreter.run(source)
        except MontyError as error:
            sys.stdout.flush()
            sys.stderr.write(f"{error}\n")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())