"""Reading and executing Monty bytecode lines against a :class:`MontyStack`."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from .stack import MontyStack, StackError, is_integer

_DELIMITERS = re.compile(r"[ \n]+")
_NO_OPERATION = "nop"
_COMMENT_PREFIX = "#"


class MontyError(Exception):
    """An error raised while executing a numbered line of bytecode."""

    def __init__(self, line_number: int, message: str) -> None:
        super().__init__(f"L{line_number}: {message}")
        self.line_number = line_number
        self.message = message


def tokenize(line: str) -> list[str]:
    """Split *line* into words separated by spaces and newlines."""
    return [word for word in _DELIMITERS.split(line) if word]


class Interpreter:
    """Executes Monty opcodes, writing their output to a text stream."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.stack = MontyStack()
        self._opcodes: dict[str, Callable[[list[str], int], None]] = {
            "pall": self._pall,
            "pint": self._pint,
            "pop": self._simple(self.stack.pop),
            "swap": self._simple(self.stack.swap),
            "push": self._push,
            "add": self._simple(self.stack.add),
            "sub": self._simple(self.stack.sub),
            "div": self._simple(self.stack.div),
            "mul": self._simple(self.stack.mul),
            "mod": self._simple(self.stack.mod),
            "pchar": self._pchar,
            "pstr": self._pstr,
            "rotl": self._simple(self.stack.rotl),
            "rotr": self._simple(self.stack.rotr),
            "stack": self._simple(self.stack.use_stack),
            "queue": self._simple(self.stack.use_queue),
        }

    def execute_line(self, line: str, line_number: int) -> None:
        """Execute one line of bytecode; blank lines, comments and nop do nothing."""
        words = tokenize(line)
        if not words:
            return
        opcode = words[0]
        if opcode == _NO_OPERATION or opcode.startswith(_COMMENT_PREFIX):
            return
        handler = self._opcodes.get(opcode)
        if handler is None:
            raise MontyError(line_number, f"unknown instruction {opcode}")
        handler(words, line_number)

    def run(self, lines: Iterable[str]) -> None:
        """Execute *lines* in order, numbering them from 1."""
        for line_number, line in enumerate(lines, start=1):
            self.execute_line(line, line_number)

    def _simple(self, operation: Callable[[], object]):
        def handler(words: list[str], line_number: int) -> None:
            try:
                operation()
            except StackError as error:
                raise MontyError(line_number, str(error)) from None

        return handler

    def _push(self, words: list[str], line_number: int) -> None:
        if len(words) < 2 or not is_integer(words[1]):
            raise MontyError(line_number, "usage: push integer")
        self.stack.push(int(words[1]))

    def _pall(self, words: list[str], line_number: int) -> None:
        for value in self.stack:
            self.out.write(f"{value}\n")

    def _pint(self, words: list[str], line_number: int) -> None:
        if not len(self.stack):
            raise MontyError(line_number, "can't pint, stack empty")
        self.out.write(f"{self.stack.peek()}\n")

    def _pchar(self, words: list[str], line_number: int) -> None:
        if not len(self.stack):
            raise MontyError(line_number, "can't pchar, stack empty")
        value = self.stack.peek()
        if not 0 <= value <= 127:
            raise MontyError(line_number, "can't pchar, value out of range")
        self.out.write(f"{chr(value)}\n")

    def _pstr(self, words: list[str], line_number: int) -> None:
        chars = []
        for value in self.stack:
            if not 0 < value <= 127:
                break
            chars.append(chr(value))
        self.out.write("".join(chars) + "\n")