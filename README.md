# montyvm

An interpreter for Monty bytecode files. Monty is a small language that works
on one list of integers. The list can act as a stack (last in, first out) or as
a queue (first in, first out).

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Running a program

```
monty program.m
```

The command takes exactly one argument, the path of a bytecode file. If you
give it any other number of arguments, it prints `USAGE: monty file` to
standard error and exits with status 1. If the file cannot be opened, it prints
`Error: Can't open file <name>` and exits with status 1.

The file is read as UTF-8, one line at a time, and each instruction runs in
order. If an instruction fails, the interpreter writes the error message to
standard error and stops with exit status 1. Any output printed before the
error is kept. A program that runs to the end exits with status 0.

## The language

Each line holds at most one instruction. Words on a line are separated by
spaces. Words after the ones an instruction needs are ignored. Blank lines do
nothing. A line whose first word starts with `#` is a comment.

| Opcode  | Effect |
|---------|--------|
| `push n` | Adds the integer `n`. In stack mode it goes on top. In queue mode it goes at the back. `n` is an optional `-` followed by digits. |
| `pall`  | Prints every value, starting from the top. |
| `pint`  | Prints the value on top. |
| `pop`   | Removes the value on top. |
| `swap`  | Swaps the top two values. |
| `add`   | Replaces the top two values with their sum. |
| `sub`   | Replaces the top two values with the second minus the top. |
| `mul`   | Replaces the top two values with their product. |
| `div`   | Replaces the top two values with the second divided by the top. |
| `mod`   | Replaces the top two values with the remainder of the second divided by the top. |
| `pchar` | Prints the top value as an ASCII character. The value must be between 0 and 127. |
| `pstr`  | Prints characters from the top down, then a newline. It stops at a value of 0 or less, at a value above 127, or at the bottom. |
| `rotl`  | Moves the top value to the bottom. |
| `rotr`  | Moves the bottom value to the top. |
| `stack` | Switches to stack mode. This is the default. |
| `queue` | Switches to queue mode. |
| `nop`   | Does nothing. |

Values are signed 32-bit integers. A result that overflows wraps around.
Division and remainder round toward zero.

Example, `program.m`:

```
push 1
push 2
push 3
pall
add
pint
```

Output:

```
3
2
1
5
```

## Error messages

Every error message starts with the number of the line where the error
happened:

```
L2: usage: push integer
L3: can't add, stack too short
L4: can't pop an empty stack
L4: can't pint, stack empty
L5: division by zero
L6: can't pchar, value out of range
L7: unknown instruction foo
```

## Using it from Python

`montyvm.interpreter.Interpreter` runs bytecode and writes its output to any
text stream. The default stream is standard output. `run` takes any iterable of
lines and numbers them from 1. `execute_line` runs one line with the number you
give it. A failure raises `MontyError`. The exception has `line_number` and
`message` attributes, and its string form is the full `L<n>: ...` message.

```python
import sys
from montyvm.interpreter import Interpreter, MontyError

interp = Interpreter(sys.stdout)
try:
    interp.run(["push 4", "push 6", "mul", "pall"])
except MontyError as exc:
    print(exc, file=sys.stderr)
```

`montyvm.interpreter.tokenize` splits a line into its words.

`montyvm.stack.MontyStack` is the data structure on its own:

- `push`, `pop`, `peek`, `swap`, `add`, `sub`, `mul`, `div`, `mod`, `rotl` and `rotr` work on the values.
- `use_stack` and `use_queue` switch the mode. The current mode is in `mode`, as a value of the `Mode` enum.
- `len()` gives the number of values.
- Iterating over it yields the values from the top down.

When an operation cannot be done, it raises `StackError`.
`montyvm.stack.is_integer` checks whether a string is a valid `push` argument.

## Running the tests

```
pytest
```