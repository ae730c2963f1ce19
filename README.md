# abcsolve

Solutions to a selection of AtCoder Beginner Contest problems, packaged as
plain Python functions and as a command that reads a problem's input and
prints its answer in the contest's format.

Contests covered: 341, 343, 344, 345, 346, 347, 350, 356, 357, 358, 361,
362, 363, 372, 373, 375, 429 and 441. Not every problem of each contest is
included; asking for a problem letter a module does not solve is an error.

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

The `abcsolve` command takes the contest number (`341` or `abc341`), the
problem letter and, optionally, an input file. Without a file it reads
standard input. The answer is written to standard output:

```
abcsolve 341 A < input.txt
abcsolve abc375 G input.txt
```

If the input cannot be read or is malformed (too few tokens, a token that is
not a number, an unknown problem letter), the command prints a message
starting with `abcsolve:` to standard error and exits with status 1. An
unknown contest number is reported as a usage error.

Run `abcsolve --help` for the full usage.

## From Python

Each contest has its own module, `abcsolve.abc341` through
`abcsolve.abc441`. Every problem is a function taking Python values, and
every module has a `run(problem, text)` function that takes the problem
letter and the raw input text and returns the output text.

```python
from abcsolve.abc341 import alternating_string, kth_divisible, run

alternating_string(4)        # '101010101'
kth_divisible(2, 3, 5)       # 9, the 5th number divisible by exactly one of 2 and 3
run("A", "4\n")              # '101010101\n', same as `abcsolve 341 A`
```

A few more examples:

```python
from abcsolve.abc345 import ceil_divide_by_ten
from abcsolve.abc363 import nth_palindrome
from abcsolve.abc372 import ConnectedComponents

ceil_divide_by_ten(-13)      # -1
nth_palindrome(46)           # 363

components = ConnectedComponents(5)
components.connect(1, 2)
components.kth_largest(1, 1) # 2
```

Where a problem's answer may not exist (for example `min_gift_cost` in
`abcsolve.abc358` or `road_queries` in `abcsolve.abc375` for unreachable
pairs), the function returns `None`; `run` and the command print `-1` in
that case, as the contest expects.

`abcsolve.abc343.pick_digit` picks a random digit; pass your own
`random.Random` as `rng` to make it repeatable.

Invalid arguments, such as an index out of range or a malformed number,
raise `ValueError` rather than producing a partial answer.