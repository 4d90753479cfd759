# segdeque

`segdeque` provides a segmented double-ended queue and the sequence types
it is built from:

- `DynamicArray` (`segdeque.dynamic_array`) is a resizable array with
  bounds-checked access.
- `LinkedList` (`segdeque.linked_list`) is a singly linked list.
- `MutableArraySequence` and `ImmutableArraySequence`
  (`segdeque.array_sequence`) are sequences backed by a dynamic array.
- `MutableListSequence` and `ImmutableListSequence`
  (`segdeque.list_sequence`) are sequences backed by a linked list.
- `SegmentedDeque` (`segdeque.segmented_deque`) is a deque that stores its
  elements in array segments of bounded size, chained in a list.

All of these sequences implement the `Sequence` interface from
`segdeque.sequence`. The interface provides `get_first`, `get_last`, `get`,
`get_subsequence`, `append`, `prepend`, `insert_at`, `concat` and
`remove_at`, and also supports `len()`, indexing and iteration.

- **Mutable sequences** change in place and return themselves. Their
  `concat` returns a new sequence.
- **Immutable sequences** always return a new sequence and leave the
  original untouched.

A sequence raises `IndexError` in two cases: for an index outside it,
negative indexes included, and for a read of the first or last element when
it is empty. Indexes are never wrapped around or clamped.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Using the deque

```python
from segdeque.segmented_deque import SegmentedDeque

dq = SegmentedDeque(4)          # at most four elements per segment (default 16)
for value in (5, 3, 8, 1):
    dq.push_back(value)
dq.push_front(10)

len(dq)                          # 5
dq.front(), dq.back()            # (10, 1)

dq.sort()                        # sorts in place
list(dq)                         # [1, 3, 5, 8, 10]

evens = dq.where(lambda x: x % 2 == 0)         # new deque: 8, 10
doubled = dq.map(lambda x: x * 2)              # new deque: 2, 6, 10, 16, 20
total = dq.reduce(lambda acc, x: acc + x, 0)   # 27

both = dq.concat(evens)          # new deque: 1, 3, 5, 8, 10, 8, 10
both.find_subsequence(evens)     # 3 (returns -1 when there is no match)
```

On a `SegmentedDeque`, these operations change the deque in place:

- `push_front`, `push_back`, `pop_front` and `pop_back`;
- `append` and `prepend`, which also return the deque;
- `sort` and `clear`.

These operations return a new deque: `concat`, `merge`, `map`, `where`,
`get_subsequence`, `insert_at` and `remove_at`. `get_subsequence(start,
end)` includes both ends. `concat` and `merge` only accept another
`SegmentedDeque` and raise `TypeError` for any other kind of sequence.
`copy()` returns an independent deque.

A deque of functions has some special behaviour:

- `sort()` leaves it unchanged;
- `find_subsequence` returns -1;
- `reduce` raises `TypeError` when its starting value is a function.

## Element types

`segdeque.element_types` describes the kinds of values the command
interpreter handles: `IntType`, `DoubleType`, `ComplexType`, `StringType`,
`FunctionType` and `PersonType`. Each type has three operations:

- `add` combines two values. For functions and persons it returns `None`.
- `format` gives the printed form of a value. Doubles use six significant
  digits. Complex numbers print as `(real + imagi)`. Functions print as
  `Function:<name>`.
- `scale` multiplies a value by a factor written as text. Scaling a string
  repeats it, and a negative count gives an empty string. Functions and
  persons cannot be scaled: `scale` raises `TypeError`.

`StringType.product(a, b)` returns every two-character pairing of a
character of `a` with a character of `b`. `FunctionType` keeps a table of
functions that `add_function` extends and indexing reads.

`Complex` is a frozen dataclass with `real` and `imag` parts. `Complex`
values are ordered by magnitude. Two of them are equal when both of their
parts agree to within 1e-9.

## The command interpreter

The `segdeque` command reads commands from a file, one per line, and writes
the results to another file:

```
segdeque                                  # input.txt -> output.txt
segdeque --input cmds.txt --output results.txt
```

`python -m segdeque.menu` does the same. By default both files are in the
current directory. If a file cannot be opened, the command prints
``CAN`T OPEN <file>`` on standard error and exits with status 1.

Progress messages are logged to standard output.

Empty lines and lines starting with `#` are skipped. A blank line follows
the output of each command. A command that fails writes `ERROR: <message>`,
and processing continues with the next line.

| Command | Effect |
| --- | --- |
| `CREATE <name> <TYPE>` | create a deque and make it active; TYPE is `INT`, `DOUBLE`, `STRING`, `COMPLEX`, `FUNCTION` or `PERSON` |
| `SELECT <name>` | make an existing deque active |
| `LIST` | list the names of all deques in alphabetical order |
| `PUSH_FRONT <value>` / `PUSH_BACK <value>` | add a value to the active deque |
| `POP_FRONT` / `POP_BACK` | remove a value and report it |
| `PRINT` | show the contents of the active deque |
| `SORT` | sort the active deque in place |
| `CONCAT <other>` | store the active deque followed by `<other>` as `<active>_CONCAT` |
| `MERGE <other>` | store the active deque followed by `<other>` as `<active>_MERGED` |
| `WHERE <op> <value>` | store the elements for which `element <op> value` holds (`==`, `>`, `<`) as `<active>_FILTERED` |
| `MAP <factor>` | store every element scaled by the factor as `<active>_MAPPED` |

`CONCAT` and `MERGE` report an error when the two deques hold different
element types. A command that needs an active deque reports an error when no
deque has been created or selected.

Values are written as follows:

- A `COMPLEX` value is written `real,imag`, for example `1.5,-2`.
- A `FUNCTION` value is one of `inc1`, `inc2` or `inc3`.
- Every value, `PERSON` values included, is a single word, because a command
  line is split on whitespace.

Here is an example input file:

```
# integers
CREATE numbers INT
PUSH_BACK 5
PUSH_BACK 2
PUSH_FRONT 9
SORT
PRINT
WHERE > 3
MAP 10
LIST
```

The interpreter can also be used from Python through
`segdeque.menu.MenuDeque`. Its `process_command(line, out)` method writes to
any text stream. The module also provides three helpers:

- `parse_value` turns text into an element of a given type;
- `evaluate_predicate` applies a comparison;
- `DequeWrapper` pairs a deque with its element type.