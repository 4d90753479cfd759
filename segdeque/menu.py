"""Text command interpreter that manages a set of named segmented deques."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import Any, Optional, TextIO

from segdeque.element_types import (
    Complex,
    ComplexType,
    DoubleType,
    ElementType,
    FunctionType,
    IntType,
    PersonType,
    StringType,
    _parse_float,
    _parse_int,
)
from segdeque.segmented_deque import SegmentedDeque

logger = logging.getLogger(__name__)

_FUNCTIONS: dict[str, Callable[[int], int]] = {
    "inc1": lambda x: x + 1,
    "inc2": lambda x: x + 2,
    "inc3": lambda x: x + 3,
}

_TYPES: dict[str, type[ElementType]] = {
    "INT": IntType,
    "DOUBLE": DoubleType,
    "STRING": StringType,
    "COMPLEX": ComplexType,
    "FUNCTION": FunctionType,
    "PERSON": PersonType,
}


class MenuError(Exception):
    """A command could not be carried out."""


def parse_value(text: str, element_type: ElementType) -> Any:
    """Turn the textual form of a value into an element of ``element_type``."""
    if isinstance(element_type, IntType):
        return _parse_int(text)
    if isinstance(element_type, DoubleType):
        return _parse_float(text)
    if isinstance(element_type, (StringType, PersonType)):
        return text
    if isinstance(element_type, ComplexType):
        real, comma, imag = text.partition(",")
        if not comma:
            raise MenuError("INVALID COMPLEX FORMAT. EXPECTED FORMAT: REAL,IMAG")
        return Complex(_parse_float(real), _parse_float(imag))
    if isinstance(element_type, FunctionType):
        try:
            return _FUNCTIONS[text]
        except KeyError:
            raise MenuError(f"UNKNOWN FUNCTION NAME: {text}") from None
    raise MenuError("UNSUPPORTED TYPE")


def evaluate_predicate(op: str, reference: Any, item: Any) -> bool:
    """Compare ``item`` with ``reference`` using ``==``, ``>`` or ``<``."""
    if op == "==":
        return item == reference
    if op == ">":
        return item > reference
    if op == "<":
        return item < reference
    raise MenuError("UNKNOWN PREDICATE OPERATION")


class DequeWrapper:
    """A segmented deque paired with the element type that describes its values."""

    def __init__(
        self, element_type: ElementType, deque: Optional[SegmentedDeque[Any]] = None
    ) -> None:
        self.element_type = element_type
        self.deque: SegmentedDeque[Any] = deque if deque is not None else SegmentedDeque()

    def _derived(self, deque: SegmentedDeque[Any]) -> DequeWrapper:
        return DequeWrapper(self.element_type, deque)

    def _check_compatible(self, other: DequeWrapper) -> None:
        if type(other.element_type) is not type(self.element_type):
            raise MenuError("DEQUE TYPES DIFFER")

    def push_front(self, value: Any) -> None:
        self.deque.push_front(value)

    def push_back(self, value: Any) -> None:
        self.deque.push_back(value)

    def pop_front(self) -> None:
        self.deque.pop_front()

    def pop_back(self) -> None:
        self.deque.pop_back()

    def front(self) -> Any:
        return self.deque.front()

    def back(self) -> Any:
        return self.deque.back()

    def format(self) -> str:
        """Return every element followed by a space, then a newline."""
        parts = (self.element_type.format(value) + " " for value in self.deque)
        return "".join(parts) + "\n"

    def __len__(self) -> int:
        return len(self.deque)

    def clear(self) -> None:
        self.deque.clear()

    def sort(self) -> None:
        self.deque.sort()

    def concat(self, other: DequeWrapper) -> DequeWrapper:
        """Return a new wrapper holding these elements followed by ``other``'s."""
        self._check_compatible(other)
        return self._derived(self.deque.concat(other.deque))

    def where(self, predicate: Callable[[Any], bool]) -> DequeWrapper:
        """Return a new wrapper with the elements for which ``predicate`` holds."""
        return self._derived(self.deque.where(predicate))

    def map(self, operation: str) -> DequeWrapper:
        """Return a new wrapper with every element scaled by ``operation``."""
        result: SegmentedDeque[Any] = SegmentedDeque()
        for value in self.deque:
            result.push_back(self.element_type.scale(value, operation))
        return self._derived(result)

    def merge(self, other: DequeWrapper) -> DequeWrapper:
        """Return a new wrapper holding these elements followed by ``other``'s."""
        self._check_compatible(other)
        return self._derived(self.deque.merge(other.deque))


class MenuDeque:
    """Executes deque commands one line at a time, writing results to a stream."""

    def __init__(self) -> None:
        self.deques: dict[str, DequeWrapper] = {}
        self.active = ""

    def _current(self) -> DequeWrapper:
        try:
            return self.deques[self.active]
        except KeyError:
            raise MenuError("NO ACTIVE DEQUE") from None

    def _other(self, name: str) -> DequeWrapper:
        try:
            return self.deques[name]
        except KeyError:
            raise MenuError(f"DEQUE NOT FOUND: {name}") from None

    def process_command(self, line: str, out: TextIO) -> None:
        """Run one command line; failures are reported on ``out`` as ``ERROR: ...``."""
        logger.info("[SEGDEQMENU] PROCESSING COMMAND: %s", line)
        words = line.split()
        cmd = words[0] if words else ""
        args = words[1:] + [""] * 2
        try:
            self._dispatch(cmd, args, out)
        except (MenuError, ValueError, LookupError, TypeError) as error:
            out.write(f"ERROR: {error}\n")
            logger.error("[SEGDEQMENU] ERROR WHILE PROCESSING COMMAND: %s", error)

    def _dispatch(self, cmd: str, args: list[str], out: TextIO) -> None:
        if cmd == "CREATE":
            name, type_name = args[0], args[1]
            if type_name not in _TYPES:
                raise MenuError(f"UNKNOWN TYPE: {type_name}")
            self.deques[name] = DequeWrapper(_TYPES[type_name]())
            self.active = name
            out.write(f"DEQUE '{name}' CREATED.\n")
            logger.info("[SEGDEQMENU] CREATED DEQUE '%s' OF TYPE %s", name, type_name)
        elif cmd == "SELECT":
            name = args[0]
            if name not in self.deques:
                raise MenuError("DEQUE NOT FOUND")
            self.active = name
            out.write(f"SELECTED DEQUE: {name}\n")
            logger.info("[SEGDEQMENU] SELECTED DEQUE: %s", name)
        elif cmd == "LIST":
            out.write("CREATED DEQUES:\n")
            for name in sorted(self.deques):
                out.write(f"  {name}\n")
            logger.info("[SEGDEQMENU] LIST EXECUTED")
        elif cmd == "PUSH_FRONT":
            deque = self._current()
            deque.push_front(parse_value(args[0], deque.element_type))
            out.write(f"PUSHED TO FRONT: {deque.element_type.format(deque.front())}\n")
            logger.info("[SEGDEQMENU] PUSH_FRONT EXECUTED WITH VALUE: %s", args[0])
        elif cmd == "PUSH_BACK":
            deque = self._current()
            deque.push_back(parse_value(args[0], deque.element_type))
            out.write(f"PUSHED TO BACK: {deque.element_type.format(deque.back())}\n")
            logger.info("[SEGDEQMENU] PUSH_BACK EXECUTED WITH VALUE: %s", args[0])
        elif cmd == "POP_FRONT":
            deque = self._current()
            out.write("POPPED FROM FRONT: ")
            out.write(deque.element_type.format(deque.front()) + "\n")
            deque.pop_front()
            logger.info("[SEGDEQMENU] POP_FRONT EXECUTED")
        elif cmd == "POP_BACK":
            deque = self._current()
            out.write("POPPED FROM BACK: ")
            out.write(deque.element_type.format(deque.back()) + "\n")
            deque.pop_back()
            logger.info("[SEGDEQMENU] POP_BACK EXECUTED")
        elif cmd == "PRINT":
            deque = self._current()
            out.write("DEQUE CONTENTS: " + deque.format())
            logger.info("[SEGDEQMENU] PRINT EXECUTED")
        elif cmd == "SORT":
            self._current().sort()
            out.write("DEQUE SORTED.\n")
            logger.info("[SEGDEQMENU] SORT EXECUTED")
        elif cmd == "CONCAT":
            other_name = args[0]
            other = self._other(other_name)
            result = self._current().concat(other)
            new_name = self.active + "_CONCAT"
            self.deques[new_name] = result
            out.write(f"CONCATENATED {self.active} WITH {other_name} INTO {new_name}\n")
            logger.info("[SEGDEQMENU] CONCAT EXECUTED: %s CONCAT %s", self.active, other_name)
        elif cmd == "WHERE":
            op, text = args[0], args[1]
            deque = self._current()
            reference = parse_value(text, deque.element_type)
            result = deque.where(lambda item: evaluate_predicate(op, reference, item))
            new_name = self.active + "_FILTERED"
            self.deques[new_name] = result
            out.write(f"FILTER APPLIED. NEW DEQUE: {new_name}\n")
            logger.info("[SEGDEQMENU] WHERE EXECUTED WITH OPERATION: %s VALUE: %s", op, text)
        elif cmd == "MAP":
            operation = args[0]
            result = self._current().map(operation)
            new_name = self.active + "_MAPPED"
            self.deques[new_name] = result
            out.write(f"MAPPED WITH OPERATION: {operation}. NEW DEQUE: {new_name}\n")
            logger.info("[SEGDEQMENU] MAP EXECUTED WITH OPERATION: %s", operation)
        elif cmd == "MERGE":
            other_name = args[0]
            other = self._other(other_name)
            result = self._current().merge(other)
            new_name = self.active + "_MERGED"
            self.deques[new_name] = result
            out.write(f"MERGED {self.active} WITH {other_name} INTO {new_name}\n")
            logger.info("[SEGDEQMENU] MERGE EXECUTED WITH DEQUE: %s", other_name)
        else:
            raise MenuError(f"UNKNOWN COMMAND: {cmd}")


def main(argv: Optional[list[str]] = None) -> int:
    """Run every command of the input file, writing the results to the output file."""
    parser = argparse.ArgumentParser(description="Run segmented deque commands from a file.")
    parser.add_argument("--input", default="input.txt", help="command file to read")
    parser.add_argument("--output", default="output.txt", help="file to write results to")
    options = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stdout)

    try:
        source = open(options.input, encoding="utf-8")
    except OSError:
        print(f"CAN`T OPEN {options.input}", file=sys.stderr)
        return 1
    with source:
        try:
            target = open(options.output, "w", encoding="utf-8")
        except OSError:
            print(f"CAN`T OPEN {options.output}", file=sys.stderr)
            return 1
        with target:
            menu = MenuDeque()
            for raw in source:
                line = raw.rstrip("\n")
                if not line or line.startswith("#"):
                    continue
                logger.info("[Main] Processing command: %s", line)
                menu.process_command(line, target)
                target.write("\n")
                target.flush()
    logger.info("[Main] End")
    return 0


if __name__ == "__main__":
    sys.exit(main())