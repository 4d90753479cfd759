"""Element kinds the deque can hold, with their arithmetic and formatting."""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_SPACE = "[ \t\n\v\f\r]*"
_INT_PREFIX = re.compile(_SPACE + r"([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    _SPACE
    + r"([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_COMPLEX_EPS = 1e-9


def _parse_int(text: str) -> int:
    """Parse the leading 32-bit integer of ``text``, ignoring what follows."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    """Parse the leading floating-point number of ``text``, ignoring what follows."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    token = match.group(1)
    value = float(token)
    if math.isinf(value) and "inf" not in token.lower():
        raise ValueError(f"number out of range: {text!r}")
    return value


def _format_double(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True, eq=False)
class Complex:
    """A complex number ordered by magnitude and compared with a tolerance."""

    real: float = 0.0
    imag: float = 0.0

    def _magnitude(self) -> float:
        return math.sqrt(self.real * self.real + self.imag * self.imag)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self._magnitude() < other._magnitude()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return (
            abs(self.real - other.real) < _COMPLEX_EPS
            and abs(self.imag - other.imag) < _COMPLEX_EPS
        )


class ElementType(ABC):
    """Operations the deque menu needs for one kind of element."""

    @abstractmethod
    def add(self, a: Any, b: Any) -> Any:
        """Return the sum of two elements."""

    @abstractmethod
    def format(self, value: Any) -> str:
        """Return the printed form of an element."""

    @abstractmethod
    def scale(self, value: Any, factor: str) -> Any:
        """Return ``value`` multiplied by the number written in ``factor``."""


class IntType(ElementType):
    """32-bit style integers."""

    def add(self, a: int, b: int) -> int:
        return a + b

    def format(self, value: int) -> str:
        return str(value)

    def scale(self, value: int, factor: str) -> int:
        return value * _parse_int(factor)


class DoubleType(ElementType):
    """Floating-point numbers printed with six significant digits."""

    def add(self, a: float, b: float) -> float:
        return a + b

    def format(self, value: float) -> str:
        return _format_double(value)

    def scale(self, value: float, factor: str) -> float:
        return value * _parse_float(factor)


class ComplexType(ElementType):
    """Complex numbers printed as ``(real + imagi)``."""

    def add(self, a: Complex, b: Complex) -> Complex:
        return Complex(a.real + b.real, a.imag + b.imag)

    def format(self, value: Complex) -> str:
        return f"({_format_double(value.real)} + {_format_double(value.imag)}i)"

    def scale(self, value: Complex, factor: str) -> Complex:
        multiplier = _parse_float(factor)
        return Complex(value.real * multiplier, value.imag * multiplier)


class StringType(ElementType):
    """Text values; scaling repeats the text."""

    def add(self, a: str, b: str) -> str:
        return a + b

    def product(self, a: str, b: str) -> list[str]:
        """Return every two-character pairing of a character of ``a`` with one of ``b``."""
        return [first + second for first in a for second in b]

    def format(self, value: str) -> str:
        return value

    def scale(self, value: str, factor: str) -> str:
        return value * max(_parse_int(factor), 0)


class FunctionType(ElementType):
    """Integer functions; they can be stored and printed but not combined."""

    def __init__(self) -> None:
        self._functions: list[Callable[[int], int]] = []

    def add(self, a: Callable[[int], int], b: Callable[[int], int]) -> Optional[Any]:
        """Functions have no sum; nothing is produced."""
        return None

    def add_function(self, func: Callable[[int], int]) -> None:
        """Register ``func`` in this type's function table."""
        self._functions.append(func)

    def __getitem__(self, index: int) -> Callable[[int], int]:
        if index < 0:
            raise IndexError(f"index {index} out of range")
        return self._functions[index]

    def format(self, value: Callable[[int], int]) -> str:
        name = getattr(value, "__qualname__", type(value).__qualname__)
        return f"Function:{name}"

    def scale(self, value: Callable[[int], int], factor: str) -> Any:
        raise TypeError("Multiplication operation not supported for FunctionType")


class PersonType(ElementType):
    """Person names stored as text; they cannot be added or scaled."""

    def add(self, a: str, b: str) -> Optional[Any]:
        """People have no sum; nothing is produced."""
        return None

    def format(self, value: str) -> str:
        return value

    def scale(self, value: str, factor: str) -> Any:
        raise TypeError("Multiplication operation not supported for PersonType")