"""A dense square matrix with arithmetic, comparison and determinant support."""

from __future__ import annotations

import math
import numbers
import operator
from collections.abc import Iterator


def _truncate(value: float) -> int:
    """Truncate toward zero, as an integer accumulator would."""
    return int(value)


class SquareMat:
    """A square matrix of floating point values.

    Rows are reached with ``mat[i]`` and are mutable lists, so single
    entries are read and written with ``mat[i][j]``.
    """

    __hash__ = None  # mutable and compared by value

    def __init__(self, length: int, cols: int | None = None) -> None:
        if length <= 0:
            raise ValueError("Matrix size must be positive.")
        if cols is not None and cols != length:
            raise ValueError("Matrix must be square (rows == cols)")
        self._rows: list[list[float]] = [[0.0] * length for _ in range(length)]

    @classmethod
    def _from_rows(cls, rows: list[list[float]]) -> SquareMat:
        result = cls(len(rows))
        result._rows = [list(row) for row in rows]
        return result

    @property
    def length(self) -> int:
        """Number of rows (and columns)."""
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def copy(self) -> SquareMat:
        """Return an independent copy of this matrix."""
        return SquareMat._from_rows(self._rows)

    def __copy__(self) -> SquareMat:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> SquareMat:
        return self.copy()

    def __getitem__(self, index: int) -> list[float]:
        position = operator.index(index)
        if not 0 <= position < len(self._rows):
            raise IndexError("Index out of range")
        return self._rows[position]

    def __iter__(self) -> Iterator[list[float]]:
        return iter(self._rows)

    def _check_same_size(self, other: SquareMat) -> None:
        if self.length != other.length:
            raise ValueError("Size mismatch")

    def _elementwise(self, other: SquareMat, op) -> SquareMat:
        self._check_same_size(other)
        return SquareMat._from_rows(
            [
                [op(a, b) for a, b in zip(row, other_row)]
                for row, other_row in zip(self._rows, other._rows)
            ]
        )

    def _map(self, func) -> SquareMat:
        return SquareMat._from_rows([[func(v) for v in row] for row in self._rows])

    def _sum(self) -> int:
        total = 0
        for row in self._rows:
            for value in row:
                total = _truncate(total + value)
        return total

    def __add__(self, other: object) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._elementwise(other, operator.add)

    def __sub__(self, other: object) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._elementwise(other, operator.sub)

    def _matmul(self, other: SquareMat) -> SquareMat:
        if self.length != other.length:
            raise ValueError("Matrix multiplication size mismatch")
        columns = list(zip(*other._rows))
        rows = []
        for row in self._rows:
            out_row = []
            for column in columns:
                accumulator = 0
                for a, b in zip(row, column):
                    accumulator = _truncate(accumulator + a * b)
                out_row.append(float(accumulator))
            rows.append(out_row)
        return SquareMat._from_rows(rows)

    def __mul__(self, other: object) -> SquareMat:
        if isinstance(other, SquareMat):
            return self._matmul(other)
        if isinstance(other, numbers.Real):
            scalar = float(other)
            return self._map(lambda v: v * scalar)
        return NotImplemented

    def __rmul__(self, scalar: object) -> SquareMat:
        if isinstance(scalar, numbers.Real):
            return self * scalar
        return NotImplemented

    def __mod__(self, other: object) -> SquareMat:
        if isinstance(other, SquareMat):
            return self._elementwise(other, operator.mul)
        if isinstance(other, numbers.Real):
            divisor = int(other)
            if divisor == 0:
                return self._map(lambda v: math.nan)
            return self._map(lambda v: math.fmod(v, divisor))
        return NotImplemented

    def __truediv__(self, scalar: object) -> SquareMat:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Division by zero")
        divisor = float(scalar)
        return self._map(lambda v: v / divisor)

    def __neg__(self) -> SquareMat:
        return self._map(operator.neg)

    def __invert__(self) -> SquareMat:
        """Return the transpose."""
        return SquareMat._from_rows([list(column) for column in zip(*self._rows)])

    def __xor__(self, power: object) -> SquareMat:
        if not isinstance(power, numbers.Integral):
            return NotImplemented
        exponent = int(power)
        if exponent < 0:
            raise ValueError("Negative powers not supported.")
        result = SquareMat(self.length)
        for i, row in enumerate(result._rows):
            row[i] = 1.0
        base = self.copy()
        while exponent > 0:
            if exponent % 2 == 1:
                result = result._matmul(base)
            base = base._matmul(base)
            exponent //= 2
        return result

    def __pow__(self, power: object) -> SquareMat:
        return self.__xor__(power)

    def increment(self) -> SquareMat:
        """Add one to every entry in place and return self."""
        self._rows = [[v + 1 for v in row] for row in self._rows]
        return self

    def decrement(self) -> SquareMat:
        """Subtract one from every entry in place and return self."""
        self._rows = [[v - 1 for v in row] for row in self._rows]
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._sum() == other._sum()

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._sum() != other._sum()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._sum() < other._sum()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._sum() <= other._sum()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._sum() > other._sum()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._sum() >= other._sum()

    def _assign(self, other: SquareMat) -> SquareMat:
        self._rows = [list(row) for row in other._rows]
        return self

    def __iadd__(self, other: object) -> SquareMat:
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __isub__(self, other: object) -> SquareMat:
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __imul__(self, other: object) -> SquareMat:
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __itruediv__(self, scalar: object) -> SquareMat:
        result = self.__truediv__(scalar)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __imod__(self, scalar: object) -> SquareMat:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self._assign(self.__mod__(scalar))

    def __str__(self) -> str:
        return "".join(
            "".join(f"{value:g} " for value in row) + "\n" for row in self._rows
        )

    def __repr__(self) -> str:
        return f"SquareMat({self._rows!r})"

    def determinant(self) -> float:
        """Return the determinant by cofactor expansion along the first row."""
        return float(_determinant(self._rows))

    def __bool__(self) -> bool:
        return True


def _determinant(rows: list[list[float]]) -> float:
    n = len(rows)
    if n == 1:
        return rows[0][0]
    if n == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    total = 0.0
    for col, pivot in enumerate(rows[0]):
        minor = [row[:col] + row[col + 1:] for row in rows[1:]]
        sign = 1 if col % 2 == 0 else -1
        total += sign * pivot * _determinant(minor)
    return total