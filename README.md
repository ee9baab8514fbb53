# sqmatrix

A small square-matrix type with operator support. Every matrix is `n × n`.
A new matrix starts filled with zeros.

## Installation

```
pip install sqmatrix
```

## Usage

```python
from sqmatrix.squaremat import SquareMat

a = SquareMat(2)          # a 2×2 zero matrix
a[0][0] = 4; a[0][1] = 6
a[1][0] = 3; a[1][1] = 8

b = SquareMat(2, 2)       # rows and cols given separately; they must be equal

print(a + b)              # element-wise sum
print(a - b)              # element-wise difference
print(a * b)              # matrix product
print(a * 2.0, 2.0 * a)   # scalar product
print(a % b)              # element-wise (Hadamard) product
print(a % 3)              # element-wise remainder by an integer
print(a / 2)              # scalar division
print(-a)                 # negation
print(~a)                 # transpose
print(a ^ 3, a ** 3)      # non-negative integer power
print(a.determinant())    # 14.0
```

Rows are reached with `a[i]` and are plain lists, so single entries are read
and written with `a[i][j]`. `len(a)` and `a.length` give the size, and
iterating over a matrix yields its rows.

## Rules and errors

- `SquareMat(n)` raises `ValueError` if `n` is not positive;
  `SquareMat(rows, cols)` raises `ValueError` if `rows != cols`.
- A row index outside the matrix raises `IndexError`.
- Combining matrices of different sizes with `+`, `-`, `*` or `%` raises
  `ValueError`.
- `a ^ n` and `a ** n` take an integer `n` and raise `ValueError` for
  negative `n`. `a ^ 0` is the identity matrix.
- A matrix product truncates its running sum to an integer after every term,
  so each entry of the product is a whole number.
- `a / 0` raises `ZeroDivisionError`.
- `a % k` with a number `k` first truncates `k` to an integer and then takes
  the remainder of each entry with `math.fmod`; if that integer is zero, every
  entry of the result is NaN.
- `determinant()` uses cofactor expansion along the first row.

## In-place changes

`a.increment()` adds one to every entry and `a.decrement()` subtracts one;
both change the matrix in place and return the same matrix.

The in-place operators `+=`, `-=`, `*=`, `/=` and `%=` work as well.

## Comparison

Matrices are compared by the sum of their entries, where the running sum is
truncated to an integer after every entry. As a result, two different matrices
with the same sum compare equal, and `<`, `<=`, `>`, `>=` order matrices by
that sum. Matrices are not hashable.

`copy()` (and `copy.copy` / `copy.deepcopy`) returns an independent copy.

## Printing

`str(a)` gives one row per line, each value written in `%g` style and
followed by a space.

## Running the tests

```
pip install -e ".[test]"
pytest
```