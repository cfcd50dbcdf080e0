# sigutil

A small toolkit for numeric and signal-processing scripts. It uses only the
standard library.

## What is inside

- `sigutil.vector`: `Vector` is a fixed-length sequence of floats. It does
  element-wise arithmetic with scalars and with other vectors. Against another
  vector it works over the shorter length and keeps the left operand's length.
  It also has:
  - in-place operators
  - `resize`, which clears the contents unless the length stays the same
  - `fifo` and `unshift` for shifting
  - `carve` for taking out a slice
  - `copy_from`, `fill`, `initialize` and `initialize_with`
  - the reductions `maximum`, `maximum_absolute`, `minimum`,
    `minimum_absolute`, `sum`, `average`, `norm` and `dot`
- `sigutil.matrix`: `Matrix` is made of `Vector` rows and has the properties
  `row_count` and `column_count`.
  - Its operators `+ - * /` work element-wise. `multiply` gives the matrix
    product.
  - It has `transpose`, `determinant`, `cofactor_matrix`, `cofactor`,
    `submatrix`, `resize` and `initialize`.
  - `inverse` uses Gauss–Jordan elimination and raises `SingularMatrixError`
    when the matrix cannot be inverted.
  - Shape mismatches raise `ValueError`.
- `sigutil.interp`: `linear` and `spline` resample evenly spaced samples to a
  new number of points. `spline` is a natural cubic spline and needs at least
  three samples. `root_square_error` compares a result with a reference over
  their common length. Invalid requests raise `InterpolationError`.
- `sigutil.numerics`:
  - `natural_spline_moments` and `natural_spline_value` compute a natural
    cubic spline over arbitrary, strictly increasing knots.
  - `bubble_sort` returns the values in ascending order.
  - `kaiser_alpha` gives the Kaiser window parameter for a stop-band
    attenuation in dB.
- `sigutil.argparser`: a compact command-line parser.
  - Each option is declared with `ArgumentDescription(option, count)`, where
    `option` is the name without its leading `-` and `count` is how many
    values follow it.
  - Every other element of the command line is collected as an input
    argument.
- `sigutil.nodepath`: `NodePath` splits a path into `dirname()`,
  `basename()`, `extension()`, `filename()` and `fullpath()`. The path may use
  `/` or `\` separators.
- `sigutil.timing`: `Stopwatch` measures wall-clock seconds between ticks, and
  `Clockwatch` measures raw counter differences.
  - `Stopwatch.correlate(period)` sleeps for `period` seconds to calibrate the
    stopwatch against its clockwatch. Later ticks are then converted from
    counter ticks.
  - Both take an optional clock or counter function, which is handy for tests.

## Examples

Resample six coarse samples to eleven points:

```python
from sigutil import interp

coarse = [0.0, 1.0, 4.0, 9.0, 16.0, 25.0]
fine_linear = interp.linear(coarse, 11)
fine_spline = interp.spline(coarse, 11)
```

Both results start with the first input sample and end with the last one.

Vector and matrix arithmetic:

```python
from sigutil.vector import Vector
from sigutil.matrix import Matrix

v = Vector([1.0, 2.0, 3.0])
w = v * 2 + 1          # Vector([3.0, 5.0, 7.0])

m = Matrix.from_rows([[2.0, 0.0], [0.0, 4.0]])
product = m.multiply(Matrix.identity(2))
inverse = m.inverse()  # [[0.5, 0.0], [0.0, 0.25]]
```

Parsing a command line where `-o` takes one value and `-v` takes none:

```python
from sigutil.argparser import ArgumentDescription, ArgumentParser

parser = ArgumentParser()
parser.initialize(
    ["-o", "out.csv", "-v", "input.wav"],
    [ArgumentDescription("o", 1), ArgumentDescription("v", 0)],
)
parser.get_option("o")     # "out.csv"
parser.is_enabled("v")     # True
parser.get_argument(0)     # "input.wav"
```

How the parser behaves:

- Give `initialize` the arguments without the program name. It returns
  whether the command line was valid.
- Unknown options are skipped, unless the parser was created with
  `ignore_unknown=False`. In that case they make `initialize` return `False`.
- To parse again, call `finalize` first.
- Asking for an option or argument that is not there returns `""`.
- Querying a parser that is not initialised raises `NotInitializedError`.

Splitting a path:

```python
from sigutil.nodepath import NodePath

path = NodePath("../../ding.dong.wav")
path.dirname()     # "../.."
path.basename()    # "ding.dong"
path.extension()   # "wav"
```

## What it does not do

This is a library only.

- It installs no command-line program.
- It does not read or write data files such as CSV or audio.
- It does not plot anything.

Results are returned as `Vector`, `Matrix`, lists and numbers for the caller
to store or display.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.