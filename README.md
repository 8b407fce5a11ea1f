# cassel

`cassel` looks for cyclotomic integers whose *house* is small. The house is
the largest absolute value among the number's Galois conjugates. Each
candidate is a sum of roots of unity `zeta_n^j`. It is described by its level
`n` and its list of exponents `j`. An exponent equal to the level stands for a
zero summand.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
cassel
```

With no arguments this runs the full built-in search over a fixed list of
levels and lengths. These are kept in `cassel.search.DEFAULT_CASES`. Two
files are written:

- `tables.txt` holds one line `n j cos sin` for each entry of every cosine
  and sine table used.
- `output.txt` holds one line `n; [exponents]` for each candidate found.

Options:

- `--tables FILE` writes the tables to `FILE` instead of `tables.txt`.
- `--output FILE` writes the candidates to `FILE` instead of `output.txt`.
- Positional `LEVEL:LENGTH` arguments, such as `cassel 31:6 65:5`, search
  only the given cases.

Each candidate is also printed to standard output, and `All cases checked!`
is printed at the end. Progress messages of the form
`Checked cases with n = ..., j_2 = ..., j_3 = ...` go to standard error
through `logging`.

An invalid level (below 1) or length (below 3) ends the command with an error
message and exit status 2.

## Library use

```python
from cassel.cyclotomic import cosine_sine_table, CyclotomicIntegerExponents
from cassel.integers import euler_phi, invertible_mod

cos_table, sin_table = cosine_sine_table(7)
x = CyclotomicIntegerExponents(
    exponents=[0, 1, 3, 5], level=7, cos_table=cos_table, sin_table=sin_table
)
x.house_squared()              # about 5.0489
x.compare_house_squared(5.0)   # False: some conjugate reaches 5
list(x.conjugates_abs_squared())

# The tables may be left out; they are then computed from the level.
CyclotomicIntegerExponents(exponents=[0, 1], level=4).house_squared()  # 2.0

euler_phi(12)        # 4
invertible_mod(12)   # [1, 5, 7, 11]
```

`house_squared()` returns `0.0` when there are no conjugates to take.
`compare_house_squared(cutoff)` is `True` when every conjugate's squared
modulus is strictly below `cutoff`.

In `cassel.search`:

- `normalized_level(n0)` gives the level the search uses: `n0` if it is
  even, otherwise `2 * n0`. It raises `ValueError` for `n0 < 1`.
- `search_exponents(n0, length)` yields exponent tuples `(0, j2, j3, ...)` of
  the given length at the normalized level. Cases made redundant by complex
  conjugation, or by sums of roots of order 2, 3, 5 or 7, are skipped. Only
  tuples whose house squared is below `HOUSE_SQUARED_CUTOFF` (5.1) are
  yielded. It raises `ValueError` for `length < 3`.
- `loop_over_roots(n0, length, tables, output)` writes the level's cosine
  and sine table to the text stream `tables`. It writes each case found to
  `output` and returns the cases as a list of lists.
- `main(argv=None)` is the command-line entry point. It returns the exit
  status.

## Limits

The search is single-threaded. Large levels and lengths, such as those in the
default list, can take a long time to run.