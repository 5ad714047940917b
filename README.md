# rxreciprocal

`rxreciprocal` computes 64-bit fixed-point reciprocals. With one, you can replace
division by a fixed divisor with a multiplication.

For a divisor `d`, the reciprocal is `2**x // d`, where `x` is the largest
exponent that keeps the result below `2**64`.

## Installation

```
pip install rxreciprocal
```

## Usage

```python
from rxreciprocal.reciprocal import reciprocal, reciprocal_fast

reciprocal(3)           # 12297829382473034410
reciprocal(65537)       # 18446462603027742720
reciprocal(0xffffffff)  # 9223372039002259456

reciprocal_fast(13)     # 11351842506898185609, same as reciprocal(13)
```

`reciprocal_fast` returns the same value as `reciprocal` for every divisor.

## Divisors

Both functions take an integer, or any object that supports `__index__`.

- A divisor of `0` raises `ZeroDivisionError`.
- A negative divisor, or one of `2**64` or more, raises `ValueError`.
- A non-integer such as a float raises `TypeError`.

The divisor is not meant to be a power of two. Such a divisor is accepted, but the
exact result does not fit in 64 bits and comes back wrapped to 64 bits. For
example, `reciprocal(4)` returns `0`.

## Running the tests

```
pip install "rxreciprocal[test]"
pytest
```