import copy
import logging
import math
import numbers
from decimal import Decimal
from typing import Generic, Protocol, TypeVar

import numpy as np

from id_counter import DEFAULT_COUNTER, IdCounter

# ---------- configuration ----------
REL_TOL = 1e-9          # float equality, relative
ABS_TOL = 1e-12         # float equality, absolute (components near zero)
PRECISION_SLACK = 10    # multiples of a numpy float type's resolution


class Numeric(Protocol):
    """Element types usable as components: + - * / and unary -."""

    def __add__(self, other): ...
    def __sub__(self, other): ...
    def __mul__(self, other): ...
    def __truediv__(self, other): ...
    def __neg__(self): ...


T = TypeVar("T", bound=Numeric)


class DivideByZero(ZeroDivisionError):
    """The divisor's squared magnitude re² + im² is zero."""


# ---------- formulas over (re, im) pairs ----------
# Every formula reads both input pairs in full before returning a new pair,
# so the caller can commit the result to a receiver in one assignment.
def _add(a, b):
    return a[0] + b[0], a[1] + b[1]


def _sub(a, b):
    return a[0] - b[0], a[1] - b[1]


def _mul(a, b):
    re1, im1 = a
    re2, im2 = b
    return re1 * re2 - im1 * im2, re1 * im2 + im1 * re2


def _div(a, b):
    re1, im1 = a
    re2, im2 = b
    denom = re2 * re2 + im2 * im2
    if denom == 0:
        raise DivideByZero(f"complex division by zero ({re2}, {im2})")
    return (re1 * re2 + im1 * im2) / denom, (im1 * re2 - re1 * im2) / denom


def _components(value):
    """(re, im) of a Complex or a real scalar; None for anything else."""
    if isinstance(value, Complex):
        return value._re, value._im
    if isinstance(value, numbers.Real):
        return value, 0
    # Decimal registers as a Number but not as a Real
    if isinstance(value, numbers.Number) and not isinstance(value, numbers.Complex):
        return value, 0
    return None


def _is_approximate(*values) -> bool:
    """True when tolerance applies: all values are real-like, some inexact."""
    real_like = all(isinstance(v, (numbers.Real, Decimal)) for v in values)
    return real_like and not all(isinstance(v, numbers.Rational) for v in values)


def _tolerance(*values) -> tuple[float, float]:
    """Loosest (rel_tol, abs_tol) any of the float components calls for."""
    rel_tol, abs_tol = REL_TOL, ABS_TOL
    for v in values:
        if isinstance(v, (float, np.floating)):
            slack = PRECISION_SLACK * float(np.finfo(type(v)).resolution)
            rel_tol = max(rel_tol, slack)
            abs_tol = max(abs_tol, slack)
    return rel_tol, abs_tol


class Complex(Generic[T]):
    """
    A complex value over any numeric element type.

    Constructors
    ------------
    Complex()                  -> 0 + 0i
    Complex(re, im)            -> re + im i
    Complex(re, im, counter=c) -> id drawn from `c` instead of the default

    Each instance carries an `id` taken from an `IdCounter` at construction.
    The id is a tracing aid only: it plays no part in arithmetic or equality.
    Binary operators return new values whose id comes from the left-hand
    Complex operand's counter. The in-place operators (+=, -=, *=, /=)
    mutate the receiver and keep its id.

    Division by a value with zero squared magnitude raises `DivideByZero`
    for every element type, floats included.
    """

    __slots__ = ("_re", "_im", "_id", "_counter")

    # ---------- construction ----------
    def __init__(self, re: T = 0, im: T = 0, *, counter: IdCounter | None = None):
        self._re = re
        self._im = im
        self._counter = counter if counter is not None else DEFAULT_COUNTER
        self._id = self._counter.next()

    @classmethod
    def from_complex(cls, z, *, counter: IdCounter | None = None) -> "Complex":
        """Build from a Python `complex` (or anything with .real / .imag)."""
        return cls(z.real, z.imag, counter=counter)

    def _spawn(self, pair) -> "Complex":
        return Complex(pair[0], pair[1], counter=self._counter)

    def copy(self) -> "Complex":
        """Same components, fresh id."""
        return self._spawn((self._re, self._im))

    __copy__ = copy

    def __deepcopy__(self, memo):
        # the counter is shared state and is never duplicated
        return Complex(copy.deepcopy(self._re, memo), copy.deepcopy(self._im, memo),
                       counter=self._counter)

    # ---------- basic properties ----------
    @property
    def re(self) -> T:
        return self._re

    @property
    def im(self) -> T:
        return self._im

    @property
    def id(self) -> int:
        return self._id

    def squared_magnitude(self) -> T:
        return self._re * self._re + self._im * self._im

    def magnitude(self) -> float:
        return math.hypot(self._re, self._im)

    # ---------- arithmetic ----------
    def add(self, other: "Complex | T") -> "Complex":
        rhs = _components(other)
        if rhs is None:
            return NotImplemented
        return self._spawn(_add((self._re, self._im), rhs))

    def subtract(self, other: "Complex | T") -> "Complex":
        rhs = _components(other)
        if rhs is None:
            return NotImplemented
        return self._spawn(_sub((self._re, self._im), rhs))

    def multiply(self, other: "Complex | T") -> "Complex":
        rhs = _components(other)
        if rhs is None:
            return NotImplemented
        return self._spawn(_mul((self._re, self._im), rhs))

    def divide(self, other: "Complex | T") -> "Complex":
        rhs = _components(other)
        if rhs is None:
            return NotImplemented
        return self._spawn(_div((self._re, self._im), rhs))

    def negate(self) -> "Complex":
        return self._spawn((-self._re, -self._im))

    def conjugate(self) -> "Complex":
        return self._spawn((self._re, -self._im))

    def inverse(self) -> "Complex":
        return self._spawn(_div((1, 0), (self._re, self._im)))

    def power(self, n: int) -> "Complex":
        """Integer powers by repeated squaring; negative n goes through 1/z."""
        if not isinstance(n, numbers.Integral):
            raise TypeError(f"Complex exponent must be an integer, got {type(n).__name__}")
        n = int(n)
        base = (self._re, self._im) if n >= 0 else _div((1, 0), (self._re, self._im))
        result = (1, 0)
        n = abs(n)
        while n:
            if n & 1:
                result = _mul(result, base)
            base = _mul(base, base)
            n >>= 1
        return self._spawn(result)

    # reflected forms, for scalar on the left
    def _reflect(self, formula, other):
        lhs = _components(other)
        if lhs is None:
            return NotImplemented
        return self._spawn(formula(lhs, (self._re, self._im)))

    def __radd__(self, other):
        return self._reflect(_add, other)

    def __rsub__(self, other):
        return self._reflect(_sub, other)

    def __rmul__(self, other):
        return self._reflect(_mul, other)

    def __rtruediv__(self, other):
        return self._reflect(_div, other)

    # ---------- compound assignment ----------
    def _update(self, formula, other):
        rhs = _components(other)
        if rhs is None:
            return NotImplemented
        # both components come from the untouched pair, then commit together
        self._re, self._im = formula((self._re, self._im), rhs)
        return self

    def __iadd__(self, other):
        return self._update(_add, other)

    def __isub__(self, other):
        return self._update(_sub, other)

    def __imul__(self, other):
        return self._update(_mul, other)

    def __itruediv__(self, other):
        return self._update(_div, other)

    # ---------- dunder sugar ----------
    __abs__ = magnitude
    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide
    __neg__ = negate
    __pos__ = copy
    __pow__ = power

    def __complex__(self):
        return complex(float(self._re), float(self._im))

    # ---------- comparison ----------
    def isclose(self, other: "Complex | T", rel_tol: float = REL_TOL,
                abs_tol: float = ABS_TOL) -> bool:
        rhs = _components(other)
        if rhs is None:
            raise TypeError(f"cannot compare Complex with {type(other).__name__}")
        re2, im2 = rhs
        return (math.isclose(self._re, re2, rel_tol=rel_tol, abs_tol=abs_tol)
                and math.isclose(self._im, im2, rel_tol=rel_tol, abs_tol=abs_tol))

    def __eq__(self, other):
        rhs = _components(other)
        if rhs is None:
            return NotImplemented
        values = (self._re, self._im) + rhs
        # exact for ints, fractions and element types math.isclose can't take
        if not _is_approximate(*values):
            return self._re == rhs[0] and self._im == rhs[1]
        rel_tol, abs_tol = _tolerance(*values)
        return self.isclose(other, rel_tol=rel_tol, abs_tol=abs_tol)

    # mutable through the in-place operators
    __hash__ = None

    # numpy scalars on the left defer to the reflected operators
    __array_ufunc__ = None

    # ---------- text ----------
    def __str__(self):
        return f"({self._re}, {self._im})"

    def __repr__(self):
        return f"Complex({self._re!r}, {self._im!r}, id={self._id})"


if __name__ == "__main__":
    from complex_trace import trace

    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    x = Complex()                                      # 0 + 0i, int components
    a = Complex(np.float32(3.0), np.float32(2.0))      # float32 components
    b = Complex(np.float32(1), np.float32(4))

    print(x + Complex(1, 2))                           # (1, 2)
    c = trace("mul", a, b)
    print(f"{a!r} * {b!r} = {c!r}")

    print(f"{a!r} /= {c!r} = ...")
    trace("itruediv", a, c)
    print(f" = {a!r}")

    print(Complex(3, 2) / Complex(1, 4))               # (11/17, -10/17) as floats
    try:
        Complex(3, 2) / Complex()
    except DivideByZero as err:
        print(f"DivideByZero: {err}")
