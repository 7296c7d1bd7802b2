# wengert/dual.py
# Forward-mode engine (independent from the tape)

from numbers import Real
from typing import Callable, List, Sequence, Tuple

import numpy as np


class Dual:
    """
    Dual number for forward-mode differentiation:
    x = value + derivative * ε,   ε² = 0

    `derivative` is the directional derivative of `value` along whatever
    direction the inputs were seeded with. Seeding is the caller's job:
    for ∂f/∂x_i, give input i derivative 1 and every other input 0, then
    evaluate f once. Inputs are not reset by evaluation, so reusing the
    same Dual objects for the next direction means reseeding them first;
    `dual_grad` builds fresh inputs per pass instead.
    """
    __slots__ = ("value", "derivative")
    __array_ufunc__ = None

    def __init__(self, value, derivative=0.0):
        if not isinstance(value, Real):
            raise TypeError(f"Dual only accepts real scalars, but got {type(value)}")
        self.value = float(value)
        self.derivative = float(derivative)

    @classmethod
    def variable(cls, value) -> "Dual":
        """Input seeded along its own direction (derivative 1)."""
        return cls(value, 1.0)

    @classmethod
    def constant(cls, value) -> "Dual":
        return cls(value, 0.0)

    def __iter__(self):
        yield self.value
        yield self.derivative

    def __repr__(self):
        return f"Dual({self.value!r}, {self.derivative!r})"

    # Explicit operand pairings: Dual/Dual, Dual/scalar, scalar/Dual
    @staticmethod
    def _coerce(x):
        if isinstance(x, Dual):
            return x
        if isinstance(x, Real) and not isinstance(x, bool):
            return Dual(x)
        return None

    def __add__(a, b):
        b = Dual._coerce(b)
        if b is None: return NotImplemented
        return Dual(a.value + b.value, a.derivative + b.derivative)

    def __radd__(b, a):
        a = Dual._coerce(a)
        if a is None: return NotImplemented
        return a + b

    def __sub__(a, b):
        b = Dual._coerce(b)
        if b is None: return NotImplemented
        return Dual(a.value - b.value, a.derivative - b.derivative)

    def __rsub__(b, a):
        a = Dual._coerce(a)
        if a is None: return NotImplemented
        return a - b

    def __mul__(a, b):
        b = Dual._coerce(b)
        if b is None: return NotImplemented
        return Dual(a.value * b.value, a.value * b.derivative + a.derivative * b.value)

    def __rmul__(b, a):
        a = Dual._coerce(a)
        if a is None: return NotImplemented
        return a * b

    def __truediv__(a, b):
        b = Dual._coerce(b)
        if b is None: return NotImplemented
        with np.errstate(all="ignore"):
            u, du = np.float64(a.value), np.float64(a.derivative)
            v, dv = np.float64(b.value), np.float64(b.derivative)
            return Dual(u / v, (du * v - u * dv) / (v * v))

    def __rtruediv__(b, a):
        a = Dual._coerce(a)
        if a is None: return NotImplemented
        return a / b

    def __neg__(a):
        return -1.0 * a

    # Elementary functions: base function on value, chain rule on derivative
    def sin(self) -> "Dual":
        with np.errstate(all="ignore"):
            x = np.float64(self.value)
            return Dual(np.sin(x), self.derivative * np.cos(x))

    def cos(self) -> "Dual":
        with np.errstate(all="ignore"):
            x = np.float64(self.value)
            return Dual(np.cos(x), -self.derivative * np.sin(x))

    def exp(self) -> "Dual":
        with np.errstate(all="ignore"):
            e = np.exp(np.float64(self.value))
            return Dual(e, self.derivative * e)

    def log(self) -> "Dual":
        with np.errstate(all="ignore"):
            x = np.float64(self.value)
            return Dual(np.log(x), self.derivative / x)


def dual_grad(f: Callable[[List[Dual]], Dual],
              xs: Sequence[float]) -> Tuple[float, np.ndarray]:
    """
    Gradient of a scalar-output function y = f([x0, x1, ...]) by forward mode.

    Uses n directional evaluations, one per input: pass i seeds input i with
    derivative 1 and the rest with 0, and reads ∂y/∂x_i off the output.

    Returns
    -------
    (value, grad) : f(xs) and its gradient as np.ndarray of shape (n,)
    """
    n = len(xs)
    grad = np.zeros(n)
    y0 = _as_dual(f([])).value if n == 0 else None
    for i in range(n):
        duals = [Dual(x, 1.0 if j == i else 0.0) for j, x in enumerate(xs)]
        y = _as_dual(f(duals))
        y0 = y.value
        grad[i] = y.derivative
    return y0, grad


def _as_dual(y):
    """A constant output (f ignored its inputs) has zero derivative."""
    return y if isinstance(y, Dual) else Dual.constant(y)
