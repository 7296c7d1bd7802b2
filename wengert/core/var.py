# wengert/core/var.py
from __future__ import annotations

from numbers import Real
from typing import Optional, Protocol


class SupportsArithmetic(Protocol):
    """Numeric capability a tape scalar must provide."""

    def __add__(self, other): ...
    def __sub__(self, other): ...
    def __mul__(self, other): ...
    def __truediv__(self, other): ...
    def __neg__(self): ...


class Variable:
    """
    Handle into a Tape: a forward value bound to one node index.

    Attributes
    ----------
    tape : Tape
        The tape this handle was issued by (not owned).
    index : int
        Index of the handle's node on `tape`.
    value : numpy floating scalar
        Forward (primal) value, in the tape's dtype.
    generation : int
        The tape's generation when the handle was created. A handle is valid
        only while `tape.generation` still equals it.
    name : Optional[str]
        Optional debug/pretty-print name.

    Arithmetic between handles, or between a handle and a plain real scalar
    on either side, appends one node to the tape and returns a new handle.
    """

    # numpy scalars and arrays defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, tape, value, index: int, *, name: Optional[str] = None):
        check_value(value)
        self.tape = tape
        self.index = index
        self.value: SupportsArithmetic = tape.dtype(value)
        self.generation = tape.generation
        self.name = name

    def __repr__(self):
        label = f", name={self.name!r}" if self.name else ""
        return f"Variable({self.value!r}, index={self.index}{label})"

    def __float__(self):
        return float(self.value)

    def gradient(self):
        """Run one backward pass seeded at this handle."""
        from .engine import backward
        return backward(self)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import _add
        return _add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import _add
        return _add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import _sub
        return _sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import _sub
        return _sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import _mul
        return _mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import _mul
        return _mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import _div
        return _div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import _div
        return _div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    # Elementary functions
    def sin(self) -> Variable:
        from ..ops.transcendental import sin
        return sin(self)

    def cos(self) -> Variable:
        from ..ops.transcendental import cos
        return cos(self)

    def exp(self) -> Variable:
        from ..ops.transcendental import exp
        return exp(self)

    def log(self) -> Variable:
        from ..ops.transcendental import log
        return log(self)


def is_scalar(x) -> bool:
    """True for plain real numbers (int, float, numpy integer/floating), never for handles."""
    return isinstance(x, Real) and not isinstance(x, bool)


def value(x):
    """Return the forward value of a handle; pass plain numbers through unchanged."""
    return x.value if isinstance(x, Variable) else x


def check_value(value):
    """Only plain real numbers are accepted as forward values."""
    if not is_scalar(value):
        raise TypeError(
            f"Variable only accepts real scalars (int, float, numpy floating), "
            f"but got {type(value)}"
        )
