# wengert/ops/arithmetic.py
import numpy as np

from ..core.var import Variable, is_scalar


# Each pairing of operand kinds gets its own node constructor:
#   variable/variable -> two parent slots
#   variable/scalar   -> left slot only
#   scalar/variable   -> right slot only
# The scalar side never references a node.

def _var_var(x: Variable, y: Variable, out, dx, dy, tag) -> Variable:
    x.tape.check(x, y)
    idx = x.tape.push((x.index, dx), (y.index, dy), op=tag)
    return Variable(x.tape, out, idx)


def _var_const(x: Variable, out, dx, tag) -> Variable:
    x.tape.check(x)
    idx = x.tape.push((x.index, dx), None, op=tag)
    return Variable(x.tape, out, idx)


def _const_var(y: Variable, out, dy, tag) -> Variable:
    y.tape.check(y)
    idx = y.tape.push(None, (y.index, dy), op=tag)
    return Variable(y.tape, out, idx)


def _binary(x, y, f, dfdx, dfdy, tag):
    """
    Generic binary primitive:
      - computes out = f(x, y) on forward values
      - computes the local partials (∂out/∂x, ∂out/∂y) for the variable operand(s)
      - pushes one Node and returns the new handle
    Returns NotImplemented for operand pairs it does not handle.
    """
    if isinstance(x, Variable):
        dtype = x.tape.dtype
        if isinstance(y, Variable):
            a, b = x.value, y.value
            with np.errstate(all="ignore"):
                return _var_var(x, y, f(a, b), dfdx(a, b), dfdy(a, b), tag)
        if is_scalar(y):
            a, b = x.value, dtype(y)
            with np.errstate(all="ignore"):
                return _var_const(x, f(a, b), dfdx(a, b), tag)
    elif isinstance(y, Variable) and is_scalar(x):
        a, b = y.tape.dtype(x), y.value
        with np.errstate(all="ignore"):
            return _const_var(y, f(a, b), dfdy(a, b), tag)
    return NotImplemented


def _add(x, y): return _binary(x, y, lambda a, b: a + b, lambda a, b: 1.0,   lambda a, b: 1.0,            "add")
def _sub(x, y): return _binary(x, y, lambda a, b: a - b, lambda a, b: 1.0,   lambda a, b: -1.0,           "sub")
def _mul(x, y): return _binary(x, y, lambda a, b: a * b, lambda a, b: b,     lambda a, b: a,              "mul")
def _div(x, y): return _binary(x, y, lambda a, b: a / b, lambda a, b: 1 / b, lambda a, b: -a / (b * b),   "div")


def _public(impl, symbol):
    def op(x, y):
        out = impl(x, y)
        if out is NotImplemented:
            raise TypeError(
                f"unsupported operand types for {symbol}: "
                f"'{type(x).__name__}' and '{type(y).__name__}' (need at least one Variable)"
            )
        return out
    op.__name__ = impl.__name__.lstrip("_")
    op.__doc__ = f"x {symbol} y, recording one node on the operands' tape."
    return op


add = _public(_add, "+")
sub = _public(_sub, "-")
mul = _public(_mul, "*")
div = _public(_div, "/")


def neg(x: Variable) -> Variable:
    """
    Unary negation, defined as (-1) * x:
      out     = -x
      ∂out/∂x = -1
    """
    if not isinstance(x, Variable):
        raise TypeError(f"neg expects a Variable, but got {type(x)}")
    return _const_var(x, -x.value, -1.0, "neg")
