# wengert/ops/transcendental.py
import numpy as np

from ..core.var import Variable, is_scalar
from ..dual import Dual


def _unary(x, f, dfdx, tag):
    """
    Generic elementary function, dispatched on the operand kind:
      - Variable : records one Node with local partial ∂out/∂x = dfdx(x)
      - Dual     : value through f, derivative through the chain rule
      - scalar   : plain numpy evaluation, nothing recorded
    """
    if isinstance(x, Variable):
        x.tape.check(x)
        with np.errstate(all="ignore"):
            out, partial = f(x.value), dfdx(x.value)
        idx = x.tape.push((x.index, partial), op=tag)
        return Variable(x.tape, out, idx)
    if isinstance(x, Dual):
        return getattr(x, tag)()
    if is_scalar(x):
        with np.errstate(all="ignore"):
            return f(np.float64(x))
    raise TypeError(f"{tag} expects a Variable, Dual or real scalar, but got {type(x)}")


def sin(x):
    return _unary(x, np.sin, np.cos, "sin")


def cos(x):
    return _unary(x, np.cos, lambda a: -np.sin(a), "cos")


def exp(x):
    return _unary(x, np.exp, np.exp, "exp")


def log(x):
    """Natural logarithm. Non-positive inputs give nan/-inf, not an error."""
    return _unary(x, np.log, lambda a: 1 / a, "log")
