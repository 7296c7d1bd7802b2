# wengert/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through a fresh tape.
#-----------------------------------------------------------------------------
from __future__ import annotations

from typing import Callable, Dict, Iterable, List

import numpy as np

from .tape import Tape
from .var import Variable, value


def _output(tape: Tape, y) -> Variable:
    """A plain-number output does not depend on the inputs: give it its own leaf."""
    return y if isinstance(y, Variable) else tape.variable(y, name="y")


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Variable], Variable], x0: float, **config):
    """
    Derivative of a scalar function y=f(x) at x0 (single input).
    Runs one reverse pass on a fresh tape.
    """
    tape = Tape(**config)
    x = tape.variable(x0, name="x")
    y = _output(tape, f(x))
    return y.gradient().wrt(x)


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Variable]], Variable],
          inputs: Dict[str, float], **config) -> Dict[str, float]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Variable} and returning a scalar Variable
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: numeric}  # gradients in the same key order as `inputs`
    """
    tape = Tape(**config)
    vars_ad = {k: tape.variable(v, name=k) for k, v in inputs.items()}
    g = _output(tape, f(vars_ad)).gradient()
    return {k: g.wrt(vars_ad[k]) for k in inputs.keys()}


def grads_list(f: Callable[[List[Variable]], Variable],
               x0_list: Iterable[float], **config) -> np.ndarray:
    """
    Same as grads(), but the inputs are provided as a list and the result is an
    array of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> array([4., 3.])
    """
    tape = Tape(**config)
    xs = [tape.variable(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    return _output(tape, f(xs)).gradient().wrt_all(xs)


__all__ = ["grad", "grads", "grads_list", "value"]
