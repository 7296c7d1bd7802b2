# wengert/jacobian.py
"""
Residual / Jacobian adapter for nonlinear least-squares drivers.

A residual function is written once against tape handles:

    def thurber(beta, xs, ys):
        res = []
        for x, y in zip(xs, ys):
            num = beta[0] + beta[1] * x + beta[2] * x**2 + beta[3] * x**3
            den = 1 + beta[4] * x + beta[5] * x**2 + beta[6] * x**3
            res.append(num / den - y)
        return res

`ResidualModel` evaluates it on a tape that is cleared per call, returns the
residual vector, and fills the Jacobian one row per residual with one
backward pass each. The driver (Levenberg-Marquardt) is scipy's.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np
from scipy.optimize import OptimizeResult, least_squares

from .core.config import TapeConfig
from .core.tape import Tape
from .core.var import Variable

logger = logging.getLogger(__name__)


class ResidualModel:
    """
    Wrap `fn(params, *args) -> sequence of residuals` for a least-squares driver.

    Args:
        fn: residual function; `params` is a list of Variables, one per free
            parameter, and each returned residual is a Variable or a plain
            number (a residual that ignores every parameter)
        n_params: number of free parameters
        config: TapeConfig for the internal tape
    """

    def __init__(self, fn: Callable[..., Sequence], n_params: int,
                 config: Optional[TapeConfig] = None):
        self.fn = fn
        self.n_params = n_params
        self.tape = Tape(config)

    def _evaluate(self, x, args) -> Tuple[List[Variable], List]:
        x = np.asarray(x, dtype=self.tape.dtype)
        if x.shape != (self.n_params,):
            raise ValueError(f"expected {self.n_params} parameters, got shape {x.shape}")
        self.tape.clear()
        params = [self.tape.variable(v, name=f"p{i}") for i, v in enumerate(x)]
        return params, list(self.fn(params, *args))

    def residuals(self, x, *args) -> np.ndarray:
        """Residual vector r(x), shape (m,)."""
        _, res = self._evaluate(x, args)
        return np.array([float(r) for r in res])

    def jacobian(self, x, *args) -> np.ndarray:
        """Jacobian J[i, j] = ∂r_i/∂x_j, shape (m, n); one backward pass per row."""
        params, res = self._evaluate(x, args)
        J = np.zeros((len(res), self.n_params))
        for i, r in enumerate(res):
            if isinstance(r, Variable):
                J[i] = r.gradient().wrt_all(params)
        logger.debug("jacobian %s over %d tape nodes", J.shape, self.tape.length())
        return J

    def fit(self, x0, *args, **kwargs) -> OptimizeResult:
        """
        Minimise ½‖r(x)‖² with scipy's Levenberg-Marquardt, using the tape Jacobian.
        Extra keyword arguments go to scipy.optimize.least_squares.
        """
        kwargs.setdefault("method", "lm")
        # MINPACK-style column scaling for parameters of very different magnitude
        kwargs.setdefault("x_scale", "jac")
        result = least_squares(self.residuals, np.asarray(x0, dtype=float),
                               jac=self.jacobian, args=args, **kwargs)
        logger.debug("least squares finished: status=%s nfev=%s cost=%.6g",
                     result.status, result.nfev, result.cost)
        return result
