# wengert/core/engine.py
from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from .errors import StaleVariableError
from .var import Variable

logger = logging.getLogger(__name__)


class Gradient:
    """
    Dense adjoint vector produced by one backward pass.

    `values[i]` is the derivative of the seed output with respect to node i.
    The vector covers the tape as it was when the pass ran; handles created
    afterwards read as 0, since the output cannot depend on them.
    """

    def __init__(self, tape, values: np.ndarray):
        self.tape = tape
        self.generation = tape.generation
        self.values = values

    def __len__(self):
        return len(self.values)

    def __repr__(self):
        return f"Gradient(length={len(self.values)}, tape={self.tape!r})"

    def wrt(self, v: Variable):
        """Derivative of the seed output with respect to handle `v`."""
        self.tape.check(v)
        if self.tape.config.check_handles and self.generation != v.generation:
            # `v` is current but this result predates a clear()
            raise StaleVariableError(f"{self!r} was computed before the tape was cleared")
        if v.index >= len(self.values):
            return self.tape.dtype(0)
        return self.values[v.index]

    def wrt_all(self, vs: Iterable[Variable]) -> np.ndarray:
        """Partials with respect to each handle in `vs`, in order."""
        return np.array([self.wrt(v) for v in vs], dtype=self.tape.dtype)


def backward(output: Variable) -> Gradient:
    """
    Run a single reverse pass seeded at `output`.

    Nodes are visited from the highest index down. Every parent index is
    below its child's, so this order is a reverse topological order and one
    sweep suffices:

        adjoint[parent] += partial * adjoint[node]

    Nodes whose adjoint is exactly zero propagate nothing. Sweeping starts at
    the seed, since nothing recorded later can feed it.
    """
    tape = output.tape
    tape.check(output)

    nodes = tape.nodes
    adjoint = np.zeros(len(nodes), dtype=tape.dtype)
    adjoint[output.index] = 1

    with np.errstate(all="ignore"):
        for i in range(output.index, -1, -1):
            d = adjoint[i]
            if d == 0:
                continue  # nothing to propagate
            for p, w in nodes[i].edges():
                adjoint[p] += w * d

    logger.debug("backward pass from node %d over %d nodes", output.index, len(nodes))
    return Gradient(tape, adjoint)
