# wengert/core/__init__.py

"""
Core public API for the reverse-mode tape.

Exports:
    Tape          : Append-only Wengert list; issues Variables via `variable()`.
    TapeConfig    : Tape configuration (dtype, handle checks, name).
    Variable      : Handle into a tape; arithmetic records nodes.
    Node, Edge    : Tape records.
    backward      : Run one reverse pass from a Variable.
    Gradient      : Dense adjoint vector returned by a reverse pass.
    grad, grads, grads_list : One-shot gradients on a fresh tape.
    value         : Forward value of a Variable (plain numbers pass through).
"""

from .config import TapeConfig
from .errors import WengertError, TapeError, TapeMismatchError, StaleVariableError
from .node import Edge, Node
from .tape import Tape
from .var import Variable, value
from .engine import Gradient, backward
from .seeds import grad, grads, grads_list

__all__ = [
    "TapeConfig",
    "WengertError", "TapeError", "TapeMismatchError", "StaleVariableError",
    "Edge", "Node",
    "Tape", "Variable", "value",
    "Gradient", "backward",
    "grad", "grads", "grads_list",
]
