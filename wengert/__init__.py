# wengert/__init__.py
# Reverse-mode (tape) and forward-mode (dual number) automatic differentiation

from .core.config import TapeConfig
from .core.errors import WengertError, TapeError, TapeMismatchError, StaleVariableError
from .core.tape import Tape
from .core.var import Variable, value
from .core.engine import Gradient, backward
from .core.seeds import grad, grads, grads_list
from .core.graph_utils import get_tape_stats, format_tape, print_tape_summary

from .ops import add, sub, mul, div, neg, sin, cos, exp, log

# Forward mode
from .dual import Dual, dual_grad

# Least-squares boundary
from .jacobian import ResidualModel

__version__ = "0.1.0"

__all__ = [
    # Core
    'Tape',
    'TapeConfig',
    'Variable',
    'value',
    # Engine
    'backward',
    'Gradient',
    'grad',
    'grads',
    'grads_list',
    # Errors
    'WengertError',
    'TapeError',
    'TapeMismatchError',
    'StaleVariableError',
    # Ops
    'add', 'sub', 'mul', 'div', 'neg',
    'sin', 'cos', 'exp', 'log',
    # Forward mode
    'Dual',
    'dual_grad',
    # Graph inspection
    'get_tape_stats',
    'format_tape',
    'print_tape_summary',
    # Least squares
    'ResidualModel',
]
