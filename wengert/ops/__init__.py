# wengert/ops/__init__.py

from .arithmetic import add, sub, mul, div, neg
from .transcendental import sin, cos, exp, log

__all__ = [
    "add", "sub", "mul", "div", "neg",
    "sin", "cos", "exp", "log",
]
