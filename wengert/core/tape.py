# wengert/core/tape.py
from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from .config import TapeConfig
from .errors import StaleVariableError, TapeError, TapeMismatchError
from .node import Edge, Node

logger = logging.getLogger(__name__)


class Tape:
    """
    Append-only Wengert list: records Nodes in forward order.

    The tape is an arena owned by the caller. Handles (`Variable`) store an
    index into it together with the tape's `generation`; `clear()` drops
    every node and bumps the generation, so handles issued before the clear
    are detected as stale instead of silently reading foreign nodes.
    """

    def __init__(self, config: Optional[TapeConfig] = None, **overrides):
        if config is None:
            config = TapeConfig(**overrides)
        elif overrides:
            config = replace(config, **overrides)
        self.config = config
        self.dtype = config.dtype
        self.nodes: List[Node] = []
        self.generation = 0

    def __repr__(self):
        name = f"{self.config.name!r}, " if self.config.name else ""
        return (f"Tape({name}length={len(self.nodes)}, "
                f"dtype={self.dtype.__name__}, generation={self.generation})")

    def __len__(self):
        return len(self.nodes)

    def length(self) -> int:
        """Current node count."""
        return len(self.nodes)

    def push(self, *parents: Optional[Tuple[int, float]], op: str = "var") -> int:
        """
        Append a Node and return its index.

            push()                      -> leaf
            push((i, p))                -> unary op
            push((i0, p0), (i1, p1))    -> binary op

        A slot may be None when that operand is a plain scalar.
        """
        if len(parents) > 2:
            raise TapeError(f"a node has at most two parents, got {len(parents)}")
        idx = len(self.nodes)
        slots = []
        for parent in parents:
            if parent is None:
                slots.append(None)
                continue
            i, partial = parent
            if self.config.check_handles and not 0 <= i < idx:
                raise TapeError(
                    f"parent index {i} is not an existing node (tape length {idx})"
                )
            slots.append(Edge(int(i), self.dtype(partial)))
        while len(slots) < 2:
            slots.append(None)
        self.nodes.append(Node(parents=(slots[0], slots[1]), op=op))
        return idx

    def variable(self, value, name: Optional[str] = None):
        """Push a leaf and wrap it in a handle bound to `value`."""
        from .var import Variable, check_value  # local import to avoid cycles
        check_value(value)
        return Variable(self, value, self.push(), name=name)

    def clear(self):
        """Discard every node. All handles issued so far become stale."""
        logger.debug("clearing %r", self)
        self.nodes.clear()
        self.generation += 1

    # -- handle validation ---------------------------------------------------

    def check(self, *handles):
        """Validate that every handle was issued by this tape since its last clear."""
        if not self.config.check_handles:
            return
        for h in handles:
            if h.tape is not self:
                raise TapeMismatchError(
                    f"{h!r} belongs to {h.tape!r}, cannot combine it with a handle on {self!r}"
                )
            if h.generation != self.generation:
                raise StaleVariableError(
                    f"{h!r} was created before {self!r} was cleared "
                    f"(generation {h.generation}, tape is at {self.generation})"
                )
