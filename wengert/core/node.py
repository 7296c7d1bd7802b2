# wengert/core/node.py
from dataclasses import dataclass
from typing import Any, NamedTuple, Optional, Tuple


class Edge(NamedTuple):
    """
    One parent slot of a Node.

    index   : tape index of the parent node
    partial : local derivative ∂(this node)/∂(parent), already in the tape dtype
    """
    index: int
    partial: Any


@dataclass(frozen=True)
class Node:
    """
    One record on the tape produced by a leaf or a primitive operation.

    Attributes
    ----------
    parents : (Optional[Edge], Optional[Edge])
        Up to two (parent index, local partial) pairs. An empty slot is None:
          - leaf                 -> (None, None)
          - unary op             -> (Edge, None)
          - variable op scalar   -> (Edge, None)
          - scalar op variable   -> (None, Edge)
          - variable op variable -> (Edge, Edge)
        Every parent index is strictly below the node's own index.
    op : str
        Debug tag (e.g., "var", "add", "sin").
    """
    parents: Tuple[Optional[Edge], Optional[Edge]]
    op: str = "var"

    @property
    def is_leaf(self) -> bool:
        return self.parents[0] is None and self.parents[1] is None

    def edges(self):
        """Iterate over the occupied parent slots."""
        return (e for e in self.parents if e is not None)
