"""
Diagram nodes: how sets are composed on the canvas.

A diagram is a short list of nodes. Each node is one of four kinds:

- PlainSet: one set on its own
- PairwiseIntersection: two nodes that share some elements
- Containment: one or two nodes drawn inside another
- ThreeWayOverlap: three sets sharing at least one element

Nodes are immutable and rebuilt from scratch whenever the sets change.
Match on the node type (isinstance or match/case), never on attributes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .constants import EMPTY_SET_SIZE, SET_SIZE_PER_ELEMENT
from .sets import UserSet


class Alignment(Enum):
    """Where inner nodes sit inside a containment."""
    CENTER = "center"
    LEADING = "leading"      # Inner set hugs the left edge (intersection on the right)
    TRAILING = "trailing"    # Inner set hugs the right edge (intersection on the left)


@dataclass(frozen=True)
class PlainSet:
    user_set: UserSet

    @property
    def elements(self) -> frozenset:
        return self.user_set.elements

    @property
    def name(self) -> str:
        return self.user_set.name

    @property
    def size(self) -> int:
        """Circle diameter hint."""
        if self.user_set.count == 0:
            return EMPTY_SET_SIZE
        return self.user_set.count * SET_SIZE_PER_ELEMENT


@dataclass(frozen=True)
class PairwiseIntersection:
    left: "DiagramNode"
    right: "DiagramNode"
    overlap_magnitude: int
    description: str


@dataclass(frozen=True)
class Containment:
    inner: tuple
    outer: "DiagramNode"
    description: str
    alignment: Alignment = Alignment.CENTER


@dataclass(frozen=True)
class ThreeWayOffsets:
    top: int = 0
    left: int = 0
    right: int = 0


@dataclass(frozen=True)
class ThreeWayOverlap:
    top: PlainSet
    left: PlainSet
    right: PlainSet
    offsets: ThreeWayOffsets
    description: str


DiagramNode = Union[PlainSet, PairwiseIntersection, Containment, ThreeWayOverlap]


def children(node: DiagramNode) -> list:
    """Direct child nodes, in drawing order (left to right)."""
    if isinstance(node, PlainSet):
        return []
    if isinstance(node, PairwiseIntersection):
        return [node.left, node.right]
    if isinstance(node, Containment):
        return [node.outer, *node.inner]
    if isinstance(node, ThreeWayOverlap):
        return [node.left, node.top, node.right]
    raise TypeError(f"Not a diagram node: {node!r}")

