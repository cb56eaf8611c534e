"""
Set Relationship Classifier

Given the sets on the canvas (0 to 3, in the order they were created), decide
which diagram shows how they relate:

- disjoint sets stay plain circles
- a set inside another becomes a containment
- sets sharing some elements become an intersection
- three sets sharing an element become a three-way overlap
- three sets chained through a middle set become a nested composite

classify() is a pure function. Call it again after every change to the sets;
nothing is carried over between calls.
"""

from typing import Optional, Sequence

from .constants import MAX_SETS, OVERLAP_PER_ELEMENT, THREEWAY_OFFSET_PER_ELEMENT
from .descriptions import (
    describe_containment,
    describe_intersection,
    describe_three_way,
)
from .diagram import (
    Alignment,
    Containment,
    DiagramNode,
    PairwiseIntersection,
    PlainSet,
    ThreeWayOffsets,
    ThreeWayOverlap,
)
from .sets import UserSet


def classify(sets: Sequence[UserSet], max_count: int = MAX_SETS) -> list[DiagramNode]:
    """
    Build the diagram for the given sets.

    Returns an empty list for no sets, otherwise one to three nodes: a single
    composite when one relationship covers every set, or plain sets next to
    (at most) one composite.

    Raises ValueError if max_count is outside 0..3 or more than max_count
    sets are given. The canvas never lets that happen.
    """
    if not 0 <= max_count <= MAX_SETS:
        raise ValueError(f"max_count must be between 0 and {MAX_SETS}, got {max_count}")
    if len(sets) > max_count:
        raise ValueError(f"Can't classify {len(sets)} sets (limit is {max_count})")

    nodes = [PlainSet(user_set) for user_set in sets]

    if len(nodes) == 2:
        return _classify_two(*nodes)
    if len(nodes) == 3:
        return _classify_three(*nodes)
    return nodes


# =============================================================================
# TWO SETS
# =============================================================================

def _relate(first: PlainSet, second: PlainSet) -> Optional[DiagramNode]:
    """
    The composite for two sets, or None if they share nothing.

    One inside the other: Containment, smaller set inside. Equal sizes mean
    equal sets, and then the first set is the outer one.
    Otherwise: PairwiseIntersection, overlapping by the shared count.
    """
    shared = first.elements & second.elements
    if not shared:
        return None

    if len(shared) == len(first.elements) or len(shared) == len(second.elements):
        if len(first.elements) < len(second.elements):
            inner, outer = first, second
        else:
            inner, outer = second, first
        return Containment(
            inner=(inner,),
            outer=outer,
            description=describe_containment([inner], outer),
        )

    return _intersection(first, second, shared)


def _intersection(left: DiagramNode, right: DiagramNode, shared: frozenset,
                  left_name: Optional[PlainSet] = None,
                  right_name: Optional[PlainSet] = None) -> PairwiseIntersection:
    # Nested nodes are described by the plain set that actually overlaps
    left_name = left_name or left
    right_name = right_name or right
    return PairwiseIntersection(
        left=left,
        right=right,
        overlap_magnitude=len(shared) * OVERLAP_PER_ELEMENT,
        description=describe_intersection(left_name, right_name, shared),
    )


def _classify_two(first: PlainSet, second: PlainSet) -> list[DiagramNode]:
    composite = _relate(first, second)
    if composite is None:
        return [first, second]
    return [composite]


# =============================================================================
# THREE SETS
# =============================================================================

def _classify_three(first: PlainSet, second: PlainSet, third: PlainSet) -> list[DiagramNode]:
    # A shared element across all three wins over any pairwise relationship
    shared = first.elements & second.elements & third.elements
    if shared:
        return [_three_way(first, second, third, shared)]

    i12 = first.elements & second.elements
    i13 = first.elements & third.elements
    i23 = second.elements & third.elements
    overlap_count = sum(1 for overlap in (i12, i13, i23) if overlap)

    if overlap_count >= 2:
        if len(i12) * len(i13) > 0:
            chain = (second, first, third)
        elif len(i12) * len(i23) > 0:
            chain = (first, second, third)
        elif len(i13) * len(i23) > 0:
            chain = (first, third, second)
        else:
            raise RuntimeError("Two overlaps found but no set joins them")
        return [_chain(*chain)]

    # At most one pair overlaps. The set left out stays on its own, ahead
    # of the composite.
    pairs = (
        (first, second, third),
        (first, third, second),
        (second, third, first),
    )
    for left, right, alone in pairs:
        composite = _relate(left, right)
        if composite is not None:
            return [alone, composite]

    return [first, second, third]


def _three_way(top: PlainSet, left: PlainSet, right: PlainSet,
               shared: frozenset) -> ThreeWayOverlap:
    def offset(node: PlainSet) -> int:
        return (len(node.elements) - len(shared)) * THREEWAY_OFFSET_PER_ELEMENT

    return ThreeWayOverlap(
        top=top,
        left=left,
        right=right,
        offsets=ThreeWayOffsets(top=offset(top), left=offset(left), right=offset(right)),
        description=describe_three_way(top, left, right, shared),
    )


def _chain(side_a: PlainSet, middle: PlainSet, side_c: PlainSet) -> DiagramNode:
    """
    Three sets joined through a middle set: side_a overlaps middle, and
    middle overlaps side_c, but nothing is shared by all three.

    Each side either sits inside the middle set or intersects it. The middle
    set can't sit inside a side (that side would then share an element with
    the other side too).
    """
    shared_a = side_a.elements & middle.elements
    shared_c = middle.elements & side_c.elements
    a_inside = len(shared_a) == len(side_a.elements)
    c_inside = len(shared_c) == len(side_c.elements)

    if a_inside and c_inside:
        return Containment(
            inner=(side_a, side_c),
            outer=middle,
            description=describe_containment([side_a, side_c], middle),
        )

    if a_inside:
        holder = Containment(
            inner=(side_a,),
            outer=middle,
            description=describe_containment([side_a], middle),
            alignment=Alignment.LEADING,
        )
        return _intersection(holder, side_c, shared_c, left_name=middle)

    if c_inside:
        holder = Containment(
            inner=(side_c,),
            outer=middle,
            description=describe_containment([side_c], middle),
            alignment=Alignment.TRAILING,
        )
        return _intersection(side_a, holder, shared_a, right_name=middle)

    inner = _intersection(middle, side_c, shared_c)
    return _intersection(side_a, inner, shared_a, right_name=middle)
