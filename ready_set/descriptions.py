"""Label strings for composite diagram nodes."""

from typing import Iterable

from .constants import INTERSECTION_SYMBOL, SUBSET_SYMBOL
from .diagram import PlainSet
from .sets import format_elements


def _braced(elements: Iterable[float]) -> str:
    return f"{{ {format_elements(elements)} }}"


def describe_intersection(left: PlainSet, right: PlainSet, shared: Iterable[float]) -> str:
    """ "A ∩ B = { 5 }" """
    return f"{left.name} {INTERSECTION_SYMBOL} {right.name} = {_braced(shared)}"


def describe_containment(inner: Iterable[PlainSet], outer: PlainSet) -> str:
    """
    One clause per inner set, outer name first: "B ⊂ A and B ⊂ C".

    The outer-first order is what the canvas has always shown, keep it.
    """
    return " and ".join(
        f"{outer.name} {SUBSET_SYMBOL} {member.name}" for member in inner
    )


def describe_three_way(top: PlainSet, left: PlainSet, right: PlainSet,
                       shared: Iterable[float]) -> str:
    """Left operand first: "B ∩ A ∩ C = { 5 }" for top=A, left=B, right=C."""
    return (
        f"{left.name} {INTERSECTION_SYMBOL} {top.name} "
        f"{INTERSECTION_SYMBOL} {right.name} = {_braced(shared)}"
    )
