"""Rich renderables for sets and diagrams (used by the canvas panels)."""

from rich.text import Text
from rich.tree import Tree

from .constants import INTERSECTION_SYMBOL, SUBSET_SYMBOL
from .diagram import (
    Containment,
    DiagramNode,
    PairwiseIntersection,
    PlainSet,
    ThreeWayOverlap,
    children,
)
from .sets import UserSet


def set_summary(user_set: UserSet) -> Text:
    """ "A = { 1, 2 }", or "A = Ø" for the empty set."""
    text = Text()
    text.append(user_set.name, style=f"bold {user_set.color}")
    if user_set.elements:
        text.append(f" = {{ {user_set.parsed_elements} }}")
    else:
        text.append(f" = {user_set.parsed_elements}")
    return text


def node_label(node: DiagramNode) -> Text:
    """One line describing a node."""
    if isinstance(node, PlainSet):
        return set_summary(node.user_set)
    if isinstance(node, PairwiseIntersection):
        title = f"{INTERSECTION_SYMBOL} Intersection"
    elif isinstance(node, Containment):
        title = f"{SUBSET_SYMBOL} Containment"
    elif isinstance(node, ThreeWayOverlap):
        title = f"{INTERSECTION_SYMBOL} Three-way"
    else:
        raise TypeError(f"Not a diagram node: {node!r}")

    text = Text(title, style="bold")
    text.append(f"  {node.description}", style="italic")
    return text


def _add_node(tree: Tree, node: DiagramNode) -> None:
    branch = tree.add(node_label(node))
    for child in children(node):
        _add_node(branch, child)


def diagram_tree(nodes: list[DiagramNode], title: str = "Canvas") -> Tree:
    """The whole diagram as a tree, composites with their parts underneath."""
    tree = Tree(Text(title, style="bold"), guide_style="dim")
    if not nodes:
        tree.add(Text("(empty)", style="dim"))
    for node in nodes:
        _add_node(tree, node)
    return tree
