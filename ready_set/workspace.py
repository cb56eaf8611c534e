"""
Workspace - the canvas data model

Five files (File A to File E), each holding up to three sets. Every change to
the current file's sets re-derives the diagram from scratch.

Undo is a single stored state that swaps with the current one, so undoing
twice is a redo.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from .classifier import classify
from .constants import FILE_NAMES, MAX_SETS, SET_STYLES
from .diagram import (
    Containment,
    DiagramNode,
    PairwiseIntersection,
    PlainSet,
    ThreeWayOverlap,
)
from .sets import UserSet, parse_elements

logger = logging.getLogger(__name__)


class AddOutcome(Enum):
    """What the newest diagram node turned out to be after adding a set."""
    EMPTY_SET = "empty_set"
    SET = "set"
    INTERSECTION = "intersection"
    COMPLEX_INTERSECTION = "complex_intersection"
    CONTAINMENT = "containment"
    THREE_WAY = "three_way"


def outcome_for(node: DiagramNode) -> AddOutcome:
    """Pick the outcome for a diagram's last node."""
    if isinstance(node, PlainSet):
        return AddOutcome.EMPTY_SET if not node.elements else AddOutcome.SET
    if isinstance(node, PairwiseIntersection):
        nested = (PairwiseIntersection, Containment)
        if isinstance(node.left, nested) or isinstance(node.right, nested):
            return AddOutcome.COMPLEX_INTERSECTION
        return AddOutcome.INTERSECTION
    if isinstance(node, Containment):
        return AddOutcome.CONTAINMENT
    if isinstance(node, ThreeWayOverlap):
        return AddOutcome.THREE_WAY
    raise TypeError(f"Not a diagram node: {node!r}")


# Starting configurations from the tutorial, by name
EXAMPLES = {
    "single": [("A", [2, 3, 5])],
    "intersection": [("A", [2, 3, 5]), ("B", [5, 7, 11])],
    "complex_intersection": [("A", [2, 3, 5]), ("B", [5, 7, 11]), ("C", [11, 13, 17])],
    "containment": [("C", [2, 3, 5]), ("D", [2, 3, 5, 6, 7, 11])],
    "three_way": [("C", [2, 3, 5]), ("A", [3, 5, 7]), ("B", [5, 7, 11])],
}


@dataclass
class UserFile:
    """One canvas worth of sets, with its own undo state."""
    name: str
    user_sets: list = field(default_factory=list)
    previous_state: Optional[list] = None
    previous_state_is_redo: bool = False


class Workspace:
    """
    All files plus which one is open.

    The diagram always matches the current file's sets. Callers read
    `diagram` and never modify it.
    """

    def __init__(self, file_names: Iterable[str] = FILE_NAMES):
        self.files = [UserFile(name=name) for name in file_names]
        self.current_file_index = 0
        self.selected_style_index = 0
        self.diagram: list[DiagramNode] = []

    # -------------------------------------------------------------------------
    # Current file
    # -------------------------------------------------------------------------

    @property
    def current_file(self) -> UserFile:
        return self.files[self.current_file_index]

    @property
    def current_sets(self) -> list[UserSet]:
        return self.current_file.user_sets

    @current_sets.setter
    def current_sets(self, sets: list[UserSet]) -> None:
        self.current_file.user_sets = list(sets)

    @property
    def can_add(self) -> bool:
        return len(self.current_sets) < MAX_SETS

    @property
    def can_undo(self) -> bool:
        return self.current_file.previous_state is not None

    def refresh(self) -> list[DiagramNode]:
        """Re-derive the diagram from the current sets."""
        self.diagram = classify(self.current_sets)
        self._keep_selected_style_free()
        logger.debug(f"{self.current_file.name}: {len(self.current_sets)} sets -> "
                     f"{len(self.diagram)} nodes")
        return self.diagram

    def _remember_state(self) -> None:
        self.current_file.previous_state = list(self.current_sets)
        self.current_file.previous_state_is_redo = False

    # -------------------------------------------------------------------------
    # Styles
    # -------------------------------------------------------------------------

    def available_styles(self) -> list[tuple[str, str]]:
        """Styles not used by any set in the current file, in style order."""
        used = {user_set.style for user_set in self.current_sets}
        return [style for style in SET_STYLES if style not in used]

    @property
    def selected_style(self) -> tuple[str, str]:
        return SET_STYLES[self.selected_style_index]

    def next_style(self) -> tuple[str, str]:
        """Move the selection to the next free style (wrapping around)."""
        available = self.available_styles()
        if not available:
            return self.selected_style
        for step in range(1, len(SET_STYLES) + 1):
            index = (self.selected_style_index + step) % len(SET_STYLES)
            if SET_STYLES[index] in available:
                self.selected_style_index = index
                break
        return self.selected_style

    def _keep_selected_style_free(self) -> None:
        """Move the selection to the first free style if its set took it."""
        available = self.available_styles()
        if available and self.selected_style not in available:
            self.selected_style_index = SET_STYLES.index(available[0])

    def _style_for_new_set(self, style: Optional[tuple[str, str]]) -> tuple[str, str]:
        wanted = style or self.selected_style
        available = self.available_styles()
        if wanted in available:
            return wanted
        return available[0]

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def add_set(self, elements: Iterable[float],
                style: Optional[tuple[str, str]] = None) -> Optional[AddOutcome]:
        """
        Add a set to the current file.

        Returns what the diagram's newest node became, or None if the file
        is already full.
        """
        if not self.can_add:
            logger.info(f"{self.current_file.name} already has {MAX_SETS} sets, not adding")
            return None

        name, color = self._style_for_new_set(style)
        self._remember_state()
        self.current_sets = [*self.current_sets, UserSet(elements, name=name, color=color)]
        self.refresh()

        return outcome_for(self.diagram[-1])

    def add_set_from_text(self, text: str,
                          style: Optional[tuple[str, str]] = None) -> Optional[AddOutcome]:
        """Add a set from typed text like "2, 3, 5"."""
        return self.add_set(parse_elements(text), style)

    def undo(self) -> bool:
        """Swap back to the stored state. Calling again redoes."""
        file = self.current_file
        if file.previous_state is None:
            return False

        restored = file.previous_state
        file.previous_state = list(file.user_sets)
        file.user_sets = list(restored)
        file.previous_state_is_redo = not file.previous_state_is_redo
        self.refresh()
        logger.debug(f"{file.name}: {'undo' if file.previous_state_is_redo else 'redo'}")
        return True

    def empty_canvas(self) -> None:
        """Remove every set from the current file (can be undone)."""
        self._remember_state()
        self.current_sets = []
        self.refresh()

    def switch_file(self, index: int) -> None:
        if not 0 <= index < len(self.files):
            raise IndexError(f"No file at index {index}")
        self.current_file_index = index
        self.refresh()

    def load_example(self, name: str) -> list[DiagramNode]:
        """Replace the current sets with one of the tutorial examples."""
        if name not in EXAMPLES:
            raise KeyError(f"Unknown example: {name}")
        styles = dict(SET_STYLES)
        self._remember_state()
        self.current_sets = [
            UserSet(elements, name=style_name, color=styles[style_name])
            for style_name, elements in EXAMPLES[name]
        ]
        return self.refresh()
