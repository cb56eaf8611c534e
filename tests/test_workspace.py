#!/usr/bin/env python3
"""Tests for the Workspace - files, undo/redo, set styles and add outcomes.

Run with: pytest tests/test_workspace.py -v
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from ready_set.constants import SET_STYLES
from ready_set.diagram import Containment, PairwiseIntersection, PlainSet, ThreeWayOverlap
from ready_set.sets import UserSet
from ready_set.workspace import AddOutcome, Workspace, outcome_for


@pytest.fixture
def workspace():
    return Workspace()


class TestAddSet:

    def test_starts_empty(self, workspace):
        assert workspace.current_file.name == "File A"
        assert workspace.current_sets == []
        assert workspace.diagram == []

    def test_first_set(self, workspace):
        assert workspace.add_set([2, 3, 5]) == AddOutcome.SET
        assert workspace.current_sets == [UserSet([2, 3, 5])]
        assert isinstance(workspace.diagram[0], PlainSet)

    def test_empty_set(self, workspace):
        assert workspace.add_set([]) == AddOutcome.EMPTY_SET

    def test_from_text(self, workspace):
        workspace.add_set_from_text("2, 3, 5")
        assert workspace.add_set_from_text("5, 7, 11") == AddOutcome.INTERSECTION
        assert workspace.diagram[0].description == "A ∩ B = { 5 }"

    def test_fourth_set_refused(self, workspace):
        for elements in ([1], [2], [3]):
            assert workspace.add_set(elements) is not None
        assert workspace.can_add is False
        assert workspace.add_set([4]) is None
        assert len(workspace.current_sets) == 3

    def test_containment_outcome(self, workspace):
        workspace.add_set([2, 3, 5])
        assert workspace.add_set([2, 3, 5, 6, 7, 11]) == AddOutcome.CONTAINMENT

    def test_complex_intersection_outcome(self, workspace):
        workspace.add_set([2, 3, 5])
        workspace.add_set([5, 7, 11])
        assert workspace.add_set([11, 13, 17]) == AddOutcome.COMPLEX_INTERSECTION

    def test_three_way_outcome(self, workspace):
        workspace.add_set([2, 3, 5])
        workspace.add_set([3, 5, 7])
        assert workspace.add_set([5, 7, 11]) == AddOutcome.THREE_WAY
        assert isinstance(workspace.diagram[0], ThreeWayOverlap)

    def test_outcome_follows_last_node(self, workspace):
        # The new set stays plain, but the diagram ends with the intersection
        workspace.add_set([1, 2])
        workspace.add_set([2, 3])
        assert workspace.add_set([9]) == AddOutcome.INTERSECTION


class TestOutcomeFor:

    def test_plain(self):
        assert outcome_for(PlainSet(UserSet([1]))) == AddOutcome.SET
        assert outcome_for(PlainSet(UserSet([]))) == AddOutcome.EMPTY_SET

    def test_nested_containment(self):
        a, b = PlainSet(UserSet([1], name="A")), PlainSet(UserSet([1, 2], name="B"))
        holder = Containment(inner=(a,), outer=b, description="B ⊂ A")
        node = PairwiseIntersection(left=holder, right=a, overlap_magnitude=30, description="")
        assert outcome_for(node) == AddOutcome.COMPLEX_INTERSECTION

    def test_not_a_node(self):
        with pytest.raises(TypeError):
            outcome_for(UserSet([1]))


class TestStyles:

    def test_first_set_takes_first_style(self, workspace):
        workspace.add_set([1])
        assert workspace.current_sets[0].style == SET_STYLES[0]

    def test_selection_moves_off_used_style(self, workspace):
        workspace.add_set([1])
        assert workspace.selected_style == SET_STYLES[1]
        workspace.add_set([2])
        assert workspace.current_sets[1].name == "B"

    def test_used_style_falls_back_to_first_free(self, workspace):
        workspace.add_set([1])
        workspace.add_set([2], style=SET_STYLES[0])
        assert workspace.current_sets[1].style == SET_STYLES[1]

    def test_explicit_free_style(self, workspace):
        workspace.add_set([1], style=SET_STYLES[3])
        assert workspace.current_sets[0].name == "D"
        assert SET_STYLES[3] not in workspace.available_styles()

    def test_next_style_skips_used(self, workspace):
        workspace.add_set([1], style=SET_STYLES[1])
        assert workspace.selected_style == SET_STYLES[0]
        assert workspace.next_style() == SET_STYLES[2]
        assert workspace.next_style() == SET_STYLES[3]
        assert workspace.next_style() == SET_STYLES[0]

    def test_undo_frees_selection(self, workspace):
        workspace.add_set([1])
        workspace.empty_canvas()
        for _ in range(3):
            workspace.next_style()
        assert workspace.selected_style == SET_STYLES[0]

        workspace.undo()
        assert workspace.selected_style in workspace.available_styles()
        assert workspace.selected_style == SET_STYLES[1]

    def test_switch_file_frees_selection(self, workspace):
        workspace.add_set([1])
        workspace.switch_file(1)
        for _ in range(3):
            workspace.next_style()
        assert workspace.selected_style == SET_STYLES[0]

        workspace.switch_file(0)
        assert workspace.selected_style == SET_STYLES[1]

    def test_example_frees_selection(self, workspace):
        workspace.load_example("intersection")
        assert workspace.selected_style == SET_STYLES[2]
        workspace.add_set([9])
        assert workspace.current_sets[-1].name == "C"

    def test_available_styles_in_order(self, workspace):
        workspace.add_set([1], style=SET_STYLES[2])
        assert workspace.available_styles() == [SET_STYLES[0], SET_STYLES[1], SET_STYLES[3]]


class TestUndo:

    def test_nothing_to_undo(self, workspace):
        assert workspace.can_undo is False
        assert workspace.undo() is False

    def test_undo_then_redo(self, workspace):
        workspace.add_set([2, 3, 5])
        workspace.add_set([5, 7, 11])

        assert workspace.undo() is True
        assert workspace.current_sets == [UserSet([2, 3, 5])]
        assert workspace.current_file.previous_state_is_redo is True
        assert isinstance(workspace.diagram[0], PlainSet)

        assert workspace.undo() is True
        assert len(workspace.current_sets) == 2
        assert workspace.current_file.previous_state_is_redo is False
        assert isinstance(workspace.diagram[0], PairwiseIntersection)

    def test_new_edit_resets_redo(self, workspace):
        workspace.add_set([1])
        workspace.undo()
        workspace.add_set([2])
        assert workspace.current_file.previous_state_is_redo is False
        workspace.undo()
        assert workspace.current_sets == []

    def test_empty_canvas_can_be_undone(self, workspace):
        workspace.add_set([1, 2])
        workspace.add_set([2, 3])
        workspace.empty_canvas()
        assert workspace.current_sets == []
        assert workspace.diagram == []

        workspace.undo()
        assert len(workspace.current_sets) == 2
        assert len(workspace.diagram) == 1


class TestFiles:

    def test_files_are_separate(self, workspace):
        workspace.add_set([1, 2])
        workspace.switch_file(1)
        assert workspace.current_file.name == "File B"
        assert workspace.current_sets == []
        assert workspace.diagram == []
        assert workspace.can_undo is False

        workspace.switch_file(0)
        assert workspace.current_sets == [UserSet([1, 2])]
        assert len(workspace.diagram) == 1

    def test_bad_file_index(self, workspace):
        with pytest.raises(IndexError):
            workspace.switch_file(5)

    def test_custom_file_names(self):
        workspace = Workspace(["Mine"])
        assert [f.name for f in workspace.files] == ["Mine"]


class TestExamples:

    def test_containment_example(self, workspace):
        (node,) = workspace.load_example("containment")
        assert isinstance(node, Containment)
        assert node.description == "D ⊂ C"

    def test_three_way_example(self, workspace):
        (node,) = workspace.load_example("three_way")
        assert node.description == "A ∩ C ∩ B = { 5 }"

    def test_example_can_be_undone(self, workspace):
        workspace.load_example("intersection")
        workspace.undo()
        assert workspace.current_sets == []

    def test_unknown_example(self, workspace):
        with pytest.raises(KeyError):
            workspace.load_example("union")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
