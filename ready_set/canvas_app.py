#!/usr/bin/env python3
"""
Ready Set - Main Textual TUI Application

Type numbers, press Enter, and watch how your sets relate.

Keyboard controls:
- Enter: Add the typed numbers as a new set (up to 3 per file)
- F1-F5: Switch files (File A to File E)
- Ctrl+N: Pick the next free set style
- Ctrl+Z: Undo (press again to redo)
- Ctrl+L: Empty the canvas
- F12: Toggle dark/light theme
"""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.theme import Theme
from textual.widgets import Input, Static

from .config import configure_logging, get_theme
from .constants import (
    FILE_NAMES, ICON_FOLDER, ICON_MOON, ICON_REDO, ICON_SUN, ICON_UNDO,
    MAX_SETS,
)
from .render import diagram_tree, set_summary
from .workspace import AddOutcome, Workspace

logger = logging.getLogger(__name__)


# What to say after a set is added, by what the diagram became
FEEDBACK = {
    AddOutcome.EMPTY_SET: "Ø! A set with nothing in it.",
    AddOutcome.SET: "A brand new set!",
    AddOutcome.INTERSECTION: "They share elements. That's an intersection!",
    AddOutcome.COMPLEX_INTERSECTION: "Three sets linked together!",
    AddOutcome.CONTAINMENT: "One set fits inside another!",
    AddOutcome.THREE_WAY: "All three sets share something!",
}
FULL_FEEDBACK = f"That's {MAX_SETS} sets already. Empty the canvas or undo to make room."
NOTHING_TO_UNDO = "Nothing to undo yet."


class FileTitle(Static):
    """Shows the open file and the undo state above the canvas"""

    DEFAULT_CSS = """
    FileTitle {
        width: 100%;
        height: 1;
        text-align: center;
        color: $primary;
        text-style: bold;
    }
    """

    def render(self) -> str:
        workspace: Workspace = self.app.workspace
        undo_icon = ICON_REDO if workspace.current_file.previous_state_is_redo else ICON_UNDO
        undo = f"  {undo_icon}" if workspace.can_undo else ""
        return f"{ICON_FOLDER}  {workspace.current_file.name}{undo}"


class SetsPanel(Static):
    """Lists the sets in the open file"""

    DEFAULT_CSS = """
    SetsPanel {
        width: 30;
        height: 100%;
        border: round $secondary;
        padding: 0 1;
    }
    """

    def refresh_sets(self, workspace: Workspace) -> None:
        lines = [set_summary(user_set) for user_set in workspace.current_sets]
        if not lines:
            self.update("[dim]No sets yet[/]")
            return
        text = lines[0]
        for line in lines[1:]:
            text.append("\n")
            text.append_text(line)
        self.update(text)


class DiagramPanel(Static):
    """The diagram as a tree of shapes and their descriptions"""

    DEFAULT_CSS = """
    DiagramPanel {
        width: 1fr;
        height: 100%;
        border: round $primary;
        padding: 0 1;
    }
    """

    def refresh_diagram(self, workspace: Workspace) -> None:
        self.update(diagram_tree(workspace.diagram, title=workspace.current_file.name))


class StylePrompt(Static):
    """Shows which style the next set will take"""

    DEFAULT_CSS = """
    StylePrompt {
        width: auto;
        height: 3;
        padding: 1 1 0 0;
    }
    """

    def render(self) -> str:
        name, color = self.app.workspace.selected_style
        return f"[bold {color}]Set {name}[/] ="


class ReadySetApp(App):
    """
    Ready Set - a canvas for learning sets.

    Enter: Add set
    F1-F5: Switch files
    Ctrl+Z: Undo/redo
    Ctrl+L: Empty canvas
    """

    CSS = """
    Screen {
        background: $background;
    }

    #outer-container {
        width: 100%;
        height: 100%;
        padding: 1 2;
    }

    #canvas-row {
        height: 1fr;
    }

    #feedback {
        height: 1;
        margin-top: 1;
        color: $accent;
    }

    #input-row {
        height: 3;
    }

    #elements-input {
        width: 1fr;
    }
    """

    BINDINGS = [
        Binding("f1", "switch_file(0)", "File A", show=False, priority=True),
        Binding("f2", "switch_file(1)", "File B", show=False, priority=True),
        Binding("f3", "switch_file(2)", "File C", show=False, priority=True),
        Binding("f4", "switch_file(3)", "File D", show=False, priority=True),
        Binding("f5", "switch_file(4)", "File E", show=False, priority=True),
        Binding("ctrl+z", "undo", "Undo", show=False, priority=True),
        Binding("ctrl+l", "empty_canvas", "Empty", show=False, priority=True),
        Binding("ctrl+n", "next_style", "Style", show=False, priority=True),
        Binding("f12", "toggle_theme", "Theme", show=False, priority=True),
    ]

    def __init__(self, workspace: Workspace | None = None):
        super().__init__()
        self.workspace = workspace or Workspace(FILE_NAMES)
        self.feedback = ""

        self.register_theme(
            Theme(
                name="ready-set-dark",
                primary="#5863F8",
                secondary="#3AD993",
                warning="#FFE381",
                error="#F07F5A",
                success="#3AD993",
                accent="#FFE381",
                background="#23211F",
                surface="#373533",
                panel="#373533",
                dark=True,
            )
        )
        self.register_theme(
            Theme(
                name="ready-set-light",
                primary="#5863F8",
                secondary="#2a9d6b",
                warning="#b8962e",
                error="#c85a38",
                success="#2a9d6b",
                accent="#c85a38",
                background="#FCFBFA",
                surface="#efece8",
                panel="#efece8",
                dark=False,
            )
        )
        self.theme = f"ready-set-{get_theme()}"

    def compose(self) -> ComposeResult:
        """Create the UI layout"""
        with Container(id="outer-container"):
            yield FileTitle(id="file-title")
            with Horizontal(id="canvas-row"):
                yield SetsPanel(id="sets-panel")
                yield DiagramPanel(id="diagram-panel")
            yield Static("", id="feedback")
            with Horizontal(id="input-row"):
                yield StylePrompt(id="style-prompt")
                yield Input(placeholder="2, 3, 5", id="elements-input")

    def on_mount(self) -> None:
        self.workspace.refresh()
        self._refresh_canvas()
        self.query_one("#elements-input", Input).focus()

    def _refresh_canvas(self) -> None:
        self.query_one("#sets-panel", SetsPanel).refresh_sets(self.workspace)
        self.query_one("#diagram-panel", DiagramPanel).refresh_diagram(self.workspace)
        self.query_one("#feedback", Static).update(self.feedback)
        self.query_one("#file-title", FileTitle).refresh()
        self.query_one("#style-prompt", StylePrompt).refresh()

    def _say(self, message: str) -> None:
        self.feedback = message
        self._refresh_canvas()

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Add the typed numbers as a set"""
        outcome = self.workspace.add_set_from_text(event.value)
        if outcome is None:
            self._say(FULL_FEEDBACK)
            return
        event.input.value = ""
        logger.info(f"Added set to {self.workspace.current_file.name}: {outcome.value}")
        self._say(FEEDBACK[outcome])

    def action_switch_file(self, index: int) -> None:
        self.workspace.switch_file(index)
        self._say("")

    def action_undo(self) -> None:
        if not self.workspace.undo():
            self._say(NOTHING_TO_UNDO)
            return
        self._say("")

    def action_empty_canvas(self) -> None:
        self.workspace.empty_canvas()
        self._say("Canvas emptied. Ctrl+Z brings it back.")

    def action_next_style(self) -> None:
        self.workspace.next_style()
        self._refresh_canvas()

    def action_toggle_theme(self) -> None:
        dark = self.theme == "ready-set-dark"
        self.theme = "ready-set-light" if dark else "ready-set-dark"
        self.notify(ICON_SUN if dark else ICON_MOON, timeout=1)


def main():
    """Entry point for Ready Set"""
    configure_logging()
    app = ReadySetApp()
    app.run()


if __name__ == "__main__":
    main()
