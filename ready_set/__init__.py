"""
Ready Set - An Animated Canvas for Learning Sets

A Textual TUI application providing:
- Set input: type numbers, get a set
- Diagram: circles, intersections, containments and three-way overlaps
- Files: five canvases with undo/redo

The classifier in ready_set.classifier is a pure function and can be used
without the app.
"""

__version__ = "1.0.0"
