"""
Ready Set - Shared Constants

Central location for constants used across the app.
"""

# =============================================================================
# CANVAS LIMITS
# =============================================================================

MAX_SETS = 3                  # Sets per file (the classifier handles 0-3)

FILE_NAMES = ["File A", "File B", "File C", "File D", "File E"]

# =============================================================================
# LAYOUT SCALE
# =============================================================================
# Layout hints carried on diagram nodes. They have no meaning for the
# classification itself, only for how large and how far apart things are drawn.

SET_SIZE_PER_ELEMENT = 30     # Circle diameter per element
EMPTY_SET_SIZE = 20           # Minimum circle for Ø
OVERLAP_PER_ELEMENT = 30      # Intersection overlap per shared element
THREEWAY_OFFSET_PER_ELEMENT = 15  # Three-way offset per non-shared element

# =============================================================================
# SYMBOLS
# =============================================================================

EMPTY_SET_SYMBOL = "Ø"
INTERSECTION_SYMBOL = "∩"
SUBSET_SYMBOL = "⊂"

# =============================================================================
# SET STYLES
# =============================================================================
# Each set on the canvas takes one style. A style in use is unavailable
# until its set is removed.

SET_STYLES = [
    ("A", "#5863F8"),   # blue
    ("B", "#3AD993"),   # green
    ("C", "#FFE381"),   # yellow
    ("D", "#F07F5A"),   # orange
]

# Nerd Font icons (https://www.nerdfonts.com/cheat-sheet)
ICON_FOLDER = "󰉋"           # nf-md-folder
ICON_UNDO = "󰕌"             # nf-md-undo
ICON_REDO = "󰑎"             # nf-md-redo
ICON_TRASH = "󰩹"            # nf-md-trash_can
ICON_MOON = "󰖙"             # nf-md-weather_night
ICON_SUN = "󰖨"              # nf-md-weather_sunny
