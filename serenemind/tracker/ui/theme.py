"""
Serenemind Theme - Centralized color palette.

Color Philosophy:
- Everything is tinted from one purple so both tabs read as the same app
- Backgrounds are a light wash of the primary; cards are plain white
- Text uses the primary at decreasing opacity for hierarchy
"""

# =============================================================================
# PRIMARY ACCENT COLORS
# =============================================================================
PURPLE_PRIMARY = "#9C27B0"       # Titles, buttons, counter
PURPLE_STRONG = "rgba(156,39,176,0.8)"
PURPLE_SOFT = "rgba(156,39,176,0.5)"
PURPLE_FAINT = "rgba(156,39,176,0.3)"
WHITE = "#FFFFFF"

# =============================================================================
# BACKGROUND COLORS
# =============================================================================
BG_PAGE = "rgba(156,39,176,0.2)"    # Light purple wash behind both tabs
BG_CARD = WHITE                      # Journal entries, text input
BG_NAV = "#F3E5F5"                   # Bottom navigation bar

# =============================================================================
# SEMANTIC UI TOKENS
# =============================================================================

# --- Text ---
TEXT_TITLE = PURPLE_PRIMARY           # Screen titles ("Anger Tracker")
TEXT_SECTION_HEADER = PURPLE_PRIMARY  # "Journaled Reasons"
TEXT_CAPTION = "rgba(156,39,176,0.7)" # "Total Anger Count", breathing hint
TEXT_PLACEHOLDER = TEXT_CAPTION       # Empty journal text
TEXT_ENTRY = "#212121"                # Journal entry body

# --- Buttons ---
BUTTON_BG = PURPLE_PRIMARY
BUTTON_TEXT = WHITE

# --- Progress ring ---
RING_TRACK = PURPLE_FAINT
RING_VALUE = PURPLE_STRONG
RING_SIZE = 180
RING_STROKE = 20

# --- Breathing circles ---
BREATH_HALO = PURPLE_FAINT
BREATH_CORE = PURPLE_SOFT

# --- Shape ---
CORNER_RADIUS = 10
SHADOW_BLUR = 5
