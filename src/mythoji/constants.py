WINDOW_WIDTH = 900
WINDOW_HEIGHT = 640
WINDOW_TITLE = "mythoji gallery"

# Glyph grid; one page shows GALLERY_COLS * GALLERY_ROWS categories.
GALLERY_COLS = 6
GALLERY_ROWS = 4
CELL_SIZE = 120
CELL_GAP = 12

GLYPH_FONT_SIZE = 48
LABEL_FONT_SIZE = 10
STATUS_FONT_SIZE = 14
# Height reserved at the top of the window for the family / modifier status line.
STATUS_BAR_HEIGHT = 56

BACKGROUND_COLOR = (20, 30, 50)
CELL_COLOR = (44, 58, 86)
# Cells whose category ignores one of the chosen modifiers are drawn dimmer.
CELL_PARTIAL_COLOR = (34, 42, 60)
SELECTION_COLOR = (232, 215, 161)
