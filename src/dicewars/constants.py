FIELD_SIZE = 16
CELL_MARGIN = 3.0
DICE_FACES = 6

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 878  # square 800x800 canvas below the button strip
WINDOW_TITLE = "Dice wars"

# Roll button sits centred above the canvas; spacing separates it from the canvas top edge.
BUTTON_LABEL = "Throw dices!"
BUTTON_WIDTH = 220.0
BUTTON_HEIGHT = 48.0
BUTTON_TOP_MARGIN = 10.0
BUTTON_CANVAS_SPACING = 20.0
CANVAS_SIDE_MARGIN = 0.0
CANVAS_BOTTOM_MARGIN = 0.0

# ============================================================================
# COLOURS (RGB)
# ============================================================================
BACKGROUND_COLOR = (0, 0, 0)
CELL_BORDER_COLOR = (0, 0, 0)
CELL_FILL_COLOR = (255, 255, 255)
DICE_BORDER_COLOR = (230, 230, 230)  # 0.9 grey
DICE_FILL_COLOR = (255, 0, 0)
HOVER_BORDER_COLOR = (128, 128, 128)
HOVER_FILL_COLOR = (0, 255, 0)

BUTTON_FILL_COLOR = (72, 61, 139)
BUTTON_OUTLINE_COLOR = (255, 255, 255)
BUTTON_TEXT_COLOR = (255, 255, 255)
BUTTON_FONT_SIZE = 20
