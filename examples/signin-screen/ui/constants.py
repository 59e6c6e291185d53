"""Layout constants and color definitions."""

# Timing
FPS = 60

# Window
SCREEN_W = 480
SCREEN_H = 820

# Form column
FORM_W = 420
FORM_TOP = 50
FIELD_H = 48
FIELD_GAP = 20
BUTTON_W = 210
BUTTON_H = 50

# Decoration
CIRCLE_SIZE = 140
MARKER_MARGIN = 50
MARKER_EXTENT = 100

# Colors
BG_COLOR = (17, 27, 46)
ACCENT = (255, 59, 48)
FIELD_BG = (27, 38, 59)
TEXT_COLOR = (240, 240, 240)
TEXT_DIM = (153, 153, 153)
BUTTON_TEXT = (255, 255, 255)
NOTICE_BG = (35, 35, 50)
NOTICE_ERROR = (255, 120, 110)
NOTICE_OK = (100, 255, 100)

# Field name -> placeholder, in tab order
FIELDS: list[tuple[str, str]] = [
    ("username", "Enter your Username"),
    ("password", "Enter your Password"),
    ("name_or_email", "Enter your Name/Email"),
    ("age", "Enter your Age"),
]
