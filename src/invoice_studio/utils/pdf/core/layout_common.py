"""
Layout and style constants for PDF rendering.
Coordinates are PDF points with the origin at the top-left corner of the page.
"""

# Page geometry (A4, points)
PAGE_W, PAGE_H = 595, 842
MARGIN = 36
CONTENT_W = PAGE_W - 2 * MARGIN

# Vertical limits: body content stays above the footer band
FOOTER_Y = PAGE_H - 30
BODY_BOTTOM = PAGE_H - 52

# Text sizes
BUSINESS_NAME_SIZE = 18
TITLE_SIZE = 16
SECTION_HEADER_SIZE = 11
SECTION_BODY_SIZE = 10
TABLE_FONT_SIZE = 9
FOOTER_SIZE = 8
LINE_HEIGHT = 14

# Block geometry
LOGO_SIZE = 72
QR_SIZE = 72
COL_GAP = 20
COL_WIDTH = (CONTENT_W - COL_GAP) / 2
SUMMARY_WIDTH = 240
SECTION_GAP = 16

# Table geometry
TABLE_HEADER_HEIGHT = 22
TABLE_ROW_HEIGHT = 20

# Colors (RGB 0-255)
COLORS = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "dark": (40, 40, 40),
    "text": (50, 50, 50),
    "muted": (100, 100, 100),
    "faint": (150, 150, 150),
    "border": (205, 210, 216),
    "accent": (22, 160, 133),
    "accent_dark": (16, 128, 103),
    "row_alt": (241, 245, 247),
}


def color(name: str) -> tuple[int, int, int]:
    return COLORS.get(name, (0, 0, 0))
