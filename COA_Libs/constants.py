"""
Constants and configuration values for Coat of Arms Core.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the library.
"""

# Tincture colors (R, G, B, A)
AZURE_RGBA = (0, 0, 255, 255)
GULES_RGBA = (255, 0, 0, 255)
MURREY_RGBA = (197, 75, 140, 255)      # mulberry
SANGUINE_RGBA = (178, 34, 34, 255)     # blood red / brick red
OR_RGBA = (255, 215, 0, 255)           # gold
VERT_RGBA = (0, 128, 0, 255)
PURPURE_RGBA = (128, 0, 128, 255)
TENNE_RGBA = (205, 87, 0, 255)         # tawny orange
SOLID_WHITE_RGBA = (255, 255, 255, 255)
SABLE_RGBA = (0, 0, 0, 255)

# Tincture picker draws from [TINCTURE_DRAW_MIN, TINCTURE_DRAW_MAX)
TINCTURE_DRAW_MIN = 1
TINCTURE_DRAW_MAX = 100
TINCTURE_BAND_WIDTH = 10

# Asset library layout
ORDINARIES_FOLDER = "OrdinaryFiles"
SHIELD_SHAPES_FOLDER = "ShieldShapeFiles"
CHARGES_FOLDER = "ChargesFiles"
ASSET_IMAGE_PATTERN = "*.png"
SOLID_ORDINARY_FILE_NAME = "Solid.png"
BLANK_CHARGE_FILE_NAME = "blank.png"

# Export
DEFAULT_EXTENSION = "png"   # png keeps the alpha channel
JPEG_QUALITY = 75

# Watermark opacity tokens -> 8-bit alpha
OPACITY_TABLE = {
    "100%": 255,
    "75%": 191,
    "50%": 127,
    "25%": 64,
    "10%": 25,
}
DEFAULT_OPACITY = 127
DEFAULT_COPYRIGHT_HOLDER = "Your Name"
COPYRIGHT_SYMBOL = "©"

# Image mode used for all compositing
WORKING_MODE = "RGBA"
