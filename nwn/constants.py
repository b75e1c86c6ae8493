"""Fixed values shared across nwn."""

import re

# Horizontal whitespace immediately before a line feed.
TRAILING_WHITESPACE = re.compile(rb"[ \t]*\n")

# Pillow format identifiers tried when sniffing for images.
IMAGE_FORMATS = ("PNG", "JPEG", "GIF", "BMP", "TIFF", "WEBP", "ICO")

DIFF_COMMAND = "diff"
TEMP_PREFIX = "nwn"
ORIG_SUFFIX = ".orig"
