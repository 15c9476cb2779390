"""
# Shortcodes: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

NORMALISED_SPACE_CHARACTERS = (
    '\u00A0',  # NO-BREAK SPACE
    '\u200B',  # ZERO WIDTH SPACE
)
