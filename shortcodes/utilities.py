"""
# Shortcodes: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re

from shortcodes.constants import NORMALISED_SPACE_CHARACTERS


def normalise_spaces(string: str) -> str:
    """
    Map no-break spaces and zero-width spaces to ordinary spaces.
    """
    space_characters = ''.join(NORMALISED_SPACE_CHARACTERS)

    return re.sub(pattern=f'[{space_characters}]', repl=' ', string=string)


def contains_whitespace(string: str) -> bool:
    return re.search(pattern=r'[\s]', string=string) is not None
