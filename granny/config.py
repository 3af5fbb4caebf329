"""
granny - configuration

Defaults for the search goal, the word source and the sampling pass.
Every value here can be overridden from the command line (see ``run.py``).
"""

import re

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

# Search goal: 4 words, 20-24 characters in total
DEFAULT_WORDS_NUMBER = 4
DEFAULT_MIN_LENGTH = 20
DEFAULT_MAX_LENGTH = 24

# Word source
N_WORDS = 50000
MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 20
WORD_PATTERN = re.compile(rf"^[a-z0-9]{{{MIN_WORD_LENGTH},{MAX_WORD_LENGTH}}}$")

# Known-bad entries that must never end up in a password.
# Matched against whole words only: "password" blocks "password", not "passwords".
DENYLIST = {
    "password", "passw0rd", "qwerty", "qwertyuiop", "asdf", "asdfgh", "zxcv", "zxcvbn",
    "123456", "12345678", "123456789", "111111", "000000", "admin", "letmein", "welcome",
    "nazi", "rape", "rapist", "fuck", "sex",
}

# Sampling pass: how many signatures to draw and how loose the first ceiling is
SAMPLE_SIZE = 40
SAMPLE_CEILING = 110

# Keyboard rows, bottom row first. A key's position is (row, column).
KEYBOARD_ROWS = (
    "ZXCVBNM",
    "ASDFGHJKL",
    "QWERTYUIOP",
    "1234567890",
)

# ANSI color codes
GREEN = '\033[92m'
RED = '\033[91m'
YELLOW = '\033[93m'
RESET = '\033[0m'
