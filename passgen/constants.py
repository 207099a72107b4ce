"""
Static character sets and limits used to build password keyspaces.
"""

from types import MappingProxyType

# Password length limits.
MINIMUM_LENGTH = 8
DEFAULT_LENGTH = 16

# One secure byte per draw gives 256 possible values, so no sampling range
# (and therefore no keyspace) may be larger than this.
MAX_RANDOM_RANGE = 256

# Selectors used when the caller gives none (or none we recognise).
DEFAULT_SETS = "luns"

LOWERCASE_LETTERS = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBERS = "1234567890"
SPECIAL_CHARACTERS = "!@#$%&*?,./|[]{}()"
WHITESPACE = " "

# Selector character -> character set. Read-only for the life of the process.
CHARACTER_SETS = MappingProxyType(
    {
        "l": LOWERCASE_LETTERS,
        "u": UPPERCASE_LETTERS,
        "n": NUMBERS,
        "s": SPECIAL_CHARACTERS,
        "w": WHITESPACE,
    }
)
