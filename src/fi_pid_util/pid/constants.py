"""Fixed tables of the Finnish PID format.

Format ``DDMMYYCNNNK``: day, month and two digit year of birth, a century
character, a three digit individual number and a control character. See
https://dvv.fi/henkilotunnus for the authoritative description.
"""

from types import MappingProxyType
from typing import Mapping

PID_LENGTH = 11

# Index of the century character in the PID string
CENTURY_INDEX = 6

# Century character -> first year of the century
CENTURY_CHARACTERS: Mapping[str, int] = MappingProxyType(
    {
        "+": 1800,
        "-": 1900,
        "Y": 1900,
        "X": 1900,
        "W": 1900,
        "V": 1900,
        "U": 1900,
        "A": 2000,
        "B": 2000,
        "C": 2000,
        "D": 2000,
        "E": 2000,
        "F": 2000,
    }
)

# G, I, O and Q are left out
CHECKSUM_CHARACTERS = "0123456789ABCDEFHJKLMNPRSTUVWXY"
CHECKSUM_DIVISOR = 31

VALID_INDIVIDUAL_NUMBERS = range(2, 900)
TEST_INDIVIDUAL_NUMBERS = range(900, 1000)

MIN_YEAR = 1800
MAX_YEAR = 2099

ASCII_DIGITS = frozenset("0123456789")
