"""
Morse code tables and codec

The forward table is a literal constant; the decode table is derived from it
once at import time. Both are read-only mappings.
"""

import re
from types import MappingProxyType
from typing import Mapping, Pattern, Union

MORSE_CODE: Mapping[str, str] = MappingProxyType({
    # Letters
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",
    # Digits
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
    # Punctuation
    ".": ".-.-.-", ",": "--..--", "?": "..--..", "'": ".----.", "!": "-.-.--",
    "/": "-..-.", "(": "-.--.", ")": "-.--.-", "&": ".-...", ":": "---...",
    ";": "-.-.-.", "=": "-...-", "+": ".-.-.", "-": "-....-", "_": "..--.-",
    '"': ".-..-.", "$": "...-..-", "@": ".--.-.",
})

MORSE_DECODE: Mapping[str, str] = MappingProxyType(
    {code: char for char, code in MORSE_CODE.items()}
)

# Codewords must be unique or decoding silently picks the last character
assert len(MORSE_DECODE) == len(MORSE_CODE), "duplicate codeword in MORSE_CODE"

DEFAULT_WORD_SEPARATOR = " / "
DEFAULT_CHAR_SEPARATOR = " "

# " / " or " /// " between words; bare slashes and runs of spaces are not word breaks
WORD_SEPARATOR_PATTERN = re.compile(r" / | /// ")
CHAR_SEPARATOR_PATTERN = re.compile(r" +")

MORSE_ALPHABET = frozenset(".-/ ")


def encode(
    text: str,
    word_separator: str = DEFAULT_WORD_SEPARATOR,
    char_separator: str = DEFAULT_CHAR_SEPARATOR,
) -> str:
    """Encode text as Morse code

    Characters without a codeword are kept as they are.
    """
    words = text.upper().split(" ")
    return word_separator.join(
        char_separator.join(MORSE_CODE.get(char, char) for char in word) for word in words
    )


def decode(
    morse: str,
    word_separator: Union[str, Pattern] = WORD_SEPARATOR_PATTERN,
    char_separator: Union[str, Pattern] = CHAR_SEPARATOR_PATTERN,
) -> str:
    """Decode Morse code into uppercase text

    Separators may be plain strings or compiled patterns. Tokens that are not
    known codewords are kept as they are.
    """
    word_pattern = _as_pattern(word_separator)
    char_pattern = _as_pattern(char_separator)

    words = []
    for word in word_pattern.split(morse):
        tokens = [token for token in char_pattern.split(word) if token]
        words.append("".join(MORSE_DECODE.get(token, token) for token in tokens))
    return " ".join(words)


def is_valid_morse(text: str) -> bool:
    """Check that text only uses dots, dashes, slashes and spaces

    Only the symbol alphabet is checked, not whether codewords exist.
    """
    return all(char in MORSE_ALPHABET for char in text)


def _as_pattern(separator: Union[str, Pattern]) -> Pattern:
    if isinstance(separator, str):
        return re.compile(re.escape(separator))
    return separator
