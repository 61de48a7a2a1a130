"""
Input sanitiser
===============
Reduces raw input to the A-Z alphabet every cipher in the package
accepts: letters are upper-cased, digits are spelled out in English,
everything else (whitespace, punctuation, accented letters) is dropped.
"""

DIGIT_WORDS = {
    "0": "ZERO", "1": "ONE", "2": "TWO",   "3": "THREE", "4": "FOUR",
    "5": "FIVE", "6": "SIX", "7": "SEVEN", "8": "EIGHT", "9": "NINE",
}


def transform_char(ch: str) -> str:
    """Map one input character to zero or more of A-Z."""
    if ch.isascii() and ch.isalpha():
        return ch.upper()
    return DIGIT_WORDS.get(ch, "")


def sanitize(text: str) -> str:
    return "".join(transform_char(ch) for ch in text)
