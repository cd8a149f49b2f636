"""
Base83 - Positional integer decoding over the BlurHash alphabet
"""

# Order is part of the format: a character's digit value is its index here.
ALPHABET = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "#$%*+,-.:;=?@[]^_{|}~"
)

_DIGITS = {char: index for index, char in enumerate(ALPHABET)}


def decode83(text):
    """
    Decode a base83 string into a non-negative integer.
    
    Characters outside the alphabet are skipped without touching the
    accumulator, so "A!B" decodes the same as "AB".
    
    Args:
        text: String of base83 digits, most significant first
        
    Returns:
        int: Decoded value
    """
    value = 0
    for char in text:
        digit = _DIGITS.get(char)
        if digit is not None:
            value = value * 83 + digit
    return value
