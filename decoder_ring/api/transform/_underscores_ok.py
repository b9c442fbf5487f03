"""Check digit-separating underscores in a numeric literal."""

_DIGITS = "0123456789"
_HEX_LETTERS = "abcdefABCDEF"


def _underscores_ok(word: str) -> bool:
    """Report whether every '_' in word sits between digits.

    An underscore may also follow a base prefix (``0x_1p0``). It may not
    start or end the literal or touch a '.', an exponent or another '_'.
    """
    saw = "^"
    i = 0
    if word[:1] in ("+", "-"):
        word = word[1:]
    hexadecimal = False
    if len(word) >= 2 and word[0] == "0" and word[1] in "bBoOxX":
        i = 2
        saw = "0"
        hexadecimal = word[1] in "xX"
    for ch in word[i:]:
        if ch in _DIGITS or (hexadecimal and ch in _HEX_LETTERS):
            saw = "0"
        elif ch == "_":
            if saw != "0":
                return False
            saw = "_"
        elif saw == "_":
            return False
        else:
            saw = "!"
    return saw != "_"
