"""Unicode name of a code point, with labels for unnamed ones."""

import unicodedata

_LABELS = {
    "Cc": "<control>",
    "Co": "<private-use>",
    "Cs": "<surrogate>",
}


def _codepoint_name(ch: str) -> str:
    name = unicodedata.name(ch, "")
    if name:
        return name
    code = ord(ch)
    if 0xFDD0 <= code <= 0xFDEF or code & 0xFFFE == 0xFFFE:
        return "<noncharacter>"
    return _LABELS.get(unicodedata.category(ch), "<reserved>")
