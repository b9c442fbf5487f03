"""Canonical hex dump encoder (offset, 16 hex bytes, ASCII gutter)."""

_BYTES_PER_LINE = 16


def _gutter_char(b: int) -> str:
    return chr(b) if 0x20 <= b <= 0x7E else "."


def hex_ext_enc(src: bytes) -> bytes:
    """Render src as a hex dump.

    Every line, including the last, ends with a newline. A short final line is
    padded so that its gutter lines up with the full lines above it. Empty
    input produces empty output.
    """
    lines = []
    for offset in range(0, len(src), _BYTES_PER_LINE):
        chunk = src[offset : offset + _BYTES_PER_LINE]
        cells = []
        for i in range(_BYTES_PER_LINE):
            cell = f"{chunk[i]:02x} " if i < len(chunk) else "   "
            if i == 7:
                cell += " "
            elif i == _BYTES_PER_LINE - 1:
                cell += " |"
            cells.append(cell)
        gutter = "".join(_gutter_char(b) for b in chunk)
        lines.append(f"{offset & 0xFFFFFFFF:08x}  {''.join(cells)}{gutter}|\n")
    return "".join(lines).encode("ascii")
