"""List mode names for help text."""

from ._MODES import MODES


def enumerate_modes() -> list[str]:
    """Get sorted mode names; encode-only modes carry a trailing '*'."""
    return sorted(f"{name}*" if mode.encode_only else name for name, mode in MODES.items())
