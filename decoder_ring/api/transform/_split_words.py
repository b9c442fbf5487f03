"""Whitespace tokenizer for the numeric transforms."""


def _split_words(src: bytes) -> list[str]:
    """Split input into whitespace-separated text tokens, order preserved."""
    return src.decode("utf-8", errors="replace").split()
