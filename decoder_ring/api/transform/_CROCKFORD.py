"""Crockford base32 alphabet and translation tables."""

CROCKFORD_ALPHABET = b"0123456789ABCDEFGHJKMNPQRSTVWXYZ"
STANDARD_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

TO_CROCKFORD = bytes.maketrans(STANDARD_ALPHABET, CROCKFORD_ALPHABET)
FROM_CROCKFORD = bytes.maketrans(CROCKFORD_ALPHABET, STANDARD_ALPHABET)

# Confusable letters folded into digits before decoding
CONFUSABLES = bytes.maketrans(b"ILO", b"110")
