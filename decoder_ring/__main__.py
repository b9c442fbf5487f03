"""Entry point for running decoder_ring as a module."""

import sys

from decoder_ring.cli import main

if __name__ == "__main__":
    sys.exit(main(prog="decoder-ring"))
