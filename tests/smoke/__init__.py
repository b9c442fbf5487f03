"""Smoke tests for the CLI entrypoint.

These tests execute ``python -m decoder_ring`` in a subprocess to validate
the byte-level stdin/stdout contract and exit codes.
"""
