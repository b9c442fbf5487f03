"""Tests for the mode commands (cmd_transform, cmd_list)."""

import pytest

from decoder_ring.api.Direction import Direction
from decoder_ring.api.mode import cmd_list, cmd_transform
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.unit


class TestCmdTransform:
    def test_announce_before_work(self):
        result = cmd_transform("hex", Direction.ENCODE, b"AB")
        assert result.announce == "Running hex encode..."
        assert result.output == {}
        assert not result.success

    def test_encode_strips_and_emits_newline(self):
        result = run_cmd(cmd_transform, "hex", Direction.ENCODE, b"AB\n")
        assert result.success
        assert result.output["data"] == b"4142\n"
        assert result.output["mode"] == "hex"
        assert result.output["direction"] == "encode"
        assert result.output["errors"] == []

    def test_strips_only_one_newline(self):
        result = run_cmd(cmd_transform, "hex", Direction.ENCODE, b"A\n\n")
        assert result.output["data"] == b"410a\n"

    def test_no_strip(self):
        result = run_cmd(cmd_transform, "hex", Direction.ENCODE, b"AB\n", strip_newline=False)
        assert result.output["data"] == b"41420a\n"

    def test_no_emit(self):
        result = run_cmd(cmd_transform, "hex", Direction.ENCODE, b"AB", emit_newline=False)
        assert result.output["data"] == b"4142"

    def test_hex_extended_never_gets_extra_newline(self):
        result = run_cmd(cmd_transform, "hex-extended", Direction.ENCODE, b"AB")
        assert result.success
        assert result.output["data"].endswith(b"|AB|\n")
        assert not result.output["data"].endswith(b"\n\n")

    def test_decode(self):
        result = run_cmd(cmd_transform, "rot13", Direction.DECODE, b"Uryyb\n")
        assert result.output["data"] == b"Hello\n"

    def test_charset(self):
        result = run_cmd(cmd_transform, "latin1", Direction.DECODE, b"\xe9")
        assert result.output["data"] == b"\xc3\xa9\n"

    def test_malformed_input(self):
        result = run_cmd(cmd_transform, "hex", Direction.DECODE, b"zz")
        assert not result.success
        assert result.output["data"] == b""
        assert len(result.output["errors"]) == 1
        assert result.result == result.output["errors"][0]

    def test_unknown_mode(self):
        result = run_cmd(cmd_transform, "nope", Direction.DECODE, b"")
        assert not result.success
        assert result.result == "Mode 'nope' not found"

    def test_missing_direction(self):
        result = run_cmd(cmd_transform, "codepoint", Direction.DECODE, b"A")
        assert not result.success
        assert result.result == "Mode 'codepoint' does not support decode"

    def test_progress_messages(self):
        result = cmd_transform("hex", Direction.ENCODE, b"AB")
        progress = list(result.progress_callback(result))
        assert progress[-1] == (1.0, "Complete")
        assert all(0.0 < fraction <= 1.0 for fraction, _ in progress)


class TestCmdList:
    def test_lists_sorted_modes(self):
        result = run_cmd(cmd_list)
        assert result.success
        modes = result.output["modes"]
        assert modes == sorted(modes)
        assert "codepoint*" in modes
        assert "hex" in modes
        assert result.result == f"Found {len(modes)} mode(s)"
