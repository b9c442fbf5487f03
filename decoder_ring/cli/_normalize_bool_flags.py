"""Rewrite ``-flag=value`` boolean options into plain flags."""

import re

_ASSIGNED_FLAG = re.compile(r"--?(encode|strip|emit|e|s|t)=(.*)", re.DOTALL)

# Flag name -> (option when true, option when false)
_FLAG_PAIRS = {
    "encode": ("--encode", "--decode"),
    "e": ("--encode", "--decode"),
    "strip": ("--strip", "--no-strip"),
    "s": ("--strip", "--no-strip"),
    "emit": ("--emit", "--no-emit"),
    "t": ("--emit", "--no-emit"),
}
_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _normalize_bool_flags(args: list[str]) -> list[str]:
    """Turn ``-strip=false``, ``--emit=0``, ``-e=true`` and the like into flags.

    Values are the boolean spellings 1/0, t/f, true/false (any of the
    three cases). Anything else is left alone for the parser to reject.
    Arguments after ``--`` are never touched.
    """
    out = []
    for index, arg in enumerate(args):
        if arg == "--":
            out.extend(args[index:])
            break
        match = _ASSIGNED_FLAG.fullmatch(arg)
        if match and match.group(2) in _TRUE | _FALSE:
            on, off = _FLAG_PAIRS[match.group(1)]
            out.append(on if match.group(2) in _TRUE else off)
        else:
            out.append(arg)
    return out
