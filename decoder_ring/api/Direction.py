"""Transform direction."""

from enum import Enum


class Direction(str, Enum):
    DECODE = "decode"
    ENCODE = "encode"
