from __future__ import annotations
from enum import IntEnum


class MajorType(IntEnum):
    UINT = 0
    NINT = 1
    BYTES = 2
    TEXT = 3
    ARRAY = 4
    MAP = 5
    TAGGED = 6
    FLOAT = 7


# Simple values of major type 7 with a fixed meaning.
class Simple(IntEnum):
    FALSE = 20
    TRUE = 21
    NULL = 22
    UNDEFINED = 23


def major_of(initial_byte: int) -> int:
    return (initial_byte >> 5) & 7
