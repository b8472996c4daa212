from __future__ import annotations
from pydantic import BaseModel, Field, model_validator

from cborview.binary.codecs.cursor import Cursor
from cborview.binary.codecs.strings import read_string
from cborview.binary.errors import CborError, ErrorCode
from .common import MajorType


def _owned_copy(cur: Cursor, major: MajorType) -> bytes:
    start = cur.tell()
    try:
        return read_string(cur, major)
    except MemoryError as e:
        raise CborError(ErrorCode.MEMORY, f"cannot copy {major.name} at {start}", start) from e


class CborBytes(BaseModel):
    """Byte string copied out of the input buffer."""
    value: bytes = b""
    length: int = Field(0, ge=0)

    @model_validator(mode="after")
    def length_matches(self) -> "CborBytes":
        if self.length != len(self.value):
            raise ValueError(f"length {self.length} != len(value) {len(self.value)}")
        return self

    def parse(self, cur: Cursor) -> None:
        data = _owned_copy(cur, MajorType.BYTES)
        self.value = data
        self.length = len(data)

    def clone(self) -> "CborBytes":
        return self.model_copy(deep=True)

    @classmethod
    def from_cursor(cls, cur: Cursor) -> "CborBytes":
        obj = cls()
        obj.parse(cur)
        return obj


class CborText(BaseModel):
    """
    Text string copied out of the input buffer. `value` holds the raw UTF-8
    bytes exactly as encoded; `length` counts those bytes (not characters).
    """
    value: bytes = b""
    length: int = Field(0, ge=0)

    @model_validator(mode="after")
    def length_matches(self) -> "CborText":
        if self.length != len(self.value):
            raise ValueError(f"length {self.length} != len(value) {len(self.value)}")
        return self

    def parse(self, cur: Cursor) -> None:
        data = _owned_copy(cur, MajorType.TEXT)
        self.value = data
        self.length = len(data)

    @property
    def c_str(self) -> bytes:
        """Content plus the terminating NUL."""
        return self.value + b"\x00"

    @property
    def text(self) -> str:
        return self.value.decode("utf-8", errors="replace")

    def clone(self) -> "CborText":
        return self.model_copy(deep=True)

    @classmethod
    def from_cursor(cls, cur: Cursor) -> "CborText":
        obj = cls()
        obj.parse(cur)
        return obj

    def __str__(self) -> str:
        return self.text
