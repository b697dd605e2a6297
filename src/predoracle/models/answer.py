"""Reality answer values and outcome selections (sentinel or concrete indices)."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field

ANSWER_SIZE = 32
MAX_ANSWER = 2 ** (8 * ANSWER_SIZE) - 1

INVALID_RESULT = b"\xff" * ANSWER_SIZE
ANSWERED_TOO_SOON = b"\xff" * (ANSWER_SIZE - 1) + b"\xfe"
ZERO_ANSWER = b"\x00" * ANSWER_SIZE

INVALID_RESULT_HEX = "0x" + INVALID_RESULT.hex()
ANSWERED_TOO_SOON_HEX = "0x" + ANSWERED_TOO_SOON.hex()


class Sentinel(str, Enum):
    """Reserved Reality answers. Values are the on-chain hex encodings."""

    INVALID_RESULT = INVALID_RESULT_HEX
    ANSWERED_TOO_SOON = ANSWERED_TOO_SOON_HEX

    @property
    def answer(self) -> bytes:
        return INVALID_RESULT if self is Sentinel.INVALID_RESULT else ANSWERED_TOO_SOON

    @property
    def text(self) -> str:
        return "Invalid result" if self is Sentinel.INVALID_RESULT else "Answered too soon"

    @classmethod
    def from_answer(cls, value: bytes) -> Sentinel | None:
        """Return the sentinel bit-equal to value, if any."""
        if value == INVALID_RESULT:
            return cls.INVALID_RESULT
        if value == ANSWERED_TOO_SOON:
            return cls.ANSWERED_TOO_SOON
        return None


class SentinelAnswer(BaseModel):
    """Selection that resolves to a reserved answer, whatever else was chosen."""

    model_config = ConfigDict(frozen=True)

    sentinel: Sentinel


class ConcreteAnswer(BaseModel):
    """Selection of outcome indices (one for scalar kinds, any number for multi-select)."""

    model_config = ConfigDict(frozen=True)

    indices: tuple[Annotated[int, Field(ge=0)], ...] = Field(..., min_length=1)


Selection = Union[SentinelAnswer, ConcreteAnswer]


def answer_from_hex(value: str) -> bytes:
    """Parse a 0x-prefixed (or bare) hex answer, left-padding to 32 bytes."""
    text = value[2:] if value[:2].lower() == "0x" else value
    if len(text) > ANSWER_SIZE * 2:
        raise ValueError(f"answer longer than {ANSWER_SIZE} bytes: {value!r}")
    try:
        return bytes.fromhex(text.rjust(ANSWER_SIZE * 2, "0"))
    except ValueError as e:
        raise ValueError(f"answer is not valid hex: {value!r}") from e


def answer_to_hex(value: bytes) -> str:
    return "0x" + value.hex()
