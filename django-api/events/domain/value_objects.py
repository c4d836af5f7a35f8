"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Self

from events.domain.personal_code import is_valid_personal_code

# Upper bound of a 32-bit signed integer column.
MAX_HEAD_COUNT = 2_147_483_647
_SIGNED_ASCII_INT = re.compile(r"-?[0-9]+")


class ParticipantType(Enum):
    """Discriminator between individual and company registrations."""

    INDIVIDUAL = "individual"
    COMPANY = "company"


class PaymentMethod(Enum):
    BANK_TRANSFER = "bank_transfer"
    CASH = "cash"


def _parse_positive_id(value: str) -> int:
    parsed = int(value)
    if parsed <= 0:
        raise ValueError("Identifier must be a positive integer")
    return parsed


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=_parse_positive_id(value))


@dataclass(frozen=True)
class ParticipantId:
    """Unique identifier for a Participant."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=_parse_positive_id(value))


@dataclass(frozen=True)
class PersonalCode:
    """Checksum-valid Estonian personal identification code."""

    value: str

    def __post_init__(self) -> None:
        if not is_valid_personal_code(self.value):
            raise ValueError("Invalid Estonian personal code")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HeadCount:
    """Strictly positive number of people a company registers."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("Head count must be positive")
        if self.value > MAX_HEAD_COUNT:
            raise ValueError("Head count is too large")

    @classmethod
    def parse(cls, raw: str | int | None) -> Self:
        """Parse user input, raising ValueError for anything but a positive integer."""
        if raw is None or isinstance(raw, bool):
            raise ValueError("Head count is required")
        if isinstance(raw, int):
            return cls(value=raw)
        text = raw.strip()
        if not _SIGNED_ASCII_INT.fullmatch(text):
            raise ValueError("Head count must be a whole number")
        return cls(value=int(text))
