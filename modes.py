"""Configuration layer: algorithm modes and digit domains.

Every mode computes the same numbers.  They differ only in how much
work they do, which matters once operands grow past a few digits:

  MulMode             repeated addition vs. schoolbook long multiplication
  PowMode             repeated multiplication vs. squaring
  ZeroSubtrahendMode  how ``a - 0`` travels through complement subtraction

``DigitBounds`` describes a finite set of decimal literals (values plus
leading-zero padding) that the verification factory sweeps.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from pydantic import BaseModel, ConfigDict, field_validator


# ---------------------------------------------------------------------------
# Mode enums
# ---------------------------------------------------------------------------

class MulMode(str, Enum):
    REPEATED_ADDITION = "repeated_addition"
    SCHOOLBOOK = "schoolbook"


class PowMode(str, Enum):
    REPEATED_MULTIPLICATION = "repeated_multiplication"
    SQUARING = "squaring"


class ZeroSubtrahendMode(str, Enum):
    COMPLEMENT_TEN = "complement_ten"   # substitute 10 ** width for 0's complement
    SHORT_CIRCUIT = "short_circuit"     # a - 0 is a no-op


# ---------------------------------------------------------------------------
# ArithmeticConfig
# ---------------------------------------------------------------------------

class ArithmeticConfig(BaseModel):
    """Which algorithm drives each operation.

    Accepts enum members or their string values; dashes and case are
    normalized, so ``{"mul_mode": "Repeated-Addition"}`` is valid.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    mul_mode: MulMode = MulMode.SCHOOLBOOK
    pow_mode: PowMode = PowMode.SQUARING
    zero_subtrahend: ZeroSubtrahendMode = ZeroSubtrahendMode.COMPLEMENT_TEN

    @field_validator("mul_mode", "pow_mode", "zero_subtrahend", mode="before")
    @classmethod
    def normalize_mode_name(cls, v):
        if isinstance(v, str) and not isinstance(v, Enum):
            return v.strip().lower().replace("-", "_")
        return v


FAITHFUL = ArithmeticConfig(
    mul_mode=MulMode.REPEATED_ADDITION,
    pow_mode=PowMode.REPEATED_MULTIPLICATION,
)
FAST = ArithmeticConfig()


# ---------------------------------------------------------------------------
# DigitBounds
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DigitBounds:
    """Every value below ``10 ** max_digits``, each written with
    0..``max_padding`` extra leading zeros."""

    max_digits: int
    max_padding: int = 0

    def __post_init__(self) -> None:
        if self.max_digits < 1:
            raise ValueError(f"max_digits must be >= 1, got {self.max_digits}")
        if self.max_padding < 0:
            raise ValueError(f"max_padding must be >= 0, got {self.max_padding}")

    @property
    def hi(self) -> int:
        """Largest value in the domain."""
        return 10 ** self.max_digits - 1

    @property
    def width(self) -> int:
        """Number of distinct literals."""
        return (self.hi + 1) * (self.max_padding + 1)

    def contains(self, text: str) -> bool:
        if not text or not all("0" <= ch <= "9" for ch in text):
            return False
        natural = text.lstrip("0") or "0"
        return (
            int(natural) <= self.hi
            and len(text) - len(natural) <= self.max_padding
        )

    def all_literals(self) -> Iterator[str]:
        for value in range(self.hi + 1):
            for pad in range(self.max_padding + 1):
                yield "0" * pad + str(value)

    def edge_literals(self) -> list[str]:
        pad = "0" * self.max_padding
        candidates = ["0", "1", "9", "10", str(self.hi - 1), str(self.hi),
                      pad + "0", pad + "1", pad + str(self.hi)]
        seen: list[str] = []
        for text in candidates:
            if self.contains(text) and text not in seen:
                seen.append(text)
        return seen

    def random_literal(self, rng: random.Random) -> str:
        value = rng.randint(0, self.hi)
        return "0" * rng.randint(0, self.max_padding) + str(value)


# ---------------------------------------------------------------------------
# Common presets
# ---------------------------------------------------------------------------

# Small enough for exhaustive verification
TINY = DigitBounds(max_digits=1, max_padding=1)
SMALL = DigitBounds(max_digits=2, max_padding=1)

# Sampled
MEDIUM = DigitBounds(max_digits=6, max_padding=2)
