"""
Vowel data models.

This module defines the articulatory classifications of a vowel and the
immutable Vowel record built from them.
"""

import unicodedata
from enum import Enum
from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Height(str, Enum):
    """Tongue height relative to the palate, ordered from close to open."""
    CLOSE = "close"
    NEAR_CLOSE = "near_close"
    CLOSE_MID = "close_mid"
    MID = "mid"
    OPEN_MID = "open_mid"
    NEAR_OPEN = "near_open"
    OPEN = "open"


class Backness(str, Enum):
    """Tongue position relative to the back of the mouth."""
    FRONT = "front"
    CENTRAL = "central"
    BACK = "back"


class Rounding(str, Enum):
    """Shape of the lips. ANY marks a vowel unspecified for rounding."""
    UNROUNDED = "unrounded"
    ROUNDED = "rounded"
    ANY = "any"


def rank(member: Enum) -> int:
    """Position of an enum member in its declaration order."""
    return list(type(member)).index(member)


class Vowel(BaseModel):
    """A single vowel sound: its IPA symbol and articulatory classification."""
    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., description="IPA glyph, NFC-normalized")
    height: Height = Field(..., description="Tongue height")
    backness: Backness = Field(..., description="Tongue backness")
    rounding: Rounding = Field(..., description="Lip rounding")

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Vowel symbol must not be empty")
        return unicodedata.normalize("NFC", v)

    @property
    def chart_position(self) -> Tuple[int, int, int]:
        """(height, backness, rounding) ranks, for ordering vowels as on the IPA chart."""
        return rank(self.height), rank(self.backness), rank(self.rounding)

    @property
    def is_rounded(self) -> bool:
        return self.rounding == Rounding.ROUNDED

    def __str__(self) -> str:
        return (
            f"Vowel({self.symbol}, {self.height.value}, "
            f"{self.backness.value}, {self.rounding.value})"
        )
