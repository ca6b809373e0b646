"""Data models for the vowels package."""

from vowels.models.vowel import (
    Vowel,
    Height,
    Backness,
    Rounding,
)

__all__ = [
    "Vowel",
    "Height",
    "Backness",
    "Rounding",
]
