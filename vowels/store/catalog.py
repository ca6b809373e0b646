"""
Vowel Catalog - the fixed set of standard IPA vowels.

Provides read-only access to every vowel of the IPA vowel chart with support for:
- The complete set of vowels
- Lookup by symbol
- Filtering by height, backness and rounding

IPA: Vowels
             front          central       back

close        i•y──────────────ï•ü─────────ɯ•u
               ╲               │           │
near close      ╲  ɪ•ʏ        ɪ̈•ʊ̈     ɯ̞•ʊ  │
                 ╲             │           │
close mid        e•ø──────────ë•ö─────────ɤ•o
                   ╲           │           │
mid                e̞•ø̞         ə          ɤ̞•o̞
                     ╲         │           │
open mid             ɛ•œ──────ɜ•ɞ─────────ʌ•ɔ
                       ╲       │           │
near open               æ      ɐ           │
                         ╲     │           │
open                     a•ɶ──ä•ɒ̈─────────ɑ•ɒ
"""

import logging
import sys
import unicodedata
from functools import cached_property
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

from vowels.models.vowel import Vowel, Height, Backness, Rounding

logger = logging.getLogger(__name__)

# Symbols on the chart, schwa included
CATALOG_SIZE = 37


VOWEL_TABLE: Tuple[Vowel, ...] = (
    Vowel(symbol="i",  height="close",      backness="front",   rounding="unrounded"),
    Vowel(symbol="y",  height="close",      backness="front",   rounding="rounded"),
    Vowel(symbol="ï",  height="close",      backness="central", rounding="unrounded"),
    Vowel(symbol="ü",  height="close",      backness="central", rounding="rounded"),
    Vowel(symbol="ɯ",  height="close",      backness="back",    rounding="unrounded"),
    Vowel(symbol="u",  height="close",      backness="back",    rounding="rounded"),

    Vowel(symbol="ɪ",  height="near_close", backness="front",   rounding="unrounded"),
    Vowel(symbol="ʏ",  height="near_close", backness="front",   rounding="rounded"),
    Vowel(symbol="ɪ̈",  height="near_close", backness="central", rounding="unrounded"),
    Vowel(symbol="ʊ̈",  height="near_close", backness="central", rounding="rounded"),
    Vowel(symbol="ɯ̞",  height="near_close", backness="back",    rounding="unrounded"),
    Vowel(symbol="ʊ",  height="near_close", backness="back",    rounding="rounded"),

    Vowel(symbol="e",  height="close_mid",  backness="front",   rounding="unrounded"),
    Vowel(symbol="ø",  height="close_mid",  backness="front",   rounding="rounded"),
    Vowel(symbol="ë",  height="close_mid",  backness="central", rounding="unrounded"),
    Vowel(symbol="ö",  height="close_mid",  backness="central", rounding="rounded"),
    Vowel(symbol="ɤ",  height="close_mid",  backness="back",    rounding="unrounded"),
    Vowel(symbol="o",  height="close_mid",  backness="back",    rounding="rounded"),

    Vowel(symbol="e̞",  height="mid",        backness="front",   rounding="unrounded"),
    Vowel(symbol="ø̞",  height="mid",        backness="front",   rounding="rounded"),
    Vowel(symbol="ə",  height="mid",        backness="central", rounding="any"),
    Vowel(symbol="ɤ̞",  height="mid",        backness="back",    rounding="unrounded"),
    Vowel(symbol="o̞",  height="mid",        backness="back",    rounding="rounded"),

    Vowel(symbol="ɛ",  height="open_mid",   backness="front",   rounding="unrounded"),
    Vowel(symbol="œ",  height="open_mid",   backness="front",   rounding="rounded"),
    Vowel(symbol="ɜ",  height="open_mid",   backness="central", rounding="unrounded"),
    Vowel(symbol="ɞ",  height="open_mid",   backness="central", rounding="rounded"),
    Vowel(symbol="ʌ",  height="open_mid",   backness="back",    rounding="unrounded"),
    Vowel(symbol="ɔ",  height="open_mid",   backness="back",    rounding="rounded"),

    # Danish has a rounded near-open front vowel, but it is allophonic with ɶ.
    # A rounded ɐ is reported only for Sabiny. Both cells stay empty.
    Vowel(symbol="æ",  height="near_open",  backness="front",   rounding="unrounded"),
    Vowel(symbol="ɐ",  height="near_open",  backness="central", rounding="unrounded"),

    Vowel(symbol="a",  height="open",       backness="front",   rounding="unrounded"),
    Vowel(symbol="ɶ",  height="open",       backness="front",   rounding="rounded"),
    Vowel(symbol="ä",  height="open",       backness="central", rounding="unrounded"),
    Vowel(symbol="ɒ̈",  height="open",       backness="central", rounding="rounded"),
    Vowel(symbol="ɑ",  height="open",       backness="back",    rounding="unrounded"),
    Vowel(symbol="ɒ",  height="open",       backness="back",    rounding="rounded"),
)


class VowelCatalog(BaseModel):
    """
    Immutable collection of vowels keyed by symbol.

    Iteration, filter() and sorted() yield vowels in chart order
    (close to open, front to back, unrounded before rounded).
    all() returns a frozenset and carries no order.
    """
    model_config = ConfigDict(frozen=True)

    vowels: Tuple[Vowel, ...] = Field(..., description="Catalog members")

    @field_validator("vowels")
    @classmethod
    def validate_unique_symbols(cls, v: Tuple[Vowel, ...]) -> Tuple[Vowel, ...]:
        seen = set()
        for vowel in v:
            if vowel.symbol in seen:
                raise ValueError(f"Duplicate vowel symbol: {vowel.symbol}")
            seen.add(vowel.symbol)
        return v

    def model_post_init(self, __context) -> None:
        logger.debug("Vowel catalog built with %d entries", len(self.vowels))

    @cached_property
    def by_symbol(self) -> Mapping[str, Vowel]:
        """Read-only mapping from symbol to vowel."""
        return MappingProxyType({vowel.symbol: vowel for vowel in self.vowels})

    def all(self) -> frozenset:
        """Return every vowel in the catalog."""
        return frozenset(self.vowels)

    def sorted(self) -> List[Vowel]:
        """Return every vowel in chart order."""
        return sorted(self.vowels, key=lambda vowel: vowel.chart_position)

    def get(self, symbol: str) -> Optional[Vowel]:
        """
        Look up a vowel by its IPA symbol.

        Args:
            symbol: The IPA glyph, in composed or decomposed form

        Returns:
            The Vowel, or None if the symbol is not in the catalog
        """
        vowel = self.by_symbol.get(unicodedata.normalize("NFC", symbol))
        if vowel is None:
            logger.debug("Symbol %r not in catalog", symbol)
        return vowel

    def filter(
        self,
        height: Union[Height, str, None] = None,
        backness: Union[Backness, str, None] = None,
        rounding: Union[Rounding, str, None] = None,
    ) -> List[Vowel]:
        """
        Return the vowels matching every given classification, in chart order.

        Raises:
            ValueError: If a classification is not a member of its enumeration
        """
        wanted = {}
        if height is not None:
            wanted["height"] = Height(height)
        if backness is not None:
            wanted["backness"] = Backness(backness)
        if rounding is not None:
            wanted["rounding"] = Rounding(rounding)

        return [
            vowel for vowel in self.sorted()
            if all(getattr(vowel, name) == value for name, value in wanted.items())
        ]

    def integrity_problems(self) -> List[str]:
        """
        Check the catalog against the shape of the IPA vowel chart.

        Returns:
            Descriptions of every problem found; empty if the catalog is sound
        """
        problems = []
        if len(self.vowels) != CATALOG_SIZE:
            problems.append(f"Expected {CATALOG_SIZE} vowels, found {len(self.vowels)}")
        if len(self.by_symbol) != len(self.vowels):
            problems.append("Vowel symbols are not unique")
        unspecified = [vowel for vowel in self.vowels if vowel.rounding == Rounding.ANY]
        if len(unspecified) != 1:
            problems.append(f"Expected exactly one vowel unspecified for rounding, found {len(unspecified)}")
        elif (unspecified[0].height, unspecified[0].backness) != (Height.MID, Backness.CENTRAL):
            problems.append(f"Vowel unspecified for rounding must be mid central: {unspecified[0]}")
        return problems

    def print_all(self, file=None) -> None:
        """Print every vowel, one per line."""
        out = file if file is not None else sys.stdout
        for vowel in self:
            print(vowel, file=out)

    def __getitem__(self, symbol: str) -> Vowel:
        vowel = self.get(symbol)
        if vowel is None:
            raise KeyError(symbol)
        return vowel

    def __contains__(self, item: object) -> bool:
        """Membership by Vowel or by symbol."""
        if isinstance(item, Vowel):
            return self.by_symbol.get(item.symbol) == item
        return isinstance(item, str) and self.get(item) is not None

    def __iter__(self) -> Iterator[Vowel]:
        return iter(self.sorted())

    def __len__(self) -> int:
        return len(self.vowels)


# Global catalog instance - built at import, never mutated
catalog = VowelCatalog(vowels=VOWEL_TABLE)
