"""
Vowels - a catalog of International Phonetic Alphabet vowels.

This package provides:
- An immutable Vowel model classified by height, backness and rounding
- The fixed catalog of every vowel on the IPA vowel chart
- A command line tool that enumerates the catalog
"""

__version__ = "0.1.0"
