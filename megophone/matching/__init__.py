"""
Word matching engine.

This module scores and ranks words that sound alike using Double Metaphone
codes, fuzzy string matching and classic Metaphone keys.
"""

from .matcher import WordMatcher, MatchCandidate
from .scorer import MatchScorer, MatchResult, PhoneticStrength, compare_codes

__all__ = [
    'WordMatcher',
    'MatchCandidate',
    'MatchScorer',
    'MatchResult',
    'PhoneticStrength',
    'compare_codes',
]
