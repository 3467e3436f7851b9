"""megophone - Double Metaphone phonetic codes for fuzzy word and name matching."""

__version__ = "0.1.0"

from .core.encoder import DoubleMetaphone, double_metaphone
from .core.handlers import Decision, HandlerRegistry
from .matching import WordMatcher, MatchScorer, MatchResult, PhoneticStrength

__all__ = [
    'DoubleMetaphone',
    'double_metaphone',
    'Decision',
    'HandlerRegistry',
    'WordMatcher',
    'MatchScorer',
    'MatchResult',
    'PhoneticStrength',
]
