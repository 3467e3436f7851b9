"""
Match scoring engine for words and names.

Combines Double Metaphone code agreement, fuzzy spelling similarity and
classic Metaphone keys into an overall confidence score.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple
from dataclasses import dataclass, field
from rapidfuzz import fuzz
import phonetics

from ..core.encoder import DoubleMetaphone
from ..utils.config import MatchConfig, default_match_config


class PhoneticStrength(Enum):
    """How closely two pairs of Double Metaphone codes agree."""
    STRONG = 'strong'    # primary == primary
    NORMAL = 'normal'    # primary == other secondary
    WEAK = 'weak'        # secondary == secondary
    NONE = 'none'


@dataclass
class MatchResult:
    """Results of matching two words."""

    codes1: Tuple[str, str] = ('', '')
    codes2: Tuple[str, str] = ('', '')
    strength: PhoneticStrength = PhoneticStrength.NONE

    # Individual component scores (0-100)
    phonetic_score: float = 0.0
    spelling_score: float = 0.0
    metaphone_score: float = 0.0

    # Overall confidence (0-100)
    overall_score: float = 0.0

    details: Dict[str, Any] = field(default_factory=dict)

    is_exact_match: bool = False

    def __str__(self) -> str:
        """Human-readable description."""
        return (
            f"Match Score: {self.overall_score:.1f}% ({self.strength.value})\n"
            f"  Phonetic: {self.phonetic_score:.1f}%\n"
            f"  Spelling: {self.spelling_score:.1f}%\n"
            f"  Metaphone: {self.metaphone_score:.1f}%"
        )


def compare_codes(codes1: Tuple[str, str], codes2: Tuple[str, str]) -> PhoneticStrength:
    """
    Classify the agreement between two (primary, secondary) code pairs.

    Empty codes never count as agreeing.
    """
    primary1, secondary1 = codes1
    primary2, secondary2 = codes2

    if primary1 and primary1 == primary2:
        return PhoneticStrength.STRONG
    if (primary1 and primary1 == secondary2) or (primary2 and primary2 == secondary1):
        return PhoneticStrength.NORMAL
    if secondary1 and secondary1 == secondary2:
        return PhoneticStrength.WEAK
    return PhoneticStrength.NONE


class MatchScorer:
    """
    Calculates match scores between two words.

    Both words are expected to be normalized already (see
    WordMatcher.normalize_for_matching); the encoder is case-sensitive.
    """

    def __init__(
        self,
        config: Optional[MatchConfig] = None,
        encoder: Optional[DoubleMetaphone] = None
    ):
        self.config = config or default_match_config
        self.encoder = encoder or DoubleMetaphone()

    def encode_name(self, name: str) -> Tuple[str, str]:
        """
        Encode a normalized name as one string.

        Multi-word names are not split, so rules anchored at the start of
        the name ("van ", "von ", "mc") still see the particle.

        Args:
            name: Normalized name, possibly several space-separated words

        Returns:
            Tuple of (primary, secondary) codes for the whole name
        """
        return self.encoder.encode(name)

    def calculate_match_score(self, word1: str, word2: str) -> MatchResult:
        """
        Calculate overall match score between two words.

        Args:
            word1: First normalized word
            word2: Second normalized word

        Returns:
            MatchResult with scores and details
        """
        result = MatchResult()

        result.codes1 = self.encode_name(word1)
        result.codes2 = self.encode_name(word2)
        result.strength = compare_codes(result.codes1, result.codes2)

        result.phonetic_score = self.config.strength_scores[result.strength.value]
        result.spelling_score = self._score_spelling(word1, word2)
        result.metaphone_score = self._score_metaphone(word1, word2, result)

        weights = self.config.weights
        result.overall_score = (
            result.phonetic_score * weights['phonetic'] +
            result.spelling_score * weights['spelling'] +
            result.metaphone_score * weights['metaphone']
        )

        if word1 and word1 == word2:
            result.is_exact_match = True

        return result

    @staticmethod
    def _score_spelling(word1: str, word2: str) -> float:
        if not word1 or not word2:
            return 0.0
        return fuzz.ratio(word1, word2)

    @staticmethod
    def _score_metaphone(word1: str, word2: str, result: MatchResult) -> float:
        """Compare classic Metaphone keys of the two words."""
        key1 = phonetics.metaphone(''.join(word1.split())) if word1 else ''
        key2 = phonetics.metaphone(''.join(word2.split())) if word2 else ''

        result.details['metaphone'] = {'key1': key1, 'key2': key2}

        if key1 and key1 == key2:
            return 100.0
        return 0.0
