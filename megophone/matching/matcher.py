"""
Word matching on top of the phonetic encoder.

Normalizes raw words and names, then ranks candidates by match confidence.
"""

import logging
import re
from typing import Iterable, List, Optional
from dataclasses import dataclass

from ..utils.config import MatchConfig, default_match_config
from .scorer import MatchScorer, MatchResult

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MatchCandidate:
    """A candidate word scored against a query word."""
    query: str
    candidate: str
    match_result: MatchResult
    high_threshold: float = 85.0
    low_threshold: float = 60.0

    @property
    def confidence(self) -> float:
        """Overall confidence score (0-100)."""
        return self.match_result.overall_score

    @property
    def is_high_confidence(self) -> bool:
        """True if confidence >= the high threshold (likely the same word)."""
        return self.confidence >= self.high_threshold

    @property
    def is_medium_confidence(self) -> bool:
        return self.low_threshold <= self.confidence < self.high_threshold

    @property
    def is_low_confidence(self) -> bool:
        return self.confidence < self.low_threshold


class WordMatcher:
    """
    Matches words and names that sound alike.

    Matching Strategies:
    1. Double Metaphone codes - primary/secondary agreement
    2. Fuzzy string matching - handles typos and spelling differences
    3. Classic Metaphone keys - a second phonetic opinion
    """

    _PUNCTUATION = re.compile(r'[.,/\\()\[\]\'"\-]')

    def __init__(self, config: Optional[MatchConfig] = None):
        """
        Initialize the matcher.

        Args:
            config: Scoring weights and thresholds, or None for the defaults
        """
        self.config = config or default_match_config
        self.scorer = MatchScorer(self.config)

    def score(self, word1: str, word2: str) -> MatchResult:
        """Normalize both words and score them against each other."""
        return self.scorer.calculate_match_score(
            self.normalize_for_matching(word1),
            self.normalize_for_matching(word2)
        )

    def find_matches(
        self,
        word: str,
        candidates: Iterable[str],
        limit: Optional[int] = None
    ) -> List[MatchCandidate]:
        """
        Find candidates that plausibly match a word.

        Args:
            word: The query word
            candidates: Words to compare against
            limit: Maximum number of matches to return

        Returns:
            List of match candidates sorted by confidence (highest first)
        """
        query = self.normalize_for_matching(word)
        matches = []
        seen = 0

        for candidate in candidates:
            seen += 1
            match_result = self.scorer.calculate_match_score(
                query, self.normalize_for_matching(candidate)
            )

            if match_result.overall_score >= self.config.min_confidence:
                matches.append(MatchCandidate(
                    query=word,
                    candidate=candidate,
                    match_result=match_result,
                    high_threshold=self.config.high_confidence,
                    low_threshold=self.config.min_confidence
                ))

        matches.sort(key=lambda m: m.confidence, reverse=True)
        logger.debug("Scored %d candidates for %r, %d above threshold", seen, word, len(matches))

        if limit is not None:
            matches = matches[:limit]

        return matches

    def is_likely_match(self, word1: str, word2: str) -> bool:
        """
        Quick check if two words are likely the same.

        Returns:
            True if confidence >= the high confidence threshold
        """
        return self.score(word1, word2).overall_score >= self.config.high_confidence

    @classmethod
    def normalize_for_matching(cls, text: Optional[str]) -> str:
        """
        Normalize a word or name for matching.

        Lowercases, replaces punctuation with spaces and collapses whitespace.
        The encoder only knows lowercase letters, so folding happens here.

        Args:
            text: Raw word or name

        Returns:
            Normalized text
        """
        if not text:
            return ""

        normalized = cls._PUNCTUATION.sub(' ', text.lower().strip())
        return ' '.join(normalized.split())
