"""Configuration for the encoder and the matching layer."""

import math
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class EncoderConfig:
    """Configuration for the scanning engine."""

    # Filler appended to the word so lookahead windows near the end see spaces.
    # Rule 4c of the 'c' handler relies on the filler being a space.
    padding: int = 5
    pad_char: str = ' '

    def __post_init__(self):
        if self.padding < 0:
            raise ValueError(f"padding must be >= 0, got {self.padding}")
        if len(self.pad_char) != 1:
            raise ValueError(f"pad_char must be a single character, got {self.pad_char!r}")


# Keys MatchScorer reads from the weights and strength_scores tables
WEIGHT_KEYS = ('phonetic', 'spelling', 'metaphone')
STRENGTH_KEYS = ('strong', 'normal', 'weak', 'none')


@dataclass
class MatchConfig:
    """Scoring weights and confidence thresholds for word matching."""

    # Scoring weights (must sum to 1.0)
    weights: Dict[str, float] = field(default_factory=lambda: {
        'phonetic': 0.45,
        'spelling': 0.40,
        'metaphone': 0.15,
    })

    # Phonetic score for each match strength (0-100)
    strength_scores: Dict[str, float] = field(default_factory=lambda: {
        'strong': 100.0,
        'normal': 75.0,
        'weak': 50.0,
        'none': 0.0,
    })

    min_confidence: float = 60.0
    high_confidence: float = 85.0

    def __post_init__(self):
        """Validate weights, strength scores and thresholds."""
        missing = set(WEIGHT_KEYS) - set(self.weights)
        if missing:
            raise ValueError(f"Scoring weights missing keys: {sorted(missing)}")

        if not math.isclose(sum(self.weights.values()), 1.0, abs_tol=1e-6):
            raise ValueError(f"Scoring weights must sum to 1.0, got {sum(self.weights.values())}")

        missing = set(STRENGTH_KEYS) - set(self.strength_scores)
        if missing:
            raise ValueError(f"Strength scores missing keys: {sorted(missing)}")

        for name in ('min_confidence', 'high_confidence'):
            value = getattr(self, name)
            if not 0.0 <= value <= 100.0:
                raise ValueError(f"{name} must be between 0 and 100, got {value}")

        if self.min_confidence > self.high_confidence:
            raise ValueError("min_confidence cannot exceed high_confidence")


# Global configuration instances
default_encoder_config = EncoderConfig()
default_match_config = MatchConfig()
