"""Whole-word classification computed once before per-character dispatch."""

from dataclasses import dataclass


# Letter patterns that mark a word as Slavic or Germanic in origin
SLAVO_GERMANIC_MARKERS = ('w', 'k', 'cz', 'witz')


@dataclass(frozen=True, slots=True)
class WordContext:
    """Immutable facts about the word being encoded."""
    word: str
    is_slavo_germanic: bool = False

    @classmethod
    def from_word(cls, word: str) -> 'WordContext':
        """
        Classify a word before scanning it.

        Args:
            word: The unpadded input word

        Returns:
            WordContext shared by every handler invocation for this word
        """
        is_slavo_germanic = any(marker in word for marker in SLAVO_GERMANIC_MARKERS)
        return cls(word=word, is_slavo_germanic=is_slavo_germanic)
