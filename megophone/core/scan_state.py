"""
Mutable scan state shared by the scan loop and the letter handlers.

One instance is created per encoded word and discarded once both codes
have been returned.
"""

from typing import List, Tuple
from dataclasses import dataclass, field

from .context import WordContext


VOWELS = ('a', 'e', 'i', 'o', 'u', 'y')


@dataclass
class ScanState:
    """Cursor, padded text and the two code accumulators for one word."""
    text: str
    context: WordContext
    cursor: int = 0
    primary: List[str] = field(default_factory=list)
    secondary: List[str] = field(default_factory=list)

    def matches(self, offset: int, *candidates: str) -> bool:
        """
        Check whether the text at a cursor-relative offset equals any candidate.

        Args:
            offset: Position relative to the cursor (may be negative)
            *candidates: Substrings to compare against

        Returns:
            True if there are no candidates or one of them matches
        """
        if not candidates:
            return True

        pos = self.cursor + offset
        if pos < 0:
            return False

        for candidate in candidates:
            end = pos + len(candidate)
            # Windows running past the padding never match
            if end > len(self.text):
                continue
            if self.text[pos:end] == candidate:
                return True

        return False

    def is_vowel(self, offset: int) -> bool:
        """True if the character at the relative offset is a lowercase vowel."""
        return self.matches(offset, *VOWELS)

    def add(self, *phonemes: str) -> None:
        """
        Append phoneme fragments to the codes.

        A single fragment goes to both codes; with two, the first goes to
        the primary code and the second to the secondary code.
        """
        if not phonemes:
            return

        self.primary.append(phonemes[0])
        if len(phonemes) > 1:
            self.secondary.append(phonemes[1])
        else:
            self.secondary.append(phonemes[0])

    def skip(self, count: int) -> None:
        """Consume `count` extra characters on top of the loop's own step."""
        if count < 0:
            raise ValueError(f"Cannot skip backwards (got {count})")
        self.cursor += count

    @property
    def current(self) -> str:
        """Character under the cursor."""
        return self.text[self.cursor]

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.text)

    def codes(self) -> Tuple[str, str]:
        """Return the accumulated (primary, secondary) codes as strings."""
        return ''.join(self.primary), ''.join(self.secondary)
