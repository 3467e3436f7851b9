"""
Per-letter decision tables.

A handler looks at the scan state around the cursor and returns a Decision
saying what to emit and how many extra characters to consume. Handlers never
mutate the state themselves; the scan loop applies their decisions.

Only vowels, 'b', 'ç' and 'c' have rules. Any other character has no handler
and contributes nothing to either code. New letters are added through
HandlerRegistry.register without touching the scan loop.
"""

from typing import Callable, Dict, Iterable, Iterator, Optional, Tuple
from dataclasses import dataclass

from .context import WordContext
from .scan_state import ScanState, VOWELS


@dataclass(frozen=True, slots=True)
class Decision:
    """Emission and extra skip chosen by a handler for one position."""
    primary: Optional[str] = None
    secondary: Optional[str] = None
    skip: int = 0

    @classmethod
    def silent(cls, skip: int = 0) -> 'Decision':
        """A decision that emits nothing."""
        return cls(skip=skip)

    @property
    def phonemes(self) -> Tuple[str, ...]:
        """Arguments for ScanState.add (empty, one fragment, or two)."""
        if self.primary is None:
            return ()
        if self.secondary is None:
            return (self.primary,)
        return (self.primary, self.secondary)


Handler = Callable[[ScanState, WordContext], Optional[Decision]]


def vowel(state: ScanState, context: WordContext) -> Optional[Decision]:
    """Vowels are only coded at the start of the word."""
    if state.cursor == 0:
        return Decision('a')
    return None


def b(state: ScanState, context: WordContext) -> Decision:
    # "bb" collapses into a single "p"
    return Decision('p', skip=1 if state.matches(1, 'b') else 0)


def c_cedilla(state: ScanState, context: WordContext) -> Decision:
    return Decision('s')


def c(state: ScanState, context: WordContext) -> Optional[Decision]:
    """
    Decide how a 'c' sounds from its surroundings.

    The rules are tried in order and the first one that applies wins.
    """
    cur = state.cursor

    # Germanic "-ach-", e.g. "bacher", "macher"
    if (cur > 1 and not state.is_vowel(-2) and state.matches(-1, 'ach')
            and not state.matches(2, 'i')
            and (not state.matches(2, 'e') or state.matches(-2, 'acher'))):
        return Decision('k', skip=1)

    if cur == 0 and state.matches(0, 'caesar'):
        return Decision('s', skip=1)

    # Italian "chianti"
    if state.matches(0, 'chia'):
        return Decision('k', skip=1)

    if state.matches(0, 'ch'):
        return Decision(*_ch(state), skip=1)

    # Polish "czerny", but not the "-wicz" ending
    if state.matches(0, 'cz') and not state.matches(-2, 'wicz'):
        return Decision('s', 'x', skip=1)

    # "focaccia"
    if state.matches(1, 'cia'):
        return Decision('x', skip=2)

    return None


def _ch(state: ScanState) -> Tuple[str, str]:
    """Pick the (primary, secondary) sound for "ch" at the cursor."""
    cur = state.cursor

    # "michael"
    if cur > 0 and state.matches(0, 'chae'):
        return 'k', 'k'

    # Greek roots: "character", "charisma", "chorus", "chemistry"
    if (cur == 0 and not state.matches(0, 'chore')
            and state.matches(1, 'harac', 'haris', 'hor', 'hym', 'hia', 'hem')):
        return 'k', 'k'

    # Germanic and Greek "ch" pronounced "kh":
    # "architect" but not "arch", "orchestra", "orchid", "wechsler"
    if (state.matches(-cur, 'van ', 'von ', 'sch')
            or state.matches(-2, 'orches', 'archit', 'orchid')
            or state.matches(2, 't', 's')
            or ((state.matches(-1, 'a', 'e', 'o', 'u') or cur == 0)
                and state.matches(2, 'l', 'r', 'n', 'm', 'b', 'h', 'f', 'v', 'w', ' '))):
        return 'k', 'k'

    if cur > 0:
        # "McHugh"
        if state.matches(-cur, 'mc'):
            return 'k', 'k'
        return 'x', 'k'

    return 'x', 'x'


DEFAULT_HANDLERS: Dict[str, Handler] = {
    **{letter: vowel for letter in VOWELS},
    'b': b,
    'ç': c_cedilla,
    'c': c,
}


class HandlerRegistry:
    """Mapping from a character to the handler that encodes it."""

    def __init__(self, handlers: Optional[Dict[str, Handler]] = None):
        """
        Initialize the registry.

        Args:
            handlers: Initial mapping, or None for the default rule set
        """
        self._handlers: Dict[str, Handler] = {}
        source = DEFAULT_HANDLERS if handlers is None else handlers
        for letter, handler in source.items():
            if not isinstance(letter, str) or len(letter) != 1:
                raise ValueError(f"Handler keys must be single characters, got {letter!r}")
            self.register(letter, handler)

    def register(self, letters: Iterable[str], handler: Handler) -> None:
        """
        Register a handler for one or more characters.

        Args:
            letters: A single character, a string of characters, or an
                iterable of single characters
            handler: Callable taking (state, context) and returning a Decision

        Raises:
            ValueError: If a key is not a single character or handler is not callable
        """
        if not callable(handler):
            raise ValueError(f"Handler for {letters!r} is not callable")

        try:
            keys = list(letters)
        except TypeError:
            raise ValueError(f"Handler keys must be single characters, got {letters!r}") from None

        for letter in keys:
            if not isinstance(letter, str) or len(letter) != 1:
                raise ValueError(f"Handler keys must be single characters, got {letter!r}")

        for letter in keys:
            self._handlers[letter] = handler

    def get(self, char: str) -> Optional[Handler]:
        return self._handlers.get(char)

    def __contains__(self, char: object) -> bool:
        return char in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)
