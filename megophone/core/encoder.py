"""
Double Metaphone scanning engine.

Walks a padded copy of the word one character at a time, dispatching each
character to its letter handler and accumulating a primary and a secondary
code. The engine is case-sensitive and only knows lowercase letters.
"""

import logging
from typing import Dict, Optional, Tuple

from ..utils.config import EncoderConfig, default_encoder_config
from .context import WordContext
from .handlers import Handler, HandlerRegistry
from .scan_state import ScanState

logger = logging.getLogger(__name__)


# Word-initial consonant pairs pronounced as if the first letter were absent
SILENT_INITIAL_CLUSTERS = ('gn', 'kn', 'pn', 'wr', 'ps')


def pad(word: str, config: EncoderConfig = default_encoder_config) -> str:
    """Append the trailing filler that lookahead windows read near the end."""
    return word + config.pad_char * config.padding


class DoubleMetaphone:
    """
    Reusable Double Metaphone encoder.

    Every call to encode() owns a fresh ScanState, so one instance can be
    shared freely.
    """

    def __init__(
        self,
        handlers: Optional[Dict[str, Handler]] = None,
        config: Optional[EncoderConfig] = None
    ):
        """
        Initialize the encoder.

        Args:
            handlers: Character to handler mapping, or None for the default rules
            config: Encoder configuration, or None for the defaults
        """
        self.registry = HandlerRegistry(handlers)
        self.config = config or default_encoder_config

    def encode(self, word: Optional[str]) -> Tuple[str, str]:
        """
        Encode a word into its primary and secondary codes.

        Args:
            word: Word to encode (None is treated as empty)

        Returns:
            Tuple of (primary, secondary) codes

        Raises:
            TypeError: If word is not a string
        """
        if word is None:
            return '', ''
        if not isinstance(word, str):
            raise TypeError(f"Expected str, got {type(word).__name__}")

        context = WordContext.from_word(word)
        state = ScanState(text=pad(word, self.config), context=context)

        if state.matches(0, *SILENT_INITIAL_CLUSTERS):
            state.skip(2)

        # Initial 'x' sounds like 's' ("xavier"). Tested on the first letter of
        # the word, not the letter under the cursor after the cluster skip, so
        # "psx..." gets no 's'.
        if state.matches(-state.cursor, 'x'):
            state.add('s')

        while not state.exhausted:
            handler = self.registry.get(state.current)
            if handler is not None:
                decision = handler(state, context)
                if decision is not None:
                    state.add(*decision.phonemes)
                    state.skip(decision.skip)
            state.cursor += 1

        primary, secondary = state.codes()
        logger.debug("Encoded %r: primary=%r secondary=%r", word, primary, secondary)
        return primary, secondary

    __call__ = encode


_default_encoder = DoubleMetaphone()


def double_metaphone(word: Optional[str]) -> Tuple[str, str]:
    """
    Encode a word with the default rule set.

    Args:
        word: Word to encode

    Returns:
        Tuple of (primary, secondary) codes
    """
    return _default_encoder.encode(word)
