"""
Scanning engine: scan state, letter handlers and the scan loop.
"""

from .context import WordContext
from .scan_state import ScanState
from .handlers import Decision, HandlerRegistry, DEFAULT_HANDLERS
from .encoder import DoubleMetaphone, double_metaphone, pad

__all__ = [
    'WordContext',
    'ScanState',
    'Decision',
    'HandlerRegistry',
    'DEFAULT_HANDLERS',
    'DoubleMetaphone',
    'double_metaphone',
    'pad',
]
