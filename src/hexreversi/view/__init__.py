"""
Text rendering for hex Reversi.
"""
from .textual import SYMBOLS, TextualView

__all__ = ['SYMBOLS', 'TextualView']
