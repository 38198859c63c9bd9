"""
Arena module for running tournaments between strategies.
"""
from .arena import Arena, ELORatingSystem, MatchResult

__all__ = ['Arena', 'ELORatingSystem', 'MatchResult']
