"""
Turn orchestration between players and a game.
"""
from .controller import Controller, GameRunner, parse_command, seat_players

__all__ = ['Controller', 'GameRunner', 'parse_command', 'seat_players']
