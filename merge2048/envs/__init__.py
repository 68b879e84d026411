# -*- coding: utf-8 -*-
"""
Python implementation of a 2048 game session.

This module provides the `GameSession` class, which holds the board, the score and the undo history of a game.
"""

from .session import GameSession, GameStatus

__all__ = ["GameSession", "GameStatus"]
