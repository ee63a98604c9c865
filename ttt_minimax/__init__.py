"""Tic-tac-toe with a perfect-play minimax opponent."""

__version__ = "1.0.0"
