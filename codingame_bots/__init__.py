"""Solvers for spreadsheet, defibrillator, maze and dice-board puzzles, and bots for several contest games."""

__version__ = "0.1.0"