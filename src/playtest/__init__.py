"""
Playtest module for the board engine.

Provides automated agents and an evaluator that plays them through
many games.
"""
from .agents import BaseAgent, RandomAgent
from .evaluator import Evaluator, PlaytestStats

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "Evaluator",
    "PlaytestStats",
]
