"""
Search Module

The bot's move selection is a one-ply greedy loop: every legal move is
scored by the evaluator and the best one is played. There is no tree
search, pruning or caching.

Key Components:
    - score_moves: Score each candidate move (optionally in parallel)
    - find_best_move: Root-level move selection

"""

from coverage_bot.search.greedy import find_best_move, score_moves

__all__ = ['find_best_move', 'score_moves']
