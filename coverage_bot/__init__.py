"""
CoverageBot

A one-ply chess bot whose evaluation combines material counting with
directional coverage (mobility and threat) analysis.

## Architecture

The bot is organized into several key modules:

1. **board**: Views of a python-chess board used by the evaluator
   - 12 ordered piece groups, empty-square sentinel
   - Scoped apply/undo of a candidate move

2. **evaluation**: Position evaluation
   - Abstract Evaluator interface (swappable design)
   - Directional ray scanner
   - CoverageEvaluator: material x100 + coverage + threat x2

3. **search**: Greedy move selection
   - Score every legal move once, play the maximum
   - Optional parallel scoring on independent board copies

4. **uci**: Universal Chess Interface protocol
   - Compatible with chess GUIs

5. **utils**: Benchmarking utilities
   - Bratko-Kopec test positions

## Quick Start

### As a Python Library

```python
import chess
from coverage_bot.evaluation import CoverageEvaluator
from coverage_bot.search import find_best_move

evaluator = CoverageEvaluator()
board = chess.Board()

print(evaluator.evaluate_move(board, chess.Move.from_uci("e2e4")))  # 307

best_move, score, nodes = find_best_move(board, evaluator)
print(f"Best move: {best_move} (score: {score})")
```

### As a UCI Engine

```bash
python -m coverage_bot.uci
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from coverage_bot.evaluation import CoverageEvaluator, Evaluator, EvaluatorConfig
from coverage_bot.search import find_best_move, score_moves

__all__ = [
    'CoverageEvaluator',
    'Evaluator',
    'EvaluatorConfig',
    'find_best_move',
    'score_moves',
]
