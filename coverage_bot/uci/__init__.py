"""
UCI Protocol Interface

This module implements the Universal Chess Interface (UCI) protocol,
which lets the bot play in chess GUIs like Arena, En-croissant and
CuteChess.

Protocol Flow:
    GUI → "uci"
    Engine → "id name CoverageBot 0.1.0"
    Engine → "uciok"
    GUI → "isready"
    Engine → "readyok"
    GUI → "position startpos moves e2e4"
    GUI → "go wtime 300000 btime 300000"
    Engine → "info depth 1 seldepth 1 score cp 312 nodes 20 time 4 pv g8f6"
    Engine → "bestmove g8f6"

Reference:
    UCI Protocol: https://www.chessprogramming.org/UCI
"""

from coverage_bot.uci.interface import UCIEngine

__all__ = ['UCIEngine']
