"""
Main entry point for running CoverageBot as a UCI engine.

Usage:
    python -m coverage_bot.uci
"""

from coverage_bot.uci.interface import main

if __name__ == "__main__":
    main()
