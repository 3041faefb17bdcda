"""
UCI Protocol Implementation

This module implements the Universal Chess Interface (UCI) protocol for
communication between the bot and GUI applications.

UCI Commands Supported:
    - uci: Identify engine
    - isready: Synchronization check
    - ucinewgame: Start new game
    - position: Set board position
    - go: Pick a move (depth/time parameters are accepted and ignored)
    - stop: Stop scoring
    - quit: Shutdown engine

Threading:
    - Main thread: Listen for UCI commands
    - Search thread: Score moves on a copy of the board
    - Communication: Stop flag polled between moves

References:
    - UCI Protocol: https://www.chessprogramming.org/UCI
"""

import logging
import sys
import threading
import time
from pathlib import Path
from typing import Optional

import chess
from coverage_bot.evaluation.base import Evaluator
from coverage_bot.evaluation.coverage import CoverageEvaluator
from coverage_bot.search.greedy import find_best_move

LOG_DIR = Path.home() / ".coverage_bot"


def setup_logger(debug=True):
    """
    Setup file-based logger for UCI debugging.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level

    Returns:
        Configured logger instance
    """
    LOG_DIR.mkdir(exist_ok=True)
    log_file = LOG_DIR / "engine.log"

    logger = logging.getLogger("coverage_bot")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class UCIEngine:
    """
    UCI-compliant front end for the greedy coverage bot.

    Attributes:
        board: Current chess position
        evaluator: Position evaluation function
        workers: Worker processes used to score moves
        searching: Flag indicating if scoring is in progress
        stop_search: Flag to stop ongoing scoring
        search_thread: Background thread for scoring
    """

    def __init__(self, evaluator: Optional[Evaluator] = None, workers: int = 1, debug: bool = True):
        """
        Initialize UCI engine.

        Args:
            evaluator: Position evaluator (default: CoverageEvaluator)
            workers: Worker processes for move scoring (default: 1)
            debug: Enable debug logging (default: True)
        """
        self.board = chess.Board()
        self.evaluator = evaluator if evaluator else CoverageEvaluator()
        self.workers = workers

        # Search state
        self.searching = False
        self.stop_search = False
        self.search_thread: Optional[threading.Thread] = None

        # Engine info
        self.name = "CoverageBot"
        self.version = "0.1.0"
        self.author = "CoverageBot developers"

        self.logger = setup_logger(debug=debug)
        self.logger.info("=== CoverageBot Engine Started ===")
        self.logger.info(f"Log file: {LOG_DIR / 'engine.log'}")

    def run(self):
        """
        Main UCI command loop.

        Listens for UCI commands on stdin and responds on stdout.
        Runs until 'quit' command is received or stdin closes.
        """
        while True:
            try:
                command = input().strip()

                if not command:
                    continue

                self.logger.debug(f">>> {command}")

                tokens = command.split()
                cmd = tokens[0].lower()

                if cmd == "uci":
                    self.handle_uci()

                elif cmd == "isready":
                    self.handle_isready()

                elif cmd == "ucinewgame":
                    self.handle_ucinewgame()

                elif cmd == "setoption":
                    self.handle_setoption(tokens)

                elif cmd == "position":
                    self.handle_position(tokens)

                elif cmd == "go":
                    self.handle_go(tokens)

                elif cmd == "stop":
                    self.handle_stop()

                elif cmd == "quit":
                    self.handle_quit()
                    break

                else:
                    # Unknown command - UCI spec says to ignore
                    self.logger.debug(f"Unknown command ignored: {command}")

            except EOFError:
                self.logger.info("EOF received, shutting down")
                break
            except Exception as e:
                self.logger.error(f"Command error: {e}", exc_info=True)
                print(f"# Error: {e}", file=sys.stderr)

    def _send(self, message: str):
        print(message)
        sys.stdout.flush()
        self.logger.debug(f"<<< {message}")

    def handle_uci(self):
        """
        Handle 'uci' command - identify engine.

        Response:
            id name CoverageBot 0.1.0
            id author ...
            option name Threads ...
            uciok
        """
        self.logger.info("Handling: uci")

        self._send(f"id name {self.name} {self.version}")
        self._send(f"id author {self.author}")
        self._send(f"option name Threads type spin default {self.workers} min 1 max 64")
        self._send("uciok")

    def handle_isready(self):
        """Handle 'isready' command - synchronization."""
        self.logger.info("Handling: isready")
        self._send("readyok")

    def handle_ucinewgame(self):
        """Handle 'ucinewgame' command - reset for new game."""
        self.logger.info("Handling: ucinewgame - resetting board")

        self.board = chess.Board()
        self.stop_search = False

    def handle_setoption(self, tokens):
        """
        Handle 'setoption name Threads value N'.

        Other options are ignored.
        """
        try:
            name = tokens[tokens.index("name") + 1]
            value = tokens[tokens.index("value") + 1]
        except (ValueError, IndexError):
            self.logger.warning(f"Malformed setoption: {' '.join(tokens)}")
            return

        if name.lower() == "threads":
            try:
                self.workers = max(1, int(value))
            except ValueError:
                self.logger.error(f"Invalid Threads value: {value}")
                return
            self.logger.info(f"Threads set to {self.workers}")
        else:
            self.logger.debug(f"Unknown option ignored: {name}")

    def handle_position(self, tokens):
        """
        Handle 'position' command - set board position.

        Formats:
            position startpos
            position startpos moves e2e4 e7e5
            position fen <FEN string>
            position fen <FEN string> moves e2e4

        Args:
            tokens: Command tokens (e.g., ['position', 'startpos', 'moves', 'e2e4'])
        """
        self.logger.info(f"Handling: position {' '.join(tokens[1:])}")

        if len(tokens) < 2:
            self.logger.warning("Position command with insufficient arguments")
            return

        if tokens[1] == "startpos":
            board = chess.Board()
            move_index = 2
        elif tokens[1] == "fen":
            try:
                move_index = tokens.index("moves")
            except ValueError:
                move_index = len(tokens)
            fen = " ".join(tokens[2:move_index])

            try:
                board = chess.Board(fen)
            except ValueError as e:
                self.logger.error(f"Invalid FEN: {e}")
                print(f"# Invalid FEN: {e}", file=sys.stderr)
                return
            self.logger.debug(f"Set position from FEN: {fen}")
        else:
            self.logger.warning(f"Unknown position type: {tokens[1]}")
            return

        if move_index < len(tokens) and tokens[move_index] == "moves":
            for move_str in tokens[move_index + 1:]:
                try:
                    move = chess.Move.from_uci(move_str)
                except ValueError as e:
                    self.logger.error(f"Invalid move format: {move_str} - {e}")
                    print(f"# Invalid move format: {move_str} - {e}", file=sys.stderr)
                    break

                if move not in board.legal_moves:
                    self.logger.error(f"Illegal move: {move_str}")
                    print(f"# Illegal move: {move_str}", file=sys.stderr)
                    break
                board.push(move)

        self.board = board
        self.logger.info(f"Position updated: {self.board.fen()}")

    def handle_go(self, tokens):
        """
        Handle 'go' command - start scoring moves.

        Every 'go' variant (depth, movetime, wtime/btime, infinite) picks a
        move the same way: one ply, every legal move scored once.

        Args:
            tokens: Command tokens (e.g., ['go', 'movetime', '1000'])
        """
        self.logger.info(f"Handling: go {' '.join(tokens[1:])}")

        if len(tokens) > 1:
            self.logger.debug(f"go parameters ignored: {' '.join(tokens[1:])}")

        # The search thread works on its own copy of the board
        board_copy = self.board.copy()

        self.stop_search = False
        self.searching = True
        self.search_thread = threading.Thread(
            target=self._search_thread,
            args=(board_copy,)
        )
        self.search_thread.start()

    def _search_thread(self, board: chess.Board):
        """
        Background thread for move selection.

        Output:
            info depth 1 seldepth 1 score cp Y nodes Z time T pv <move>
            bestmove <move>
        """
        start_time = time.time()

        try:
            self.logger.info(f"Search started: position={board.fen()}")

            best_move, score, nodes = find_best_move(
                board,
                self.evaluator,
                workers=self.workers,
                should_stop=lambda: self.stop_search,
            )

            elapsed_ms = int((time.time() - start_time) * 1000)
            self.logger.info(
                f"Search complete: best_move={best_move.uci()}, score={score}, "
                f"nodes={nodes}, time={elapsed_ms}ms"
            )

            # Evaluator scores are from White's side, UCI wants the side to move
            uci_score = score if board.turn == chess.WHITE else -score
            self._send(
                f"info depth 1 seldepth 1 score cp {uci_score} nodes {nodes} "
                f"time {elapsed_ms} pv {best_move.uci()}"
            )
            self._send(f"bestmove {best_move.uci()}")

        except Exception as e:
            elapsed_time = time.time() - start_time
            self.logger.error(f"Search error after {elapsed_time:.3f}s: {e}", exc_info=True)
            print(f"# Search error: {e}", file=sys.stderr)

            legal_moves = list(board.legal_moves)
            if legal_moves:
                fallback_move = legal_moves[0].uci()
                self.logger.warning(f"Using fallback move: {fallback_move}")
                self._send(f"bestmove {fallback_move}")
            else:
                self.logger.error("No legal moves available for fallback!")
                self._send("bestmove 0000")

        finally:
            self.searching = False
            self.logger.debug("Search thread finished")

    def handle_stop(self):
        """
        Handle 'stop' command - stop ongoing scoring.

        Sets stop_search flag and waits for the search thread to finish.
        The best move scored so far is still sent.
        """
        self.logger.info("Handling: stop")
        self.stop_search = True

        if self.search_thread and self.search_thread.is_alive():
            self.logger.debug("Waiting for search thread to finish (timeout=5.0s)")
            self.search_thread.join(timeout=5.0)
            if self.search_thread.is_alive():
                self.logger.warning("Search thread did not finish within timeout")

    def handle_quit(self):
        """Handle 'quit' command - shutdown engine."""
        self.logger.info("Handling: quit - shutting down engine")

        if self.search_thread and self.search_thread.is_alive():
            self.logger.debug("Waiting for search thread to complete before quitting")
            self.search_thread.join()

        self.logger.info("=== CoverageBot Engine Stopped ===")
        sys.exit(0)


def main():
    """Console entry point."""
    UCIEngine().run()
