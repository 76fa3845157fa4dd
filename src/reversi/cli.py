"""
Terminal driver for Reversi: reads moves from the console, runs the turn
loop and prints the final result.
"""
import os
import re
import argparse
from typing import Callable, List, Optional, Tuple

from .config import Config, get_default_config
from .game import Outcome, Player, ReversiGame, TurnStatus
from .logger import Logger, setup_logger

PROMPT = "Enter coordinates (row col), e.g., '3 2': "

# Plain ASCII integers only; no underscores or other digit scripts
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")
INT32_MIN, INT32_MAX = -2 ** 31, 2 ** 31 - 1


def parse_coordinates(text: str) -> Optional[Tuple[int, int]]:
    """
    Turn a line like "3 2" into (3, 2).

    Tokens that are not 32-bit ASCII integers are dropped; the line is
    accepted only if exactly two integers remain.
    """
    numbers = []
    for token in text.split():
        if not INTEGER_TOKEN.fullmatch(token):
            continue
        value = int(token)
        if INT32_MIN <= value <= INT32_MAX:
            numbers.append(value)
    if len(numbers) != 2:
        return None
    return numbers[0], numbers[1]


def score_line(game: ReversiGame) -> str:
    black, white = game.get_score()
    return f"Black ({Player.BLACK}): {black}, White ({Player.WHITE}): {white}"


def render_board(game: ReversiGame, config: Config) -> str:
    display = config.display
    hints = game.get_valid_moves() if display.show_hints and not game.is_game_over() else []
    return game.board.render(empty_glyph=display.empty_glyph, hints=hints,
                             hint_glyph=display.hint_glyph)


def play(game: ReversiGame, config: Config,
         input_fn: Callable[[str], str] = input,
         output: Callable[[str], None] = print,
         logger: Optional[Logger] = None) -> Optional[Outcome]:
    """
    Run the game until neither player can move.

    Args:
        game: Game to play; it is modified in place
        config: Display settings are taken from here
        input_fn: Reads one line of input after showing a prompt
        output: Writes one line of output
        logger: Optional Logger for game events

    Returns:
        The outcome, or None if input ran out before the game finished
    """
    while True:
        output(render_board(game, config))
        if config.display.show_score:
            output(score_line(game))

        status = game.resolve_turn()
        if status is TurnStatus.GAME_OVER:
            output("No moves left for both players. Game over.")
            break
        if status is TurnStatus.PASS:
            passed = game.get_current_player().opponent()
            output(f"No moves left for {passed} ({passed.label}). Skipping turn.")
            if logger is not None:
                logger.log_pass(passed)
            continue

        player = game.get_current_player()
        output(f"Current player: {player} ({player.label}'s turn)")
        try:
            text = input_fn(PROMPT)
        except (EOFError, KeyboardInterrupt):
            output("")
            output("Game aborted.")
            if logger is not None:
                logger.log_aborted()
            return None

        coords = parse_coordinates(text)
        if coords is None:
            output("Invalid input. Please enter two numbers separated by space.")
            if logger is not None:
                logger.log_rejected(player, text, 'not two integers')
            continue

        row, col = coords
        if not game.make_move(row, col):
            output("Invalid move. Try again.")
            if logger is not None:
                logger.log_rejected(player, text, 'illegal move')
            continue

        if logger is not None:
            last = game.move_history[-1]
            logger.log_move(len(game.move_history), player, last['move'], last['flipped'])

    black, white = game.get_score()
    outcome = game.get_outcome()
    output(render_board(game, config))
    output(f"Final score - Black: {black}, White: {white}")
    output(outcome.value)
    if logger is not None:
        logger.log_game_over(len(game.move_history), (black, white), outcome)
    return outcome


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Play Reversi in the terminal')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Console log level (DEBUG, INFO, WARNING, ...)')
    parser.add_argument('--log-file', action='store_true',
                        help='Also write a game log under the log directory')
    parser.add_argument('--hints', action='store_true',
                        help='Mark the legal moves of the current player')
    return parser


def load_config(path: Optional[str]) -> Config:
    """Load the config file if it exists, otherwise fall back to defaults."""
    if path is None:
        return get_default_config()
    if os.path.exists(path):
        print(f"Loading configuration from {path}")
        return Config.load(path)
    print(f"Config file {path} not found, using default configuration")
    return get_default_config()


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the `reversi` command."""
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    if args.log_level:
        config.logging.log_level = args.log_level
    if args.log_file:
        config.logging.log_to_file = True
    if args.hints:
        config.display.show_hints = True

    logger = setup_logger(config)
    try:
        play(ReversiGame(), config, input_fn=input, logger=logger)
    finally:
        logger.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
