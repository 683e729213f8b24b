"""Entry point for Jump61 matches. Load config, wire players, start Jump61game."""

from pathlib import Path

import yaml

from Jump61_AI.AIPlayer import AI
from Jump61_AI.Jump61game import Jump61game
from Jump61_AI.Player import RandomPlayer
from Jump61_AI.ai import heuristic, search_minimax
from Jump61_AI.engine.squares import Side
from Jump61_AI.utils.cli import parse_args
from Jump61_AI.utils.logger import configure_logging, log_event


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Jump61_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def make_player(kind, side, depth, winning_value, seed):
    if kind == "ai":
        return AI(side, depth=depth, winning_value=winning_value)
    if kind == "random":
        return RandomPlayer(side, seed=seed)
    raise ValueError(f"Unsupported player kind: {kind}")


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    configure_logging(args.log_level or settings.get("log_level", "INFO"))

    board_size = args.board_size or settings.get("board_size", 6)
    depth = args.depth or settings.get("search_depth", search_minimax.DEFAULT_DEPTH)
    winning_value = args.winning_value or settings.get("winning_value", heuristic.WINNING_VALUE)
    max_moves = args.max_moves or settings.get("max_moves")
    seed = args.seed if args.seed is not None else settings.get("seed")
    mode = args.mode or settings.get("mode", "ai-vs-random")

    try:
        red_kind, blue_kind = mode.split("-vs-")
    except ValueError as exc:
        raise ValueError(f"Unsupported mode: {mode}") from exc
    red = make_player(red_kind, Side.RED, depth, winning_value, seed)
    blue = make_player(blue_kind, Side.BLUE, depth, winning_value, seed)

    renderer = (lambda board: print(board)) if args.show_board else None
    game = Jump61game(
        board_size=board_size,
        red_player=red,
        blue_player=blue,
        logger=log_event,
        renderer=renderer,
        max_moves=max_moves,
    )
    result = game.play()

    print(game.board.to_display_string() if args.display else game.board)
    print(f"{str(result).capitalize()} wins" if result is not None else "No winner")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
