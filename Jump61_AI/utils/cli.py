"""CLI options for selecting players, board size, and config paths."""


MODES = ["ai-vs-ai", "ai-vs-random", "random-vs-ai", "random-vs-random"]


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Jump61 AI (chain-reaction capture game)")
    parser.add_argument("--board-size", type=int, help="Squares per side of the board")
    parser.add_argument("--depth", type=int, help="Search depth (plies) for AI players")
    parser.add_argument("--winning-value", type=int, help="Static evaluation magnitude of a won position")
    parser.add_argument("--max-moves", type=int, help="Stop the game with no winner after this many moves")
    parser.add_argument("--seed", type=int, help="Seed for random players")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=None,
        help="Play mode (who plays red/blue; red moves first)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--show-board", action="store_true", help="Print the board dump after every change")
    parser.add_argument("--display", action="store_true", help="Print the final board with row/column numbers")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)
