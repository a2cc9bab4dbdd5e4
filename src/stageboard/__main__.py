"""Entry point for stageboard."""

import argparse
import logging
import sys

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(prog="stageboard", description="Kanban board in the terminal")
    parser.add_argument("seed", nargs="?", help="YAML file with the initial board (default: demo board)")
    parser.add_argument("--strict", action="store_true", help="Raise on invalid moves instead of ignoring them")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level for messages on stderr (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=getattr(logging, args.log_level),
    )

    from stageboard.errors import SeedError
    from stageboard.seed import default_board, load_seed

    if args.seed:
        try:
            board = load_seed(args.seed)
        except SeedError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    else:
        board = default_board()

    from stageboard.ui import StageboardApp

    StageboardApp(board, strict=args.strict).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
