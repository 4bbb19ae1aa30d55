"""Command line entry point: play sessions until the player stops."""

from __future__ import annotations

import argparse
import random
import sys

from mindrun.game import DEFAULT_SAVE_PATH, _read_token, run_game


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mindrun", description="Escape the maze before the enemies catch you.")
    parser.add_argument("--seed", type=int, default=None, help="seed for maze generation")
    parser.add_argument("--save-file", default=DEFAULT_SAVE_PATH, help="file used by the save and load commands")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run games until the player declines another one."""
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)
    while True:
        run_game(rng=rng, save_path=args.save_file)
        sys.stdout.write("Play Again? (Y/N): ")
        sys.stdout.flush()
        choice = _read_token(sys.stdin.readline)
        if choice[:1] not in ("Y", "y"):
            break
    print()
    print("Thank you for playing!")
    return 0


if __name__ == "__main__":
    sys.exit(main())