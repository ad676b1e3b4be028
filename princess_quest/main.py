"""
main.py
-------
Entry point: python -m princess_quest.main [--seed N]
"""

import argparse

from princess_quest.core.runtime.game_loop import GameLoop


def main(argv=None):
    parser = argparse.ArgumentParser(description="Princess Quest platformer")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the level generator for reproducible layouts")
    args = parser.parse_args(argv)

    GameLoop(seed=args.seed).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
