from __future__ import annotations

import argparse
import logging

from . import connection_play, stacking_play


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the grid games with a pygame window")
    p.add_argument("--game", choices=["stacking", "connection"], default="stacking")
    p.add_argument("--seed", type=int, default=None, help="Seed for the stacking piece sequence")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main() -> None:  # pragma: no cover
    args = build_parser().parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.game == "connection":
        connection_play.run()
    else:
        stacking_play.run(seed=args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
