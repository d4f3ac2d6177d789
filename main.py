# main.py
import argparse
import sys

from config import AppConfig
from runners.run_snake import main as snake

def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return value

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Terminal snake. WASD or arrows to move, X to quit.")
    p.add_argument("--ui", choices=["terminal", "pygame"], default="terminal")
    p.add_argument("--tick-ms", type=positive_int, default=AppConfig().tick_ms,
                   help="milliseconds per tick (default: %(default)s)")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log", dest="log_path", default=None,
                   help="append a per-tick CSV trace to this file")
    return p.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    cfg = AppConfig().with_(
        ui=args.ui,
        tick_ms=args.tick_ms,
        seed=args.seed,
        log_path=args.log_path,
    )
    snap = snake(cfg)
    print(f"Game Over! Score: {snap.score} reason={snap.reason}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
