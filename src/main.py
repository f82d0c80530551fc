"""Entry point kept minimal by delegating to Engine.

The Engine owns the window and frame loop; the vignette itself lives in
`world/`. Run from the `src/` directory:

    python main.py --seed 42
"""

from __future__ import annotations

import argparse

from config import WIDTH, HEIGHT, FULLSCREEN


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Looping impact/collapse vignette")
    ap.add_argument(
        "--seed", type=int, default=None, help="Scenery/blast seed (int); defaults to random"
    )
    ap.add_argument("--width", type=int, default=WIDTH, help="Window width in pixels")
    ap.add_argument("--height", type=int, default=HEIGHT, help="Window height in pixels")
    ap.add_argument(
        "--fullscreen", action="store_true", default=FULLSCREEN, help="Open fullscreen"
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    # Deferred so `--help` works without opening a window
    from core.engine import Engine

    try:
        Engine(
            width=args.width,
            height=args.height,
            fullscreen=args.fullscreen,
            seed=args.seed,
        ).run()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
