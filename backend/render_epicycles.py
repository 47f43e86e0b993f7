"""Render the epicycle reconstruction of a path file to PNG (or SVG).

Usage:
    python render_epicycles.py ../samples/paths/circle8.txt -p 8 -o circle.png
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from epicycles.engine.config import EpicycleConfig
from epicycles.engine.epicycle import EpicycleModel
from epicycles.engine.trace import sample_trace
from epicycles.render.svg_trace import render_trace_svg

# ── Style ───────────────────────────────────────────────────────────

BG = "#0f0f1a"
ACCENT = "#e94560"
TEAL = "#4ECDC4"
TEXT = "#eee"


def save_png(model: EpicycleModel, trace, precision: int, out: Path) -> None:
    xs = [p.x for p in trace]
    ys = [p.y for p in trace]

    fig, ax = plt.subplots(figsize=(6.4, 6.4), facecolor=BG)
    ax.set_facecolor(BG)
    ax.plot(xs, ys, color=ACCENT, linewidth=1.2)

    # Epicycles at t = 0
    centres = model.epicycle_centres(0.0, precision)
    for (cx, cy), r in zip(centres[:-1], model.radii(precision)):
        ax.add_patch(plt.Circle((cx, cy), r, fill=False, color=TEAL, linewidth=0.5, alpha=0.6))

    ax.set_aspect("equal")
    ax.set_title(f"{len(model)} terms, precision {precision}", color=TEXT)
    ax.tick_params(colors=TEXT)
    fig.savefig(out, dpi=100, facecolor=BG, bbox_inches="tight")
    plt.close(fig)


def run(args: argparse.Namespace) -> int:
    try:
        config = EpicycleConfig(
            time_unit=args.time_unit,
            phase_mode=args.phase_mode,
            time_step=args.step,
        )
        model = EpicycleModel.from_path_file(args.input, config, normalise=not args.raw)
        precision = len(model) if args.precision is None else args.precision
        trace = sample_trace(model, precision, stop=2.0 * math.pi)
    except FileNotFoundError:
        print(f"File not found: {args.input}")
        return 1
    except ValueError as e:
        # WrongPathLengthError, PathFormatError, InvalidPrecisionError, bad --step
        print(f"Error: {e}")
        return 1

    out = Path(args.output)
    if out.suffix.lower() == ".svg":
        svg = render_trace_svg(
            trace,
            centres=model.epicycle_centres(0.0, precision),
            radii=model.radii(precision),
        )
        out.write_text(svg, encoding="utf-8")
    else:
        save_png(model, trace, precision, out)

    print(f"Saved {len(trace)} points at precision {precision} → {out}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fourier epicycle renderer")
    parser.add_argument("input", help="Path file: one 'x,y' sample per line, power-of-two count")
    parser.add_argument("-p", "--precision", type=int, default=None, help="Leading epicycles to sum (default: all)")
    parser.add_argument("-o", "--output", default="epicycles.png", help="Output .png or .svg")
    parser.add_argument("--step", type=float, default=0.001, help="Time step over one revolution")
    parser.add_argument("--raw", action="store_true", help="Skip normalisation")
    parser.add_argument("--time-unit", choices=["radians", "cycles"], default="radians")
    parser.add_argument("--phase-mode", choices=["principal", "quadrant"], default="principal")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
