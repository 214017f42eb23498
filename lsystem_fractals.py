#!/usr/bin/env python3
"""lsystem_fractals.py

Point generator for L-system fractals, sized to a pixel viewport.

Key features:
- Whole-string grammar expansion (plus a lazy variant for sampling).
- Turtle interpretation with push/pop branching.
- Uniform rescale + recenter into a padded viewport.
- A catalog of preset grammars and a "SYMBOL=expansion" rule-text parser.
- JSON output of point sequences or polylines for an external renderer.

Run:
  python lsystem_fractals.py list
  python lsystem_fractals.py points koch --iterations 3
  python lsystem_fractals.py custom config.json -o points.json
  python lsystem_fractals.py --help
"""

from __future__ import annotations

import argparse
import itertools
import json
import logging
import math
import os
import re
import sys
from collections.abc import Generator, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, cast

logger = logging.getLogger(__name__)

Point = tuple[float, float]

DEFAULT_ANGLE = 90.0
VIEWPORT_PADDING = 12.0


# -------------------------
# Errors / Validation
# -------------------------


class ConfigError(ValueError):
    pass


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigError(msg)


def _as_float(x: Any, path: str) -> float:
    _require(
        isinstance(x, (int, float)) and not isinstance(x, bool),
        f"{path} must be a number",
    )
    try:
        v = float(x)
    except OverflowError as e:
        raise ConfigError(f"{path} must be finite") from e
    _require(math.isfinite(v), f"{path} must be finite")
    return v


def _as_int(x: Any, path: str) -> int:
    _require(
        isinstance(x, int) and not isinstance(x, bool), f"{path} must be an integer"
    )
    return int(x)


def _as_str(x: Any, path: str) -> str:
    _require(isinstance(x, str), f"{path} must be a string")
    return cast(str, x)


def _as_dict(x: Any, path: str) -> dict[str, Any]:
    _require(isinstance(x, dict), f"{path} must be an object")
    return cast(dict[str, Any], x)


# -------------------------
# Data model
# -------------------------


@dataclass(frozen=True)
class Grammar:
    id: str
    axiom: str
    rules: Mapping[str, str]
    angle: float = DEFAULT_ANGLE
    draw_symbols: frozenset[str] = frozenset("F")
    label: str | None = None

    def __post_init__(self) -> None:
        # Freeze the rule table so presets cannot be edited in place.
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))
        object.__setattr__(self, "draw_symbols", frozenset(self.draw_symbols))


@dataclass(frozen=True)
class TurtleState:
    x: float
    y: float
    heading: float  # radians


# -------------------------
# Grammar expansion
# -------------------------


def expand(axiom: str, rules: Mapping[str, str], iterations: int) -> str:
    """Rewrite ``axiom`` through ``iterations`` generations of ``rules``.

    Symbols without a rule rewrite to themselves. The full string is built
    each generation, so growth is exponential for most grammars.
    """
    s = axiom
    for _ in range(iterations):
        s = "".join(rules.get(ch, ch) for ch in s)
    logger.debug(
        "expanded %r over %d generations to %d symbols", axiom, iterations, len(s)
    )
    return s


def stream_expand(
    axiom: str, rules: Mapping[str, str], iterations: int
) -> Generator[str, None, None]:
    """Yield the symbols of ``expand(axiom, rules, iterations)`` lazily.

    Uses an explicit stack of (string, index, depth) frames.
    """
    stack: list[tuple[str, int, int]] = [(axiom, 0, 0)]

    while stack:
        s, i, d = stack.pop()
        if i >= len(s):
            continue

        ch = s[i]
        stack.append((s, i + 1, d))

        if d < iterations and ch in rules:
            # Replacement goes on top of the continuation so it is walked first.
            stack.append((rules[ch], 0, d + 1))
        else:
            yield ch


def collapse_draw_symbols(commands: str, draw_symbols: Iterable[str]) -> str:
    """Replace every draw symbol in ``commands`` with the ``F`` command."""
    table = str.maketrans({sym: "F" for sym in draw_symbols})
    if not table:
        return commands
    return commands.translate(table)


# -------------------------
# Turtle interpreter
# -------------------------


def interpret(commands: str, angle_deg: float, step: float) -> list[Point]:
    """Walk ``commands`` and return the emitted points.

    The origin is always the first point. ``F`` appends the new position,
    ``f`` moves silently, ``+`` subtracts the angle from the heading and ``-``
    adds it. ``[`` saves the cursor; ``]`` restores it and appends the
    restored position, so branches show up as jumps in the sequence. A ``]``
    with nothing saved does nothing. Other symbols are ignored.
    """
    x = y = h = 0.0
    a = math.radians(angle_deg)
    pts: list[Point] = [(x, y)]
    stack: list[TurtleState] = []

    for ch in commands:
        if ch == "F" or ch == "f":
            x += math.cos(h) * step
            y += math.sin(h) * step
            if ch == "F":
                pts.append((x, y))
        elif ch == "+":
            h -= a
        elif ch == "-":
            h += a
        elif ch == "[":
            stack.append(TurtleState(x, y, h))
        elif ch == "]":
            if stack:
                st = stack.pop()
                x, y, h = st.x, st.y, st.heading
                pts.append((x, y))

    return pts


@dataclass
class PolylineBuffer:
    polylines: list[list[Point]] = field(default_factory=list)

    def start_new(self, p: Point) -> None:
        self.polylines.append([p])

    def add_point(self, p: Point) -> None:
        cur = self.polylines[-1]
        if cur[-1] != p:
            cur.append(p)

    def finished(self) -> list[list[Point]]:
        return [pl for pl in self.polylines if len(pl) >= 2]


def interpret_to_polylines(
    commands: str, angle_deg: float, step: float
) -> list[list[Point]]:
    """Like :func:`interpret`, but split the path into separate polylines.

    A pop or a pen-up ``f`` move starts a new polyline at the cursor instead
    of connecting to it. Polylines with fewer than two points are dropped.
    """
    x = y = h = 0.0
    a = math.radians(angle_deg)
    buf = PolylineBuffer()
    buf.start_new((x, y))
    stack: list[TurtleState] = []

    for ch in commands:
        if ch == "F" or ch == "f":
            x += math.cos(h) * step
            y += math.sin(h) * step
            if ch == "F":
                buf.add_point((x, y))
            else:
                buf.start_new((x, y))
        elif ch == "+":
            h -= a
        elif ch == "-":
            h += a
        elif ch == "[":
            stack.append(TurtleState(x, y, h))
        elif ch == "]":
            if stack:
                st = stack.pop()
                x, y, h = st.x, st.y, st.heading
                buf.start_new((x, y))

    return buf.finished()


# -------------------------
# Viewport normalization
# -------------------------


def compute_bounds(points: Iterable[Point]) -> tuple[float, float, float, float]:
    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    for x, y in points:
        if x < min_x:
            min_x = x
        if x > max_x:
            max_x = x
        if y < min_y:
            min_y = y
        if y > max_y:
            max_y = y
    if not min_x <= max_x:
        raise ValueError("No finite coordinates to bound (empty or all NaN).")
    return (min_x, min_y, max_x, max_y)


def normalize(
    points: list[Point], width: float, height: float, padding: float = 8
) -> list[Point]:
    """Scale and center ``points`` inside a ``width`` x ``height`` box.

    One scale factor is used for both axes, so the shape keeps its aspect
    ratio. A flat bounding box dimension counts as 1 and the drawable area is
    never less than 1 pixel per axis.
    """
    if not points:
        return []

    min_x, min_y, max_x, max_y = compute_bounds(points)
    w = (max_x - min_x) or 1
    h = (max_y - min_y) or 1
    avail_w = max(1, width - padding * 2)
    avail_h = max(1, height - padding * 2)
    scale = min(avail_w / w, avail_h / h)

    cx = (min_x + max_x) / 2
    cy = (min_y + max_y) / 2
    tx = width / 2
    ty = height / 2
    return [(tx + (x - cx) * scale, ty + (y - cy) * scale) for x, y in points]


def normalize_polylines(
    polylines: list[list[Point]], width: float, height: float, padding: float = 8
) -> list[list[Point]]:
    """Normalize several polylines against their shared bounding box."""
    flat = [p for pl in polylines for p in pl]
    moved = iter(normalize(flat, width, height, padding))
    return [list(itertools.islice(moved, len(pl))) for pl in polylines]


# -------------------------
# Grammar registry
# -------------------------


FRACTALS: Mapping[str, Grammar] = MappingProxyType(
    {
        g.id: g
        for g in (
            Grammar(
                id="koch",
                label="Koch Curve / Snowflake",
                axiom="F",
                rules={"F": "F+F--F+F"},
                angle=60,
            ),
            Grammar(
                id="dragon",
                label="Dragon Curve",
                axiom="FX",
                rules={"X": "X+YF+", "Y": "-FX-Y"},
                angle=90,
            ),
            Grammar(
                id="sierpinski",
                label="Sierpinski (L-system)",
                axiom="A",
                rules={"A": "B-A-B", "B": "A+B+A"},
                angle=60,
                draw_symbols=frozenset("AB"),
            ),
            Grammar(
                id="hilbert",
                label="Hilbert Curve",
                axiom="A",
                rules={"A": "-BF+AFA+FB-", "B": "+AF-BFB-FA+"},
                angle=90,
                draw_symbols=frozenset("AB"),
            ),
            Grammar(
                id="plant",
                label="Plant",
                axiom="F",
                rules={"F": "F[+F]F[-F]F"},
                angle=25,
            ),
            Grammar(
                id="gosper",
                label="Gosper Curve",
                axiom="A",
                rules={"A": "A-B--B+A++AA+B-", "B": "+A-BB--B-A++A+B"},
                angle=60,
                draw_symbols=frozenset("AB"),
            ),
            Grammar(
                id="peano",
                label="Peano Curve",
                axiom="A",
                rules={
                    "A": "AFBFA+F+BFAFB-F-AFBFA",
                    "B": "AFBFA-F-BFAFB+F+AFBFA",
                },
                angle=90,
                draw_symbols=frozenset("AB"),
            ),
            Grammar(
                id="levy",
                label="Levy Curve",
                axiom="F",
                rules={"F": "+F--F+"},
                angle=45,
            ),
            Grammar(
                id="quadratic_koch",
                label="Quadratic Koch",
                axiom="F",
                rules={"F": "F+F-F-F+F"},
                angle=90,
            ),
            Grammar(
                id="pythagoras_tree",
                label="Pythagoras Tree",
                axiom="0",
                rules={"1": "11", "0": "1[+0]-0"},
                angle=45,
                draw_symbols=frozenset("01"),
            ),
            Grammar(
                id="bush",
                label="Bush",
                axiom="F",
                rules={"F": "FF-[-F+F+F]+[+F-F-F]"},
                angle=22.5,
            ),
            Grammar(
                id="crystal",
                label="Crystal",
                axiom="F+F+F+F",
                rules={"F": "FF+F++F+F"},
                angle=90,
            ),
            Grammar(
                id="board",
                label="Board",
                axiom="F+F+F+F",
                rules={"F": "FF+F+F+F+FF"},
                angle=90,
            ),
            Grammar(
                id="quadratic_snowflake",
                label="Quadratic Snowflake",
                axiom="F",
                rules={"F": "F-F+F+F-F"},
                angle=90,
            ),
            # Starting point for user-edited grammars.
            Grammar(
                id="custom",
                label="Custom L-system",
                axiom="F",
                rules={"F": "F+F--F+F"},
                angle=90,
            ),
        )
    }
)


def get_fractal(fractal_id: str) -> Grammar | None:
    return FRACTALS.get(fractal_id)


_RULE_LINE = re.compile(r"^([^=\s])\s*=\s*(.+)$")


def parse_rules(text: str) -> dict[str, str]:
    """Parse ``SYMBOL=expansion`` lines into a rule table.

    Blank and malformed lines are skipped; a repeated symbol keeps the last
    expansion seen.
    """
    rules: dict[str, str] = {}
    for line in re.split(r"\r?\n", text):
        line = line.strip()
        if not line:
            continue
        m = _RULE_LINE.match(line)
        if m:
            rules[m.group(1)] = m.group(2)
        else:
            logger.debug("skipping rule line %r", line)
    return rules


def parse_draw_symbols(text: str) -> frozenset[str]:
    """Every character of ``text``, whitespace included, becomes a draw symbol."""
    return frozenset(text)


# -------------------------
# Generation API
# -------------------------


def _commands_for(grammar: Grammar, iterations: int) -> str:
    s = expand(grammar.axiom, grammar.rules, iterations)
    return collapse_draw_symbols(s, grammar.draw_symbols)


def generate_points(
    grammar_or_id: Grammar | str,
    iterations: int,
    step: float = 8,
    width: float = 800,
    height: float = 600,
) -> list[Point]:
    """Expand, walk and fit a preset (by id) or an inline grammar.

    An unknown preset id gives an empty list.
    """
    if isinstance(grammar_or_id, str):
        grammar = get_fractal(grammar_or_id)
        if grammar is None:
            logger.debug("unknown fractal id %r", grammar_or_id)
            return []
    else:
        grammar = grammar_or_id

    pts = interpret(_commands_for(grammar, iterations), grammar.angle, step)
    logger.debug("%s: %d points at %d iterations", grammar.id, len(pts), iterations)
    return normalize(pts, width, height, VIEWPORT_PADDING)


def generate_custom_points(
    axiom: str,
    rules_text: str,
    angle: float = DEFAULT_ANGLE,
    iterations: int = 1,
    step: float = 8,
    width: float = 800,
    height: float = 600,
    draw_symbols_text: str = "F",
) -> list[Point]:
    """Same pipeline as :func:`generate_points` for a grammar typed as text."""
    grammar = Grammar(
        id="custom",
        axiom=axiom,
        rules=parse_rules(rules_text),
        angle=angle,
        draw_symbols=parse_draw_symbols(draw_symbols_text),
    )
    return generate_points(grammar, iterations, step, width, height)


def generate_polylines(
    grammar: Grammar,
    iterations: int,
    step: float = 8,
    width: float = 800,
    height: float = 600,
) -> list[list[Point]]:
    """Fitted polylines for ``grammar``, with explicit breaks at branches."""
    polylines = interpret_to_polylines(
        _commands_for(grammar, iterations), grammar.angle, step
    )
    return normalize_polylines(polylines, width, height, VIEWPORT_PADDING)


# -------------------------
# Config parsing
# -------------------------


@dataclass(frozen=True)
class GrammarConfig:
    name: str
    grammar: Grammar
    iterations: int
    step: float
    width: float
    height: float
    padding: float


def parse_config(obj: dict[str, Any]) -> GrammarConfig:
    obj = _as_dict(obj, "root")

    name = _as_str(obj.get("name", "Custom L-system"), "name")
    axiom = _as_str(obj.get("axiom", ""), "axiom")
    _require(len(axiom) > 0, "axiom must be non-empty")

    iterations = _as_int(obj.get("iterations", 1), "iterations")
    _require(iterations >= 0, "iterations must be >= 0")

    rules_obj = _as_dict(obj.get("rules", {}), "rules")
    rules: dict[str, str] = {}
    for k, v in rules_obj.items():
        _require(
            isinstance(k, str) and len(k) == 1,
            "rules keys must be single-character strings",
        )
        rules[k] = _as_str(v, f"rules['{k}']")
    if "rules_text" in obj:
        rules.update(parse_rules(_as_str(obj["rules_text"], "rules_text")))

    angle = _as_float(obj.get("angle", DEFAULT_ANGLE), "angle")
    step = _as_float(obj.get("step", 8), "step")
    _require(step > 0, "step must be > 0")
    draw_symbols = parse_draw_symbols(
        _as_str(obj.get("draw_symbols", "F"), "draw_symbols")
    )

    viewport = _as_dict(obj.get("viewport", {}), "viewport")
    width = _as_float(viewport.get("width", 800), "viewport.width")
    _require(width > 0, "viewport.width must be > 0")
    height = _as_float(viewport.get("height", 600), "viewport.height")
    _require(height > 0, "viewport.height must be > 0")
    padding = _as_float(
        viewport.get("padding", VIEWPORT_PADDING), "viewport.padding"
    )
    _require(padding >= 0, "viewport.padding must be >= 0")

    grammar = Grammar(
        id="custom",
        label=name,
        axiom=axiom,
        rules=rules,
        angle=angle,
        draw_symbols=draw_symbols,
    )
    return GrammarConfig(
        name=name,
        grammar=grammar,
        iterations=iterations,
        step=step,
        width=width,
        height=height,
        padding=padding,
    )


def load_json(path: str) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        try:
            return cast(dict[str, Any], json.load(f))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e


def _ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)) or ".", exist_ok=True)


def dump_json(obj: dict[str, Any], path: str) -> None:
    _ensure_parent_dir(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)
        f.write("\n")


# -------------------------
# CLI / Help
# -------------------------

HELP_EPILOG = r"""
OUTPUT

Both `points` and `custom` write a JSON object:

  {"name": ..., "iterations": ..., "width": ..., "height": ...,
   "points": [[x, y], ...]}

With --polylines the "points" key is replaced by "polylines", a list of point
lists split wherever the turtle restores a saved state or moves pen-up.

TURTLE COMMANDS

  F  move forward and draw      f  move forward without drawing
  +  turn by -angle             -  turn by +angle
  [  save position/heading      ]  restore it (emits the restored point)

Any other symbol is ignored unless listed in draw_symbols, which turns it
into F before the walk.

CUSTOM CONFIG (custom / validate)

  {
    "name": "Koch",
    "axiom": "F",
    "rules": {"F": "F+F--F+F"},
    "rules_text": "F = F+F--F+F",
    "angle": 60,
    "iterations": 3,
    "draw_symbols": "F",
    "step": 8,
    "viewport": {"width": 800, "height": 600, "padding": 12}
  }

Only "axiom" is required. "rules_text" lines override "rules" entries.
"""


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lsystem-fractals",
        description="Generate viewport-fitted points for L-system fractals.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP_EPILOG,
    )
    p.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )

    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List the preset fractal ids.")

    pp = sub.add_parser(
        "points",
        help="Write the points of a preset fractal as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    pp.add_argument("fractal", help="Preset id (see `list`).")
    pp.add_argument("--iterations", type=int, default=3)
    pp.add_argument("--step", type=float, default=8)
    pp.add_argument("--width", type=float, default=800)
    pp.add_argument("--height", type=float, default=600)
    _add_output_args(pp)

    pc = sub.add_parser(
        "custom",
        help="Write the points of a JSON grammar config as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    pc.add_argument("config", help="Path to the input JSON config.")
    _add_output_args(pc)

    pv = sub.add_parser(
        "validate",
        help="Validate a JSON config and print a brief summary.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    pv.add_argument("config", help="Path to the input JSON config.")

    return p


def _add_output_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-o", "--output", default=None, help="Write JSON here instead of stdout."
    )
    p.add_argument(
        "--precision", type=int, default=3, help="Decimal places kept per coordinate."
    )
    p.add_argument(
        "--polylines",
        action="store_true",
        help="Split the output into polylines at branch and pen-up breaks.",
    )


# -------------------------
# Commands
# -------------------------


def _rounded(points: list[Point], precision: int) -> list[list[float]]:
    return [[round(x, precision), round(y, precision)] for x, y in points]


def _emit(
    grammar: Grammar,
    *,
    name: str,
    iterations: int,
    step: float,
    width: float,
    height: float,
    padding: float,
    polylines: bool,
    precision: int,
    output: str | None,
) -> None:
    _require(0 <= precision <= 10, "precision must be between 0 and 10")
    _require(iterations >= 0, "iterations must be >= 0")
    _require(
        all(math.isfinite(v) and v > 0 for v in (width, height)),
        "width and height must be finite numbers > 0",
    )
    _require(
        math.isfinite(step) and step > 0, "step must be a finite number > 0"
    )

    commands = _commands_for(grammar, iterations)
    result: dict[str, Any] = {
        "name": name,
        "iterations": iterations,
        "width": width,
        "height": height,
    }
    if polylines:
        lines = normalize_polylines(
            interpret_to_polylines(commands, grammar.angle, step),
            width,
            height,
            padding,
        )
        result["polylines"] = [_rounded(pl, precision) for pl in lines]
    else:
        pts = normalize(
            interpret(commands, grammar.angle, step), width, height, padding
        )
        result["points"] = _rounded(pts, precision)

    if output is None:
        json.dump(result, sys.stdout)
        sys.stdout.write("\n")
    else:
        dump_json(result, output)
        logger.info("wrote %s", output)


def cmd_list() -> None:
    for fid, g in FRACTALS.items():
        print(f"{fid:20} {g.label or ''}")


def cmd_points(args: argparse.Namespace) -> int:
    grammar = get_fractal(args.fractal)
    if grammar is None:
        print(f"Unknown fractal: {args.fractal}", file=sys.stderr)
        return 2
    _emit(
        grammar,
        name=grammar.label or grammar.id,
        iterations=args.iterations,
        step=args.step,
        width=args.width,
        height=args.height,
        padding=VIEWPORT_PADDING,
        polylines=args.polylines,
        precision=args.precision,
        output=args.output,
    )
    return 0


def cmd_custom(args: argparse.Namespace) -> None:
    cfg = parse_config(load_json(args.config))
    _emit(
        cfg.grammar,
        name=cfg.name,
        iterations=cfg.iterations,
        step=cfg.step,
        width=cfg.width,
        height=cfg.height,
        padding=cfg.padding,
        polylines=args.polylines,
        precision=args.precision,
        output=args.output,
    )


_VALIDATE_SYMBOL_LIMIT = 10_000


def cmd_validate(config_path: str) -> None:
    cfg = parse_config(load_json(config_path))
    g = cfg.grammar

    print(f"name: {cfg.name}")
    print(f"axiom length: {len(g.axiom)}")
    print(f"iterations: {cfg.iterations}")
    print(f"rules: {len(g.rules)}")
    print(f"angle: {g.angle} step: {cfg.step}")
    print(f"draw symbols: {''.join(sorted(g.draw_symbols))}")
    print(f"viewport: {cfg.width}x{cfg.height} padding={cfg.padding}")

    # Walk a bounded prefix so huge expansions are reported, not built.
    raw = stream_expand(g.axiom, g.rules, cfg.iterations)
    bounded = "".join(itertools.islice(raw, _VALIDATE_SYMBOL_LIMIT))
    truncated = len(bounded) == _VALIDATE_SYMBOL_LIMIT
    pts = interpret(collapse_draw_symbols(bounded, g.draw_symbols), g.angle, cfg.step)
    sym_label = f"{len(bounded)}+" if truncated else str(len(bounded))
    print(f"symbols (sampled): {sym_label}")
    print(f"points: {len(pts)}")
    if truncated:
        print(
            f"warning: expansion exceeds {_VALIDATE_SYMBOL_LIMIT} symbols; "
            "point count is based on the first portion only"
        )
    if len(pts) < 2:
        raise ConfigError("Config produces no drawable geometry")


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.cmd == "list":
            cmd_list()
        elif args.cmd == "points":
            return cmd_points(args)
        elif args.cmd == "custom":
            cmd_custom(args)
        elif args.cmd == "validate":
            cmd_validate(args.config)
        else:
            raise AssertionError("unreachable")
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"File error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
