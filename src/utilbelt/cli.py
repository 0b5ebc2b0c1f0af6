"""Command line access to the text, colour and image helpers."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from PIL import Image

from .color import Color
from .config import FilterPipelineConfig, TemplateConfig, parse_filter
from .errors import UtilbeltError
from .imaging import apply_filters
from .text import slugify, substitute_variables, truncate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="utilbelt", description="Small text, colour and image helpers")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    slug = commands.add_parser("slugify", help="Print a URL-safe slug of TEXT")
    slug.add_argument("text")

    trunc = commands.add_parser("truncate", help="Trim TEXT to LENGTH characters")
    trunc.add_argument("text")
    trunc.add_argument("length", type=int)
    trunc.add_argument("--ellipsis", action="store_true", help="Append '...' when trimmed")

    render = commands.add_parser("render", help="Render a {$name} template config")
    render.add_argument("config", type=Path, help="YAML file with 'template' and 'variables'")
    render.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Override a template variable (repeatable)",
    )

    color = commands.add_parser("color", help="Inspect or blend #RRGGBBAA colours")
    color.add_argument("hex", help="Source colour, e.g. #FFE700FF")
    color.add_argument("--to", dest="target", help="Colour to interpolate towards")
    color.add_argument("--amount", type=float, default=0.5, help="Interpolation weight in [0, 1]")
    color.add_argument("--grayscale", action="store_true", help="Convert the result to grey")

    filt = commands.add_parser("filter", help="Apply image filters to INPUT and save OUTPUT")
    filt.add_argument("input", type=Path)
    filt.add_argument("output", type=Path)
    filt.add_argument("--config", type=Path, help="YAML filter pipeline")
    filt.add_argument(
        "--apply",
        dest="filters",
        action="append",
        default=[],
        metavar="KIND[:AMOUNT]",
        help="Append a filter step, e.g. blur:4 (repeatable)",
    )
    return parser


def _parse_color(value: str) -> Color:
    color = Color.from_hex(value)
    if color is None:
        raise UtilbeltError(f"Expected a colour in #RRGGBBAA form, got {value!r}")
    return color


def _run_render(args: argparse.Namespace) -> str:
    config = TemplateConfig.load(args.config)
    variables = dict(config.variables)
    for override in args.overrides:
        name, sep, value = override.partition("=")
        if not sep:
            raise UtilbeltError(f"Override must look like NAME=VALUE, got {override!r}")
        variables[name] = value
    return substitute_variables(config.template, variables)


def _run_color(args: argparse.Namespace) -> str:
    color = _parse_color(args.hex)
    if args.target:
        color = color.lerp(_parse_color(args.target), args.amount)
    if args.grayscale:
        color = color.grayscale()
    return color.to_hex()


def _run_filter(args: argparse.Namespace) -> str:
    specs = []
    if args.config:
        specs.extend(FilterPipelineConfig.load(args.config).filters)
    specs.extend(parse_filter(item) for item in args.filters)
    if not specs:
        raise UtilbeltError("No filters given; use --config or --apply")
    with Image.open(args.input) as source:
        result = apply_filters(source, specs)
        args.output.parent.mkdir(parents=True, exist_ok=True)
        try:
            result.save(args.output)
        except ValueError as exc:
            raise UtilbeltError(f"Cannot save {args.output}: {exc}") from exc
    logger.info("Wrote %s with %d filter(s)", args.output, len(specs))
    return str(args.output)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "slugify":
            output: Optional[str] = slugify(args.text)
            if output is None:
                print("error: nothing to slugify", file=sys.stderr)
                return 1
        elif args.command == "truncate":
            output = truncate(args.text, args.length, add_ellipsis=args.ellipsis)
        elif args.command == "render":
            output = _run_render(args)
        elif args.command == "color":
            output = _run_color(args)
        else:
            output = _run_filter(args)
    except (UtilbeltError, OSError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
