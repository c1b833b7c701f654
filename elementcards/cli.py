"""Command line: render every element card into an output directory."""

import argparse
import logging
import sys
from dataclasses import replace

from .batch import generate_cards, select_elements
from .colours import load_colour_table
from .elements import FETCH_TIMEOUT, PERIODIC_TABLE_URL, source_for
from .errors import ElementCardsError
from .fonts import load_role_faces
from .layout import DEFAULT_LAYOUT, Geometry


def positive_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text!r} is not an integer")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"{text!r} must be greater than zero")
    return value


def number_list(text):
    try:
        return [int(x.strip()) for x in text.split(",") if x.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError("expected a comma-separated list of atomic numbers")


def build_parser():
    parser = argparse.ArgumentParser(prog="element-cards",
                                     description="Generate periodic-table element card PNGs.")
    parser.add_argument("--font", default="font.ttf", help="Path to a .ttf/.otf font file")
    parser.add_argument("--colours", default="colours.json", help="Path to the category colour table (JSON)")
    parser.add_argument("--outdir", default="elements", help="Output directory")
    parser.add_argument("--height", type=positive_int, default=600,
                        help="Tile height in px (width follows the card aspect ratio)")
    parser.add_argument("--precision", type=int, default=DEFAULT_LAYOUT.mass_precision,
                        help="Decimal places for the atomic mass")
    parser.add_argument("--source", default="embedded",
                        help="'embedded', 'remote', or a path to a PeriodicTableJSON .json or a .csv file")
    parser.add_argument("--url", default=PERIODIC_TABLE_URL, help="Element data URL for --source remote")
    parser.add_argument("--timeout", type=float, default=FETCH_TIMEOUT, help="Fetch timeout in seconds")
    parser.add_argument("--only", type=number_list, default=None,
                        help="Comma-separated atomic numbers to render only those cards")
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    return parser


def run(args):
    config = replace(DEFAULT_LAYOUT, mass_precision=max(0, args.precision))
    geometry = Geometry.from_height(args.height, config)

    # everything that can fail fatally happens before the first card
    colours = load_colour_table(args.colours)
    faces = load_role_faces(args.font, geometry)
    elements = source_for(args.source, url=args.url, timeout=args.timeout).load()
    elements = select_elements(elements, args.only)

    return generate_cards(elements, colours, geometry, faces, args.outdir, config)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="[%(levelname)s] %(message)s")
    try:
        run(args)
    except ElementCardsError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    return 0
