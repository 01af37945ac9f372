# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""swatcher -- Representative colors from raster images.

Usage: python -m swatcher <command> <image> [options]

Commands:
  top        Most frequent colors of the whole image
  composite  Dominant color of every fixed-size tile

Defaults come from SWATCHER_* environment variables (see swatcher.config);
command-line options override them.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from swatcher.config import SwatcherConfig
from swatcher.errors import SwatcherError
from swatcher.measure.composite import render_composite
from swatcher.measure.select import top_swatches
from swatcher.runtime import BlockFormat, to_context_block, to_text
from swatcher.schema import Accuracy, SwatchTally
from swatcher.session import Swatcher

logger = logging.getLogger("swatcher")

_FORMATS = ["text"] + [f.value for f in BlockFormat]


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  swatcher top photo.jpg -n 5 --accuracy High\n'
        '  swatcher top photo.jpg -f json\n'
        '  swatcher composite photo.png -s 16 -o composite.png\n'
        '  swatcher composite photo.png -s 8 --tile-stride 2 --deadline 5 -f xml\n'
    )
    parser = argparse.ArgumentParser(
        prog='swatcher',
        description='Representative colors from JPEG and PNG images.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--log-level',
        default=None,
        metavar='LEVEL',
        help='Logging level (default: SWATCHER_LOG_LEVEL or WARNING)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    def _common(p: argparse.ArgumentParser) -> None:
        p.add_argument('image', help='Path to a PNG/JPG image')
        p.add_argument(
            '-a',
            '--accuracy',
            choices=[a.value for a in Accuracy],
            default=None,
            help='Sampling accuracy (default: SWATCHER_ACCURACY or Low)',
        )
        p.add_argument(
            '-f',
            '--format',
            choices=_FORMATS,
            default='text',
            help='Output format (default: text)',
        )

    top = sub.add_parser('top', help='Most frequent colors of the whole image')
    _common(top)
    top.add_argument(
        '-n',
        '--count',
        type=int,
        default=1,
        help='Number of colors (default: 1); must not exceed the distinct colors sampled',
    )

    comp = sub.add_parser('composite', help='Dominant color of every fixed-size tile')
    _common(comp)
    comp.add_argument('-s', '--size', type=int, required=True, help='Tile edge length in pixels')
    comp.add_argument(
        '--tile-stride',
        type=int,
        default=None,
        metavar='N',
        help='Sampling stride inside each tile (default: SWATCHER_TILE_STRIDE or 1)',
    )
    comp.add_argument(
        '--deadline',
        type=float,
        default=None,
        metavar='SECONDS',
        help='Abort if the composite takes longer than this',
    )
    comp.add_argument('-o', '--output', metavar='PATH', help='Write the composite as an image')

    return parser


def _resolve_config(args: argparse.Namespace) -> SwatcherConfig:
    """Environment first, then command-line overrides."""
    base = SwatcherConfig.from_env()
    tile_stride = getattr(args, 'tile_stride', None)
    deadline = getattr(args, 'deadline', None)
    return SwatcherConfig(
        accuracy=args.accuracy or base.accuracy,
        tile_stride=base.tile_stride if tile_stride is None else tile_stride,
        composite_deadline=base.composite_deadline if deadline is None else deadline,
        log_level=args.log_level or base.log_level,
    )


def _run_top(session: Swatcher, args: argparse.Namespace) -> str:
    tally = session.analyze_pixels()
    # Raises OutOfRange before anything is printed
    top_swatches(tally, args.count)
    if args.format == 'text':
        return to_text(tally, limit=args.count)
    top = SwatchTally(entries=tally.entries[:args.count], region=tally.region, stride=tally.stride)
    return to_context_block(top, format=BlockFormat(args.format))


def _run_composite(session: Swatcher, args: argparse.Namespace) -> str:
    composite = session.generate_composite(args.size)
    if args.output:
        render_composite(composite).save(args.output)
        logger.info('Wrote composite image to %s', args.output)
    if args.format == 'text':
        return to_text(composite)
    return to_context_block(composite, format=BlockFormat(args.format))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = _resolve_config(args)
        logging.basicConfig(
            level=getattr(logging, config.log_level.upper(), logging.WARNING),
            format='%(asctime)s | %(levelname)s | %(name)s | %(message)s',
        )
        session = Swatcher.from_config(args.image, config)
        if args.command == 'top':
            output = _run_top(session, args)
        else:
            output = _run_composite(session, args)
    except SwatcherError as e:
        print(f'swatcher: {e}', file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
