#!/usr/bin/env python3
"""
Convert saved signature pad traces into SVG images.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from signature_svg.batch import convert_all
from signature_svg.utils.config import Config, StrokeConfig
from signature_svg.utils.config_validation import validate_config
from signature_svg.utils.logging import setup_logging


def parse_args():
    parser = argparse.ArgumentParser(description="Convert signature pad JSON traces to SVG")
    parser.add_argument(
        "input",
        type=str,
        help="JSON trace file or directory of trace files"
    )
    parser.add_argument(
        "--output_dir",
        type=str,
        default="outputs/svg",
        help="Directory to write images into"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="configs/default_config.yml",
        help="Path to configuration file"
    )
    parser.add_argument(
        "--title",
        type=str,
        help="Override image title"
    )
    parser.add_argument(
        "--pen_width",
        type=float,
        help="Override pen width"
    )
    parser.add_argument(
        "--pen_colour",
        type=str,
        help="Override pen colour"
    )
    parser.add_argument(
        "--gzip",
        action="store_true",
        help="Write gzip-compressed .svgz files"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    config = Config(args.config)

    if args.title is not None:
        config.set('stroke.title', args.title)
    if args.pen_width is not None:
        config.set('stroke.penWidth', args.pen_width)
    if args.pen_colour is not None:
        config.set('stroke.penColour', args.pen_colour)

    validate_config(config)

    logger = setup_logging(
        log_dir=config.get('output.logs_dir', 'logs'),
        log_level=config.get('logging.level', 'INFO'),
        log_to_file=config.get('logging.log_to_file', False)
    )

    stroke = StrokeConfig.from_options(config.stroke_options())
    logger.info(f"Converting {args.input} -> {args.output_dir}")
    logger.info(f"Stroke: width={stroke.pen_width}, colour={stroke.pen_colour}, title={stroke.title!r}")

    try:
        failed = convert_all(args.input, args.output_dir, config=stroke, compress=args.gzip)
    except Exception as e:
        logger.error(f"Conversion failed: {e}", exc_info=True)
        raise

    if failed:
        logger.warning(f"{len(failed)} traces could not be converted")
        sys.exit(1)


if __name__ == "__main__":
    main()
