"""
Command line interface for plag

    plag [--pretty] [-p filename,path,datetime] [-o out.geojson] PHOTO...

Writes a GeoJSON FeatureCollection of the photos' GPS positions to stdout or
to the output file. Photos that cannot be converted are reported on stderr
and left out of the document.
"""

import argparse
import logging
import sys
from typing import List, Optional

from PIL import Image

from . import __version__
from .config import LOG_LEVELS, load_config
from .encoder import write_collection
from .enums import parse_selectors
from .errors import ConfigError, UnknownPropertyError
from .pipeline import PhotoLocationPipeline, diagnostics

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plag",
        description="Photo Location As GeoJSON - Extract GPS location from photos to GeoJSON",
    )
    parser.add_argument("files", nargs="+", help="A list of photos")
    parser.add_argument("--pretty", action="store_true", default=None,
                        help="Output human-readable GeoJSON")
    parser.add_argument("-p", "--properties", action="append", metavar="NAMES",
                        help="Comma separated properties to attach to each feature "
                             "(filename, path, datetime); may be repeated")
    parser.add_argument("-o", "--output", help="Write GeoJSON to this file instead of stdout")
    parser.add_argument("-c", "--config", help="JSON configuration file")
    parser.add_argument("-j", "--workers", type=int, dest="max_workers",
                        help="Maximum number of photos processed at once (default: CPU count)")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        help="Logging level on stderr (default: INFO); skipped photos "
                             "are reported at WARNING regardless")
    parser.add_argument("--strict", action="store_true",
                        help="Exit with status 1 if any photo was skipped")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        parser.error(str(e))

    # Command line options override the config file
    if args.properties is not None:
        config["properties"] = args.properties
    if args.pretty is not None:
        config["pretty"] = args.pretty
    if args.max_workers is not None:
        if args.max_workers < 1:
            parser.error("--workers must be at least 1")
        config["max_workers"] = args.max_workers
    if args.log_level is not None:
        config["log_level"] = args.log_level

    try:
        config["properties"] = parse_selectors(config["properties"])
    except UnknownPropertyError as e:
        parser.error(str(e))

    level = getattr(logging, config["log_level"].upper())
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    # Skipped photos are always reported, whatever the log level
    diagnostics.setLevel(min(level, logging.WARNING))

    # Only EXIF is read, so the pixel-count limit does not apply
    Image.MAX_IMAGE_PIXELS = None

    pipeline = PhotoLocationPipeline(config)
    result = pipeline.process_sources(args.files)

    try:
        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                write_collection(result.collection, f, pretty=config["pretty"])
            logger.info(f"GeoJSON written to {args.output}")
        else:
            write_collection(result.collection, sys.stdout, pretty=config["pretty"])
            sys.stdout.flush()
    except (OSError, ValueError) as e:
        logger.error(f"Failed to write GeoJSON: {e}")
        return 1

    if args.strict and result.failures:
        logger.error(f"{result.failed} photo(s) skipped")
        return 1
    return 0
