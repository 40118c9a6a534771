#!/usr/bin/env python3
"""
Main entry point for plag

Extracts GPS locations from photos and prints them as a GeoJSON
FeatureCollection. See `python main.py --help`.
"""

import sys

from plag.cli import main


if __name__ == "__main__":
    sys.exit(main())
