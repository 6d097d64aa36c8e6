#!/usr/bin/env python3
"""
GeoJSON measurement script.

This script loads a GeoJSON file and reports its bounding box, line length,
polygon area and center.
"""

import argparse
import json
import logging
import sys
import os

# Add src to path if running from source
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import spherical_geojson as sg


def main():
    """Main entry point for GeoJSON measurement."""
    parser = argparse.ArgumentParser(
        description='Measure a GeoJSON geometry, Feature or FeatureCollection'
    )
    parser.add_argument(
        'path',
        type=str,
        help='Path to a GeoJSON file'
    )
    parser.add_argument(
        '--units',
        type=str,
        default=sg.constants.UNIT_DEFAULT,
        help=f'Unit for lengths (default: {sg.constants.UNIT_DEFAULT})'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    print(f"Loading GeoJSON from: {args.path}")
    with open(args.path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    try:
        obj = sg.model.from_dict(data)
        box = sg.measurement.bbox(obj)
        line_length = sg.measurement.length(obj, args.units)
        polygon_area = sg.measurement.area(obj)
        center = sg.measurement.center(obj).geometry
    except sg.exceptions.GeoError as e:
        print(f"✗ {e.error_code}: {e.message}")
        sys.exit(1)

    print(f"Type:   {data.get('type')}")
    print(f"BBox:   [{box[0]:.6f}, {box[1]:.6f}, {box[2]:.6f}, {box[3]:.6f}]")
    print(f"Length: {line_length:.6f} {args.units}")
    print(f"Area:   {polygon_area:.2f} m^2")
    print(f"Center: ({center.longitude:.6f}, {center.latitude:.6f})")


if __name__ == '__main__':
    main()
