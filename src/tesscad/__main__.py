#!/usr/bin/env python3
"""
CLI for tessCAD tessellation patterns.

Usage:
    python -m tesscad centers [--config FILE] [options]
    python -m tesscad dxf OUTPUT [--config FILE] [options]
    python -m tesscad mesh --height H [--config FILE] [options]

Examples:
    # Centres of a three-level hexagon rosette, as JSON
    python -m tesscad centers --radius 5 --levels 3

    # A 4x3 octagon grid, colored, written to a DXF file
    python -m tesscad dxf tiles.dxf --radius 5 --shape octagon --n 4 --m 3 \
        --spacing 0.5 --color-scheme scheme2

    # Same pattern from a YAML pattern file, overriding the spacing
    python -m tesscad dxf tiles.dxf --config pattern.yaml --spacing 1.0
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict

from tesscad.centers import generate_centers
from tesscad.config import PatternConfig, config_from_dict, load_pattern_config
from tesscad.ezdxf_exporter import write_tiles_dxf
from tesscad.logging_config import setup_logging
from tesscad.tiles import extrude_tile, layout_tiles, secondary_centers

logger = logging.getLogger("tesscad.cli")


def config_from_args(args) -> PatternConfig:
    """Build the pattern configuration from a config file and/or flags."""
    if args.config:
        config = load_pattern_config(args.config)
    elif args.radius is None:
        raise ValueError('either --config or --radius is required')
    else:
        config = config_from_dict({'radius': args.radius})
    return config.override(
        radius=args.radius,
        shape=args.shape,
        levels=args.levels,
        n=args.n,
        m=args.m,
        order=args.order,
        spacing=args.spacing,
        color_scheme=args.color_scheme,
        height=getattr(args, 'height', None),
        rotate=False if args.no_rotate else None,
        secondary=True if args.secondary else None,
    )


def pattern_centers(config: PatternConfig):
    return generate_centers(config.layout(), config.radius, config.shape, config.rotate)


def pattern_tiles(config: PatternConfig, centers):
    return layout_tiles(centers, config.radius, config.shape, config.rotate,
                        config.order, config.spacing, config.color_scheme)


def cmd_centers(config: PatternConfig) -> int:
    centers = pattern_centers(config)
    result = {'centers': centers}
    if config.secondary:
        result['secondary'] = secondary_centers(centers)
    print(json.dumps(result, indent=2))
    return 0


def cmd_dxf(config: PatternConfig, output: str) -> int:
    centers = pattern_centers(config)
    if not centers:
        print('Warning: no centers generated, nothing to export', file=sys.stderr)
        return 1
    markers = secondary_centers(centers) if config.secondary else None
    tiles = pattern_tiles(config, centers)
    if not write_tiles_dxf(tiles, output, markers=markers):
        return 1
    print(f"Exported to: {output}")
    return 0


def cmd_mesh(config: PatternConfig) -> int:
    if config.height is None:
        raise ValueError('mesh needs an extrusion --height')
    centers = pattern_centers(config)
    solids = []
    for tile in pattern_tiles(config, centers):
        solids.append({
            'center': list(tile.center),
            'color': list(tile.color),
            'triangles': [asdict(t) for t in extrude_tile(tile, config.height)],
        })
    print(json.dumps({'tiles': solids}))
    return 0


def add_pattern_options(parser):
    parser.add_argument('-c', '--config', metavar='FILE',
                        help='YAML pattern file')
    parser.add_argument('-r', '--radius', type=float, help='tile circumradius')
    parser.add_argument('-s', '--shape', choices=['hex', 'octagon'],
                        help='tile shape (default hex)')
    parser.add_argument('-l', '--levels', type=int,
                        help='rings of a radial layout')
    parser.add_argument('--n', type=int, help='grid columns')
    parser.add_argument('--m', type=int, help='grid rows')
    parser.add_argument('--no-rotate', action='store_true',
                        help='do not turn octagons by 22.5 degrees')
    parser.add_argument('--order', type=int,
                        help='octagon facet multiplier')
    parser.add_argument('--spacing', type=float,
                        help='gap left between drawn tiles')
    parser.add_argument('--color-scheme', metavar='SCHEME',
                        help='gradient scheme, scheme1 .. scheme6')
    parser.add_argument('--secondary', action='store_true',
                        help='also derive interstitial (triangulated) centers')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='debug logging')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='python -m tesscad',
        description='hexagon and octagon tessellation patterns',
    )
    subparsers = parser.add_subparsers(dest='action', required=True)

    centers_parser = subparsers.add_parser('centers', help='Print tile centers as JSON')
    add_pattern_options(centers_parser)

    dxf_parser = subparsers.add_parser('dxf', help='Write tile outlines to a DXF file')
    dxf_parser.add_argument('output', help='output DXF file')
    add_pattern_options(dxf_parser)

    mesh_parser = subparsers.add_parser('mesh', help='Print extruded tiles as JSON triangles')
    mesh_parser.add_argument('--height', type=float, help='extrusion height')
    add_pattern_options(mesh_parser)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO,
                  stream=sys.stderr)

    try:
        config = config_from_args(args)
        if args.action == 'centers':
            return cmd_centers(config)
        elif args.action == 'dxf':
            return cmd_dxf(config, args.output)
        elif args.action == 'mesh':
            return cmd_mesh(config)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
