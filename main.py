#!/usr/bin/env python3
"""
Trident - Main Entry Point

Parse, check and view 2D low-poly mesh files.
"""

import argparse
import logging
import sys


def run_view(args):
    """Open the viewer on a mesh file."""
    from trident.config import ViewerConfig
    from trident.visualization import show_mesh

    try:
        show_mesh(args.path, ViewerConfig())
    except (RuntimeError, ValueError) as e:
        print(f"Error: {e}")
        return 1
    return 0


def run_parse(args):
    """Parse a mesh file and display a summary."""
    from trident.loader import load_mesh
    from trident.shapes.encoder import MeshEncoder

    try:
        mesh = load_mesh(args.path)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(f"File: {args.path}")
    print(MeshEncoder.format_for_display(mesh))
    return 0


def run_check(args):
    """Parse a mesh file and report geometric issues."""
    from trident.loader import load_mesh
    from trident.shapes.validator import MeshValidator

    try:
        mesh = load_mesh(args.path)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    valid, issues = MeshValidator.validate_mesh(mesh)
    if valid:
        print(f"OK: {mesh.num_shapes} shape(s)")
        return 0

    for issue in issues:
        print(f"  - {issue}")
    print(f"{len(issues)} issue(s) in {mesh.num_shapes} shape(s)")
    return 1


def run_format(args):
    """Print the normalized form of a mesh file."""
    from trident.loader import load_mesh

    try:
        text = load_mesh(args.path).to_code()
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    sys.stdout.write(text)
    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Trident - parse and view 2D low-poly mesh files"
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        help="Logging level (default: warning)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    view_parser = subparsers.add_parser("view", help="Open a mesh file in the viewer")
    view_parser.add_argument("path", help="Mesh file to view")

    parse_parser = subparsers.add_parser("parse", help="Parse a mesh file and show a summary")
    parse_parser.add_argument("path", help="Mesh file to parse")

    check_parser = subparsers.add_parser("check", help="Check a mesh file for geometric issues")
    check_parser.add_argument("path", help="Mesh file to check")

    format_parser = subparsers.add_parser("format", help="Print a mesh file in normalized form")
    format_parser.add_argument("path", help="Mesh file to format")

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "view":
        return run_view(args)
    elif args.command == "parse":
        return run_parse(args)
    elif args.command == "check":
        return run_check(args)
    elif args.command == "format":
        return run_format(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
