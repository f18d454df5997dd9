#!/usr/bin/env python3
"""
Command-line interface for responsive image breakpoint planning.
"""

import argparse
import json
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from responsive_images.io.image_probe import ImageProbe
from responsive_images.layout.breakpoints import get_sizes_attribute, get_widths
from responsive_images.layout.resolutions import get_resolutions
from responsive_images.models import ImageLayout, ImagePlanRequest, ResolutionSet
from responsive_images.pipeline.planner import SrcsetPlanner

# Load environment variables
load_dotenv()


def parse_breakpoints(value):
    """Parse a comma-separated list of positive widths."""
    try:
        breakpoints = [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid breakpoint list: {value}")
    if not breakpoints or any(w <= 0 for w in breakpoints):
        raise argparse.ArgumentTypeError(f"Breakpoints must be positive widths: {value}")
    return breakpoints


def cmd_widths(args):
    """Print the widths an image should be rendered at."""
    resolutions = args.resolutions or os.getenv("RESPONSIVE_RESOLUTIONS", ResolutionSet.DEFAULT.value)
    breakpoints = args.breakpoints or list(get_resolutions(resolutions))

    widths = get_widths(
        width=args.width,
        layout=args.layout,
        breakpoints=breakpoints,
        original_width=args.original_width,
    )

    if args.json:
        print(json.dumps(widths))
        return 0

    if not widths:
        print(f"⚠️  No renderable width for layout '{args.layout}'")
        if args.layout in (ImageLayout.FIXED.value, ImageLayout.CONSTRAINED.value) and not args.width:
            print(f"   Layout '{args.layout}' requires --width")
        return 0

    print(f"📐 Widths ({len(widths)}): {', '.join(str(w) for w in widths)}")
    return 0


def cmd_sizes(args):
    """Print the `sizes` attribute for an image."""
    sizes = get_sizes_attribute(width=args.width, layout=args.layout)

    if sizes is None:
        print(f"⚠️  No sizes attribute for layout '{args.layout}'")
        return 0

    print(sizes)
    return 0


def cmd_plan(args):
    """Plan widths, sizes and srcset for an image."""
    print("📐 Planning responsive image...")

    original_width = args.original_width
    src = args.src or ""

    if args.image:
        image_path = Path(args.image)
        if not image_path.is_file():
            print(f"❌ Error: Image not found: {image_path}")
            return 1

        source = ImageProbe().probe(image_path)
        original_width = source.width
        src = src or source.path.as_posix()
        print(f"🖼️  Image: {image_path} ({source.width}x{source.height}, {source.format})")

    try:
        request = ImagePlanRequest(
            layout=args.layout,
            width=args.width,
            original_width=original_width,
            breakpoints=args.breakpoints,
            src=src,
        )
    except ValidationError as e:
        print(f"❌ Invalid plan request: {e}")
        return 1

    planner = SrcsetPlanner(
        resolutions=args.resolutions,
        url_template=args.url_template
    )
    plan = planner.plan(request)

    if not plan.is_renderable():
        print("⚠️  No renderable width for this image")

    print(f"📏 Widths: {', '.join(str(w) for w in plan.widths) or '(none)'}")
    print(f"🔍 Sizes: {plan.sizes or '(none)'}")
    print(f"🔗 Srcset: {plan.srcset or '(none)'}")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(plan.model_dump_json(indent=2), encoding="utf-8")
        print(f"💾 Plan saved: {output_path}")

    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Responsive image breakpoints and sizes attributes",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    layouts = [layout.value for layout in ImageLayout]
    resolution_sets = [resolution_set.value for resolution_set in ResolutionSet]

    # Widths command
    widths_parser = subparsers.add_parser("widths", help="Compute widths to render")
    widths_parser.add_argument("--layout", "-l", required=True, choices=layouts, help="Image layout")
    widths_parser.add_argument("--width", "-w", type=int, help="Display width in pixels")
    widths_parser.add_argument("--original-width", type=int, help="Width of the source image")
    widths_parser.add_argument("--breakpoints", "-b", type=parse_breakpoints, help="Comma-separated breakpoints")
    widths_parser.add_argument("--resolutions", "-r", choices=resolution_sets,
                               help="Built-in breakpoint set (default: RESPONSIVE_RESOLUTIONS or 'default')")
    widths_parser.add_argument("--json", action="store_true", help="Print widths as JSON")

    # Sizes command
    sizes_parser = subparsers.add_parser("sizes", help="Compute the sizes attribute")
    sizes_parser.add_argument("--layout", "-l", required=True, choices=layouts, help="Image layout")
    sizes_parser.add_argument("--width", "-w", type=int, help="Display width in pixels")

    # Plan command
    plan_parser = subparsers.add_parser("plan", help="Plan widths, sizes and srcset")
    plan_parser.add_argument("--layout", "-l", required=True, choices=layouts, help="Image layout")
    plan_parser.add_argument("--width", "-w", type=int, help="Display width in pixels")
    source_group = plan_parser.add_mutually_exclusive_group()
    source_group.add_argument("--image", "-i", help="Source image to read the original width from")
    source_group.add_argument("--original-width", type=int, help="Width of the source image")
    plan_parser.add_argument("--breakpoints", "-b", type=parse_breakpoints, help="Comma-separated breakpoints")
    plan_parser.add_argument("--resolutions", "-r", choices=resolution_sets,
                             help="Built-in breakpoint set (default: RESPONSIVE_RESOLUTIONS or 'default')")
    plan_parser.add_argument("--src", "-s", help="Image source used in srcset URLs (default: image path)")
    plan_parser.add_argument("--url-template", help="srcset URL template with {src} and {width}")
    plan_parser.add_argument("--output", "-o", help="Write the plan as JSON to this file")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "widths":
            return cmd_widths(args)
        elif args.command == "sizes":
            return cmd_sizes(args)
        elif args.command == "plan":
            return cmd_plan(args)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user")
        return 130
    except Exception as e:
        print(f"\n❌ Error: {str(e)}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
