"""
Rocket Launch Game - CLI

The single entry point for flying a saved design (or a composite template)
headless, printing the results screen and generating plots.
"""

import argparse
import logging
import os
import sys
from dataclasses import replace

import numpy as np

from .config import create_default_config
from .design import Design
from .composites import all_templates, find_template
from .launch import LaunchPoint
from .main import run_flight, summarize_flight
from .plotting import generate_all_plots, plot_trajectory_preview
from .trajectory import predict_trajectory

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Rocket Launch Game - headless flight",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "design",
        nargs="?",
        help="Path to a saved design JSON file"
    )
    parser.add_argument(
        "--template", "-t",
        type=str,
        default=None,
        help="Fly a composite template (plus a cockpit) instead of a design file"
    )
    parser.add_argument(
        "--list-templates",
        action="store_true",
        help="List composite templates and exit"
    )
    parser.add_argument(
        "--angle",
        type=float,
        default=-45.0,
        help="Launch angle in degrees (negative is up)"
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=20.0,
        help="Launch speed (world units / frame)"
    )
    parser.add_argument(
        "--separate-at",
        type=int,
        default=None,
        help="Frame at which to release the cockpit"
    )
    parser.add_argument(
        "--charge",
        type=float,
        default=100.0,
        help="Separation gauge charge at release"
    )
    parser.add_argument(
        "--perfect",
        action="store_true",
        help="Count the release as perfect"
    )
    parser.add_argument(
        "--max-frames",
        type=int,
        default=None,
        help="Frame limit (default from config)"
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Write the flight log to this CSV file"
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default="plots",
        help="Directory to save output plots"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress verbose output"
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip plot generation"
    )
    return parser.parse_args(argv)


def load_design(args) -> Design:
    """Design from the file argument or the named template."""
    if args.design:
        with open(args.design, 'r', encoding='utf-8') as fh:
            design = Design.from_json(fh.read())
        logger.info(f"Loaded design {design.name!r} from {args.design}")
        return design

    template = find_template(args.template or 'Basic Rocket')
    if template is None:
        raise ValueError(f"Unknown template: {args.template!r}")
    design = Design(name=template.name)
    design.add_parts(template.instantiate(0.0, 0.0).parts)
    if not design.has_cockpit():
        # Cockpit sits on top of the template
        top = template.bounds()['min_y']
        design.add_parts(find_template('Cockpit').instantiate(0.0, top - 25.0).parts)
    return design


def main(argv=None):
    """Main execution flow."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.list_templates:
        for template in all_templates():
            print(f"{template.name:<20} {template.tier:<9} {template.description}")
        return

    print(f"\n{'='*70}\nROCKET LAUNCH: HEADLESS FLIGHT\n{'='*70}\n")

    try:
        config = create_default_config()
        if args.max_frames is not None:
            config = replace(config, max_frames=args.max_frames)
        design = load_design(args)
        angle = np.radians(args.angle)

        # 1. Fly
        logger.info("Starting flight...")
        body, log, reason = run_flight(
            design, angle, args.speed, config=config,
            separate_at_frame=args.separate_at, charge=args.charge,
            perfect=args.perfect, verbose=not args.quiet,
        )
        summary = summarize_flight(body, log, reason)

        # 2. Print Summary
        print("\n" + "="*60)
        print("FLIGHT SUMMARY")
        print("="*60)
        print(f"Design: {design.name} ({len(design)} parts, mass {design.total_mass:.1f})")
        print(f"Termination reason: {summary['reason']}")
        print(f"Frames: {summary['frames']}")
        print(f"Max altitude: {summary['max_altitude']:.1f}")
        print(f"Max speed: {summary['max_speed_kmh']:.1f} km/h")
        print(f"Max rotation: {np.degrees(summary['max_rotation']):.1f} deg")
        print(f"Cockpit separated: {summary['separated']}")
        print("="*60 + "\n")

        if args.csv:
            log.to_csv(args.csv)
            logger.info(f"Flight log written to {args.csv}")

        # 3. Generate Plots
        if not args.no_plots and len(log) > 0:
            plot_dir = os.path.abspath(args.output_dir)
            logger.info(f"Generating plots in {plot_dir}")
            generate_all_plots(log, plot_dir)

            pad = LaunchPoint.from_config(config)
            velocity = np.array([np.cos(angle), np.sin(angle)]) * args.speed
            preview = predict_trajectory(pad.position, velocity,
                                         config.world_width, config.world_height, config)
            plot_trajectory_preview(preview, plot_dir, config.world_width, config.world_height)
            print(f"Check outputs in: {plot_dir}")

    except Exception as e:
        logger.error(f"Flight failed: {e}", exc_info=True)
        print(f"\n[ERROR] Flight failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
