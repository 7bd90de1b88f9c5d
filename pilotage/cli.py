"""
Command-line interface for the pilotage tracker.
"""

import argparse
import logging
import sys

from .config import load_settings
from .endpoints.schedule import run_schedule_scraper
from .export import FORMATS, save_movements

logger = logging.getLogger(__name__)


def setup_logging(verbose=False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run_fetch(args, settings):
    """Run the scraper and print the movements."""
    logger.info("Running scheduled movements scraper")

    try:
        movements = run_schedule_scraper(settings)
        print(f"Found {len(movements)} vessel movements:")

        for i, movement in enumerate(movements, 1):
            print(f"  {i}. {movement}")

    except Exception as e:
        print(f"Scheduled movements scraper failed: {e}")
        return 1
    return 0


def run_export(args, settings):
    """Run the scraper and save the movements to a file."""
    output_path = args.output or "./data/"
    logger.info(f"Running export, output to: {output_path}")

    try:
        movements = run_schedule_scraper(settings)
        file_path = save_movements(movements, output_path, fmt=args.format)
        print(f"{len(movements)} movements saved to {file_path}")
    except Exception as e:
        print(f"Export failed: {e}")
        return 1
    return 0


def run_serve(args, settings):
    """Serve the movements over HTTP."""
    import uvicorn

    from .api import create_app

    host = args.host or settings.host
    port = args.port or settings.port
    app = create_app(lambda: run_schedule_scraper(settings))

    logger.info(f"Starting HTTP server on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Pilotage Schedule Scraper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pilotage fetch                       # Print scheduled vessel movements
  pilotage export -o ./data/           # Save movements as JSON
  pilotage export --format csv         # Save movements as CSV
  pilotage serve --port 7000           # Serve movements over HTTP
  pilotage --verbose fetch             # Enable debug logging
        """,
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose (debug) logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Fetch command
    fetch_parser = subparsers.add_parser("fetch", help="Print scheduled vessel movements")
    fetch_parser.set_defaults(func=run_fetch)

    # Export command
    export_parser = subparsers.add_parser("export", help="Save movements to a file")
    export_parser.add_argument(
        "--output",
        "-o",
        help="Output directory for the exported file (default: ./data/)",
    )
    export_parser.add_argument(
        "--format", "-f", choices=FORMATS, default="json", help="Output file format"
    )
    export_parser.set_defaults(func=run_export)

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Serve movements over HTTP")
    serve_parser.add_argument("--host", help="Interface to bind (default: SERVER_HOST)")
    serve_parser.add_argument(
        "--port", type=int, help="Port to listen on (default: SERVER_PORT)"
    )
    serve_parser.set_defaults(func=run_serve)

    args = parser.parse_args(argv)

    # Setup logging before settings are read so their messages are formatted
    setup_logging(args.verbose)
    settings = load_settings()
    if not args.verbose:
        logging.getLogger().setLevel(getattr(logging, settings.log_level, logging.INFO))

    # If no command specified, show help
    if not args.command:
        parser.print_help()
        return 1

    # Run the selected command
    try:
        return args.func(args, settings)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
