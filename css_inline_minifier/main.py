"""Main entry point for the CSS Inline Minifier command-line tool."""

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from css_inline_minifier.config import Settings
from css_inline_minifier.core import CssInlineMinifier, MinifierInputError, MinifierOutputError, minify_files


def setup_logging(log_level: str):
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="css-inline-minifier",
        description="Shorten class names and drop unused selectors in HTML files with inline <style> blocks",
    )
    ap.add_argument("--log-level", default=settings.log_level)
    sub = ap.add_subparsers(dest="command", required=True)

    run = sub.add_parser("minify", help="Minify one or more HTML files sharing one alias table")
    run.add_argument("files", nargs="+", help="HTML files; alias order follows argument order")
    run.add_argument("--output-dir", help="Write results here instead of next to the inputs")
    run.add_argument("--suffix", default=settings.output_suffix, help="Inserted before the output file extension")
    run.add_argument(
        "--whitelist",
        action="append",
        default=[],
        metavar="ENTRY",
        help="Protect classes containing ENTRY (repeatable)",
    )
    run.add_argument("--stdout", action="store_true", help="Print the single result instead of writing files")

    serve = sub.add_parser("serve", help="Run the HTTP service")
    serve.add_argument("--host", default=settings.server_host)
    serve.add_argument("--port", type=int, default=settings.server_port)
    return ap


def run_minify(args: argparse.Namespace, settings: Settings) -> int:
    logger = logging.getLogger(__name__)
    if args.stdout and len(args.files) != 1:
        logger.error("--stdout needs exactly one input file")
        return 1

    try:
        minifier = CssInlineMinifier(alphabet=settings.alphabet, whitelist=[*settings.extra_whitelist, *args.whitelist])
    except ValueError as e:
        logger.error(f"Invalid MINIFIER_ALPHABET: {e}")
        return 1

    try:
        report = minify_files(
            args.files,
            minifier=minifier,
            output_suffix=args.suffix,
            output_dir=args.output_dir,
            write=not args.stdout,
        )
    except (MinifierInputError, MinifierOutputError) as e:
        logger.error(str(e))
        return 1

    if args.stdout:
        sys.stdout.write(report.files[0].result.text)
        return 0

    logger.info(
        "Done: %d file(s), %d classes, %d -> %d CSS bytes (%.1f%% smaller)",
        len(report.files),
        report.classes,
        report.original_bytes,
        report.minified_bytes,
        report.reduced_percentage,
    )
    return 0


def run_server(args: argparse.Namespace, settings: Settings) -> int:
    from css_inline_minifier.api import create_app

    logger = logging.getLogger(__name__)
    settings.server_host = args.host
    settings.server_port = args.port
    app = create_app(settings)

    logger.info(f"Starting server on {settings.server_host}:{settings.server_port}")
    try:
        uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_level=settings.log_level.lower())
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except Exception as e:
        logger.error(f"Error running server: {e}")
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    settings = Settings()
    args = build_parser(settings).parse_args(argv)
    settings.log_level = args.log_level
    setup_logging(settings.log_level)

    if args.command == "serve":
        return run_server(args, settings)
    return run_minify(args, settings)


if __name__ == "__main__":
    sys.exit(main())
