"""Main module for the image optimizer CLI."""

import os
import sys
import json
import argparse

from pydantic import ValidationError

from . import __version__
from .core import (
    ImageOptimizerError,
    OptimizeImageRequest,
    OptimizerFactory,
)


def build_request(args: argparse.Namespace) -> OptimizeImageRequest:
    """Translate parsed CLI arguments into the task payload model."""
    if args.file_path:
        source = {"type": "local", "file_path": args.file_path}
    else:
        source = {"type": "remote", "file_url": args.file_url}

    return OptimizeImageRequest.model_validate(
        {
            "source": source,
            "dest": {
                "bucket_name": args.bucket,
                "object_folder": args.folder,
                "object_slug": args.slug,
            },
        }
    )


def main() -> None:
    """
    Entry point for the command-line interface of the image optimizer.

    ``optimize`` runs the pipeline in-process with settings taken from the
    environment and prints the task result as JSON. ``version`` prints
    version information.
    """
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="image-optimizer",
        description="Convert images to AVIF and upload them to DigitalOcean Spaces",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Optimize a local file
  image-optimizer optimize --file-path ./hero.png \\
                           --bucket assets --folder img --slug hero

  # Optimize a remote image
  image-optimizer optimize --file-url https://example.com/a.jpg \\
                           --bucket assets --folder img --slug a

  # Show version
  image-optimizer version
        """,
    )

    subparsers: argparse._SubParsersAction = parser.add_subparsers(
        dest="command", help="Available commands"
    )

    optimize_parser: argparse.ArgumentParser = subparsers.add_parser(
        "optimize", help="Convert an image to AVIF and upload it"
    )
    source_group = optimize_parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument("--file-path", help="Local image path")
    source_group.add_argument("--file-url", help="Remote image URL")
    optimize_parser.add_argument("--bucket", required=True, help="Destination bucket")
    optimize_parser.add_argument("--folder", default="", help="Destination folder")
    optimize_parser.add_argument("--slug", required=True, help="Object name prefix")
    optimize_parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )

    subparsers.add_parser("version", help="Show version information")

    args: argparse.Namespace = parser.parse_args()

    if args.command == "optimize":
        if args.debug:
            os.environ["LOG_LEVEL"] = "DEBUG"

        service = OptimizerFactory.create_service()
        try:
            result = service.optimize(build_request(args))
        except (ImageOptimizerError, ValidationError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        print(json.dumps({"result": result.model_dump()}))

    elif args.command == "version":
        print("Image Optimizer CLI")
        print(f"Version {__version__}")
        print("AVIF conversion and upload to DigitalOcean Spaces")
        sys.exit(0)

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
