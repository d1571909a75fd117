#!/usr/bin/env python3
import argparse
import os
import sys
from warembed.models import ArtifactCoordinate
from warembed.services.embed_service import EmbedService
from warembed.utils.logging import configure_logging, setup_logger


def parse_option(value: str) -> tuple[str, str]:
    key, sep, option = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Invalid option '{value}', expected KEY=VALUE")
    return key, option


def parse_coordinate(value: str) -> ArtifactCoordinate:
    try:
        return ArtifactCoordinate.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Embed a war file into the winstone jar")
    parser.add_argument('--dry-run', action='store_true', help='Print the embedding plan without writing the archive')
    parser.add_argument('--descriptor', default=None, help='Build descriptor file (default: $BUILD_DESCRIPTOR_FILE or ./embed.yaml)')
    parser.add_argument('--container', type=parse_coordinate, default=None,
                        help='Container artifact group:artifact:version[:type[:classifier]], tried before the declared ones')
    parser.add_argument('--option', type=parse_option, action='append', default=[], metavar='KEY=VALUE',
                        help='Command line option to embed, overrides the descriptor (repeatable)')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    logger = setup_logger("Embed")
    try:
        descriptor_file = args.descriptor or os.environ.get("BUILD_DESCRIPTOR_FILE", os.path.join(os.getcwd(), "embed.yaml"))
        logger.info(f"Starting embed with build descriptor: {descriptor_file}")
        service = EmbedService(descriptor_file, args.dry_run, container=args.container, options=dict(args.option))
        service.run()
        logger.info("Embed completed successfully")
        return 0
    except Exception as e:
        logger.error(f"Embed failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
