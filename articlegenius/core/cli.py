"""
CLI interface for articlegenius
"""
import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import get_settings
from .generator_client import ArticleGeneratorClient
from .markdown_generator import format_view
from .models import ArticleRecord
from .session import ArticleSession


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser"""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Generate an article about a topic and export it as Markdown"
    )

    parser.add_argument(
        "topic",
        nargs="?",
        default="",
        help="Topic to write about, e.g. \"The Future of AI\""
    )

    parser.add_argument(
        "--endpoint",
        default=settings.api_endpoint,
        help="Generation service URL"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.request_timeout,
        help="Request timeout in seconds"
    )

    parser.add_argument(
        "--input", "-i",
        help="Render a saved article record (.json/.yaml) instead of generating one"
    )

    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print markdown instead of the formatted article"
    )

    parser.add_argument(
        "--copy",
        action="store_true",
        help="Copy the markdown to the clipboard"
    )

    parser.add_argument(
        "--save",
        action="store_true",
        help="Save the markdown to the output directory"
    )

    parser.add_argument(
        "--output-dir", "-o",
        default=str(settings.output_dir),
        help="Directory for saved markdown files"
    )

    parser.add_argument(
        "--width",
        type=int,
        default=80,
        help="Wrap width for the formatted article"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point"""
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        sys.exit(1)

    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.input and not args.topic.strip():
        print("Error: Please enter a topic to generate an article.", file=sys.stderr)
        sys.exit(1)

    session = ArticleSession(
        client=ArticleGeneratorClient(endpoint=args.endpoint, timeout=args.timeout)
    )

    try:
        if args.input:
            session.load(ArticleRecord.from_file(args.input))
        else:
            if args.verbose:
                print(f"Topic: {args.topic}")
                print(f"Endpoint: {args.endpoint}")
            if session.generate(args.topic) is None:
                print(f"Error: {session.error}", file=sys.stderr)
                sys.exit(1)

        if args.preview:
            print(session.markdown(), end="")
        else:
            print(format_view(session.view(), width=args.width), end="")

        if args.copy:
            tool = session.copy_to_clipboard()
            print(f"Copied to clipboard ({tool}).")

        if args.save:
            path = session.download(args.output_dir)
            print(f"Markdown saved: {path}")
    except Exception as exc:
        if args.verbose:
            raise
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
