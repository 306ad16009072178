"""
lipi - command line entry point.

Usage:
    # Translate
    lipi "नमस्कार" --source hi --target brahmi
    lipi "Hello world" -s en -t brahmi

    # Mixed-script input, each language run translated separately
    lipi "Hello नमस्ते" --mixed --target brahmi

    # Inspect input without translating
    lipi "Hello नमस्ते" --detect
    lipi "Hello नमस्ते" --stats

    # Module form
    python -m lipi.main "𑀦𑀫𑀲𑁆𑀓𑀸𑀭" -s brahmi -t en
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from lipi.config import get_settings
from lipi.core.errors import TranslationError
from lipi.core.models import TranslationRequest
from lipi.i18n.detection import detect_language
from lipi.i18n.languages import UNKNOWN
from lipi.i18n.segmentation import language_stats, segment_by_language
from lipi.services.translator import build_orchestrator

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def run(args: argparse.Namespace) -> str:
    """Translate according to parsed arguments and return the output text."""
    orchestrator = build_orchestrator()

    if args.mixed:
        return await orchestrator.translate_mixed(args.text, args.target, timeout=args.timeout)

    source = args.source or detect_language(args.text)
    if source == UNKNOWN:
        logger.info("No recognizable script in input, returning it unchanged")
        return args.text

    request = TranslationRequest(text=args.text, source=source, target=args.target)
    return await orchestrator.translate_request(request, timeout=args.timeout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lipi",
        description="Translate text between languages and the Brahmi script",
    )
    parser.add_argument("text", help="Text to translate")
    parser.add_argument(
        "--source", "-s",
        help="Source language code or 'brahmi' (default: detect)",
    )
    parser.add_argument(
        "--target", "-t",
        default="brahmi",
        help="Target language code or 'brahmi' (default: brahmi)",
    )
    parser.add_argument(
        "--mixed", "-m",
        action="store_true",
        help="Translate each language run of mixed-script text separately",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Give up after this many seconds",
    )
    parser.add_argument(
        "--detect",
        action="store_true",
        help="Print the detected language and language runs, then exit",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print characters per language, then exit",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface."""
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_level)

    if args.detect:
        print(detect_language(args.text))
        for chunk in segment_by_language(args.text):
            print(f"  [{chunk.start_index}:{chunk.end_index}] {chunk.language}: {chunk.text!r}")
        return 0

    if args.stats:
        for name, count in language_stats(args.text).items():
            print(f"{name}: {count}")
        return 0

    try:
        print(asyncio.run(run(args)))
    except TranslationError as e:
        logger.error(f"Translation failed: {e}")
        return 1
    except (TimeoutError, asyncio.TimeoutError):
        logger.error(f"Translation timed out after {args.timeout}s")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
