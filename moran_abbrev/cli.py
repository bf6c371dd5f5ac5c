"""
Command line entry point.

    moran-abbrev --chars rime:moran.chars.dict.yaml --words res/pinyin.txt \
        --output rime:moran.abbrev.dict.yaml
"""
from __future__ import annotations

import argparse
import logging
import sys

from moran_abbrev.generator import AbbreviationGenerator
from moran_abbrev.paths import logger
from moran_abbrev.types import AbbreviationConfig


def _build_arg_parser(defaults: AbbreviationConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate abbreviation codes for frequent words.")
    parser.add_argument(
        "--chars",
        default=defaults.char_dict_path,
        help=f"Character dictionary with full codes (default: {defaults.char_dict_path})",
    )
    parser.add_argument(
        "--words",
        default=defaults.word_dict_path,
        help=f"Word dictionary with weights (default: {defaults.word_dict_path})",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=defaults.target_path,
        help=f"Abbreviation dictionary to write (default: {defaults.target_path})",
    )
    parser.add_argument("--workers", type=int, default=None, help="Worker processes for abbreviation derivation.")
    parser.add_argument("--chunk-size", type=int, default=None, help="Words per worker task.")
    parser.add_argument(
        "--no-pinyin-hints",
        action="store_true",
        help="Do not annotate missing characters with their pinyin.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only report errors.")
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Also report debug messages.")
    return parser


def main(argv: list[str] | None = None) -> int:
    defaults = AbbreviationConfig.create_default()
    args = _build_arg_parser(defaults).parse_args(argv)

    level = logging.ERROR if args.quiet else logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    try:
        config = defaults.with_overrides(
            char_dict_path=args.chars,
            word_dict_path=args.words,
            target_path=args.output,
            max_workers=args.workers,
            chunk_size=args.chunk_size,
            pinyin_hints=False if args.no_pinyin_hints else None,
        )
    except ValueError as e:
        logger.error("Invalid option: %s", e)
        return 2

    try:
        written = AbbreviationGenerator(config).generate()
    except (OSError, UnicodeDecodeError, RuntimeError) as e:
        logger.error("Generation failed: %s", e)
        return 1

    logger.info("Wrote %d abbreviation lines to %s", written, config.target_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
