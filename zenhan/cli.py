"""Command-line front end.

Examples::

    zenhan -a -c h2z ABC      # ＡＢＣ
    zenhan -d -c z2h １２３    # 123
    zenhan -k -c h2z ｱｲｳ      # アイウ
    echo ひらがな | zenhan -c h2k

Set ``ZENHAN_IGNORE`` to supply default characters for ``--ignore``.
"""
from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import Sequence

from .convert import CONVERTERS, ConvOption, get_converter

logger = logging.getLogger(__name__)

PATTERN_HELP = {
    "h2z": "half-width to full-width",
    "z2h": "full-width to half-width",
    "h2k": "hiragana to full-width katakana",
    "h2hk": "hiragana to half-width katakana",
    "k2h": "full-width katakana to hiragana",
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="zenhan",
        description="A conversion tool of Japanese",
        epilog="; ".join(f"{k}: {v}" for k, v in PATTERN_HELP.items()),
    )
    ap.add_argument(
        "-c", "--conv", required=True, choices=list(CONVERTERS),
        help="conversion pattern",
    )
    ap.add_argument("-a", "--ascii", action="store_true", help="convert ascii")
    ap.add_argument("-d", "--digit", action="store_true", help="convert digits")
    ap.add_argument("-k", "--kana", action="store_true", help="convert katakana")
    ap.add_argument(
        "-i", "--ignore", default=os.getenv("ZENHAN_IGNORE", ""),
        help="characters to leave unconverted, e.g. -i A1ｱ",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    ap.add_argument("text", nargs="?", help="text to convert (default: stdin)")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    option = ConvOption(
        ascii=args.ascii,
        digit=args.digit,
        kana=args.kana,
        ignore=args.ignore or "",
    )
    text = args.text
    if text is None:
        text = sys.stdin.read().rstrip("\n")
    logger.debug("conv=%s option=%s", args.conv, option)

    print(get_converter(args.conv)(text, option))
    return 0


if __name__ == "__main__":
    sys.exit(main())
