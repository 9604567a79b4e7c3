from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from .tables import (
    VOICED_COMPOSITION,
    Direction,
    HiraKana,
    Target,
    build_hira_kana_mapping,
    build_mapping,
)


@dataclass(frozen=True)
class ConvOption:
    """Options for a single conversion call.

    ``ascii``, ``digit`` and ``kana`` select the character classes used by
    :func:`h2z` and :func:`z2h`; when none is set only katakana is converted.
    ``ignore`` lists characters that are passed through unchanged.
    """

    ascii: bool = False
    digit: bool = False
    kana: bool = False
    ignore: str = ""

    @property
    def target(self) -> Target:
        return Target.from_flags(self.ascii, self.digit, self.kana)


def convert(text: str, mapping: Mapping[int, str], ignore: str = "") -> str:
    """Return ``text`` with every character replaced according to ``mapping``.

    Characters listed in ``ignore`` and characters missing from ``mapping``
    are kept as they are.
    """
    skip = {ord(ch) for ch in ignore}
    return "".join(
        ch if ord(ch) in skip else mapping.get(ord(ch), ch) for ch in text
    )


def compose_voiced(text: str, ignore: str = "") -> str:
    """Merge half-width kana followed by a voiced mark into one full-width kana.

    A pair is left alone when either of its characters is in ``ignore`` so
    that ignoring ``ｶ`` keeps ``ｶﾞ`` intact.
    """
    skip = set(ignore)
    for half, full in VOICED_COMPOSITION:
        if skip.intersection(half):
            continue
        text = text.replace(half, full)
    return text


def h2z(text: str, option: Optional[ConvOption] = None) -> str:
    """Convert half-width characters to full-width."""
    option = option or ConvOption()
    target = option.target
    if "kana" in target.value:
        text = compose_voiced(text, option.ignore)
    table = build_mapping(Direction.HALF_TO_FULL, target)
    return convert(text, table, option.ignore)


def z2h(text: str, option: Optional[ConvOption] = None) -> str:
    """Convert full-width characters to half-width.

    Voiced katakana such as ``ガ`` become two characters (``ｶﾞ``).
    """
    option = option or ConvOption()
    table = build_mapping(Direction.FULL_TO_HALF, option.target)
    return convert(text, table, option.ignore)


def hira2kata(text: str, option: Optional[ConvOption] = None) -> str:
    """Convert hiragana to full-width katakana."""
    option = option or ConvOption()
    table = build_hira_kana_mapping(HiraKana.HIRA_TO_FULL_KANA)
    return convert(text, table, option.ignore)


def hira2hkata(text: str, option: Optional[ConvOption] = None) -> str:
    """Convert hiragana to half-width katakana."""
    option = option or ConvOption()
    table = build_hira_kana_mapping(HiraKana.HIRA_TO_HALF_KANA)
    return convert(text, table, option.ignore)


def kata2hira(text: str, option: Optional[ConvOption] = None) -> str:
    """Convert full-width katakana to hiragana."""
    option = option or ConvOption()
    table = build_hira_kana_mapping(HiraKana.KANA_TO_HIRA)
    return convert(text, table, option.ignore)


# conversion pattern names shared by the CLI and the web front end
CONVERTERS: dict[str, Callable[[str, Optional[ConvOption]], str]] = {
    "h2z": h2z,
    "z2h": z2h,
    "h2k": hira2kata,
    "h2hk": hira2hkata,
    "k2h": kata2hira,
}


def get_converter(name: str) -> Callable[[str, Optional[ConvOption]], str]:
    """Return the conversion function registered under ``name``."""
    try:
        return CONVERTERS[name]
    except KeyError:
        raise ValueError(
            f"unknown conversion {name!r}; expected one of {', '.join(CONVERTERS)}"
        ) from None
