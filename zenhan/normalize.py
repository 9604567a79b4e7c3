from __future__ import annotations

from .convert import ConvOption, convert, h2z, hira2kata, z2h
from .tables import build_devoicing_mapping

# mapping for youon expansion used by ``normalize_for_keypuncher_check``
_YOON_BASES = [
    "キ",
    "シ",
    "チ",
    "ニ",
    "ヒ",
    "ミ",
    "リ",
    "ギ",
    "ジ",
    "ヂ",
    "ビ",
    "ピ",
]

MAPPING_YOUON = {
    base + small: base + repl
    for base in _YOON_BASES
    for small, repl in zip("ャュョ", "ヤユヨ")
}

_ALL_CLASSES = ConvOption(ascii=True, digit=True, kana=True)


def normalize_kana(text: str | None) -> str:
    """Return normalized kana for comparison.

    Converts half-width characters to full-width and removes spaces.
    """
    if not text:
        return ""
    out = h2z(text, _ALL_CLASSES)
    return out.replace(" ", "").replace("　", "")


def normalize_for_keypuncher_check(text: str | None) -> str:
    """Return reading normalized to keypuncher format.

    1. Convert to full-width katakana and remove spaces.
    2. Expand yo-on combinations (キャ -> キヤ, etc.).
    3. Convert everything to half-width with decomposed dakuten/handakuten.
    """

    if not text:
        return ""

    # step1: full-width katakana
    out = hira2kata(normalize_kana(text))

    # step2: expand yo-on characters
    for pat, repl in MAPPING_YOUON.items():
        out = out.replace(pat, repl)

    # step3: half-width conversion with dakuten split
    return z2h(out, _ALL_CLASSES)


def strip_voicing(text: str | None) -> str:
    """Return string without dakuten/handakuten for loose matching."""
    if not text:
        return ""
    return convert(normalize_kana(text), build_devoicing_mapping())
