from __future__ import annotations
from enum import Enum
from typing import Sequence

# ASCII (full-width); the last entry is the ideographic space
FULL_ASCII = tuple(
    "！＂＃＄％＆＇（）＊＋，－．／：；＜＝＞？＠"
    "ＡＢＣＤＥＦＧＨＩＪＫＬＭＮＯＰＱＲＳＴＵＶＷＸＹＺ"
    "［＼］＾＿｀"
    "ａｂｃｄｅｆｇｈｉｊｋｌｍｎｏｐｑｒｓｔｕｖｗｘｙｚ"
    "｛｜｝～　"
)
HALF_ASCII = tuple(
    "!\"#$%&'()*+,-./:;<=>?@"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "[\\]^_`"
    "abcdefghijklmnopqrstuvwxyz"
    "{|}~ "
)

FULL_DIGIT = tuple("０１２３４５６７８９")
HALF_DIGIT = tuple("0123456789")

HIRAGANA = tuple(
    "ぁあぃいぅうぇえぉおかがきぎくぐけげこごさざしじすずせぜそぞ"
    "ただちぢっつづてでとどなにぬねのはばぱひびぴふぶぷへべぺほぼぽ"
    "まみむめもゃやゅゆょよらりるれろわをんーゎゐゑゕゖゔゝゞ・「」。、"
)
FULL_KANA = tuple(
    "ァアィイゥウェエォオカガキギクグケゲコゴサザシジスズセゼソゾ"
    "タダチヂッツヅテデトドナニヌネノハバパヒビピフブプヘベペホボポ"
    "マミムメモャヤュユョヨラリルレロワヲンーヮヰヱヵヶヴヽヾ・「」。、"
)
# voiced and semi-voiced forms take two characters in half-width
HALF_KANA = (
    "ｧ", "ｱ", "ｨ", "ｲ", "ｩ", "ｳ", "ｪ", "ｴ", "ｫ", "ｵ",
    "ｶ", "ｶﾞ", "ｷ", "ｷﾞ", "ｸ", "ｸﾞ", "ｹ", "ｹﾞ", "ｺ", "ｺﾞ",
    "ｻ", "ｻﾞ", "ｼ", "ｼﾞ", "ｽ", "ｽﾞ", "ｾ", "ｾﾞ", "ｿ", "ｿﾞ",
    "ﾀ", "ﾀﾞ", "ﾁ", "ﾁﾞ", "ｯ", "ﾂ", "ﾂﾞ", "ﾃ", "ﾃﾞ", "ﾄ", "ﾄﾞ",
    "ﾅ", "ﾆ", "ﾇ", "ﾈ", "ﾉ",
    "ﾊ", "ﾊﾞ", "ﾊﾟ", "ﾋ", "ﾋﾞ", "ﾋﾟ", "ﾌ", "ﾌﾞ", "ﾌﾟ",
    "ﾍ", "ﾍﾞ", "ﾍﾟ", "ﾎ", "ﾎﾞ", "ﾎﾟ",
    "ﾏ", "ﾐ", "ﾑ", "ﾒ", "ﾓ", "ｬ", "ﾔ", "ｭ", "ﾕ", "ｮ", "ﾖ",
    "ﾗ", "ﾘ", "ﾙ", "ﾚ", "ﾛ", "ﾜ", "ｦ", "ﾝ", "ｰ",
    "ヮ", "ヰ", "ヱ", "ヵ", "ヶ", "ｳﾞ", "ヽ", "ヾ", "･", "｢", "｣", "｡", "､",
)

# katakana without the voiced forms, one character each on both sides
FULL_KANA_SEION = tuple(
    "ァアィイゥウェエォオカキクケコサシスセソタチッツテト"
    "ナニヌネノハヒフヘホマミムメモャヤュユョヨラリルレロ"
    "ワヲンーヮヰヱヵヶヽヾ・「」。、"
)
HALF_KANA_SEION = tuple(
    "ｧｱｨｲｩｳｪｴｫｵｶｷｸｹｺｻｼｽｾｿﾀﾁｯﾂﾃﾄ"
    "ﾅﾆﾇﾈﾉﾊﾋﾌﾍﾎﾏﾐﾑﾒﾓｬﾔｭﾕｮﾖﾗﾘﾙﾚﾛ"
    "ﾜｦﾝｰヮヰヱヵヶヽヾ･｢｣｡､"
)

# half-width two-character sequences merged before half -> full conversion
VOICED_COMPOSITION = tuple(
    (half, full) for half, full in zip(HALF_KANA, FULL_KANA) if len(half) == 2
)


class Direction(Enum):
    FULL_TO_HALF = "z2h"
    HALF_TO_FULL = "h2z"


class Target(Enum):
    """Character classes taking part in a width conversion."""

    ALL = ("ascii", "digit", "kana")
    ASCII = ("ascii",)
    ASCII_AND_DIGITS = ("ascii", "digit")
    ASCII_AND_KANA = ("ascii", "kana")
    DIGITS = ("digit",)
    DIGITS_AND_KANA = ("digit", "kana")
    KANA = ("kana",)

    @classmethod
    def from_flags(cls, ascii: bool, digit: bool, kana: bool) -> "Target":
        """Resolve option flags; no flag at all means katakana only."""
        if ascii:
            if digit:
                return cls.ALL if kana else cls.ASCII_AND_DIGITS
            return cls.ASCII_AND_KANA if kana else cls.ASCII
        if digit:
            return cls.DIGITS_AND_KANA if kana else cls.DIGITS
        return cls.KANA


class HiraKana(Enum):
    HIRA_TO_FULL_KANA = "h2k"
    HIRA_TO_HALF_KANA = "h2hk"
    KANA_TO_HIRA = "k2h"


_WIDTH_SETS = {
    Direction.FULL_TO_HALF: {
        "ascii": (FULL_ASCII, HALF_ASCII),
        "digit": (FULL_DIGIT, HALF_DIGIT),
        "kana": (FULL_KANA, HALF_KANA),
    },
    Direction.HALF_TO_FULL: {
        "ascii": (HALF_ASCII, FULL_ASCII),
        "digit": (HALF_DIGIT, FULL_DIGIT),
        "kana": (HALF_KANA_SEION, FULL_KANA_SEION),
    },
}

_HIRA_KANA_SETS = {
    HiraKana.HIRA_TO_FULL_KANA: (HIRAGANA, FULL_KANA),
    HiraKana.HIRA_TO_HALF_KANA: (HIRAGANA, HALF_KANA),
    HiraKana.KANA_TO_HIRA: (FULL_KANA, HIRAGANA),
}


def _to_table(keys: Sequence[str], values: Sequence[str]) -> dict[int, str]:
    """Pair ``keys`` and ``values`` positionally into a code point table."""
    assert len(keys) == len(values), "paired character sets differ in length"
    return {ord(k): v for k, v in zip(keys, values)}


def build_mapping(direction: Direction, target: Target) -> dict[int, str]:
    """Return a width conversion table for ``direction`` and ``target``.

    Source and destination sets are concatenated in the fixed order ascii,
    digit, kana. Full-width voiced katakana map to two-character half-width
    strings; the reverse direction only covers single characters and relies
    on :func:`zenhan.convert.compose_voiced` for the voiced forms.
    """
    sets = _WIDTH_SETS[direction]
    keys: list[str] = []
    values: list[str] = []
    for name in target.value:
        src, dst = sets[name]
        keys.extend(src)
        values.extend(dst)
    return _to_table(keys, values)


def build_hira_kana_mapping(kind: HiraKana) -> dict[int, str]:
    """Return a hiragana/katakana conversion table."""
    src, dst = _HIRA_KANA_SETS[kind]
    return _to_table(src, dst)


# stand-alone voiced marks (half-width, spacing and combining forms)
VOICED_MARKS = ("\uff9e", "\uff9f", "\u309b", "\u309c", "\u3099", "\u309a")


def build_devoicing_mapping() -> dict[int, str]:
    """Return a table from voiced kana (both scripts) to the unvoiced base.

    Stand-alone voiced marks are dropped and the voiced iteration marks
    ``ヾ``/``ゞ`` become ``ヽ``/``ゝ``.
    """
    half_to_full = dict(zip(HALF_KANA_SEION, FULL_KANA_SEION))
    kana_to_hira = dict(zip(FULL_KANA, HIRAGANA))
    table: dict[int, str] = {ord(mark): "" for mark in VOICED_MARKS}
    table[ord("ヾ")] = "ヽ"
    table[ord("ゞ")] = "ゝ"
    for half, full, hira in zip(HALF_KANA, FULL_KANA, HIRAGANA):
        if len(half) != 2:
            continue
        base = half_to_full[half[0]]
        table[ord(full)] = base
        table[ord(hira)] = kana_to_hira[base]
    return table
