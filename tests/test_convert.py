import pytest

from zenhan import tables
from zenhan.convert import (
    CONVERTERS,
    ConvOption,
    compose_voiced,
    convert,
    get_converter,
    h2z,
    hira2hkata,
    hira2kata,
    kata2hira,
    z2h,
)

ALL = dict(ascii=True, digit=True, kana=True)

FULL_ALL = "".join(tables.FULL_ASCII + tables.FULL_DIGIT + tables.FULL_KANA)
HALF_ALL = "".join(tables.HALF_ASCII + tables.HALF_DIGIT + tables.HALF_KANA)
HIRAGANA = "".join(tables.HIRAGANA)
FULL_KANA = "".join(tables.FULL_KANA)


def test_h2z_all():
    assert h2z("ABCｱｲｳ012", ConvOption(**ALL)) == "ＡＢＣアイウ０１２"


def test_z2h_all():
    assert z2h("ＡＢＣアイウ０１２", ConvOption(**ALL)) == "ABCｱｲｳ012"


def test_z2h_with_ignore():
    option = ConvOption(**ALL, ignore="Ａア０")
    assert z2h("ＡＢＣアイウ０１２", option) == "ＡBCアｲｳ０12"


def test_h2z_with_ignore():
    option = ConvOption(**ALL, ignore="Aｱ0")
    assert h2z("ABCｱｲｳ012", option) == "AＢＣｱイウ0１２"


def test_hira2kata():
    assert hira2kata("あいうえお") == "アイウエオ"
    assert hira2kata("かきくけこ", ConvOption(ignore="かこ")) == "かキクケこ"


def test_hira2hkata():
    assert hira2hkata("あいうえお") == "ｱｲｳｴｵ"
    assert hira2hkata("がぎぐげご", ConvOption(ignore="がご")) == "がｷﾞｸﾞｹﾞご"


def test_kata2hira():
    assert kata2hira("アイウエオ") == "あいうえお"
    assert kata2hira("カキクケコ", ConvOption(ignore="キクケ")) == "かキクケこ"


def test_whole_tables():
    assert hira2kata(HIRAGANA) == FULL_KANA
    assert hira2hkata(HIRAGANA) == "".join(tables.HALF_KANA)
    assert kata2hira(FULL_KANA) == HIRAGANA
    assert z2h(FULL_ALL, ConvOption(**ALL)) == HALF_ALL
    assert h2z(HALF_ALL, ConvOption(**ALL)) == FULL_ALL


@pytest.mark.parametrize(
    "flags, expected",
    [
        (dict(ascii=True), "ABCアイウ０１２"),
        (dict(ascii=True, digit=True), "ABCアイウ012"),
        (dict(ascii=True, kana=True), "ABCｱｲｳ０１２"),
        (dict(digit=True), "ＡＢＣアイウ012"),
        (dict(digit=True, kana=True), "ＡＢＣｱｲｳ012"),
        (dict(kana=True), "ＡＢＣｱｲｳ０１２"),
        ({}, "ＡＢＣｱｲｳ０１２"),
    ],
)
def test_z2h_subsets(flags, expected):
    assert z2h("ＡＢＣアイウ０１２", ConvOption(**flags)) == expected


@pytest.mark.parametrize(
    "flags, expected",
    [
        (dict(ascii=True), "ＡＢＣｱｲｳ012"),
        (dict(ascii=True, digit=True), "ＡＢＣｱｲｳ０１２"),
        (dict(ascii=True, kana=True), "ＡＢＣアイウ012"),
        (dict(digit=True), "ABCｱｲｳ０１２"),
        (dict(digit=True, kana=True), "ABCアイウ０１２"),
        (dict(kana=True), "ABCアイウ012"),
        ({}, "ABCアイウ012"),
    ],
)
def test_h2z_subsets(flags, expected):
    assert h2z("ABCｱｲｳ012", ConvOption(**flags)) == expected


def test_z2h_splits_voiced_kana():
    assert z2h("パンダ") == "ﾊﾟﾝﾀﾞ"
    assert z2h("ヴァイオリン") == "ｳﾞｧｲｵﾘﾝ"


def test_h2z_merges_voiced_kana():
    assert h2z("ﾊﾟﾝﾀﾞ") == "パンダ"
    assert h2z("ｳﾞｧｲｵﾘﾝ") == "ヴァイオリン"


def test_h2z_without_kana_keeps_voiced_sequences():
    assert h2z("ｶﾞ1", ConvOption(digit=True)) == "ｶﾞ１"


def test_h2z_ignore_base_keeps_voiced_pair():
    option = ConvOption(kana=True, ignore="ｶ")
    assert h2z("ｶﾞｷﾞｶ", option) == "ｶﾞギｶ"


def test_h2z_ignore_voiced_mark_skips_composition():
    option = ConvOption(kana=True, ignore="ﾞ")
    assert h2z("ｶﾞﾊﾟ", option) == "カﾞパ"


def test_h2z_ignore_full_width_has_no_effect():
    option = ConvOption(kana=True, ignore="ガ")
    assert h2z("ｶﾞ", option) == "ガ"


def test_compose_voiced():
    assert compose_voiced("ｶﾞｷﾟﾎﾟ") == "ガｷﾟポ"
    assert compose_voiced("ｶﾞ", ignore="ｶ") == "ｶﾞ"


def test_convert_pass_through():
    table = {ord("a"): "ａ"}
    assert convert("abc", table) == "ａbc"
    assert convert("", table) == ""
    assert convert("abc", table, ignore="a") == "abc"
    assert convert("abc", {}, ignore="xyz") == "abc"


def test_convert_multi_character_replacement():
    assert convert("ガ", {ord("ガ"): "ｶﾞ"}) == "ｶﾞ"


@pytest.mark.parametrize("name", list(CONVERTERS))
def test_full_exclusion_is_identity(name):
    text = "ABCｱｶﾞ012 ＡＢアガ０ あが 漢字"
    option = ConvOption(**ALL, ignore=text)
    assert CONVERTERS[name](text, option) == text


@pytest.mark.parametrize("name", list(CONVERTERS))
def test_kanji_pass_through(name):
    assert CONVERTERS[name]("漢字東京", ConvOption(**ALL)) == "漢字東京"


def test_width_conversion_keeps_length_for_ascii_and_digits():
    half = "Hello, World! 2024-01-01"
    option = ConvOption(ascii=True, digit=True)
    full = h2z(half, option)
    assert len(full) == len(half)
    assert z2h(full, option) == half


def test_kata_hira_round_trip():
    assert kata2hira(hira2kata(HIRAGANA)) == HIRAGANA
    assert kata2hira(hira2kata("ひらがなとカタカナ")) == "ひらがなとかたかな"


def test_option_defaults():
    option = ConvOption()
    assert not option.ascii
    assert not option.digit
    assert not option.kana
    assert option.ignore == ""


def test_option_is_immutable():
    option = ConvOption()
    with pytest.raises(AttributeError):
        option.ascii = True


def test_get_converter():
    assert get_converter("h2hk") is hira2hkata
    with pytest.raises(ValueError, match="unknown conversion"):
        get_converter("x2y")
