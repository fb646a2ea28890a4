import unicodedata

import pytest

from odu.charset import (
    CHARACTER_SETS,
    SUB_DOT_MAP,
    CharacterSet,
    PlainSubDot,
    TonalSubDot,
    Tone,
    check_table,
    sub_dot_for,
)
from odu.commontypes import CharacterTableError


@pytest.mark.parametrize("key", sorted(CHARACTER_SETS))
def test_variants_are_distinct_and_nonempty(key):
    charset = CHARACTER_SETS[key]
    assert all(charset.variants)
    assert len(set(charset.variants)) == 3
    assert charset.base.lower() == key


@pytest.mark.parametrize("key", sorted(CHARACTER_SETS))
def test_variants_are_nfc(key):
    for variant in CHARACTER_SETS[key].variants:
        assert unicodedata.is_normalized("NFC", variant)


@pytest.mark.parametrize(
    "key,low,mid,high",
    (
        ("a", "à", "a", "á"),
        ("e", "è", "e", "é"),
        ("i", "ì", "i", "í"),
        ("o", "ò", "o", "ó"),
        ("u", "ù", "u", "ú"),
        ("n", "ǹ", "n", "ń"),
        ("ẹ", "ẹ̀", "ẹ", "ẹ́"),
        ("ọ", "ọ̀", "ọ", "ọ́"),
    ),
)
def test_table_contents(key, low, mid, high):
    charset = CHARACTER_SETS[key]
    assert charset.variant(Tone.LOW) == low
    assert charset.variant(Tone.MID) == mid
    assert charset.variant(Tone.HIGH) == high


def test_s_has_no_tone_variants():
    assert "s" not in CHARACTER_SETS
    assert "ṣ" not in CHARACTER_SETS


def test_sub_dot_map_covers_both_cases():
    assert SUB_DOT_MAP == {"e": "ẹ", "o": "ọ", "s": "ṣ", "E": "Ẹ", "O": "Ọ", "S": "Ṣ"}


def test_sub_dot_kinds():
    assert isinstance(sub_dot_for("e"), TonalSubDot)
    assert isinstance(sub_dot_for("O"), TonalSubDot)
    assert isinstance(sub_dot_for("s"), PlainSubDot)
    assert sub_dot_for("ṣ") == sub_dot_for("s")
    assert sub_dot_for("Ẹ").tonal_key == "ẹ"
    assert sub_dot_for("a") is None


def test_tone_labels():
    assert [tone.label for tone in Tone] == ["Low (Do)", "Mid (Re)", "High (Mi)"]


def test_check_table_rejects_mismatched_base():
    with pytest.raises(CharacterTableError):
        check_table({"a": CharacterSet(base="b", high="b́", low="b̀")})


def test_check_table_rejects_duplicate_variants():
    with pytest.raises(CharacterTableError):
        check_table({"a": CharacterSet(base="a", high="a", low="à")})
