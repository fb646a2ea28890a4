import pytest

from odu.accents import AccentDirection, accent_for_bracket, apply_accent


@pytest.mark.parametrize(
    "text,direction,expected",
    (
        ("ba", AccentDirection.GRAVE, "bà"),
        ("ba", AccentDirection.ACUTE, "bá"),
        ("BA", "acute", "BÁ"),
        ("ọ", "grave", "ọ̀"),
        ("Ẹ", "acute", "Ẹ́"),
        ("n", "grave", "ǹ"),
    ),
)
def test_apply_accent(text, direction, expected):
    assert apply_accent(text, direction) == expected


@pytest.mark.parametrize("text", ("", "b", "ab ", "á", "ṣ"))
def test_apply_accent_without_tonal_letter(text):
    assert apply_accent(text, AccentDirection.GRAVE) is None


def test_bad_direction_raises():
    with pytest.raises(ValueError):
        apply_accent("a", "circumflex")


def test_bracket_directions():
    assert accent_for_bracket("[") is AccentDirection.GRAVE
    assert accent_for_bracket("]") is AccentDirection.ACUTE
    assert accent_for_bracket("a") is None
