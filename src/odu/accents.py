# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""The bracket shortcut: after a plain vowel has been typed, "[" turns it grave and "]" acute.

This works on already-committed text and never touches a Composer.
"""
import enum
import typing

from .charset import CHARACTER_SETS, CharacterSet


class AccentDirection(enum.Enum):
    GRAVE = "grave"
    ACUTE = "acute"


BRACKET_DIRECTIONS = {
    "[": AccentDirection.GRAVE,
    "]": AccentDirection.ACUTE,
}


def _build_accent_map(direction: AccentDirection, table: typing.Mapping[str, CharacterSet]):
    accented = {}
    for charset in table.values():
        target = charset.low if direction is AccentDirection.GRAVE else charset.high
        accented[charset.base.lower()] = target.lower()
        accented[charset.base.upper()] = target.upper()
    return accented


ACCENT_MAPS = {direction: _build_accent_map(direction, CHARACTER_SETS) for direction in AccentDirection}


def accent_for_bracket(char: str) -> typing.Optional[AccentDirection]:
    return BRACKET_DIRECTIONS.get(char)


def apply_accent(text_before: str, direction: typing.Union[AccentDirection, str]) -> typing.Optional[str]:
    """Rewrite the last character of ``text_before`` with the given accent.

    Returns the new text, or None if the text is empty or does not end in a plain tonal letter.
    """
    if not text_before:
        return None
    replacement = ACCENT_MAPS[AccentDirection(direction)].get(text_before[-1])
    if replacement is None:
        return None
    return text_before[:-1] + replacement
